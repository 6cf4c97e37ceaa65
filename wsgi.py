"""Gunicorn entry point: ``gunicorn -c gunicorn.conf.py wsgi:app``."""
import os
import sys

from gevent import monkey


def _patch_threads() -> bool:
    """gevent thread patching is opt-in on Python 3.13+ (``GEVENT_PATCH_THREADS``)."""
    override = os.environ.get("GEVENT_PATCH_THREADS", "").strip().lower()
    if override in {"1", "true", "on", "yes"}:
        return True
    if override in {"0", "false", "off", "no"}:
        return False
    return sys.version_info < (3, 13)


# Must run before redis and the Gemini SDK open sockets.
if _patch_threads():
    monkey.patch_all()
else:
    monkey.patch_all(thread=False, threading=False)

from allwayscalc import create_app  # noqa: E402

app = create_app()
