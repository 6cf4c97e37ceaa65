from __future__ import annotations

import logging
import multiprocessing
import os
from typing import Final

LOGGER: Final = logging.getLogger("gunicorn.config")
_AI_TIMEOUT_MARGIN_SECONDS: Final = 15


def _env_int(key: str, default: int) -> int:
    """Parse integer environment values with sane fallbacks."""
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


def _configured_workers() -> int:
    """Explicit worker counts win; otherwise 2x CPU capped at 8."""
    auto_workers = max(2, min(8, max(multiprocessing.cpu_count(), 1) * 2))
    for key in ("GUNICORN_WORKERS", "WEB_CONCURRENCY"):
        if key in os.environ:
            return _env_int(key, auto_workers)
    return min(auto_workers, _env_int("GUNICORN_MAX_WORKERS", auto_workers))


def _worker_timeout() -> int:
    """Worker timeout never undercuts the Gemini request timeout."""
    ai_timeout = _env_int("GOOGLE_AI_REQUEST_TIMEOUT_SECONDS", 45)
    return max(_env_int("GUNICORN_TIMEOUT", 60), ai_timeout + _AI_TIMEOUT_MARGIN_SECONDS)


# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', 5000)}"
backlog = _env_int("GUNICORN_BACKLOG", 2048)

# Worker processes - gevent for the blocking AI call
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gevent")
workers = _configured_workers()
worker_connections = _env_int("GUNICORN_WORKER_CONNECTIONS", 1000)

timeout = _worker_timeout()
graceful_timeout = _env_int("GUNICORN_GRACEFUL_TIMEOUT", 30)
keepalive = _env_int("GUNICORN_KEEPALIVE", 5)

max_requests = _env_int("GUNICORN_MAX_REQUESTS", 5000)
max_requests_jitter = _env_int("GUNICORN_MAX_REQUESTS_JITTER", 250)

# Redis pools are rebuilt per worker pid after fork
preload_app = True

access_log_format = '%(h)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
errorlog = "-"
accesslog = "-"
loglevel = os.environ.get("GUNICORN_LOG_LEVEL", "info")

proc_name = "allwayscalc"

# Request bodies are small calculator forms and JSON objects
limit_request_line = 4096
limit_request_fields = 100
limit_request_field_size = 8192


def when_ready(server):
    server.log.info(
        "AllWaysCalc ready: bind=%s class=%s workers=%s connections=%s timeout=%ss",
        bind,
        worker_class,
        workers,
        worker_connections,
        timeout,
    )


def post_fork(server, worker):
    server.log.debug("Worker spawned (pid=%s)", worker.pid)
