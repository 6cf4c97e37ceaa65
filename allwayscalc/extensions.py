from __future__ import annotations

import re

from flask import current_app, request
from flask_caching import Cache
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

__all__ = [
    "csrf",
    "cache",
    "limiter",
    "algebra_limit",
    "suggestion_limit",
]

FALLBACK_DEFAULT_LIMITS = "5000 per hour;1000 per minute"

csrf = CSRFProtect()
cache = Cache()


def _default_rate_limits() -> str:
    """RATELIMIT_DEFAULT accepts ``;``, ``,`` or ``|`` between limits."""
    configured = current_app.config.get("RATELIMIT_DEFAULT") or ""
    limits = [part.strip() for part in re.split(r"[;,|]", str(configured)) if part.strip()]
    return ";".join(limits) or FALLBACK_DEFAULT_LIMITS


def _config_limit(key: str, fallback: str):
    return lambda: current_app.config.get(key) or fallback


def _read_only_request() -> bool:
    return request.method in ("GET", "HEAD", "OPTIONS")


# No accounts on this site, so every client is keyed by address.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[_default_rate_limits],
)

# The HTML page and the JSON endpoint draw from one budget; only submissions count.
algebra_limit = limiter.shared_limit(
    _config_limit("ALGEBRA_RATE_LIMIT", "30/minute"), scope="algebra", exempt_when=_read_only_request
)
suggestion_limit = limiter.shared_limit(
    _config_limit("SUGGESTION_RATE_LIMIT", "10/minute"), scope="suggestions", exempt_when=_read_only_request
)
