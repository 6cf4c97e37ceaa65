import logging
import os
from collections.abc import Mapping

from flask import current_app, request

logger = logging.getLogger(__name__)

HSTS_HEADER = "Strict-Transport-Security"

# Templates load first-party assets only.
DEFAULT_SECURITY_HEADERS = {
    HSTS_HEADER: "max-age=31536000; includeSubDomains; preload",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "; ".join(
        (
            "default-src 'self'",
            "script-src 'self'",
            "style-src 'self' 'unsafe-inline'",
            "img-src 'self' data:",
            "connect-src 'self'",
            "object-src 'none'",
            "frame-ancestors 'none'",
        )
    ),
}

# ProxyFix argument -> (env var, default hop count)
PROXY_FIX_HOPS = {
    "x_for": ("PROXY_FIX_X_FOR", 1),
    "x_proto": ("PROXY_FIX_X_PROTO", 1),
    "x_host": ("PROXY_FIX_X_HOST", 1),
    "x_port": ("PROXY_FIX_X_PORT", 1),
    "x_prefix": ("PROXY_FIX_X_PREFIX", 0),
}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _hop_count(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r; defaulting to %s", name, raw, default)
        return default


def _install_proxy_fix(app) -> None:
    if getattr(app.wsgi_app, "_allwayscalc_proxyfix", False):
        return
    from werkzeug.middleware.proxy_fix import ProxyFix

    hops = {arg: _hop_count(env_name, default) for arg, (env_name, default) in PROXY_FIX_HOPS.items()}
    app.wsgi_app = ProxyFix(app.wsgi_app, **hops)
    app.wsgi_app._allwayscalc_proxyfix = True
    logger.info("Trusting proxy headers: %s", hops)


def _configured_headers(app) -> dict:
    headers = dict(DEFAULT_SECURITY_HEADERS)
    overrides = app.config.get("SECURITY_HEADERS")
    if isinstance(overrides, Mapping):
        headers.update(overrides)
    elif overrides:
        logger.warning("SECURITY_HEADERS config must be a mapping; ignoring invalid value.")
    # None or "" removes a default header
    return {name: value for name, value in headers.items() if value}


def _request_is_https() -> bool:
    if request.is_secure:
        return True
    forwarded = {part.strip().lower() for part in request.headers.get("X-Forwarded-Proto", "").split(",")}
    return "https" in forwarded or current_app.config.get("PREFERRED_URL_SCHEME") == "https"


def register_middleware(app):
    """Proxy header trust and response security headers."""
    if _env_flag("ENABLE_PROXY_FIX") or _env_flag("TRUST_PROXY_HEADERS"):
        _install_proxy_fix(app)

    if _env_flag("DISABLE_SECURITY_HEADERS"):
        return
    forced = _env_flag("FORCE_SECURITY_HEADERS") or bool(app.config.get("FORCE_SECURITY_HEADERS"))
    if (app.debug or app.testing) and not forced:
        return

    headers = _configured_headers(app)

    @app.after_request
    def add_security_headers(response):
        send_hsts = _request_is_https()
        for name, value in headers.items():
            if name == HSTS_HEADER and not send_hsts:
                continue
            response.headers.setdefault(name, value)
        return response
