import logging
import os
from threading import Lock
from typing import Any

from flask import Flask, jsonify, render_template, request
from flask_limiter.errors import RateLimitExceeded
from flask_wtf.csrf import CSRFError

from .blueprints_registry import register_blueprints
from .config import ENV_DIAGNOSTICS, EnvReader
from .extensions import cache, csrf, limiter
from .logging_config import configure_logging
from .middleware import register_middleware

logger = logging.getLogger(__name__)

_REDIS_POOL_KEY = "allwayscalc.redis_pool"
_redis_pool_lock = Lock()


def create_app(config: dict[str, Any] | None = None) -> Flask:
    """Build the AllWaysCalc application; ``config`` overrides env-derived settings."""
    app = Flask(__name__, static_folder="static", static_url_path="/static")
    _load_config(app, config)

    csrf.init_app(app)
    _configure_cache(app)
    _configure_rate_limiter(app)

    register_middleware(app)
    register_blueprints(app)

    from .template_context import register_template_context

    register_template_context(app)
    configure_logging(app)
    _install_global_error_handlers(app)

    from .management import register_commands

    register_commands(app)
    return app


def _load_config(app: Flask, overrides: dict[str, Any] | None) -> None:
    app.config.from_object("allwayscalc.config.Config")
    app.config.update(overrides or {})
    app.config["ENV_DIAGNOSTICS"] = ENV_DIAGNOSTICS
    for warning in ENV_DIAGNOSTICS["warnings"]:
        logger.warning("Environment configuration warning: %s", warning)


def redis_pool(app: Flask):
    """Connection pool shared by the cache and the limiter, rebuilt in each forked worker."""
    url = app.config.get("REDIS_URL")
    if not url:
        return None

    pid = os.getpid()
    with _redis_pool_lock:
        owner_pid, pool = app.extensions.get(_REDIS_POOL_KEY, (None, None))
        if pool is not None and owner_pid == pid:
            return pool

        import redis

        if pool is not None:
            # Inherited from the gunicorn master; its sockets belong to another process.
            try:
                pool.disconnect()
            except (OSError, redis.RedisError) as exc:  # pragma: no cover
                logger.warning("Could not drop inherited Redis pool from pid %s: %s", owner_pid, exc)

        tunables = EnvReader()
        max_connections = tunables.int("REDIS_POOL_MAX_CONNECTIONS", 50)
        pool = redis.BlockingConnectionPool.from_url(
            url,
            max_connections=max_connections if max_connections > 0 else None,
            timeout=tunables.float("REDIS_POOL_TIMEOUT", 5.0),
            socket_timeout=tunables.float("REDIS_SOCKET_TIMEOUT", 5.0),
            socket_connect_timeout=tunables.float("REDIS_CONNECT_TIMEOUT", 5.0),
        )
        app.extensions[_REDIS_POOL_KEY] = (pid, pool)

    logger.info("Redis connection pool ready (pid=%s, max_connections=%s)", pid, max_connections)
    return pool


def _configure_cache(app: Flask) -> None:
    settings = {"CACHE_DEFAULT_TIMEOUT": app.config.get("CACHE_DEFAULT_TIMEOUT", 120)}
    redis_url = app.config.get("REDIS_URL")

    if app.config.get("CACHE_TYPE") == "NullCache":
        settings["CACHE_TYPE"] = "NullCache"
    elif redis_url:
        settings.update(
            CACHE_TYPE="RedisCache",
            CACHE_REDIS_URL=redis_url,
            CACHE_OPTIONS={"connection_pool": redis_pool(app)},
        )
    else:
        settings["CACHE_TYPE"] = "SimpleCache"
    cache.init_app(app, config=settings)
    logger.info("Cache backend: %s", settings["CACHE_TYPE"])

    if app.config.get("ENV") == "production" and settings["CACHE_TYPE"] != "RedisCache":
        raise RuntimeError("Redis cache not configured; SimpleCache is not permitted in production.")


def _configure_rate_limiter(app: Flask) -> None:
    storage_uri = app.config.get("RATELIMIT_STORAGE_URI") or "memory://"
    app.config["RATELIMIT_STORAGE_URI"] = storage_uri

    # Same Redis as the cache: reuse its pool instead of opening a second one.
    if storage_uri.startswith("redis") and storage_uri == app.config.get("REDIS_URL"):
        options = dict(app.config.get("RATELIMIT_STORAGE_OPTIONS") or {})
        options["connection_pool"] = redis_pool(app)
        app.config["RATELIMIT_STORAGE_OPTIONS"] = options
    limiter.init_app(app)

    if app.config.get("ENV") == "production" and storage_uri.startswith("memory://"):
        raise RuntimeError("Rate limiter storage must be Redis-backed in production.")


def _wants_json() -> bool:
    accept = request.accept_mimetypes
    return request.path.startswith("/api/") or ("application/json" in accept and not accept.accept_html)


def _install_global_error_handlers(app: Flask) -> None:
    """404/429/CSRF handlers: JSON for API callers, friendly pages for browsers."""

    @app.errorhandler(404)
    def _not_found(err):
        if _wants_json():
            return jsonify({"error": "Not found"}), 404
        return render_template("errors/404.html", page_title="Page Not Found | AllWaysCalc"), 404

    @app.errorhandler(RateLimitExceeded)
    def _rate_limited(err: RateLimitExceeded):
        logger.warning("Rate limit exceeded: path=%s limit=%s", request.path, err.description)
        if _wants_json():
            return jsonify({"error": "Too many requests", "limit": err.description}), 429
        return (
            render_template("errors/429.html", page_title="Slow Down | AllWaysCalc", limit=err.description),
            429,
        )

    @app.errorhandler(CSRFError)
    def _csrf_failed(err: CSRFError):
        logger.warning(
            "CSRF validation failed: path=%s endpoint=%s remote=%s reason=%s",
            request.path,
            request.endpoint,
            request.headers.get("X-Forwarded-For", request.remote_addr),
            err.description,
        )
        return render_template("errors/csrf.html", reason=err.description, page_title="Form Expired | AllWaysCalc"), 400
