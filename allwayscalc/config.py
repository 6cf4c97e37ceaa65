"""Environment-driven settings.

``FLASK_ENV`` picks one of the config classes below; everything else is read
through :class:`EnvReader`, which never raises on a malformed value and keeps a
list of warnings that ``create_app`` logs once at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, TypeVar
from urllib.parse import urlparse

T = TypeVar("T")

ENV_VAR = "FLASK_ENV"
ENVIRONMENTS = ("development", "testing", "staging", "production")
LOCAL_ENVIRONMENTS = frozenset({"development", "testing"})
LOCAL_BASE_URL = "http://localhost:5000"

_BOOL_WORDS = {
    "1": True, "true": True, "yes": True, "on": True,
    "0": False, "false": False, "no": False, "off": False,
}


@dataclass(frozen=True)
class EnvironmentInfo:
    name: str
    source: str
    raw_value: str


def _parse_bool(value: str) -> bool:
    try:
        return _BOOL_WORDS[value.lower()]
    except KeyError:
        raise ValueError(value) from None


class EnvReader:
    """Typed, forgiving access to a snapshot of environment variables."""

    def __init__(self, data: Mapping[str, str] | None = None):
        self._data = dict(os.environ if data is None else data)
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def raw(self, key: str) -> str | None:
        return self._data.get(key)

    def str(self, key: str, default: str | None = None) -> str | None:
        value = (self._data.get(key) or "").strip()
        return value or default

    def _typed(self, key: str, default: T, parser: Callable[[str], T], kind: str) -> T:
        value = self.str(key)
        if value is None:
            return default
        try:
            return parser(value)
        except ValueError:
            self.warn(f"{key} expected {kind} but received {value!r}; falling back to {default}.")
            return default

    def int(self, key: str, default: int = 0) -> int:
        return self._typed(key, default, int, "integer")

    def float(self, key: str, default: float = 0.0) -> float:
        return self._typed(key, default, float, "float")

    def bool(self, key: str, default: bool = False) -> bool:
        return self._typed(key, default, _parse_bool, "boolean")


def resolve_environment(reader: EnvReader) -> EnvironmentInfo:
    raw_value = reader.str(ENV_VAR) or ENVIRONMENTS[0]
    name = raw_value.lower()
    if name not in ENVIRONMENTS:
        raise RuntimeError(f"Invalid {ENV_VAR}={raw_value!r}. Expected one of {sorted(ENVIRONMENTS)}.")
    return EnvironmentInfo(name=name, source=ENV_VAR, raw_value=raw_value)


def resolve_base_url(reader: EnvReader, env_name: str) -> str:
    """Public origin used for canonical links and the sitemap."""
    configured = reader.str("APP_BASE_URL")
    if configured:
        return configured.rstrip("/")
    if env_name not in LOCAL_ENVIRONMENTS:
        raise RuntimeError("APP_BASE_URL must be set for staging and production environments.")
    reader.warn(f"APP_BASE_URL not set; defaulting to {LOCAL_BASE_URL} for local/testing environments.")
    return LOCAL_BASE_URL


def _limiter_storage(reader: EnvReader) -> str:
    return (
        reader.str("RATELIMIT_STORAGE_URI")
        or reader.str("RATELIMIT_STORAGE_URL")
        or reader.str("REDIS_URL")
        or "memory://"
    )


env = EnvReader()
ENV_INFO = resolve_environment(env)
_BASE_URL = resolve_base_url(env, ENV_INFO.name)
_BASE_SCHEME = urlparse(_BASE_URL).scheme


class BaseConfig:
    FLASK_ENV = ENV_INFO.name
    SECRET_KEY = env.str("FLASK_SECRET_KEY", "devkey-please-change-in-production")

    SITE_NAME = env.str("SITE_NAME", "AllWaysCalc")
    CONTACT_EMAIL = env.str("CONTACT_EMAIL", "allwayscalc@gmail.com")

    # Site origin
    APP_BASE_URL = _BASE_URL
    PREFERRED_URL_SCHEME = _BASE_SCHEME or "http"

    # Forms and sessions only carry CSRF tokens and flash messages
    WTF_CSRF_ENABLED = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    MAX_CONTENT_LENGTH = 64 * 1024

    # Rate limiting
    RATELIMIT_ENABLED = env.bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = _limiter_storage(env)
    RATELIMIT_DEFAULT = env.str("RATELIMIT_DEFAULT", "5000 per hour;1000 per minute")
    ALGEBRA_RATE_LIMIT = env.str("ALGEBRA_RATE_LIMIT", "30/minute")
    SUGGESTION_RATE_LIMIT = env.str("SUGGESTION_RATE_LIMIT", "10/minute")

    # Caching
    REDIS_URL = env.str("REDIS_URL")
    CACHE_TYPE = env.str("CACHE_TYPE", "SimpleCache")
    CACHE_DEFAULT_TIMEOUT = env.int("CACHE_DEFAULT_TIMEOUT", 120)
    SITEMAP_CACHE_TIMEOUT = env.int("SITEMAP_CACHE_TIMEOUT", 3600)

    LOG_LEVEL = env.str("LOG_LEVEL", "WARNING")
    LOG_REDACT_PII = env.bool("LOG_REDACT_PII", True)

    # Gemini
    GOOGLE_AI_API_KEY = env.str("GOOGLE_AI_API_KEY") or env.str("GOOGLE_GENERATIVE_AI_API_KEY")
    GOOGLE_AI_DEFAULT_MODEL = env.str("GOOGLE_AI_DEFAULT_MODEL", "gemini-1.5-flash")
    GOOGLE_AI_ALGEBRA_MODEL = env.str("GOOGLE_AI_ALGEBRA_MODEL", GOOGLE_AI_DEFAULT_MODEL)
    GOOGLE_AI_REQUEST_TIMEOUT_SECONDS = env.int("GOOGLE_AI_REQUEST_TIMEOUT_SECONDS", 45)
    ALGEBRA_MAX_PROBLEM_LENGTH = env.int("ALGEBRA_MAX_PROBLEM_LENGTH", 2000)


class DevelopmentConfig(BaseConfig):
    ENV = "development"
    DEBUG = True
    RATELIMIT_STORAGE_URI = env.str("RATELIMIT_STORAGE_URI") or "memory://"


class TestingConfig(BaseConfig):
    ENV = "testing"
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = "memory://"
    CACHE_TYPE = "NullCache"


class StagingConfig(BaseConfig):
    ENV = "staging"
    DEBUG = False
    PREFERRED_URL_SCHEME = "https"
    SESSION_COOKIE_SECURE = True


class ProductionConfig(StagingConfig):
    ENV = "production"
    LOG_LEVEL = env.str("LOG_LEVEL", "INFO")


CONFIG_CLASSES = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "staging": StagingConfig,
    "production": ProductionConfig,
}

Config = CONFIG_CLASSES[ENV_INFO.name]

ENV_DIAGNOSTICS = {
    "active": ENV_INFO.name,
    "source": ENV_INFO.source,
    "variables": {ENV_INFO.source: ENV_INFO.raw_value},
    "warnings": tuple(env.warnings),
}
