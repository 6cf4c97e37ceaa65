from __future__ import annotations

import logging
import re
from typing import Iterable

from flask import Flask

DEV_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
PROD_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
NOISY_LOGGERS = ("werkzeug", "flask_limiter", "google", "urllib3", "allwayscalc.blueprints_registry")

# Applied in order; bearer headers go before key=value secrets so "Authorization: Bearer x" loses both parts.
REDACTIONS: tuple[tuple[re.Pattern, object], ...] = (
    (re.compile(r"[A-Za-z0-9_.+-]+@[A-Za-z0-9-]+\.[A-Za-z0-9-.]+"), "[REDACTED_EMAIL]"),
    (re.compile(r"Bearer\s+[A-Za-z0-9\-_.=:+/]+", re.IGNORECASE), "Bearer [REDACTED]"),
    (
        re.compile(r"(token|api[_-]?key|secret|password|passwd|authorization)\s*[:=]\s*([^\s,;]+)", re.IGNORECASE),
        lambda match: f"{match.group(1)}=[REDACTED]",
    ),
)


def redact(message: str) -> str:
    for pattern, replacement in REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


class PiiRedactionFilter(logging.Filter):
    """Rewrites the rendered message so emails and credentials never reach a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            rendered = record.getMessage()
        except (TypeError, ValueError):
            # malformed %-args; let the handler report it
            return True
        record.msg = redact(rendered)
        record.args = None
        return True


def configure_logging(app: Flask) -> None:
    level = _coerce_level(app.config.get("LOG_LEVEL", "DEBUG" if app.debug else "INFO"))
    for logger in (logging.getLogger(), logging.getLogger("allwayscalc"), app.logger):
        logger.setLevel(level)

    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    production = app.config.get("ENV") == "production" and not app.debug
    formatter = logging.Formatter(PROD_FORMAT if production else DEV_FORMAT)
    redact_pii = bool(app.config.get("LOG_REDACT_PII", True))
    for handlers in (logging.getLogger().handlers, app.logger.handlers):
        _prepare_handlers(handlers, formatter, redact_pii)


def _prepare_handlers(handlers: Iterable[logging.Handler], formatter: logging.Formatter, redact_pii: bool) -> None:
    for handler in handlers:
        handler.setFormatter(formatter)
        already_filtered = any(isinstance(f, PiiRedactionFilter) for f in handler.filters)
        if redact_pii and not already_filtered:
            handler.addFilter(PiiRedactionFilter())


def _coerce_level(raw_level) -> int:
    if isinstance(raw_level, int):
        return raw_level
    if isinstance(raw_level, str):
        level = logging.getLevelName(raw_level.strip().upper())
        if isinstance(level, int):
            return level
    return logging.INFO
