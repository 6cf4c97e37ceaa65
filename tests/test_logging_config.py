import logging

from allwayscalc.logging_config import PiiRedactionFilter, _coerce_level, redact


def test_redact_masks_emails_tokens_and_bearer_headers():
    message = "user priya@example.com sent api_key=abc123, Authorization: Bearer eyJhbGciOi.payload"

    redacted = redact(message)

    assert "priya@example.com" not in redacted
    assert "[REDACTED_EMAIL]" in redacted
    assert "api_key=[REDACTED]" in redacted
    assert "abc123" not in redacted
    assert "eyJhbGciOi" not in redacted


def test_redact_leaves_plain_text_alone():
    assert redact("Calculator suggestion received (12 chars)") == "Calculator suggestion received (12 chars)"


def test_filter_rewrites_formatted_message():
    record = logging.LogRecord(
        "allwayscalc", logging.INFO, __file__, 1, "Contact from %s", ("visitor@example.org",), None
    )

    assert PiiRedactionFilter().filter(record) is True
    assert record.getMessage() == "Contact from [REDACTED_EMAIL]"


def test_coerce_level():
    assert _coerce_level("debug") == logging.DEBUG
    assert _coerce_level(logging.ERROR) == logging.ERROR
    assert _coerce_level("loud") == logging.INFO
    assert _coerce_level(None) == logging.INFO


def test_app_logger_level_follows_config(make_app):
    make_app(LOG_LEVEL="ERROR")

    assert logging.getLogger("allwayscalc").level == logging.ERROR
