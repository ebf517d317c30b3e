from __future__ import annotations

import json
import logging

from src.shared.kernel.tools import logger as logger_module
from src.shared.kernel.tools.logger import (
    get_log_context,
    log_context,
    sanitize_for_logging,
)


def test_sanitize_for_logging_redacts_nested_credentials() -> None:
    sanitized = sanitize_for_logging(
        {
            "headers": {"Authorization": "Bearer pplx-123", "Accept": "json"},
            "PERPLEXITY_API_KEY": "pplx-123",
            "items": [{"api-key": "x"}, "plain"],
        }
    )

    assert sanitized == {
        "headers": {"Authorization": "[REDACTED]", "Accept": "json"},
        "PERPLEXITY_API_KEY": "[REDACTED]",
        "items": [{"api-key": "[REDACTED]"}, "plain"],
    }


def test_log_context_binds_and_restores() -> None:
    assert get_log_context() == {}
    with log_context(request_id="req-1", company=" Acme "):
        with log_context(stage="generation", company=None):
            assert get_log_context() == {
                "request_id": "req-1",
                "company": "Acme",
                "stage": "generation",
            }
        assert get_log_context() == {"request_id": "req-1", "company": "Acme"}
    assert get_log_context() == {}


def test_json_formatter_emits_event_context_and_fields() -> None:
    record = logging.makeLogRecord(
        {
            "name": "newsletter.test",
            "levelno": logging.WARNING,
            "levelname": "WARNING",
            "msg": "research request failed",
            "event": "research_request_failed",
            "error_code": "RESEARCH_HTTP_STATUS",
            "fields": {"status_code": 401, "api_key": "secret"},
        }
    )
    with log_context(request_id="req-9", company="Acme"):
        logger_module._LogContextFilter().filter(record)

    payload = json.loads(logger_module._JsonLogFormatter().format(record))

    assert payload["message"] == "research request failed"
    assert payload["event"] == "research_request_failed"
    assert payload["error_code"] == "RESEARCH_HTTP_STATUS"
    assert payload["request_id"] == "req-9"
    assert payload["company"] == "Acme"
    assert payload["service"] == "newsletter-assembler"
    assert payload["fields"] == {"status_code": 401, "api_key": "[REDACTED]"}


def test_text_formatter_is_single_line() -> None:
    record = logging.makeLogRecord(
        {
            "name": "newsletter.test",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "newsletter story generated",
            "event": "newsletter_story_generated",
            "fields": {"story_chars": 120},
        }
    )

    line = logger_module._TextLogFormatter().format(record)

    assert "\n" not in line
    assert "INFO newsletter.test newsletter story generated" in line
    assert "event=newsletter_story_generated" in line
    assert 'fields={"story_chars": 120}' in line
