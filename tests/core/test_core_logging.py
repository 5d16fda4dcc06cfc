"""Tests for the logging helpers with correlation ids."""

import json
import logging
import sys
from typing import Any, cast

from pythonjsonlogger import jsonlogger

from actor_facts_skill.core.logging import (
    LOG_SCHEMA_VERSION,
    CorrelationIdFilter,
    VersionedJsonFormatter,
    bind_correlation_id,
    bind_skill_request_id,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    get_skill_request_id,
    reset_correlation_id,
    reset_skill_request_id,
    skill_request_id_context,
)


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=None,
        exc_info=None,
    )


def test_correlation_filter_attaches_context():
    """Filter should attach the current correlation and request ids onto records."""
    cid_token = bind_correlation_id("abc123")
    rid_token = bind_skill_request_id("amzn1.echo-api.request.1")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record) is True
        record_any = cast(Any, record)
        assert record_any.__dict__["correlation_id"] == "abc123"
        assert record_any.__dict__["skill_request_id"] == "amzn1.echo-api.request.1"
    finally:
        reset_skill_request_id(rid_token)
        reset_correlation_id(cid_token)


def test_correlation_filter_defaults_to_dash():
    record = _record()
    CorrelationIdFilter().filter(record)

    assert cast(Any, record).correlation_id == "-"
    assert cast(Any, record).skill_request_id == "-"


def test_context_managers_restore_state():
    """Nested contexts restore the original values."""
    with correlation_id_context("ctx"), correlation_id_context("nested"):
        with skill_request_id_context("req-1"):
            assert get_correlation_id() == "nested"
            assert get_skill_request_id() == "req-1"
        assert get_skill_request_id() is None
    assert get_correlation_id() is None


def test_get_logger_installs_json_stream_handler_once():
    first = get_logger("actor_facts_skill.tests.logging")
    second = get_logger("actor_facts_skill.tests.logging")

    assert first is second
    stream_handlers = [
        handler
        for handler in first.handlers
        if isinstance(handler, logging.StreamHandler)
        and getattr(handler, "stream", None) is sys.stdout
    ]
    assert len(stream_handlers) == 1
    assert all(
        any(isinstance(flt, CorrelationIdFilter) for flt in handler.filters)
        for handler in first.handlers
    )
    assert all(isinstance(handler.formatter, jsonlogger.JsonFormatter) for handler in first.handlers)


def test_formatter_renames_fields_and_adds_schema_version():
    formatter = VersionedJsonFormatter(
        "%(levelname)s %(message)s %(correlation_id)s",
        rename_fields={"levelname": "level", "correlation_id": "cid"},
        schema_version=LOG_SCHEMA_VERSION,
    )
    record = _record("entity fetched")
    with correlation_id_context("cid-1"):
        CorrelationIdFilter().filter(record)

    entry = json.loads(formatter.format(record))

    assert entry["level"] == "INFO"
    assert entry["message"] == "entity fetched"
    assert entry["cid"] == "cid-1"
    assert entry["schema_version"] == LOG_SCHEMA_VERSION
