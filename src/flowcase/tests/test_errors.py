"""Tests for error payloads, failure classification, settings and logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from flowcase import (
    ErrorCode,
    ErrorTrace,
    Failure,
    FlowError,
    SignatureMismatch,
    Success,
    UnwrapError,
    chain_head,
    classify_failure,
    configure_logging,
    get_logger,
    get_settings,
    lift,
    trace_from_exc,
)
from flowcase.foundation.errors import trace


# ═════════════════════════════════════════════════════════════════════════════
# Exception Hierarchy
# ═════════════════════════════════════════════════════════════════════════════


def test_exception_hierarchy() -> None:
    assert issubclass(SignatureMismatch, FlowError)
    assert issubclass(SignatureMismatch, TypeError)
    assert issubclass(UnwrapError, RuntimeError)


def test_signature_mismatch_fields() -> None:
    exc = SignatureMismatch("parse", "too many positional arguments")
    assert exc.fn_name == "parse"
    assert str(exc) == "parse(): too many positional arguments"


# ═════════════════════════════════════════════════════════════════════════════
# Classification
# ═════════════════════════════════════════════════════════════════════════════


def test_classify_nil_result() -> None:
    assert classify_failure(chain_head(None)) is ErrorCode.NIL_RESULT


def test_classify_explicit_failure() -> None:
    assert classify_failure(chain_head([None, {"type": "planned"}])) is ErrorCode.EXPLICIT_FAILURE


def test_classify_captured_condition() -> None:
    assert classify_failure(lift(int)("x")) is ErrorCode.CAPTURED_CONDITION
    assert classify_failure(lift(int, trace_from_exc)("x")) is ErrorCode.CAPTURED_CONDITION


def test_classify_success() -> None:
    assert classify_failure(Success(1)) is None


class _ArrayLike:
    """Payload whose == cannot be used as a bool, like a numpy array."""

    def __eq__(self, other: object) -> bool:
        raise ValueError("truth value of an array is ambiguous")

    __hash__ = object.__hash__


def test_classify_does_not_compare_non_string_payloads() -> None:
    assert classify_failure(Failure(_ArrayLike())) is ErrorCode.EXPLICIT_FAILURE


# ═════════════════════════════════════════════════════════════════════════════
# ErrorTrace
# ═════════════════════════════════════════════════════════════════════════════


def test_trace_from_exc_with_operation() -> None:
    t = trace_from_exc(KeyError("sku"), operation="load_order", code="NOT_FOUND")

    assert t.exception_type == "KeyError"
    assert t.error_code == "NOT_FOUND"
    assert t.root_operation == "load_order"
    assert t.depth == 1


def test_trace_from_exc_without_message() -> None:
    assert trace_from_exc(ValueError()).message == "ValueError"


def test_trace_contexts_are_immutable() -> None:
    base = trace("disk full", code="IO")
    extended = base.with_operation("save", location="store.py:10", attempt=2)

    assert base.depth == 0
    assert extended.depth == 1
    assert str(extended.contexts[0]) == "save at store.py:10 (attempt=2)"
    assert extended.with_operation("flush").root_operation == "save"


def test_trace_format() -> None:
    t = trace("bad input", code="PARSE").with_operation("parse")
    rendered = t.format()

    assert rendered.startswith("bad input [PARSE]")
    assert "  - parse" in rendered
    assert str(t) == rendered


def test_trace_format_with_details() -> None:
    t = trace_from_exc(ValueError("bad"))

    assert "Details:" not in t.format()
    assert "ValueError: bad" in t.format(include_details=True)


def test_trace_is_a_failure_payload() -> None:
    result = chain_head("x", lift(int, lambda e: trace_from_exc(e, operation="parse_qty")))

    assert isinstance(result.error, ErrorTrace)
    assert result.error.root_operation == "parse_qty"
    assert result.map_err(lambda t: t.message).error.startswith("invalid literal")


def test_trace_rejects_empty_message() -> None:
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        trace("")


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_default_settings() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.level_no == logging.WARNING
    assert settings.trace_steps is False
    assert settings.lift.check_signature is True


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    from flowcase import clear_settings_cache

    monkeypatch.setenv("FLOWCASE_LOG_LEVEL", "debug")
    monkeypatch.setenv("FLOWCASE_DEBUG", "true")
    clear_settings_cache()
    settings = get_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.trace_steps is True


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


# ═════════════════════════════════════════════════════════════════════════════
# Logging Setup
# ═════════════════════════════════════════════════════════════════════════════


def test_configure_logging_writes_to_stream() -> None:
    buf = io.StringIO()
    root = configure_logging("INFO", stream=buf)
    try:
        get_logger("test").info("hello %s", "flow")
        get_logger("test").debug("hidden")
    finally:
        root.handlers = [h for h in root.handlers if isinstance(h, logging.NullHandler)]
        root.setLevel(logging.NOTSET)

    assert "flowcase.test: hello flow" in buf.getvalue()
    assert "hidden" not in buf.getvalue()


def test_configure_logging_replaces_previous_handler() -> None:
    root = configure_logging("INFO", stream=io.StringIO())
    try:
        configure_logging("DEBUG", stream=io.StringIO())
        stream_handlers = [h for h in root.handlers if not isinstance(h, logging.NullHandler)]
        assert len(stream_handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers = [h for h in root.handlers if isinstance(h, logging.NullHandler)]
        root.setLevel(logging.NOTSET)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level: LOUD"):
        configure_logging("LOUD")


def test_configure_logging_defaults_to_settings_level() -> None:
    root = configure_logging(stream=io.StringIO())
    try:
        assert root.level == logging.WARNING
    finally:
        root.handlers = [h for h in root.handlers if isinstance(h, logging.NullHandler)]
        root.setLevel(logging.NOTSET)


def test_failure_equality_with_traces() -> None:
    assert Failure(trace("x")) == Failure(trace("x"))
