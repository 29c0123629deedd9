"""Tests for log redaction."""

from __future__ import annotations

import logging

from tufan.security.logging_filters import SensitiveFilter, install_sensitive_filter


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("tufan", logging.INFO, __file__, 1, message, None, None)


def test_guest_identifiers_are_redacted() -> None:
    record = _record(
        'booking payload {"customerNid": "19901234567", '
        '"guest_phone": "+8801711000000"}'
    )

    assert SensitiveFilter().filter(record) is True
    assert "19901234567" not in record.msg
    assert "8801711000000" not in record.msg
    assert record.msg.count("**REDACTED**") == 2


def test_bearer_tokens_are_redacted() -> None:
    record = _record("Authorization: Bearer abc.def-123")

    SensitiveFilter().filter(record)

    assert record.msg == "**REDACTED**"


def test_install_is_idempotent() -> None:
    install_sensitive_filter("tufan.test")
    install_sensitive_filter("tufan.test")

    target = logging.getLogger("tufan.test")
    assert sum(isinstance(flt, SensitiveFilter) for flt in target.filters) == 1
