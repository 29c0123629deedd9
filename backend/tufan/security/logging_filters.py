"""Logging filters that scrub guest identifiers and credentials."""

from __future__ import annotations

import logging
import re

_SENSITIVE_PATTERN = re.compile(
    r"(Authorization: Bearer\s+[\w\.-]+"
    r"|access_token\"\s*:\s*\"[^\"]+\""
    r"|(?:customer|guest)_?nid\"?\s*[:=]\s*\"?[\w-]+\"?"
    r"|(?:customer|guest)_?phone\"?\s*[:=]\s*\"?[+\d\s-]+\"?)",
    re.IGNORECASE,
)


class SensitiveFilter(logging.Filter):
    """Replace guest NIDs, phone numbers and tokens with a redaction marker."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = _SENSITIVE_PATTERN.sub("**REDACTED**", record.msg)
        return True


def install_sensitive_filter(*logger_names: str) -> None:
    """Attach a single ``SensitiveFilter`` to each named logger."""

    for name in logger_names:
        target = logging.getLogger(name)
        if not any(isinstance(flt, SensitiveFilter) for flt in target.filters):
            target.addFilter(SensitiveFilter())


__all__ = ["SensitiveFilter", "install_sensitive_filter"]
