"""Exception types raised by htlc_utils."""

from __future__ import annotations


class HtlcUtilsError(Exception):
    """Base class for htlc_utils errors."""


class DurationParseError(HtlcUtilsError, ValueError):
    """Raised when a duration expression does not match the duration grammar."""

    def __init__(self, text: str, reason: str = "invalid duration") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason
