"""Duration expression parsing.

Expressions are a sequence of ``<number><unit>`` groups with an optional
leading sign, e.g. ``"1h"``, ``"90m"``, ``"1h30m"``, ``"-1.5s"`` or
``"300ms"``. The bare string ``"0"`` is accepted as a zero span. Results are
integer nanoseconds so fractional inputs stay exact.
"""

from __future__ import annotations

import re
from datetime import timedelta

from ..errors import DurationParseError

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# int64 nanoseconds
MAX_DURATION_NS = (1 << 63) - 1
_MAX_WHOLE_DIGITS = len(str(MAX_DURATION_NS))
_MAX_FRACTION_DIGITS = 18

_GROUP_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration(text: str) -> int:
    """Parse ``text`` and return the span in nanoseconds.

    Raises ``DurationParseError`` when ``text`` is not a valid expression.
    """
    rest = text
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise DurationParseError(text)

    total = 0
    pos = 0
    while pos < len(rest):
        match = _GROUP_RE.match(rest, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not frac:
            raise DurationParseError(text)
        if not unit:
            raise DurationParseError(text, "missing unit in duration")
        if unit not in UNITS:
            raise DurationParseError(text, f"unknown unit {unit!r} in duration")

        scale = UNITS[unit]
        digits = whole.lstrip("0")
        if len(digits) > _MAX_WHOLE_DIGITS:
            raise DurationParseError(text, "duration out of range")
        value = int(digits or "0") * scale
        if frac:
            # digits past the first 18 are below nanosecond resolution
            frac = frac[:_MAX_FRACTION_DIGITS]
            value += int(frac) * scale // 10 ** len(frac)
        total += value
        if total > MAX_DURATION_NS + (1 if negative else 0):
            raise DurationParseError(text, "duration out of range")
        pos = match.end()

    return -total if negative else total


def parse_timedelta(text: str) -> timedelta:
    """Parse ``text`` into a ``timedelta`` (microsecond resolution)."""
    nanos = parse_duration(text)
    sign = -1 if nanos < 0 else 1
    return sign * timedelta(microseconds=abs(nanos) // MICROSECOND)
