"""Epoch-second timestamp helpers for timelocks."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta, tzinfo
from typing import Callable

from ..config import TimeConfig
from ..errors import DurationParseError
from .duration import SECOND, parse_duration

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def current_ts() -> int:
    """Return whole seconds since the Unix epoch."""
    return time.time_ns() // SECOND


def _normalize(year: int, month: int, day: int, hour: int, minute: int, second: int) -> datetime:
    # Month overflow carries into the year; everything below the month is plain
    # offset arithmetic from the first of that month.
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1) + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)


def target_ts(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    tz: tzinfo | str | None = None,
) -> int:
    """Return epoch seconds for a civil date and time.

    Components are read in ``tz`` when given, otherwise in the configured
    zone (``HTLC_UTILS_TIMEZONE``), otherwise in host local time. Out-of-range
    components roll over instead of being rejected, so month 13 is January of
    the following year and day 32 spills into the next month. A result whose
    normalized year falls outside 1..9999 cannot be represented and raises
    ``ValueError`` or ``OverflowError`` from ``datetime``.
    """
    if isinstance(tz, str):
        tz = TimeConfig(timezone=tz).tzinfo()
    elif tz is None:
        tz = TimeConfig.from_env().tzinfo()

    civil = _normalize(year, month, day, hour, minute, second)
    if tz is not None:
        civil = civil.replace(tzinfo=tz)
    ts = int(civil.timestamp())
    logger.debug("resolved %s (%s) to %d", civil.isoformat(), tz or "local", ts)
    return ts


def delayed_ts(delay: str, *, strict: bool | None = None, clock: Clock | None = None) -> int:
    """Return epoch seconds for now plus the duration ``delay``.

    The clock is read once before parsing. With ``strict`` true (the default
    unless ``HTLC_UTILS_LENIENT_DURATIONS`` is set) an invalid duration raises
    ``DurationParseError``; otherwise it counts as a zero offset.
    """
    if strict is None:
        strict = not TimeConfig.from_env().lenient_durations

    now_ns = (clock or time.time_ns)()
    try:
        offset_ns = parse_duration(delay)
    except DurationParseError as exc:
        if strict:
            raise
        logger.warning("ignoring unparseable duration, using zero offset: %s", exc)
        offset_ns = 0
    return (now_ns + offset_ns) // SECOND
