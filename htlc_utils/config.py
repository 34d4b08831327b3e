"""Configuration for timestamp resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class TimeConfig:
    """Time zone and duration-parsing policy.

    ``timezone`` is an IANA zone name. ``None`` means the host local zone.
    """

    timezone: str | None = field(default_factory=lambda: os.getenv("HTLC_UTILS_TIMEZONE") or None)
    lenient_durations: bool = field(default_factory=lambda: _env_flag("HTLC_UTILS_LENIENT_DURATIONS"))

    @classmethod
    def from_env(cls) -> "TimeConfig":
        return cls()

    def tzinfo(self) -> tzinfo | None:
        """Return the configured zone, or ``None`` for host local time."""
        if not self.timezone:
            return None
        if self.timezone.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.timezone)
