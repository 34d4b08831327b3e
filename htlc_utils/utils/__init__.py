"""Utility helpers for hashing, durations and timestamps."""

from .duration import parse_duration, parse_timedelta
from .hashing import hashlock, normalize_hex, sha256_hex
from .time import current_ts, delayed_ts, target_ts

__all__ = [
    "sha256_hex",
    "hashlock",
    "normalize_hex",
    "parse_duration",
    "parse_timedelta",
    "current_ts",
    "target_ts",
    "delayed_ts",
]
