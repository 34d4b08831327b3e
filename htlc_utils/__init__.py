"""htlc_utils package.

Hashing, bytes32 hex and timelock timestamp helpers for preparing hash
time-locked contract swaps.
"""

from .config import TimeConfig
from .errors import DurationParseError, HtlcUtilsError
from .utils import current_ts, delayed_ts, hashlock, normalize_hex, parse_duration, sha256_hex, target_ts

__all__ = [
    "sha256_hex",
    "hashlock",
    "normalize_hex",
    "current_ts",
    "target_ts",
    "delayed_ts",
    "parse_duration",
    "TimeConfig",
    "HtlcUtilsError",
    "DurationParseError",
]
