from datetime import timedelta

import pytest

from htlc_utils.errors import DurationParseError
from htlc_utils.utils.duration import HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND, parse_duration, parse_timedelta


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("-0", 0),
        ("1h", HOUR),
        ("90m", 90 * MINUTE),
        ("1h30m", 90 * MINUTE),
        ("1h0m0s", HOUR),
        ("3m", 3 * MINUTE),
        ("+5s", 5 * SECOND),
        ("-1m", -MINUTE),
        ("1.5h", 90 * MINUTE),
        (".5m", 30 * SECOND),
        ("2.h", 2 * HOUR),
        ("300ms", 300 * MILLISECOND),
        ("1us", MICROSECOND),
        ("1µs", MICROSECOND),
        ("1μs", MICROSECOND),
        ("42ns", 42),
        ("1.0000000005s", SECOND),
        ("2h45m10.5s", 2 * HOUR + 45 * MINUTE + 10 * SECOND + 500 * MILLISECOND),
    ],
)
def test_parse_duration_valid(text: str, expected: int) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "+", "-", "1", "h", ".", ".s", "1x", "1h ", " 1h", "1 h", "1.5.5h", "1h30", "not-a-duration", "9999999999h"],
)
def test_parse_duration_invalid(text: str) -> None:
    with pytest.raises(DurationParseError) as info:
        parse_duration(text)
    assert info.value.text == text


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_duration("soon")


def test_parse_timedelta() -> None:
    assert parse_timedelta("1h30m") == timedelta(hours=1, minutes=30)
    assert parse_timedelta("-1.5s") == timedelta(seconds=-1.5)
    assert parse_timedelta("0") == timedelta(0)


def test_parse_duration_long_fraction_is_truncated() -> None:
    assert parse_duration("1." + "0" * 5000 + "s") == SECOND
    assert parse_duration("0." + "9" * 5000 + "s") == SECOND - 1


def test_parse_duration_leading_zeros() -> None:
    assert parse_duration("0" * 5000 + "1h") == HOUR


def test_parse_duration_huge_whole_part_is_out_of_range() -> None:
    with pytest.raises(DurationParseError) as info:
        parse_duration("9" * 5000 + "h")
    assert info.value.reason == "duration out of range"
