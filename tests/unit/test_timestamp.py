from __future__ import annotations

import pytest

from cuetext.core.errors import InvalidTimestampError, MalformedCueError
from cuetext.core.timestamp import (
    is_timing_line,
    parse_timecode,
    parse_timestamp,
    parse_timing_line,
)


def test_comma_and_period_separators_yield_same_value() -> None:
    assert parse_timestamp("00:01:14,815") == 74815
    assert parse_timestamp("00:01:14.815") == 74815


def test_hours_field_accepts_more_than_two_digits() -> None:
    assert parse_timestamp("100:00:00.001") == 360_000_001
    assert parse_timestamp("1:02:03.004") == 3_723_004


def test_timecode_fields_and_seconds() -> None:
    timecode = parse_timecode("01:02:03.004")
    assert (timecode.hours, timecode.minutes, timecode.seconds, timecode.milliseconds) == (1, 2, 3, 4)
    assert timecode.raw == "01:02:03.004"
    assert timecode.to_seconds() == 3723
    assert timecode.format(",") == "01:02:03,004"


@pytest.mark.parametrize(
    "token",
    [
        "00:01:14.81",
        "00:01:14",
        "0a:02:03.001",
        "00:1:14.815",
        "00:01:4.815",
        "00:01:14.8150",
        "00:01:14:815",
        "01:14.815",
        "００:０１:１４.８１５",
        "٠٠:01:14.815",
        "00:01:14.815\n",
        "",
    ],
)
def test_invalid_tokens_are_rejected(token: str) -> None:
    with pytest.raises(InvalidTimestampError) as excinfo:
        parse_timestamp(token)
    assert excinfo.value.token == token


def test_minutes_or_seconds_above_59_are_rejected() -> None:
    with pytest.raises(InvalidTimestampError):
        parse_timestamp("01:02:60.004")
    with pytest.raises(InvalidTimestampError):
        parse_timestamp("01:60:03.004")


def test_timing_line_ignores_trailing_cue_settings() -> None:
    line = "00:00:13.916 --> 00:00:16.500 position:50.00%,middle align:middle"
    assert parse_timing_line(line) == (13916, 16500)


def test_timing_line_tolerates_missing_or_extra_whitespace() -> None:
    assert parse_timing_line("00:00:01.000-->00:00:02.000") == (1000, 2000)
    assert parse_timing_line("  00:00:01,000   -->  00:00:02,000  ") == (1000, 2000)


def test_timing_line_does_not_enforce_ordering() -> None:
    assert parse_timing_line("00:00:05.000 --> 00:00:01.000") == (5000, 1000)


def test_single_dash_arrow_is_not_a_timing_line() -> None:
    assert not is_timing_line("00:01:14 -> 00:01:18")
    with pytest.raises(MalformedCueError):
        parse_timing_line("00:01:14 -> 00:01:18")


def test_arrow_line_with_bad_token_raises_invalid_timestamp() -> None:
    assert is_timing_line("00:01:14.81 --> 00:01:18.114")
    with pytest.raises(InvalidTimestampError):
        parse_timing_line("00:01:14.81 --> 00:01:18.114")
