from __future__ import annotations

import re

from cuetext.core.errors import InvalidTimestampError, MalformedCueError
from cuetext.schemas.timecode import TimeCode

# Tokens are loose here so that a line carrying the arrow is always treated as
# the timing line; the token grammar is checked separately.
_TIMING_LINE_PATTERN = re.compile(
    r"^\s*(?P<start>\S+?)\s*-->\s*(?P<end>\S+)(?:\s+(?P<settings>.*?))?\s*$"
)
_TIMESTAMP_PATTERN = re.compile(r"([0-9]+):([0-9]{2}):([0-9]{2})[.,]([0-9]{3})")


def is_timing_line(line: str) -> bool:
    return _TIMING_LINE_PATTERN.match(line) is not None


def parse_timecode(token: str, *, line: str | None = None) -> TimeCode:
    """Parse `HH:MM:SS.mmm` or `HH:MM:SS,mmm` into a TimeCode."""
    match = _TIMESTAMP_PATTERN.fullmatch(token)
    if not match:
        raise InvalidTimestampError(token, line=line)
    hh, mm, ss, ms = (int(group) for group in match.groups())
    if mm > 59 or ss > 59:
        raise InvalidTimestampError(token, line=line)
    return TimeCode(hours=hh, minutes=mm, seconds=ss, milliseconds=ms, raw=token)


def parse_timestamp(token: str) -> int:
    return parse_timecode(token).total_milliseconds


def parse_timing_line(line: str) -> tuple[int, int]:
    """Return (start, end) in milliseconds.

    Trailing WebVTT cue settings are discarded. start <= end is not checked.
    """
    match = _TIMING_LINE_PATTERN.match(line)
    if not match:
        raise MalformedCueError(f"Not a timing line: '{line}'.", line=line)
    start = parse_timecode(match.group("start"), line=line)
    end = parse_timecode(match.group("end"), line=line)
    return start.total_milliseconds, end.total_milliseconds
