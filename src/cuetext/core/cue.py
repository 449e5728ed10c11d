from __future__ import annotations

from dataclasses import dataclass

from cuetext.core.errors import MalformedCueError, MissingTextError
from cuetext.core.text import normalize_text_lines
from cuetext.core.timestamp import is_timing_line, parse_timing_line
from cuetext.schemas.cue import Cue


@dataclass(frozen=True)
class ClassifiedBlock:
    identifier: str | None
    timing_line: str
    text_lines: tuple[str, ...]


def split_block_lines(block: str) -> list[str]:
    lines = [line.removesuffix("\r") for line in block.split("\n")]
    return [line for line in lines if line.strip()]


def classify_block(lines: list[str]) -> ClassifiedBlock:
    if not lines:
        raise MalformedCueError("Cue block is empty.")
    identifier: str | None = None
    timing_index = 0
    if not is_timing_line(lines[0]):
        identifier = lines[0].strip()
        timing_index = 1
    if timing_index >= len(lines):
        raise MalformedCueError(
            f"Missing timing line after identifier '{identifier}'.",
            line=lines[0],
        )
    timing_line = lines[timing_index]
    if not is_timing_line(timing_line):
        raise MalformedCueError(
            f"Expected timing line, got '{timing_line}'.", line=timing_line
        )
    text_lines = tuple(lines[timing_index + 1:])
    if not text_lines:
        raise MissingTextError(
            "No text lines follow the timing line.", line=timing_line
        )
    return ClassifiedBlock(
        identifier=identifier,
        timing_line=timing_line,
        text_lines=text_lines,
    )


def parse_cue(block: str) -> Cue:
    """Parse one SRT or WebVTT cue block.

    >>> parse_cue("00:00:01.000 --> 00:00:02.000\\n- Hello")
    Cue(identifier=None, start=1000, end=2000, text='Hello')
    """
    classified = classify_block(split_block_lines(block))
    start, end = parse_timing_line(classified.timing_line)
    return Cue(
        identifier=classified.identifier,
        start=start,
        end=end,
        text=normalize_text_lines(classified.text_lines),
    )
