from __future__ import annotations

from collections.abc import Iterable

DIALOGUE_MARKER = "- "


def strip_dialogue_marker(line: str) -> str:
    if line.startswith(DIALOGUE_MARKER):
        return line[len(DIALOGUE_MARKER):]
    return line


def normalize_text_lines(lines: Iterable[str]) -> str:
    """Strip one leading dialogue marker per line and join with newlines.

    No other whitespace is trimmed, for SRT and WebVTT alike.
    """
    return "\n".join(strip_dialogue_marker(line) for line in lines)
