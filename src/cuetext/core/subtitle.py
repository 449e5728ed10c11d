from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Any

from cuetext.core.cue import parse_cue, split_block_lines
from cuetext.core.errors import CueParseError
from cuetext.core.timestamp import is_timing_line
from cuetext.infra.config import AppConfig
from cuetext.infra.storage import write_text
from cuetext.schemas.cue import Cue

_BLOCK_SEPARATOR = re.compile(r"\r?\n\s*\r?\n")
_SKIPPED_VTT_BLOCKS = ("NOTE", "STYLE", "REGION")


@dataclass(frozen=True)
class CueFailure:
    index: int
    block: str
    kind: str
    message: str


@dataclass(frozen=True)
class ReadResult:
    cues: tuple[Cue, ...]
    failures: tuple[CueFailure, ...]

    @property
    def status(self) -> str:
        if not self.cues:
            return "failed"
        if self.failures:
            return "partial"
        return "done"


def _starts_with_keyword(line: str, keyword: str) -> bool:
    return line == keyword or line.startswith((f"{keyword} ", f"{keyword}\t"))


def split_cue_blocks(content: str) -> list[str]:
    """Split a whole SRT/WebVTT document into cue blocks.

    The WEBVTT header and NOTE/STYLE/REGION blocks are dropped.
    """
    text = content.lstrip("\ufeff").strip("\r\n")
    if not text.strip():
        return []
    blocks = _BLOCK_SEPARATOR.split(text)
    first_lines = blocks[0].splitlines()
    if first_lines and _starts_with_keyword(first_lines[0].strip(), "WEBVTT"):
        rest = first_lines[1:]
        if any(is_timing_line(line) for line in rest):
            blocks[0] = "\n".join(rest)
        else:
            blocks = blocks[1:]
    cue_blocks: list[str] = []
    for block in blocks:
        head = block.lstrip().split("\n", 1)[0].strip()
        if any(_starts_with_keyword(head, keyword) for keyword in _SKIPPED_VTT_BLOCKS):
            continue
        if split_block_lines(block):
            cue_blocks.append(block)
    return cue_blocks


def parse_document(content: str, *, error_policy: str = "skip") -> ReadResult:
    cues: list[Cue] = []
    failures: list[CueFailure] = []
    for index, block in enumerate(split_cue_blocks(content), start=1):
        try:
            cues.append(parse_cue(block))
        except CueParseError as exc:
            if error_policy == "abort":
                raise
            failures.append(
                CueFailure(index=index, block=block, kind=exc.kind, message=str(exc))
            )
    return ReadResult(cues=tuple(cues), failures=tuple(failures))


def read_cues(input_path: Path, config: AppConfig) -> ReadResult:
    content = input_path.read_text(encoding=config.encoding)
    return parse_document(content, error_policy=config.error_policy)


def format_timestamp(milliseconds: int, separator: str = ",") -> str:
    """Format milliseconds as HH:MM:SS<sep>mmm."""
    hours = milliseconds // 3_600_000
    minutes = (milliseconds % 3_600_000) // 60_000
    secs = (milliseconds % 60_000) // 1_000
    ms = milliseconds % 1_000
    return f"{hours:02d}:{minutes:02d}:{secs:02d}{separator}{ms:03d}"


def render_srt(cues: list[Cue] | tuple[Cue, ...]) -> str:
    lines: list[str] = []
    for index, cue in enumerate(cues, start=1):
        lines.append(str(index))
        lines.append(
            f"{format_timestamp(cue.start)} --> {format_timestamp(cue.end)}"
        )
        lines.append(cue.text)
        lines.append("")
    return "\n".join(lines)


def render_vtt(cues: list[Cue] | tuple[Cue, ...]) -> str:
    lines: list[str] = ["WEBVTT", ""]
    for cue in cues:
        if cue.identifier is not None:
            lines.append(cue.identifier)
        lines.append(
            f"{format_timestamp(cue.start, '.')} --> {format_timestamp(cue.end, '.')}"
        )
        lines.append(cue.text)
        lines.append("")
    return "\n".join(lines)


def render_text(cues: list[Cue] | tuple[Cue, ...]) -> str:
    return "\n\n".join(cue.text for cue in cues)


def cue_to_payload(cue: Cue) -> dict[str, Any]:
    return {
        "identifier": cue.identifier,
        "start": cue.start,
        "end": cue.end,
        "text": cue.text,
    }


def cues_to_payload(result: ReadResult) -> dict[str, Any]:
    return {
        "status": result.status,
        "cues": [cue_to_payload(cue) for cue in result.cues],
        "failures": [
            {
                "index": failure.index,
                "kind": failure.kind,
                "message": failure.message,
                "block": failure.block,
            }
            for failure in result.failures
        ],
    }


def write_srt(cues: list[Cue] | tuple[Cue, ...], output_path: Path) -> None:
    """Write cues to an SRT file."""
    write_text(output_path, render_srt(cues))


def write_vtt(cues: list[Cue] | tuple[Cue, ...], output_path: Path) -> None:
    """Write cues to a WebVTT file."""
    write_text(output_path, render_vtt(cues))
