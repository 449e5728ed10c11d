from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cue:
    identifier: str | None
    start: int
    end: int
    text: str

    @property
    def start_seconds(self) -> float:
        return self.start / 1_000.0

    @property
    def end_seconds(self) -> float:
        return self.end / 1_000.0

    @property
    def duration(self) -> int:
        # Ordering is not enforced, so this can be negative.
        return self.end - self.start

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self.text.split("\n"))
