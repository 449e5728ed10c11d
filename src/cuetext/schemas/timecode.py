from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeCode:
    """A single cue timestamp split into its fields.

    `raw` keeps the token exactly as it appeared in the timing line.
    """

    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    raw: str = ""

    @property
    def total_milliseconds(self) -> int:
        return (
            (self.hours * 60 + self.minutes) * 60 + self.seconds
        ) * 1_000 + self.milliseconds

    def to_seconds(self) -> int:
        """Whole seconds, milliseconds truncated."""
        return (self.hours * 60 + self.minutes) * 60 + self.seconds

    def format(self, separator: str = ",") -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
            f"{separator}{self.milliseconds:03d}"
        )
