from __future__ import annotations


class CueParseError(ValueError):
    """Base error for a cue block that could not be parsed."""

    kind = "cue_parse_error"

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class MalformedCueError(CueParseError):
    kind = "malformed_cue"


class InvalidTimestampError(CueParseError):
    kind = "invalid_timestamp"

    def __init__(self, token: str, *, line: str | None = None) -> None:
        super().__init__(f"Invalid timestamp '{token}'.", line=line)
        self.token = token


class MissingTextError(CueParseError):
    kind = "missing_text"
