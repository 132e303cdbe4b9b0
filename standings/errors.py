"""Error types raised while parsing and ranking result records."""

from __future__ import annotations


class StandingsError(ValueError):
    """Base class for all input errors reported by this package.

    `raw` holds the offending text when there is one. `line_number` is 1-based
    and only set when the error was raised while parsing a multi-line block;
    record-level errors then carry the whole line as `raw`.
    """

    def __init__(
        self,
        message: str,
        *,
        raw: str | None = None,
        line_number: int | None = None,
    ) -> None:
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.raw = raw
        self.line_number = line_number


class ParseError(StandingsError):
    """Malformed record, time token, athlete number or shot symbol."""

    def __init__(self, message: str, *, raw: str, line_number: int | None = None) -> None:
        super().__init__(message, raw=raw, line_number=line_number)


class ValidationError(StandingsError):
    """Structurally valid input that fails a semantic precondition."""
