from __future__ import annotations


class DotenvError(Exception):
    """Base error for dotenv parsing and source reading.

    `values` holds the mapping built before the failure, so callers can choose
    to continue with a partial result.
    """

    def __init__(self, message: str, *, values: dict[str, str] | None = None, source: str | None = None) -> None:
        super().__init__(message)
        self.values: dict[str, str] = dict(values) if values else {}
        self.source = source


class ReadError(DotenvError):
    """A source could not be opened or fully read."""


class FormatError(DotenvError):
    """A non-ignored line has no `=` or `:` delimiter."""

    def __init__(
        self,
        message: str,
        *,
        line: str,
        lineno: int | None = None,
        values: dict[str, str] | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(message, values=values, source=source)
        self.line = line
        self.lineno = lineno
