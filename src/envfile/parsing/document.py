from __future__ import annotations

from typing import Iterable, TextIO

from ..errors import FormatError, ReadError
from .lines import is_ignored_line, parse_line
from .patterns import DEFAULT_PATTERNS, Patterns


def split_lines(text: str) -> list[str]:
    """Split text on `\\n`; a trailing newline does not start another line."""

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_lines(
    lines: Iterable[str],
    *,
    source: str | None = None,
    patterns: Patterns = DEFAULT_PATTERNS,
) -> dict[str, str]:
    """Parse dotenv lines into a mapping (later keys overwrite earlier ones).

    All lines are read before parsing starts; a failure while reading raises
    `ReadError` with no partial mapping. A line without a delimiter raises
    `FormatError` carrying the variables parsed before it.

    Values can only reference variables assigned on earlier lines.
    """

    try:
        raw_lines = list(lines)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"failed to read lines: {exc}", source=source) from exc

    values: dict[str, str] = {}
    for lineno, raw in enumerate(raw_lines, start=1):
        # CRLF documents keep a trailing "\r" after splitting on "\n".
        line = raw.removesuffix("\n").removesuffix("\r")
        if is_ignored_line(line):
            continue
        try:
            key, value = parse_line(line, values, patterns=patterns)
        except FormatError as exc:
            where = f"{source}:{lineno}" if source else f"line {lineno}"
            raise FormatError(
                f"{where}: {exc}",
                line=line,
                lineno=lineno,
                values=values,
                source=source,
            ) from exc
        values[key] = value

    return values


def parse_text(text: str, *, source: str | None = None, patterns: Patterns = DEFAULT_PATTERNS) -> dict[str, str]:
    return parse_lines(split_lines(text), source=source, patterns=patterns)


def parse_stream(stream: TextIO, *, source: str | None = None, patterns: Patterns = DEFAULT_PATTERNS) -> dict[str, str]:
    """Parse an open text stream, e.g. a file opened in text mode."""

    return parse_lines(stream, source=source, patterns=patterns)
