from __future__ import annotations

from typing import Mapping

from ..errors import FormatError
from .patterns import DEFAULT_PATTERNS, Patterns
from .values import parse_value


def is_ignored_line(line: str) -> bool:
    """Blank lines and `#` comment lines carry no assignment."""

    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def remove_comments(line: str) -> str:
    """Drop a trailing `# comment`, keeping hashes that sit inside quotes.

    The line is split on `#` and a segment with exactly one `"` or one `'`
    is taken to open (or close) a quoted span. Stray quotes outside a real
    quoted field can fool this; the behaviour is kept as is.
    """

    if "#" not in line:
        return line

    quotes_open = False
    keep: list[str] = []
    for segment in line.split("#"):
        if segment.count('"') == 1 or segment.count("'") == 1:
            if quotes_open:
                quotes_open = False
                keep.append(segment)
            else:
                quotes_open = True

        if not keep or quotes_open:
            keep.append(segment)

    return "#".join(keep)


def split_line(line: str, *, patterns: Patterns = DEFAULT_PATTERNS) -> tuple[str, str]:
    """Split an assignment into (key, raw value).

    YAML-style `KEY: value` is used when the first `:` comes before the first
    `=` (or there is no `=`). A leading `export ` is removed from the key.
    """

    first_equals = line.find("=")
    first_colon = line.find(":")

    sep = "="
    if first_colon != -1 and (first_equals == -1 or first_colon < first_equals):
        sep = ":"

    key, found, raw_value = line.partition(sep)
    if not found:
        raise FormatError(f"can't separate key from value: {line!r}", line=line)

    m = patterns.export.fullmatch(key)
    if m is not None:
        key = m.group(1)
    return key, raw_value


def parse_line(
    line: str,
    values: Mapping[str, str],
    *,
    patterns: Patterns = DEFAULT_PATTERNS,
) -> tuple[str, str]:
    """Parse one non-ignored line into (key, decoded value)."""

    key, raw_value = split_line(remove_comments(line), patterns=patterns)
    return key, parse_value(raw_value, values, patterns=patterns)
