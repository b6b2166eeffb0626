from __future__ import annotations

import re
from typing import Mapping

from .patterns import DEFAULT_PATTERNS, Patterns

_ESCAPED_CONTROL = {"n": "\n", "r": "\r"}


def _expand_control_escape(m: re.Match[str]) -> str:
    return _ESCAPED_CONTROL.get(m.group(0)[1:], m.group(0))


def parse_value(raw: str, values: Mapping[str, str], *, patterns: Patterns = DEFAULT_PATTERNS) -> str:
    """Decode the right-hand side of an assignment.

    - Only plain spaces are trimmed (tabs are kept).
    - A value wrapped in a matching pair of quotes is unwrapped.
    - Double-quoted values get `\\n`/`\\r` expanded and other escapes removed.
    - Everything except single-quoted values is interpolated against `values`.

    Values of length 0 or 1 are returned unchanged, so a lone `"` stays a `"`.
    """

    value = raw.strip(" ")
    if len(value) <= 1:
        return value

    single = patterns.single_quoted.fullmatch(value)
    double = patterns.double_quoted.fullmatch(value)

    if single is not None or double is not None:
        value = value[1:-1]

    if double is not None:
        value = patterns.escape.sub(_expand_control_escape, value)
        value = patterns.unescape.sub(r"\1", value)

    if single is None:
        value = expand_variables(value, values, patterns=patterns)

    return value


def expand_variables(text: str, values: Mapping[str, str], *, patterns: Patterns = DEFAULT_PATTERNS) -> str:
    """Substitute `$NAME` and `${NAME}` references using `values`.

    Unknown names expand to an empty string. An escaped reference (`\\$NAME`)
    and the unsupported `$(...)` form lose their first character and are kept
    literally. A `$` without an upper-case identifier is left as is.
    """

    def _replace(m: re.Match[str]) -> str:
        backslash, _, paren, name = m.groups()
        if backslash or paren:
            return m.group(0)[1:]
        if name:
            return values.get(name, "")
        return m.group(0)

    return patterns.expand_var.sub(_replace, text)
