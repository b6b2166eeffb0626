"""Dotenv line and value parsing.

Everything here is pure: no I/O and no environment access. Source reading
lives in `envfile.sources`.
"""

from .document import parse_lines, parse_stream, parse_text, split_lines
from .lines import is_ignored_line, parse_line, remove_comments, split_line
from .patterns import DEFAULT_PATTERNS, Patterns
from .values import expand_variables, parse_value

__all__ = [
    "DEFAULT_PATTERNS",
    "Patterns",
    "parse_lines",
    "parse_stream",
    "parse_text",
    "split_lines",
    "is_ignored_line",
    "parse_line",
    "remove_comments",
    "split_line",
    "expand_variables",
    "parse_value",
]
