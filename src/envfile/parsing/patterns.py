from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Patterns:
    """Compiled matchers used by the line and value parsers.

    Built once (`DEFAULT_PATTERNS`) and passed down to the parsing functions.
    """

    single_quoted: re.Pattern[str] = field(default=re.compile(r"'(.*)'"))
    double_quoted: re.Pattern[str] = field(default=re.compile(r'"(.*)"'))
    escape: re.Pattern[str] = field(default=re.compile(r"\\."))
    # `\$` is left alone so the interpolator can tell it is escaped.
    unescape: re.Pattern[str] = field(default=re.compile(r"\\([^$])"))
    export: re.Pattern[str] = field(default=re.compile(r"\s*(?:export\s+)?(.*?)\s*", re.DOTALL | re.ASCII))
    # Groups: 1 backslash, 2 dollar, 3 open paren, 4 identifier.
    expand_var: re.Pattern[str] = field(default=re.compile(r"(\\)?(\$)(\()?\{?([A-Z0-9_]+)?\}?"))


DEFAULT_PATTERNS = Patterns()
