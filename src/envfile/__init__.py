"""envfile: dotenv parsing and environment lookup.

Parsing is pure (`envfile.parsing`); reading files goes through a
`pyarrow.fs` filesystem (`envfile.sources`); `envfile.merge` reconciles file
variables with the process environment.
"""

from .errors import DotenvError, FormatError, ReadError
from .merge import get, get_from, merge_all, select_variables, system_variables
from .parsing import parse_lines, parse_stream, parse_text
from .sources import read_source, read_sources
from .types import DEFAULT_SOURCE, GetConfig, LookupResult
from .util import DotenvResult, load_dotenv

__all__ = [
    "DEFAULT_SOURCE",
    "GetConfig",
    "LookupResult",
    "DotenvError",
    "FormatError",
    "ReadError",
    "get",
    "get_from",
    "merge_all",
    "select_variables",
    "system_variables",
    "parse_lines",
    "parse_stream",
    "parse_text",
    "read_source",
    "read_sources",
    "DotenvResult",
    "load_dotenv",
]
