from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

import pyarrow as pa
import pyarrow.fs as fs

from .errors import DotenvError, ReadError
from .parsing import parse_lines, split_lines
from .types import DEFAULT_SOURCE, Source

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def resolve_filesystem_and_path(source: Source, filesystem: fs.FileSystem | None = None) -> tuple[fs.FileSystem, str]:
    """Resolve a source name into (filesystem, path).

    - Without an explicit filesystem, the local filesystem is used and the path
      is made absolute (relative names are taken from the working directory).
    - With an explicit filesystem, the path is passed through as given.
    """

    s = os.fspath(source)
    if filesystem is not None:
        return filesystem, s

    return fs.LocalFileSystem(), Path(s).absolute().as_posix()


def read_lines(source: Source, *, filesystem: fs.FileSystem | None = None) -> list[str]:
    """Read a UTF-8 source into lines.

    Raises `ReadError` when the source is missing, is a directory, or cannot be
    read or decoded completely.
    """

    name = os.fspath(source)
    filesystem, path = resolve_filesystem_and_path(source, filesystem)

    try:
        info = filesystem.get_file_info(path)
        if info.type == fs.FileType.NotFound:
            raise ReadError(f"{name}: no such file", source=name)
        if info.type == fs.FileType.Directory:
            raise ReadError(f"{name}: is a directory", source=name)

        with filesystem.open_input_stream(path) as f:
            data = f.read()
        text = data.decode("utf-8")
    except (OSError, pa.ArrowException, UnicodeDecodeError) as exc:
        raise ReadError(f"{name}: {exc}", source=name) from exc

    return split_lines(text.removeprefix(_BOM))


def read_source(source: Source, *, filesystem: fs.FileSystem | None = None) -> dict[str, str]:
    """Read and parse a single dotenv source."""

    name = os.fspath(source)
    values = parse_lines(read_lines(source, filesystem=filesystem), source=name)
    logger.debug("parsed %d variables from %s", len(values), name)
    return values


def read_sources(sources: Source | Iterable[Source] = (), *, filesystem: fs.FileSystem | None = None) -> dict[str, str]:
    """Read sources in order and merge them; later sources win on shared keys.

    An empty `sources` reads `.env`. The first failing source stops the read;
    the raised error's `values` then holds the merge of the sources read
    completely before it.
    """

    if isinstance(sources, (str, os.PathLike)):
        sources = (sources,)
    names = list(sources) or [DEFAULT_SOURCE]
    merged: dict[str, str] = {}

    for source in names:
        try:
            values = read_source(source, filesystem=filesystem)
        except DotenvError as exc:
            exc.values = dict(merged)
            raise

        merged.update(values)

    return merged
