from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import MutableMapping

import pyarrow.fs as fs

from ..sources import read_source, resolve_filesystem_and_path
from ..types import DEFAULT_SOURCE, Source

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DotenvResult:
    values: dict[str, str]
    path: Path
    # Keys actually written into the target environment.
    applied: tuple[str, ...] = ()


def load_dotenv(
    path: Source = DEFAULT_SOURCE,
    *,
    override: bool = False,
    environ: MutableMapping[str, str] | None = None,
    filesystem: fs.FileSystem | None = None,
) -> DotenvResult:
    """Load a `.env` file into `os.environ` (or `environ` when given).

    - existing variables are kept unless `override` is set
    - a missing file is not an error and loads nothing
    - malformed lines and unreadable files raise `FormatError` / `ReadError`
    """

    p = Path(path)
    target = os.environ if environ is None else environ

    resolved_fs, resolved_path = resolve_filesystem_and_path(path, filesystem)
    if resolved_fs.get_file_info(resolved_path).type == fs.FileType.NotFound:
        logger.debug("%s not found, nothing loaded", p)
        return DotenvResult(values={}, path=p)

    values = read_source(path, filesystem=filesystem)

    applied: list[str] = []
    for key, val in values.items():
        if override or key not in target:
            target[key] = val
            applied.append(key)

    logger.debug("applied %d of %d variables from %s", len(applied), len(values), p)
    return DotenvResult(values=values, path=p, applied=tuple(applied))
