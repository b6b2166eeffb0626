from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import Iterable, Mapping

import pyarrow.fs as fs

from .errors import DotenvError
from .sources import read_sources
from .types import GetConfig, LookupResult, Source

logger = logging.getLogger(__name__)


def system_variables(environ: Mapping[str, str] | Iterable[str] | None = None) -> dict[str, str]:
    """Snapshot the process environment.

    `environ` may be a mapping, or `NAME=value` entries as found in a raw
    process environment block. Defaults to `os.environ`.
    """

    if environ is None:
        return dict(os.environ)
    if isinstance(environ, Mapping):
        return dict(environ)

    out: dict[str, str] = {}
    for entry in environ:
        name, _, value = entry.partition("=")
        out[name] = value
    return out


def merge_all(
    file_values: Mapping[str, str],
    system: Mapping[str, str],
    *,
    prioritize_system: bool = False,
) -> dict[str, str]:
    """Union of file and system variables.

    On a collision the file value wins unless `prioritize_system` is set.
    """

    merged = dict(file_values)
    for name, value in system.items():
        if prioritize_system or name not in merged:
            merged[name] = value
    return merged


def select_variables(
    names: Iterable[str],
    file_values: Mapping[str, str],
    system: Mapping[str, str],
    *,
    prioritize_system: bool = False,
) -> LookupResult:
    """Resolve each requested name against the system and file variables.

    A system variable set to an empty string counts as absent: it is neither
    returned nor does it satisfy the lookup on its own.
    """

    values: dict[str, str] = {}
    not_found: list[str] = []

    for name in names:
        found = False
        sys_value = system.get(name, "")
        if sys_value != "":
            values[name] = sys_value
            if prioritize_system:
                continue
            found = True

        if name in file_values:
            values[name] = file_values[name]
            continue

        if not found:
            logger.debug("variable %s not found", name)
            not_found.append(name)

    return LookupResult(values=values, not_found=not_found)


def get(
    config: GetConfig | None = None,
    *,
    environ: Mapping[str, str] | Iterable[str] | None = None,
    filesystem: fs.FileSystem | None = None,
) -> LookupResult:
    """Look up variables from dotenv sources and the process environment.

    With no `config.variables`, every variable from both places is returned
    (full-set mode). Otherwise only the requested names are resolved and the
    ones found nowhere are listed in `LookupResult.not_found`.
    """

    cfg = config or GetConfig()

    try:
        file_values = read_sources(cfg.sources, filesystem=filesystem)
    except DotenvError as exc:
        if cfg.strict:
            raise
        logger.warning("continuing with %d variables after error: %s", len(exc.values), exc)
        file_values = exc.values

    system = system_variables(environ)

    if not cfg.variables:
        logger.debug("full-set lookup (%d file variables)", len(file_values))
        return LookupResult(values=merge_all(file_values, system, prioritize_system=cfg.prioritize_system))

    logger.debug("selective lookup of %d variables", len(cfg.variables))
    return select_variables(cfg.variables, file_values, system, prioritize_system=cfg.prioritize_system)


def get_from(
    sources: Source | Iterable[Source],
    config: GetConfig | None = None,
    *,
    environ: Mapping[str, str] | Iterable[str] | None = None,
    filesystem: fs.FileSystem | None = None,
) -> LookupResult:
    """Same as `get()`, reading the given sources instead of `config.sources`."""

    if isinstance(sources, (str, os.PathLike)):
        sources = (sources,)
    cfg = replace(config or GetConfig(), sources=tuple(sources))
    return get(cfg, environ=environ, filesystem=filesystem)
