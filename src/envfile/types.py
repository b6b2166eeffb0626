from __future__ import annotations

import os
from dataclasses import dataclass, field

Source = str | os.PathLike[str]

DEFAULT_SOURCE = ".env"


@dataclass(frozen=True, slots=True)
class GetConfig:
    """Lookup settings.

    - `variables`: names to look up; empty means every variable (full-set mode).
    - `sources`: files to read, in order; empty means `.env`.
    - `prioritize_system`: system values win over file values on collision.
    - `strict`: propagate read/format errors. When False the partial mapping
      is used and the error is only logged.
    """

    variables: tuple[str, ...] = ()
    sources: Source | tuple[Source, ...] = ()
    prioritize_system: bool = False
    strict: bool = True


@dataclass(frozen=True, slots=True)
class LookupResult:
    values: dict[str, str]
    # Requested names found in no source (selective mode only).
    not_found: list[str] = field(default_factory=list)
