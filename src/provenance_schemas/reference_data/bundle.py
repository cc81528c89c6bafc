"""Process-wide reference data, built once and passed explicitly into validation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog

from provenance_schemas.constants import DEFAULT_LOCALITY_COUNTRY
from provenance_schemas.reference_data.localities import (
    LocalityTable,
    ReferenceDataError,
    load_locality_table,
)


@dataclass(frozen=True, slots=True, eq=False)
class ReferenceData:
    """Read-only lookup tables keyed by ISO 3166-1 alpha-2 country code."""

    localities: Mapping[str, LocalityTable]

    def __post_init__(self) -> None:
        object.__setattr__(self, "localities", MappingProxyType(dict(self.localities)))

    @classmethod
    def of(cls, *tables: LocalityTable) -> ReferenceData:
        by_country: dict[str, LocalityTable] = {}
        for table in tables:
            if table.country_code in by_country:
                raise ReferenceDataError(
                    f"more than one locality table supplied for {table.country_code!r}"
                )
            by_country[table.country_code] = table
        return cls(localities=by_country)

    @property
    def countries(self) -> tuple[str, ...]:
        return tuple(sorted(self.localities))

    def locality_table(self, country_code: str) -> LocalityTable:
        table = self.localities.get(country_code)
        if table is None:
            raise ReferenceDataError(f"no locality table loaded for country {country_code!r}")
        return table


def load_reference_data(
    locality_paths: Sequence[str | Path] = (),
    *,
    logger: Any | None = None,
) -> ReferenceData:
    """Load locality tables from ``locality_paths`` plus the bundled default-country table.

    The bundled table is only added when none of ``locality_paths`` covers the default
    country.
    """

    log = logger if logger is not None else structlog.get_logger(__name__)
    tables = [load_locality_table(path, logger=log) for path in locality_paths]
    if all(table.country_code != DEFAULT_LOCALITY_COUNTRY for table in tables):
        tables.append(load_locality_table(country_code=DEFAULT_LOCALITY_COUNTRY, logger=log))
    reference = ReferenceData.of(*tables)
    log.info(
        "reference_data_loaded",
        countries=list(reference.countries),
        localities=sum(len(table) for table in tables),
    )
    return reference


__all__ = ["ReferenceData", "load_reference_data"]
