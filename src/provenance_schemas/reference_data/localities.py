"""
provenance-schemas — administrative locality tables.

File: src/provenance_schemas/reference_data/localities.py
Last updated: 2026-10-19

Purpose
- Load static locality datasets (name -> numeric id + subdivision code) and expose
  exact-match lookup for cross-field refiners.

What should be included in this file
- Immutable ``LocalityEntry`` / ``LocalityTable`` values.
- YAML loading via ``yaml.safe_load`` with dataset validation at load time.
- Duplicate-name reporting (first entry in dataset order wins).

Functional requirements
- Lookup is case- and diacritic-exact; no fuzzy matching.
- Malformed datasets raise ``ReferenceDataError`` before any validation runs.
- The bundled BR table is a partial dataset (capitals plus municipalities named by
  collections and published records); complete tables come from configuration.

Non-functional requirements
- Tables are never mutated after construction and are safe to share across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import structlog
import yaml

from provenance_schemas.validation import array, integer, record, string, validate

_DATA_PACKAGE = "provenance_schemas.reference_data"

_LOCALITY_ROW = (
    record("LocalityRow")
    .required("id", integer().minimum(1))
    .required("name", string().non_empty().max_length(100))
    .required(
        "subdivision",
        string().pattern(r"^[A-Z0-9]{1,3}$", "must be a subdivision suffix such as SP"),
    )
    .build()
)
_LOCALITY_DATASET = (
    record("LocalityDataset")
    .required(
        "country_code",
        string().pattern(r"^[A-Z]{2}$", "must be an ISO 3166-1 alpha-2 country code"),
    )
    .required("localities", array(_LOCALITY_ROW, min_items=1))
    .build()
)


class ReferenceDataError(ValueError):
    """Raised when reference data is malformed or was not supplied."""


@dataclass(frozen=True, slots=True)
class LocalityEntry:
    id: int
    name: str
    subdivision: str


class LocalityTable:
    """Immutable exact-name lookup; duplicate names resolve to the first entry."""

    __slots__ = ("_by_name", "_country_code", "_entries")

    def __init__(self, country_code: str, entries: Iterable[LocalityEntry]) -> None:
        self._country_code = country_code
        self._entries = tuple(entries)
        index: dict[str, LocalityEntry] = {}
        for entry in self._entries:
            index.setdefault(entry.name, entry)
        self._by_name: Mapping[str, LocalityEntry] = MappingProxyType(index)

    @property
    def country_code(self) -> str:
        return self._country_code

    @property
    def entries(self) -> tuple[LocalityEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LocalityEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def lookup(self, name: str) -> LocalityEntry | None:
        return self._by_name.get(name)

    def entries_named(self, name: str) -> tuple[LocalityEntry, ...]:
        return tuple(entry for entry in self._entries if entry.name == name)

    def duplicate_names(self) -> tuple[str, ...]:
        counts: dict[str, int] = {}
        for entry in self._entries:
            counts[entry.name] = counts.get(entry.name, 0) + 1
        return tuple(sorted(name for name, count in counts.items() if count > 1))

    @classmethod
    def from_mapping(cls, payload: object, *, source: str = "<memory>") -> LocalityTable:
        """Validate a decoded dataset and build a table from it."""

        result = validate(_LOCALITY_DATASET, payload)
        if not result.is_valid:
            rendered = "\n".join(f"- {line}" for line in result.messages())
            raise ReferenceDataError(f"{source}: invalid locality dataset:\n{rendered}")

        dataset = cast("dict[str, Any]", result.record)
        entries = [
            LocalityEntry(id=int(row["id"]), name=row["name"], subdivision=row["subdivision"])
            for row in dataset["localities"]
        ]
        seen_ids: set[int] = set()
        for index, entry in enumerate(entries):
            if entry.id in seen_ids:
                raise ReferenceDataError(
                    f"{source}: localities[{index}].id: duplicate locality id {entry.id}"
                )
            seen_ids.add(entry.id)
        return cls(dataset["country_code"], entries)


def bundled_locality_source(country_code: str) -> str:
    """Return the resource name of the dataset shipped for ``country_code``."""

    return f"data/{country_code.lower()}_localities.yaml"


def load_locality_table(
    path: str | Path | None = None,
    *,
    country_code: str = "BR",
    logger: Any | None = None,
) -> LocalityTable:
    """Load a locality table from ``path`` or from the bundled dataset."""

    log = logger if logger is not None else structlog.get_logger(__name__)
    if path is None:
        resource = resources.files(_DATA_PACKAGE).joinpath(bundled_locality_source(country_code))
        source = f"{_DATA_PACKAGE}/{bundled_locality_source(country_code)}"
        try:
            text = resource.read_text(encoding="utf-8")
        except OSError as exc:
            raise ReferenceDataError(f"no bundled locality dataset for {country_code!r}") from exc
    else:
        resolved = Path(path).expanduser()
        source = resolved.as_posix()
        try:
            text = resolved.read_text(encoding="utf-8")
        except OSError as exc:
            raise ReferenceDataError(f"unable to read locality dataset {source}: {exc}") from exc

    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ReferenceDataError(f"{source}: invalid YAML ({exc})") from exc

    table = LocalityTable.from_mapping(payload, source=source)
    duplicates = table.duplicate_names()
    if duplicates:
        log.warning(
            "duplicate_locality_names",
            source=source,
            country_code=table.country_code,
            names=list(duplicates),
            resolution="first_match",
        )
    return table


__all__ = [
    "LocalityEntry",
    "LocalityTable",
    "ReferenceDataError",
    "bundled_locality_source",
    "load_locality_table",
]
