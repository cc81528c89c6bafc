"""Static reference datasets consulted by cross-field refiners."""

from provenance_schemas.reference_data.bundle import ReferenceData, load_reference_data
from provenance_schemas.reference_data.localities import (
    LocalityEntry,
    LocalityTable,
    ReferenceDataError,
    bundled_locality_source,
    load_locality_table,
)

__all__ = [
    "LocalityEntry",
    "LocalityTable",
    "ReferenceData",
    "ReferenceDataError",
    "bundled_locality_source",
    "load_locality_table",
    "load_reference_data",
]
