"""provenance-schemas: constraint validation for certification records."""

from provenance_schemas.reference_data import (
    ReferenceData,
    ReferenceDataError,
    load_reference_data,
)
from provenance_schemas.schemas import COMPONENT_SCHEMAS, SCHEMA_REGISTRY
from provenance_schemas.validation import (
    RecordValidationError,
    ValidationResult,
    Violation,
    ViolationKind,
    validate,
)
from provenance_schemas.validator import RecordValidator, UnknownSchemaError

__version__ = "0.1.0"

__all__ = [
    "COMPONENT_SCHEMAS",
    "RecordValidationError",
    "RecordValidator",
    "ReferenceData",
    "ReferenceDataError",
    "SCHEMA_REGISTRY",
    "UnknownSchemaError",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "__version__",
    "load_reference_data",
    "validate",
]
