"""
provenance-schemas validation package public API.

File: src/provenance_schemas/validation/__init__.py
Last updated: 2026-10-19

Purpose
- Export the constraint builders, schema descriptions, the structural validator and
  the violation/result types.

Functional requirements
- ``validate`` returns a complete ``ValidationResult`` and never raises for bad input.

Non-functional requirements
- Keep import-time surface small and free of side effects.
"""

from provenance_schemas.validation.engine import schema_name, structural_key, validate
from provenance_schemas.validation.fields import (
    Check,
    CheckKind,
    FieldConstraint,
    FieldMeta,
    ValueType,
    boolean,
    integer,
    literal,
    number,
    scalar,
    string,
)
from provenance_schemas.validation.issues import (
    FieldPath,
    RecordValidationError,
    ValidationResult,
    Violation,
    ViolationKind,
    ViolationLog,
    format_path,
)
from provenance_schemas.validation.schema import (
    ArraySchema,
    FieldSpec,
    ObjectSchema,
    RecordBuilder,
    Refinement,
    SchemaNode,
    UniquenessRule,
    array,
    record,
    reference_countries,
    refinement,
    unique_by,
    unique_items,
)

__all__ = [
    "ArraySchema",
    "Check",
    "CheckKind",
    "FieldConstraint",
    "FieldMeta",
    "FieldPath",
    "FieldSpec",
    "ObjectSchema",
    "RecordBuilder",
    "RecordValidationError",
    "Refinement",
    "SchemaNode",
    "UniquenessRule",
    "ValidationResult",
    "ValueType",
    "Violation",
    "ViolationKind",
    "ViolationLog",
    "array",
    "boolean",
    "format_path",
    "integer",
    "literal",
    "number",
    "record",
    "reference_countries",
    "refinement",
    "scalar",
    "schema_name",
    "string",
    "structural_key",
    "unique_by",
    "unique_items",
    "validate",
]
