"""
provenance-schemas — record validator entry point.

File: src/provenance_schemas/validator.py
Last updated: 2026-10-19

Purpose
- Bind loaded reference data to the schema registry so callers validate records
  by schema type name.

What should be included in this file
- ``RecordValidator`` with ``schema``, ``validate`` and ``assert_valid``.
- ``RecordValidator.from_config`` loading reference data per configuration.

Functional requirements
- Validation outcomes are logged as ``record_validated`` / ``record_rejected`` with
  the schema name and violation count.
- Unknown schema names raise ``UnknownSchemaError``.
- Construction fails with ``ReferenceDataError`` when a registered schema consults a
  locality table the supplied reference data does not carry.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from provenance_schemas.reference_data import (
    ReferenceData,
    ReferenceDataError,
    load_reference_data,
)
from provenance_schemas.schemas import SCHEMA_REGISTRY
from provenance_schemas.validation import (
    ObjectSchema,
    ValidationResult,
    reference_countries,
    validate,
)


class UnknownSchemaError(ValueError):
    """Raised when a schema name is not present in the registry."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"unknown schema {name!r}; expected one of: {', '.join(known)}")


class RecordValidator:
    """Validate candidate records against registered schemas with shared reference data."""

    __slots__ = ("_logger", "_reference", "_registry")

    def __init__(
        self,
        reference: ReferenceData,
        *,
        registry: Mapping[str, ObjectSchema] = SCHEMA_REGISTRY,
        logger: Any | None = None,
    ) -> None:
        missing = sorted(
            set().union(*(reference_countries(schema) for schema in registry.values()))
            - set(reference.countries)
        )
        if missing:
            raise ReferenceDataError(
                "reference data lacks locality tables required by the registry: "
                + ", ".join(missing)
            )
        self._reference = reference
        self._registry = registry
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        *,
        registry: Mapping[str, ObjectSchema] = SCHEMA_REGISTRY,
        logger: Any | None = None,
    ) -> RecordValidator:
        localities_path = config["reference_data"]["localities_path"]
        paths = (localities_path,) if localities_path else ()
        reference = load_reference_data(paths, logger=logger)
        return cls(reference, registry=registry, logger=logger)

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    @property
    def schema_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._registry))

    def schema(self, name: str) -> ObjectSchema:
        try:
            return self._registry[name]
        except KeyError:
            raise UnknownSchemaError(name, self.schema_names) from None

    def validate(self, schema: str | ObjectSchema, payload: object) -> ValidationResult:
        resolved = self.schema(schema) if isinstance(schema, str) else schema
        result = validate(resolved, payload, reference=self._reference)
        if result.is_valid:
            self._logger.debug("record_validated", schema=result.schema_name)
        else:
            self._logger.info(
                "record_rejected",
                schema=result.schema_name,
                violations=len(result.violations),
                first_violation=result.violations[0].render(),
            )
        return result

    def assert_valid(self, schema: str | ObjectSchema, payload: object) -> Any:
        """Return the validated deep copy or raise ``RecordValidationError``."""

        return self.validate(schema, payload).raise_for_violations()


__all__ = ["RecordValidator", "UnknownSchemaError"]
