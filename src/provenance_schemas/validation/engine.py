"""
provenance-schemas — generic structural validator.

File: src/provenance_schemas/validation/engine.py
Last updated: 2026-10-19

Purpose
- Evaluate a schema description against a candidate record and return every
  violation found in one pass.

What should be included in this file
- Object evaluation: unknown keys, missing required fields, nested fields, refinements.
- Array evaluation: minimum size, items, uniqueness over valid items, refinements.
- Structural keys for uniqueness that keep booleans distinct from numbers.

Functional requirements
- Never raise for invalid input and never stop at the first violation.
- Refinements only run when every field they read is clean.
- Successful results carry a deep copy of the input.

Non-functional requirements
- Deterministic ordering: input order for unknown keys, declaration order for fields.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from provenance_schemas.validation.fields import FieldConstraint, json_type_name
from provenance_schemas.validation.issues import (
    FieldPath,
    ValidationResult,
    Violation,
    ViolationKind,
    ViolationLog,
)
from provenance_schemas.validation.schema import (
    ArraySchema,
    KeyFn,
    ObjectSchema,
    RefinementFn,
    SchemaNode,
)

if TYPE_CHECKING:
    from provenance_schemas.reference_data import ReferenceData


class _ViolationCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Violation] = []

    def add(self, path: FieldPath, message: str, kind: ViolationKind) -> None:
        self._items.append(Violation(path=path, message=message, kind=kind))

    def append(self, violation: Violation) -> None:
        self._items.append(violation)

    def items(self) -> tuple[Violation, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)


def validate(
    schema: SchemaNode,
    payload: object,
    *,
    reference: ReferenceData | None = None,
) -> ValidationResult:
    """Validate ``payload`` against ``schema`` and return structured violations."""

    collector = _ViolationCollector()
    _validate_node(schema, payload, (), collector, reference)
    violations = collector.items()
    name = schema_name(schema)
    if violations:
        return ValidationResult(schema_name=name, record=None, violations=violations)
    return ValidationResult(schema_name=name, record=copy.deepcopy(payload), violations=())


def schema_name(schema: SchemaNode) -> str:
    if isinstance(schema, ObjectSchema):
        return schema.name
    if isinstance(schema, ArraySchema):
        return f"array of {schema_name(schema.items)}"
    return schema.value_type.value


def structural_key(value: object) -> object:
    """Hashable key under JSON equality: ``1 == 1.0`` but ``true`` is not ``1``."""

    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    if isinstance(value, Mapping):
        members = frozenset((str(key), structural_key(item)) for key, item in value.items())
        return ("object", members)
    if isinstance(value, (list, tuple)):
        return ("array", tuple(structural_key(item) for item in value))
    return ("other", repr(value))


def _validate_node(
    schema: SchemaNode,
    value: object,
    path: FieldPath,
    collector: _ViolationCollector,
    reference: ReferenceData | None,
) -> bool:
    start = len(collector)
    if isinstance(schema, ObjectSchema):
        _validate_object(schema, value, path, collector, reference)
    elif isinstance(schema, ArraySchema):
        _validate_array(schema, value, path, collector, reference)
    elif isinstance(schema, FieldConstraint):
        violation = schema.evaluate(value)
        if violation is not None:
            collector.append(violation.relocated(path))
    else:
        raise TypeError(f"unsupported schema node: {type(schema).__name__}")
    return len(collector) == start


def _validate_object(
    schema: ObjectSchema,
    value: object,
    path: FieldPath,
    collector: _ViolationCollector,
    reference: ReferenceData | None,
) -> None:
    if not isinstance(value, Mapping):
        collector.add(path, f"expected object, got {json_type_name(value)}", ViolationKind.TYPE)
        return

    declared = set(schema.field_names)
    for key in value:
        if not isinstance(key, str):
            collector.add(
                path, f"object key must be string, got {type(key).__name__}", ViolationKind.TYPE
            )
            continue
        if schema.strict and key not in declared:
            collector.add((*path, key), "unknown field", ViolationKind.UNKNOWN)

    dirty: set[str] = set()
    for spec in schema.fields:
        field_path = (*path, spec.name)
        if spec.name not in value:
            if spec.required:
                collector.add(field_path, "missing required field", ViolationKind.MISSING)
                dirty.add(spec.name)
            continue
        if not _validate_node(spec.schema, value[spec.name], field_path, collector, reference):
            dirty.add(spec.name)

    for rule in schema.refinements:
        if rule.reads:
            if dirty.intersection(rule.reads):
                continue
        elif dirty:
            continue
        _apply_refinement(rule.apply, value, path, collector, reference)


def _validate_array(
    schema: ArraySchema,
    value: object,
    path: FieldPath,
    collector: _ViolationCollector,
    reference: ReferenceData | None,
) -> None:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        collector.add(path, f"expected array, got {json_type_name(value)}", ViolationKind.TYPE)
        return

    if len(value) < schema.min_items:
        collector.add(
            path, f"must contain at least {schema.min_items} item(s)", ViolationKind.VALUE
        )

    valid_items: list[object] = []
    for index, item in enumerate(value):
        if _validate_node(schema.items, item, (*path, index), collector, reference):
            valid_items.append(item)

    for rule in schema.uniqueness:
        if _has_duplicates(valid_items, rule.key):
            collector.add(path, rule.message, ViolationKind.UNIQUENESS)

    if len(valid_items) == len(value):
        for refinement in schema.refinements:
            _apply_refinement(refinement.apply, value, path, collector, reference)


def _has_duplicates(items: Sequence[object], key: KeyFn | None) -> bool:
    seen: set[object] = set()
    for item in items:
        derived = item if key is None else key(item)
        marker = structural_key(derived)
        if marker in seen:
            return True
        seen.add(marker)
    return False


def _apply_refinement(
    apply: RefinementFn,
    value: object,
    path: FieldPath,
    collector: _ViolationCollector,
    reference: ReferenceData | None,
) -> None:
    log = apply(value, ViolationLog(), reference)
    for violation in log:
        collector.append(violation.relocated(path))


__all__ = ["schema_name", "structural_key", "validate"]
