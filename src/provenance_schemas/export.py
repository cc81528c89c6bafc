"""
provenance-schemas — JSON Schema export.

File: src/provenance_schemas/export.py
Last updated: 2026-10-19

Purpose
- Render schema descriptions as JSON Schema (draft 2020-12) documents for
  publication alongside the records they describe.

What should be included in this file
- ``to_json_schema`` for field constraints, object schemas and array schemas.
- ``build_schema_document`` adding ``$schema``, ``$id`` and ``version``.

Functional requirements
- Titles, descriptions and examples are carried over from schema metadata.
- Strict objects emit ``additionalProperties: false`` and their ``required`` list.
- Uniqueness rules emit ``uniqueItems`` or the ``x-unique-by`` extension; refinement
  names are listed under ``x-refinements``.

Non-functional requirements
- Pure: export never validates and never mutates the description.
"""

from __future__ import annotations

import re
from typing import Any, Final

from provenance_schemas.constants import JSON_SCHEMA_DIALECT
from provenance_schemas.validation import (
    ArraySchema,
    CheckKind,
    FieldConstraint,
    ObjectSchema,
    Refinement,
    SchemaNode,
    ValueType,
)

JsonSchema = dict[str, Any]

_SCALAR_TYPES: Final[list[str]] = ["string", "number", "boolean"]
_CHECK_KEYWORDS: Final[dict[CheckKind, str]] = {
    CheckKind.MIN_LENGTH: "minLength",
    CheckKind.MAX_LENGTH: "maxLength",
    CheckKind.MINIMUM: "minimum",
    CheckKind.EXCLUSIVE_MINIMUM: "exclusiveMinimum",
    CheckKind.MAXIMUM: "maximum",
    CheckKind.MULTIPLE_OF: "multipleOf",
}
_CHECK_FORMATS: Final[dict[CheckKind, str]] = {
    CheckKind.ISO_DATE: "date",
    CheckKind.ISO_DATETIME: "date-time",
    CheckKind.URL: "uri",
}


def to_json_schema(schema: SchemaNode) -> JsonSchema:
    """Render one schema node as a JSON Schema fragment."""

    if isinstance(schema, FieldConstraint):
        return _field_schema(schema)
    if isinstance(schema, ObjectSchema):
        return _object_schema(schema)
    if isinstance(schema, ArraySchema):
        return _array_schema(schema)
    raise TypeError(f"cannot export {type(schema).__name__} as JSON Schema")


def build_schema_document(
    schema: SchemaNode,
    *,
    schema_id: str,
    version: str,
) -> JsonSchema:
    """Top-level document for a published schema."""

    document: JsonSchema = {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": schema_id,
        "version": version,
    }
    document.update(to_json_schema(schema))
    return document


def anchored_pattern(pattern: str) -> str:
    """JSON Schema patterns search; field patterns must match the whole value."""

    if pattern.startswith("^") and pattern.endswith("$"):
        return pattern
    return f"^(?:{pattern})$"


def _field_schema(constraint: FieldConstraint) -> JsonSchema:
    node: JsonSchema = dict(constraint.meta.as_dict())
    if constraint.value_type is ValueType.SCALAR:
        node["type"] = list(_SCALAR_TYPES)
    else:
        node["type"] = constraint.value_type.value

    extra: list[JsonSchema] = []
    for check in constraint.checks:
        keyword, value = _check_keyword(check.kind, check.param)
        if keyword in node:
            extra.append({keyword: value})
        else:
            node[keyword] = value
    if extra:
        node["allOf"] = extra
    return node


def _check_keyword(kind: CheckKind, param: object) -> tuple[str, object]:
    if kind is CheckKind.ONE_OF:
        assert isinstance(param, tuple)
        if len(param) == 1:
            return "const", param[0]
        return "enum", list(param)
    if kind is CheckKind.PATTERN:
        assert isinstance(param, re.Pattern)
        return "pattern", anchored_pattern(param.pattern)
    if kind in _CHECK_FORMATS:
        return "format", _CHECK_FORMATS[kind]
    return _CHECK_KEYWORDS[kind], param


def _object_schema(schema: ObjectSchema) -> JsonSchema:
    node: JsonSchema = dict(schema.meta.as_dict())
    node["type"] = "object"
    node["properties"] = {spec.name: to_json_schema(spec.schema) for spec in schema.fields}
    required = list(schema.required_names)
    if required:
        node["required"] = required
    if schema.strict:
        node["additionalProperties"] = False
    _add_refinements(node, schema.refinements)
    return node


def _array_schema(schema: ArraySchema) -> JsonSchema:
    node: JsonSchema = dict(schema.meta.as_dict())
    node["type"] = "array"
    node["items"] = to_json_schema(schema.items)
    if schema.min_items:
        node["minItems"] = schema.min_items
    unique_by = [rule.label or "<key>" for rule in schema.uniqueness if rule.key is not None]
    if any(rule.key is None for rule in schema.uniqueness):
        node["uniqueItems"] = True
    if unique_by:
        node["x-unique-by"] = unique_by
    _add_refinements(node, schema.refinements)
    return node


def _add_refinements(node: JsonSchema, refinements: tuple[Refinement, ...]) -> None:
    if refinements:
        node["x-refinements"] = [rule.name for rule in refinements]


__all__ = ["JsonSchema", "anchored_pattern", "build_schema_document", "to_json_schema"]
