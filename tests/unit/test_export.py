"""
provenance-schemas — unit tests for JSON Schema export

File: tests/unit/test_export.py
Last updated: 2026-10-19

What this test file should cover
- Leaf constraints map to JSON Schema keywords and formats.
- Objects carry properties, required lists and ``additionalProperties: false``.
- Arrays carry ``minItems``, ``uniqueItems`` and the ``x-unique-by`` extension.
- Registered records export to serializable documents.
"""

from __future__ import annotations

import json

import pytest

from provenance_schemas.constants import JSON_SCHEMA_DIALECT
from provenance_schemas.export import anchored_pattern, build_schema_document, to_json_schema
from provenance_schemas.schemas import PARTICIPANT, PARTICIPANTS, SCHEMA_REGISTRY
from provenance_schemas.validation import (
    integer,
    literal,
    number,
    record,
    scalar,
    string,
    unique_items,
)


def test_string_checks_and_metadata() -> None:
    constraint = (
        string()
        .non_empty()
        .max_length(10)
        .pattern(r"[a-z]+")
        .describe(title="Name", description="Lowercase name", examples=["abc"])
    )
    assert to_json_schema(constraint) == {
        "title": "Name",
        "description": "Lowercase name",
        "examples": ["abc"],
        "type": "string",
        "minLength": 1,
        "maxLength": 10,
        "pattern": "^(?:[a-z]+)$",
    }


def test_number_bounds() -> None:
    constraint = number().exclusive_minimum(0).maximum(90).multiple_of(0.001)
    assert to_json_schema(constraint) == {
        "type": "number",
        "exclusiveMinimum": 0,
        "maximum": 90,
        "multipleOf": 0.001,
    }


def test_formats() -> None:
    assert to_json_schema(string().iso_date())["format"] == "date"
    assert to_json_schema(string().iso_datetime())["format"] == "date-time"
    assert to_json_schema(string().url())["format"] == "uri"


def test_literals_export_const_or_enum() -> None:
    assert to_json_schema(literal("GasID")) == {"type": "string", "const": "GasID"}
    assert to_json_schema(literal(137, 80002)) == {"type": "integer", "enum": [137, 80002]}
    assert to_json_schema(scalar())["type"] == ["string", "number", "boolean"]


def test_repeated_keyword_moves_to_all_of() -> None:
    constraint = string().pattern(r"^https://.*$").pattern(r"^.*\.ts$")
    assert to_json_schema(constraint) == {
        "type": "string",
        "pattern": "^https://.*$",
        "allOf": [{"pattern": r"^.*\.ts$"}],
    }


def test_anchored_pattern() -> None:
    assert anchored_pattern("^[a-z]$") == "^[a-z]$"
    assert anchored_pattern("[a-z]") == "^(?:[a-z])$"


def test_object_schema() -> None:
    schema = (
        record("Point", title="Point")
        .required("x", integer())
        .optional("label", string())
        .build()
    )
    assert to_json_schema(schema) == {
        "title": "Point",
        "type": "object",
        "properties": {"x": {"type": "integer"}, "label": {"type": "string"}},
        "required": ["x"],
        "additionalProperties": False,
    }


def test_non_strict_object_allows_additional_properties() -> None:
    exported = to_json_schema(record("Open", strict=False).build())
    assert exported == {"type": "object", "properties": {}}


def test_array_uniqueness_extensions() -> None:
    assert to_json_schema(unique_items(string(), "must be unique").min(1)) == {
        "type": "array",
        "items": {"type": "string"},
        "minItems": 1,
        "uniqueItems": True,
    }
    exported = to_json_schema(PARTICIPANTS)
    assert exported["x-unique-by"] == ["id_hash"]
    assert exported["items"] == to_json_schema(PARTICIPANT)


def test_refinements_are_listed() -> None:
    exported = to_json_schema(SCHEMA_REGISTRY["CreditRetirementReceipt"])
    data = exported["properties"]["data"]
    assert "retirement_amounts_balance" in data["x-refinements"]
    assert exported["x-refinements"][:3] == [
        "environment_matches_blockchain",
        "token_id_in_name[name]",
        "token_id_in_name[short_name]",
    ]
    assert "attribute_matches[Beneficiary]" in exported["x-refinements"]
    assert "attributes_for_items[data.credits]" in exported["x-refinements"]


def test_schema_document() -> None:
    document = build_schema_document(
        SCHEMA_REGISTRY["GasID"],
        schema_id="https://schemas.provenance.dev/0.1.0/ipfs/gas-id/gas-id.schema.json",
        version="0.1.0",
    )
    assert document["$schema"] == JSON_SCHEMA_DIALECT
    assert document["$id"].endswith("gas-id.schema.json")
    assert document["version"] == "0.1.0"
    assert document["type"] == "object"
    assert document["properties"]["schema"]["properties"]["type"]["const"] == "GasID"


@pytest.mark.parametrize("name", sorted(SCHEMA_REGISTRY))
def test_registered_records_are_serializable(name: str) -> None:
    exported = to_json_schema(SCHEMA_REGISTRY[name])
    assert json.loads(json.dumps(exported, sort_keys=True)) == exported


def test_unknown_node_type_is_rejected() -> None:
    with pytest.raises(TypeError, match="cannot export dict"):
        to_json_schema({"type": "object"})  # type: ignore[arg-type]
