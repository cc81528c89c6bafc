"""Methodology record tests."""

from __future__ import annotations

from typing import Any

from provenance_schemas.reference_data import ReferenceData
from provenance_schemas.schemas import METHODOLOGY_RECORD
from provenance_schemas.validation import validate


def test_methodology_round_trip(
    methodology_record: dict[str, Any], reference: ReferenceData
) -> None:
    result = validate(METHODOLOGY_RECORD, methodology_record, reference=reference)
    assert result.is_valid, result.messages()
    assert result.record == methodology_record


def test_methodology_is_not_an_nft(methodology_record: dict[str, Any]) -> None:
    methodology_record["blockchain"] = {"token_id": "1"}
    assert validate(METHODOLOGY_RECORD, methodology_record).messages() == (
        "blockchain: unknown field",
    )


def test_description_length(methodology_record: dict[str, Any]) -> None:
    methodology_record["data"]["description"] = "Too short"
    assert validate(METHODOLOGY_RECORD, methodology_record).messages() == (
        "data.description: must contain at least 50 character(s)",
    )


def test_audit_rules_must_be_ordered(methodology_record: dict[str, Any]) -> None:
    rules = methodology_record["data"]["mass_id_audit_rules"]
    rules.reverse()
    assert validate(METHODOLOGY_RECORD, methodology_record).messages() == (
        "data.mass_id_audit_rules[1].execution_order: rules must be sorted by "
        "execution_order; found 1 after 2",
    )


def test_audit_rule_source_must_be_github(methodology_record: dict[str, Any]) -> None:
    rule = methodology_record["data"]["mass_id_audit_rules"][0]
    rule["source_code_url"] = "https://gitlab.com/provenance/rules.ts"
    assert validate(METHODOLOGY_RECORD, methodology_record).messages() == (
        "data.mass_id_audit_rules[0].source_code_url: must be a GitHub URL",
    )


def test_audit_rules_must_not_be_empty(methodology_record: dict[str, Any]) -> None:
    methodology_record["data"]["mass_id_audit_rules"] = []
    assert validate(METHODOLOGY_RECORD, methodology_record).messages() == (
        "data.mass_id_audit_rules: must contain at least 1 item(s)",
    )
