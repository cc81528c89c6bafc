"""
provenance-schemas — unit tests for MassID records

File: tests/unit/schemas/test_mass_id.py
Last updated: 2026-10-19

Purpose
- Validate MassID records: waste properties, locations, chain of custody and the
  geographic summary.

What this test file should cover
- Valid record round-trip.
- Missing nested fields and closed enumerations.
- Custody events reference declared participants and locations.
- Reported timestamps are ordered; locations are unique and locality-checked.
- Waste attributes mirror the data; the local classification attribute is optional.
"""

from __future__ import annotations

import copy
from typing import Any

from provenance_schemas.reference_data import ReferenceData
from provenance_schemas.schemas import MASS_ID_RECORD
from provenance_schemas.validation import validate


def _messages(mass_id: dict[str, Any], reference: ReferenceData) -> tuple[str, ...]:
    return validate(MASS_ID_RECORD, mass_id, reference=reference).messages()


def test_mass_id_round_trip(mass_id_record: dict[str, Any], reference: ReferenceData) -> None:
    original = copy.deepcopy(mass_id_record)
    result = validate(MASS_ID_RECORD, mass_id_record, reference=reference)
    assert result.is_valid, result.messages()
    assert result.record == original


def test_missing_chain_of_custody(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    del mass_id_record["data"]["chain_of_custody"]
    assert _messages(mass_id_record, reference) == (
        "data.chain_of_custody: missing required field",
    )


def test_missing_event_timestamp(mass_id_record: dict[str, Any], reference: ReferenceData) -> None:
    del mass_id_record["data"]["chain_of_custody"]["events"][1]["timestamp"]
    assert _messages(mass_id_record, reference) == (
        "data.chain_of_custody.events[1].timestamp: missing required field",
    )


def test_events_are_required(mass_id_record: dict[str, Any], reference: ReferenceData) -> None:
    mass_id_record["data"]["chain_of_custody"]["events"] = []
    assert _messages(mass_id_record, reference) == (
        "data.chain_of_custody.events: must contain at least 1 item(s)",
    )


def test_measurement_unit_is_closed(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    mass_id_record["data"]["waste_properties"]["measurement_unit"] = "lb"
    result = validate(MASS_ID_RECORD, mass_id_record, reference=reference)
    assert [item.dotted for item in result.violations] == [
        "data.waste_properties.measurement_unit"
    ]


def test_event_participant_must_be_declared(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    mass_id_record["data"]["chain_of_custody"]["events"][1]["participant_id_hash"] = "e" * 64
    assert _messages(mass_id_record, reference) == (
        "data.chain_of_custody.events[1].participant_id_hash: participant ID hashes in chain "
        "of custody events must exist in participants",
    )


def test_event_location_must_be_declared(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    mass_id_record["data"]["chain_of_custody"]["events"][0]["location_id_hash"] = "e" * 64
    assert _messages(mass_id_record, reference) == (
        "data.chain_of_custody.events[0].location_id_hash: location ID hashes in chain of "
        "custody events must exist in locations",
    )


def test_reported_timestamps_are_ordered(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    geographic = mass_id_record["data"]["geographic_data"]
    geographic["first_reported_timestamp"], geographic["last_reported_timestamp"] = (
        geographic["last_reported_timestamp"],
        geographic["first_reported_timestamp"],
    )
    assert _messages(mass_id_record, reference) == (
        "data.geographic_data.last_reported_timestamp: last_reported_timestamp must be "
        "greater than or equal to first_reported_timestamp",
    )


def test_equal_reported_timestamps_are_accepted(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    geographic = mass_id_record["data"]["geographic_data"]
    geographic["last_reported_timestamp"] = geographic["first_reported_timestamp"]
    assert _messages(mass_id_record, reference) == ()


def test_duplicate_location_id_hash(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    locations = mass_id_record["data"]["locations"]
    locations.append(copy.deepcopy(locations[0]))
    assert _messages(mass_id_record, reference) == (
        "data.locations: location id_hash values must be unique",
    )


def test_locations_are_locality_checked(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    mass_id_record["data"]["locations"][1]["subdivision_code"] = "BR-RS"
    assert _messages(mass_id_record, reference) == (
        "data.locations[1].subdivision_code: must match the subdivision code of the "
        "locality: BR-SP",
    )


def test_waste_subtype_attribute_mirrors_data(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    mass_id_record["data"]["waste_properties"]["subtype"] = "Tobacco"
    assert _messages(mass_id_record, reference) == (
        "attributes: Waste Subtype attribute must equal data.waste_properties.subtype",
    )


def test_local_classification_is_optional(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    del mass_id_record["data"]["waste_properties"]["local_classification"]
    mass_id_record["attributes"] = [
        item
        for item in mass_id_record["attributes"]
        if item["trait_type"] != "Local Waste Classification ID"
    ]
    assert _messages(mass_id_record, reference) == ()


def test_mass_id_name_carries_token_id(
    mass_id_record: dict[str, Any], reference: ReferenceData
) -> None:
    mass_id_record["short_name"] = "MassID #654"
    assert _messages(mass_id_record, reference) == (
        "short_name: token_id must match blockchain.token_id: 456",
    )
