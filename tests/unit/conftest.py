"""
provenance-schemas — shared unit test fixtures

File: tests/unit/conftest.py
Last updated: 2026-10-19

Purpose
- Provide fresh, fully valid candidate records for every registered schema and the
  bundled reference data they are validated against.

Functional requirements
- Every fixture returns a new deep structure so tests can mutate it freely.
- NFT fixtures carry display names and attributes that agree with their data.
"""

from __future__ import annotations

from typing import Any

import pytest

from provenance_schemas.reference_data import ReferenceData, load_reference_data

HASH_A = "87f633634cc4b02f628685651f0a29b7bfa22a0bd841f725c6772dd00a58d489"
HASH_B = "a" * 64
HASH_C = "b" * 64
HASH_D = "c" * 64
HASH_E = "d" * 64
CONTRACT = "0x1234567890abcdef1234567890abcdef12345678"
WALLET = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"
TIMESTAMP = "2024-12-05T11:02:47.000Z"

# 2025-01-15 and 2025-01-14 at midnight UTC.
RETIREMENT_DATE_MS = 1736899200000
PURCHASE_DATE_MS = 1736812800000

PICK_UP_MS = 1733396567000
DROP_OFF_MS = 1733500000000

CARBON_METHODOLOGY = "AMS-III.F. | BOLD Carbon (CH₄) - SSC"
RECYCLING_METHODOLOGY = "AMS-III.F. | BOLD Recycling Credit"

UUIDS = (
    "ad44dd3f-f176-4b98-bf78-5ee6e77d0530",
    "3f1e5c2a-8b7d-4e6f-9a1b-2c3d4e5f6a7b",
    "b7c8d9e0-1f2a-4b3c-8d4e-5f6a7b8c9d0e",
    "0b1c2d3e-4f5a-4b6c-a7d8-9e0f1a2b3c4d",
    "7e8f9a0b-1c2d-4e3f-b4a5-6b7c8d9e0f1a",
    "c1d2e3f4-a5b6-4c7d-8e9f-0a1b2c3d4e5f",
    "d4e5f6a7-b8c9-4d0e-9f1a-2b3c4d5e6f7a",
    "e5f6a7b8-c9d0-4e1f-a2b3-c4d5e6f7a8b9",
)


def location(
    city: str = "Macapá", subdivision_code: str = "BR-AP", *, id_hash: str = HASH_B
) -> dict[str, Any]:
    return {
        "id_hash": id_hash,
        "city": city,
        "subdivision_code": subdivision_code,
        "country_code": "BR",
        "responsible_participant_id_hash": HASH_C,
        "coordinates": {"latitude": -0.02, "longitude": -51.06},
    }


def participants() -> list[dict[str, Any]]:
    return [
        {"id_hash": HASH_C, "name": "Enlatados Produção", "roles": ["Waste Generator"]},
        {"id_hash": HASH_D, "name": "Eco Reciclagem", "roles": ["Hauler", "Recycler"]},
    ]


def audit_rule(order: int, *, rule_id: str, slug: str) -> dict[str, Any]:
    return {
        "id": rule_id,
        "slug": slug,
        "name": f"Rule {order}",
        "description": "Ensures the MassID complies with this methodology requirement",
        "source_code_url": f"https://github.com/provenance/methodology-rules/blob/main/{slug}.ts",
        "execution_order": order,
    }


def rule_execution_result(order: int, *, execution_id: str, slug: str) -> dict[str, Any]:
    return {
        "rule_id": UUIDS[4 + order % 2],
        "rule_slug": slug,
        "rule_name": f"Rule {order}",
        "rule_description": "Ensures the MassID complies with this methodology requirement",
        "rule_source_code_url": (
            f"https://github.com/provenance/methodology-rules/blob/main/{slug}.ts"
        ),
        "rule_execution_order": order,
        "execution_id": execution_id,
        "execution_started_at": "2024-12-05T11:03:00.000Z",
        "execution_completed_at": "2024-12-05T11:03:02.000Z",
        "result": "PASSED",
        "rule_processor_checksum": f"sha256:{HASH_A}",
        "rule_source_code_version": "v1.4.0",
    }


def smart_contract() -> dict[str, Any]:
    return {"address": CONTRACT, "chain_id": 80002, "network_name": "Amoy"}


def attribute(trait_type: str, value: object, **extra: object) -> dict[str, Any]:
    return {"trait_type": trait_type, "value": value, **extra}


def _envelope(schema_type: str, path: str) -> dict[str, Any]:
    return {
        "$schema": f"https://schemas.provenance.dev/0.1.0/ipfs/{path}",
        "schema": {
            "hash": HASH_A,
            "type": schema_type,
            "version": "0.1.0",
            "ipfs_uri": f"ipfs://QmSchema/{path}",
        },
        "created_at": TIMESTAMP,
        "external_id": UUIDS[0],
        "external_url": f"https://explore.provenance.dev/document/{UUIDS[0]}",
        "original_content_hash": HASH_B,
        "content_hash": HASH_C,
    }


def _nft_envelope(
    schema_type: str,
    path: str,
    token_id: str,
    *,
    name: str,
    short_name: str,
    attributes: list[dict[str, Any]],
) -> dict[str, Any]:
    payload = _envelope(schema_type, path)
    payload.update(
        {
            "environment": {
                "blockchain_network": "testnet",
                "deployment": "development",
                "data_set_name": "TEST",
            },
            "blockchain": {
                "smart_contract_address": CONTRACT,
                "chain_id": 80002,
                "network_name": "Amoy",
                "token_id": token_id,
            },
            "name": name,
            "short_name": short_name,
            "description": f"{schema_type} issued for a verified waste mass",
            "image": f"ipfs://QmImage/{token_id}.png",
            "external_links": [
                {
                    "label": "Explorer",
                    "url": "https://explore.provenance.dev/",
                    "description": "Public explorer page for this record",
                }
            ],
            "attributes": attributes,
        }
    )
    return payload


def methodology_reference(name: str = CARBON_METHODOLOGY) -> dict[str, Any]:
    return {
        "external_id": UUIDS[1],
        "name": name,
        "version": "1.0.0",
        "external_url": "https://explore.provenance.dev/methodology",
        "ipfs_uri": "ipfs://QmMethodology",
    }


def mass_id_reference() -> dict[str, Any]:
    return {
        "external_id": UUIDS[3],
        "external_url": "https://explore.provenance.dev/mass-id",
        "ipfs_uri": "ipfs://QmMassID",
        "smart_contract_address": CONTRACT,
        "token_id": "456",
    }


def _certificate_data(summary: dict[str, Any], methodology_name: str) -> dict[str, Any]:
    return {
        "summary": summary,
        "methodology": methodology_reference(methodology_name),
        "audit": {
            "completed_at": TIMESTAMP,
            "external_id": UUIDS[2],
            "external_url": "https://explore.provenance.dev/audit",
            "result": "PASSED",
            "rules_executed": 21,
            "ipfs_uri": "ipfs://QmAudit",
        },
        "mass_id": mass_id_reference(),
        "waste_properties": {
            "type": "Organic",
            "subtype": "Food, Food Waste and Beverages",
            "net_weight_kg": 3000,
        },
        "origin_location": location(),
        "participants": participants(),
    }


def _source_attributes(
    methodology_name: str, credit_type: str, credit_amount: float
) -> list[dict[str, Any]]:
    return [
        attribute("Methodology", methodology_name),
        attribute("Credit Amount", credit_amount, display_type="number"),
        attribute("Credit Type", credit_type),
        attribute("Source Waste Type", "Organic"),
        attribute("Source Weight (kg)", 3000, display_type="number"),
        attribute("Origin City", "Macapá"),
        attribute("MassID", "#456"),
    ]


def prevented_emissions_calculation(result: float = 860.5) -> dict[str, Any]:
    return {
        "formula": "R = W × EF",
        "method": "UNFCCC AMS-III.F. avoided methane",
        "date": "2024-12-05",
        "values": [
            {"reference": "W", "value": 3000, "label": "Waste Weight (kg)"},
            {"reference": "EF", "value": 0.28683, "label": "Emission Factor"},
            {"reference": "R", "value": result, "label": "Prevented Emissions (kg CO₂e)"},
        ],
    }


def build_gas_id_record() -> dict[str, Any]:
    attributes = [
        attribute("Gas Type", "Methane (CH₄)"),
        attribute("CO₂e Prevented (kg)", 860.5, display_type="number"),
        *_source_attributes(CARBON_METHODOLOGY, "Carbon (CH₄)", 0.86),
    ]
    payload = _nft_envelope(
        "GasID",
        "gas-id/gas-id.schema.json",
        "123",
        name="GasID #123 • Methane • 0.86t CO₂e",
        short_name="GasID #123",
        attributes=attributes,
    )
    payload["data"] = _certificate_data(
        {
            "gas_type": "Methane (CH₄)",
            "credit_type": "Carbon (CH₄)",
            "credit_amount": 0.86,
            "prevented_co2e_kg": 860.5,
        },
        CARBON_METHODOLOGY,
    )
    payload["data"]["prevented_emissions_calculation"] = prevented_emissions_calculation()
    return payload


def build_recycled_id_record() -> dict[str, Any]:
    attributes = [
        attribute("Recycled Weight (kg)", 3000, display_type="number"),
        *_source_attributes(RECYCLING_METHODOLOGY, "Biowaste", 3.0),
    ]
    payload = _nft_envelope(
        "RecycledID",
        "recycled-id/recycled-id.schema.json",
        "124",
        name="RecycledID #124 • Organic • 3.0t Recycled",
        short_name="RecycledID #124",
        attributes=attributes,
    )
    payload["data"] = _certificate_data(
        {"recycled_mass_kg": 3000, "credit_type": "Biowaste", "credit_amount": 3.0},
        RECYCLING_METHODOLOGY,
    )
    return payload


def build_participant_rewards() -> dict[str, Any]:
    return {
        "distribution_basis": "Equal split between generator and recycler after discounts",
        "reward_allocations": [
            {
                "participant_id_hash": HASH_C,
                "role": "Waste Generator",
                "reward_percentage": 50,
                "discounts": [
                    {
                        "type": "large_business",
                        "percentage": 50,
                        "reason": "Generator exceeds the small business threshold",
                    }
                ],
                "effective_percentage": 25,
            },
            {
                "participant_id_hash": HASH_D,
                "role": "Recycler",
                "reward_percentage": 50,
                "effective_percentage": 75,
            },
        ],
        "distribution_notes": {
            "discounts_applied": ["Large business discount for the waste generator"],
            "redirected_rewards": "Discounted share redirected to the recycler",
        },
    }


def build_mass_id_record() -> dict[str, Any]:
    payload = _nft_envelope(
        "MassID",
        "mass-id/mass-id.schema.json",
        "456",
        name="MassID #456 • Organic • 3.0t",
        short_name="MassID #456",
        attributes=[
            attribute("Waste Type", "Organic"),
            attribute("Waste Subtype", "Food, Food Waste and Beverages"),
            attribute("Local Waste Classification ID", "20 01 08"),
            attribute("Weight (kg)", 3000, display_type="number"),
        ],
    )
    payload["data"] = {
        "waste_properties": {
            "type": "Organic",
            "subtype": "Food, Food Waste and Beverages",
            "local_classification": {
                "code": "20 01 08",
                "description": "Biodegradable kitchen and canteen waste",
                "system": "IBAMA",
            },
            "measurement_unit": "kg",
            "net_weight": 3000,
        },
        "locations": [location(), location("Jundiaí", "BR-SP", id_hash=HASH_E)],
        "participants": participants(),
        "chain_of_custody": {
            "events": [
                {
                    "event_id": UUIDS[4],
                    "event_name": "Pick-up",
                    "description": "Waste collected at the generator",
                    "timestamp": PICK_UP_MS,
                    "participant_id_hash": HASH_C,
                    "location_id_hash": HASH_B,
                    "weight": 3000,
                    "attributes": [
                        {"name": "Vehicle Type", "value": "Truck"},
                        {"name": "Pick-up Date", "value": PICK_UP_MS, "format": "DATE"},
                    ],
                    "attachments": [
                        {
                            "type": "Waste Transfer Note",
                            "document_number": "2353",
                            "reference": "ipfs://QmTransferNote",
                            "issue_date": PICK_UP_MS,
                            "issuer": "IBAMA",
                        }
                    ],
                },
                {
                    "event_id": UUIDS[5],
                    "event_name": "Drop-off",
                    "timestamp": DROP_OFF_MS,
                    "participant_id_hash": HASH_D,
                    "location_id_hash": HASH_E,
                    "weight": 3000,
                },
            ],
            "total_duration_minutes": 1724,
        },
        "geographic_data": {
            "from_location_id_hash": HASH_B,
            "to_location_id_hash": HASH_E,
            "first_reported_timestamp": PICK_UP_MS,
            "last_reported_timestamp": DROP_OFF_MS,
        },
    }
    return payload


def build_mass_id_audit_record() -> dict[str, Any]:
    payload = _envelope("MassID Audit", "mass-id-audit/mass-id-audit.schema.json")
    payload["data"] = {
        "methodology": methodology_reference(),
        "mass_id": mass_id_reference(),
        "gas_id": {
            "external_id": UUIDS[2],
            "token_id": "123",
            "external_url": "https://explore.provenance.dev/gas-id",
            "uri": "ipfs://QmGasID",
        },
        "audit_summary": {
            "started_at": "2024-12-05T11:02:50.000Z",
            "completed_at": "2024-12-05T11:04:12.000Z",
            "result": "PASSED",
        },
        "rule_execution_results": [
            rule_execution_result(1, execution_id=UUIDS[6], slug="waste-mass-is-unique"),
            rule_execution_result(2, execution_id=UUIDS[7], slug="no-conflicting-gas-id"),
        ],
    }
    return payload


def build_methodology_record() -> dict[str, Any]:
    payload = _envelope("Methodology", "methodology/methodology.schema.json")
    payload["data"] = {
        "name": CARBON_METHODOLOGY,
        "short_name": "BOLD Carbon (CH₄)",
        "slug": "bold-carbon-ch4",
        "version": "1.0.0",
        "description": (
            "Methodology for avoided methane emissions through composting of organic waste "
            "that would otherwise be disposed of in landfills."
        ),
        "revision_date": "2024-11-01",
        "publication_date": "2024-06-15",
        "methodology_pdf": "ipfs://QmPdf/methodology.pdf",
        "mass_id_audit_rules": [
            audit_rule(1, rule_id=UUIDS[4], slug="waste-mass-is-unique"),
            audit_rule(2, rule_id=UUIDS[5], slug="no-conflicting-gas-id"),
        ],
    }
    return payload


def build_credit_record() -> dict[str, Any]:
    payload = _envelope("Credit", "credit/credit.schema.json")
    payload.update(
        {
            "symbol": "C-CARB.CH4",
            "slug": "carbon-methane",
            "name": "BOLD Carbon (CH₄)",
            "decimals": 18,
            "image": "ipfs://QmCredit/carbon-methane.png",
            "description": (
                "One unit represents one tonne of CO₂ equivalent of methane emissions "
                "prevented by composting audited organic waste."
            ),
        }
    )
    return payload


def build_collection_record() -> dict[str, Any]:
    payload = _envelope("Collection", "collection/collection.schema.json")
    payload.update(
        {
            "name": "BOLD Cold Start - Jundiaí",
            "slug": "bold-cold-start-jundiai",
            "image": "ipfs://QmCollection/jundiai.png",
            "description": (
                "Certificates issued for organic waste diverted from landfill in Jundiaí "
                "during the first operating season of the program."
            ),
        }
    )
    return payload


def mass_id_with_contract() -> dict[str, Any]:
    return {**mass_id_reference(), "smart_contract": smart_contract()}


def _retired_certificate(
    token_id: str,
    certificate_type: str,
    *,
    symbol: str,
    credit_slug: str,
    total: float,
    retired: float,
) -> dict[str, Any]:
    return {
        "token_id": token_id,
        "type": certificate_type,
        "external_id": UUIDS[6],
        "external_url": f"https://explore.provenance.dev/certificate/{token_id}",
        "uri": f"ipfs://QmCertificate/{token_id}",
        "smart_contract": smart_contract(),
        "collection_slug": "bold-cold-start-jundiai",
        "total_amount": total,
        "retired_amount": retired,
        "credits_retired": [
            {
                "credit_symbol": symbol,
                "credit_slug": credit_slug,
                "amount": retired,
                "external_id": UUIDS[7],
                "external_url": "https://explore.provenance.dev/retired-credit",
            }
        ],
        "mass_id": mass_id_with_contract(),
    }


def _retired_credit(slug: str, symbol: str, amount: float) -> dict[str, Any]:
    return {
        "slug": slug,
        "symbol": symbol,
        "external_id": UUIDS[5],
        "external_url": f"https://explore.provenance.dev/credit/{slug}",
        "uri": f"ipfs://QmCredit/{slug}",
        "smart_contract": smart_contract(),
        "amount": amount,
    }


def identity(name: str = "Climate Action Corp") -> dict[str, Any]:
    return {
        "name": name,
        "external_id": UUIDS[5],
        "external_url": "https://explore.provenance.dev/beneficiary",
    }


def build_retirement_receipt() -> dict[str, Any]:
    payload = _nft_envelope(
        "CreditRetirementReceipt",
        "credit-retirement-receipt/credit-retirement-receipt.schema.json",
        "900",
        name="Credit Retirement Receipt #900 • 5.0 Credits Retired",
        short_name="Retirement Receipt #900",
        attributes=[
            attribute("Total Credits Retired", 5.0, display_type="number"),
            attribute("Certificates Retired", 2, display_type="number"),
            attribute("Beneficiary", "Climate Action Corp"),
            attribute("Retirement Date", RETIREMENT_DATE_MS, display_type="date"),
            attribute("C-CARB.CH4", 2.0, display_type="number"),
            attribute("C-BIOW", 3.0, display_type="number"),
        ],
    )
    payload["data"] = {
        "summary": {
            "total_retirement_amount": 5.0,
            "total_certificates": 2,
            "retirement_date": "2025-01-15",
            "credit_symbols": ["C-CARB.CH4", "C-BIOW"],
            "certificate_types": ["GasID", "RecycledID"],
            "collection_slugs": ["bold-cold-start-jundiai"],
        },
        "beneficiary": {"beneficiary_id": UUIDS[4], "identity": identity()},
        "credit_holder": {"wallet_address": WALLET},
        "collections": [
            {
                "slug": "bold-cold-start-jundiai",
                "external_id": UUIDS[6],
                "name": "BOLD Cold Start - Jundiaí",
                "external_url": "https://explore.provenance.dev/collection/jundiai",
                "uri": "ipfs://QmCollection",
                "amount": 5.0,
            }
        ],
        "credits": [
            _retired_credit("carbon-methane", "C-CARB.CH4", 2.0),
            _retired_credit("biowaste", "C-BIOW", 3.0),
        ],
        "certificates": [
            _retired_certificate(
                "123",
                "GasID",
                symbol="C-CARB.CH4",
                credit_slug="carbon-methane",
                total=2.0,
                retired=2.0,
            ),
            _retired_certificate(
                "124",
                "RecycledID",
                symbol="C-BIOW",
                credit_slug="biowaste",
                total=4.0,
                retired=3.0,
            ),
        ],
    }
    return payload


def _purchased_credit(
    slug: str, symbol: str, purchased: float, retired: float | None = None
) -> dict[str, Any]:
    credit = {
        "slug": slug,
        "symbol": symbol,
        "external_id": UUIDS[5],
        "external_url": f"https://explore.provenance.dev/credit/{slug}",
        "uri": f"ipfs://QmCredit/{slug}",
        "smart_contract": smart_contract(),
        "purchase_amount": purchased,
    }
    if retired is not None:
        credit["retirement_amount"] = retired
    return credit


def _purchased_certificate(
    token_id: str,
    certificate_type: str,
    *,
    credit_slug: str,
    total: float,
    purchased: float,
    retired: float,
) -> dict[str, Any]:
    return {
        "token_id": token_id,
        "type": certificate_type,
        "external_id": UUIDS[6],
        "external_url": f"https://explore.provenance.dev/certificate/{token_id}",
        "uri": f"ipfs://QmCertificate/{token_id}",
        "smart_contract": smart_contract(),
        "collection_slug": "bold-cold-start-jundiai",
        "total_amount": total,
        "purchased_amount": purchased,
        "retired_amount": retired,
        "credit_slug": credit_slug,
        "mass_id": mass_id_with_contract(),
    }


def build_purchase_receipt() -> dict[str, Any]:
    payload = _nft_envelope(
        "CreditPurchaseReceipt",
        "credit-purchase-receipt/credit-purchase-receipt.schema.json",
        "901",
        name="Credit Purchase Receipt #901 • 5.0 Credits Purchased",
        short_name="Purchase Receipt #901",
        attributes=[
            attribute("Total Credits Purchased", 5.0, display_type="number"),
            attribute("Total USDC Amount", 75.0, display_type="number"),
            attribute("Certificates Purchased", 2, display_type="number"),
            attribute("Receiver", "Climate Action Corp"),
            attribute("Purchase Date", PURCHASE_DATE_MS, display_type="date"),
            attribute("C-CARB.CH4", 2.0, display_type="number"),
            attribute("C-BIOW", 3.0, display_type="number"),
            attribute("BOLD Cold Start - Jundiaí", 5.0, display_type="number"),
        ],
    )
    payload["data"] = {
        "summary": {
            "total_usdc_amount": 75.0,
            "total_credits": 5.0,
            "total_certificates": 2,
            "purchase_date": "2025-01-14",
            "credit_symbols": ["C-CARB.CH4", "C-BIOW"],
            "certificate_types": ["GasID", "RecycledID"],
            "collection_slugs": ["bold-cold-start-jundiai"],
        },
        "parties": {
            "payer": WALLET,
            "receiver": {"wallet_address": WALLET, "identity": identity()},
        },
        "collections": [
            {
                "slug": "bold-cold-start-jundiai",
                "external_id": UUIDS[6],
                "name": "BOLD Cold Start - Jundiaí",
                "external_url": "https://explore.provenance.dev/collection/jundiai",
                "uri": "ipfs://QmCollection",
                "credit_amount": 5.0,
            }
        ],
        "credits": [
            _purchased_credit("carbon-methane", "C-CARB.CH4", 2.0, retired=2.0),
            _purchased_credit("biowaste", "C-BIOW", 3.0),
        ],
        "certificates": [
            _purchased_certificate(
                "123", "GasID", credit_slug="carbon-methane", total=2.0, purchased=2.0, retired=2.0
            ),
            _purchased_certificate(
                "124", "RecycledID", credit_slug="biowaste", total=4.0, purchased=3.0, retired=0.0
            ),
        ],
        "participant_rewards": [
            {
                "id_hash": HASH_C,
                "participant_name": "Enlatados Produção",
                "roles": ["Waste Generator"],
                "usdc_amount": 45.0,
            },
            {
                "id_hash": HASH_D,
                "participant_name": "Eco Reciclagem",
                "roles": ["Hauler", "Recycler"],
                "usdc_amount": 30.0,
            },
        ],
        "retirement": {
            "beneficiary_id": UUIDS[4],
            "retirement_receipt": {
                "token_id": "900",
                "external_id": UUIDS[7],
                "external_url": "https://explore.provenance.dev/retirement-receipt/900",
                "uri": "ipfs://QmRetirementReceipt/900",
                "smart_contract": smart_contract(),
            },
        },
    }
    return payload


@pytest.fixture(scope="session")
def reference() -> ReferenceData:
    return load_reference_data()


@pytest.fixture
def gas_id_record() -> dict[str, Any]:
    return build_gas_id_record()


@pytest.fixture
def recycled_id_record() -> dict[str, Any]:
    return build_recycled_id_record()


@pytest.fixture
def mass_id_record() -> dict[str, Any]:
    return build_mass_id_record()


@pytest.fixture
def mass_id_audit_record() -> dict[str, Any]:
    return build_mass_id_audit_record()


@pytest.fixture
def methodology_record() -> dict[str, Any]:
    return build_methodology_record()


@pytest.fixture
def credit_record() -> dict[str, Any]:
    return build_credit_record()


@pytest.fixture
def collection_record() -> dict[str, Any]:
    return build_collection_record()


@pytest.fixture
def retirement_receipt() -> dict[str, Any]:
    return build_retirement_receipt()


@pytest.fixture
def purchase_receipt() -> dict[str, Any]:
    return build_purchase_receipt()


@pytest.fixture
def origin_location() -> dict[str, Any]:
    return location()


@pytest.fixture
def audit_rules() -> list[dict[str, Any]]:
    return [
        audit_rule(1, rule_id=UUIDS[4], slug="first-rule"),
        audit_rule(2, rule_id=UUIDS[5], slug="second-rule"),
        audit_rule(3, rule_id=UUIDS[6], slug="third-rule"),
    ]


@pytest.fixture
def participant_rewards() -> dict[str, Any]:
    return build_participant_rewards()
