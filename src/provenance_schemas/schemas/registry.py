"""
provenance-schemas — schema registry.

File: src/provenance_schemas/schemas/registry.py
Last updated: 2026-10-19

Purpose
- Name every publishable record schema and the reusable component schemas.

Functional requirements
- Registries are read-only mappings keyed by the schema type name.
- ``SCHEMA_PATHS`` gives the published location of each record schema relative to
  ``schema.base_url``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from provenance_schemas.schemas.audit import (
    AUDIT_RULE_DEFINITION,
    AUDIT_RULE_DEFINITIONS,
    RULE_EXECUTION_RESULT,
)
from provenance_schemas.schemas.catalog import COLLECTION_RECORD, CREDIT_RECORD
from provenance_schemas.schemas.certificates import (
    GAS_ID_RECORD,
    PARTICIPANTS,
    RECYCLED_ID_RECORD,
    WASTE_PROPERTIES,
)
from provenance_schemas.schemas.entities import COORDINATES, LOCATION, PARTICIPANT
from provenance_schemas.schemas.mass_id import LOCATIONS, MASS_ID_RECORD
from provenance_schemas.schemas.mass_id_audit import MASS_ID_AUDIT_RECORD
from provenance_schemas.schemas.methodology import METHODOLOGY_RECORD
from provenance_schemas.schemas.purchases import CREDIT_PURCHASE_RECEIPT_RECORD
from provenance_schemas.schemas.receipts import (
    CREDIT_RETIREMENT_RECEIPT_RECORD,
    MASS_ID_REFERENCE_WITH_CONTRACT,
)
from provenance_schemas.schemas.records import (
    BASE_RECORD,
    BLOCKCHAIN_REFERENCE,
    EXTERNAL_LINK,
    NFT_ATTRIBUTE,
    NFT_RECORD,
    RECORD_ENVIRONMENT,
    SCHEMA_INFO,
    VIEWER_REFERENCE,
)
from provenance_schemas.schemas.references import (
    AUDIT_REFERENCE,
    CREDIT_REFERENCE,
    GAS_ID_REFERENCE,
    MASS_ID_REFERENCE,
    METHODOLOGY_REFERENCE,
    RECYCLED_ID_REFERENCE,
    SMART_CONTRACT,
)
from provenance_schemas.validation import ArraySchema, ObjectSchema

SCHEMA_REGISTRY: Final[Mapping[str, ObjectSchema]] = MappingProxyType(
    {
        "MassID": MASS_ID_RECORD,
        "MassID Audit": MASS_ID_AUDIT_RECORD,
        "GasID": GAS_ID_RECORD,
        "RecycledID": RECYCLED_ID_RECORD,
        "CreditPurchaseReceipt": CREDIT_PURCHASE_RECEIPT_RECORD,
        "CreditRetirementReceipt": CREDIT_RETIREMENT_RECEIPT_RECORD,
        "Methodology": METHODOLOGY_RECORD,
        "Credit": CREDIT_RECORD,
        "Collection": COLLECTION_RECORD,
    }
)

SCHEMA_PATHS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "MassID": "mass-id/mass-id.schema.json",
        "MassID Audit": "mass-id-audit/mass-id-audit.schema.json",
        "GasID": "gas-id/gas-id.schema.json",
        "RecycledID": "recycled-id/recycled-id.schema.json",
        "CreditPurchaseReceipt": (
            "credit-purchase-receipt/credit-purchase-receipt.schema.json"
        ),
        "CreditRetirementReceipt": (
            "credit-retirement-receipt/credit-retirement-receipt.schema.json"
        ),
        "Methodology": "methodology/methodology.schema.json",
        "Credit": "credit/credit.schema.json",
        "Collection": "collection/collection.schema.json",
    }
)

COMPONENT_SCHEMAS: Final[Mapping[str, ObjectSchema | ArraySchema]] = MappingProxyType(
    {
        "Coordinates": COORDINATES,
        "Location": LOCATION,
        "Locations": LOCATIONS,
        "Participant": PARTICIPANT,
        "Participants": PARTICIPANTS,
        "AuditReference": AUDIT_REFERENCE,
        "MethodologyReference": METHODOLOGY_REFERENCE,
        "MassIDReference": MASS_ID_REFERENCE,
        "MassIDReferenceWithContract": MASS_ID_REFERENCE_WITH_CONTRACT,
        "GasIDReference": GAS_ID_REFERENCE,
        "RecycledIDReference": RECYCLED_ID_REFERENCE,
        "CreditReference": CREDIT_REFERENCE,
        "SmartContract": SMART_CONTRACT,
        "AuditRuleDefinition": AUDIT_RULE_DEFINITION,
        "AuditRuleDefinitions": AUDIT_RULE_DEFINITIONS,
        "AuditRuleExecutionResult": RULE_EXECUTION_RESULT,
        "SchemaInfo": SCHEMA_INFO,
        "RecordEnvironment": RECORD_ENVIRONMENT,
        "ViewerReference": VIEWER_REFERENCE,
        "BaseRecord": BASE_RECORD,
        "BlockchainReference": BLOCKCHAIN_REFERENCE,
        "ExternalLink": EXTERNAL_LINK,
        "NftAttribute": NFT_ATTRIBUTE,
        "NftRecord": NFT_RECORD,
        "WasteProperties": WASTE_PROPERTIES,
    }
)

__all__ = ["COMPONENT_SCHEMAS", "SCHEMA_PATHS", "SCHEMA_REGISTRY"]
