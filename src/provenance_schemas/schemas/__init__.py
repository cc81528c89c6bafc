"""Composite record schemas built from the validation primitives."""

from provenance_schemas.schemas.audit import AUDIT_RULE_DEFINITION, AUDIT_RULE_DEFINITIONS
from provenance_schemas.schemas.certificates import (
    GAS_ID_DATA,
    GAS_ID_RECORD,
    PARTICIPANTS,
    RECYCLED_ID_DATA,
    RECYCLED_ID_RECORD,
    WASTE_PROPERTIES,
)
from provenance_schemas.schemas.catalog import COLLECTION_RECORD, CREDIT_RECORD
from provenance_schemas.schemas.entities import COORDINATES, LOCATION, PARTICIPANT
from provenance_schemas.schemas.mass_id import MASS_ID_DATA, MASS_ID_RECORD
from provenance_schemas.schemas.mass_id_audit import MASS_ID_AUDIT_DATA, MASS_ID_AUDIT_RECORD
from provenance_schemas.schemas.methodology import METHODOLOGY_DATA, METHODOLOGY_RECORD
from provenance_schemas.schemas.purchases import (
    CREDIT_PURCHASE_RECEIPT_DATA,
    CREDIT_PURCHASE_RECEIPT_RECORD,
)
from provenance_schemas.schemas.receipts import (
    CREDIT_RETIREMENT_RECEIPT_DATA,
    CREDIT_RETIREMENT_RECEIPT_RECORD,
)
from provenance_schemas.schemas.records import (
    BASE_RECORD,
    BLOCKCHAIN_REFERENCE,
    EXTERNAL_LINK,
    NFT_ATTRIBUTE,
    NFT_RECORD,
    SCHEMA_INFO,
    display_names,
    schema_info_for,
)
from provenance_schemas.schemas.registry import COMPONENT_SCHEMAS, SCHEMA_PATHS, SCHEMA_REGISTRY

__all__ = [
    "AUDIT_RULE_DEFINITION",
    "AUDIT_RULE_DEFINITIONS",
    "BASE_RECORD",
    "BLOCKCHAIN_REFERENCE",
    "COLLECTION_RECORD",
    "COMPONENT_SCHEMAS",
    "COORDINATES",
    "CREDIT_PURCHASE_RECEIPT_DATA",
    "CREDIT_PURCHASE_RECEIPT_RECORD",
    "CREDIT_RECORD",
    "CREDIT_RETIREMENT_RECEIPT_DATA",
    "CREDIT_RETIREMENT_RECEIPT_RECORD",
    "EXTERNAL_LINK",
    "GAS_ID_DATA",
    "GAS_ID_RECORD",
    "LOCATION",
    "MASS_ID_AUDIT_DATA",
    "MASS_ID_AUDIT_RECORD",
    "MASS_ID_DATA",
    "MASS_ID_RECORD",
    "METHODOLOGY_DATA",
    "METHODOLOGY_RECORD",
    "NFT_ATTRIBUTE",
    "NFT_RECORD",
    "PARTICIPANT",
    "PARTICIPANTS",
    "RECYCLED_ID_DATA",
    "RECYCLED_ID_RECORD",
    "SCHEMA_INFO",
    "SCHEMA_PATHS",
    "SCHEMA_REGISTRY",
    "WASTE_PROPERTIES",
    "display_names",
    "schema_info_for",
]
