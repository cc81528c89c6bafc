"""
provenance-schemas — reference entry schemas.

File: src/provenance_schemas/schemas/references.py
Last updated: 2026-10-19

Purpose
- Strict sub-records pointing at other systems of record: audits, methodologies,
  tokenized identities, credits and smart contracts.

Functional requirements
- Every reference kind carries an external identifier, an external URL and a
  content URI, and rejects undeclared keys at its own nested path.
"""

from __future__ import annotations

from typing import Final

from provenance_schemas.schemas.primitives import (
    AUDIT_RESULT,
    CHAIN_ID,
    CREDIT_TOKEN_SLUG,
    CREDIT_TOKEN_SYMBOL,
    EXTERNAL_ID,
    EXTERNAL_URL,
    IPFS_URI,
    ISO_TIMESTAMP,
    METHODOLOGY_NAME,
    NETWORK_NAME,
    NON_NEGATIVE_INTEGER,
    SEMANTIC_VERSION,
    SMART_CONTRACT_ADDRESS,
    TOKEN_ID,
)
from provenance_schemas.validation import ObjectSchema, record

AUDIT_REFERENCE: Final[ObjectSchema] = (
    record(
        "AuditReference",
        title="Audit Reference",
        description="Reference to an audit record",
    )
    .required(
        "completed_at",
        ISO_TIMESTAMP.describe(
            title="Audit Completion Date", description="Date when the audit was completed"
        ),
    )
    .required("external_id", EXTERNAL_ID.describe(title="Audit External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Audit External URL"))
    .required("result", AUDIT_RESULT)
    .required(
        "rules_executed",
        NON_NEGATIVE_INTEGER.describe(
            title="Rules Executed", description="Number of audit rules executed"
        ),
    )
    .required("ipfs_uri", IPFS_URI.describe(title="Audit IPFS URI"))
    .build()
)

METHODOLOGY_REFERENCE: Final[ObjectSchema] = (
    record(
        "MethodologyReference",
        title="Methodology Reference",
        description="Reference to the methodology record",
    )
    .required("external_id", EXTERNAL_ID.describe(title="Methodology External ID"))
    .required("name", METHODOLOGY_NAME)
    .required("version", SEMANTIC_VERSION.describe(title="Methodology Version"))
    .required("external_url", EXTERNAL_URL.describe(title="Methodology External URL"))
    .required("ipfs_uri", IPFS_URI.describe(title="Methodology IPFS URI"))
    .build()
)

TOKEN_REFERENCE: Final[ObjectSchema] = (
    record(
        "TokenReference",
        title="Token Reference",
        description="Common fields for references to tokenized records",
    )
    .required("external_id", EXTERNAL_ID)
    .required("external_url", EXTERNAL_URL)
    .required("ipfs_uri", IPFS_URI)
    .required("smart_contract_address", SMART_CONTRACT_ADDRESS)
    .build()
)

NFT_TOKEN_REFERENCE: Final[ObjectSchema] = (
    TOKEN_REFERENCE.extend(
        "NftTokenReference",
        title="NFT Token Reference",
        description="Reference to an NFT record, identified by token id",
    )
    .required("token_id", TOKEN_ID)
    .build()
)

MASS_ID_REFERENCE: Final[ObjectSchema] = NFT_TOKEN_REFERENCE.extend(
    "MassIDReference",
    title="MassID Reference",
    description="Reference to a MassID record",
).build()

RECYCLED_ID_REFERENCE: Final[ObjectSchema] = NFT_TOKEN_REFERENCE.extend(
    "RecycledIDReference",
    title="RecycledID Reference",
    description="Reference to a RecycledID record",
).build()

GAS_ID_REFERENCE: Final[ObjectSchema] = (
    record(
        "GasIDReference",
        title="GasID Reference",
        description="Reference to a GasID record",
    )
    .required("external_id", EXTERNAL_ID.describe(title="GasID External ID"))
    .required("token_id", TOKEN_ID.describe(title="GasID Token ID"))
    .required("external_url", EXTERNAL_URL.describe(title="GasID External URL"))
    .required("uri", IPFS_URI.describe(title="GasID URI"))
    .build()
)

CREDIT_REFERENCE: Final[ObjectSchema] = (
    TOKEN_REFERENCE.extend(
        "CreditReference",
        title="Credit Reference",
        description="Reference to a credit token",
    )
    .required("slug", CREDIT_TOKEN_SLUG)
    .required("symbol", CREDIT_TOKEN_SYMBOL)
    .build()
)

SMART_CONTRACT: Final[ObjectSchema] = (
    record(
        "SmartContract",
        title="Smart Contract",
        description="Smart contract details for on-chain references",
    )
    .required("address", SMART_CONTRACT_ADDRESS)
    .required("chain_id", CHAIN_ID)
    .required("network_name", NETWORK_NAME)
    .build()
)

__all__ = [
    "AUDIT_REFERENCE",
    "CREDIT_REFERENCE",
    "GAS_ID_REFERENCE",
    "MASS_ID_REFERENCE",
    "METHODOLOGY_REFERENCE",
    "NFT_TOKEN_REFERENCE",
    "RECYCLED_ID_REFERENCE",
    "SMART_CONTRACT",
    "TOKEN_REFERENCE",
]
