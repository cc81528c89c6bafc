"""
provenance-schemas — base and NFT record envelopes.

File: src/provenance_schemas/schemas/records.py
Last updated: 2026-10-19

Purpose
- Common envelope shared by every published record (schema info, hashes,
  environment) and the NFT-specific envelope (blockchain anchor, links, attributes).

What should be included in this file
- SchemaInfo, RecordEnvironment, ViewerReference and the base record.
- BlockchainReference with the supported network pair check.
- ExternalLink and NftAttribute collections unique by url / trait_type.
- ``schema_info_for`` to pin the schema type of a concrete record kind.
- ``display_names`` to pin formatted NFT names that carry the token id.

Functional requirements
- The environment/blockchain consistency check attaches to the NFT envelope, the
  narrowest schema owning both fields.
"""

from __future__ import annotations

import re
from typing import Final

from provenance_schemas.metadata_refiners import token_id_in_name
from provenance_schemas.refiners import environment_matches_blockchain, supported_network_pair
from provenance_schemas.schemas.primitives import (
    CHAIN_ID,
    EXTERNAL_ID,
    EXTERNAL_URL,
    HEX_COLOR,
    IPFS_URI,
    ISO_TIMESTAMP,
    NETWORK_NAME,
    NFT_SCHEMA_TYPE,
    NON_EMPTY_STRING,
    NON_NEGATIVE_FLOAT,
    RECORD_SCHEMA_TYPE,
    SEMANTIC_VERSION,
    SHA256_HASH,
    SMART_CONTRACT_ADDRESS,
    TOKEN_ID,
)
from provenance_schemas.validation import (
    ObjectSchema,
    RecordBuilder,
    literal,
    record,
    scalar,
    string,
    unique_by,
)

SCHEMA_INFO: Final[ObjectSchema] = (
    record(
        "SchemaInfo",
        title="Schema Information",
        description="Information about the schema used to validate this record",
    )
    .required(
        "hash",
        SHA256_HASH.describe(
            title="Schema Hash",
            description="SHA-256 hash of the JSON Schema this record was validated against",
        ),
    )
    .required("type", RECORD_SCHEMA_TYPE)
    .required("version", SEMANTIC_VERSION.describe(title="Schema Version"))
    .required("ipfs_uri", IPFS_URI.describe(title="Schema IPFS URI"))
    .build()
)

RECORD_ENVIRONMENT: Final[ObjectSchema] = (
    record(
        "RecordEnvironment",
        title="Record Environment",
        description="Environment information for the record",
    )
    .required(
        "blockchain_network",
        literal("mainnet", "testnet").describe(title="Blockchain Network"),
    )
    .required(
        "deployment",
        literal("production", "development", "testing").describe(title="Deployment Environment"),
    )
    .required("data_set_name", literal("TEST", "PROD").describe(title="Data Set Name"))
    .build()
)

VIEWER_REFERENCE: Final[ObjectSchema] = (
    record(
        "ViewerReference",
        title="Metadata Viewer Reference",
        description="References to the metadata viewer build",
    )
    .required("ipfs_uri", IPFS_URI.describe(title="Viewer IPFS URI"))
    .required("integrity_hash", SHA256_HASH.describe(title="Viewer Integrity Hash"))
    .build()
)

CUSTOM_DATA: Final[ObjectSchema] = record(
    "CustomData",
    title="Custom Data",
    description="Custom data block that includes the record's data",
    strict=False,
).build()

BASE_RECORD: Final[ObjectSchema] = (
    record(
        "BaseRecord",
        title="Base IPFS Record",
        description="Base fields for all records stored as content-addressed documents",
    )
    .required(
        "$schema",
        string().url("must be a valid URI").describe(title="JSON Schema URI"),
    )
    .required("schema", SCHEMA_INFO)
    .required("created_at", ISO_TIMESTAMP.describe(title="Created At"))
    .required("external_id", EXTERNAL_ID)
    .required("external_url", EXTERNAL_URL)
    .required(
        "original_content_hash",
        SHA256_HASH.describe(
            title="Original Content Hash",
            description="SHA-256 hash of the original JSON content before validation",
        ),
    )
    .required(
        "content_hash",
        SHA256_HASH.describe(
            title="Content Hash",
            description="SHA-256 hash of the canonicalized JSON after validation",
        ),
    )
    .optional("viewer_reference", VIEWER_REFERENCE)
    .optional("environment", RECORD_ENVIRONMENT)
    .optional("data", CUSTOM_DATA)
    .build()
)

BLOCKCHAIN_REFERENCE: Final[ObjectSchema] = (
    record(
        "BlockchainReference",
        title="Blockchain Information",
        description="Blockchain-specific information for the NFT",
    )
    .required("smart_contract_address", SMART_CONTRACT_ADDRESS)
    .required("chain_id", CHAIN_ID)
    .required("network_name", NETWORK_NAME)
    .required("token_id", TOKEN_ID.describe(description="NFT token ID"))
    .refine(supported_network_pair())
    .build()
)

EXTERNAL_LINK: Final[ObjectSchema] = (
    record(
        "ExternalLink",
        title="External Link",
        description="External link with label and description",
    )
    .required("label", NON_EMPTY_STRING.max_length(50).describe(title="Link Label"))
    .required("url", EXTERNAL_URL.describe(title="Link URL"))
    .optional(
        "description",
        string().min_length(10).max_length(100).describe(title="Link Description"),
    )
    .build()
)

NFT_ATTRIBUTE: Final[ObjectSchema] = (
    record(
        "NftAttribute",
        title="NFT Attribute",
        description="NFT attribute or trait with type and value",
    )
    .required("trait_type", NON_EMPTY_STRING.max_length(50).describe(title="Trait Type"))
    .required("value", scalar().describe(title="Trait Value"))
    .optional(
        "display_type",
        literal("number", "date", "boost_number", "boost_percentage").describe(
            title="Display Type"
        ),
    )
    .optional("max_value", NON_NEGATIVE_FLOAT.describe(title="Max Value"))
    .build()
)


def schema_info_for(record_type: str) -> ObjectSchema:
    """SchemaInfo whose ``type`` is pinned to ``record_type``."""

    return (
        SCHEMA_INFO.extend(f"{record_type.replace(' ', '')}SchemaInfo")
        .required(
            "type",
            literal(record_type).describe(
                title="Schema Type", description=f"Always {record_type} for this record"
            ),
        )
        .build()
    )


NFT_RECORD: Final[ObjectSchema] = (
    BASE_RECORD.extend(
        "NftRecord",
        title="NFT IPFS Record",
        description="NFT-specific fields for content-addressed records",
    )
    .required(
        "schema",
        SCHEMA_INFO.extend("NftSchemaInfo").required("type", NFT_SCHEMA_TYPE).build(),
    )
    .required("blockchain", BLOCKCHAIN_REFERENCE)
    .required(
        "name",
        NON_EMPTY_STRING.max_length(100).describe(
            title="NFT Name", examples=["MassID #123 • Organic • 3.0t"]
        ),
    )
    .required(
        "short_name",
        NON_EMPTY_STRING.max_length(50).describe(title="Short Name", examples=["MassID #123"]),
    )
    .required("description", NON_EMPTY_STRING.max_length(500).describe(title="Description"))
    .required("image", IPFS_URI.describe(title="Image URI"))
    .optional("background_color", HEX_COLOR)
    .optional("animation_url", IPFS_URI.describe(title="Animation URL"))
    .optional(
        "external_links",
        unique_by(
            EXTERNAL_LINK,
            lambda link: link["url"],
            "external link URLs must be unique",
            label="url",
        ).describe(title="External Links"),
    )
    .required(
        "attributes",
        unique_by(
            NFT_ATTRIBUTE,
            lambda attribute: attribute["trait_type"],
            "attribute trait_type values must be unique",
            label="trait_type",
        ).describe(title="NFT Attributes"),
    )
    .refine(environment_matches_blockchain())
    .build()
)


def display_names(
    builder: RecordBuilder,
    prefix: str,
    name_pattern: str,
    name_format: str,
    *,
    short_prefix: str | None = None,
) -> RecordBuilder:
    """Pin ``name`` to ``name_pattern`` and ``short_name`` to ``<short_prefix> #<token_id>``;
    both must carry the record's own ``blockchain.token_id``."""

    short = short_prefix if short_prefix is not None else prefix
    return (
        builder.required(
            "name",
            NON_EMPTY_STRING.max_length(100)
            .pattern(name_pattern, f"must follow the format '{name_format}'")
            .describe(title="NFT Name", description=f"Formatted as {name_format}"),
        )
        .required(
            "short_name",
            NON_EMPTY_STRING.max_length(50)
            .pattern(rf"{re.escape(short)} #\d+", f"must follow the format '{short} #<token_id>'")
            .describe(title="Short Name", examples=[f"{short} #123"]),
        )
        .refine(token_id_in_name("name", prefix))
        .refine(token_id_in_name("short_name", short))
    )


__all__ = [
    "BASE_RECORD",
    "BLOCKCHAIN_REFERENCE",
    "CUSTOM_DATA",
    "EXTERNAL_LINK",
    "NFT_ATTRIBUTE",
    "NFT_RECORD",
    "RECORD_ENVIRONMENT",
    "SCHEMA_INFO",
    "VIEWER_REFERENCE",
    "display_names",
    "schema_info_for",
]
