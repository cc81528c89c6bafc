"""
provenance-schemas — primitive field constraints.

File: src/provenance_schemas/schemas/primitives.py
Last updated: 2026-10-19

Purpose
- Atomic, context-free constraints reused across every record kind: identifiers,
  hashes, timestamps, blockchain values, quantities, geography and closed enumerations.

Functional requirements
- Each constraint reports one canonical message; value errors never reuse the
  generic type message.

Non-functional requirements
- Module-level values only; no behaviour beyond ``FieldConstraint``.
"""

from __future__ import annotations

from typing import Final

from provenance_schemas.constants import SUPPORTED_CHAIN_IDS, SUPPORTED_NETWORK_NAMES
from provenance_schemas.validation import FieldConstraint, integer, literal, number, string

_SHA256_EXAMPLE: Final[str] = "87f633634cc4b02f628685651f0a29b7bfa22a0bd841f725c6772dd00a58d489"

# Text and identifiers.
NON_EMPTY_STRING: Final[FieldConstraint] = string().non_empty().describe(
    title="Non-Empty String",
    description="A string that contains at least one character",
)
UUID_V4: Final[FieldConstraint] = string().pattern(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$",
    "must be a valid UUID v4",
).describe(
    title="UUID V4",
    description="A universally unique identifier version 4",
    examples=["ad44dd3f-f176-4b98-bf78-5ee6e77d0530"],
)
EXTERNAL_ID: Final[FieldConstraint] = UUID_V4.describe(
    title="External ID",
    description="UUID identifier for external system references",
)
TOKEN_ID: Final[FieldConstraint] = string().non_empty().pattern(
    r"^[0-9]+$", "must be a numeric string (supports uint256)"
).describe(
    title="Token ID",
    description="Numeric identifier for blockchain tokens as string",
    examples=["456789", "1000000"],
)
SLUG: Final[FieldConstraint] = string().non_empty().pattern(
    r"^[a-z0-9-]+$", "must contain only lowercase letters, numbers, and hyphens"
).max_length(100).describe(
    title="Slug",
    description="URL-friendly identifier with lowercase letters, numbers, and hyphens",
    examples=["mass-id-123", "organic-waste"],
)
SEMANTIC_VERSION: Final[FieldConstraint] = string().non_empty().pattern(
    r"^v?[0-9]+\.[0-9]+\.[0-9]+(-[a-zA-Z0-9.-]+)?(\+[a-zA-Z0-9.-]+)?$",
    "must be a valid semantic version string",
).describe(
    title="Semantic Version",
    description="Version string following semantic versioning",
    examples=["0.1.0", "1.0.0", "2.1.3"],
)
HEX_COLOR: Final[FieldConstraint] = string().non_empty().pattern(
    r"^#[0-9A-F]{6}$", "must be a hex color code with # prefix and uppercase"
).describe(
    title="Hex Color",
    description="Hexadecimal color code with hash prefix",
    examples=["#2D5A27", "#FF5733"],
)

# Hashes.
SHA256_HASH: Final[FieldConstraint] = string().pattern(
    r"^[a-f0-9]{64}$", "must be a SHA-256 hash as 64 lowercase hexadecimal characters"
).describe(
    title="SHA-256 Hash",
    description="SHA-256 cryptographic hash as hexadecimal string",
    examples=[_SHA256_EXAMPLE],
)
PARTICIPANT_ID_HASH: Final[FieldConstraint] = SHA256_HASH.describe(
    title="Participant ID Hash",
    description="SHA-256 hash representing a participant identifier",
)

# Time.
ISO_TIMESTAMP: Final[FieldConstraint] = string().iso_datetime().describe(
    title="ISO Timestamp",
    description="ISO 8601 formatted timestamp with timezone information",
    examples=["2024-12-05T11:02:47.000Z"],
)
ISO_DATE: Final[FieldConstraint] = string().iso_date().describe(
    title="ISO Date",
    description="ISO 8601 formatted date in YYYY-MM-DD format",
    examples=["2024-12-05"],
)
UNIX_TIMESTAMP: Final[FieldConstraint] = integer().exclusive_minimum(0).describe(
    title="Unix Timestamp",
    description="Unix timestamp in milliseconds",
    examples=[1710518400000],
)
MINUTES: Final[FieldConstraint] = integer().minimum(0).describe(
    title="Minutes", description="Duration in whole minutes"
)

# URIs.
EXTERNAL_URL: Final[FieldConstraint] = string().url().describe(
    title="External URL",
    description="URL pointing to external resources",
    examples=["https://explore.carrot.eco/"],
)
IPFS_URI: Final[FieldConstraint] = string().non_empty().pattern(
    r"^ipfs://[a-zA-Z0-9]+(/.*)?$", "must be a valid IPFS URI with CID"
).describe(
    title="IPFS URI",
    description="InterPlanetary File System URI pointing to distributed content",
    examples=["ipfs://QmYjtig7VJQ6XsnUjqqJvj7QaMcCAwtrgNdahSiFofrE7o"],
)

# Blockchain.
ETHEREUM_ADDRESS: Final[FieldConstraint] = string().pattern(
    r"^0x[a-f0-9]{40}$", "must be a valid Ethereum address in lowercase hexadecimal format"
).describe(
    title="Ethereum Address",
    description="A valid Ethereum address in hexadecimal format",
    examples=["0x1234567890abcdef1234567890abcdef12345678"],
)
SMART_CONTRACT_ADDRESS: Final[FieldConstraint] = ETHEREUM_ADDRESS.describe(
    title="Smart Contract Address",
    description="Address of the smart contract",
)
CHAIN_ID: Final[FieldConstraint] = literal(*SUPPORTED_CHAIN_IDS).describe(
    title="Chain ID",
    description="Supported Polygon chain identifiers",
    examples=list(SUPPORTED_CHAIN_IDS),
)
NETWORK_NAME: Final[FieldConstraint] = literal(*SUPPORTED_NETWORK_NAMES).describe(
    title="Blockchain Network Name",
    description="Supported Polygon network names",
    examples=list(SUPPORTED_NETWORK_NAMES),
)

# Quantities.
NON_NEGATIVE_FLOAT: Final[FieldConstraint] = number().minimum(0).describe(
    title="Non-Negative Float",
    description="Floating-point number that is zero or positive",
    examples=[0, 45.2, 72.5],
)
POSITIVE_WEIGHT_KG: Final[FieldConstraint] = number().exclusive_minimum(0).describe(
    title="Weight (kg)",
    description="Weight measurement in kilograms; must be greater than zero",
    examples=[3000, 1500, 500],
)
PERCENTAGE: Final[FieldConstraint] = number().minimum(0).maximum(100).describe(
    title="Percentage",
    description="Percentage value between 0 and 100",
    examples=[50, 75.5, 100],
)
NON_NEGATIVE_INTEGER: Final[FieldConstraint] = integer().minimum(0).describe(
    title="Non-Negative Integer",
    description="Integer value that is zero or positive",
)
POSITIVE_INTEGER: Final[FieldConstraint] = integer().minimum(1).describe(
    title="Positive Integer",
    description="Integer value that is greater than zero",
)
CREDIT_AMOUNT: Final[FieldConstraint] = NON_NEGATIVE_FLOAT.describe(
    title="Credit Amount",
    description="Amount of credits issued",
)

# Geography.
COUNTRY_CODE: Final[FieldConstraint] = string().pattern(
    r"^[A-Z]{2}$", "must be a valid ISO 3166-1 alpha-2 country code"
).describe(
    title="ISO Country Code",
    description="Two-letter country code following ISO 3166-1 alpha-2",
    examples=["BR", "US", "DE"],
)
SUBDIVISION_CODE: Final[FieldConstraint] = string().pattern(
    r"^[A-Z]{2}-[A-Z0-9]{1,3}$", "must be a valid ISO 3166-2 administrative division code"
).describe(
    title="ISO Administrative Division Code",
    description="Administrative division code following ISO 3166-2",
    examples=["BR-AP", "BR-ES", "US-CA"],
)
MUNICIPALITY: Final[FieldConstraint] = string().non_empty().max_length(50).describe(
    title="Municipality",
    description="Municipality or city name",
    examples=["Macapá", "São Paulo"],
)
LATITUDE: Final[FieldConstraint] = (
    number()
    .minimum(-90)
    .maximum(90)
    .multiple_of(0.001)
    .describe(
        title="Latitude",
        description="Latitude in decimal degrees with at most 3 decimal places",
        examples=[-0.02, -20.38, 40.713],
    )
)
LONGITUDE: Final[FieldConstraint] = (
    number()
    .minimum(-180)
    .maximum(180)
    .multiple_of(0.001)
    .describe(
        title="Longitude",
        description="Longitude in decimal degrees with at most 3 decimal places",
        examples=[-51.06, -40.34, -74.006],
    )
)

# Closed enumerations.
RECORD_SCHEMA_TYPE: Final[FieldConstraint] = literal(
    "MassID",
    "MassID Audit",
    "RecycledID",
    "GasID",
    "CreditPurchaseReceipt",
    "CreditRetirementReceipt",
    "Methodology",
    "Credit",
    "Collection",
).describe(title="Schema Type", description="Type of schema in the record ecosystem")
NFT_SCHEMA_TYPE: Final[FieldConstraint] = literal(
    "MassID",
    "RecycledID",
    "GasID",
    "CreditPurchaseReceipt",
    "CreditRetirementReceipt",
).describe(title="NFT Schema Type", description="Type of schema for NFT records")
CERTIFICATE_TYPE: Final[FieldConstraint] = literal("GasID", "RecycledID").describe(
    title="Certificate Type", description="Type of certificate"
)
PARTICIPANT_ROLE: Final[FieldConstraint] = literal(
    "Community Impact Pool",
    "Hauler",
    "Network Integrator",
    "Methodology Author",
    "Methodology Developer",
    "Network",
    "Processor",
    "Recycler",
    "Waste Generator",
).describe(
    title="Participant Role",
    description="Role that a participant plays in the waste management supply chain",
    examples=["Waste Generator", "Hauler", "Recycler"],
)
WASTE_TYPE: Final[FieldConstraint] = literal("Organic").describe(
    title="Waste Type", description="Category or type of waste material"
)
WASTE_SUBTYPE: Final[FieldConstraint] = literal(
    "Domestic Sludge",
    "EFB similar to Garden, Yard and Park Waste",
    "Food, Food Waste and Beverages",
    "Garden, Yard and Park Waste",
    "Industrial Sludge",
    "Tobacco",
    "Wood and Wood Products",
).describe(
    title="Waste Subtype",
    description="Specific subcategory of waste within a waste type",
)
CREDIT_TYPE: Final[FieldConstraint] = literal("Biowaste", "Carbon (CH₄)").describe(
    title="Credit Type", description="Type of credit issued"
)
CREDIT_TOKEN_SYMBOL: Final[FieldConstraint] = literal("C-CARB.CH4", "C-BIOW").describe(
    title="Credit Token Symbol", description="ERC20 token symbol identifier"
)
CREDIT_TOKEN_SLUG: Final[FieldConstraint] = literal("carbon-methane", "biowaste").describe(
    title="Credit Token Slug", description="URL-friendly identifier for the credit token"
)
GAS_TYPE: Final[FieldConstraint] = literal("Methane (CH₄)").describe(
    title="Gas Type", description="Type of gas prevented"
)
METHODOLOGY_NAME: Final[FieldConstraint] = literal(
    "AMS-III.F. | BOLD Carbon (CH₄) - SSC",
    "AMS-III.F. | BOLD Recycling Credit",
).describe(title="Methodology Name", description="Full official name of the methodology")
METHODOLOGY_SHORT_NAME: Final[FieldConstraint] = literal(
    "BOLD Carbon (CH₄)", "BOLD Recycling"
).describe(title="Methodology Short Name", description="Abbreviated name for UI display")
METHODOLOGY_SLUG: Final[FieldConstraint] = literal("bold-recycling", "bold-carbon-ch4").describe(
    title="Methodology Slug", description="URL-friendly identifier for the methodology"
)
AUDIT_RESULT: Final[FieldConstraint] = literal("PASSED", "FAILED").describe(
    title="Audit Result", description="Outcome of the audit"
)
COLLECTION_SLUG: Final[FieldConstraint] = literal(
    "bold-innovators",
    "bold-cold-start-jundiai",
    "bold-cold-start-carazinho",
    "bold-brazil",
).describe(title="Collection Slug", description="URL-friendly identifier for a collection")
COLLECTION_NAME: Final[FieldConstraint] = literal(
    "BOLD Innovators",
    "BOLD Cold Start - Jundiaí",
    "BOLD Cold Start - Carazinho",
    "BOLD Brazil",
).describe(title="Collection Name", description="Display name of a collection")
CREDIT_NAME: Final[FieldConstraint] = literal("BOLD Carbon (CH₄)", "BOLD Biowaste").describe(
    title="Credit Name", description="Display name of a credit token"
)

__all__ = [
    "AUDIT_RESULT",
    "CERTIFICATE_TYPE",
    "CHAIN_ID",
    "COLLECTION_NAME",
    "COLLECTION_SLUG",
    "COUNTRY_CODE",
    "CREDIT_AMOUNT",
    "CREDIT_NAME",
    "CREDIT_TOKEN_SLUG",
    "CREDIT_TOKEN_SYMBOL",
    "CREDIT_TYPE",
    "ETHEREUM_ADDRESS",
    "EXTERNAL_ID",
    "EXTERNAL_URL",
    "GAS_TYPE",
    "HEX_COLOR",
    "IPFS_URI",
    "ISO_DATE",
    "ISO_TIMESTAMP",
    "LATITUDE",
    "LONGITUDE",
    "METHODOLOGY_NAME",
    "METHODOLOGY_SHORT_NAME",
    "METHODOLOGY_SLUG",
    "MINUTES",
    "MUNICIPALITY",
    "NETWORK_NAME",
    "NFT_SCHEMA_TYPE",
    "NON_EMPTY_STRING",
    "NON_NEGATIVE_FLOAT",
    "NON_NEGATIVE_INTEGER",
    "PARTICIPANT_ID_HASH",
    "PARTICIPANT_ROLE",
    "PERCENTAGE",
    "POSITIVE_INTEGER",
    "POSITIVE_WEIGHT_KG",
    "RECORD_SCHEMA_TYPE",
    "SEMANTIC_VERSION",
    "SHA256_HASH",
    "SLUG",
    "SMART_CONTRACT_ADDRESS",
    "SUBDIVISION_CODE",
    "TOKEN_ID",
    "UNIX_TIMESTAMP",
    "UUID_V4",
    "WASTE_SUBTYPE",
    "WASTE_TYPE",
]
