"""
provenance-schemas — credit retirement receipt.

File: src/provenance_schemas/schemas/receipts.py
Last updated: 2026-10-19

Purpose
- Receipt NFT issued when credits are retired on behalf of a beneficiary.

What should be included in this file
- Summary, beneficiary, credit holder, collections, credits and certificates.
- Cross-collection consistency: counts, listed values and retired amounts.

Functional requirements
- Collections are unique by slug, credits by slug, certificates by token id.
- Summary lists (credit symbols, certificate types, collection slugs) agree with
  the collections they summarize, in both directions.
- Amount checks tolerate floating point error up to 1e-9.
- Displayed attributes mirror the summary, the parties and the per-credit amounts;
  optional parties and the purchase receipt are only checked when supplied.
"""

from __future__ import annotations

from typing import Final

from provenance_schemas.constants import DISPLAY_TOLERANCE
from provenance_schemas.metadata_refiners import (
    attribute_matches,
    attributes_for_items,
    token_label,
    unix_millis,
)
from provenance_schemas.refiners import (
    count_matches,
    retirement_amounts_balance,
    summary_values_match,
)
from provenance_schemas.schemas.primitives import (
    CERTIFICATE_TYPE,
    COLLECTION_SLUG,
    CREDIT_AMOUNT,
    CREDIT_TOKEN_SYMBOL,
    ETHEREUM_ADDRESS,
    EXTERNAL_ID,
    EXTERNAL_URL,
    IPFS_URI,
    ISO_DATE,
    NON_EMPTY_STRING,
    POSITIVE_INTEGER,
    SLUG,
    TOKEN_ID,
)
from provenance_schemas.schemas.records import NFT_RECORD, display_names, schema_info_for
from provenance_schemas.schemas.references import MASS_ID_REFERENCE, SMART_CONTRACT
from provenance_schemas.validation import (
    ArraySchema,
    ObjectSchema,
    record,
    unique_by,
    unique_items,
)

_DISPLAY_NAME = NON_EMPTY_STRING.max_length(100)

RETIREMENT_SUMMARY: Final[ObjectSchema] = (
    record(
        "CreditRetirementReceiptSummary",
        title="Credit Retirement Receipt Summary",
        description="Summary totals for the retirement and the collections it represents",
    )
    .required(
        "total_retirement_amount",
        CREDIT_AMOUNT.describe(title="Total Retirement Amount"),
    )
    .required("total_certificates", POSITIVE_INTEGER.describe(title="Total Certificates"))
    .required("retirement_date", ISO_DATE.describe(title="Retirement Date"))
    .required(
        "credit_symbols",
        unique_items(CREDIT_TOKEN_SYMBOL, "credit symbols must be unique")
        .min(1)
        .describe(title="Credit Symbols"),
    )
    .required(
        "certificate_types",
        unique_items(CERTIFICATE_TYPE, "certificate types must be unique")
        .min(1)
        .describe(title="Certificate Types"),
    )
    .required(
        "collection_slugs",
        unique_items(COLLECTION_SLUG, "collection slugs must be unique")
        .min(1)
        .describe(title="Collection Slugs"),
    )
    .build()
)

RETIREMENT_IDENTITY: Final[ObjectSchema] = (
    record("Identity", title="Identity", description="Participant identity information")
    .required(
        "name",
        _DISPLAY_NAME.describe(title="Identity Name", examples=["Climate Action Corp"]),
    )
    .required("external_id", EXTERNAL_ID.describe(title="Identity External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Identity External URL"))
    .build()
)

BENEFICIARY: Final[ObjectSchema] = (
    record(
        "Beneficiary",
        title="Beneficiary",
        description="Beneficiary receiving the retirement benefit",
    )
    .required("beneficiary_id", EXTERNAL_ID.describe(title="Retirement Beneficiary ID"))
    .required("identity", RETIREMENT_IDENTITY)
    .build()
)

CREDIT_HOLDER: Final[ObjectSchema] = (
    record(
        "CreditHolder",
        title="Credit Holder",
        description="Credit holder wallet and optional identity information",
    )
    .required(
        "wallet_address",
        ETHEREUM_ADDRESS.describe(title="Credit Holder Wallet Address"),
    )
    .optional("identity", RETIREMENT_IDENTITY)
    .build()
)

RETIRED_COLLECTION: Final[ObjectSchema] = (
    record("Collection", title="Collection", description="Collection included in the retirement")
    .required("slug", COLLECTION_SLUG)
    .required("external_id", EXTERNAL_ID.describe(title="Collection External ID"))
    .required("name", _DISPLAY_NAME.describe(title="Collection Name"))
    .required("external_url", EXTERNAL_URL.describe(title="Collection External URL"))
    .required("uri", IPFS_URI.describe(title="Collection URI"))
    .required("amount", CREDIT_AMOUNT.describe(title="Collection Retirement Amount"))
    .build()
)

RETIRED_CREDIT: Final[ObjectSchema] = (
    record("Credit", title="Credit", description="Credit token retired in this receipt")
    .required("slug", SLUG.describe(title="Credit Slug", examples=["carbon", "organic"]))
    .required("symbol", CREDIT_TOKEN_SYMBOL)
    .required("external_id", EXTERNAL_ID.describe(title="Credit External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Credit External URL"))
    .required("uri", IPFS_URI.describe(title="Credit URI"))
    .required("smart_contract", SMART_CONTRACT)
    .required("amount", CREDIT_AMOUNT.describe(title="Credit Retirement Amount"))
    .build()
)

CERTIFICATE_CREDIT: Final[ObjectSchema] = (
    record(
        "CertificateCreditRetirement",
        title="Certificate Credit Retirement",
        description="Credit retirement breakdown for a certificate",
    )
    .required("credit_symbol", CREDIT_TOKEN_SYMBOL)
    .required("credit_slug", SLUG.describe(title="Credit Slug"))
    .required("amount", CREDIT_AMOUNT.describe(title="Retired Credit Amount"))
    .required("external_id", EXTERNAL_ID.describe(title="Retired Credit External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Retired Credit External URL"))
    .build()
)

MASS_ID_REFERENCE_WITH_CONTRACT: Final[ObjectSchema] = (
    MASS_ID_REFERENCE.extend("MassIDReferenceWithContract")
    .required("smart_contract", SMART_CONTRACT)
    .build()
)

RETIRED_CERTIFICATE: Final[ObjectSchema] = (
    record(
        "Certificate",
        title="Certificate",
        description="Certificate associated with the retirement",
    )
    .required("token_id", TOKEN_ID.describe(title="Certificate Token ID"))
    .required("type", CERTIFICATE_TYPE)
    .required("external_id", EXTERNAL_ID.describe(title="Certificate External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Certificate External URL"))
    .required("uri", IPFS_URI.describe(title="Certificate URI"))
    .required("smart_contract", SMART_CONTRACT)
    .required("collection_slug", COLLECTION_SLUG)
    .required("total_amount", CREDIT_AMOUNT.describe(title="Certificate Total Amount"))
    .required("retired_amount", CREDIT_AMOUNT.describe(title="Certificate Retired Amount"))
    .required(
        "credits_retired",
        unique_by(
            CERTIFICATE_CREDIT,
            lambda credit: credit["credit_symbol"],
            "credit symbols within credits_retired must be unique",
            label="credit_symbol",
        )
        .min(1)
        .describe(title="Credits Retired"),
    )
    .required("mass_id", MASS_ID_REFERENCE_WITH_CONTRACT)
    .build()
)

PURCHASE_RECEIPT_REFERENCE: Final[ObjectSchema] = (
    record(
        "CreditPurchaseReceiptReference",
        title="Credit Purchase Receipt Reference",
        description="Purchase receipt when the retirement happened during a purchase",
    )
    .required("token_id", TOKEN_ID.describe(title="Purchase Receipt Token ID"))
    .required("external_id", EXTERNAL_ID.describe(title="Purchase Receipt External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Purchase Receipt External URL"))
    .required("uri", IPFS_URI.describe(title="Purchase Receipt URI"))
    .required("smart_contract", SMART_CONTRACT)
    .build()
)

_COLLECTIONS: Final[ArraySchema] = (
    unique_by(
        RETIRED_COLLECTION,
        lambda collection: collection["slug"],
        "collection slugs must be unique",
        label="slug",
    )
    .min(1)
    .describe(title="Collections")
)

_CREDITS: Final[ArraySchema] = (
    unique_by(
        RETIRED_CREDIT,
        lambda credit: credit["slug"],
        "credit slugs must be unique",
        label="slug",
    )
    .min(1)
    .describe(title="Credits")
)

_CERTIFICATES: Final[ArraySchema] = (
    unique_by(
        RETIRED_CERTIFICATE,
        lambda certificate: certificate["token_id"],
        "certificate token_id values must be unique",
        label="token_id",
    )
    .min(1)
    .describe(title="Certificates")
)

CREDIT_RETIREMENT_RECEIPT_DATA: Final[ObjectSchema] = (
    record(
        "CreditRetirementReceiptData",
        title="Credit Retirement Receipt Data",
        description="Complete data structure for a credit retirement receipt",
    )
    .required("summary", RETIREMENT_SUMMARY)
    .required("beneficiary", BENEFICIARY)
    .required("credit_holder", CREDIT_HOLDER)
    .required("collections", _COLLECTIONS)
    .required("credits", _CREDITS)
    .required("certificates", _CERTIFICATES)
    .optional("purchase_receipt", PURCHASE_RECEIPT_REFERENCE)
    .refine(
        count_matches(
            ("summary", "total_certificates"),
            ("certificates",),
            "must equal the number of certificates",
        )
    )
    .refine(
        summary_values_match(("summary", "credit_symbols"), ("credits",), "symbol", "credit symbol")
    )
    .refine(
        summary_values_match(
            ("summary", "certificate_types"), ("certificates",), "type", "certificate type"
        )
    )
    .refine(
        summary_values_match(
            ("summary", "collection_slugs"), ("collections",), "slug", "collection slug"
        )
    )
    .refine(retirement_amounts_balance())
    .build()
)

CREDIT_RETIREMENT_RECEIPT_RECORD: Final[ObjectSchema] = (
    display_names(
        NFT_RECORD.extend(
            "CreditRetirementReceipt",
            title="Credit Retirement Receipt NFT IPFS Record",
            description="Receipt issued when credits are retired on behalf of a beneficiary",
        ),
        "Credit Retirement Receipt",
        r"Credit Retirement Receipt #\d+ • .+ Credits Retired",
        "Credit Retirement Receipt #<token_id> • <amount> Credits Retired",
        short_prefix="Retirement Receipt",
    )
    .required("schema", schema_info_for("CreditRetirementReceipt"))
    .required("data", CREDIT_RETIREMENT_RECEIPT_DATA)
    .refine(
        attribute_matches(
            "Total Credits Retired",
            ("summary", "total_retirement_amount"),
            epsilon=DISPLAY_TOLERANCE,
        )
    )
    .refine(attribute_matches("Certificates Retired", ("summary", "total_certificates")))
    .refine(attribute_matches("Beneficiary", ("beneficiary", "identity", "name")))
    .refine(attribute_matches("Credit Holder", ("credit_holder", "identity", "name")))
    .refine(
        attribute_matches("Retirement Date", ("summary", "retirement_date"), render=unix_millis)
    )
    .refine(
        attribute_matches("Purchase Receipt", ("purchase_receipt", "token_id"), render=token_label)
    )
    .refine(attributes_for_items(("credits",), "symbol", "amount", epsilon=DISPLAY_TOLERANCE))
    .build()
)

__all__ = [
    "BENEFICIARY",
    "CERTIFICATE_CREDIT",
    "CREDIT_HOLDER",
    "CREDIT_RETIREMENT_RECEIPT_DATA",
    "CREDIT_RETIREMENT_RECEIPT_RECORD",
    "MASS_ID_REFERENCE_WITH_CONTRACT",
    "PURCHASE_RECEIPT_REFERENCE",
    "RETIRED_CERTIFICATE",
    "RETIRED_COLLECTION",
    "RETIRED_CREDIT",
    "RETIREMENT_IDENTITY",
    "RETIREMENT_SUMMARY",
]
