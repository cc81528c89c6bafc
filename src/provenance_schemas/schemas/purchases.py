"""
provenance-schemas — credit purchase receipt.

File: src/provenance_schemas/schemas/purchases.py
Last updated: 2026-10-19

Purpose
- Receipt NFT issued when credits are bought, optionally retiring part of them in
  the same transaction.

What should be included in this file
- Summary, parties, collections, credits, certificates and participant rewards.
- Optional retirement details pointing at the retirement receipt.

Functional requirements
- Collections and credits are unique by slug, certificates by token id and
  participant rewards by id hash.
- Summary lists agree with the collections they summarize, in both directions.
- Purchased amounts agree across certificates, credits, collections and the summary;
  participant rewards add up to the USDC total.
- Retirement details are present exactly when a credit retires a positive amount.
- Displayed attributes mirror the summary, the receiver and every credit and
  collection amount.
"""

from __future__ import annotations

from typing import Final

from provenance_schemas.constants import DISPLAY_TOLERANCE
from provenance_schemas.metadata_refiners import (
    attribute_matches,
    attributes_for_items,
    unix_millis,
)
from provenance_schemas.refiners import (
    count_matches,
    purchase_amounts_balance,
    purchase_retirement_consistent,
    summary_values_match,
)
from provenance_schemas.schemas.primitives import (
    CERTIFICATE_TYPE,
    COLLECTION_NAME,
    COLLECTION_SLUG,
    CREDIT_AMOUNT,
    CREDIT_TOKEN_SYMBOL,
    ETHEREUM_ADDRESS,
    EXTERNAL_ID,
    EXTERNAL_URL,
    IPFS_URI,
    ISO_DATE,
    NON_EMPTY_STRING,
    NON_NEGATIVE_FLOAT,
    PARTICIPANT_ID_HASH,
    PARTICIPANT_ROLE,
    POSITIVE_INTEGER,
    SLUG,
    TOKEN_ID,
)
from provenance_schemas.schemas.receipts import (
    MASS_ID_REFERENCE_WITH_CONTRACT,
    RETIREMENT_IDENTITY,
)
from provenance_schemas.schemas.records import NFT_RECORD, display_names, schema_info_for
from provenance_schemas.schemas.references import SMART_CONTRACT
from provenance_schemas.validation import (
    ArraySchema,
    ObjectSchema,
    record,
    unique_by,
    unique_items,
)

PURCHASE_SUMMARY: Final[ObjectSchema] = (
    record(
        "CreditPurchaseReceiptSummary",
        title="Credit Purchase Receipt Summary",
        description="Summary totals for the purchase",
    )
    .required("total_usdc_amount", NON_NEGATIVE_FLOAT.describe(title="Total USDC Amount"))
    .required("total_credits", CREDIT_AMOUNT.describe(title="Total Credits Purchased"))
    .required("total_certificates", POSITIVE_INTEGER.describe(title="Total Certificates"))
    .required("purchase_date", ISO_DATE.describe(title="Purchase Date"))
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

RECEIVER: Final[ObjectSchema] = (
    record("Receiver", title="Receiver", description="Wallet receiving the purchased credits")
    .required("wallet_address", ETHEREUM_ADDRESS.describe(title="Receiver Wallet Address"))
    .optional("identity", RETIREMENT_IDENTITY)
    .build()
)

BUYER: Final[ObjectSchema] = (
    record("Buyer", title="Buyer", description="Buyer on whose behalf the purchase was made")
    .required("buyer_id", EXTERNAL_ID.describe(title="Buyer ID"))
    .optional("identity", RETIREMENT_IDENTITY)
    .build()
)

PARTIES: Final[ObjectSchema] = (
    record("Parties", title="Parties", description="Parties involved in the purchase")
    .required("payer", ETHEREUM_ADDRESS.describe(title="Payer Wallet Address"))
    .required("receiver", RECEIVER)
    .optional("buyer", BUYER)
    .build()
)

PURCHASED_COLLECTION: Final[ObjectSchema] = (
    record("Collection", title="Collection", description="Collection included in the purchase")
    .required("slug", COLLECTION_SLUG)
    .required("external_id", EXTERNAL_ID.describe(title="Collection External ID"))
    .required("name", COLLECTION_NAME)
    .required("external_url", EXTERNAL_URL.describe(title="Collection External URL"))
    .required("uri", IPFS_URI.describe(title="Collection URI"))
    .required("credit_amount", CREDIT_AMOUNT.describe(title="Collection Credit Amount"))
    .build()
)

PURCHASED_CREDIT: Final[ObjectSchema] = (
    record("Credit", title="Credit", description="Credit token purchased in this receipt")
    .required("slug", SLUG.describe(title="Credit Slug"))
    .required("symbol", CREDIT_TOKEN_SYMBOL)
    .required("external_id", EXTERNAL_ID.describe(title="Credit External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Credit External URL"))
    .required("uri", IPFS_URI.describe(title="Credit URI"))
    .required("smart_contract", SMART_CONTRACT)
    .required("purchase_amount", CREDIT_AMOUNT.describe(title="Credit Purchase Amount"))
    .optional("retirement_amount", CREDIT_AMOUNT.describe(title="Credit Retirement Amount"))
    .build()
)

PURCHASED_CERTIFICATE: Final[ObjectSchema] = (
    record("Certificate", title="Certificate", description="Certificate included in the purchase")
    .required("token_id", TOKEN_ID.describe(title="Certificate Token ID"))
    .required("type", CERTIFICATE_TYPE)
    .required("external_id", EXTERNAL_ID.describe(title="Certificate External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Certificate External URL"))
    .required("uri", IPFS_URI.describe(title="Certificate URI"))
    .required("smart_contract", SMART_CONTRACT)
    .required("collection_slug", COLLECTION_SLUG)
    .required("total_amount", CREDIT_AMOUNT.describe(title="Certificate Total Amount"))
    .required("purchased_amount", CREDIT_AMOUNT.describe(title="Certificate Purchased Amount"))
    .required("retired_amount", CREDIT_AMOUNT.describe(title="Certificate Retired Amount"))
    .required("credit_slug", SLUG.describe(title="Credit Slug"))
    .required("mass_id", MASS_ID_REFERENCE_WITH_CONTRACT)
    .build()
)

PARTICIPANT_REWARD: Final[ObjectSchema] = (
    record(
        "ParticipantReward",
        title="Participant Reward",
        description="USDC reward distributed to a supply chain participant",
    )
    .required("id_hash", PARTICIPANT_ID_HASH)
    .required(
        "participant_name", NON_EMPTY_STRING.max_length(100).describe(title="Participant Name")
    )
    .required(
        "roles",
        unique_items(PARTICIPANT_ROLE, "participant roles must be unique")
        .min(1)
        .describe(title="Participant Roles"),
    )
    .required("usdc_amount", NON_NEGATIVE_FLOAT.describe(title="USDC Reward Amount"))
    .build()
)

RETIREMENT_RECEIPT_REFERENCE: Final[ObjectSchema] = (
    record(
        "CreditRetirementReceiptReference",
        title="Credit Retirement Receipt Reference",
        description="Retirement receipt issued for the retired part of the purchase",
    )
    .required("token_id", TOKEN_ID.describe(title="Retirement Receipt Token ID"))
    .required("external_id", EXTERNAL_ID.describe(title="Retirement Receipt External ID"))
    .required("external_url", EXTERNAL_URL.describe(title="Retirement Receipt External URL"))
    .required("uri", IPFS_URI.describe(title="Retirement Receipt URI"))
    .required("smart_contract", SMART_CONTRACT)
    .build()
)

PURCHASE_RETIREMENT: Final[ObjectSchema] = (
    record("Retirement", title="Retirement", description="Retirement performed with the purchase")
    .required("beneficiary_id", EXTERNAL_ID.describe(title="Retirement Beneficiary ID"))
    .optional("retirement_receipt", RETIREMENT_RECEIPT_REFERENCE)
    .build()
)


def _unique_by_slug(items: ObjectSchema, noun: str) -> ArraySchema:
    return (
        unique_by(items, lambda item: item["slug"], f"{noun} slugs must be unique", label="slug")
        .min(1)
        .describe(title=f"{noun.capitalize()}s")
    )


CREDIT_PURCHASE_RECEIPT_DATA: Final[ObjectSchema] = (
    record(
        "CreditPurchaseReceiptData",
        title="Credit Purchase Receipt Data",
        description="Complete data structure for a credit purchase receipt",
    )
    .required("summary", PURCHASE_SUMMARY)
    .required("parties", PARTIES)
    .required("collections", _unique_by_slug(PURCHASED_COLLECTION, "collection"))
    .required("credits", _unique_by_slug(PURCHASED_CREDIT, "credit"))
    .required(
        "certificates",
        unique_by(
            PURCHASED_CERTIFICATE,
            lambda certificate: certificate["token_id"],
            "certificate token_id values must be unique",
            label="token_id",
        )
        .min(1)
        .describe(title="Certificates"),
    )
    .required(
        "participant_rewards",
        unique_by(
            PARTICIPANT_REWARD,
            lambda reward: reward["id_hash"],
            "participant reward id_hash values must be unique",
            label="id_hash",
        )
        .min(1)
        .describe(title="Participant Rewards"),
    )
    .optional("retirement", PURCHASE_RETIREMENT)
    .refine(purchase_retirement_consistent())
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
    .refine(purchase_amounts_balance())
    .build()
)

CREDIT_PURCHASE_RECEIPT_RECORD: Final[ObjectSchema] = (
    display_names(
        NFT_RECORD.extend(
            "CreditPurchaseReceipt",
            title="Credit Purchase Receipt NFT IPFS Record",
            description="Receipt issued when credits are purchased",
        ),
        "Credit Purchase Receipt",
        r"Credit Purchase Receipt #\d+ • .+ Credits Purchased",
        "Credit Purchase Receipt #<token_id> • <amount> Credits Purchased",
        short_prefix="Purchase Receipt",
    )
    .required("schema", schema_info_for("CreditPurchaseReceipt"))
    .required("data", CREDIT_PURCHASE_RECEIPT_DATA)
    .refine(
        attribute_matches(
            "Total Credits Purchased", ("summary", "total_credits"), epsilon=DISPLAY_TOLERANCE
        )
    )
    .refine(
        attribute_matches(
            "Total USDC Amount", ("summary", "total_usdc_amount"), epsilon=DISPLAY_TOLERANCE
        )
    )
    .refine(attribute_matches("Certificates Purchased", ("summary", "total_certificates")))
    .refine(attribute_matches("Receiver", ("parties", "receiver", "identity", "name")))
    .refine(
        attribute_matches("Purchase Date", ("summary", "purchase_date"), render=unix_millis)
    )
    .refine(
        attributes_for_items(
            ("credits",), "symbol", "purchase_amount", epsilon=DISPLAY_TOLERANCE
        )
    )
    .refine(
        attributes_for_items(
            ("collections",), "name", "credit_amount", epsilon=DISPLAY_TOLERANCE
        )
    )
    .build()
)

__all__ = [
    "BUYER",
    "CREDIT_PURCHASE_RECEIPT_DATA",
    "CREDIT_PURCHASE_RECEIPT_RECORD",
    "PARTICIPANT_REWARD",
    "PARTIES",
    "PURCHASED_CERTIFICATE",
    "PURCHASED_COLLECTION",
    "PURCHASED_CREDIT",
    "PURCHASE_RETIREMENT",
    "PURCHASE_SUMMARY",
    "RECEIVER",
    "RETIREMENT_RECEIPT_REFERENCE",
]
