"""Catalog records: the credit tokens and the certificate collections they are sold in."""

from __future__ import annotations

from typing import Final

from provenance_schemas.schemas.primitives import (
    COLLECTION_NAME,
    COLLECTION_SLUG,
    CREDIT_NAME,
    CREDIT_TOKEN_SLUG,
    CREDIT_TOKEN_SYMBOL,
    IPFS_URI,
)
from provenance_schemas.schemas.records import BASE_RECORD, schema_info_for
from provenance_schemas.validation import ObjectSchema, integer, string

_CATALOG_DESCRIPTION = string().min_length(50).max_length(1000)

COLLECTION_RECORD: Final[ObjectSchema] = (
    BASE_RECORD.extend(
        "Collection",
        title="Collection IPFS Record",
        description="Collection of certificates offered together",
    )
    .required("schema", schema_info_for("Collection"))
    .required("name", COLLECTION_NAME)
    .required("slug", COLLECTION_SLUG)
    .required("image", IPFS_URI.describe(title="Collection Image"))
    .required(
        "description",
        _CATALOG_DESCRIPTION.describe(
            title="Collection Description",
            description="Purpose, scope and origin of the certificates in the collection",
        ),
    )
    .build()
)

CREDIT_RECORD: Final[ObjectSchema] = (
    BASE_RECORD.extend(
        "Credit",
        title="Credit IPFS Record",
        description="ERC20 credit token issued against certificates",
    )
    .required("schema", schema_info_for("Credit"))
    .required("symbol", CREDIT_TOKEN_SYMBOL)
    .required("slug", CREDIT_TOKEN_SLUG)
    .required("name", CREDIT_NAME)
    .required(
        "decimals",
        integer()
        .minimum(0)
        .maximum(18)
        .describe(title="Decimals", description="Number of decimal places of the token"),
    )
    .required("image", IPFS_URI.describe(title="Credit Image"))
    .required(
        "description",
        _CATALOG_DESCRIPTION.describe(
            title="Credit Description", description="What one unit of the credit represents"
        ),
    )
    .build()
)

__all__ = ["COLLECTION_RECORD", "CREDIT_RECORD"]
