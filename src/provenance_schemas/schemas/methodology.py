"""Methodology record: methodology metadata plus the MassID audit rules it requires."""

from __future__ import annotations

from typing import Final

from provenance_schemas.schemas.audit import AUDIT_RULE_DEFINITIONS
from provenance_schemas.schemas.primitives import (
    IPFS_URI,
    ISO_DATE,
    METHODOLOGY_NAME,
    METHODOLOGY_SHORT_NAME,
    METHODOLOGY_SLUG,
    SEMANTIC_VERSION,
)
from provenance_schemas.schemas.records import BASE_RECORD, schema_info_for
from provenance_schemas.validation import ObjectSchema, record, string

METHODOLOGY_DATA: Final[ObjectSchema] = (
    record(
        "MethodologyData",
        title="Methodology Data",
        description="Methodology-specific data including audit rules",
    )
    .required("name", METHODOLOGY_NAME)
    .required("short_name", METHODOLOGY_SHORT_NAME)
    .required("slug", METHODOLOGY_SLUG)
    .required("version", SEMANTIC_VERSION.describe(title="Methodology Version"))
    .required(
        "description",
        string()
        .min_length(50)
        .max_length(2000)
        .describe(
            title="Methodology Description",
            description="Purpose, scope and implementation approach of the methodology",
        ),
    )
    .required("revision_date", ISO_DATE.describe(title="Revision Date"))
    .required("publication_date", ISO_DATE.describe(title="Publication Date"))
    .required(
        "methodology_pdf",
        IPFS_URI.describe(
            title="Methodology PDF",
            description="IPFS URI pointing to the complete methodology PDF document",
        ),
    )
    .required(
        "mass_id_audit_rules",
        AUDIT_RULE_DEFINITIONS.describe(title="MassID Audit Rules"),
    )
    .build()
)

METHODOLOGY_RECORD: Final[ObjectSchema] = (
    BASE_RECORD.extend(
        "Methodology",
        title="Methodology IPFS Record",
        description="Methodology metadata extending the base record with audit rules",
    )
    .required("schema", schema_info_for("Methodology"))
    .required("data", METHODOLOGY_DATA)
    .build()
)

__all__ = ["METHODOLOGY_DATA", "METHODOLOGY_RECORD"]
