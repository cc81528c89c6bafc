"""MassID audit record: rule execution results for one MassID and the certificate it backs."""

from __future__ import annotations

from typing import Final

from provenance_schemas.refiners import chronological, exactly_one_of
from provenance_schemas.schemas.audit import RULE_EXECUTION_RESULTS
from provenance_schemas.schemas.primitives import AUDIT_RESULT, ISO_TIMESTAMP
from provenance_schemas.schemas.records import BASE_RECORD, schema_info_for
from provenance_schemas.schemas.references import (
    GAS_ID_REFERENCE,
    MASS_ID_REFERENCE,
    METHODOLOGY_REFERENCE,
    RECYCLED_ID_REFERENCE,
)
from provenance_schemas.validation import ObjectSchema, record

AUDIT_SUMMARY: Final[ObjectSchema] = (
    record("MassIDAuditSummary", title="Audit Summary", description="Summary of the audit run")
    .required("started_at", ISO_TIMESTAMP.describe(title="Audit Start Timestamp"))
    .required("completed_at", ISO_TIMESTAMP.describe(title="Audit Completion Timestamp"))
    .required("result", AUDIT_RESULT)
    .refine(chronological("started_at", "completed_at"))
    .build()
)

MASS_ID_AUDIT_DATA: Final[ObjectSchema] = (
    record(
        "MassIDAuditData",
        title="MassID Audit Data",
        description="Audit of a MassID against a methodology for exactly one certificate",
    )
    .required("methodology", METHODOLOGY_REFERENCE)
    .required("mass_id", MASS_ID_REFERENCE)
    .optional("gas_id", GAS_ID_REFERENCE)
    .optional("recycled_id", RECYCLED_ID_REFERENCE)
    .required("audit_summary", AUDIT_SUMMARY)
    .required("rule_execution_results", RULE_EXECUTION_RESULTS)
    .refine(exactly_one_of("gas_id", "recycled_id"))
    .build()
)

MASS_ID_AUDIT_RECORD: Final[ObjectSchema] = (
    BASE_RECORD.extend(
        "MassID Audit",
        title="MassID Audit IPFS Record",
        description="Audit results for a MassID under a methodology",
    )
    .required("schema", schema_info_for("MassID Audit"))
    .required("data", MASS_ID_AUDIT_DATA)
    .build()
)

__all__ = ["AUDIT_SUMMARY", "MASS_ID_AUDIT_DATA", "MASS_ID_AUDIT_RECORD"]
