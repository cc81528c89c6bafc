"""Audit rule definitions executed for methodology compliance, and their results."""

from __future__ import annotations

from typing import Final

from provenance_schemas.refiners import audit_rule_sequence, chronological
from provenance_schemas.schemas.primitives import (
    AUDIT_RESULT,
    EXTERNAL_URL,
    ISO_TIMESTAMP,
    NON_EMPTY_STRING,
    POSITIVE_INTEGER,
    SLUG,
    UUID_V4,
)
from provenance_schemas.validation import (
    ArraySchema,
    ObjectSchema,
    array,
    record,
    string,
    unique_by,
)

_RULE_DESCRIPTION = string().min_length(10).max_length(500)
_GITHUB_URL = EXTERNAL_URL.pattern(r"^https://github\.com/.*$", "must be a GitHub URL")

AUDIT_RULE_DEFINITION: Final[ObjectSchema] = (
    record(
        "AuditRuleDefinition",
        title="Audit Rule Definition",
        description="Definition of an audit rule that must be executed for methodology compliance",
    )
    .required("id", UUID_V4.describe(title="Rule ID"))
    .required("slug", SLUG.describe(title="Rule Slug"))
    .required(
        "name",
        NON_EMPTY_STRING.max_length(100).describe(
            title="Rule Name",
            examples=["Waste Mass is Unique", "No Conflicting GasID or Credit"],
        ),
    )
    .required(
        "description",
        _RULE_DESCRIPTION.describe(
            title="Rule Description",
            description="What the rule validates and why it is necessary",
        ),
    )
    .required(
        "source_code_url",
        _GITHUB_URL.describe(
            title="Rule Source Code URL",
            description="GitHub URL pointing to the implementation of this rule",
        ),
    )
    .required(
        "execution_order",
        POSITIVE_INTEGER.describe(
            title="Rule Execution Order",
            description="Sequential order in which this rule must be executed",
        ),
    )
    .build()
)

AUDIT_RULE_DEFINITIONS: Final[ArraySchema] = (
    array(AUDIT_RULE_DEFINITION, min_items=1)
    .refine(audit_rule_sequence())
    .describe(
        title="Audit Rule Definitions",
        description="Audit rules to execute for methodology compliance, sorted by execution order",
    )
)

RULE_EXECUTION_RESULT: Final[ObjectSchema] = (
    record(
        "AuditRuleExecutionResult",
        title="Audit Rule Execution Result",
        description="Outcome of one audit rule executed against a MassID",
    )
    .required("rule_id", UUID_V4.describe(title="Rule ID"))
    .required("rule_slug", SLUG.describe(title="Rule Slug"))
    .required("rule_name", NON_EMPTY_STRING.max_length(100).describe(title="Rule Name"))
    .required("rule_description", _RULE_DESCRIPTION.describe(title="Rule Description"))
    .required("rule_source_code_url", _GITHUB_URL.describe(title="Rule Source Code URL"))
    .required("rule_execution_order", POSITIVE_INTEGER.describe(title="Rule Execution Order"))
    .required("execution_id", UUID_V4.describe(title="Execution ID"))
    .required("execution_started_at", ISO_TIMESTAMP.describe(title="Execution Started At"))
    .required("execution_completed_at", ISO_TIMESTAMP.describe(title="Execution Completed At"))
    .required("result", AUDIT_RESULT)
    .required(
        "rule_processor_checksum",
        NON_EMPTY_STRING.max_length(200).describe(
            title="Rule Processor Checksum",
            description="Checksum of the processor build that executed the rule",
        ),
    )
    .required(
        "rule_source_code_version",
        NON_EMPTY_STRING.max_length(200).describe(title="Rule Source Code Version"),
    )
    .refine(chronological("execution_started_at", "execution_completed_at"))
    .build()
)

RULE_EXECUTION_RESULTS: Final[ArraySchema] = (
    unique_by(
        RULE_EXECUTION_RESULT,
        lambda result: result["execution_id"],
        "execution_id values must be unique",
        label="execution_id",
    )
    .min(1)
    .describe(title="Rule Execution Results")
)

__all__ = [
    "AUDIT_RULE_DEFINITION",
    "AUDIT_RULE_DEFINITIONS",
    "RULE_EXECUTION_RESULT",
    "RULE_EXECUTION_RESULTS",
]
