"""Certificate records (GasID, RecycledID) and their shared sub-records.

Display names carry the token id, and every displayed attribute mirrors the data it
summarizes.
"""

from __future__ import annotations

from typing import Final

from provenance_schemas.constants import DISPLAY_TOLERANCE
from provenance_schemas.metadata_refiners import attribute_matches, token_label
from provenance_schemas.refiners import calculation_result_matches
from provenance_schemas.schemas.entities import LOCATION, PARTICIPANT
from provenance_schemas.schemas.primitives import (
    CREDIT_AMOUNT,
    CREDIT_TYPE,
    GAS_TYPE,
    ISO_DATE,
    NON_EMPTY_STRING,
    NON_NEGATIVE_FLOAT,
    PARTICIPANT_ID_HASH,
    PARTICIPANT_ROLE,
    PERCENTAGE,
    POSITIVE_WEIGHT_KG,
    WASTE_SUBTYPE,
    WASTE_TYPE,
)
from provenance_schemas.schemas.records import NFT_RECORD, display_names, schema_info_for
from provenance_schemas.schemas.references import (
    AUDIT_REFERENCE,
    MASS_ID_REFERENCE,
    METHODOLOGY_REFERENCE,
)
from provenance_schemas.validation import (
    ArraySchema,
    ObjectSchema,
    RecordBuilder,
    array,
    literal,
    record,
    unique_by,
)

WASTE_PROPERTIES: Final[ObjectSchema] = (
    record(
        "WasteProperties",
        title="Waste Properties",
        description="Properties of the source waste (MassID)",
    )
    .required("type", WASTE_TYPE.describe(title="Source Waste Type"))
    .required("subtype", WASTE_SUBTYPE.describe(title="Source Waste Subtype"))
    .required(
        "net_weight_kg",
        POSITIVE_WEIGHT_KG.describe(
            title="Source Waste Net Weight",
            description="Net weight of the source waste in kilograms (kg)",
        ),
    )
    .build()
)

PARTICIPANTS: Final[ArraySchema] = (
    unique_by(
        PARTICIPANT,
        lambda participant: participant["id_hash"],
        "participant id_hash values must be unique",
        label="id_hash",
    )
    .min(1)
    .describe(title="Participants", description="Participants involved in the certificate")
)

GAS_ID_SUMMARY: Final[ObjectSchema] = (
    record("GasIDSummary", title="GasID Summary", description="Summary of the prevented emissions")
    .required("gas_type", GAS_TYPE)
    .required("credit_type", CREDIT_TYPE)
    .required("credit_amount", CREDIT_AMOUNT)
    .required(
        "prevented_co2e_kg",
        NON_NEGATIVE_FLOAT.describe(
            title="Prevented CO₂e (kg)",
            description="Prevented emissions in kilograms of CO₂ equivalent",
        ),
    )
    .build()
)

RECYCLED_ID_SUMMARY: Final[ObjectSchema] = (
    record(
        "RecycledIDSummary",
        title="RecycledID Summary",
        description="Summary of the recycled mass and issued credits",
    )
    .required(
        "recycled_mass_kg",
        POSITIVE_WEIGHT_KG.describe(title="Recycled Mass (kg)"),
    )
    .required("credit_type", CREDIT_TYPE)
    .required("credit_amount", CREDIT_AMOUNT)
    .build()
)


CALCULATION_VALUE: Final[ObjectSchema] = (
    record(
        "CalculationValue",
        title="Calculation Value",
        description="Named input or result of the prevented emissions formula",
    )
    .required(
        "reference",
        NON_EMPTY_STRING.max_length(3).describe(
            title="Reference", description="Symbol used in the formula", examples=["W", "R"]
        ),
    )
    .required("value", NON_NEGATIVE_FLOAT.describe(title="Value"))
    .required(
        "label",
        NON_EMPTY_STRING.max_length(100).describe(
            title="Label", examples=["Waste Weight (kg)", "Prevented Emissions (kg CO₂e)"]
        ),
    )
    .build()
)

PREVENTED_EMISSIONS_CALCULATION: Final[ObjectSchema] = (
    record(
        "PreventedEmissionsCalculation",
        title="Prevented Emissions Calculation",
        description="Formula and values used to compute the prevented emissions",
    )
    .required(
        "formula",
        NON_EMPTY_STRING.max_length(100).describe(title="Formula", examples=["R = W × EF"]),
    )
    .required("method", NON_EMPTY_STRING.max_length(100).describe(title="Calculation Method"))
    .required("date", ISO_DATE.describe(title="Calculation Date"))
    .required(
        "values",
        unique_by(
            CALCULATION_VALUE,
            lambda value: value["reference"],
            "calculation value references must be unique",
            label="reference",
        )
        .min(1)
        .describe(title="Calculation Values"),
    )
    .build()
)

REWARD_DISCOUNT: Final[ObjectSchema] = (
    record("RewardDiscount", title="Reward Discount", description="Discount applied to a reward")
    .required(
        "type",
        literal("large_business", "supply_chain_digitization").describe(title="Discount Type"),
    )
    .required("percentage", PERCENTAGE.describe(title="Discount Percentage"))
    .optional("reason", NON_EMPTY_STRING.max_length(200).describe(title="Discount Reason"))
    .build()
)

REWARD_ALLOCATION: Final[ObjectSchema] = (
    record(
        "RewardAllocation",
        title="Reward Allocation",
        description="Share of the certificate rewards allocated to a participant",
    )
    .required("participant_id_hash", PARTICIPANT_ID_HASH)
    .required("role", PARTICIPANT_ROLE)
    .required("reward_percentage", PERCENTAGE.describe(title="Reward Percentage"))
    .optional("discounts", array(REWARD_DISCOUNT).describe(title="Discounts"))
    .required("effective_percentage", PERCENTAGE.describe(title="Effective Percentage"))
    .build()
)

DISTRIBUTION_NOTES: Final[ObjectSchema] = (
    record("DistributionNotes", title="Distribution Notes")
    .optional(
        "discounts_applied",
        array(NON_EMPTY_STRING.max_length(200)).describe(title="Discounts Applied"),
    )
    .optional(
        "redirected_rewards",
        NON_EMPTY_STRING.max_length(300).describe(title="Redirected Rewards"),
    )
    .optional(
        "special_circumstances",
        array(NON_EMPTY_STRING.max_length(200)).describe(title="Special Circumstances"),
    )
    .build()
)

PARTICIPANT_REWARDS: Final[ObjectSchema] = (
    record(
        "ParticipantRewards",
        title="Participant Rewards",
        description="How the certificate rewards are distributed among participants",
    )
    .required(
        "distribution_basis",
        NON_EMPTY_STRING.max_length(200).describe(title="Distribution Basis"),
    )
    .required(
        "reward_allocations",
        array(REWARD_ALLOCATION, min_items=1).describe(title="Reward Allocations"),
    )
    .optional("distribution_notes", DISTRIBUTION_NOTES)
    .build()
)


def _certificate_data(name: str, title: str, summary: ObjectSchema) -> RecordBuilder:
    return (
        record(name, title=title, description="Certificate data with its chain of custody")
        .required("summary", summary)
        .required("methodology", METHODOLOGY_REFERENCE)
        .required("audit", AUDIT_REFERENCE)
        .required("mass_id", MASS_ID_REFERENCE)
        .required("waste_properties", WASTE_PROPERTIES)
        .required("origin_location", LOCATION.describe(title="Origin Location"))
        .required("participants", PARTICIPANTS)
    )


GAS_ID_DATA: Final[ObjectSchema] = (
    _certificate_data("GasIDData", "GasID Data", GAS_ID_SUMMARY)
    .required("prevented_emissions_calculation", PREVENTED_EMISSIONS_CALCULATION)
    .optional("participant_rewards", PARTICIPANT_REWARDS)
    .refine(calculation_result_matches())
    .build()
)
RECYCLED_ID_DATA: Final[ObjectSchema] = _certificate_data(
    "RecycledIDData", "RecycledID Data", RECYCLED_ID_SUMMARY
).build()


def _source_attributes(builder: RecordBuilder) -> RecordBuilder:
    return (
        builder.refine(attribute_matches("Methodology", ("methodology", "name")))
        .refine(attribute_matches("Credit Amount", ("summary", "credit_amount")))
        .refine(attribute_matches("Credit Type", ("summary", "credit_type")))
        .refine(attribute_matches("Source Waste Type", ("waste_properties", "type")))
        .refine(
            attribute_matches(
                "Source Weight (kg)",
                ("waste_properties", "net_weight_kg"),
                epsilon=DISPLAY_TOLERANCE,
            )
        )
        .refine(attribute_matches("Origin City", ("origin_location", "city")))
        .refine(attribute_matches("MassID", ("mass_id", "token_id"), render=token_label))
    )


GAS_ID_RECORD: Final[ObjectSchema] = (
    _source_attributes(
        display_names(
            NFT_RECORD.extend("GasID", title="GasID NFT IPFS Record"),
            "GasID",
            r"GasID #\d+ • .+ • .+t CO₂e",
            "GasID #<token_id> • <label> • <amount>t CO₂e",
        )
        .required("schema", schema_info_for("GasID"))
        .required("data", GAS_ID_DATA)
        .refine(attribute_matches("Gas Type", ("summary", "gas_type")))
        .refine(
            attribute_matches(
                "CO₂e Prevented (kg)",
                ("summary", "prevented_co2e_kg"),
                epsilon=DISPLAY_TOLERANCE,
            )
        )
    ).build()
)

RECYCLED_ID_RECORD: Final[ObjectSchema] = (
    _source_attributes(
        display_names(
            NFT_RECORD.extend("RecycledID", title="RecycledID NFT IPFS Record"),
            "RecycledID",
            r"RecycledID #\d+ • .+ • .+t Recycled",
            "RecycledID #<token_id> • <label> • <amount>t Recycled",
        )
        .required("schema", schema_info_for("RecycledID"))
        .required("data", RECYCLED_ID_DATA)
        .refine(
            attribute_matches(
                "Recycled Weight (kg)",
                ("summary", "recycled_mass_kg"),
                epsilon=DISPLAY_TOLERANCE,
            )
        )
    ).build()
)

__all__ = [
    "CALCULATION_VALUE",
    "GAS_ID_DATA",
    "GAS_ID_RECORD",
    "GAS_ID_SUMMARY",
    "PARTICIPANTS",
    "PARTICIPANT_REWARDS",
    "PREVENTED_EMISSIONS_CALCULATION",
    "RECYCLED_ID_DATA",
    "RECYCLED_ID_RECORD",
    "RECYCLED_ID_SUMMARY",
    "REWARD_ALLOCATION",
    "WASTE_PROPERTIES",
]
