"""
provenance-schemas — MassID record.

File: src/provenance_schemas/schemas/mass_id.py
Last updated: 2026-10-19

Purpose
- NFT tracking a batch of waste from generation to final processing, with its chain
  of custody, the locations it passed through and the participants involved.

What should be included in this file
- Waste properties with optional local classification.
- Chain of custody events with attributes and attachments.
- Geographic summary bounded by first and last reported timestamps.

Functional requirements
- Locations and participants are unique by id hash; every custody event references
  a declared participant and location.
- ``first_reported_timestamp`` is not after ``last_reported_timestamp``.
- Waste type, subtype and local classification attributes mirror the data.
"""

from __future__ import annotations

from typing import Final

from provenance_schemas.metadata_refiners import attribute_matches
from provenance_schemas.refiners import chronological, custody_references_declared
from provenance_schemas.schemas.certificates import PARTICIPANTS
from provenance_schemas.schemas.entities import LOCATION
from provenance_schemas.schemas.primitives import (
    MINUTES,
    NON_EMPTY_STRING,
    NON_NEGATIVE_FLOAT,
    PARTICIPANT_ID_HASH,
    SHA256_HASH,
    UNIX_TIMESTAMP,
    UUID_V4,
    WASTE_SUBTYPE,
    WASTE_TYPE,
)
from provenance_schemas.schemas.records import NFT_RECORD, display_names, schema_info_for
from provenance_schemas.validation import (
    ArraySchema,
    ObjectSchema,
    array,
    boolean,
    literal,
    record,
    scalar,
    unique_by,
)

LOCAL_CLASSIFICATION: Final[ObjectSchema] = (
    record(
        "LocalClassification",
        title="Local Classification",
        description="Local or regional waste classification code and description",
    )
    .required(
        "code",
        NON_EMPTY_STRING.max_length(20).describe(
            title="Classification Code", examples=["20 01 01", "IBAMA-A001"]
        ),
    )
    .required(
        "description",
        NON_EMPTY_STRING.max_length(200).describe(title="Classification Description"),
    )
    .required("system", literal("IBAMA").describe(title="Classification System"))
    .build()
)

MASS_ID_WASTE_PROPERTIES: Final[ObjectSchema] = (
    record(
        "MassIDWasteProperties",
        title="Waste Properties",
        description="Standardized waste material properties and regulatory information",
    )
    .required("type", WASTE_TYPE)
    .required("subtype", WASTE_SUBTYPE)
    .optional("local_classification", LOCAL_CLASSIFICATION)
    .required("measurement_unit", literal("kg", "ton").describe(title="Measurement Unit"))
    .required(
        "net_weight",
        NON_NEGATIVE_FLOAT.describe(
            title="Net Weight",
            description="Net weight of the waste batch in the measurement unit",
        ),
    )
    .build()
)

EVENT_ATTRIBUTE: Final[ObjectSchema] = (
    record("EventAttribute", title="Event Attribute", description="Attribute of a custody event")
    .required("name", NON_EMPTY_STRING.max_length(100).describe(title="Attribute Name"))
    .optional("value", scalar().describe(title="Attribute Value"))
    .optional("preserved_sensitivity", boolean().describe(title="Preserved Sensitivity"))
    .optional(
        "format",
        literal("KILOGRAM", "DATE", "CURRENCY", "PERCENTAGE", "COORDINATE").describe(
            title="Event Attribute Format"
        ),
    )
    .build()
)

EVENT_ATTACHMENT: Final[ObjectSchema] = (
    record(
        "EventAttachment",
        title="Event Attachment",
        description="Supporting document for a custody event",
    )
    .required(
        "type",
        NON_EMPTY_STRING.max_length(50).describe(
            title="Attachment Type", examples=["Waste Transfer Note", "Invoice"]
        ),
    )
    .optional(
        "document_number", NON_EMPTY_STRING.max_length(50).describe(title="Document Number")
    )
    .required(
        "reference",
        NON_EMPTY_STRING.describe(
            title="Attachment Reference",
            description="IPFS hash, file name or external URL of the attachment",
        ),
    )
    .optional("issue_date", UNIX_TIMESTAMP.describe(title="Issue Date"))
    .optional("issuer", NON_EMPTY_STRING.max_length(100).describe(title="Attachment Issuer"))
    .build()
)

CUSTODY_EVENT: Final[ObjectSchema] = (
    record(
        "ChainOfCustodyEvent",
        title="Chain of Custody Event",
        description="Custody transfer or processing step",
    )
    .required("event_id", UUID_V4.describe(title="Event ID"))
    .required(
        "event_name",
        NON_EMPTY_STRING.max_length(50).describe(
            title="Event Name", examples=["Pick-up", "Weighing", "Drop-off", "Recycling"]
        ),
    )
    .optional("description", NON_EMPTY_STRING.max_length(200).describe(title="Event Description"))
    .required("timestamp", UNIX_TIMESTAMP.describe(title="Event Timestamp"))
    .required("participant_id_hash", PARTICIPANT_ID_HASH)
    .required(
        "location_id_hash",
        SHA256_HASH.describe(
            title="Location ID Hash", description="Reference to a location in locations"
        ),
    )
    .optional("weight", NON_NEGATIVE_FLOAT.describe(title="Event Weight"))
    .optional("attributes", array(EVENT_ATTRIBUTE).describe(title="Event Attributes"))
    .optional("attachments", array(EVENT_ATTACHMENT).describe(title="Event Attachments"))
    .build()
)

CHAIN_OF_CUSTODY: Final[ObjectSchema] = (
    record(
        "ChainOfCustody",
        title="Chain of Custody",
        description="Custody tracking from waste generation to final processing",
    )
    .required(
        "events",
        array(CUSTODY_EVENT, min_items=1).describe(
            title="Custody Events",
            description="Chronological sequence of custody and processing events",
        ),
    )
    .required(
        "total_duration_minutes",
        MINUTES.describe(
            title="Total Duration (minutes)",
            description="Total time from first to last event in minutes",
        ),
    )
    .build()
)

GEOGRAPHIC_DATA: Final[ObjectSchema] = (
    record(
        "GeographicData",
        title="Geographic Data",
        description="Origin and destination of the waste with temporal bounds",
    )
    .required("from_location_id_hash", SHA256_HASH.describe(title="From Location ID Hash"))
    .required("to_location_id_hash", SHA256_HASH.describe(title="To Location ID Hash"))
    .required(
        "first_reported_timestamp", UNIX_TIMESTAMP.describe(title="First Reported Timestamp")
    )
    .required(
        "last_reported_timestamp", UNIX_TIMESTAMP.describe(title="Last Reported Timestamp")
    )
    .refine(chronological("first_reported_timestamp", "last_reported_timestamp"))
    .build()
)

LOCATIONS: Final[ArraySchema] = (
    unique_by(
        LOCATION,
        lambda location: location["id_hash"],
        "location id_hash values must be unique",
        label="id_hash",
    )
    .min(1)
    .describe(title="Locations", description="All locations referenced in this MassID")
)

MASS_ID_DATA: Final[ObjectSchema] = (
    record(
        "MassIDData",
        title="MassID Data",
        description="Waste tracking and chain of custody information",
    )
    .required("waste_properties", MASS_ID_WASTE_PROPERTIES)
    .required("locations", LOCATIONS)
    .required("participants", PARTICIPANTS)
    .required("chain_of_custody", CHAIN_OF_CUSTODY)
    .required("geographic_data", GEOGRAPHIC_DATA)
    .refine(custody_references_declared())
    .build()
)

MASS_ID_RECORD: Final[ObjectSchema] = (
    display_names(
        NFT_RECORD.extend(
            "MassID",
            title="MassID NFT IPFS Record",
            description="Waste batch metadata, chain of custody events and display attributes",
        ),
        "MassID",
        r"MassID #\d+ • .+ • .+t",
        "MassID #<token_id> • <waste type> • <amount>t",
    )
    .required("schema", schema_info_for("MassID"))
    .required("data", MASS_ID_DATA)
    .refine(attribute_matches("Waste Type", ("waste_properties", "type")))
    .refine(attribute_matches("Waste Subtype", ("waste_properties", "subtype")))
    .refine(
        attribute_matches(
            "Local Waste Classification ID", ("waste_properties", "local_classification", "code")
        )
    )
    .build()
)

__all__ = [
    "CHAIN_OF_CUSTODY",
    "CUSTODY_EVENT",
    "EVENT_ATTACHMENT",
    "EVENT_ATTRIBUTE",
    "GEOGRAPHIC_DATA",
    "LOCAL_CLASSIFICATION",
    "LOCATIONS",
    "MASS_ID_DATA",
    "MASS_ID_RECORD",
    "MASS_ID_WASTE_PROPERTIES",
]
