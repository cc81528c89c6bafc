"""Location and participant sub-records."""

from __future__ import annotations

from typing import Final

from provenance_schemas.refiners import locality_subdivision
from provenance_schemas.schemas.primitives import (
    COUNTRY_CODE,
    LATITUDE,
    LONGITUDE,
    MUNICIPALITY,
    NON_EMPTY_STRING,
    PARTICIPANT_ID_HASH,
    PARTICIPANT_ROLE,
    SHA256_HASH,
    SUBDIVISION_CODE,
)
from provenance_schemas.validation import ObjectSchema, record, unique_items

COORDINATES: Final[ObjectSchema] = (
    record(
        "Coordinates",
        title="Coordinates",
        description="GPS coordinates of the location",
    )
    .required("latitude", LATITUDE)
    .required("longitude", LONGITUDE)
    .build()
)

LOCATION: Final[ObjectSchema] = (
    record(
        "Location",
        title="Location",
        description="Geographic location with address and coordinate information",
    )
    .required(
        "id_hash",
        SHA256_HASH.describe(
            title="Location ID Hash", description="Anonymized identifier for the location"
        ),
    )
    .required("city", MUNICIPALITY.describe(title="City"))
    .required("subdivision_code", SUBDIVISION_CODE)
    .required("country_code", COUNTRY_CODE)
    .required(
        "responsible_participant_id_hash",
        PARTICIPANT_ID_HASH.describe(
            title="Responsible Participant ID Hash",
            description="Anonymized ID of the participant responsible for this location",
        ),
    )
    .required("coordinates", COORDINATES)
    .refine(locality_subdivision())
    .build()
)

PARTICIPANT: Final[ObjectSchema] = (
    record(
        "Participant",
        title="Participant",
        description="A participant in the waste management supply chain",
    )
    .required("id_hash", PARTICIPANT_ID_HASH)
    .required(
        "name",
        NON_EMPTY_STRING.max_length(100).describe(
            title="Participant Name", examples=["Enlatados Produção", "Eco Reciclagem"]
        ),
    )
    .required(
        "roles",
        unique_items(PARTICIPANT_ROLE, "participant roles must be unique")
        .min(1)
        .describe(title="Participant Roles", description="Roles of the participant"),
    )
    .build()
)

__all__ = ["COORDINATES", "LOCATION", "PARTICIPANT"]
