"""
provenance-schemas — cross-field semantic refiners.

File: src/provenance_schemas/refiners.py
Last updated: 2026-10-19

Purpose
- Relational checks over sibling fields that are already individually valid.

What should be included in this file
- Locality/subdivision consistency against the administrative locality table.
- Blockchain network pair and environment consistency.
- Audit rule sequencing, summary counts and summary/value agreement for receipts.
- Purchase and retirement amount balances.
- Custody event references, chronological pairs and mutually exclusive fields.
- Prevented emissions calculation result against the GasID summary.

Functional requirements
- Each refiner threads an explicit ``ViolationLog`` and returns the extended log.
- Paths are relative to the schema the refiner is attached to.
- Refiners that need reference data fail loudly when it was not supplied.

Non-functional requirements
- Pure: no input mutation, no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from provenance_schemas.constants import (
    BLOCKCHAIN_NETWORKS,
    DEFAULT_LOCALITY_COUNTRY,
    DISPLAY_TOLERANCE,
)
from provenance_schemas.reference_data import ReferenceData, ReferenceDataError
from provenance_schemas.validation import (
    FieldPath,
    Refinement,
    ViolationKind,
    ViolationLog,
    format_path,
)

_AUDIT_RULE_UNIQUE_FIELDS: tuple[str, ...] = ("id", "slug", "execution_order")
_AMOUNT_TOLERANCE = 1e-9


def locality_subdivision(country_code: str = DEFAULT_LOCALITY_COUNTRY) -> Refinement:
    """Check that ``city`` exists in the country's locality table and agrees with
    ``subdivision_code``.

    Records from other countries are ignored. An unknown locality is reported once on
    ``city``. For a known locality the country prefix and the subdivision suffix are
    checked independently, so both violations can be reported together.
    """

    def check(
        location: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        if location["country_code"] != country_code:
            return log

        table = _require_reference(reference, "locality_subdivision").locality_table(
            country_code
        )
        entry = table.lookup(location["city"])
        if entry is None:
            return log.add(("city",), "must be a valid administrative locality")

        prefix, _, suffix = location["subdivision_code"].partition("-")
        if prefix != country_code:
            log = log.add(("subdivision_code",), f"must start with {country_code}")
        if entry.subdivision != suffix:
            log = log.add(
                ("subdivision_code",),
                "must match the subdivision code of the locality: "
                f"{country_code}-{entry.subdivision}",
            )
        return log

    return Refinement(
        name=f"locality_subdivision[{country_code}]",
        apply=check,
        reads=("city", "subdivision_code", "country_code"),
        reference_countries=(country_code,),
    )


def supported_network_pair() -> Refinement:
    """``chain_id`` and ``network_name`` must name the same supported network."""

    supported = {(chain_id, name) for chain_id, name in BLOCKCHAIN_NETWORKS.values()}
    described = " or ".join(
        f"{chain_id}/{name} ({environment})"
        for environment, (chain_id, name) in BLOCKCHAIN_NETWORKS.items()
    )
    message = f"chain_id and network_name must match a supported network: {described}"

    def check(
        blockchain: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        if (blockchain["chain_id"], blockchain["network_name"]) in supported:
            return log
        return log.add(("chain_id",), message).add(("network_name",), message)

    return Refinement(
        name="supported_network_pair", apply=check, reads=("chain_id", "network_name")
    )


def environment_matches_blockchain() -> Refinement:
    """When ``environment.blockchain_network`` is declared, ``blockchain`` must match it."""

    def check(
        nft: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        environment = nft.get("environment")
        if environment is None:
            return log
        network = environment["blockchain_network"]
        chain_id, network_name = BLOCKCHAIN_NETWORKS[network]
        blockchain = nft["blockchain"]
        if blockchain["chain_id"] != chain_id:
            log = log.add(
                ("blockchain", "chain_id"),
                f"must be {chain_id} when environment.blockchain_network is {network}",
            )
        if blockchain["network_name"] != network_name:
            log = log.add(
                ("blockchain", "network_name"),
                f"must be {network_name} when environment.blockchain_network is {network}",
            )
        return log

    return Refinement(
        name="environment_matches_blockchain",
        apply=check,
        reads=("environment", "blockchain"),
    )


def audit_rule_sequence() -> Refinement:
    """Rule ids, slugs and execution orders are unique and sorted by execution order."""

    def check(
        rules: Sequence[Mapping[str, Any]], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        seen: dict[str, set[object]] = {name: set() for name in _AUDIT_RULE_UNIQUE_FIELDS}
        for index, rule in enumerate(rules):
            for name in _AUDIT_RULE_UNIQUE_FIELDS:
                value = rule[name]
                if value in seen[name]:
                    log = log.add(
                        (index, name),
                        f"duplicate {name} found: {value}",
                        ViolationKind.UNIQUENESS,
                    )
                else:
                    seen[name].add(value)

        for index in range(1, len(rules)):
            previous = rules[index - 1]["execution_order"]
            current = rules[index]["execution_order"]
            if current < previous:
                log = log.add(
                    (index, "execution_order"),
                    f"rules must be sorted by execution_order; found {current} after {previous}",
                )
        return log

    return Refinement(name="audit_rule_sequence", apply=check)


def count_matches(count_path: FieldPath, collection_path: FieldPath, message: str) -> Refinement:
    """The integer at ``count_path`` equals the length of the array at ``collection_path``."""

    def check(
        value: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        count = resolve_path(value, count_path)
        items = resolve_path(value, collection_path)
        if count is None or items is None:
            return log
        if count != len(items):
            log = log.add(count_path, message)
        return log

    return Refinement(
        name=f"count_matches[{format_path(count_path)}]",
        apply=check,
        reads=_top_level_reads(count_path, collection_path),
    )


def summary_values_match(
    summary_path: FieldPath,
    collection_path: FieldPath,
    key: str,
    noun: str,
) -> Refinement:
    """Every value listed at ``summary_path`` appears as ``item[key]`` in the collection,
    and every collection value is listed in the summary."""

    summary_label = format_path(summary_path)
    collection_label = format_path(collection_path)

    def check(
        value: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        summary = resolve_path(value, summary_path)
        items = resolve_path(value, collection_path)
        if summary is None or items is None:
            return log
        listed = list(dict.fromkeys(summary))
        present = list(dict.fromkeys(item[key] for item in items))
        for entry in listed:
            if entry not in present:
                log = log.add(summary_path, f"{noun} {entry} is missing from {collection_label}")
        for entry in present:
            if entry not in listed:
                log = log.add(summary_path, f"{noun} {entry} is missing from {summary_label}")
        return log

    return Refinement(
        name=f"summary_values_match[{summary_label}]",
        apply=check,
        reads=_top_level_reads(summary_path, collection_path),
    )


def retirement_amounts_balance() -> Refinement:
    """Retired amounts agree across certificates, credits, collections and the summary.

    Certificates must point at declared collections and credits, never retire more than
    they hold, and break their retired amount down exactly by credit. Credit and
    collection amounts equal the per-certificate totals, and the summary total equals
    every one of those sums.
    """

    def check(
        data: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        summary = data["summary"]
        credit_by_slug = {credit["slug"]: credit for credit in data["credits"]}
        credit_symbols = {credit["symbol"] for credit in data["credits"]}
        collection_slugs = {collection["slug"] for collection in data["collections"]}

        retired_by_symbol: dict[str, float] = {}
        retired_by_collection: dict[str, float] = {}
        retired_total = 0.0

        for index, certificate in enumerate(data["certificates"]):
            if certificate["collection_slug"] not in collection_slugs:
                log = log.add(
                    ("certificates", index, "collection_slug"),
                    "collection_slug must match a collection slug in collections",
                )
            if certificate["retired_amount"] > certificate["total_amount"]:
                log = log.add(
                    ("certificates", index, "retired_amount"),
                    "retired_amount cannot exceed total_amount",
                )
            breakdown = certificate["credits_retired"]
            if not _nearly_equal(
                sum(credit["amount"] for credit in breakdown), certificate["retired_amount"]
            ):
                log = log.add(
                    ("certificates", index, "credits_retired"),
                    "credits_retired amounts must sum to retired_amount",
                )
            for position, credit in enumerate(breakdown):
                path = ("certificates", index, "credits_retired", position)
                referenced = credit_by_slug.get(credit["credit_slug"])
                if referenced is None:
                    log = log.add(
                        (*path, "credit_slug"), "credit_slug must match a credit slug in credits"
                    )
                if credit["credit_symbol"] not in credit_symbols:
                    log = log.add(
                        (*path, "credit_symbol"),
                        "credit_symbol must match a credit symbol in credits",
                    )
                elif referenced is not None and referenced["symbol"] != credit["credit_symbol"]:
                    log = log.add(
                        (*path, "credit_symbol"),
                        "credit_symbol must match the symbol of the referenced credit_slug",
                    )
                symbol = credit["credit_symbol"]
                retired_by_symbol[symbol] = retired_by_symbol.get(symbol, 0.0) + credit["amount"]
            slug = certificate["collection_slug"]
            retired_by_collection[slug] = (
                retired_by_collection.get(slug, 0.0) + certificate["retired_amount"]
            )
            retired_total += certificate["retired_amount"]

        for symbol in dict.fromkeys(summary["credit_symbols"]):
            if retired_by_symbol.get(symbol, 0.0) == 0:
                log = log.add(
                    ("summary", "credit_symbols"),
                    f"credit symbol {symbol} has no retired amount in certificates",
                )

        expected_total = summary["total_retirement_amount"]
        sources = (
            ("certificates.retired_amount", retired_total),
            ("credits.amount", sum(credit["amount"] for credit in data["credits"])),
            ("collections.amount", sum(item["amount"] for item in data["collections"])),
        )
        for label, total in sources:
            if not _nearly_equal(total, expected_total):
                log = log.add(
                    ("summary", "total_retirement_amount"), f"must equal the sum of {label}"
                )

        for index, credit in enumerate(data["credits"]):
            if not _nearly_equal(credit["amount"], retired_by_symbol.get(credit["symbol"], 0.0)):
                log = log.add(
                    ("credits", index, "amount"),
                    "must equal the amount retired for this credit symbol across certificates",
                )
        for index, collection in enumerate(data["collections"]):
            retired = retired_by_collection.get(collection["slug"], 0.0)
            if not _nearly_equal(collection["amount"], retired):
                log = log.add(
                    ("collections", index, "amount"),
                    "must equal the amount retired from certificates in this collection",
                )
        return log

    return Refinement(
        name="retirement_amounts_balance",
        apply=check,
        reads=("summary", "collections", "credits", "certificates"),
    )


def calculation_result_matches(
    result_reference: str = "R",
    *,
    epsilon: float = DISPLAY_TOLERANCE,
) -> Refinement:
    """The ``result_reference`` value of ``prevented_emissions_calculation`` must equal
    ``summary.prevented_co2e_kg`` within ``epsilon``."""

    path: FieldPath = ("prevented_emissions_calculation", "values")

    def check(
        data: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        values = data["prevented_emissions_calculation"]["values"]
        result = next((item for item in values if item["reference"] == result_reference), None)
        if result is None:
            return log.add(
                path,
                "prevented_emissions_calculation.values must include a value with "
                f'reference "{result_reference}"',
            )
        if abs(result["value"] - data["summary"]["prevented_co2e_kg"]) > epsilon:
            return log.add(
                path,
                f"prevented_emissions_calculation {result_reference} value must match "
                "summary.prevented_co2e_kg",
            )
        return log

    return Refinement(
        name="calculation_result_matches",
        apply=check,
        reads=("summary", "prevented_emissions_calculation"),
    )


def custody_references_declared() -> Refinement:
    """Chain of custody events may only name declared participants and locations."""

    def check(
        data: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        participants = {participant["id_hash"] for participant in data["participants"]}
        locations = {location["id_hash"] for location in data["locations"]}
        for index, event in enumerate(data["chain_of_custody"]["events"]):
            path = ("chain_of_custody", "events", index)
            if event["participant_id_hash"] not in participants:
                log = log.add(
                    (*path, "participant_id_hash"),
                    "participant ID hashes in chain of custody events must exist in "
                    "participants",
                )
            if event["location_id_hash"] not in locations:
                log = log.add(
                    (*path, "location_id_hash"),
                    "location ID hashes in chain of custody events must exist in locations",
                )
        return log

    return Refinement(
        name="custody_references_declared",
        apply=check,
        reads=("locations", "participants", "chain_of_custody"),
    )


def chronological(earlier: str, later: str) -> Refinement:
    """``earlier`` must not come after ``later``.

    Both fields hold either Unix millisecond integers or ISO 8601 timestamps.
    """

    def check(
        value: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        if _instant(value[earlier]) > _instant(value[later]):
            log = log.add((later,), f"{later} must be greater than or equal to {earlier}")
        return log

    return Refinement(
        name=f"chronological[{earlier}<={later}]", apply=check, reads=(earlier, later)
    )


def exactly_one_of(first: str, second: str) -> Refinement:
    """Exactly one of two optional fields is present."""

    def check(
        value: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        present = [name for name in (first, second) if name in value]
        if not present:
            message = f"either {first} or {second} must be provided"
        elif len(present) == 2:
            message = f"{first} and {second} are mutually exclusive"
        else:
            return log
        return log.add((first,), message).add((second,), message)

    return Refinement(
        name=f"exactly_one_of[{first},{second}]", apply=check, reads=(first, second)
    )


def purchase_retirement_consistent() -> Refinement:
    """``retirement`` is present exactly when some credit has a positive retirement_amount."""

    def check(
        data: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        retiring = [
            index
            for index, credit in enumerate(data["credits"])
            if credit.get("retirement_amount", 0) > 0
        ]
        if "retirement" in data and not retiring:
            return log.add(
                ("retirement",),
                "retirement is present but no credit has retirement_amount greater than 0",
            )
        if "retirement" not in data:
            for index in retiring:
                log = log.add(
                    ("credits", index, "retirement_amount"),
                    "credit retirement_amount greater than 0 requires retirement details",
                )
        return log

    return Refinement(
        name="purchase_retirement_consistent", apply=check, reads=("credits", "retirement")
    )


def purchase_amounts_balance() -> Refinement:
    """Purchased and retired amounts agree across certificates, credits, collections,
    participant rewards and the summary."""

    def check(
        data: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        summary = data["summary"]
        credit_slugs = {credit["slug"] for credit in data["credits"]}
        collection_slugs = {collection["slug"] for collection in data["collections"]}

        purchased_by_credit: dict[str, float] = {}
        retired_by_credit: dict[str, float] = {}
        purchased_by_collection: dict[str, float] = {}
        purchased_total = 0.0

        for index, certificate in enumerate(data["certificates"]):
            path = ("certificates", index)
            if certificate["collection_slug"] not in collection_slugs:
                log = log.add(
                    (*path, "collection_slug"),
                    "collection_slug must match a collection slug in collections",
                )
            if certificate["credit_slug"] not in credit_slugs:
                log = log.add(
                    (*path, "credit_slug"), "credit_slug must match a credit slug in credits"
                )
            if certificate["retired_amount"] > certificate["purchased_amount"]:
                log = log.add(
                    (*path, "retired_amount"), "retired_amount cannot exceed purchased_amount"
                )
            if certificate["purchased_amount"] > certificate["total_amount"]:
                log = log.add(
                    (*path, "purchased_amount"), "purchased_amount cannot exceed total_amount"
                )
            purchased = certificate["purchased_amount"]
            credit_slug = certificate["credit_slug"]
            collection_slug = certificate["collection_slug"]
            purchased_total += purchased
            purchased_by_credit[credit_slug] = purchased_by_credit.get(credit_slug, 0.0) + purchased
            retired_by_credit[credit_slug] = (
                retired_by_credit.get(credit_slug, 0.0) + certificate["retired_amount"]
            )
            purchased_by_collection[collection_slug] = (
                purchased_by_collection.get(collection_slug, 0.0) + purchased
            )

        sources = (
            ("certificates.purchased_amount", purchased_total),
            ("credits.purchase_amount", sum(item["purchase_amount"] for item in data["credits"])),
            (
                "collections.credit_amount",
                sum(item["credit_amount"] for item in data["collections"]),
            ),
        )
        for label, total in sources:
            if not _nearly_equal(total, summary["total_credits"]):
                log = log.add(("summary", "total_credits"), f"must equal the sum of {label}")

        for index, credit in enumerate(data["credits"]):
            if not _nearly_equal(
                credit["purchase_amount"], purchased_by_credit.get(credit["slug"], 0.0)
            ):
                log = log.add(
                    ("credits", index, "purchase_amount"),
                    "must equal the purchased_amount of certificates for this credit slug",
                )
            if not _nearly_equal(
                credit.get("retirement_amount", 0.0), retired_by_credit.get(credit["slug"], 0.0)
            ):
                log = log.add(
                    ("credits", index, "retirement_amount"),
                    "must equal the retired_amount of certificates for this credit slug",
                )
        for index, collection in enumerate(data["collections"]):
            purchased = purchased_by_collection.get(collection["slug"], 0.0)
            if not _nearly_equal(collection["credit_amount"], purchased):
                log = log.add(
                    ("collections", index, "credit_amount"),
                    "must equal the purchased_amount of certificates in this collection",
                )

        rewards = sum(reward["usdc_amount"] for reward in data["participant_rewards"])
        if not _nearly_equal(rewards, summary["total_usdc_amount"]):
            log = log.add(
                ("summary", "total_usdc_amount"),
                "must equal the sum of participant_rewards.usdc_amount",
            )
        return log

    return Refinement(
        name="purchase_amounts_balance",
        apply=check,
        reads=("summary", "collections", "credits", "certificates", "participant_rewards"),
    )


def _require_reference(reference: ReferenceData | None, refinement_name: str) -> ReferenceData:
    if reference is None:
        raise ReferenceDataError(
            f"refinement {refinement_name!r} requires reference data; "
            "pass reference=... to validate()"
        )
    return reference


def resolve_path(value: object, path: FieldPath) -> Any:
    """Value at ``path`` under ``value``, or ``None`` when any step is absent."""

    cursor: Any = value
    for part in path:
        if isinstance(part, int):
            if not isinstance(cursor, Sequence) or part >= len(cursor):
                return None
        elif not isinstance(cursor, Mapping) or part not in cursor:
            return None
        cursor = cursor[part]
    return cursor


def _nearly_equal(left: float, right: float) -> bool:
    return abs(left - right) <= _AMOUNT_TOLERANCE


def _instant(value: int | str) -> float:
    if isinstance(value, str):
        return datetime.fromisoformat(value).timestamp() * 1000
    return float(value)


def _top_level_reads(*paths: FieldPath) -> tuple[str, ...]:
    names: list[str] = []
    for path in paths:
        head = path[0]
        if isinstance(head, str) and head not in names:
            names.append(head)
    return tuple(names)


__all__ = [
    "audit_rule_sequence",
    "calculation_result_matches",
    "chronological",
    "count_matches",
    "custody_references_declared",
    "environment_matches_blockchain",
    "exactly_one_of",
    "locality_subdivision",
    "purchase_amounts_balance",
    "purchase_retirement_consistent",
    "resolve_path",
    "retirement_amounts_balance",
    "summary_values_match",
    "supported_network_pair",
]
