"""
provenance-schemas — NFT display metadata refiners.

File: src/provenance_schemas/metadata_refiners.py
Last updated: 2026-10-19

Purpose
- Keep what a marketplace displays (``name``, ``short_name``, ``attributes``) in
  agreement with the record's blockchain reference and data.

What should be included in this file
- Token id carried in a formatted name.
- Single attribute against a value resolved from ``data``.
- One attribute per collection item (credit symbols, collection names).
- Attribute rendering helpers: ``#<token>`` labels and Unix millisecond dates.

Functional requirements
- Refiners attach to whole NFT records and read ``attributes`` and ``data`` (or the
  named display field and ``blockchain``), so they only run once those are valid.
- A data value that is absent (optional block not supplied) skips its attribute.
- Violations are reported on ``attributes`` (or the display field) with the data path
  the attribute mirrors.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from provenance_schemas.refiners import resolve_path
from provenance_schemas.reference_data import ReferenceData
from provenance_schemas.validation import (
    FieldPath,
    Refinement,
    ViolationLog,
    format_path,
    structural_key,
)

Render = Callable[[Any], object]


def token_id_in_name(field: str, prefix: str) -> Refinement:
    """``<prefix> #<digits>`` at the start of ``field`` must carry ``blockchain.token_id``.

    Names that do not start with the prefix are left to the field's own format check.
    """

    pattern = re.compile(rf"{re.escape(prefix)} #(\d+)")

    def check(
        nft: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        match = pattern.match(nft[field])
        token_id = nft["blockchain"]["token_id"]
        if match is None or match.group(1) == token_id:
            return log
        return log.add((field,), f"token_id must match blockchain.token_id: {token_id}")

    return Refinement(
        name=f"token_id_in_name[{field}]", apply=check, reads=(field, "blockchain")
    )


def attribute_matches(
    trait_type: str,
    data_path: FieldPath,
    *,
    epsilon: float | None = None,
    render: Render | None = None,
) -> Refinement:
    """The ``trait_type`` attribute must equal ``data.<data_path>``.

    ``render`` converts the data value to its displayed form first; ``epsilon`` allows
    numeric attributes to be rounded for display.
    """

    source = f"data.{format_path(data_path)}"

    def check(
        nft: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        expected = resolve_path(nft["data"], data_path)
        if expected is None:
            return log
        if render is not None:
            expected = render(expected)
        return _check_attribute(log, nft["attributes"], trait_type, expected, source, epsilon)

    return Refinement(
        name=f"attribute_matches[{trait_type}]", apply=check, reads=("attributes", "data")
    )


def attributes_for_items(
    collection_path: FieldPath,
    trait_key: str,
    value_key: str,
    *,
    epsilon: float | None = None,
) -> Refinement:
    """Each item of ``data.<collection_path>`` has an attribute named ``item[trait_key]``
    whose value equals ``item[value_key]``."""

    collection_label = f"data.{format_path(collection_path)}"

    def check(
        nft: Mapping[str, Any], log: ViolationLog, reference: ReferenceData | None
    ) -> ViolationLog:
        items: Sequence[Mapping[str, Any]] | None = resolve_path(nft["data"], collection_path)
        if items is None:
            return log
        for index, item in enumerate(items):
            expected = item.get(value_key)
            if expected is None:
                continue
            source = f"{collection_label}[{index}].{value_key}"
            log = _check_attribute(
                log, nft["attributes"], item[trait_key], expected, source, epsilon
            )
        return log

    return Refinement(
        name=f"attributes_for_items[{collection_label}]",
        apply=check,
        reads=("attributes", "data"),
    )


def token_label(token_id: object) -> str:
    """Attribute form of a referenced token: ``#123``."""

    return f"#{token_id}"


def unix_millis(text: str) -> int:
    """ISO 8601 date or timestamp as Unix milliseconds; naive values are read as UTC."""

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp() * 1000)


def _check_attribute(
    log: ViolationLog,
    attributes: Sequence[Mapping[str, Any]],
    trait_type: str,
    expected: object,
    source: str,
    epsilon: float | None,
) -> ViolationLog:
    attribute = next((item for item in attributes if item["trait_type"] == trait_type), None)
    if attribute is None:
        return log.add(
            ("attributes",), f"{trait_type} attribute must be present and match {source}"
        )
    if not _same_value(attribute["value"], expected, epsilon):
        return log.add(("attributes",), f"{trait_type} attribute must equal {source}")
    return log


def _same_value(actual: object, expected: object, epsilon: float | None) -> bool:
    if epsilon is not None and _is_number(actual) and _is_number(expected):
        return abs(actual - expected) <= epsilon  # type: ignore[operator]
    return structural_key(actual) == structural_key(expected)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = [
    "attribute_matches",
    "attributes_for_items",
    "token_id_in_name",
    "token_label",
    "unix_millis",
]
