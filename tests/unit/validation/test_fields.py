"""
provenance-schemas — unit tests for field-level constraints

File: tests/unit/validation/test_fields.py
Last updated: 2026-10-19

Purpose
- Validate type checks, value checks and their canonical messages.

What this test file should cover
- "expected X, got Y" type failures, booleans never accepted as numbers.
- Length, numeric bound, enumeration, date, timestamp and URL checks.
- First failing check wins; builders never mutate the original constraint.

Functional requirements
- Offline, deterministic.
"""

from __future__ import annotations

import math

import pytest

from provenance_schemas.schemas.primitives import (
    CHAIN_ID,
    ETHEREUM_ADDRESS,
    ISO_DATE,
    ISO_TIMESTAMP,
    LATITUDE,
    NON_EMPTY_STRING,
    POSITIVE_WEIGHT_KG,
    SHA256_HASH,
)
from provenance_schemas.validation import (
    CheckKind,
    ViolationKind,
    integer,
    literal,
    number,
    scalar,
    string,
)


def _message(constraint, value) -> str | None:
    violation = constraint.evaluate(value)
    return None if violation is None else violation.message


def test_type_mismatch_reports_json_type_names() -> None:
    violation = string().evaluate(5)
    assert violation is not None
    assert violation.kind is ViolationKind.TYPE
    assert violation.path == ()
    assert violation.message == "expected string, got integer"
    assert _message(number(), "1") == "expected number, got string"
    assert _message(number(), None) == "expected number, got null"
    assert _message(string(), [1]) == "expected string, got array"
    assert _message(string(), {"a": 1}) == "expected string, got object"


def test_booleans_are_never_numbers() -> None:
    assert _message(number(), True) == "expected number, got boolean"
    assert _message(integer(), False) == "expected integer, got boolean"
    assert _message(scalar(), True) is None


def test_integer_accepts_integral_floats_only() -> None:
    assert _message(integer(), 3.0) is None
    assert _message(integer(), 3.5) == "expected integer, got number"


def test_non_finite_numbers_are_rejected() -> None:
    assert _message(number(), math.nan) == "must be finite"
    assert _message(number(), math.inf) == "must be finite"


def test_empty_string_is_distinct_from_missing() -> None:
    violation = NON_EMPTY_STRING.evaluate("")
    assert violation is not None
    assert violation.kind is ViolationKind.VALUE
    assert violation.message == "must not be empty"


def test_length_bounds() -> None:
    bounded = string().min_length(3).max_length(5)
    assert _message(bounded, "ab") == "must contain at least 3 character(s)"
    assert _message(bounded, "abcdef") == "must contain at most 5 character(s)"
    assert _message(bounded, "abcd") is None


def test_numeric_bounds() -> None:
    assert _message(number().minimum(0), -1) == "must be greater than or equal to 0"
    assert _message(number().maximum(100), 100.5) == "must be less than or equal to 100"
    assert _message(POSITIVE_WEIGHT_KG, 0) == "must be greater than 0"
    assert _message(POSITIVE_WEIGHT_KG, 0.001) is None


def test_multiple_of_tolerates_float_error() -> None:
    assert _message(LATITUDE, -20.38) is None
    assert _message(LATITUDE, 0.3) is None
    assert _message(LATITUDE, 1.0005) == "must be a multiple of 0.001"


def test_one_of_lists_sorted_allowed_values() -> None:
    assert _message(CHAIN_ID, 1) == "invalid value 1; expected one of: 137, 80002"
    assert _message(literal("b", "a"), "c") == "invalid value 'c'; expected one of: a, b"
    assert _message(CHAIN_ID, 137) is None


def test_one_of_keeps_booleans_apart_from_integers() -> None:
    assert _message(literal(1, 2), True) == "expected integer, got boolean"
    assert _message(scalar().one_of(1, "x"), True) is not None


@pytest.mark.parametrize(
    "value",
    ["2024-02-29", "2023-12-31", "2000-01-01"],
)
def test_iso_date_accepts_calendar_dates(value: str) -> None:
    assert _message(ISO_DATE, value) is None


@pytest.mark.parametrize(
    "value",
    ["2023-02-29", "2024-13-01", "2024-1-01", "2024-01-01T00:00:00Z", ""],
)
def test_iso_date_rejects_invalid_dates(value: str) -> None:
    assert _message(ISO_DATE, value) == "must be a valid ISO 8601 date (YYYY-MM-DD)"


@pytest.mark.parametrize(
    "value",
    [
        "2024-12-05T11:02:47Z",
        "2024-12-05T11:02:47.000Z",
        "2024-12-05T11:02:47.5-03:00",
        "2024-12-05T23:59:59+23:59",
    ],
)
def test_iso_timestamp_accepts_offsets(value: str) -> None:
    assert _message(ISO_TIMESTAMP, value) is None


@pytest.mark.parametrize(
    "value",
    [
        "2024-13-05T11:02:47Z",
        "2024-02-30T11:02:47Z",
        "2024-12-05T24:00:00Z",
        "2024-12-05T11:60:00Z",
        "2024-12-05T11:02:47+24:00",
        "2024-12-05T11:02:47",
        "2024-12-05T11:02:47.1234Z",
    ],
)
def test_iso_timestamp_rejects_invalid_instants(value: str) -> None:
    assert _message(ISO_TIMESTAMP, value) == (
        "must be a valid ISO 8601 timestamp with timezone information"
    )


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        ("https://explore.provenance.dev/", True),
        ("http://localhost:8080/path", True),
        ("ipfs://QmHash", True),
        ("https://", False),
        ("not a url", False),
        ("example.com", False),
        ("", False),
    ],
)
def test_url_check(value: str, valid: bool) -> None:
    message = _message(string().url(), value)
    assert (message is None) is valid
    if not valid:
        assert message == "must be a valid URL"


def test_patterns_must_match_whole_value() -> None:
    assert _message(SHA256_HASH, "A" * 64) == (
        "must be a SHA-256 hash as 64 lowercase hexadecimal characters"
    )
    assert _message(SHA256_HASH, "a" * 64 + "\n") is not None
    assert _message(ETHEREUM_ADDRESS, "0x" + "a" * 40) is None


def test_first_failing_check_wins() -> None:
    constraint = string().non_empty().pattern(r"^[0-9]+$", "must be numeric")
    assert _message(constraint, "") == "must not be empty"
    assert _message(constraint, "x") == "must be numeric"


def test_builders_return_new_constraints() -> None:
    base = string()
    bounded = base.max_length(3)
    described = bounded.describe(title="Code", examples=["abc"])
    assert base.checks == ()
    assert bounded.find(CheckKind.MAX_LENGTH) is not None
    assert bounded.meta.title is None
    assert described.meta.title == "Code"
    assert described.meta.examples == ("abc",)
    assert described.checks == bounded.checks


def test_invalid_builder_arguments_raise() -> None:
    with pytest.raises(ValueError, match="multiple_of step must be > 0"):
        number().multiple_of(0)
    with pytest.raises(ValueError, match="at least one value"):
        literal()
