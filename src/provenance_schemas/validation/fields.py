"""
provenance-schemas — field-level constraints.

File: src/provenance_schemas/validation/fields.py
Last updated: 2026-10-19

Purpose
- Describe leaf-value constraints as explicit, statically composed values: a value
  type, an ordered tuple of checks and documentation metadata.

What should be included in this file
- JSON type checks with "expected <type>, got <type>" messages.
- Value checks (length, pattern, numeric bounds, enumerations, calendar dates,
  timestamps with offsets, URLs) with one canonical message each.
- Immutable builder methods so constraints can be shared and specialised.

Functional requirements
- ``evaluate`` reports at most one violation per value: the type failure, or the
  first failing check in declaration order.
- Booleans are never accepted as numbers; non-finite numbers are rejected.

Non-functional requirements
- Pure functions only; no access to sibling fields or reference data.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import StrEnum
from typing import Final
from urllib.parse import urlsplit

from provenance_schemas.validation.issues import Violation, ViolationKind

_ISO_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_ISO_DATETIME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.[0-9]{1,3})?(Z|[+-]([0-9]{2}):([0-9]{2}))"
)
_URL_SCHEME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")
_HIERARCHICAL_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https", "ftp", "ws", "wss"})
_MULTIPLE_OF_TOLERANCE: Final[float] = 1e-9


class ValueType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SCALAR = "scalar"


class CheckKind(StrEnum):
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    MINIMUM = "minimum"
    EXCLUSIVE_MINIMUM = "exclusive_minimum"
    MAXIMUM = "maximum"
    MULTIPLE_OF = "multiple_of"
    ONE_OF = "one_of"
    ISO_DATE = "iso_date"
    ISO_DATETIME = "iso_datetime"
    URL = "url"


@dataclass(frozen=True, slots=True)
class Check:
    """One value check: kind, parameter and optional message override."""

    kind: CheckKind
    param: object = None
    message: str | None = None

    def render(self, value: object) -> str:
        if self.message is not None:
            return self.message
        if self.kind is CheckKind.MIN_LENGTH:
            if self.param == 1:
                return "must not be empty"
            return f"must contain at least {self.param} character(s)"
        if self.kind is CheckKind.MAX_LENGTH:
            return f"must contain at most {self.param} character(s)"
        if self.kind is CheckKind.PATTERN:
            assert isinstance(self.param, re.Pattern)
            return f"must match pattern {self.param.pattern}"
        if self.kind is CheckKind.MINIMUM:
            return f"must be greater than or equal to {format_number(self.param)}"
        if self.kind is CheckKind.EXCLUSIVE_MINIMUM:
            return f"must be greater than {format_number(self.param)}"
        if self.kind is CheckKind.MAXIMUM:
            return f"must be less than or equal to {format_number(self.param)}"
        if self.kind is CheckKind.MULTIPLE_OF:
            return f"must be a multiple of {format_number(self.param)}"
        if self.kind is CheckKind.ONE_OF:
            assert isinstance(self.param, tuple)
            expected = ", ".join(sorted(str(item) for item in self.param))
            return f"invalid value {value!r}; expected one of: {expected}"
        if self.kind is CheckKind.ISO_DATE:
            return "must be a valid ISO 8601 date (YYYY-MM-DD)"
        if self.kind is CheckKind.ISO_DATETIME:
            return "must be a valid ISO 8601 timestamp with timezone information"
        return "must be a valid URL"

    def passes(self, value: object) -> bool:
        kind = self.kind
        if kind is CheckKind.MIN_LENGTH:
            return isinstance(value, str) and len(value) >= _as_number(self.param)
        if kind is CheckKind.MAX_LENGTH:
            return isinstance(value, str) and len(value) <= _as_number(self.param)
        if kind is CheckKind.PATTERN:
            assert isinstance(self.param, re.Pattern)
            return isinstance(value, str) and self.param.fullmatch(value) is not None
        if kind is CheckKind.MINIMUM:
            return _as_number(value) >= _as_number(self.param)
        if kind is CheckKind.EXCLUSIVE_MINIMUM:
            return _as_number(value) > _as_number(self.param)
        if kind is CheckKind.MAXIMUM:
            return _as_number(value) <= _as_number(self.param)
        if kind is CheckKind.MULTIPLE_OF:
            return is_multiple_of(_as_number(value), _as_number(self.param))
        if kind is CheckKind.ONE_OF:
            assert isinstance(self.param, tuple)
            return any(same_literal(value, allowed) for allowed in self.param)
        if kind is CheckKind.ISO_DATE:
            return isinstance(value, str) and is_iso_date(value)
        if kind is CheckKind.ISO_DATETIME:
            return isinstance(value, str) and is_iso_datetime(value)
        return isinstance(value, str) and is_url(value)


@dataclass(frozen=True, slots=True)
class FieldMeta:
    """Documentation metadata carried into schema export."""

    title: str | None = None
    description: str | None = None
    examples: tuple[object, ...] = ()

    def merged(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        examples: tuple[object, ...] | list[object] | None = None,
    ) -> FieldMeta:
        return FieldMeta(
            title=title if title is not None else self.title,
            description=description if description is not None else self.description,
            examples=tuple(examples) if examples is not None else self.examples,
        )

    def as_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        if self.title is not None:
            payload["title"] = self.title
        if self.description is not None:
            payload["description"] = self.description
        if self.examples:
            payload["examples"] = list(self.examples)
        return payload


@dataclass(frozen=True, slots=True)
class FieldConstraint:
    """Immutable leaf constraint; builder methods return specialised copies."""

    value_type: ValueType
    checks: tuple[Check, ...] = ()
    meta: FieldMeta = field(default_factory=FieldMeta)

    def _with(self, check: Check) -> FieldConstraint:
        return replace(self, checks=(*self.checks, check))

    def min_length(self, length: int, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.MIN_LENGTH, length, message))

    def non_empty(self) -> FieldConstraint:
        return self.min_length(1)

    def max_length(self, length: int, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.MAX_LENGTH, length, message))

    def pattern(
        self, regex: str | re.Pattern[str], message: str | None = None
    ) -> FieldConstraint:
        compiled = regex if isinstance(regex, re.Pattern) else re.compile(regex)
        return self._with(Check(CheckKind.PATTERN, compiled, message))

    def minimum(self, bound: float, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.MINIMUM, bound, message))

    def exclusive_minimum(self, bound: float, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.EXCLUSIVE_MINIMUM, bound, message))

    def maximum(self, bound: float, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.MAXIMUM, bound, message))

    def multiple_of(self, step: float, message: str | None = None) -> FieldConstraint:
        if step <= 0:
            raise ValueError("multiple_of step must be > 0")
        return self._with(Check(CheckKind.MULTIPLE_OF, step, message))

    def one_of(
        self, *values: str | int | float | bool, message: str | None = None
    ) -> FieldConstraint:
        if not values:
            raise ValueError("one_of requires at least one value")
        return self._with(Check(CheckKind.ONE_OF, tuple(values), message))

    def iso_date(self, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.ISO_DATE, None, message))

    def iso_datetime(self, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.ISO_DATETIME, None, message))

    def url(self, message: str | None = None) -> FieldConstraint:
        return self._with(Check(CheckKind.URL, None, message))

    def describe(
        self,
        title: str | None = None,
        description: str | None = None,
        examples: tuple[object, ...] | list[object] | None = None,
    ) -> FieldConstraint:
        return replace(
            self, meta=self.meta.merged(title=title, description=description, examples=examples)
        )

    def find(self, kind: CheckKind) -> Check | None:
        for check in self.checks:
            if check.kind is kind:
                return check
        return None

    def evaluate(self, value: object) -> Violation | None:
        """Return the first violation for ``value`` or ``None`` when it is acceptable."""

        if not _matches_type(self.value_type, value):
            expected = _expected_label(self.value_type)
            return Violation(
                path=(),
                message=f"expected {expected}, got {json_type_name(value)}",
                kind=ViolationKind.TYPE,
            )
        if isinstance(value, float) and not math.isfinite(value):
            return Violation(path=(), message="must be finite", kind=ViolationKind.VALUE)
        for check in self.checks:
            if not check.passes(value):
                return Violation(path=(), message=check.render(value), kind=ViolationKind.VALUE)
        return None


def string() -> FieldConstraint:
    return FieldConstraint(ValueType.STRING)


def integer() -> FieldConstraint:
    return FieldConstraint(ValueType.INTEGER)


def number() -> FieldConstraint:
    return FieldConstraint(ValueType.NUMBER)


def boolean() -> FieldConstraint:
    return FieldConstraint(ValueType.BOOLEAN)


def scalar() -> FieldConstraint:
    """String, number or boolean."""

    return FieldConstraint(ValueType.SCALAR)


def literal(*values: str | int | float | bool) -> FieldConstraint:
    """Closed enumeration; the value type is inferred from the allowed values."""

    if not values:
        raise ValueError("literal requires at least one value")
    if all(isinstance(item, str) for item in values):
        value_type = ValueType.STRING
    elif all(isinstance(item, bool) for item in values):
        value_type = ValueType.BOOLEAN
    elif all(isinstance(item, int) and not isinstance(item, bool) for item in values):
        value_type = ValueType.INTEGER
    elif all(isinstance(item, (int, float)) and not isinstance(item, bool) for item in values):
        value_type = ValueType.NUMBER
    else:
        value_type = ValueType.SCALAR
    return FieldConstraint(value_type).one_of(*values)


def json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def same_literal(value: object, allowed: object) -> bool:
    """Equality that keeps booleans distinct from numbers."""

    if isinstance(value, bool) != isinstance(allowed, bool):
        return False
    if isinstance(value, str) != isinstance(allowed, str):
        return False
    return value == allowed


def is_multiple_of(value: float, step: float) -> bool:
    quotient = value / step
    tolerance = _MULTIPLE_OF_TOLERANCE * max(1.0, abs(quotient))
    return abs(quotient - round(quotient)) <= tolerance


def is_iso_date(text: str) -> bool:
    match = _ISO_DATE_PATTERN.fullmatch(text)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_iso_datetime(text: str) -> bool:
    """Return whether ``text`` is an ISO 8601 timestamp with a valid calendar instant and offset."""

    match = _ISO_DATETIME_PATTERN.fullmatch(text)
    if match is None:
        return False
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    try:
        datetime(year, month, day, hour, minute, second)
    except ValueError:
        return False
    if match.group(7) != "Z":
        offset_hours = int(match.group(8))
        offset_minutes = int(match.group(9))
        if offset_hours > 23 or offset_minutes > 59:
            return False
    return True


def is_url(text: str) -> bool:
    if not text or any(char.isspace() for char in text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    if not _URL_SCHEME_PATTERN.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in _HIERARCHICAL_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def format_number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_number(value: object) -> float:
    assert isinstance(value, (int, float))
    return value


def _matches_type(value_type: ValueType, value: object) -> bool:
    if value_type is ValueType.STRING:
        return isinstance(value, str)
    if value_type is ValueType.BOOLEAN:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return value_type is ValueType.SCALAR
    if value_type is ValueType.INTEGER:
        if isinstance(value, int):
            return True
        return isinstance(value, float) and (not math.isfinite(value) or value.is_integer())
    if value_type is ValueType.NUMBER:
        return isinstance(value, (int, float))
    return isinstance(value, (str, int, float))


def _expected_label(value_type: ValueType) -> str:
    if value_type is ValueType.SCALAR:
        return "string, number or boolean"
    return value_type.value


__all__ = [
    "Check",
    "CheckKind",
    "FieldConstraint",
    "FieldMeta",
    "ValueType",
    "boolean",
    "format_number",
    "integer",
    "is_iso_date",
    "is_iso_datetime",
    "is_multiple_of",
    "is_url",
    "json_type_name",
    "literal",
    "number",
    "same_literal",
    "scalar",
    "string",
]
