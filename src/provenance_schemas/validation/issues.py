"""
provenance-schemas — violations and validation results.

File: src/provenance_schemas/validation/issues.py
Last updated: 2026-10-19

Purpose
- Define the violation record, the explicit accumulator threaded through refiners,
  and the result returned by every validation pass.

What should be included in this file
- Violation kinds (missing, type, value, unknown, relational, uniqueness).
- Field paths as tuples of property names and array indices.
- Deterministic dotted rendering of paths for API consumers.

Functional requirements
- Results carry either the validated record or the complete ordered violation list.
- The raising variant renders one ``- path: message`` line per violation.

Non-functional requirements
- All values are immutable and safe to share across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

FieldPath: TypeAlias = tuple[str | int, ...]

ROOT_PATH_LABEL = "<root>"


class ViolationKind(StrEnum):
    MISSING = "missing"
    TYPE = "type"
    VALUE = "value"
    UNKNOWN = "unknown"
    RELATIONAL = "relational"
    UNIQUENESS = "uniqueness"


def format_path(path: Sequence[str | int]) -> str:
    """Render ``("data", "participants", 1, "roles")`` as ``data.participants[1].roles``."""

    if not path:
        return ROOT_PATH_LABEL
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = part
    return rendered or ROOT_PATH_LABEL


@dataclass(frozen=True, slots=True)
class Violation:
    """Single structured validation failure."""

    path: FieldPath
    message: str
    kind: ViolationKind = ViolationKind.VALUE

    @property
    def dotted(self) -> str:
        return format_path(self.path)

    def relocated(self, prefix: FieldPath) -> Violation:
        """Return a copy whose path is nested under ``prefix``."""

        if not prefix:
            return self
        return Violation(path=(*prefix, *self.path), message=self.message, kind=self.kind)

    def render(self) -> str:
        return f"{self.dotted}: {self.message}"


@dataclass(frozen=True, slots=True)
class ViolationLog:
    """Append-only accumulator; every ``add`` returns a new log."""

    items: tuple[Violation, ...] = ()

    def add(
        self,
        path: FieldPath,
        message: str,
        kind: ViolationKind = ViolationKind.RELATIONAL,
    ) -> ViolationLog:
        violation = Violation(path=tuple(path), message=message, kind=kind)
        return ViolationLog(items=(*self.items, violation))

    def extend(self, violations: Iterable[Violation]) -> ViolationLog:
        return ViolationLog(items=(*self.items, *violations))

    @property
    def has_violations(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of one validation pass."""

    schema_name: str
    record: Any
    violations: tuple[Violation, ...]

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def messages(self) -> tuple[str, ...]:
        return tuple(item.render() for item in self.violations)

    def at(self, *path: str | int) -> tuple[Violation, ...]:
        """Return the violations reported exactly at ``path``."""

        return tuple(item for item in self.violations if item.path == path)

    def raise_for_violations(self) -> Any:
        if self.violations:
            raise RecordValidationError(self.schema_name, self.violations)
        return self.record


class RecordValidationError(ValueError):
    """Raised by the asserting helpers when a record has violations."""

    def __init__(self, schema_name: str, violations: Sequence[Violation]) -> None:
        self.schema_name = schema_name
        self.violations = tuple(violations)
        if not self.violations:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.render()}" for item in self.violations)
        super().__init__(f"invalid {schema_name} record:\n{rendered}")


__all__ = [
    "FieldPath",
    "ROOT_PATH_LABEL",
    "RecordValidationError",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "ViolationLog",
    "format_path",
]
