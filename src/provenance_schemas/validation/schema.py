"""
provenance-schemas — composite schema descriptions.

File: src/provenance_schemas/validation/schema.py
Last updated: 2026-10-19

Purpose
- Describe records as closed object schemas (explicit field list + strictness flag)
  and collections as array schemas with uniqueness rules and refinements.

What should be included in this file
- ``record(...)`` builder with ``required``/``optional``/``refine``/``build``.
- ``ObjectSchema.extend`` for derived record kinds; re-declared fields keep their slot.
- ``unique_items`` and ``unique_by`` collection combinators.
- Refinement descriptors naming the sibling fields they read and the reference
  tables they consult.

Functional requirements
- Refinements may only read fields the schema declares.
- Descriptions are plain immutable values evaluated by ``validation.engine``.

Non-functional requirements
- No runtime introspection of user types; everything is declared explicitly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, TypeAlias

from provenance_schemas.validation.fields import FieldConstraint, FieldMeta
from provenance_schemas.validation.issues import ViolationLog

if TYPE_CHECKING:
    from provenance_schemas.reference_data import ReferenceData

SchemaNode: TypeAlias = "FieldConstraint | ObjectSchema | ArraySchema"
RefinementFn: TypeAlias = "Callable[[Any, ViolationLog, ReferenceData | None], ViolationLog]"
KeyFn: TypeAlias = Callable[[Any], object]


@dataclass(frozen=True, slots=True)
class Refinement:
    """Cross-field rule evaluated after the fields it reads are individually valid."""

    name: str
    apply: RefinementFn
    reads: tuple[str, ...] = ()
    reference_countries: tuple[str, ...] = ()


def refinement(name: str, *, reads: Sequence[str] = ()) -> Callable[[RefinementFn], Refinement]:
    """Decorator turning ``fn(value, log, reference) -> log`` into a ``Refinement``."""

    def decorate(fn: RefinementFn) -> Refinement:
        return Refinement(name=name, apply=fn, reads=tuple(reads))

    return decorate


@dataclass(frozen=True, slots=True)
class UniquenessRule:
    message: str
    key: KeyFn | None = None
    label: str | None = None


@dataclass(frozen=True, slots=True)
class ArraySchema:
    items: SchemaNode
    min_items: int = 0
    uniqueness: tuple[UniquenessRule, ...] = ()
    refinements: tuple[Refinement, ...] = ()
    meta: FieldMeta = field(default_factory=FieldMeta)

    def min(self, count: int) -> ArraySchema:
        if count < 0:
            raise ValueError("min_items must be >= 0")
        return replace(self, min_items=count)

    def unique(
        self, message: str, *, key: KeyFn | None = None, label: str | None = None
    ) -> ArraySchema:
        rule = UniquenessRule(message=message, key=key, label=label)
        return replace(self, uniqueness=(*self.uniqueness, rule))

    def refine(self, rule: Refinement) -> ArraySchema:
        return replace(self, refinements=(*self.refinements, rule))

    def describe(
        self,
        title: str | None = None,
        description: str | None = None,
        examples: tuple[object, ...] | list[object] | None = None,
    ) -> ArraySchema:
        return replace(
            self, meta=self.meta.merged(title=title, description=description, examples=examples)
        )


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    schema: SchemaNode
    required: bool = True


@dataclass(frozen=True, slots=True)
class ObjectSchema:
    """Closed record description evaluated by the generic structural validator."""

    name: str
    fields: tuple[FieldSpec, ...]
    refinements: tuple[Refinement, ...] = ()
    strict: bool = True
    meta: FieldMeta = field(default_factory=FieldMeta)

    def __post_init__(self) -> None:
        names = [spec.name for spec in self.fields]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            joined = ", ".join(duplicates)
            raise ValueError(f"{self.name}: duplicate field declarations: {joined}")
        declared = set(names)
        for rule in self.refinements:
            undeclared = [name for name in rule.reads if name not in declared]
            if undeclared:
                raise ValueError(
                    f"{self.name}: refinement {rule.name!r} reads undeclared fields: "
                    f"{', '.join(undeclared)}"
                )

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def required_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields if spec.required)

    def field_spec(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no field {name!r}")

    def describe(
        self,
        title: str | None = None,
        description: str | None = None,
        examples: tuple[object, ...] | list[object] | None = None,
    ) -> ObjectSchema:
        return replace(
            self, meta=self.meta.merged(title=title, description=description, examples=examples)
        )

    def extend(
        self,
        name: str | None = None,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> RecordBuilder:
        """Start a builder seeded with this schema's fields and refinements."""

        return RecordBuilder(
            name or self.name,
            meta=self.meta.merged(title=title, description=description),
            strict=self.strict,
            fields=self.fields,
            refinements=self.refinements,
        )


class RecordBuilder:
    __slots__ = ("_fields", "_meta", "_name", "_refinements", "_strict")

    def __init__(
        self,
        name: str,
        *,
        meta: FieldMeta | None = None,
        strict: bool = True,
        fields: Sequence[FieldSpec] = (),
        refinements: Sequence[Refinement] = (),
    ) -> None:
        self._name = name
        self._meta = meta if meta is not None else FieldMeta()
        self._strict = strict
        self._fields: list[FieldSpec] = list(fields)
        self._refinements: list[Refinement] = list(refinements)

    def required(self, name: str, schema: SchemaNode) -> RecordBuilder:
        return self._declare(FieldSpec(name=name, schema=schema, required=True))

    def optional(self, name: str, schema: SchemaNode) -> RecordBuilder:
        return self._declare(FieldSpec(name=name, schema=schema, required=False))

    def refine(self, rule: Refinement) -> RecordBuilder:
        self._refinements.append(rule)
        return self

    def describe(
        self,
        title: str | None = None,
        description: str | None = None,
        examples: tuple[object, ...] | list[object] | None = None,
    ) -> RecordBuilder:
        self._meta = self._meta.merged(title=title, description=description, examples=examples)
        return self

    def build(self) -> ObjectSchema:
        return ObjectSchema(
            name=self._name,
            fields=tuple(self._fields),
            refinements=tuple(self._refinements),
            strict=self._strict,
            meta=self._meta,
        )

    def _declare(self, spec: FieldSpec) -> RecordBuilder:
        for index, existing in enumerate(self._fields):
            if existing.name == spec.name:
                self._fields[index] = spec
                return self
        self._fields.append(spec)
        return self


def record(
    name: str,
    *,
    title: str | None = None,
    description: str | None = None,
    strict: bool = True,
) -> RecordBuilder:
    return RecordBuilder(name, meta=FieldMeta(title=title, description=description), strict=strict)


def reference_countries(node: SchemaNode) -> frozenset[str]:
    """Countries whose reference tables some refinement reachable from ``node`` consults."""

    found: set[str] = set()
    pending: list[SchemaNode] = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, ObjectSchema):
            pending.extend(spec.schema for spec in current.fields)
        elif isinstance(current, ArraySchema):
            pending.append(current.items)
        else:
            continue
        for rule in current.refinements:
            found.update(rule.reference_countries)
    return frozenset(found)


def array(items: SchemaNode, *, min_items: int = 0) -> ArraySchema:
    return ArraySchema(items=items).min(min_items)


def unique_items(items: SchemaNode, message: str) -> ArraySchema:
    """Collection whose elements must be pairwise structurally distinct."""

    return ArraySchema(items=items).unique(message)


def unique_by(
    items: SchemaNode,
    key: KeyFn,
    message: str,
    *,
    label: str | None = None,
) -> ArraySchema:
    """Collection whose elements must yield pairwise distinct ``key(element)`` values."""

    return ArraySchema(items=items).unique(message, key=key, label=label)


__all__ = [
    "ArraySchema",
    "FieldSpec",
    "KeyFn",
    "ObjectSchema",
    "RecordBuilder",
    "Refinement",
    "RefinementFn",
    "SchemaNode",
    "UniquenessRule",
    "array",
    "record",
    "reference_countries",
    "refinement",
    "unique_by",
    "unique_items",
]
