"""
provenance-schemas — canonical JSON and hashing utilities.

File: src/provenance_schemas/utils/hashing.py
Last updated: 2026-10-19

Purpose
- Provide deterministic SHA-256 helpers for bytes, text and JSON values.
- Canonicalize JSON values so equal documents always hash the same.

Functional requirements
- Canonical text is RFC 8785 (JCS), produced by the ``rfc8785`` package: keys
  sorted by UTF-16 code units, compact separators, ECMAScript number form.
- Integral floats render as integers, so ``1.0`` and ``1`` hash the same.
- NaN, infinities, integers outside the IEEE 754 safe range, non-string keys
  and non-JSON values raise ``CanonicalJsonError``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import TYPE_CHECKING

import rfc8785

from provenance_schemas.export import to_json_schema

if TYPE_CHECKING:
    from provenance_schemas.validation import SchemaNode

__all__ = [
    "CanonicalJsonError",
    "canonical_json",
    "hash_object",
    "schema_hash",
    "sha256_bytes",
    "sha256_text",
]


class CanonicalJsonError(ValueError):
    """Raised when a value has no canonical JSON representation."""


def sha256_bytes(data: bytes) -> str:
    """Return SHA-256 hex digest for raw bytes."""

    return hashlib.sha256(data).hexdigest()


def sha256_text(text: str, *, encoding: str = "utf-8") -> str:
    """Return SHA-256 hex digest for text encoded with ``encoding``."""

    return sha256_bytes(text.encode(encoding))


def canonical_json(value: object) -> str:
    """Return the RFC 8785 canonical JSON text for ``value``."""

    try:
        encoded = rfc8785.dumps(_plain(value))
    except rfc8785.CanonicalizationError as exc:
        raise CanonicalJsonError(str(exc)) from exc
    return encoded.decode("utf-8")


def hash_object(value: object) -> str:
    """Canonicalize ``value`` and return the SHA-256 hex digest of the UTF-8 text."""

    return sha256_text(canonical_json(value))


def schema_hash(schema: SchemaNode | Mapping[str, object]) -> str:
    """Hash of the exported JSON Schema for ``schema`` (or of an already exported document)."""

    document = schema if isinstance(schema, Mapping) else to_json_schema(schema)
    return hash_object(document)


def _plain(value: object) -> object:
    # rfc8785 only walks builtin dicts and lists.
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
