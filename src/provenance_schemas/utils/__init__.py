"""Shared utility helpers."""

from provenance_schemas.utils.hashing import (
    CanonicalJsonError,
    canonical_json,
    hash_object,
    schema_hash,
    sha256_bytes,
    sha256_text,
)

__all__ = [
    "CanonicalJsonError",
    "canonical_json",
    "hash_object",
    "schema_hash",
    "sha256_bytes",
    "sha256_text",
]
