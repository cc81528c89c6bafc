"""
provenance-schemas — configuration schema and validation.

File: src/provenance_schemas/config/schema.py
Last updated: 2026-10-19

Purpose
- Define authoritative configuration defaults and strict validation rules.

What should be included in this file
- Config schema version and migration guidance.
- The config schema itself, expressed with the record validation engine.
- Deterministic deep-merge helpers and a published-schema URL builder.

Functional requirements
- Validate config payloads and return structured errors (field path + message).
- Unknown sections and keys are rejected.

Non-functional requirements
- Keep rules deterministic and easy to audit.
- Preserve backwards compatibility through explicit migration messages.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, TypedDict

from provenance_schemas.constants import (
    CONFIG_SCHEMA_VERSION,
    DEFAULT_SCHEMA_BASE_URL,
    DEFAULT_SCHEMA_VERSION,
)
from provenance_schemas.schemas.primitives import SEMANTIC_VERSION
from provenance_schemas.validation import (
    ObjectSchema,
    ViolationLog,
    integer,
    literal,
    record,
    refinement,
    string,
    validate,
)

ConfigSchemaVersion: Final[int] = CONFIG_SCHEMA_VERSION
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS: Final[tuple[str, ...]] = ("json", "console")

PATH_FIELDS: Final[tuple[tuple[str, ...], ...]] = (("reference_data", "localities_path"),)


class MetaConfig(TypedDict):
    config_version: int


class SchemaConfig(TypedDict):
    version: str
    base_url: str


class ReferenceDataConfig(TypedDict):
    localities_path: str


class ObservabilityConfig(TypedDict):
    log_level: str
    log_format: str


class ProvenanceConfig(TypedDict):
    meta: MetaConfig
    schema: SchemaConfig
    reference_data: ReferenceDataConfig
    observability: ObservabilityConfig


DEFAULT_CONFIG: Final[ProvenanceConfig] = {
    "meta": {"config_version": CONFIG_SCHEMA_VERSION},
    "schema": {"version": DEFAULT_SCHEMA_VERSION, "base_url": DEFAULT_SCHEMA_BASE_URL},
    "reference_data": {"localities_path": ""},
    "observability": {"log_level": "INFO", "log_format": "json"},
}


@dataclass(frozen=True, slots=True)
class ConfigValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ConfigValidationResult:
    """Validation result with normalized config when no issues were found."""

    config: dict[str, Any] | None
    issues: tuple[ConfigValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.config is not None and not self.issues


class ConfigValidationError(ValueError):
    """Raised when strict config validation fails."""

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid config:\n{rendered}")


def migration_guidance(found_version: int) -> str:
    """Return deterministic migration guidance for config version mismatch."""

    if found_version < ConfigSchemaVersion:
        return (
            f"config version {found_version} is older than supported {ConfigSchemaVersion}; "
            "upgrade provenance.toml to the current schema"
        )
    if found_version > ConfigSchemaVersion:
        return (
            f"config version {found_version} is newer than supported {ConfigSchemaVersion}; "
            "upgrade provenance-schemas"
        )
    return "config version is current"


@refinement("current_config_version", reads=("config_version",))
def _current_config_version(
    meta: Mapping[str, Any], log: ViolationLog, reference: object
) -> ViolationLog:
    found = int(meta["config_version"])
    if found != ConfigSchemaVersion:
        log = log.add(("config_version",), migration_guidance(found))
    return log


@refinement("base_url_has_version", reads=("base_url",))
def _base_url_has_version(
    section: Mapping[str, Any], log: ViolationLog, reference: object
) -> ViolationLog:
    if "{version}" not in section["base_url"]:
        log = log.add(("base_url",), "must contain the {version} placeholder")
    return log


CONFIG_SCHEMA: Final[ObjectSchema] = (
    record("ProvenanceConfig", title="provenance-schemas configuration")
    .required(
        "meta",
        record("MetaConfig")
        .required("config_version", integer().minimum(1))
        .refine(_current_config_version)
        .build(),
    )
    .required(
        "schema",
        record("SchemaConfig")
        .required("version", SEMANTIC_VERSION)
        .required("base_url", string().url())
        .refine(_base_url_has_version)
        .build(),
    )
    .required(
        "reference_data",
        record("ReferenceDataConfig").required("localities_path", string()).build(),
    )
    .required(
        "observability",
        record("ObservabilityConfig")
        .required("log_level", literal(*LOG_LEVELS))
        .required("log_format", literal(*LOG_FORMATS))
        .build(),
    )
    .build()
)


def default_config() -> ProvenanceConfig:
    """Return a deep copy of deterministic built-in defaults."""

    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deterministically deep-merge ``overlay`` onto ``base``."""

    merged = _deep_copy_mapping(base)
    _merge_into(merged, overlay)
    return merged


def validate_config(config: Mapping[str, object] | object) -> ConfigValidationResult:
    """Validate config and return structured issues with deterministic paths."""

    result = validate(CONFIG_SCHEMA, config)
    issues = tuple(
        ConfigValidationIssue(path=violation.dotted, message=violation.message)
        for violation in result.violations
    )
    if issues:
        return ConfigValidationResult(config=None, issues=issues)
    return ConfigValidationResult(config=result.record, issues=())


def assert_valid_config(config: Mapping[str, object] | object) -> dict[str, Any]:
    """Validate config and raise ``ConfigValidationError`` on failure."""

    result = validate_config(config)
    if result.config is None:
        raise ConfigValidationError(result.issues)
    return result.config


def schema_url(config: Mapping[str, Any], path: str) -> str:
    """Published URL of the schema file at ``path`` for the configured version."""

    schema = config["schema"]
    base = schema["base_url"].format(version=schema["version"]).rstrip("/")
    return f"{base}/{path.lstrip('/')}"


def _merge_into(target: dict[str, Any], overlay: Mapping[str, object]) -> None:
    for key in sorted(overlay):
        value = overlay[key]
        if isinstance(value, Mapping):
            existing = target.get(key)
            if isinstance(existing, dict):
                _merge_into(existing, value)
            else:
                nested: dict[str, Any] = {}
                _merge_into(nested, value)
                target[key] = nested
        else:
            target[key] = copy.deepcopy(value)


def _deep_copy_mapping(value: Mapping[str, object]) -> dict[str, Any]:
    return {key: copy.deepcopy(value[key]) for key in sorted(value)}


__all__ = [
    "CONFIG_SCHEMA",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DEFAULT_CONFIG",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_FIELDS",
    "ProvenanceConfig",
    "assert_valid_config",
    "default_config",
    "merge_config",
    "migration_guidance",
    "schema_url",
    "validate_config",
]
