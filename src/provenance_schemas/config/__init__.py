"""
provenance-schemas config package public API.

File: src/provenance_schemas/config/__init__.py
Last updated: 2026-10-19

Purpose
- Export config loading/validation entrypoints and public error types.

Functional requirements
- Support loading from ``provenance.toml`` + ``PROVENANCE_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from provenance_schemas.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_PREFIX,
    ConfigLoadError,
    dump_effective_config,
    load_config,
    normalize_paths,
)
from provenance_schemas.config.schema import (
    CONFIG_SCHEMA,
    DEFAULT_CONFIG,
    LOG_FORMATS,
    LOG_LEVELS,
    PATH_FIELDS,
    ConfigSchemaVersion,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    ProvenanceConfig,
    assert_valid_config,
    default_config,
    merge_config,
    migration_guidance,
    schema_url,
    validate_config,
)

__all__ = [
    "CONFIG_SCHEMA",
    "ConfigLoadError",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_FIELDS",
    "ProvenanceConfig",
    "assert_valid_config",
    "default_config",
    "dump_effective_config",
    "load_config",
    "merge_config",
    "migration_guidance",
    "normalize_paths",
    "schema_url",
    "validate_config",
]
