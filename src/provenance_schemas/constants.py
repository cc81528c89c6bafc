"""Stable constants shared across schemas, refiners and export."""

from __future__ import annotations

from typing import Final

# Schema publication.
CONFIG_SCHEMA_VERSION: Final[int] = 1
DEFAULT_SCHEMA_VERSION: Final[str] = "0.0.0-dev"
DEFAULT_SCHEMA_BASE_URL: Final[str] = "https://schemas.provenance.dev/{version}/ipfs"
JSON_SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"

# Supported blockchain networks: environment name -> (chain id, network name).
BLOCKCHAIN_NETWORKS: Final[dict[str, tuple[int, str]]] = {
    "mainnet": (137, "Polygon"),
    "testnet": (80002, "Amoy"),
}
SUPPORTED_CHAIN_IDS: Final[tuple[int, ...]] = tuple(
    chain_id for chain_id, _ in BLOCKCHAIN_NETWORKS.values()
)
SUPPORTED_NETWORK_NAMES: Final[tuple[str, ...]] = tuple(
    name for _, name in BLOCKCHAIN_NETWORKS.values()
)

# Jurisdiction governed by the bundled locality dataset.
DEFAULT_LOCALITY_COUNTRY: Final[str] = "BR"

# Rounding allowed between a displayed attribute (or calculation result) and its data.
DISPLAY_TOLERANCE: Final[float] = 0.01

__all__ = [
    "BLOCKCHAIN_NETWORKS",
    "CONFIG_SCHEMA_VERSION",
    "DEFAULT_LOCALITY_COUNTRY",
    "DEFAULT_SCHEMA_BASE_URL",
    "DEFAULT_SCHEMA_VERSION",
    "DISPLAY_TOLERANCE",
    "JSON_SCHEMA_DIALECT",
    "SUPPORTED_CHAIN_IDS",
    "SUPPORTED_NETWORK_NAMES",
]
