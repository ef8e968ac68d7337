"""Genesis initialization and export for the EVM module parameters."""

from src.genesis.state import (
    GenesisState,
    default_genesis,
    export_genesis,
    genesis_from_dict,
    genesis_from_json,
    genesis_to_json,
    init_genesis,
    load_genesis,
    validate_genesis,
)

__all__ = [
    "GenesisState",
    "default_genesis",
    "export_genesis",
    "genesis_from_dict",
    "genesis_from_json",
    "genesis_to_json",
    "init_genesis",
    "load_genesis",
    "validate_genesis",
]
