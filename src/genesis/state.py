"""Genesis state for the EVM module parameters."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.params.defaults import default_params
from src.params.serialization import params_from_dict, params_to_dict
from src.params.types import Params
from src.params.validation import validate_params
from src.store.subspace import Subspace

log = logging.getLogger(__name__)


@dataclass
class GenesisState:
    """Module genesis: the parameter set the chain starts with."""

    params: Params = field(default_factory=default_params)


def default_genesis() -> GenesisState:
    return GenesisState()


def validate_genesis(state: GenesisState) -> None:
    """Raises the first parameter validation error, if any."""
    validate_params(state.params)


def genesis_to_json(state: GenesisState) -> str:
    return json.dumps({"params": params_to_dict(state.params)}, indent=2)


def genesis_from_dict(data: dict[str, Any]) -> GenesisState:
    """Build a GenesisState from a genesis-file section.

    Missing params fall back to defaults; unknown top-level keys are
    rejected like unknown parameter fields.
    """
    if not isinstance(data, dict):
        raise ValueError(f"genesis must be an object, got {type(data).__name__}")
    unknown = set(data) - {"params"}
    if unknown:
        raise ValueError(f"unknown genesis fields: {sorted(unknown)}")
    if "params" not in data:
        return default_genesis()
    params_data = data["params"]
    if not isinstance(params_data, dict):
        raise ValueError(
            f"genesis params must be an object, got {type(params_data).__name__}"
        )
    return GenesisState(params=params_from_dict(params_data))


def genesis_from_json(json_str: str) -> GenesisState:
    return genesis_from_dict(json.loads(json_str))


def load_genesis(path: str | Path) -> GenesisState:
    """Load and validate a genesis JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        dacite.DaciteError: If the params section has unknown or mistyped fields.
        ValueError: If the params are invalid.
    """
    path = Path(path)
    with open(path) as f:
        state = genesis_from_dict(json.load(f))
    validate_genesis(state)
    log.info("Genesis loaded from %s", path)
    return state


def init_genesis(subspace: Subspace, state: GenesisState) -> None:
    """Validate genesis params and write them to the subspace."""
    validate_genesis(state)
    subspace.set_param_set(state.params)
    log.info(
        "EVM params initialized: denom=%s chain_id=%d",
        state.params.base_denom,
        state.params.chain_id,
    )


def export_genesis(subspace: Subspace) -> GenesisState:
    """Read the current parameter set back out of the subspace."""
    return GenesisState(params=subspace.get_param_set(default_params()))
