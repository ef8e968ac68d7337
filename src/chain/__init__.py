"""Nested EVM chain configuration record."""

from src.chain.config import (
    FORK_ORDER,
    ChainConfig,
    ChainConfigError,
    default_chain_config,
)

__all__ = [
    "FORK_ORDER",
    "ChainConfig",
    "ChainConfigError",
    "default_chain_config",
]
