"""Build artifacts embedded in the package and code-hash helpers."""

from src.artifacts.bytecode import (
    decode_bin,
    keccak256,
    keccak256_hex,
    native_bytecode,
)

__all__ = [
    "decode_bin",
    "keccak256",
    "keccak256_hex",
    "native_bytecode",
]
