"""Embedded native contract bytecode and Keccak-256 code hashing.

The native send-to-CosmWasm contract is compiled ahead of time and shipped
as hex text inside the package. Its code hash seeds the default bank-send
whitelist, so every node must hash identical bytes.
"""

import logging
from importlib.resources import files

from Crypto.Hash import keccak

log = logging.getLogger(__name__)

NATIVE_BIN_DIR = "native"
NATIVE_BIN_NAME = "NativeSendToCw.bin"


def keccak256(data: bytes) -> bytes:
    """Raw 32-byte Keccak-256 digest (Ethereum flavour, not NIST SHA3-256)."""
    return keccak.new(digest_bits=256, data=data).digest()


def keccak256_hex(data: bytes) -> str:
    """Keccak-256 digest as a 0x-prefixed lowercase hex string."""
    return "0x" + keccak256(data).hex()


def decode_bin(text: str) -> bytes:
    """Decode compiler hex output, tolerating whitespace and a 0x prefix.

    Raises:
        ValueError: If the text is not valid hex.
    """
    cleaned = "".join(text.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def native_bytecode() -> bytes:
    """Load the compiled native contract bytecode from package data."""
    resource = files("src.artifacts").joinpath(NATIVE_BIN_DIR).joinpath(NATIVE_BIN_NAME)
    code = decode_bin(resource.read_text(encoding="ascii"))
    log.debug("Loaded native contract bytecode (%d bytes)", len(code))
    return code
