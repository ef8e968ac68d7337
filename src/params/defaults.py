"""Genesis defaults for the EVM Parameter Set.

Everything here is a factory: each call returns fresh objects, so no
caller can mutate another caller's defaults. The only cached value is the
native contract code hash, computed once from packaged bytecode.
"""

from decimal import Decimal
from functools import cache

from src.artifacts.bytecode import keccak256_hex, native_bytecode
from src.chain.config import default_chain_config
from src.params.types import Params

DEFAULT_BASE_DENOM = "usei"
DEFAULT_PRIORITY_NORMALIZER = Decimal(1)
# Portion of the per-gas fee that is burnt rather than paid to validators.
DEFAULT_BASE_FEE_PER_GAS = Decimal(0)
DEFAULT_MIN_FEE_PER_GAS = Decimal(1_000_000_000)  # usei
DEFAULT_CHAIN_ID = 713715

# CosmWasm template code hashes allowed as delegate-call targets.
CW20_CODE_HASH_HEX = "A25D78D7ACD2EE47CC39C224E162FE79B53E6BBE6ED2A56E8C0A86593EBE6102"
CW721_CODE_HASH_HEX = "94CDD9C3E85C26F7CEC43C23BFB4B3B2B2D71A0A8D85C58DF12FFEC0741FEBC8"


@cache
def native_code_hash() -> str:
    """Keccak-256 of the embedded native contract bytecode, 0x-prefixed hex.

    Computed on first call and cached for the life of the process. Changing
    the packaged bytecode changes the default bank-send whitelist.
    """
    return keccak256_hex(native_bytecode())


def default_whitelisted_codehashes_bank_send() -> list[str]:
    return [native_code_hash()]


def default_whitelisted_cw_code_hashes_for_delegate_call() -> list[bytes]:
    return [bytes.fromhex(CW20_CODE_HASH_HEX), bytes.fromhex(CW721_CODE_HASH_HEX)]


def default_params() -> Params:
    """Build a fully populated Parameter Set that passes validate_params()."""
    return Params(
        base_denom=DEFAULT_BASE_DENOM,
        priority_normalizer=DEFAULT_PRIORITY_NORMALIZER,
        base_fee_per_gas=DEFAULT_BASE_FEE_PER_GAS,
        minimum_fee_per_gas=DEFAULT_MIN_FEE_PER_GAS,
        chain_config=default_chain_config(),
        chain_id=DEFAULT_CHAIN_ID,
        whitelisted_codehashes_bank_send=default_whitelisted_codehashes_bank_send(),
        whitelisted_cw_code_hashes_for_delegate_call=(
            default_whitelisted_cw_code_hashes_for_delegate_call()
        ),
    )
