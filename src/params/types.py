"""The EVM module Parameter Set."""

from dataclasses import dataclass
from decimal import Decimal

from src.chain.config import ChainConfig


@dataclass(slots=True)
class Params:
    """Governance-tunable parameters of the EVM module.

    Mutable on purpose: the host store materializes a Params by reading
    each key, and governance updates are applied field by field through
    param_set_pairs(). Field order matches PARAM_KEYS.
    """

    base_denom: str
    priority_normalizer: Decimal  # scales transaction priority
    base_fee_per_gas: Decimal  # burnt per gas, like the Ethereum base fee
    minimum_fee_per_gas: Decimal  # floor, must be >= base_fee_per_gas
    chain_config: ChainConfig
    chain_id: int
    whitelisted_codehashes_bank_send: list[str]
    whitelisted_cw_code_hashes_for_delegate_call: list[bytes]

    def validate(self) -> None:
        """Run the aggregate validation; raises on the first failure."""
        from src.params.validation import validate_params

        validate_params(self)

    def __str__(self) -> str:
        from src.params.serialization import params_to_yaml

        return params_to_yaml(self)
