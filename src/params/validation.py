"""Per-field and aggregate validation for the EVM Parameter Set.

Validators accept Any because the host store hands them raw values. Each
one type-checks first (InvalidTypeError), then checks content. Validation
is pure and deterministic: the same input always yields the same error.
"""

import logging
from decimal import Decimal
from typing import Any

from src.chain.config import ChainConfig
from src.params.dec import to_fixed_point
from src.params.errors import (
    EmptyValueError,
    InconsistentFeesError,
    InvalidTypeError,
    NegativeValueError,
    NonPositiveValueError,
)
from src.params.types import Params

log = logging.getLogger(__name__)

MAX_INT_BIT_LEN = 256


def _expect_decimal(value: Any) -> Decimal:
    if not isinstance(value, Decimal):
        raise InvalidTypeError(value, "Decimal")
    if to_fixed_point(value) is None:
        raise InvalidTypeError(value, "finite Decimal with at most 18 decimal places")
    return value


def _expect_int(value: Any) -> int:
    # bool is an int subclass but never a valid chain id
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTypeError(value, "int")
    if value.bit_length() > MAX_INT_BIT_LEN:
        raise InvalidTypeError(value, f"int of at most {MAX_INT_BIT_LEN} bits")
    return value


def _expect_list_of(value: Any, item_type: type) -> list:
    if not isinstance(value, list):
        raise InvalidTypeError(value, f"list[{item_type.__name__}]")
    for item in value:
        if not isinstance(item, item_type):
            raise InvalidTypeError(item, item_type.__name__)
    return value


def validate_base_denom(value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidTypeError(value, "str")
    if value == "":
        raise EmptyValueError("empty base denom")


def validate_priority_normalizer(value: Any) -> None:
    v = _expect_decimal(value)
    if v <= 0:
        raise NonPositiveValueError(f"nonpositive priority normalizer: {v}")


def validate_base_fee_per_gas(value: Any) -> None:
    v = _expect_decimal(value)
    if v < 0:
        raise NegativeValueError(f"negative base fee per gas: {v}")


def validate_min_fee_per_gas(value: Any) -> None:
    v = _expect_decimal(value)
    if v < 0:
        raise NegativeValueError(f"negative min fee per gas: {v}")


def validate_chain_config(value: Any) -> None:
    """Delegate to ChainConfig.validate(); its error propagates unchanged."""
    if not isinstance(value, ChainConfig):
        raise InvalidTypeError(value, "ChainConfig")
    value.validate()


def validate_chain_id(value: Any) -> None:
    v = _expect_int(value)
    if v < 0:
        raise NegativeValueError(f"negative chain id: {v}")


def validate_whitelisted_codehashes_bank_send(value: Any) -> None:
    """Shape check only; hash format and length are not inspected."""
    _expect_list_of(value, str)


def validate_whitelisted_cw_hashes_for_delegate_call(value: Any) -> None:
    """Shape check only; hash length is not inspected."""
    _expect_list_of(value, bytes)


def validate_params(params: Params) -> None:
    """Validate a full Parameter Set, stopping at the first failure.

    Order is fixed so every node reports the same error for the same
    proposal: base denom, priority normalizer, base fee, min fee, then the
    fee ordering check, then chain id, chain config and both whitelists.

    Raises:
        ParamError: For any field-level or cross-field failure.
        ChainConfigError: If the nested chain configuration is invalid.
    """
    validate_base_denom(params.base_denom)
    validate_priority_normalizer(params.priority_normalizer)
    validate_base_fee_per_gas(params.base_fee_per_gas)
    validate_min_fee_per_gas(params.minimum_fee_per_gas)
    if params.minimum_fee_per_gas < params.base_fee_per_gas:
        raise InconsistentFeesError(
            f"minimum fee ({params.minimum_fee_per_gas}) cannot be lower "
            f"than base fee ({params.base_fee_per_gas})"
        )
    validate_chain_id(params.chain_id)
    validate_chain_config(params.chain_config)
    validate_whitelisted_codehashes_bank_send(
        params.whitelisted_codehashes_bank_send
    )
    validate_whitelisted_cw_hashes_for_delegate_call(
        params.whitelisted_cw_code_hashes_for_delegate_call
    )
    log.debug("Params validated (chain_id=%d)", params.chain_id)
