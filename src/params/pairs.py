"""Parameter schema: key -> field bindings and the key table.

param_set_pairs() binds each storage key to a field of a live Params
instance, so the host store can read and write fields by key. KeyTable
maps each key to its declared type and validator for write-time checks.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterator

from src.chain.config import ChainConfig
from src.params import keys
from src.params import validation as v
from src.params.types import Params

log = logging.getLogger(__name__)

Validator = Callable[[Any], None]


def _type_name(value_type: Any) -> str:
    return value_type.__name__ if isinstance(value_type, type) else str(value_type)


# (key, Params attribute, declared type, validator) in storage order.
_SCHEMA: tuple[tuple[str, str, Any, Validator], ...] = (
    (keys.KEY_BASE_DENOM, "base_denom", str, v.validate_base_denom),
    (
        keys.KEY_PRIORITY_NORMALIZER,
        "priority_normalizer",
        Decimal,
        v.validate_priority_normalizer,
    ),
    (
        keys.KEY_BASE_FEE_PER_GAS,
        "base_fee_per_gas",
        Decimal,
        v.validate_base_fee_per_gas,
    ),
    (
        keys.KEY_MIN_FEE_PER_GAS,
        "minimum_fee_per_gas",
        Decimal,
        v.validate_min_fee_per_gas,
    ),
    (keys.KEY_CHAIN_CONFIG, "chain_config", ChainConfig, v.validate_chain_config),
    (keys.KEY_CHAIN_ID, "chain_id", int, v.validate_chain_id),
    (
        keys.KEY_WHITELISTED_CODE_HASHES_BANK_SEND,
        "whitelisted_codehashes_bank_send",
        list[str],
        v.validate_whitelisted_codehashes_bank_send,
    ),
    (
        keys.KEY_WHITELISTED_CW_CODE_HASHES_FOR_DELEGATE_CALL,
        "whitelisted_cw_code_hashes_for_delegate_call",
        list[bytes],
        v.validate_whitelisted_cw_hashes_for_delegate_call,
    ),
)


@dataclass
class ParamSetPair:
    """Binding of one storage key to one field of a Params instance."""

    key: str
    params: Params
    attr: str
    value_type: Any
    validator: Validator

    @property
    def value(self) -> Any:
        return getattr(self.params, self.attr)

    @value.setter
    def value(self, new_value: Any) -> None:
        setattr(self.params, self.attr, new_value)

    def validate(self) -> None:
        self.validator(self.value)


@dataclass(frozen=True, slots=True)
class ParamAttribute:
    """Declared type and validator registered for a key."""

    value_type: Any
    validator: Validator


def param_set_pairs(params: Params) -> list[ParamSetPair]:
    """Return the 8 key/field bindings for params, in storage order."""
    return [
        ParamSetPair(key, params, attr, value_type, validator)
        for key, attr, value_type, validator in _SCHEMA
    ]


class KeyTable:
    """Registry of parameter keys, in registration order.

    Registering a key twice, or a key that is not ASCII alphanumeric, is a
    programming error and raises immediately.
    """

    def __init__(self) -> None:
        self._attributes: dict[str, ParamAttribute] = {}

    def register(self, key: str, value_type: Any, validator: Validator) -> "KeyTable":
        if not key or not (key.isascii() and key.isalnum()):
            raise ValueError(f"parameter key is not alphanumeric: {key!r}")
        if key in self._attributes:
            raise ValueError(f"duplicate parameter key: {key}")
        self._attributes[key] = ParamAttribute(value_type, validator)
        log.debug("Registered parameter key %s (%s)", key, _type_name(value_type))
        return self

    def register_param_set(self, params: Params) -> "KeyTable":
        for pair in param_set_pairs(params):
            self.register(pair.key, pair.value_type, pair.validator)
        return self

    def attribute(self, key: str) -> ParamAttribute:
        """Raises KeyError for an unregistered key."""
        return self._attributes[key]

    def validator_for(self, key: str) -> Validator:
        return self.attribute(key).validator

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)


def param_key_table() -> KeyTable:
    """Fresh key table with every EVM parameter key registered."""
    table = KeyTable()
    for key, _, value_type, validator in _SCHEMA:
        table.register(key, value_type, validator)
    return table
