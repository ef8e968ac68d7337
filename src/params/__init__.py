"""EVM module parameter store: schema, defaults and validation."""

from src.params.defaults import (
    DEFAULT_BASE_DENOM,
    DEFAULT_BASE_FEE_PER_GAS,
    DEFAULT_CHAIN_ID,
    DEFAULT_MIN_FEE_PER_GAS,
    DEFAULT_PRIORITY_NORMALIZER,
    default_params,
    native_code_hash,
)
from src.params.errors import (
    EmptyValueError,
    InconsistentFeesError,
    InvalidTypeError,
    NegativeValueError,
    NonPositiveValueError,
    ParamError,
)
from src.params.hashing import params_hash
from src.params.keys import PARAM_KEYS
from src.params.pairs import (
    KeyTable,
    ParamAttribute,
    ParamSetPair,
    param_key_table,
    param_set_pairs,
)
from src.params.serialization import (
    decode_value,
    encode_value,
    params_from_dict,
    params_from_json,
    params_from_yaml,
    params_to_dict,
    params_to_json,
    params_to_yaml,
)
from src.params.types import Params
from src.params.validation import validate_params

__all__ = [
    "DEFAULT_BASE_DENOM",
    "DEFAULT_BASE_FEE_PER_GAS",
    "DEFAULT_CHAIN_ID",
    "DEFAULT_MIN_FEE_PER_GAS",
    "DEFAULT_PRIORITY_NORMALIZER",
    "EmptyValueError",
    "InconsistentFeesError",
    "InvalidTypeError",
    "KeyTable",
    "NegativeValueError",
    "NonPositiveValueError",
    "PARAM_KEYS",
    "ParamAttribute",
    "ParamError",
    "ParamSetPair",
    "Params",
    "decode_value",
    "default_params",
    "encode_value",
    "native_code_hash",
    "param_key_table",
    "param_set_pairs",
    "params_from_dict",
    "params_from_json",
    "params_from_yaml",
    "params_hash",
    "params_to_dict",
    "params_to_json",
    "params_to_yaml",
    "validate_params",
]
