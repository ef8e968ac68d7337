"""Dict, JSON and YAML rendering of the Parameter Set.

Rendering is lossless and canonical: decimals are written in fixed-point
form with 18 fractional digits, so equal values give equal bytes, and
delegate-call hashes are written as uppercase hex. Parsing goes through
dacite in strict mode so unknown keys are rejected.
"""

import json
from dataclasses import asdict, fields, is_dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, get_args, get_origin

import yaml
from dacite import Config as DaciteConfig
from dacite import from_dict

from src.params.dec import format_dec
from src.params.types import Params


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # floats would silently lose precision
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(
            f"decimal must be a string or integer, got {type(value).__name__}"
        )
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal: {value!r}") from exc


def _hex_to_bytes(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        raise ValueError(f"hash must be a hex string, got {type(value).__name__}")
    return bytes.fromhex(value)


_DACITE_CONFIG = DaciteConfig(
    type_hooks={Decimal: _to_decimal, bytes: _hex_to_bytes},
    check_types=True,
    strict=True,
)


def _to_plain(value: Any) -> Any:
    """Convert a parameter value to JSON/YAML-safe primitives."""
    if isinstance(value, Decimal):
        return format_dec(value)
    if isinstance(value, bytes):
        return value.hex().upper()
    if is_dataclass(value):
        return asdict(value)
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def params_to_dict(params: Params) -> dict[str, Any]:
    """Plain dict in field order (the order the YAML rendering keeps)."""
    return {f.name: _to_plain(getattr(params, f.name)) for f in fields(params)}


def params_from_dict(data: dict[str, Any]) -> Params:
    """Reconstruct Params; raises a dacite error on unknown or missing keys."""
    return from_dict(data_class=Params, data=data, config=_DACITE_CONFIG)


def params_to_json(params: Params) -> str:
    """Sorted keys and 2-space indent for readability and diffability."""
    return json.dumps(params_to_dict(params), indent=2, sort_keys=True)


def params_from_json(json_str: str) -> Params:
    return params_from_dict(json.loads(json_str))


def params_to_yaml(params: Params) -> str:
    """Human-readable rendering with stable field order."""
    return yaml.safe_dump(
        params_to_dict(params), sort_keys=False, default_flow_style=False
    )


def params_from_yaml(yaml_str: str) -> Params:
    return params_from_dict(yaml.safe_load(yaml_str))


def encode_value(value: Any) -> bytes:
    """Encode a single parameter value as compact JSON for raw storage."""
    return json.dumps(
        _to_plain(value), sort_keys=True, separators=(",", ":")
    ).encode("utf-8")


def _decode_plain(data: Any, value_type: Any) -> Any:
    if value_type is Decimal:
        return _to_decimal(data)
    if value_type is bytes:
        return _hex_to_bytes(data)
    if get_origin(value_type) is list:
        if not isinstance(data, list):
            raise ValueError(f"expected a list, got {type(data).__name__}")
        (item_type,) = get_args(value_type)
        return [_decode_plain(item, item_type) for item in data]
    if is_dataclass(value_type):
        return from_dict(data_class=value_type, data=data, config=_DACITE_CONFIG)
    return data


def decode_value(raw: bytes, value_type: Any) -> Any:
    """Inverse of encode_value for a key's declared type.

    The result is not type-checked here; the key's validator does that.
    """
    return _decode_plain(json.loads(raw), value_type)
