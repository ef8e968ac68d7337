"""In-memory parameter subspace: the host-side key-value store contract.

Values are held as raw JSON bytes per key, the way a chain state store
would hold them. Every typed write runs the key's validator first; a full
Parameter Set is written only after the whole set validates, so a rejected
governance update never leaves some keys changed.
"""

import logging
from typing import Any, Iterator

from src.params.pairs import KeyTable, param_set_pairs
from src.params.serialization import decode_value, encode_value
from src.params.types import Params
from src.params.validation import validate_params

log = logging.getLogger(__name__)


class Subspace:
    """Named parameter namespace backed by a dict of raw values."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._table: KeyTable | None = None
        self._store: dict[str, bytes] = {}

    def with_key_table(self, table: KeyTable) -> "Subspace":
        """Attach the key table. Allowed once, before any reads or writes."""
        if self._table is not None:
            raise RuntimeError(f"subspace {self.name} already has a key table")
        self._table = table
        return self

    @property
    def key_table(self) -> KeyTable:
        if self._table is None:
            raise RuntimeError(f"subspace {self.name} has no key table")
        return self._table

    def _check_key(self, key: str) -> None:
        if key not in self.key_table:
            raise KeyError(f"parameter key not registered in {self.name}: {key}")

    def has(self, key: str) -> bool:
        return key in self._store

    def keys(self) -> Iterator[str]:
        """Registered keys, in registration order."""
        return iter(self.key_table)

    def get_raw(self, key: str) -> bytes:
        self._check_key(key)
        return self._store[key]

    def set_raw(self, key: str, raw: bytes) -> None:
        """Decode, validate and store a raw value."""
        self.set(key, decode_value(raw, self.key_table.attribute(key).value_type))

    def get(self, key: str) -> Any:
        attribute = self.key_table.attribute(key)
        return decode_value(self.get_raw(key), attribute.value_type)

    def set(self, key: str, value: Any) -> None:
        self._check_key(key)
        self.key_table.validator_for(key)(value)
        self._store[key] = encode_value(value)
        log.debug("Subspace %s: set %s", self.name, key)

    def get_param_set(self, params: Params) -> Params:
        """Fill params in place from the store and return it.

        Every key is read before any field is assigned, so a failed read
        leaves params untouched.
        """
        pairs = param_set_pairs(params)
        values = [self.get(pair.key) for pair in pairs]
        for pair, value in zip(pairs, values):
            pair.value = value
        return params

    def set_param_set(self, params: Params) -> None:
        """Validate the whole set, then write every key.

        Raises before any write if a single field or the set as a whole is
        invalid.
        """
        pairs = param_set_pairs(params)
        for pair in pairs:
            self._check_key(pair.key)
            pair.validate()
        validate_params(params)
        for pair in pairs:
            self._store[pair.key] = encode_value(pair.value)
        log.info("Subspace %s: wrote %d parameters", self.name, len(pairs))
