"""Deterministic Parameter Set hashing using SHA-256 over sorted JSON."""

import hashlib
import json

from src.params.serialization import params_to_dict
from src.params.types import Params


def params_hash(params: Params) -> str:
    """Deterministic SHA-256 hash of a Parameter Set.

    Two nodes holding identical parameters produce the same hash, so
    operators can spot divergent state without diffing every field.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    serialized = json.dumps(
        params_to_dict(params),
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]
