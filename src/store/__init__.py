"""Reference parameter store used by genesis and governance handlers."""

from src.store.subspace import Subspace

__all__ = ["Subspace"]
