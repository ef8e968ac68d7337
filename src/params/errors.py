"""Parameter validation errors.

All are ValueError subclasses so callers rejecting a proposal can catch
ParamError (or ValueError) once. Nested chain-config failures surface as
src.chain.ChainConfigError instead.
"""


class ParamError(ValueError):
    """Base class for parameter validation failures."""


class InvalidTypeError(ParamError, TypeError):
    """Value does not have the type declared for its key."""

    def __init__(self, value: object, expected: str) -> None:
        self.actual_type = type(value).__name__
        self.expected = expected
        super().__init__(
            f"invalid parameter type: {self.actual_type} (expected {expected})"
        )


class EmptyValueError(ParamError):
    """Required string parameter is empty."""


class NonPositiveValueError(ParamError):
    """Parameter must be strictly greater than zero."""


class NegativeValueError(ParamError):
    """Parameter must not be below zero."""


class InconsistentFeesError(ParamError):
    """Minimum fee per gas is lower than the base fee per gas."""
