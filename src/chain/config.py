"""EVM chain configuration: fork activation schedule for the execution module."""

from dataclasses import dataclass


class ChainConfigError(ValueError):
    """Raised when a chain configuration fails its own validation."""


# Forks in activation order. A later fork may only be scheduled once every
# earlier fork is, and may not activate before any of them.
FORK_ORDER = ("cancun_time", "prague_time", "verkle_time")


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Fork activation timestamps (unix seconds). None means unscheduled."""

    cancun_time: int | None = 0
    prague_time: int | None = None
    verkle_time: int | None = None

    def validate(self) -> None:
        """Check the fork schedule is well-formed.

        Raises:
            ChainConfigError: on a negative or non-integer time, a gap in
                the schedule, or a fork activating before its predecessor.
        """
        previous_name: str | None = None
        previous_time: int | None = None
        for name in FORK_ORDER:
            value = getattr(self, name)
            if value is not None:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ChainConfigError(
                        f"{name} must be an integer, got {type(value).__name__}"
                    )
                if value < 0:
                    raise ChainConfigError(f"{name} cannot be negative: {value}")
                if previous_name is not None and previous_time is None:
                    raise ChainConfigError(
                        f"{name} is scheduled but {previous_name} is not"
                    )
                if previous_time is not None and value < previous_time:
                    raise ChainConfigError(
                        f"{name} ({value}) must not be earlier than "
                        f"{previous_name} ({previous_time})"
                    )
            previous_name, previous_time = name, value


def default_chain_config() -> ChainConfig:
    """Cancun active from genesis, later forks unscheduled."""
    return ChainConfig()
