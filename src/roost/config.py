"""Evaluator configuration.

MatchConfig is a frozen dataclass — immutable after creation, shared freely
between threads evaluating routes.
"""

from dataclasses import dataclass

from roost.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Configuration for ``evaluate()``. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = MatchConfig(max_path_length=1024, log_rejections=False)
    """

    # Paths longer than this are rejected before the regex runs (None = no limit)
    max_path_length: int | None = 4096

    # Emit a DEBUG record on the "roost.routing" logger for every rejection
    log_rejections: bool = True

    def __post_init__(self) -> None:
        if self.max_path_length is not None and self.max_path_length <= 0:
            msg = f"max_path_length must be positive or None, got {self.max_path_length!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = MatchConfig()
