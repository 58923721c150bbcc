r"""Configuration dataclass and defaults for controllable delays.

This module provides configuration constants and a dataclass-based
configuration object shared by every delay entry point.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_PROGRESS_INTERVAL_MS",
    "DelayConfig",
]

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from adelay.core.validation import validate_delay_params

if TYPE_CHECKING:
    from collections.abc import Callable


# Default interval between two progress reports, in milliseconds
DEFAULT_PROGRESS_INTERVAL_MS = 100

# Default growth factor for exponential backoff
# Delay = duration_ms * (multiplier ** attempt)
# With 2.0: attempt 0 waits 1x, attempt 1 waits 2x, attempt 2 waits 4x
DEFAULT_BACKOFF_MULTIPLIER = 2.0

# Default cap on the computed delay (no cap)
DEFAULT_MAX_DELAY_MS = math.inf


@dataclass(frozen=True)
class DelayConfig:
    """Configuration of a single controllable delay.

    A config is immutable: once a delay has started, its behavior can no
    longer be changed. Use ``merge`` to derive a new config.

    Args:
        cancellable: Whether ``DelayController.cancel`` is allowed.
        on_progress: Optional callback receiving
            ``(elapsed_ms, remaining_ms, progress_percent)`` on every tick.
        progress_interval_ms: Interval between progress reports in
            milliseconds. Must be > 0.
        cancel_reason: Reason used when a delay is cancelled without an
            explicit one. A string is wrapped in ``DelayCancelledError``,
            an exception instance is raised as-is.
        exponential_backoff: Whether the duration grows with the attempt
            number.
        backoff_multiplier: Growth factor for exponential backoff. Must be > 0.
        max_delay_ms: Upper cap of the computed duration in milliseconds.
            Must be > 0.

    Example:
        ```pycon
        >>> from adelay.core.config import DelayConfig
        >>> config = DelayConfig()  # Use defaults
        >>> config.cancellable
        False
        >>> config = DelayConfig(cancellable=True, max_delay_ms=5000)
        >>> merged = config.merge(max_delay_ms=1000)
        >>> merged.max_delay_ms
        1000
        >>> config.max_delay_ms  # Original unchanged
        5000

        ```
    """

    cancellable: bool = False
    on_progress: Callable[[float, float, float], None] | None = None
    progress_interval_ms: float = DEFAULT_PROGRESS_INTERVAL_MS
    cancel_reason: str | Exception | None = None
    exponential_backoff: bool = False
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER
    max_delay_ms: float = DEFAULT_MAX_DELAY_MS

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_delay_params(
            progress_interval_ms=self.progress_interval_ms,
            backoff_multiplier=self.backoff_multiplier,
            max_delay_ms=self.max_delay_ms,
        )

    def merge(self, **overrides: Any) -> DelayConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new DelayConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from adelay.core.config import DelayConfig
            >>> config = DelayConfig()
            >>> config.merge(exponential_backoff=True).exponential_backoff
            True
            >>> config.merge(on_progress=None).on_progress is None
            True

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the delay configuration parameters.

        Example:
            ```pycon
            >>> from adelay.core.config import DelayConfig
            >>> DelayConfig(cancellable=True).to_dict()["cancellable"]
            True

            ```
        """
        return {
            "cancellable": self.cancellable,
            "on_progress": self.on_progress,
            "progress_interval_ms": self.progress_interval_ms,
            "cancel_reason": self.cancel_reason,
            "exponential_backoff": self.exponential_backoff,
            "backoff_multiplier": self.backoff_multiplier,
            "max_delay_ms": self.max_delay_ms,
        }
