r"""Parameter validation utilities for controllable delays.

This module provides validation functions for delay parameters to
ensure they meet the required constraints before any timer is started.
"""

from __future__ import annotations

__all__ = ["validate_delay_params", "validate_duration", "validate_range"]

from adelay.exceptions import InvalidRangeError


def validate_duration(duration_ms: float) -> None:
    """Validate a requested delay duration.

    Args:
        duration_ms: The requested duration in milliseconds. Must be >= 0.

    Raises:
        ValueError: If duration_ms is negative.

    Example:
        ```pycon
        >>> from adelay.core.validation import validate_duration
        >>> validate_duration(0)
        >>> validate_duration(250.5)
        >>> validate_duration(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: duration_ms must be >= 0, got -1

        ```
    """
    if duration_ms < 0:
        msg = f"duration_ms must be >= 0, got {duration_ms}"
        raise ValueError(msg)


def validate_delay_params(
    progress_interval_ms: float,
    backoff_multiplier: float,
    max_delay_ms: float,
) -> None:
    """Validate delay configuration parameters.

    Args:
        progress_interval_ms: Interval between progress reports in
            milliseconds. Must be > 0.
        backoff_multiplier: Growth factor for exponential backoff.
            Must be > 0.
        max_delay_ms: Upper cap of the computed duration in milliseconds.
            Must be > 0 (``math.inf`` disables the cap).

    Raises:
        ValueError: If any parameter is non-positive.

    Example:
        ```pycon
        >>> from adelay.core.validation import validate_delay_params
        >>> validate_delay_params(progress_interval_ms=100, backoff_multiplier=2.0, max_delay_ms=5000)
        >>> validate_delay_params(
        ...     progress_interval_ms=0, backoff_multiplier=2.0, max_delay_ms=5000
        ... )  # doctest: +SKIP

        ```
    """
    if progress_interval_ms <= 0:
        msg = f"progress_interval_ms must be > 0, got {progress_interval_ms}"
        raise ValueError(msg)
    if backoff_multiplier <= 0:
        msg = f"backoff_multiplier must be > 0, got {backoff_multiplier}"
        raise ValueError(msg)
    if max_delay_ms <= 0:
        msg = f"max_delay_ms must be > 0, got {max_delay_ms}"
        raise ValueError(msg)


def validate_range(min_ms: int, max_ms: int) -> None:
    """Validate the bounds of a random delay.

    Args:
        min_ms: The lower bound in milliseconds (inclusive). Must be >= 0.
        max_ms: The upper bound in milliseconds (inclusive). Must be >= min_ms.

    Raises:
        InvalidRangeError: If min_ms is negative or greater than max_ms.

    Example:
        ```pycon
        >>> from adelay.core.validation import validate_range
        >>> validate_range(100, 100)
        >>> validate_range(100, 500)
        >>> validate_range(500, 100)  # doctest: +SKIP

        ```
    """
    if min_ms < 0:
        raise InvalidRangeError(min_ms, max_ms, message=f"min_ms must be >= 0, got {min_ms}")
    if min_ms > max_ms:
        raise InvalidRangeError(min_ms, max_ms)
