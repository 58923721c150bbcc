r"""Backoff duration calculation.

This module maps a base duration and an attempt index to the actual
duration of a delay, applying capped exponential growth when enabled.
"""

from __future__ import annotations

__all__ = ["compute_delay"]

import logging
import math
import sys

logger: logging.Logger = logging.getLogger(__name__)


def compute_delay(
    base_ms: float,
    attempt: int = 0,
    enabled: bool = False,
    multiplier: float = 2.0,
    cap: float = math.inf,
) -> float:
    """Compute the actual duration of a delay in milliseconds.

    The duration is calculated as follows:
    1. If backoff is disabled: ``base_ms`` (``attempt`` is ignored)
    2. Otherwise: ``min(base_ms * multiplier ** attempt, cap)``

    Growth that exceeds the float range saturates to ``cap``, or to
    ``sys.float_info.max`` when ``cap`` is infinite.

    Args:
        base_ms: The requested duration in milliseconds. Must be >= 0.
        attempt: The attempt number (0-indexed). Must be >= 0.
        enabled: Whether exponential backoff is applied.
        multiplier: The growth factor applied per attempt.
        cap: The upper bound of the computed duration in milliseconds.

    Returns:
        The actual delay duration in milliseconds.

    Raises:
        ValueError: If ``base_ms`` or ``attempt`` is negative.

    Example:
        ```pycon
        >>> from adelay.backoff import compute_delay
        >>> compute_delay(100, attempt=3)
        100
        >>> compute_delay(100, attempt=3, enabled=True)
        800.0
        >>> compute_delay(100, attempt=3, enabled=True, cap=500)
        500
        >>> compute_delay(1, attempt=10_000, enabled=True, cap=60_000)
        60000

        ```
    """
    if base_ms < 0:
        msg = f"base_ms must be >= 0, got {base_ms}"
        raise ValueError(msg)
    if attempt < 0:
        msg = f"attempt must be >= 0, got {attempt}"
        raise ValueError(msg)
    if not enabled:
        return base_ms
    if base_ms == 0:
        return 0.0

    saturated = cap if math.isfinite(cap) else sys.float_info.max
    try:
        delay_ms = base_ms * float(multiplier) ** attempt
    except OverflowError:
        logger.debug(
            f"Backoff for attempt {attempt} overflowed, saturating to {saturated:.2f}ms"
        )
        return saturated
    if math.isinf(delay_ms):
        logger.debug(
            f"Backoff for attempt {attempt} overflowed, saturating to {saturated:.2f}ms"
        )
        return saturated
    if delay_ms > cap:
        logger.debug(f"Capping delay from {delay_ms:.2f}ms to {cap:.2f}ms")
        return cap
    return delay_ms
