r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from adelay.backoff.base import BaseBackoffStrategy
from adelay.backoff.calculator import compute_delay


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay_ms * (multiplier ** attempt), with
    optional max_delay_ms cap.

    Args:
        base_delay_ms: The base delay in milliseconds (default: 100).
        multiplier: The growth factor applied per attempt (default: 2.0).
        max_delay_ms: Optional maximum delay cap in milliseconds. If
            specified, delays will not exceed this value.

    Example:
        ```pycon
        >>> from adelay.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay_ms=100)
        >>> backoff.calculate(0)
        100.0
        >>> backoff.calculate(3)
        800.0
        >>> backoff = ExponentialBackoff(base_delay_ms=1000, max_delay_ms=5000)
        >>> backoff.calculate(10)  # Would be 1024000.0, but capped
        5000

        ```
    """

    def __init__(
        self,
        base_delay_ms: float = 100.0,
        multiplier: float = 2.0,
        max_delay_ms: float | None = None,
    ) -> None:
        if base_delay_ms < 0:
            msg = f"base_delay_ms must be non-negative, got {base_delay_ms}"
            raise ValueError(msg)
        if multiplier <= 0:
            msg = f"multiplier must be positive, got {multiplier}"
            raise ValueError(msg)
        if max_delay_ms is not None and max_delay_ms <= 0:
            msg = f"max_delay_ms must be positive if specified, got {max_delay_ms}"
            raise ValueError(msg)

        self.base_delay_ms = base_delay_ms
        self.multiplier = multiplier
        self.max_delay_ms = max_delay_ms

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The calculated delay: base_delay_ms * (multiplier ** attempt),
            capped at max_delay_ms if set.
        """
        return compute_delay(
            self.base_delay_ms,
            attempt,
            enabled=True,
            multiplier=self.multiplier,
            cap=math.inf if self.max_delay_ms is None else self.max_delay_ms,
        )
