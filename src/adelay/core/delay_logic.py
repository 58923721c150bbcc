r"""Shared delay setup logic for sync and async operations.

This module contains the steps shared by the thread-based and the
asyncio-based delays: resolving the configuration, validating the
request and computing the actual duration of the delay.
"""

from __future__ import annotations

__all__ = ["compute_actual_delay", "resolve_config"]

import logging

from adelay.backoff.calculator import compute_delay
from adelay.core.config import DelayConfig
from adelay.core.validation import validate_duration

logger: logging.Logger = logging.getLogger(__name__)


def resolve_config(config: DelayConfig | None) -> DelayConfig:
    """Return ``config``, or the default configuration if it is None."""
    return DelayConfig() if config is None else config


def compute_actual_delay(duration_ms: float, config: DelayConfig, attempt: int = 0) -> float:
    """Compute the duration a delay will actually wait.

    Args:
        duration_ms: The requested duration in milliseconds. Must be >= 0.
        config: The delay configuration. Backoff is applied only when
            ``config.exponential_backoff`` is set.
        attempt: The attempt number (0-indexed) used for backoff growth.

    Returns:
        The actual duration in milliseconds.

    Raises:
        ValueError: If ``duration_ms`` or ``attempt`` is negative.

    Example:
        ```pycon
        >>> from adelay.core import DelayConfig
        >>> from adelay.core.delay_logic import compute_actual_delay
        >>> compute_actual_delay(100, DelayConfig(), attempt=3)
        100
        >>> compute_actual_delay(100, DelayConfig(exponential_backoff=True), attempt=3)
        800.0

        ```
    """
    validate_duration(duration_ms)
    actual_delay_ms = compute_delay(
        duration_ms,
        attempt,
        enabled=config.exponential_backoff,
        multiplier=config.backoff_multiplier,
        cap=config.max_delay_ms,
    )
    if actual_delay_ms != duration_ms:
        logger.debug(
            f"Delay of {duration_ms:.2f}ms becomes {actual_delay_ms:.2f}ms "
            f"for attempt {attempt} (multiplier={config.backoff_multiplier})"
        )
    return actual_delay_ms
