r"""Delays with a randomly sampled duration.

The duration is sampled once, when the delay is created.
"""

from __future__ import annotations

__all__ = ["random_delay", "random_delay_async", "sample_duration"]

import logging
import random
from typing import TYPE_CHECKING

from adelay.core.validation import validate_range
from adelay.delay import delay
from adelay.delay_async import delay_async

if TYPE_CHECKING:
    from adelay.core.config import DelayConfig
    from adelay.core.handle import AsyncDelayHandle, DelayHandle

logger: logging.Logger = logging.getLogger(__name__)


def sample_duration(min_ms: int, max_ms: int) -> int:
    """Sample a duration uniformly from ``[min_ms, max_ms]``.

    Args:
        min_ms: The lower bound in milliseconds (inclusive).
        max_ms: The upper bound in milliseconds (inclusive).

    Returns:
        The sampled duration in milliseconds.

    Raises:
        InvalidRangeError: If ``min_ms`` is negative or greater than ``max_ms``.

    Example:
        ```pycon
        >>> from adelay.random_delay import sample_duration
        >>> sample_duration(100, 100)
        100
        >>> 100 <= sample_duration(100, 200) <= 200
        True

        ```
    """
    validate_range(min_ms, max_ms)
    duration_ms = random.randint(min_ms, max_ms)  # noqa: S311
    logger.debug(f"Sampled random delay of {duration_ms}ms from [{min_ms}, {max_ms}]")
    return duration_ms


def random_delay(
    min_ms: int,
    max_ms: int,
    config: DelayConfig | None = None,
) -> DelayHandle:
    """Start a delay whose duration is sampled from ``[min_ms, max_ms]``.

    Args:
        min_ms: The lower bound in milliseconds (inclusive). Must be >= 0.
        max_ms: The upper bound in milliseconds (inclusive). Must be >= min_ms.
        config: Optional delay configuration.

    Returns:
        A ``DelayHandle`` holding the future and the controller.

    Raises:
        InvalidRangeError: If the range is invalid. No timer is started.

    Example:
        ```pycon
        >>> from adelay import random_delay
        >>> _, controller = random_delay(10, 10)
        >>> controller.actual_delay_ms
        10

        ```
    """
    return delay(sample_duration(min_ms, max_ms), config)


def random_delay_async(
    min_ms: int,
    max_ms: int,
    config: DelayConfig | None = None,
) -> AsyncDelayHandle:
    """Start a delay whose duration is sampled from ``[min_ms, max_ms]``
    on the running event loop.

    Args:
        min_ms: The lower bound in milliseconds (inclusive). Must be >= 0.
        max_ms: The upper bound in milliseconds (inclusive). Must be >= min_ms.
        config: Optional delay configuration.

    Returns:
        An ``AsyncDelayHandle`` holding the future and the controller.

    Raises:
        InvalidRangeError: If the range is invalid. No timer is started.
        RuntimeError: If there is no running event loop.
    """
    return delay_async(sample_duration(min_ms, max_ms), config)
