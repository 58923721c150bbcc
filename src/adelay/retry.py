r"""Backoff-aware delays for retry loops.

This module provides delays whose duration grows exponentially with the
attempt number. They only manage time: the retried operation and the
retry loop belong to the caller.

Example:
    ```pycon
    >>> from adelay import retry_delay
    >>> def fetch():
    ...     return "data"
    ...
    >>> for attempt in range(5):
    ...     try:
    ...         result = fetch()
    ...         break
    ...     except ConnectionError:
    ...         retry_delay(100, attempt, max_delay_ms=10_000).wait()
    ...
    >>> result
    'data'

    ```
"""

from __future__ import annotations

__all__ = ["retry_delay", "retry_delay_async"]

from typing import TYPE_CHECKING

from adelay.core.delay_logic import resolve_config
from adelay.delay import delay
from adelay.delay_async import delay_async

if TYPE_CHECKING:
    from adelay.core.config import DelayConfig
    from adelay.core.handle import AsyncDelayHandle, DelayHandle


def _retry_config(
    config: DelayConfig | None,
    backoff_multiplier: float | None,
    max_delay_ms: float | None,
) -> DelayConfig:
    return resolve_config(config).merge(
        exponential_backoff=True,
        backoff_multiplier=backoff_multiplier,
        max_delay_ms=max_delay_ms,
    )


def retry_delay(
    base_ms: float,
    attempt: int = 0,
    config: DelayConfig | None = None,
    *,
    backoff_multiplier: float | None = None,
    max_delay_ms: float | None = None,
) -> DelayHandle:
    """Start a delay of ``base_ms * multiplier ** attempt`` milliseconds.

    Exponential backoff is always enabled, whatever
    ``config.exponential_backoff`` says. The multiplier defaults to 2 and
    the cap to infinity.

    Args:
        base_ms: The base duration in milliseconds. Must be >= 0.
        attempt: The current attempt number (0-indexed). Must be >= 0.
        config: Optional delay configuration for cancellation, progress
            reporting, multiplier and cap.
        backoff_multiplier: Optional override of ``config.backoff_multiplier``.
        max_delay_ms: Optional override of ``config.max_delay_ms``.

    Returns:
        A ``DelayHandle`` holding the future and the controller.

    Raises:
        ValueError: If a parameter is invalid.

    Example:
        ```pycon
        >>> from adelay import DelayConfig, retry_delay
        >>> _, controller = retry_delay(100, 3, DelayConfig(cancellable=True))
        >>> controller.actual_delay_ms
        800.0
        >>> controller.cancel()

        ```
    """
    return delay(
        base_ms,
        _retry_config(config, backoff_multiplier, max_delay_ms),
        attempt=attempt,
    )


def retry_delay_async(
    base_ms: float,
    attempt: int = 0,
    config: DelayConfig | None = None,
    *,
    backoff_multiplier: float | None = None,
    max_delay_ms: float | None = None,
) -> AsyncDelayHandle:
    """Start a delay of ``base_ms * multiplier ** attempt`` milliseconds
    on the running event loop.

    This is the asyncio counterpart of ``retry_delay``.

    Args:
        base_ms: The base duration in milliseconds. Must be >= 0.
        attempt: The current attempt number (0-indexed). Must be >= 0.
        config: Optional delay configuration for cancellation, progress
            reporting, multiplier and cap.
        backoff_multiplier: Optional override of ``config.backoff_multiplier``.
        max_delay_ms: Optional override of ``config.max_delay_ms``.

    Returns:
        An ``AsyncDelayHandle`` holding the future and the controller.

    Raises:
        RuntimeError: If there is no running event loop.
        ValueError: If a parameter is invalid.
    """
    return delay_async(
        base_ms,
        _retry_config(config, backoff_multiplier, max_delay_ms),
        attempt=attempt,
    )
