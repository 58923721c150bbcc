r"""Controllable delay running on timer threads.

This module provides the blocking-world flavour of the delay primitive:
the completion timer and the progress ticker run on daemon threads and
the suspended operation is a ``concurrent.futures.Future``.
"""

from __future__ import annotations

__all__ = ["delay"]

import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING

from adelay.controller import DelayController
from adelay.core.delay_logic import compute_actual_delay, resolve_config
from adelay.core.handle import DelayHandle
from adelay.core.state import DelayState, DelayStatus
from adelay.progress import ProgressTicker

if TYPE_CHECKING:
    from adelay.core.config import DelayConfig

logger: logging.Logger = logging.getLogger(__name__)


def delay(
    duration_ms: float,
    config: DelayConfig | None = None,
    *,
    attempt: int = 0,
) -> DelayHandle:
    """Start a delay and return immediately.

    The returned future is resolved with ``None`` once the delay has
    elapsed, or failed with the cancellation error if the delay is
    cancelled through its controller. The future is already marked as
    running, so ``future.cancel()`` has no effect: use
    ``controller.cancel()`` instead.

    Args:
        duration_ms: The requested duration in milliseconds. Must be >= 0.
        config: Optional delay configuration. Defaults to ``DelayConfig()``.
        attempt: The attempt number (0-indexed) used when
            ``config.exponential_backoff`` is enabled. Without backoff it
            is ignored.

    Returns:
        A ``DelayHandle`` holding the future and the controller.

    Raises:
        ValueError: If ``duration_ms`` or ``attempt`` is negative.

    Example:
        ```pycon
        >>> from adelay import DelayConfig, delay
        >>> # Simple delay
        >>> delay(10).wait()
        >>> # Cancellable delay with progress
        >>> future, controller = delay(
        ...     5000,
        ...     DelayConfig(
        ...         cancellable=True,
        ...         on_progress=lambda elapsed, remaining, progress: None,
        ...     ),
        ... )
        >>> controller.cancel("user cancelled")
        >>> controller.is_cancelled()
        True

        ```
    """
    config = resolve_config(config)
    actual_delay_ms = compute_actual_delay(duration_ms, config, attempt)

    state = DelayState(actual_delay_ms)
    future: Future[None] = Future()
    future.set_running_or_notify_cancel()
    controller = DelayController(state, config, reject=future.set_exception)

    # Handles are registered before any callback can take the lock
    with state.lock:
        if config.on_progress is not None:
            ticker = ProgressTicker(state, config.on_progress, config.progress_interval_ms)
            state.ticker_handle = ticker
            ticker.start()
        # Saturated backoff durations exceed what a thread can wait for
        interval = min(actual_delay_ms / 1000.0, threading.TIMEOUT_MAX)
        timer = threading.Timer(interval, _complete, args=(state, future))
        timer.daemon = True
        state.timer_handle = timer
        timer.start()

    logger.debug(
        f"Started delay of {actual_delay_ms:.2f}ms (cancellable={config.cancellable})"
    )
    return DelayHandle(future, controller)


def _complete(state: DelayState, future: Future[None]) -> None:
    if state.transition(DelayStatus.RESOLVED):
        future.set_result(None)
