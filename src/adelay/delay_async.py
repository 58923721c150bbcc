r"""Controllable delay running on an asyncio event loop.

This module provides the asyncio flavour of the delay primitive: the
completion timer and the progress ticker are scheduled with
``loop.call_later`` and the suspended operation is an
``asyncio.Future``.
"""

from __future__ import annotations

__all__ = ["delay_async"]

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING

from adelay.controller import DelayController
from adelay.core.delay_logic import compute_actual_delay, resolve_config
from adelay.core.handle import AsyncDelayHandle
from adelay.core.state import DelayState, DelayStatus
from adelay.progress import AsyncProgressTicker

if TYPE_CHECKING:
    from adelay.core.config import DelayConfig

logger: logging.Logger = logging.getLogger(__name__)


def delay_async(
    duration_ms: float,
    config: DelayConfig | None = None,
    *,
    attempt: int = 0,
) -> AsyncDelayHandle:
    """Start a delay on the running event loop and return immediately.

    The returned future is resolved with ``None`` once the delay has
    elapsed, or failed with the cancellation error if the delay is
    cancelled through its controller. The handle is awaitable.

    If the waiter gives up on the future (for example, the awaiting task
    is cancelled), the delay moves to the cancelled state and releases
    its timers, whether or not it is ``cancellable``.

    The controller must be used from the event loop's thread.

    Args:
        duration_ms: The requested duration in milliseconds. Must be >= 0.
        config: Optional delay configuration. Defaults to ``DelayConfig()``.
        attempt: The attempt number (0-indexed) used when
            ``config.exponential_backoff`` is enabled. Without backoff it
            is ignored.

    Returns:
        An ``AsyncDelayHandle`` holding the future and the controller.

    Raises:
        RuntimeError: If there is no running event loop.
        ValueError: If ``duration_ms`` or ``attempt`` is negative.

    Example:
        ```pycon
        >>> import asyncio
        >>> from adelay import DelayConfig, DelayCancelledError, delay_async
        >>> async def main():
        ...     await delay_async(10)
        ...     future, controller = delay_async(5000, DelayConfig(cancellable=True))
        ...     controller.cancel("user cancelled")
        ...     try:
        ...         await future
        ...     except DelayCancelledError as exc:
        ...         return exc.reason
        ...
        >>> asyncio.run(main())
        'user cancelled'

        ```
    """
    loop = asyncio.get_running_loop()
    config = resolve_config(config)
    actual_delay_ms = compute_actual_delay(duration_ms, config, attempt)

    state = DelayState(actual_delay_ms)
    future: asyncio.Future[None] = loop.create_future()
    controller = DelayController(state, config, reject=partial(_reject, future))
    future.add_done_callback(partial(_on_future_done, state))

    if config.on_progress is not None:
        ticker = AsyncProgressTicker(loop, state, config.on_progress, config.progress_interval_ms)
        state.ticker_handle = ticker
        ticker.start()
    state.timer_handle = loop.call_later(actual_delay_ms / 1000.0, _complete, state, future)

    logger.debug(
        f"Started async delay of {actual_delay_ms:.2f}ms (cancellable={config.cancellable})"
    )
    return AsyncDelayHandle(future, controller)


def _complete(state: DelayState, future: asyncio.Future[None]) -> None:
    if state.transition(DelayStatus.RESOLVED) and not future.done():
        future.set_result(None)


def _reject(future: asyncio.Future[None], error: BaseException) -> None:
    if not future.done():
        future.set_exception(error)


def _on_future_done(state: DelayState, future: asyncio.Future[None]) -> None:
    if future.cancelled() and state.transition(DelayStatus.CANCELLED):
        logger.debug("Delay abandoned by its waiter, timers released")
