r"""Progress reporting for running delays.

This module provides the recurring progress tickers used by delays
configured with an ``on_progress`` callback: one driven by a daemon
thread, one driven by an asyncio event loop.
"""

from __future__ import annotations

__all__ = ["AsyncProgressTicker", "ProgressTicker", "report_progress"]

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable

    from adelay.core.state import DelayState

logger: logging.Logger = logging.getLogger(__name__)


def report_progress(
    state: DelayState,
    on_progress: Callable[[float, float, float], None],
) -> bool:
    """Invoke the progress callback once if the delay is still pending.

    The callback runs with the state lock held, so it never runs after
    the terminal transition. The lock is re-entrant: the callback may
    cancel the delay. Exceptions raised by the callback are logged and
    do not affect the delay.

    Args:
        state: The state of the running delay.
        on_progress: Callback receiving
            ``(elapsed_ms, remaining_ms, progress_percent)``.

    Returns:
        ``True`` if the delay is still pending after the report, i.e.
        the ticker should keep running.

    Example:
        ```pycon
        >>> from adelay.core.state import DelayState, DelayStatus
        >>> from adelay.progress import report_progress
        >>> reports = []
        >>> state = DelayState(actual_delay_ms=1000)
        >>> report_progress(state, lambda *args: reports.append(args))
        True
        >>> len(reports)
        1
        >>> _ = state.transition(DelayStatus.RESOLVED)
        >>> report_progress(state, lambda *args: reports.append(args))
        False
        >>> len(reports)
        1

        ```
    """
    with state.lock:
        if not state.is_pending:
            return False
        elapsed = state.elapsed_ms()
        remaining = max(0.0, state.actual_delay_ms - elapsed)
        if state.actual_delay_ms > 0:
            progress = min(100.0, 100.0 * elapsed / state.actual_delay_ms)
        else:
            progress = 100.0
        try:
            on_progress(elapsed, remaining, progress)
        except Exception as e:  # noqa: BLE001
            logger.warning(f"Error in delay progress callback: {e}")
        return state.is_pending


class ProgressTicker:
    r"""Report progress on a daemon thread every ``interval_ms``.

    Args:
        state: The state of the running delay.
        on_progress: Callback receiving
            ``(elapsed_ms, remaining_ms, progress_percent)``.
        interval_ms: Interval between two reports in milliseconds.
    """

    def __init__(
        self,
        state: DelayState,
        on_progress: Callable[[float, float, float], None],
        interval_ms: float,
    ) -> None:
        self._state = state
        self._on_progress = on_progress
        self._interval = interval_ms / 1000.0
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="adelay-progress", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        """Stop the ticker. Safe to call from any thread, more than
        once."""
        self._stopped.set()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            if not report_progress(self._state, self._on_progress):
                break


class AsyncProgressTicker:
    r"""Report progress on an asyncio event loop every ``interval_ms``.

    Args:
        loop: The event loop running the delay.
        state: The state of the running delay.
        on_progress: Callback receiving
            ``(elapsed_ms, remaining_ms, progress_percent)``.
        interval_ms: Interval between two reports in milliseconds.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        state: DelayState,
        on_progress: Callable[[float, float, float], None],
        interval_ms: float,
    ) -> None:
        self._loop = loop
        self._state = state
        self._on_progress = on_progress
        self._interval = interval_ms / 1000.0
        self._handle: asyncio.TimerHandle | None = None
        self._stopped = False

    def start(self) -> None:
        self._handle = self._loop.call_later(self._interval, self._tick)

    def cancel(self) -> None:
        """Stop the ticker. Must be called from the loop thread."""
        self._stopped = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._handle = None
        if self._stopped:
            return
        if report_progress(self._state, self._on_progress) and not self._stopped:
            self._handle = self._loop.call_later(self._interval, self._tick)
