r"""Mutable state of a single controllable delay.

A ``DelayState`` is owned by exactly one delay. It is mutated only by
the delay's completion timer, its progress ticker and the cancellation
path of its controller, all of which go through ``transition``.
"""

from __future__ import annotations

__all__ = ["DelayState", "DelayStatus", "now_ms"]

import logging
import threading
import time
from enum import Enum
from typing import Protocol

logger: logging.Logger = logging.getLogger(__name__)


def now_ms() -> float:
    """Return the current monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class DelayStatus(Enum):
    """Delay states.

    Attributes:
        PENDING: The delay is running.
        RESOLVED: The completion timer fired. Terminal.
        CANCELLED: The delay was cancelled. Terminal.
    """

    PENDING = "pending"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class ScheduledHandle(Protocol):
    """Anything returned by a timer facility that can be cancelled."""

    def cancel(self) -> object: ...


class DelayState:
    r"""State of one delay: status, timing and scheduled handles.

    The status check-and-transition is guarded by a re-entrant lock so
    that exactly one terminal transition happens per delay, even when
    the completion timer, the progress ticker and ``cancel()`` run on
    different threads. The first terminal transition releases both
    scheduled handles.

    Args:
        actual_delay_ms: The computed duration of the delay in milliseconds.

    Example:
        ```pycon
        >>> from adelay.core.state import DelayState, DelayStatus
        >>> state = DelayState(actual_delay_ms=1000)
        >>> state.status
        <DelayStatus.PENDING: 'pending'>
        >>> state.transition(DelayStatus.RESOLVED)
        True
        >>> state.transition(DelayStatus.CANCELLED)
        False
        >>> state.remaining_ms()
        0.0

        ```
    """

    def __init__(self, actual_delay_ms: float) -> None:
        self.actual_delay_ms = actual_delay_ms
        self.start_time_ms = now_ms()
        self.timer_handle: ScheduledHandle | None = None
        self.ticker_handle: ScheduledHandle | None = None
        self.lock = threading.RLock()
        self._status = DelayStatus.PENDING

    @property
    def status(self) -> DelayStatus:
        """The current status of the delay."""
        with self.lock:
            return self._status

    @property
    def is_pending(self) -> bool:
        """Whether the delay has not reached a terminal state yet."""
        return self.status is DelayStatus.PENDING

    def elapsed_ms(self) -> float:
        """Return the time since the delay started, in milliseconds.

        This keeps advancing after the terminal transition.
        """
        return now_ms() - self.start_time_ms

    def remaining_ms(self) -> float:
        """Return the time left before completion, in milliseconds.

        The value is computed from the clock on every call and is 0 once
        the delay is resolved or cancelled.
        """
        if not self.is_pending:
            return 0.0
        return max(0.0, self.actual_delay_ms - self.elapsed_ms())

    def progress(self) -> float:
        """Return the completion percentage in ``[0, 100]``."""
        if self.actual_delay_ms <= 0:
            return 100.0
        return min(100.0, 100.0 * self.elapsed_ms() / self.actual_delay_ms)

    def transition(self, status: DelayStatus) -> bool:
        """Move the delay to a terminal state.

        Args:
            status: The terminal status to move to.

        Returns:
            ``True`` if this call performed the terminal transition,
            ``False`` if the delay was already terminal.

        Raises:
            ValueError: If ``status`` is ``PENDING``.
        """
        if status is DelayStatus.PENDING:
            msg = "cannot transition a delay back to PENDING"
            raise ValueError(msg)
        with self.lock:
            if self._status is not DelayStatus.PENDING:
                logger.debug(
                    f"Ignoring transition to {status.value}, delay already {self._status.value}"
                )
                return False
            self._status = status
            self._cleanup()
        logger.debug(f"Delay {status.value} after {self.elapsed_ms():.2f}ms")
        return True

    def _cleanup(self) -> None:
        """Release the scheduled handles.

        Internal method. Must be called with lock held. Safe to call more
        than once.
        """
        if self.ticker_handle is not None:
            self.ticker_handle.cancel()
            self.ticker_handle = None
        if self.timer_handle is not None:
            self.timer_handle.cancel()
            self.timer_handle = None
