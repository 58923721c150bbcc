r"""Controller handle for cancelling and inspecting a delay.

The controller is returned next to the delay's future. It is a view
over the delay's state and owns no timers itself.
"""

from __future__ import annotations

__all__ = ["DelayController"]

import logging
from typing import TYPE_CHECKING

from adelay.core.state import DelayStatus
from adelay.exceptions import DelayCancelledError, NotCancellableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from adelay.core.config import DelayConfig
    from adelay.core.state import DelayState

logger: logging.Logger = logging.getLogger(__name__)


class DelayController:
    r"""Handle used to cancel a delay and query its timing.

    Every controller created for one delay shares the same state, so
    they all observe the same status.

    Args:
        state: The state of the controlled delay.
        config: The configuration the delay was started with.
        reject: Function failing the delay's future with an exception.
            It is only called by the winner of the terminal transition.

    Example:
        ```pycon
        >>> from adelay import DelayConfig, delay
        >>> future, controller = delay(10_000, DelayConfig(cancellable=True))
        >>> controller.is_cancelled()
        False
        >>> controller.cancel("no longer needed")
        >>> controller.is_cancelled()
        True
        >>> controller.get_remaining()
        0.0
        >>> future.exception()
        DelayCancelledError('delay was cancelled: no longer needed')

        ```
    """

    def __init__(
        self,
        state: DelayState,
        config: DelayConfig,
        reject: Callable[[BaseException], None],
    ) -> None:
        self._state = state
        self._config = config
        self._reject = reject

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(status={self._state.status.value}, "
            f"actual_delay_ms={self._state.actual_delay_ms})"
        )

    @property
    def status(self) -> DelayStatus:
        """The current status of the delay."""
        return self._state.status

    @property
    def actual_delay_ms(self) -> float:
        """The computed duration of the delay, after backoff."""
        return self._state.actual_delay_ms

    def cancel(self, reason: str | None = None) -> None:
        """Cancel the delay and fail its future.

        Cancelling a delay that is already resolved or cancelled does
        nothing.

        Args:
            reason: Optional cancellation reason. Falls back to the
                config's ``cancel_reason``.

        Raises:
            NotCancellableError: If the delay was created without
                ``cancellable=True``. The delay state is left unchanged.
        """
        if not self._config.cancellable:
            msg = "delay is not cancellable, create it with DelayConfig(cancellable=True)"
            raise NotCancellableError(msg)
        if not self._state.transition(DelayStatus.CANCELLED):
            logger.debug(f"Ignoring cancel() on a delay already {self._state.status.value}")
            return
        error = self._build_error(reason)
        logger.debug(f"Delay cancelled: {error}")
        self._reject(error)

    def is_cancelled(self) -> bool:
        """Return whether the delay was cancelled."""
        return self._state.status is DelayStatus.CANCELLED

    def get_elapsed(self) -> float:
        """Return the milliseconds elapsed since the delay started."""
        return self._state.elapsed_ms()

    def get_remaining(self) -> float:
        """Return the milliseconds left before completion, 0 once
        terminal."""
        return self._state.remaining_ms()

    def _build_error(self, reason: str | None) -> BaseException:
        if reason is not None:
            return DelayCancelledError(reason)
        if isinstance(self._config.cancel_reason, BaseException):
            return self._config.cancel_reason
        return DelayCancelledError(self._config.cancel_reason)
