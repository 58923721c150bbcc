r"""Return types of the delay entry points.

A delay call returns its suspended operation (a future) together with
the controller of the same delay.
"""

from __future__ import annotations

__all__ = ["AsyncDelayHandle", "DelayHandle"]

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Generator
    from concurrent.futures import Future

    from adelay.controller import DelayController


class DelayHandle(NamedTuple):
    """Future and controller of a delay running on timer threads.

    Attributes:
        future: Resolved with ``None`` when the delay completes, failed
            with the cancellation error when it is cancelled.
        controller: The controller of the delay.

    Example:
        ```pycon
        >>> from adelay import delay
        >>> future, controller = delay(10)
        >>> future.result()
        >>> controller.is_cancelled()
        False

        ```
    """

    future: Future[None]
    controller: DelayController

    def wait(self, timeout: float | None = None) -> None:
        """Block until the delay completes.

        Args:
            timeout: Maximum number of seconds to wait, or None to wait
                until the delay is resolved or cancelled.

        Raises:
            DelayCancelledError: If the delay was cancelled.
            TimeoutError: If the delay did not complete within ``timeout``.
        """
        self.future.result(timeout=timeout)


class AsyncDelayHandle(NamedTuple):
    """Future and controller of a delay running on an asyncio event
    loop.

    The handle itself is awaitable, so ``await delay_async(100)`` waits
    for the delay.

    Attributes:
        future: Resolved with ``None`` when the delay completes, failed
            with the cancellation error when it is cancelled.
        controller: The controller of the delay.
    """

    future: asyncio.Future[None]
    controller: DelayController

    def __await__(self) -> Generator[object, None, None]:
        return self.future.__await__()
