r"""Exceptions raised by controllable delays."""

from __future__ import annotations

__all__ = [
    "DelayCancelledError",
    "DelayError",
    "InvalidRangeError",
    "NotCancellableError",
]

DEFAULT_CANCEL_MESSAGE = "delay was cancelled"


class DelayError(RuntimeError):
    """Base class for all errors raised by ``adelay``."""


class NotCancellableError(DelayError):
    """Exception raised when cancelling a delay created without
    ``cancellable=True``.

    This is a programming error: cancellation must be enabled per
    delay. Raising it does not change the delay state, so the delay
    still resolves at its original time.

    Example:
        ```pycon
        >>> from adelay.exceptions import NotCancellableError
        >>> raise NotCancellableError("delay is not cancellable")
        Traceback (most recent call last):
            ...
        adelay.exceptions.NotCancellableError: delay is not cancellable

        ```
    """


class DelayCancelledError(DelayError):
    """Exception used to fail the future of a cancelled delay.

    Args:
        reason: Optional human-readable cancellation reason.

    Attributes:
        reason: The cancellation reason, or None if no reason was given.

    Example:
        ```pycon
        >>> from adelay.exceptions import DelayCancelledError
        >>> exc = DelayCancelledError("user aborted")
        >>> exc.reason
        'user aborted'
        >>> str(exc)
        'delay was cancelled: user aborted'
        >>> str(DelayCancelledError())
        'delay was cancelled'

        ```
    """

    def __init__(self, reason: str | None = None) -> None:
        message = DEFAULT_CANCEL_MESSAGE if reason is None else f"{DEFAULT_CANCEL_MESSAGE}: {reason}"
        super().__init__(message)
        self.reason = reason


class InvalidRangeError(DelayError, ValueError):
    """Exception raised when a random delay range is invalid.

    Args:
        min_ms: The requested lower bound in milliseconds.
        max_ms: The requested upper bound in milliseconds.

    Example:
        ```pycon
        >>> from adelay.exceptions import InvalidRangeError
        >>> exc = InvalidRangeError(min_ms=200, max_ms=100)
        >>> exc.min_ms, exc.max_ms
        (200, 100)

        ```
    """

    def __init__(self, min_ms: int, max_ms: int, message: str | None = None) -> None:
        if message is None:
            message = f"min_ms must be <= max_ms, got min_ms={min_ms} and max_ms={max_ms}"
        super().__init__(message)
        self.min_ms = min_ms
        self.max_ms = max_ms
