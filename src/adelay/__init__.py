r"""adelay - Controllable delays with cancellation, progress and backoff.

This package provides a delay primitive that suspends for a duration and
returns immediately with a future and a controller. The controller can
cancel the delay (when enabled) and report its elapsed and remaining
time. Utilities built on top of it cover retry loops with exponential
backoff, sequences of delays and randomized delays.

Key Features:
    - Cooperative cancellation, enabled per delay
    - Progress reporting on a configurable interval
    - Capped exponential backoff that saturates instead of overflowing
    - Exactly one terminal transition per delay, even across threads
    - Thread-based and asyncio-based flavours of every entry point

Example:
    ```pycon
    >>> from adelay import DelayConfig, delay, retry_delay
    >>> # Simple delay
    >>> delay(10).wait()
    >>> # Cancellable delay
    >>> future, controller = delay(5000, DelayConfig(cancellable=True))
    >>> controller.cancel("user cancelled")
    >>> controller.is_cancelled()
    True
    >>> # Backoff delay for the fourth attempt of a retry loop
    >>> retry_delay(1, attempt=3).wait()

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_PROGRESS_INTERVAL_MS",
    "AsyncDelayHandle",
    "DelayCancelledError",
    "DelayConfig",
    "DelayController",
    "DelayError",
    "DelayHandle",
    "DelayStatus",
    "InvalidRangeError",
    "NotCancellableError",
    "__version__",
    "compute_delay",
    "delay",
    "delay_async",
    "delay_sequence",
    "delay_sequence_async",
    "random_delay",
    "random_delay_async",
    "retry_delay",
    "retry_delay_async",
]

from importlib.metadata import PackageNotFoundError, version

from adelay.backoff import compute_delay
from adelay.controller import DelayController
from adelay.core import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_PROGRESS_INTERVAL_MS,
    AsyncDelayHandle,
    DelayConfig,
    DelayHandle,
    DelayStatus,
)
from adelay.delay import delay
from adelay.delay_async import delay_async
from adelay.exceptions import (
    DelayCancelledError,
    DelayError,
    InvalidRangeError,
    NotCancellableError,
)
from adelay.random_delay import random_delay, random_delay_async
from adelay.retry import retry_delay, retry_delay_async
from adelay.sequence import delay_sequence, delay_sequence_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
