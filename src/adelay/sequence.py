r"""Sequences of delays executed one after another.

Each step starts only after the previous one has resolved. The first
failing step fails the whole sequence and the remaining steps are never
started.
"""

from __future__ import annotations

__all__ = ["delay_sequence", "delay_sequence_async"]

import logging
from typing import TYPE_CHECKING

from adelay.core.validation import validate_duration
from adelay.delay import delay
from adelay.delay_async import delay_async

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from adelay.controller import DelayController
    from adelay.core.config import DelayConfig

logger: logging.Logger = logging.getLogger(__name__)


def _validate_durations(durations_ms: Iterable[float]) -> list[float]:
    durations = list(durations_ms)
    for duration_ms in durations:
        validate_duration(duration_ms)
    return durations


def delay_sequence(
    durations_ms: Iterable[float],
    config: DelayConfig | None = None,
    on_step: Callable[[int, DelayController], None] | None = None,
) -> None:
    """Wait for each duration in order, blocking the calling thread.

    Args:
        durations_ms: The durations of the steps in milliseconds.
        config: Optional configuration applied to every step.
        on_step: Optional callback receiving ``(index, controller)``
            when a step starts, e.g. to cancel the running step from
            another thread.

    Raises:
        ValueError: If a duration is negative. No step is started.
        DelayCancelledError: If a step was cancelled. The following
            steps are not started.

    Example:
        ```pycon
        >>> from adelay import delay_sequence
        >>> delay_sequence([10, 20, 30])  # Total delay: 60ms

        ```
    """
    durations = _validate_durations(durations_ms)
    for index, duration_ms in enumerate(durations):
        logger.debug(f"Starting delay sequence step {index + 1}/{len(durations)}")
        handle = delay(duration_ms, config)
        if on_step is not None:
            on_step(index, handle.controller)
        handle.wait()


async def delay_sequence_async(
    durations_ms: Iterable[float],
    config: DelayConfig | None = None,
    on_step: Callable[[int, DelayController], None] | None = None,
) -> None:
    """Wait for each duration in order on the running event loop.

    Args:
        durations_ms: The durations of the steps in milliseconds.
        config: Optional configuration applied to every step.
        on_step: Optional callback receiving ``(index, controller)``
            when a step starts.

    Raises:
        ValueError: If a duration is negative. No step is started.
        DelayCancelledError: If a step was cancelled. The following
            steps are not started.

    Example:
        ```pycon
        >>> import asyncio
        >>> from adelay import delay_sequence_async
        >>> asyncio.run(delay_sequence_async([10, 20, 30]))

        ```
    """
    durations = _validate_durations(durations_ms)
    for index, duration_ms in enumerate(durations):
        logger.debug(f"Starting async delay sequence step {index + 1}/{len(durations)}")
        handle = delay_async(duration_ms, config)
        if on_step is not None:
            on_step(index, handle.controller)
        await handle.future
