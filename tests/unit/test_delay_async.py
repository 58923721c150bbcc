r"""Unit tests for the asyncio-based controllable delay."""

from __future__ import annotations

import asyncio
import time

import pytest

from adelay import (
    AsyncDelayHandle,
    DelayCancelledError,
    DelayConfig,
    DelayStatus,
    NotCancellableError,
    delay_async,
)
from tests.helpers import TIMER_TOLERANCE_MS, ProgressRecorder, assert_monotonic_reports

#################################
#     Tests for delay_async     #
#################################


def test_delay_async_requires_running_loop() -> None:
    """Test that delay_async cannot be called outside an event loop."""
    with pytest.raises(RuntimeError, match=r"no running event loop"):
        delay_async(10)


@pytest.mark.asyncio
async def test_delay_async_returns_handle_immediately() -> None:
    """Test that delay_async returns a pending future and a controller."""
    handle = delay_async(1000, DelayConfig(cancellable=True))
    assert isinstance(handle, AsyncDelayHandle)
    assert isinstance(handle.future, asyncio.Future)
    assert not handle.future.done()
    assert handle.controller.status is DelayStatus.PENDING
    handle.controller.cancel()
    with pytest.raises(DelayCancelledError):
        await handle


@pytest.mark.asyncio
async def test_delay_async_resolves_after_duration() -> None:
    """Test that a plain delay resolves no earlier than its duration."""
    start = time.monotonic()
    future, controller = delay_async(50)
    assert not controller.is_cancelled()
    assert await future is None
    assert (time.monotonic() - start) * 1000 >= 50 - TIMER_TOLERANCE_MS
    assert not controller.is_cancelled()
    assert controller.get_remaining() == 0.0
    assert controller.status is DelayStatus.RESOLVED


@pytest.mark.asyncio
async def test_delay_async_handle_is_awaitable() -> None:
    """Test that the handle itself can be awaited."""
    handle = delay_async(5)
    await handle
    assert handle.controller.status is DelayStatus.RESOLVED


@pytest.mark.asyncio
async def test_delay_async_not_cancellable() -> None:
    """Test that cancel() on a non-cancellable delay raises and the delay
    still resolves."""
    future, controller = delay_async(20)
    with pytest.raises(NotCancellableError):
        controller.cancel()
    assert controller.status is DelayStatus.PENDING
    await future
    assert controller.status is DelayStatus.RESOLVED


@pytest.mark.asyncio
async def test_delay_async_cancel_with_reason() -> None:
    """Test that cancelling at ~10ms rejects with the given reason and a
    second cancel is a no-op."""
    future, controller = delay_async(100, DelayConfig(cancellable=True))
    await asyncio.sleep(0.01)
    controller.cancel("user aborted")
    controller.cancel("ignored")
    with pytest.raises(DelayCancelledError, match=r"user aborted") as exc_info:
        await future
    assert exc_info.value.reason == "user aborted"
    assert controller.is_cancelled()
    assert controller.get_remaining() == 0.0


@pytest.mark.asyncio
async def test_delay_async_cancel_after_resolution_is_noop() -> None:
    """Test that cancelling a resolved delay raises nothing and does not
    reject late."""
    future, controller = delay_async(5, DelayConfig(cancellable=True))
    await future
    controller.cancel("late")
    assert not controller.is_cancelled()
    assert future.exception() is None


@pytest.mark.asyncio
async def test_delay_async_cancel_config_reason_exception() -> None:
    """Test that the config's exception is raised to the waiter."""
    custom = ConnectionAbortedError("shutdown")
    future, controller = delay_async(
        100, DelayConfig(cancellable=True, cancel_reason=custom)
    )
    controller.cancel()
    with pytest.raises(ConnectionAbortedError, match=r"shutdown"):
        await future


@pytest.mark.asyncio
async def test_delay_async_abandoned_future_releases_timer() -> None:
    """Test that cancelling the waiting task cancels the delay."""
    handle = delay_async(1000)

    async def waiter() -> None:
        await handle

    task = asyncio.create_task(waiter())
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    await asyncio.sleep(0)
    assert handle.controller.status is DelayStatus.CANCELLED
    assert handle.controller.get_remaining() == 0.0


@pytest.mark.asyncio
async def test_delay_async_wait_for_timeout() -> None:
    """Test that an outer time bound set by the caller abandons the
    delay."""
    handle = delay_async(1000)
    with pytest.raises(TimeoutError):
        await asyncio.wait_for(handle.future, timeout=0.01)
    await asyncio.sleep(0)
    assert handle.controller.status is DelayStatus.CANCELLED


@pytest.mark.asyncio
async def test_delay_async_with_backoff_attempt() -> None:
    """Test that the attempt is used when backoff is enabled."""
    future, controller = delay_async(
        100,
        DelayConfig(cancellable=True, exponential_backoff=True, max_delay_ms=500),
        attempt=3,
    )
    assert controller.actual_delay_ms == 500
    controller.cancel()
    with pytest.raises(DelayCancelledError):
        await future


@pytest.mark.asyncio
async def test_delay_async_negative_duration() -> None:
    """Test that a negative duration is rejected."""
    with pytest.raises(ValueError, match=r"duration_ms must be >= 0"):
        delay_async(-10)


##########################################
#     Tests for async progress ticks     #
##########################################


@pytest.mark.asyncio
async def test_delay_async_progress_reports() -> None:
    """Test that progress reports are monotonic and stop at the terminal
    transition."""
    recorder = ProgressRecorder()
    await delay_async(200, DelayConfig(on_progress=recorder, progress_interval_ms=50))
    count = recorder.count
    assert count >= 1
    assert_monotonic_reports(recorder.reports)
    await asyncio.sleep(0.12)
    assert recorder.count == count


@pytest.mark.asyncio
async def test_delay_async_progress_stops_after_cancel() -> None:
    """Test that no progress is reported after cancellation."""
    recorder = ProgressRecorder()
    future, controller = delay_async(
        1000, DelayConfig(cancellable=True, on_progress=recorder, progress_interval_ms=10)
    )
    await asyncio.sleep(0.05)
    controller.cancel()
    count = recorder.count
    await asyncio.sleep(0.05)
    assert recorder.count == count
    with pytest.raises(DelayCancelledError):
        await future


@pytest.mark.asyncio
async def test_delay_async_progress_callback_can_cancel() -> None:
    """Test that the progress callback may cancel its own delay."""
    holder: dict[str, object] = {}
    reports: list[float] = []

    def on_progress(elapsed: float, remaining: float, progress: float) -> None:
        reports.append(progress)
        holder["controller"].cancel("from progress")

    future, controller = delay_async(
        1000, DelayConfig(cancellable=True, on_progress=on_progress, progress_interval_ms=10)
    )
    holder["controller"] = controller
    with pytest.raises(DelayCancelledError, match=r"from progress"):
        await future
    assert len(reports) == 1
