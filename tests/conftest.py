from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


class FakeClock:
    """Manually driven clock returning milliseconds."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, duration_ms: float) -> None:
        self.now += duration_ms


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Patch the millisecond clock used by delay states."""
    clock = FakeClock()
    with patch("adelay.core.state.now_ms", side_effect=clock):
        yield clock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks.

    Returns:
        A Mock object that can be used as a progress or step callback.
    """
    return Mock()
