r"""Unit tests for BaseBackoffStrategy abstract base class."""

from __future__ import annotations

import pytest

from adelay.backoff.base import BaseBackoffStrategy


def test_base_backoff_strategy_is_abstract() -> None:
    """Test that BaseBackoffStrategy cannot be instantiated directly."""
    with pytest.raises(TypeError, match=r"Can't instantiate abstract class"):
        BaseBackoffStrategy()  # type: ignore[abstract]


def test_custom_backoff_strategy() -> None:
    """Test creating a custom backoff strategy in milliseconds."""

    class StepBackoff(BaseBackoffStrategy):
        def calculate(self, attempt: int) -> float:
            return 250.0 * (attempt + 1)

    backoff = StepBackoff()
    assert backoff.calculate(0) == 250.0
    assert backoff.calculate(3) == 1000.0
