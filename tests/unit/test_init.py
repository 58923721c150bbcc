r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import math

import pytest

import adelay


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(adelay.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in adelay.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in adelay.__all__:
        assert hasattr(adelay, name), f"{name} is in __all__ but not defined in module"


def test_constants() -> None:
    """Test the exported configuration defaults."""
    assert adelay.DEFAULT_PROGRESS_INTERVAL_MS == 100
    assert adelay.DEFAULT_BACKOFF_MULTIPLIER == 2.0
    assert adelay.DEFAULT_MAX_DELAY_MS == math.inf


@pytest.mark.parametrize(
    "func_name",
    [
        "compute_delay",
        "delay",
        "delay_async",
        "delay_sequence",
        "delay_sequence_async",
        "random_delay",
        "random_delay_async",
        "retry_delay",
        "retry_delay_async",
    ],
)
def test_all_delay_functions_are_callable(func_name: str) -> None:
    """Test that all delay functions are callable."""
    func = getattr(adelay, func_name)
    assert callable(func), f"{func_name} is not callable"
