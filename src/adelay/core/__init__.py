r"""Core shared logic for sync and async delays.

This module contains the configuration, validation, state machine and
handle types used by both the thread-based and the asyncio-based delay
implementations.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_PROGRESS_INTERVAL_MS",
    "AsyncDelayHandle",
    "DelayConfig",
    "DelayHandle",
    "DelayState",
    "DelayStatus",
    "validate_delay_params",
    "validate_duration",
    "validate_range",
]

from adelay.core.config import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_PROGRESS_INTERVAL_MS,
    DelayConfig,
)
from adelay.core.handle import AsyncDelayHandle, DelayHandle
from adelay.core.state import DelayState, DelayStatus
from adelay.core.validation import validate_delay_params, validate_duration, validate_range
