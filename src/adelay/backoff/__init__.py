r"""Backoff strategies and utilities for delay durations.

This package provides the backoff calculator used by every delay, and
an exponential backoff strategy object for callers that drive their
own retry loop.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ExponentialBackoff",
    "compute_delay",
]

from adelay.backoff.base import BaseBackoffStrategy
from adelay.backoff.calculator import compute_delay
from adelay.backoff.exponential import ExponentialBackoff
