r"""Shared helpers for delay tests."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

# Timer facilities may fire marginally before the requested time
TIMER_TOLERANCE_MS = 2.0


@dataclass
class ProgressRecorder:
    """Thread-safe progress callback recording every report.

    Attributes:
        reports: The recorded ``(elapsed_ms, remaining_ms, progress)``
            tuples, in call order.
    """

    reports: list[tuple[float, float, float]] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __call__(self, elapsed_ms: float, remaining_ms: float, progress: float) -> None:
        with self._lock:
            self.reports.append((elapsed_ms, remaining_ms, progress))

    @property
    def count(self) -> int:
        with self._lock:
            return len(self.reports)


def assert_monotonic_reports(reports: list[tuple[float, float, float]]) -> None:
    """Assert that elapsed and progress never decrease and stay in
    range."""
    elapsed_values = [elapsed for elapsed, _, _ in reports]
    progress_values = [progress for _, _, progress in reports]
    assert elapsed_values == sorted(elapsed_values)
    assert progress_values == sorted(progress_values)
    for _, remaining, progress in reports:
        assert remaining >= 0.0
        assert 0.0 <= progress <= 100.0
