"""Wall-clock timing of code blocks and calls."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from sglib.logger import get_logger


@dataclass(frozen=True)
class TimerSpec:
    """What to do with a measured duration."""

    is_log: bool = True
    is_assert: bool = False
    assert_seconds: float = 1.0


class ScopePerformanceTimer:
    """Context manager measuring the time from construction to exit.

    On exit the duration is logged in milliseconds when spec.is_log is set,
    and an AssertionError is raised when spec.is_assert is set and the
    duration reached spec.assert_seconds.
    """

    def __init__(self, spec: Optional[TimerSpec] = None) -> None:
        self.spec = spec if spec is not None else TimerSpec()
        self.elapsed: Optional[float] = None
        self._start = time.perf_counter()

    def __enter__(self) -> "ScopePerformanceTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        seconds = time.perf_counter() - self._start
        self.elapsed = seconds
        if self.spec.is_log:
            get_logger().info("elapsed ms: %s", seconds * 1000.0)
        if self.spec.is_assert and exc_type is None and not seconds < self.spec.assert_seconds:
            raise AssertionError(
                f"took {seconds:.6f} s, limit is {self.spec.assert_seconds} s"
            )


def invoke_with_timer(
    spec: Optional[TimerSpec], function: Callable[..., Any], *args: Any, **kwargs: Any
) -> Any:
    """Call function with the given arguments under a timer and return its result."""
    with ScopePerformanceTimer(spec):
        return function(*args, **kwargs)