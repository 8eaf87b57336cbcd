"""
Timing Utilities for Latency Instrumentation

Provides a step timer used to log per-stage durations of a calculation
and to report the total processing time in result metadata.
"""

import logging
import time
from contextlib import contextmanager
from typing import Optional

logger = logging.getLogger(__name__)


def log_timing(node_name: str, action: str, duration_ms: Optional[float] = None):
    """Log a timing event in standard format."""
    if duration_ms is not None:
        logger.debug("[TIMING] %s: %s — duration=%.2fms", node_name, action, duration_ms)
    else:
        logger.debug("[TIMING] %s: %s", node_name, action)


class StepTimer:
    """
    Utility class for timing multiple steps within one calculation.

    Usage:
        timer = StepTimer("engine")
        with timer.step("accumulate"):
            accumulate()
        with timer.step("normalize"):
            normalize()
        timer.summary()
    """

    def __init__(self, node_name: str):
        self.node_name = node_name
        self.steps: dict[str, float] = {}
        self.start_time = time.perf_counter()

    @contextmanager
    def step(self, step_name: str):
        """Time a single step."""
        start = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            self.steps[step_name] = duration_ms
            log_timing(self.node_name, step_name, duration_ms)

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.start_time) * 1000

    def summary(self) -> float:
        """Log and return the total elapsed time."""
        total_ms = self.elapsed_ms()
        log_timing(self.node_name, "TOTAL", total_ms)
        return total_ms
