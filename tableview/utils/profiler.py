"""
Profiling utilities for pipeline passes.

A derive pass is short and synchronous, so a snapshot before and after the
block is enough: wall-clock time via perf_counter, process CPU and RSS via
psutil, and peak Python allocations via tracemalloc.

Usage:
    from tableview.utils.profiler import profile_block

    with profile_block("derive") as stats:
        view = pipeline.render(state)

    print(stats.duration_seconds, stats.peak_traced_bytes)
"""

from __future__ import annotations

import contextlib
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "duration_ms": round(self.duration_seconds * 1000, 3),
            "rss_bytes": self.rss_bytes,
            "peak_traced_bytes": self.peak_traced_bytes,
            "cpu_percent": round(self.cpu_percent, 1) if self.cpu_percent is not None else None,
            **self.extra,
        }


@contextlib.contextmanager
def profile_block(
    label: str, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    enable_tracemalloc : bool
        Whether to track Python-level allocations. tracemalloc is stopped again
        afterwards only if this block started it.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()
    if enable_tracemalloc:
        tracemalloc.reset_peak()

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.cpu_percent = process.cpu_percent(interval=None)
        stats.rss_bytes = process.memory_info().rss

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
