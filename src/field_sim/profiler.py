# MIT License (see LICENSE)
"""
Lightweight timing of frame phases.

The scene wraps its dynamics step and each overlay computation in named
sections when a Profiler is attached, so hosts can see where a frame goes.

Example:
    profiler = Profiler()
    scene = Scene(profiler=profiler)
    scene.step()
    print(profiler.stats.summary()["dynamics"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) per section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'mean_ms', 'max_ms'}.
        """
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * (sum(times) / len(times)),
                "max_ms": 1e3 * max(times),
            }
            for name, times in self.samples.items()
        }

    def clear(self) -> None:
        self.samples.clear()


class Profiler:
    """Collects wall-clock time of named code sections."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`, even if it raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
