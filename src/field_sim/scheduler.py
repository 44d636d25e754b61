# MIT License (see LICENSE)
"""
Single-threaded tick source driving the dynamics loop.

A TickSource calls its registered callbacks once per `interval` of elapsed
time. The host either feeds it elapsed time from its own frame loop
(advance) or lets it run a blocking loop (run). Pausing is a flag checked
before every tick; cancelling is deregistering the callback. Every tick is a
bounded synchronous computation, so there is nothing in flight to cancel.

Example:
    ticker = TickSource(interval=0.016)
    handle = ticker.register(scene.step)
    ticker.run(max_ticks=600)
    ticker.deregister(handle)
"""
from __future__ import annotations
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

# Matches a ~60 Hz display refresh.
DEFAULT_INTERVAL: float = 0.016

TickCallback = Callable[[], object]


class TickSource:
    """
    Fixed-cadence tick driver.

    Attributes:
        interval: Seconds of elapsed time per tick.
        paused: While True, elapsed time is discarded and no tick fires.
        ticks: Number of ticks fired so far.
    """

    def __init__(self, interval: float = DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = float(interval)
        self.paused = False
        self.ticks = 0
        self._callbacks: dict[int, TickCallback] = {}
        self._next_handle = 1
        self._accum = 0.0

    def register(self, callback: TickCallback) -> int:
        """
        Register a callback to run on every tick.

        Returns:
            Handle for deregister().
        """
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        logger.debug("Registered tick callback %d", handle)
        return handle

    def deregister(self, handle: int) -> None:
        """Stop calling a callback. Unknown handles are ignored."""
        if self._callbacks.pop(handle, None) is not None:
            logger.debug("Deregistered tick callback %d", handle)

    @property
    def active(self) -> bool:
        """True while at least one callback is registered."""
        return bool(self._callbacks)

    def tick(self) -> bool:
        """
        Fire one tick now, unless paused.

        Callbacks run in registration order. A callback may deregister
        itself or others; removals take effect from the next tick.

        Returns:
            True if the tick fired.
        """
        if self.paused:
            return False
        for callback in list(self._callbacks.values()):
            callback()
        self.ticks += 1
        return True

    def advance(self, elapsed: float) -> int:
        """
        Account for elapsed wall time and fire the ticks that are due.

        Args:
            elapsed: Seconds since the previous call.

        Returns:
            Number of ticks fired.
        """
        if self.paused:
            self._accum = 0.0
            return 0
        self._accum += elapsed
        fired = 0
        while self._accum >= self.interval:
            self._accum -= self.interval
            if not self.tick():
                break
            fired += 1
        return fired

    def run(
        self,
        max_ticks: int,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.perf_counter,
    ) -> int:
        """
        Blocking loop firing up to max_ticks ticks, one per interval.

        The time spent in the callbacks is subtracted from each sleep, so a
        tick that overruns the interval is followed by no sleep at all.
        Stops early once every callback has been deregistered or the source
        is paused.

        Args:
            max_ticks: Upper bound on ticks fired by this call.
            sleep: Sleep function; tests pass a no-op.
            clock: Monotonic clock in seconds.

        Returns:
            Number of ticks fired.
        """
        fired = 0
        while fired < max_ticks and self.active and not self.paused:
            started = clock()
            self.tick()
            fired += 1
            sleep(max(0.0, self.interval - (clock() - started)))
        logger.debug("Tick loop stopped after %d ticks", fired)
        return fired
