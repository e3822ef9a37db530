"""Frame timing: frame durations, FPS measurement and fixed-step update checks.

Durations are given and returned as float seconds; internally they are kept
as integer nanoseconds so that sums and the fixed-step residual do not drift.
"""

from __future__ import annotations

import time
from typing import Callable

TIME_LOG_FRAMES = 200
"""How many frames are kept for averaging."""

_INITIAL_DT_NS = 16_000_000
_NS_PER_SECOND = 1_000_000_000


def _to_seconds(nanos: int) -> float:
    return nanos / _NS_PER_SECOND


def _fps_as_nanos(fps: int) -> int:
    if fps <= 0:
        raise ValueError(f"target fps must be positive, got {fps}")
    return round(_NS_PER_SECOND / fps)


def fps_as_duration(fps: int) -> float:
    """How long each frame should last, in seconds, to run at ``fps``."""
    return _to_seconds(_fps_as_nanos(fps))


class _LogBuffer:
    """Holds the last N values pushed, overwriting the oldest round-robin."""

    def __init__(self, size: int, init_val: int) -> None:
        self._head = 0
        self.size = size
        self._contents = [init_val] * size
        # Starts at one so averaging never divides by zero.
        self.samples = 1

    def push(self, item: int) -> None:
        self._head = (self._head + 1) % len(self._contents)
        self._contents[self._head] = item
        self.size = min(self.size + 1, len(self._contents))
        self.samples += 1

    def contents(self) -> list[int]:
        """Stored values in no particular order; unfilled slots are left out."""
        if self.samples > self.size:
            return list(self._contents)
        return self._contents[: self.samples]

    def latest(self) -> int:
        return self._contents[self._head]


class TimeContext:
    """Tracks frame durations, the frame count and the fixed-step residual."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        """``clock`` returns a monotonic time in integer nanoseconds."""
        self._clock = clock
        now = clock()
        self._init_instant = now
        self._last_instant = now
        self._frame_durations = _LogBuffer(TIME_LOG_FRAMES, _INITIAL_DT_NS)
        self._residual_update_dt = 0
        self._frame_count = 0

    def delta(self) -> float:
        """Length of the last frame, in seconds."""
        return _to_seconds(self._frame_durations.latest())

    def _average_delta_ns(self) -> int:
        buffer = self._frame_durations
        total = sum(buffer.contents())
        if buffer.samples > buffer.size:
            return total // buffer.size
        return total // buffer.samples

    def average_delta(self) -> float:
        """Average frame length over the last 200 frames, in seconds."""
        return _to_seconds(self._average_delta_ns())

    def fps(self) -> float:
        """Frames per second, averaged over the last 200 frames."""
        average = self._average_delta_ns()
        if average == 0:
            return float("inf")
        return _NS_PER_SECOND / average

    def ticks(self) -> int:
        """How many times :meth:`tick` has been called."""
        return self._frame_count

    def time_since_start(self) -> float:
        """Seconds since this context was created."""
        return _to_seconds(self._clock() - self._init_instant)

    def check_update_time(self, target_fps: int) -> bool:
        """Consume one fixed update step if enough time has built up.

        Returns True and subtracts one step of ``1 / target_fps`` seconds
        from the residual when the residual exceeds that step.
        """
        target_dt = _fps_as_nanos(target_fps)
        if self._residual_update_dt > target_dt:
            self._residual_update_dt -= target_dt
            return True
        return False

    def remaining_update_time(self) -> float:
        """Time not yet consumed by :meth:`check_update_time`, in seconds."""
        return _to_seconds(self._residual_update_dt)

    def tick(self) -> None:
        """Record that another frame has taken place."""
        now = self._clock()
        since_last = now - self._last_instant
        self._frame_durations.push(since_last)
        self._last_instant = now
        self._frame_count += 1
        self._residual_update_dt += since_last


def sleep(duration: float) -> None:
    """Pause the current thread for ``duration`` seconds."""
    time.sleep(duration)


def yield_now() -> None:
    """Give the rest of the current timeslice back to the operating system."""
    time.sleep(0)