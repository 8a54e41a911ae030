"""Trailing-edge debounce for repeated count requests.

Each call replaces the pending one and restarts the timer; the target runs
once, with the latest call's arguments, after ``delay`` seconds of quiet.
"""

import threading
from collections.abc import Callable
from typing import Any


class Coalescer:
    """Collapse rapid calls into the last one.

    Arguments are captured when the coalescer is called, never read back
    from shared state when the timer fires.
    """

    def __init__(self, target: Callable[..., Any], delay: float) -> None:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self._target = target
        self._delay = delay
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple, dict] | None = None
        self._generation = 0

    @classmethod
    def from_milliseconds(cls, target: Callable[..., Any], delay_ms: int) -> "Coalescer":
        return cls(target, delay_ms / 1000)

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            self._generation += 1
            timer = threading.Timer(self._delay, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> bool:
        """Drop the pending call. Returns whether there was one."""
        with self._lock:
            return self._take() is not None

    def flush(self) -> bool:
        """Run the pending call now, on this thread. Returns whether one ran."""
        with self._lock:
            call = self._take()
        if call is None:
            return False
        args, kwargs = call
        self._target(*args, **kwargs)
        return True

    def _take(self) -> tuple[tuple, dict] | None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        call, self._pending = self._pending, None
        return call

    def _fire(self, generation: int) -> None:
        with self._lock:
            # Superseded while already waking up
            if generation != self._generation:
                return
            call = self._take()
        if call is None:
            return
        args, kwargs = call
        self._target(*args, **kwargs)
