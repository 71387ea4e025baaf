"""Clock-driven timers that fire callbacks after a delay."""

from __future__ import annotations

import time
from typing import Callable, Iterable

Clock = Callable[[], float]


class TimerManager:
    """Keeps the registered timers and fires them on each tick."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock or time.monotonic
        self._timers: dict[Timer, None] = {}

    def register(self, timer: Timer) -> None:
        self._timers[timer] = None

    def unregister(self, timer: Timer) -> None:
        self._timers.pop(timer, None)

    def tick(self) -> int:
        """Run every registered timer once; return how many fired."""
        return sum(1 for timer in list(self._timers) if timer.execute())

    def __contains__(self, timer: object) -> bool:
        return timer in self._timers

    def __len__(self) -> int:
        return len(self._timers)

    def __iter__(self):
        return iter(list(self._timers))


class Timer:
    """A callback run after ``delay`` seconds, once or repeatedly."""

    def __init__(self, manager: TimerManager | None = None, clock: Clock | None = None) -> None:
        self.manager = manager
        if clock is None:
            clock = manager.clock if manager is not None else time.monotonic
        self._clock = clock
        self._callback: Callable[[], object] | None = None
        self.repeat = False
        self.running = True
        self.delay = 0.0
        self._last_time = clock()
        self._stop_time = self._last_time

    def bind(
        self,
        delay: float,
        callback: Callable[[], object],
        repeat: bool = False,
        first_delay: float = -1.0,
    ) -> None:
        """Arm the timer.

        ``first_delay``, when not negative, is the time to the first call;
        later calls (for a repeating timer) come every ``delay`` seconds.
        """
        self._callback = callback
        self.delay = float(delay)
        self._last_time = self._clock()
        if first_delay >= 0:
            self._last_time -= int(1000 * (delay - first_delay)) / 1000
        self.repeat = repeat
        if self.manager is not None:
            self.manager.register(self)

    def execute(self) -> bool:
        """Fire the callback if it is due; return whether it fired."""
        if not (self.running and self.delay > 0 and self.elapsed() >= self.delay):
            return False
        if self._callback is not None:
            self._callback()
        if self.repeat:
            self._last_time = self._clock()
        else:
            self.delay = 0.0
        return True

    def elapsed(self) -> float:
        """Seconds since the timer last fired, was armed or reset."""
        return self._clock() - self._last_time

    def set_delay(self, time: float) -> None:
        self.delay = float(time)

    def reset(self) -> None:
        self._last_time = self._clock()

    def stop(self) -> None:
        self.running = False
        self._stop_time = self._clock()

    def resume(self) -> None:
        self.running = True
        self._last_time += self._clock() - self._stop_time

    def close(self) -> None:
        """Remove the timer from its manager."""
        if self.manager is not None:
            self.manager.unregister(self)

    def __enter__(self) -> Timer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class TimerHandler:
    """Owner of several timers, which are all removed when it closes."""

    def __init__(self) -> None:
        self._timers: dict[Timer, None] = {}

    def add_timer(self, timer: Timer) -> None:
        self._timers[timer] = None

    @property
    def timers(self) -> Iterable[Timer]:
        return tuple(self._timers)

    def close(self) -> None:
        for timer in self._timers:
            timer.close()