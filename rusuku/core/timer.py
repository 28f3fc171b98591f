# rusuku/core/timer.py
# Start/pause/resume timer state machine driving the dashboard header

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from .verbose import vlog_timer_transition

Clock = Callable[[], float]


# idle & paused behave the same, so both are a stopped state holding the accrued seconds
@dataclass(frozen=True)
class Stopped:
    accumulated: float = 0.0


@dataclass(frozen=True)
class Running:
    accumulated: float
    started_at: float


TimerState = Stopped | Running


# * Elapsed-time tracker that excludes paused intervals
class Timer:
    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._state: TimerState = Stopped()

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def running(self) -> bool:
        return isinstance(self._state, Running)

    @property
    def started_at(self) -> float | None:
        if isinstance(self._state, Running):
            return self._state.started_at
        return None

    @property
    def accumulated(self) -> float:
        return self._state.accumulated

    # begin accumulating; a running timer keeps its original started_at
    def start(self) -> None:
        if isinstance(self._state, Running):
            return
        self._state = Running(self._state.accumulated, self._clock())
        vlog_timer_transition("started", self._state.accumulated)

    # same transition as start(), bound to a different key
    def resume(self) -> None:
        if isinstance(self._state, Running):
            return
        self._state = Running(self._state.accumulated, self._clock())
        vlog_timer_transition("resumed", self._state.accumulated)

    # fold the current run segment into the accumulated total
    def pause(self) -> None:
        if isinstance(self._state, Stopped):
            return
        segment = self._clock() - self._state.started_at
        self._state = Stopped(self._state.accumulated + segment)
        vlog_timer_transition("paused", self._state.accumulated)

    # get elapsed seconds (excluding paused time)
    def elapsed(self) -> float:
        if isinstance(self._state, Running):
            return self._state.accumulated + (self._clock() - self._state.started_at)
        return self._state.accumulated
