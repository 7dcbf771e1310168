"""
core/driver.py — Variable-timestep game cycle

Measures wall-clock time between invocations and hands it, unscaled,
to one update and one render call:

    cycle = GameCycle(update=scene_update, render=scene_draw)
    cycle.start()
    while running:
        wait_for_next_frame()      # host primitive, e.g. Clock.tick()
        cycle.cycle()

There is no fixed step and no accumulator.  Large gaps (a stalled or
backgrounded window) pass straight through unless ``max_dt`` > 0.
"""

from __future__ import annotations
import time
from typing import Callable


class GameCycle:
    def __init__(self, update: Callable[[float], object],
                 render: Callable[[], object],
                 now: Callable[[], float] = time.perf_counter,
                 max_dt: float | None = None):
        self._update = update
        self._render = render
        self._now = now
        self.max_dt = max_dt or 0.0
        self.previous: float | None = None
        self.frames = 0
        self.last_dt = 0.0

    def start(self) -> None:
        """Stamp the reference time.  The first cycle measures from here."""
        self.previous = self._now()
        if self.max_dt > 0:
            print(f"[DRIVER] dt clamp on: max {self.max_dt:.4f}s")
        else:
            print("[DRIVER] dt unclamped")

    def measure(self) -> float:
        now = self._now()
        if self.previous is None:
            self.previous = now
        dt = now - self.previous
        self.previous = now
        if self.max_dt > 0 and dt > self.max_dt:
            dt = self.max_dt
        return dt

    def cycle(self) -> float:
        """Run one update + render pass.  Returns the dt that was used."""
        dt = self.measure()
        self.last_dt = dt
        self._update(dt)
        self._render()
        self.frames += 1
        return dt
