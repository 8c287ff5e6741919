# scheduler.py
"""
Cooperative timers polled from the main loop.

Timers are keyed by name and tied to a game state: `sync_timers` starts the
timer a state needs when it is entered and cancels it when the state is left,
so no tick or countdown step can fire after the state that owned it is gone.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .config import CFG
from .machine import GameState, Machine

TICK = "tick"
COUNTDOWN = "countdown"


@dataclass
class Timer:
    name: str
    period_ms: int
    next_due: int


class Scheduler:
    def __init__(self):
        self.timers: Dict[str, Timer] = {}

    def schedule(self, name: str, period_ms: int, now_ms: int) -> None:
        """(Re)start a timer; the first firing is one full period from now."""
        self.timers[name] = Timer(name, period_ms, now_ms + period_ms)

    def cancel(self, name: str) -> None:
        self.timers.pop(name, None)

    def active(self, name: str) -> bool:
        return name in self.timers

    def pop_due(self, now_ms: int) -> Optional[str]:
        """
        Return the earliest timer that is due at `now_ms`, or None.
        The timer is re-armed from `now_ms`, so a late poll fires it once
        instead of replaying every missed period.
        """
        due = [t for t in self.timers.values() if t.next_due <= now_ms]
        if not due:
            return None
        timer = min(due, key=lambda t: t.next_due)
        timer.next_due = now_ms + timer.period_ms
        return timer.name


def wanted_timers(machine: Machine) -> Dict[str, int]:
    """Which timers the machine's current state needs, with their periods."""
    if machine.state is GameState.PLAYING:
        return {TICK: machine.difficulty.interval_ms}
    if machine.state is GameState.COUNTDOWN:
        return {COUNTDOWN: CFG.countdown_ms}
    return {}


def sync_timers(scheduler: Scheduler, machine: Machine, now_ms: int) -> None:
    wanted = wanted_timers(machine)
    for name in list(scheduler.timers):
        if name not in wanted:
            scheduler.cancel(name)
    for name, period in wanted.items():
        timer = scheduler.timers.get(name)
        if timer is None or timer.period_ms != period:
            scheduler.schedule(name, period, now_ms)
