"""The simulation clock: each tick advances time by ten minutes."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable, Iterable, Sequence

from spycity.simulation import Clock, SimulationMemory

MINUTES_PER_TURN = 10
LAST_TURN = 2015
TIME_IS_UP = 3


def _send_alarm(pid: int) -> None:
    os.kill(pid, signal.SIGALRM)


def has_simulation_ended(memory: SimulationMemory) -> bool:
    """Tell whether the simulation is over; running out of turns ends it."""
    if memory.simulation_has_ended:
        return True
    if memory.timer.turns > LAST_TURN:
        memory.simulation_has_ended = TIME_IS_UP
        return True
    return False


class Timer:
    """Advances the shared clock at a fixed pace and wakes the other processes."""

    def __init__(
        self,
        memory: SimulationMemory,
        interval: float,
        pids: Iterable[int] = (),
        signaller: Callable[[int], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.memory = memory
        self.interval = interval
        self.pids = list(pids)
        self._signaller = signaller if signaller is not None else _send_alarm
        self._sleep = sleep
        self.reset()

    @property
    def period(self) -> float:
        """Seconds between ticks: whole seconds from one second up."""
        return float(int(self.interval)) if self.interval >= 1.0 else self.interval

    def reset(self) -> None:
        """Set the shared clock back to zero."""
        self.memory.timer = Clock()

    def tick(self) -> None:
        """Advance one turn and notify every process but the first."""
        clock = self.memory.timer
        clock.turns += 1
        clock.minutes += MINUTES_PER_TURN
        if clock.minutes >= 60:
            clock.minutes = 0
            clock.hours += 1
            if clock.hours >= 24:
                clock.hours = 0
                clock.days += 1
        self.memory.memory_has_changed = True
        for pid in self.pids[1:]:
            self._signaller(pid)

    def run(self) -> None:
        """Tick at the configured pace until the simulation ends."""
        while not has_simulation_ended(self.memory):
            self._sleep(self.period)
            self.tick()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the clock: ``timer INTERVAL PID [PID ...]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 1
    try:
        interval = float(args[0])
        pids = [int(pid) for pid in args[1:]]
    except ValueError:
        return 1
    timer = Timer(SimulationMemory(), interval, pids)
    timer.run()
    return 0