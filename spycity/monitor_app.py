"""Interactive terminal monitor: draws the panels and follows the shared memory."""

from __future__ import annotations

import argparse
import curses
import random
import signal
import sys
from collections.abc import Sequence
from typing import Any

from spycity.monitor import Monitor
from spycity.simulation import SimulationMemory, SpySimulation

MIN_ROWS = 45
MIN_COLUMNS = 140
ESCAPE = 27
POLL_MS = 100
USER_QUIT = 1

_QUIT_KEYS = frozenset({ord("q"), ord("Q"), ESCAPE})


class TerminalTooSmallError(RuntimeError):
    """Raised when the terminal cannot hold the monitor."""


def is_terminal_size_large_enough(rows: int, cols: int) -> bool:
    """Tell whether a terminal of ``rows`` x ``cols`` can hold the monitor."""
    return rows >= MIN_ROWS and cols >= MIN_COLUMNS


def is_quit_key(key: int) -> bool:
    """Tell whether ``key`` asks the monitor to quit ('q', 'Q' or Esc)."""
    return key in _QUIT_KEYS


def _hide_cursor() -> int | None:
    try:
        return curses.curs_set(0)
    except curses.error:
        return None


def _restore_cursor(previous: int | None) -> None:
    if previous is None:
        return
    try:
        curses.curs_set(previous)
    except curses.error:
        pass


def _start_colors() -> bool:
    try:
        if not curses.has_colors():
            return False
        curses.start_color()
    except curses.error:
        return False
    return True


def run(stdscr: Any, memory: SimulationMemory) -> None:
    """Show the monitor in ``stdscr`` until the user quits or is interrupted.

    Quitting with a key marks the simulation as ended in ``memory``.
    """
    rows, cols = stdscr.getmaxyx()
    if not is_terminal_size_large_enough(rows, cols):
        raise TerminalTooSmallError(
            f"Minimal terminal dimensions: {MIN_ROWS} rows and {MIN_COLUMNS} columns!"
        )

    stdscr.clear()
    stdscr.keypad(True)
    stdscr.timeout(POLL_MS)
    previous_cursor = _hide_cursor()
    try:
        monitor = Monitor(stdscr, memory, rows, cols, use_colors=_start_colors())
        monitor.draw()
        while True:
            key = stdscr.getch()
            if is_quit_key(key):
                memory.simulation_has_ended = USER_QUIT
                return
            if memory.memory_has_changed:
                monitor.update()
                memory.memory_has_changed = False
    except KeyboardInterrupt:
        return
    finally:
        _restore_cursor(previous_cursor)


def _interrupt(signum: int, frame: object) -> None:
    raise KeyboardInterrupt


def main(argv: Sequence[str] | None = None) -> int:
    """Populate a city and watch it in the terminal."""
    parser = argparse.ArgumentParser(description="Monitor the spy simulation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    memory = SpySimulation(rng=random.Random(args.seed)).setup()

    signal.signal(signal.SIGTERM, _interrupt)
    if hasattr(signal, "SIGTSTP"):
        signal.signal(signal.SIGTSTP, signal.SIG_IGN)

    try:
        curses.wrapper(run, memory)
    except TerminalTooSmallError as error:
        print(error, file=sys.stderr)
        return 1
    return 0