import random

import pytest

from spycity.patterns.state import DailyRoutine, main


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def test_begin_rests_at_home():
    routine = DailyRoutine(rng=FixedRng(0))
    routine.begin()
    assert routine.current_state is routine.resting_at_home
    assert routine.next_state is routine.going_to_company


def test_step_before_begin_raises():
    with pytest.raises(RuntimeError):
        DailyRoutine().step()


def test_day_with_shopping():
    routine = DailyRoutine(rng=FixedRng(0))
    routine.begin()
    ids = []
    for _ in range(6):
        routine.step()
        ids.append(routine.current_state.id)
    assert ids == [2, 3, 4, 5, 6, 1]


def test_day_without_shopping():
    routine = DailyRoutine(rng=FixedRng(99))
    routine.begin()
    ids = []
    for _ in range(4):
        routine.step()
        ids.append(routine.current_state.id)
    assert ids == [2, 3, 6, 1]


def test_work_threshold_is_twenty_five():
    routine = DailyRoutine(rng=FixedRng(25))
    routine.begin()
    routine.step()
    routine.step()
    assert routine.next_state is routine.going_back_home


def test_end_returns_home():
    routine = DailyRoutine(rng=random.Random(3))
    routine.begin()
    for _ in range(3):
        routine.step()
    routine.end()
    assert routine.current_state is routine.resting_at_home
    assert routine.next_state is routine.going_to_company


def test_change_state_logs_transition(capsys):
    routine = DailyRoutine(rng=FixedRng(0))
    routine.begin()
    routine.step()
    out = capsys.readouterr().out
    assert ">> Changed from 1 to 2 (next is 3)" in out


def test_main_runs_a_day(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "---- Beginning his day ----" in out
    assert "------ Ending his day ------" in out