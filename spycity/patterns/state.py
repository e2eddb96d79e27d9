"""A citizen's daily routine modelled as a state machine."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from spycity.logger import log_info

MAX_STEPS = 2016


@dataclass(frozen=True, eq=False)
class State:
    """A step of the routine; its action picks the state that follows."""

    id: int
    name: str
    action: Callable[[DailyRoutine], State]


class DailyRoutine:
    """Moves a character through home, work, shopping and back home."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.resting_at_home = State(1, "Resting at home", DailyRoutine._rest_at_home)
        self.going_to_company = State(2, "Going to company", DailyRoutine._go_to_company)
        self.working = State(3, "Working :-(", DailyRoutine._work)
        self.going_to_supermarket = State(
            4, "Going to supermarket", DailyRoutine._go_to_supermarket
        )
        self.doing_some_shopping = State(
            5, "Doing some shopping", DailyRoutine._do_some_shopping
        )
        self.going_back_home = State(6, "Going back home", DailyRoutine._go_back_home)
        self.current_state: State = self.resting_at_home
        self.next_state: State | None = None

    def _announce(self) -> None:
        log_info("%s --- [state %d]", self.current_state.name, self.current_state.id)

    def _rest_at_home(self) -> State:
        self._announce()
        return self.going_to_company

    def _go_to_company(self) -> State:
        self._announce()
        return self.working

    def _work(self) -> State:
        self._announce()
        if self._rng.randrange(100) < 25:
            return self.going_to_supermarket
        return self.going_back_home

    def _go_to_supermarket(self) -> State:
        self._announce()
        return self.doing_some_shopping

    def _do_some_shopping(self) -> State:
        self._announce()
        return self.going_back_home

    def _go_back_home(self) -> State:
        self._announce()
        return self.resting_at_home

    def change_state(self, state: State) -> None:
        """Run ``state``'s action, make ``state`` current and remember what follows."""
        old_state = self.current_state
        following = state.action(self)
        self.current_state = state
        self.next_state = following
        log_info(
            ">> Changed from %d to %d (next is %d)",
            old_state.id,
            state.id,
            following.id,
        )

    def begin(self) -> None:
        """Start the day at home."""
        log_info("---- Beginning his day ----")
        self.change_state(self.resting_at_home)

    def step(self) -> None:
        """Move to the state chosen by the previous one."""
        if self.next_state is None:
            raise RuntimeError("the routine has not begun")
        log_info("----------- Step -----------")
        self.change_state(self.next_state)

    def end(self) -> None:
        """Finish the day at home."""
        log_info("------ Ending his day ------")
        self.change_state(self.resting_at_home)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one day of six steps."""
    routine = DailyRoutine()
    routine.begin()
    for _ in range(6):
        routine.step()
    routine.end()
    return 0