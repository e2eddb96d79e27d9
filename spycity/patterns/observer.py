"""A subject holding a fixed number of observer slots and notifying them of events."""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import IntEnum

from spycity.logger import log_info

MAX_OBSERVERS = 3


class Event(IntEnum):
    """Events the subject can broadcast."""

    EVENT_1 = 1
    EVENT_2 = 2
    EVENT_3 = 3


class Subject:
    """Shared state that notifies attached observers of events."""

    def __init__(self) -> None:
        self._slots: list[Observer | None] = [None] * MAX_OBSERVERS

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The attached observers, in slot order."""
        return tuple(obs for obs in self._slots if obs is not None)

    def attach(self, observer: Observer) -> None:
        """Put ``observer`` in the first free slot; ignored when all slots are taken."""
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = observer
                log_info("Shared memory attaching observer %d", observer.pid)
                return

    def detach(self, observer: Observer) -> None:
        """Free the slot holding ``observer``; unknown observers are ignored."""
        for index, slot in enumerate(self._slots):
            if slot is observer:
                log_info("Memory detaching observer %d", observer.pid)
                self._slots[index] = None
                return

    def notify(self, event: Event) -> None:
        """Pass ``event`` to every attached observer."""
        log_info("Memory notifies event %u", int(event))
        for observer in self.observers:
            observer.update(event)


class Observer:
    """A process interested in one kind of event."""

    def __init__(self, pid: int, subject: Subject, event: Event) -> None:
        self.pid = pid
        self.event = event
        self.received: list[Event] = []
        subject.attach(self)

    def update(self, event: Event) -> bool:
        """React to ``event`` if it is the awaited one; return whether it was."""
        if event != self.event:
            return False
        self.received.append(event)
        log_info("Observer %d has received the update for event %d", self.pid, int(event))
        return True


def _broadcast(subject: Subject) -> None:
    for event in (Event.EVENT_1, Event.EVENT_1, Event.EVENT_2, Event.EVENT_3, Event.EVENT_2):
        subject.notify(event)


def main(argv: Sequence[str] | None = None) -> int:
    """Attach three observers, then detach them one by one while broadcasting."""
    subject = Subject()
    pid = os.getpid()
    first = Observer(pid, subject, Event.EVENT_1)
    second = Observer(pid + 1, subject, Event.EVENT_2)
    third = Observer(pid + 2, subject, Event.EVENT_3)

    _broadcast(subject)

    log_info("Only subprocesses 2 and 3 will be notified!")
    subject.detach(first)
    _broadcast(subject)

    log_info("No more observers to be notified!")
    subject.detach(second)
    subject.detach(third)
    _broadcast(subject)
    return 0