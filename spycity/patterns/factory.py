"""A factory producing the different kinds of people in the city."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from spycity.logger import log_info


class Role(Enum):
    """The kind of person a factory produces."""

    CITIZEN = "citizen"
    SPY = "spy"
    CASE_OFFICER = "case officer"
    COUNTERINTELLIGENCE_OFFICER = "counterintelligence_officer"


@dataclass
class Person:
    """A person whose behaviour depends on their role."""

    role: Role

    def operation(self) -> str:
        """Carry out the person's operation and describe it."""
        return f">> Operation of a {self.role.value}..."


def new_citizen() -> Person:
    """Create a citizen."""
    return Person(Role.CITIZEN)


def new_spy() -> Person:
    """Create a spy."""
    return Person(Role.SPY)


def new_case_officer() -> Person:
    """Create a case officer."""
    return Person(Role.CASE_OFFICER)


def new_counterintelligence_officer() -> Person:
    """Create a counterintelligence officer."""
    return Person(Role.COUNTERINTELLIGENCE_OFFICER)


@dataclass
class PersonFactory:
    """Produces people with the factory method it was given."""

    factory_method: Callable[[], Person]

    def create(self) -> Person:
        """Return a new person from the factory method."""
        return self.factory_method()


_DEMO = (
    ("citizens", "citizen", new_citizen),
    ("spies", "spy", new_spy),
    ("case officer", "case officer", new_case_officer),
    (
        "counterintelligence officers",
        "counterintelligence officer",
        new_counterintelligence_officer,
    ),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Build one factory per role and let each product work."""
    for plural, singular, method in _DEMO:
        log_info("Create a new factory of %s.", plural)
        factory = PersonFactory(method)
        log_info("Create a new %s.", singular)
        person = factory.create()
        log_info("Work with this %s...", singular)
        person.operation()
    return 0