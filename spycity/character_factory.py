"""Constructors for the people of the simulation."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

EMPTY = ""

_ids = itertools.count(1)


def reset_ids() -> None:
    """Restart identifier numbering so that the next character gets id 1."""
    global _ids
    _ids = itertools.count(1)


@dataclass
class Character:
    """A person on the map, with a home and, once assigned, a workplace."""

    id: int
    row: int
    column: int
    health: int = 10
    home_row: int = -1
    home_column: int = -1
    work_row: int = -1
    work_column: int = -1


@dataclass
class SourceAgent:
    """A spy of the enemy network."""

    character: Character
    has_licence_to_kill: bool = False
    nb_of_stolen_companies: int = 0
    is_attacked: bool = False
    targeted_companies_count: int = 0
    stolen_message: str = EMPTY


@dataclass
class AttendingOfficer:
    """The case officer who collects the spies' messages."""

    character: Character
    is_attacked: bool = False
    have_messages: bool = False
    mailbox_row: int = -1
    mailbox_column: int = -1


@dataclass
class CounterIntelligenceOfficer:
    """The officer hunting the spy network from the city hall."""

    character: Character
    targeted_character_id: int
    city_hall_row: int = -1
    city_hall_column: int = -1
    mailbox_row: int = -1
    mailbox_column: int = -1


def _basic_character(row: int, column: int) -> Character:
    return Character(
        id=next(_ids),
        row=row,
        column=column,
        home_row=row,
        home_column=column,
    )


def new_citizen(row: int, column: int) -> Character:
    """Create a citizen living at (row, column)."""
    return _basic_character(row, column)


def new_spy_with_licence(row: int, column: int) -> SourceAgent:
    """Create a spy who is allowed to kill."""
    return SourceAgent(character=_basic_character(row, column), has_licence_to_kill=True)


def new_spy_without_licence(row: int, column: int) -> SourceAgent:
    """Create a spy without a licence to kill."""
    return SourceAgent(character=_basic_character(row, column), has_licence_to_kill=False)


def new_case_officer(row: int, column: int) -> AttendingOfficer:
    """Create a case officer living at (row, column)."""
    return AttendingOfficer(character=_basic_character(row, column))


def new_counter_intelligence_officer(
    row: int, column: int, target_id: int
) -> CounterIntelligenceOfficer:
    """Create a counterintelligence officer starting at (row, column) and hunting ``target_id``."""
    return CounterIntelligenceOfficer(
        character=_basic_character(row, column), targeted_character_id=target_id
    )