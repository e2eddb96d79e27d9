"""Setting up the city: mailbox, spies, citizens, officers and their workplaces."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from spycity.cell import CellType, City, Coordinate, default_city
from spycity.character_factory import (
    AttendingOfficer,
    Character,
    CounterIntelligenceOfficer,
    SourceAgent,
    new_case_officer,
    new_citizen,
    new_counter_intelligence_officer,
    new_spy_with_licence,
    new_spy_without_licence,
)
from spycity.logger import log_info

MAX_SOURCE_AGENT_COUNT = 3
MAX_CITIZEN_COUNT = 127
MAX_ATTENDING_OFFICER_COUNT = 1
MAX_COUNTER_INTELLIGENCE_OFFICER_COUNT = 1

NUMBER_OF_RESIDENTIAL_BUILDINGS = 11
NUMBER_OF_COMPANIES = 8
NUMBER_OF_SUPERMARKETS = 2
NUMBER_OF_CITY_HALLS = 1
MAX_NUMBER_OF_CHARACTERS_ON_COMPANY = 50

CITY_HALL_STAFF = 10
SUPERMARKET_STAFF = 3
COMPANY_STAFF = 5

SPY_MAX_DISTANCE_TO_MAILBOX = 4
COUNTER_OFFICER_TARGET_ID = 2


class Priority(IntEnum):
    """How valuable a piece of company information is."""

    CRUCIAL = 0
    STRONG = 1
    MEDIUM = 2
    LOW = 3
    VERY_LOW = 4


@dataclass(frozen=True)
class InformationDistribution:
    """Number of pieces of information a company holds, per priority."""

    crucial: int = 0
    strong: int = 0
    medium: int = 0
    low: int = 0
    very_low: int = 0

    def __getitem__(self, priority: Priority) -> int:
        return (self.crucial, self.strong, self.medium, self.low, self.very_low)[
            Priority(priority)
        ]


def information_distribution(number_of_employees: int) -> InformationDistribution:
    """Return the information a company of the given size holds."""
    if number_of_employees > 30:
        return InformationDistribution(2, 5, 12, 20, 30)
    if number_of_employees > 20:
        return InformationDistribution(0, 1, 12, 20, 30)
    if number_of_employees > 10:
        return InformationDistribution(0, 1, 7, 20, 30)
    return InformationDistribution(0, 1, 7, 11, 17)


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


@dataclass
class CompanyPriority:
    """A company, its staff size and the information it holds."""

    row: int
    column: int
    nb_of_employees: int
    cruciality: InformationDistribution


@dataclass
class Clock:
    """Simulated time: each turn lasts ten minutes."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    step: int = 0
    turns: int = 0


@dataclass
class Message:
    """A message in a mailbox."""

    msg_text: str
    priority: int = 0


@dataclass
class SimulationMemory:
    """Everything the simulation, the timer and the monitor share."""

    city_map: City = field(default_factory=default_city)
    mailbox_coordinate: Coordinate = Coordinate(row=-1, column=-1)
    source_agents: list[SourceAgent] = field(default_factory=list)
    citizens: list[Character] = field(default_factory=list)
    attending_officers: list[AttendingOfficer] = field(default_factory=list)
    counter_intelligence_officers: list[CounterIntelligenceOfficer] = field(
        default_factory=list
    )
    companies_priority: list[CompanyPriority] = field(default_factory=list)
    encrypted_messages: list[Message] = field(default_factory=list)
    decrypted_messages: list[Message] = field(default_factory=list)
    timer: Clock = field(default_factory=Clock)
    memory_has_changed: bool = False
    simulation_has_ended: int = 0

    @property
    def mailbox_size(self) -> int:
        """Number of encrypted messages in the mailbox."""
        return len(self.encrypted_messages)

    @property
    def decrypted_mailbox_size(self) -> int:
        """Number of messages deciphered by the enemy country."""
        return len(self.decrypted_messages)


class SpySimulation:
    """Populates a shared memory with the city and its inhabitants."""

    def __init__(
        self, memory: SimulationMemory | None = None, rng: random.Random | None = None
    ) -> None:
        self.memory = memory if memory is not None else SimulationMemory()
        self._rng = rng if rng is not None else random.Random()

    def _population(self, place: Coordinate) -> int:
        return self.memory.city_map.get_cell(place.column, place.row).nb_of_characters

    def _populate(self, place: Coordinate) -> None:
        self.memory.city_map.get_cell(place.column, place.row).nb_of_characters += 1

    def _city_hall(self) -> Coordinate:
        halls = self.memory.city_map.find_buildings(CellType.CITY_HALL, NUMBER_OF_CITY_HALLS)
        if not halls:
            raise LookupError("the city has no city hall")
        return halls[0]

    def residential_buildings(self) -> list[Coordinate]:
        """Return the coordinates of the residential buildings."""
        return self.memory.city_map.find_buildings(
            CellType.RESIDENTIAL_BUILDING, NUMBER_OF_RESIDENTIAL_BUILDINGS
        )

    def set_mailbox(self) -> Coordinate:
        """Hide the mailbox in a random residential building and return its place."""
        buildings = self.residential_buildings()
        if not buildings:
            raise LookupError("the city has no residential building")
        self.memory.mailbox_coordinate = self._rng.choice(buildings)
        return self.memory.mailbox_coordinate

    def residence_near_mailbox(self, max_distance: float) -> Coordinate:
        """Pick a random residence off the mailbox's row and column, within ``max_distance``."""
        mailbox = self.memory.mailbox_coordinate
        candidates = [
            home
            for home in self.residential_buildings()
            if home.row != mailbox.row
            and home.column != mailbox.column
            and euclidean_distance(home.column, home.row, mailbox.column, mailbox.row)
            <= max_distance
        ]
        if not candidates:
            raise LookupError(f"no residence within {max_distance} of the mailbox")
        return self._rng.choice(candidates)

    def low_populated_residence(self) -> Coordinate:
        """Return the least populated residence that does not hold the mailbox."""
        buildings = self.residential_buildings()
        if not buildings:
            raise LookupError("the city has no residential building")
        mailbox = self.memory.mailbox_coordinate
        return min(
            (home for home in buildings if home != mailbox),
            key=self._population,
            default=buildings[0],
        )

    def set_spies(self) -> None:
        """House the spies near the mailbox; only the first may kill."""
        agents = []
        for index in range(MAX_SOURCE_AGENT_COUNT):
            home = self.residence_near_mailbox(SPY_MAX_DISTANCE_TO_MAILBOX)
            make = new_spy_with_licence if index == 0 else new_spy_without_licence
            agents.append(make(home.row, home.column))
            self._populate(home)
        self.memory.source_agents = agents

    def set_citizens(self) -> None:
        """Spread the citizens over the least populated residences."""
        citizens = []
        for _ in range(MAX_CITIZEN_COUNT):
            home = self.low_populated_residence()
            citizens.append(new_citizen(home.row, home.column))
            self._populate(home)
        self.memory.citizens = citizens

    def set_attending_officers(self) -> None:
        """House the case officers and tell them where the mailbox is."""
        mailbox = self.memory.mailbox_coordinate
        officers = []
        for _ in range(MAX_ATTENDING_OFFICER_COUNT):
            home = self.low_populated_residence()
            officer = new_case_officer(home.row, home.column)
            officer.mailbox_row = mailbox.row
            officer.mailbox_column = mailbox.column
            self._populate(home)
            officers.append(officer)
        self.memory.attending_officers = officers

    def set_counter_intelligence_officers(self) -> None:
        """Place the counterintelligence officers at the city hall."""
        hall = self._city_hall()
        mailbox = self.memory.mailbox_coordinate
        officers = []
        for _ in range(MAX_COUNTER_INTELLIGENCE_OFFICER_COUNT):
            officer = new_counter_intelligence_officer(
                hall.row, hall.column, COUNTER_OFFICER_TARGET_ID
            )
            officer.city_hall_row = hall.row
            officer.city_hall_column = hall.column
            officer.mailbox_row = mailbox.row
            officer.mailbox_column = mailbox.column
            self._populate(hall)
            officers.append(officer)
        self.memory.counter_intelligence_officers = officers

    def _hire(self, place: Coordinate) -> None:
        unemployed = [
            citizen
            for citizen in self.memory.citizens
            if citizen.work_row == -1 and citizen.work_column == -1
        ]
        if not unemployed:
            raise ValueError("not enough citizens to staff the city")
        citizen = self._rng.choice(unemployed)
        citizen.work_row = place.row
        citizen.work_column = place.column

    def assign_work(self) -> None:
        """Give every citizen a workplace: city hall, supermarkets, then companies."""
        city = self.memory.city_map
        companies = city.find_buildings(CellType.COMPANY, NUMBER_OF_COMPANIES)
        supermarkets = city.find_buildings(CellType.SUPERMARKET, NUMBER_OF_SUPERMARKETS)
        if not companies or not supermarkets:
            raise LookupError("the city lacks companies or supermarkets")
        hall = self._city_hall()

        for _ in range(CITY_HALL_STAFF):
            self._hire(hall)
        for _ in range(NUMBER_OF_SUPERMARKETS * SUPERMARKET_STAFF):
            self._hire(self._rng.choice(supermarkets))
        for _ in range(NUMBER_OF_COMPANIES * COMPANY_STAFF):
            self._hire(self._rng.choice(companies))

        for citizen in self.memory.citizens:
            if citizen.work_row == -1 or citizen.work_column == -1:
                open_companies = [
                    company
                    for company in companies
                    if self._population(company) < MAX_NUMBER_OF_CHARACTERS_ON_COMPANY
                ]
                if not open_companies:
                    raise LookupError("every company is full")
                company = self._rng.choice(open_companies)
                citizen.work_row = company.row
                citizen.work_column = company.column

    def set_company_employees(self) -> None:
        """Count each company's staff and derive the information it holds."""
        companies = self.memory.city_map.find_buildings(CellType.COMPANY, NUMBER_OF_COMPANIES)
        priorities = []
        for company in companies:
            staff = sum(
                1
                for citizen in self.memory.citizens
                if citizen.work_row == company.row and citizen.work_column == company.column
            )
            priorities.append(
                CompanyPriority(
                    row=company.row,
                    column=company.column,
                    nb_of_employees=staff,
                    cruciality=information_distribution(staff),
                )
            )
        self.memory.companies_priority = priorities

    def setup(self) -> SimulationMemory:
        """Reset the memory and populate the whole city."""
        memory = self.memory
        memory.memory_has_changed = True
        memory.simulation_has_ended = 0
        memory.encrypted_messages.clear()
        memory.decrypted_messages.clear()
        memory.city_map = default_city()
        self.set_mailbox()
        self.set_spies()
        self.set_citizens()
        self.set_attending_officers()
        self.set_counter_intelligence_officers()
        self.assign_work()
        self.set_company_employees()
        return memory


def main(argv: Sequence[str] | None = None) -> int:
    """Build a populated city and print its map and a summary."""
    parser = argparse.ArgumentParser(description="Set up the spy simulation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    simulation = SpySimulation(rng=random.Random(args.seed))
    memory = simulation.setup()
    print(memory.city_map.render(), end="")
    mailbox = memory.mailbox_coordinate
    log_info("Mailbox hidden at (%d,%d)", mailbox.row, mailbox.column)
    log_info(
        "%d spies, %d citizens, %d case officers, %d counterintelligence officers",
        len(memory.source_agents),
        len(memory.citizens),
        len(memory.attending_officers),
        len(memory.counter_intelligence_officers),
    )
    return 0