"""Terminal display of the city map, the characters and the mailboxes."""

from __future__ import annotations

import curses
from collections.abc import Iterable, Sequence
from typing import Any

from spycity.cell import CellType
from spycity.character_factory import EMPTY, Character
from spycity.simulation import Clock, SimulationMemory

TITLE = "LICENSE TO KILL (v. 0.2)"
CITY_TITLE = "CITY MAP AND GENERAL INFORMATION"
CHARACTERS_TITLE = "CHARACTERS"
MAILBOX_TITLE = "MAILBOX CONTENT"
ENEMY_TITLE = "ENEMY COUNTRY MONITOR"

FAKE_MESSAGE = "fake"
NB_OF_INFORMATION_FIELDS = 8

_GENERAL_ROW = 20
_END_ROW = 25
_LEGEND_ROW = 6
_LEGEND_COLUMN = 2

_CELL_GLYPHS = {
    CellType.SUPERMARKET: " s ",
    CellType.RESIDENTIAL_BUILDING: " r ",
    CellType.COMPANY: " c ",
    CellType.CITY_HALL: " * ",
}
_WASTELAND_GLYPH = " . "

_CELL_COLOR_PAIRS = {
    CellType.RESIDENTIAL_BUILDING: 5,
    CellType.WASTELAND: 3,
    CellType.COMPANY: 2,
    CellType.SUPERMARKET: 4,
    CellType.CITY_HALL: 6,
}

_LEGEND = (
    (CellType.CITY_HALL, "City Hall"),
    (CellType.RESIDENTIAL_BUILDING, "Residential building"),
    (CellType.COMPANY, "Company"),
    (CellType.SUPERMARKET, "Supermarket"),
    (CellType.WASTELAND, "Wasteland"),
)

_END_MESSAGES = {
    1: "Spies have won! The spy network has fled!",
    2: "Counter officer has discovered the mailbox!",
    3: "Spies have won! Counter officer did not find the mailbox!",
}


def city_glyph(cell_type: CellType) -> str:
    """Return the three-character map symbol of a cell type."""
    return _CELL_GLYPHS.get(cell_type, _WASTELAND_GLYPH)


def format_clock(clock: Clock) -> str:
    """Return the time of day as ``HH h MM``."""
    return f"{clock.hours:02d} h {clock.minutes:02d}"


def end_message(code: int) -> str | None:
    """Return the sentence announcing how the simulation ended, if it did."""
    return _END_MESSAGES.get(code)


def count_citizens(citizens: Iterable[Character]) -> tuple[int, int, int]:
    """Return how many citizens are at home, at work and walking."""
    at_home = at_work = walking = 0
    for citizen in citizens:
        if citizen.row == citizen.home_row and citizen.column == citizen.home_column:
            at_home += 1
        elif citizen.row == citizen.work_row and citizen.column == citizen.work_column:
            at_work += 1
        else:
            walking += 1
    return at_home, at_work, walking


def citizen_lines(memory: SimulationMemory) -> list[str]:
    """Lines of the citizens summary block."""
    at_home, at_work, walking = count_citizens(memory.citizens)
    return [
        "Citizens",
        f"  At home: {at_home:03d}",
        f"  At work: {at_work:03d}",
        f"  Walking: {walking:03d}",
    ]


def _health_line(health: int, mark_death: bool) -> str:
    if mark_death and health <= 0:
        return "  Health: Died (looser)  "
    return f"  Health: {health}"


def spy_lines(memory: SimulationMemory, number: int) -> list[str]:
    """Lines of the information block of spy ``number``."""
    if number < 0:
        raise IndexError(f"no spy number {number}")
    agent = memory.source_agents[number]
    person = agent.character
    stolen = "none" if agent.stolen_message == EMPTY else "yes "
    licence = "yes" if agent.has_licence_to_kill else "no "
    return [
        f"Spy n°{number}",
        f"  Id: {person.id}",
        _health_line(person.health, mark_death=True),
        f"  Position: ({person.row},{person.column})",
        f"  Home pos: ({person.home_row},{person.home_column})",
        f"  Stolen companies: {agent.nb_of_stolen_companies}",
        f"  Message stolen: {stolen}",
        f"  License to kill: {licence}",
    ]


def case_officer_lines(memory: SimulationMemory) -> list[str]:
    """Lines of the case officer's information block."""
    officer = memory.attending_officers[0]
    person = officer.character
    return [
        "Case Officer",
        f"  Id: {person.id}",
        _health_line(person.health, mark_death=True),
        f"  Position: ({person.row},{person.column})",
        f"  Home pos: ({person.home_row},{person.home_column})",
        f"  Mailbox pos: ({officer.mailbox_row},{officer.mailbox_column})",
    ]


def counter_officer_lines(memory: SimulationMemory) -> list[str]:
    """Lines of the counterintelligence officer's information block."""
    officer = memory.counter_intelligence_officers[0]
    person = officer.character
    if person.row != -1:
        mailbox = f"  Mailbox pos: ({officer.mailbox_row},{officer.mailbox_column})    "
    else:
        mailbox = "  Mailbox pos: not found"
    return [
        "Counterintelligence Officer",
        f"  Id: {person.id}",
        _health_line(person.health, mark_death=False),
        f"  Position: ({person.row},{person.column})",
        f"  City Hall pos: ({officer.city_hall_row},{officer.city_hall_column})",
        mailbox,
        f"  Target: {officer.targeted_character_id}",
    ]


def mailbox_lines(memory: SimulationMemory) -> list[str]:
    """One line per encrypted message waiting in the mailbox."""
    lines = []
    for number, message in enumerate(memory.encrypted_messages, start=1):
        text = "FAKE MESSAGE" if message.msg_text == FAKE_MESSAGE else message.msg_text
        lines.append(f">> [{number}] {text} (P{message.priority})")
    return lines


def enemy_monitor_lines(memory: SimulationMemory) -> list[str]:
    """One line per message deciphered by the enemy country."""
    return [f">> {message.msg_text}" for message in memory.decrypted_messages]


def _put(window: Any, row: int, column: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(row, column, text, attr)
    except curses.error:
        pass


def _centered(window: Any, text: str) -> int:
    return window.getmaxyx()[1] // 2 - len(text) // 2


def _title(window: Any, text: str) -> None:
    _put(window, 1, _centered(window, text), text, curses.A_BOLD | curses.A_UNDERLINE)


def _clear_line(window: Any, row: int) -> None:
    window.move(row, 1)
    window.clrtoeol()
    window.box()
    window.refresh()


def _write_block(
    window: Any, row: int, column: int, lines: Sequence[str], width: int
) -> None:
    width = max(0, min(width, window.getmaxyx()[1] - column - 1))
    for offset, line in enumerate(lines):
        attr = curses.A_BOLD if offset == 0 else 0
        _put(window, row + offset, column, line.ljust(width)[:width], attr)


class Monitor:
    """Draws the four panels of the monitor inside a curses window."""

    def __init__(
        self,
        window: Any,
        memory: SimulationMemory,
        rows: int,
        columns: int,
        use_colors: bool = False,
    ) -> None:
        self.window = window
        self.memory = memory
        self.rows = rows
        self.columns = columns
        self.use_colors = use_colors
        self.city_window: Any = None
        self.character_window: Any = None
        self.mailbox_window: Any = None
        self.enemy_window: Any = None
        self._cell_attrs = {cell_type: 0 for cell_type in CellType}

    def _setup_colors(self) -> None:
        backgrounds = (
            curses.COLOR_BLACK,
            curses.COLOR_RED,
            curses.COLOR_GREEN,
            curses.COLOR_YELLOW,
            curses.COLOR_BLUE,
            curses.COLOR_MAGENTA,
            curses.COLOR_CYAN,
            curses.COLOR_WHITE,
        )
        for number, background in enumerate(backgrounds, start=1):
            curses.init_pair(number, curses.COLOR_WHITE, background)
        self._cell_attrs = {
            cell_type: curses.color_pair(pair) for cell_type, pair in _CELL_COLOR_PAIRS.items()
        }

    def draw(self) -> None:
        """Create the panels and draw everything that is shown from the start."""
        if self.use_colors:
            self._setup_colors()
        rows, columns = self.rows, self.columns
        _put(self.window, 0, _centered(self.window, TITLE), TITLE, curses.A_BOLD)

        top_height = rows // 2 + 8
        bottom_row = rows // 2 + 10
        self.city_window = self.window.subwin(top_height, columns // 2, 2, 0)
        self.character_window = self.window.subwin(top_height, 0, 2, columns // 2)
        self.mailbox_window = self.window.subwin(0, columns // 2, bottom_row, 0)
        self.enemy_window = self.window.subwin(0, columns // 2, bottom_row, columns // 2)
        for panel in self._panels():
            panel.box()

        self._draw_general_information()
        self._draw_city()
        self._draw_characters()
        self._draw_mailbox()
        self._draw_enemy_monitor()

    def update(self) -> None:
        """Redraw every value taken from the shared memory."""
        if self.city_window is None:
            raise RuntimeError("the monitor has not been drawn")
        self._draw_general_values()
        self._draw_characters()
        self._draw_mailbox()
        self._draw_enemy_monitor()
        self.memory.memory_has_changed = False

    def _panels(self) -> tuple[Any, ...]:
        return (
            self.city_window,
            self.character_window,
            self.mailbox_window,
            self.enemy_window,
        )

    def _draw_general_information(self) -> None:
        window = self.city_window
        _title(window, CITY_TITLE)
        _put(window, _GENERAL_ROW, 2, "Step: ")
        _put(window, _GENERAL_ROW, 20, "Time: ")
        window.refresh()

    def _draw_general_values(self) -> None:
        window = self.city_window
        clock = self.memory.timer
        _put(window, _GENERAL_ROW, 8, f"{float(clock.turns):f}")
        _put(window, _GENERAL_ROW, 26, "       ")
        _put(window, _GENERAL_ROW, 26, format_clock(clock))
        result = end_message(self.memory.simulation_has_ended)
        if result is not None:
            _put(window, _END_ROW, 2, f"End of simulation: {result}")
        window.refresh()

    def _draw_legend(self) -> None:
        window = self.city_window
        _put(window, _LEGEND_ROW, _LEGEND_COLUMN, "City map caption", curses.A_BOLD)
        for index, (cell_type, label) in enumerate(_LEGEND, start=1):
            row = _LEGEND_ROW + 2 * index
            _put(window, row, _LEGEND_COLUMN, "  ", self._cell_attrs[cell_type])
            _put(window, row, _LEGEND_COLUMN + 4, label)

    def _draw_city(self) -> None:
        window = self.city_window
        city = self.memory.city_map
        self._draw_legend()
        for x, column in enumerate(city.cells):
            for y, cell in enumerate(column):
                row_offset = self.rows // 6 + y
                col_offset = self.columns // 5 + x * 3
                attr = self._cell_attrs.get(cell.type, self._cell_attrs[CellType.WASTELAND])
                _put(window, row_offset, col_offset, city_glyph(cell.type), attr)
        window.refresh()

    def _draw_characters(self) -> None:
        window = self.character_window
        maxx = window.getmaxyx()[1]
        first = 2
        second = maxx // 2
        width = second - first - 1
        _title(window, CHARACTERS_TITLE)
        memory = self.memory
        middle = NB_OF_INFORMATION_FIELDS + 4
        bottom = NB_OF_INFORMATION_FIELDS * 2 + 5
        _write_block(window, 3, first, case_officer_lines(memory), width)
        _write_block(window, 3, second, spy_lines(memory, 0), width)
        _write_block(window, middle, first, spy_lines(memory, 1), width)
        _write_block(window, middle, second, spy_lines(memory, 2), width)
        _write_block(window, bottom, first, counter_officer_lines(memory), width)
        _write_block(window, bottom, second, citizen_lines(memory), width)
        window.refresh()

    def _draw_message_panel(self, window: Any, title: str, lines: Sequence[str]) -> None:
        _title(window, title)
        for row, line in enumerate(lines, start=3):
            _clear_line(window, row)
            _put(window, row, 2, line)
        window.refresh()

    def _draw_mailbox(self) -> None:
        self._draw_message_panel(self.mailbox_window, MAILBOX_TITLE, mailbox_lines(self.memory))

    def _draw_enemy_monitor(self) -> None:
        self._draw_message_panel(
            self.enemy_window, ENEMY_TITLE, enemy_monitor_lines(self.memory)
        )