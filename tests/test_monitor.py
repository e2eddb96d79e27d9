import pytest

from spycity.cell import CellType
from spycity.character_factory import (
    new_case_officer,
    new_citizen,
    new_counter_intelligence_officer,
    new_spy_with_licence,
    new_spy_without_licence,
    reset_ids,
)
from spycity.monitor import (
    FAKE_MESSAGE,
    Monitor,
    case_officer_lines,
    citizen_lines,
    city_glyph,
    count_citizens,
    counter_officer_lines,
    end_message,
    enemy_monitor_lines,
    format_clock,
    mailbox_lines,
    spy_lines,
)
from spycity.simulation import Clock, Message, SimulationMemory


class FakeWindow:
    def __init__(self, rows, cols):
        self.rows = rows
        self.cols = cols
        self.grid = [[" "] * cols for _ in range(rows)]
        self.cursor = (0, 0)
        self.boxed = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def addstr(self, y, x, text, attr=0):
        for i, ch in enumerate(text):
            if 0 <= y < self.rows and 0 <= x + i < self.cols:
                self.grid[y][x + i] = ch
        self.cursor = (y, x + len(text))

    def subwin(self, nlines, ncols, y, x):
        return FakeWindow(nlines or self.rows - y, ncols or self.cols - x)

    def box(self):
        self.boxed += 1

    def refresh(self):
        pass

    def move(self, y, x):
        self.cursor = (y, x)

    def clrtoeol(self):
        y, x = self.cursor
        for i in range(x, self.cols):
            self.grid[y][i] = " "

    def line(self, y):
        return "".join(self.grid[y])

    def text(self):
        return "\n".join(self.line(y) for y in range(self.rows))


def make_memory():
    reset_ids()
    memory = SimulationMemory()
    memory.source_agents = [
        new_spy_with_licence(1, 0),
        new_spy_without_licence(2, 1),
        new_spy_without_licence(4, 1),
    ]
    memory.citizens = [new_citizen(2, 3), new_citizen(6, 0), new_citizen(4, 6)]
    officer = new_case_officer(6, 4)
    officer.mailbox_row = 2
    officer.mailbox_column = 6
    memory.attending_officers = [officer]
    counter = new_counter_intelligence_officer(3, 3, 2)
    counter.city_hall_row = 3
    counter.city_hall_column = 3
    memory.counter_intelligence_officers = [counter]
    return memory


@pytest.mark.parametrize(
    "cell_type, glyph",
    [
        (CellType.SUPERMARKET, " s "),
        (CellType.RESIDENTIAL_BUILDING, " r "),
        (CellType.COMPANY, " c "),
        (CellType.CITY_HALL, " * "),
        (CellType.WASTELAND, " . "),
    ],
)
def test_city_glyph(cell_type, glyph):
    assert city_glyph(cell_type) == glyph


def test_format_clock_round_trip():
    text = format_clock(Clock(hours=7, minutes=40))
    hours, minutes = text.split(" h ")
    assert (int(hours), int(minutes)) == (7, 40)
    assert len(hours) == 2


def test_end_messages():
    assert end_message(1) == "Spies have won! The spy network has fled!"
    assert end_message(2) == "Counter officer has discovered the mailbox!"
    assert end_message(0) is None


def test_count_citizens():
    reset_ids()
    home = new_citizen(1, 1)
    worker = new_citizen(1, 2)
    worker.work_row, worker.work_column = 3, 3
    worker.row, worker.column = 3, 3
    walker = new_citizen(2, 2)
    walker.row, walker.column = 0, 5
    assert count_citizens([home, worker, walker]) == (1, 1, 1)


def test_citizen_lines_match_counts():
    memory = make_memory()
    memory.citizens[0].row = 5
    lines = citizen_lines(memory)
    assert lines[0] == "Citizens"
    values = tuple(int(line.split(":")[1]) for line in lines[1:])
    assert values == count_citizens(memory.citizens)


def test_spy_lines_licence_and_message():
    memory = make_memory()
    first = spy_lines(memory, 0)
    second = spy_lines(memory, 1)
    assert first[-1] == "  License to kill: yes"
    assert second[-1] == "  License to kill: no "
    assert first[6] == "  Message stolen: none"
    memory.source_agents[1].stolen_message = "plans"
    assert spy_lines(memory, 1)[6] == "  Message stolen: yes "


def test_spy_lines_dead_spy():
    memory = make_memory()
    memory.source_agents[2].character.health = 0
    assert spy_lines(memory, 2)[2] == "  Health: Died (looser)  "


def test_spy_lines_unknown_spy():
    memory = make_memory()
    with pytest.raises(IndexError):
        spy_lines(memory, 5)
    with pytest.raises(IndexError):
        spy_lines(memory, -1)


def test_case_officer_lines():
    memory = make_memory()
    lines = case_officer_lines(memory)
    assert lines[0] == "Case Officer"
    assert lines[-1] == "  Mailbox pos: (2,6)"


def test_counter_officer_lines_not_found():
    memory = make_memory()
    assert counter_officer_lines(memory)[-1] == "  Target: 2"
    memory.counter_intelligence_officers[0].character.row = -1
    assert counter_officer_lines(memory)[5] == "  Mailbox pos: not found"


def test_mailbox_lines_hide_fake_messages():
    memory = make_memory()
    memory.encrypted_messages = [Message("plans", 3), Message(FAKE_MESSAGE, 1)]
    lines = mailbox_lines(memory)
    assert lines[0] == ">> [1] plans (P3)"
    assert "FAKE MESSAGE" in lines[1]
    assert len(lines) == memory.mailbox_size


def test_enemy_monitor_lines():
    memory = make_memory()
    memory.decrypted_messages = [Message("plans"), Message("codes")]
    assert enemy_monitor_lines(memory) == [">> plans", ">> codes"]


def test_draw_shows_city_and_titles():
    memory = make_memory()
    window = FakeWindow(45, 140)
    monitor = Monitor(window, memory, 45, 140)
    monitor.draw()
    city_text = monitor.city_window.text()
    assert city_text.count(" * ") == 1
    residences = memory.city_map.find_buildings(CellType.RESIDENTIAL_BUILDING, 49)
    assert city_text.count(" r ") == len(residences)
    assert "CHARACTERS" in monitor.character_window.text()
    assert "LICENSE TO KILL (v. 0.2)" in window.line(0)


def test_update_before_draw_fails():
    monitor = Monitor(FakeWindow(45, 140), make_memory(), 45, 140)
    with pytest.raises(RuntimeError):
        monitor.update()


def test_update_shows_values_and_clears_flag():
    memory = make_memory()
    monitor = Monitor(FakeWindow(45, 140), memory, 45, 140)
    monitor.draw()
    memory.timer = Clock(hours=5, minutes=30, turns=33)
    memory.encrypted_messages = [Message("plans", 2)]
    memory.memory_has_changed = True
    monitor.update()
    assert format_clock(memory.timer) in monitor.city_window.line(20)
    assert mailbox_lines(memory)[0] in monitor.mailbox_window.line(3)
    assert memory.memory_has_changed is False