"""The city grid: cells, their building types and lookups over them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class CellType(IntEnum):
    """What stands on a cell of the city."""

    WASTELAND = 0
    RESIDENTIAL_BUILDING = 1
    CITY_HALL = 2
    COMPANY = 3
    SUPERMARKET = 4


_GLYPHS = {
    CellType.WASTELAND: "W",
    CellType.RESIDENTIAL_BUILDING: "R",
    CellType.CITY_HALL: "C",
    CellType.COMPANY: "O",
    CellType.SUPERMARKET: "S",
}
_FROM_GLYPH = {glyph: cell_type for cell_type, glyph in _GLYPHS.items()}

# One string per x index; each character is the cell at that y index.
_DEFAULT_LAYOUT = (
    "WRWWWWR",
    "OWRWROO"[:0] + "OWRWRWO",
    "WSWWOOW",
    "OWRCSWW",
    "WWWOWRR",
    "WRWWWWW",
    "OWRWROR",
)


@dataclass
class Cell:
    """A single square of the city."""

    type: CellType = CellType.WASTELAND
    nb_of_characters: int = 0


@dataclass(frozen=True)
class Coordinate:
    """A position on the map."""

    row: int
    column: int


def should_be_monitored(cell_type: CellType) -> bool:
    """Companies and the city hall are under camera surveillance."""
    return cell_type in (CellType.COMPANY, CellType.CITY_HALL)


@dataclass
class City:
    """A width x height grid of cells, addressed as ``cells[x][y]``."""

    width: int
    height: int
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("city dimensions must be positive")
        self.cells = [[Cell() for _ in range(self.height)] for _ in range(self.width)]

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y); raise IndexError when outside the city."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the city")
        return self.cells[x][y]

    def define_monitoring(self, x: int, y: int, nb_of_characters: int) -> None:
        """Set the character count of a cell; positions outside the city are ignored."""
        try:
            cell = self.get_cell(x, y)
        except IndexError:
            return
        cell.nb_of_characters = nb_of_characters

    def clear(self) -> None:
        """Turn every cell into empty wasteland."""
        for column in self.cells:
            for cell in column:
                cell.type = CellType.WASTELAND
                cell.nb_of_characters = 0

    def initialize_surveillance(self) -> None:
        """Mark every monitored building with one watcher."""
        for column in self.cells:
            for cell in column:
                if should_be_monitored(cell.type):
                    cell.nb_of_characters = 1

    def find_buildings(self, building_type: CellType, count: int) -> list[Coordinate]:
        """Return up to ``count`` coordinates of buildings of the given type, row by row."""
        if count <= 0:
            raise ValueError("count must be positive")
        found: list[Coordinate] = []
        for row in range(self.height):
            for column in range(self.width):
                if self.cells[column][row].type == building_type:
                    found.append(Coordinate(row=row, column=column))
                    if len(found) >= count:
                        return found
        return found

    def render(self) -> str:
        """Return the map as text, one line per y index."""
        return "".join(
            "".join(_GLYPHS.get(self.cells[x][y].type, "?") for x in range(self.width)) + "\n"
            for y in range(self.height)
        )


def default_city() -> City:
    """Return the standard 7x7 city map."""
    city = City(len(_DEFAULT_LAYOUT), len(_DEFAULT_LAYOUT[0]))
    for x, column in enumerate(_DEFAULT_LAYOUT):
        for y, glyph in enumerate(column):
            city.cells[x][y].type = _FROM_GLYPH[glyph]
    return city