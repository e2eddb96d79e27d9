"""A facade in front of a small store of integer fields."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from spycity.logger import log_info

_DEFAULT_FIELDS = (5, 7, 3)


@dataclass
class FieldStore:
    """A block of integer fields standing in for shared memory."""

    fields: list[int] = field(default_factory=lambda: list(_DEFAULT_FIELDS))

    def get_int_value(self, index: int) -> int:
        """Return the field at ``index``; raise IndexError outside the store."""
        if not 0 <= index < len(self.fields):
            raise IndexError(f"no field at index {index}")
        return self.fields[index]


@dataclass
class Facade:
    """Forwards client requests to the store it stands in front of."""

    memory: FieldStore

    def get_and_display(self, index: int) -> int:
        """Fetch the field at ``index`` from the store and return it."""
        return self.memory.get_int_value(index)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a store and a facade, then query three fields through it."""
    log_info("Create a new shared memory.")
    memory = FieldStore()
    log_info("Create a new facade in front of the shared memory.")
    facade = Facade(memory)
    log_info("Do some requests to the facade...")
    for index in range(3):
        facade.get_and_display(index)
    return 0