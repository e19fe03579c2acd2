from __future__ import annotations
from typing import List, Optional

from .minutiae import Direction, Note

MARGIN_DIVISOR = 8


def margin_for(width: int) -> int:
    """Number of forced, wrapping hops before the diver starts looking ahead."""
    return width // MARGIN_DIVISOR


class Row:
    """
    One line of the canvas plus the diver's column.

    Cells are write-once: ``None`` means empty, a Note means written.
    While the diver is inside the row ``cursor`` is its live column;
    after the row is handed out it is the column where the diver left.
    """

    __slots__ = ("width", "cells", "cursor", "margin")

    def __init__(self, width: int, cursor: int) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        if not 0 <= cursor < width:
            raise ValueError(f"cursor {cursor} outside row of width {width}")
        self.width = width
        self.cells: List[Optional[Note]] = [None] * width
        self.cursor = cursor
        self.margin = margin_for(width)

    # ---- cell access
    def is_empty(self) -> bool:
        return all(c is None for c in self.cells)

    def is_free(self) -> bool:
        """The cell under the cursor is empty."""
        return self.cells[self.cursor] is None

    def put(self, note: Note) -> None:
        if not self.is_free():
            raise ValueError(f"column {self.cursor} already written")
        self.cells[self.cursor] = note

    # ---- movement
    def at_edge(self, direction: Direction) -> bool:
        if direction is Direction.RIGHT:
            return self.cursor + 1 >= self.width
        return self.cursor == 0

    def _hop(self, direction: Direction) -> None:
        self.cursor = (self.cursor + direction.step) % self.width

    def journey(self, direction: Direction) -> bool:
        """Moves the cursor after a write. True if the diver drops to the next row.

        First ``margin`` steps wrap around the row and are taken as long as
        the cell under the cursor is written. Then the diver walks on without
        wrapping until it finds an empty cell (settles) or hits the edge
        (descends).
        """
        for _ in range(self.margin):
            if self.is_free():
                return False
            self._hop(direction)
        while True:
            if self.is_free():
                return False
            if self.at_edge(direction):
                return True
            self.cursor += direction.step

    # ---- output
    def render(self) -> str:
        return "".join(" " if c is None else c.glyph for c in self.cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Row({self.render()!r}, cursor={self.cursor})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return (self.width, self.cells, self.cursor) == (other.width, other.cells, other.cursor)
