from __future__ import annotations
from typing import Iterable, Iterator, Optional

from .minutiae import Direction, Instruction, Note, Style, decode_byte
from .row import Row


class Dive:
    """Lazy walk of the diver over a byte source, yielding completed rows.

    Each byte gives two instructions. When the first one already drops the
    diver into a new row, the second is kept in ``buffered`` and applied on
    the next call, before any further byte is read.
    """

    def __init__(self, source: Iterable[int], width: int) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self.width = width
        self._source: Iterator[int] = iter(source)
        self.row = Row(width, width // 2)
        self.buffered: Optional[Instruction] = None

    def __iter__(self) -> "Dive":
        return self

    def _go(self, direction: Direction, style: Style) -> Optional[Row]:
        home = self.row.cursor
        self.row.put(Note(direction, style))
        if self.row.journey(direction):
            done, self.row = self.row, Row(self.width, home)
            return done
        return None

    def __next__(self) -> Row:
        if self.buffered is not None:
            d, s = self.buffered
            self.buffered = None
            done = self._go(d, s)
            if done is not None:
                return done

        for byte in self._source:
            (d1, s1), (d2, s2) = decode_byte(byte)
            done = self._go(d1, s1)
            if done is not None:
                self.buffered = (d2, s2)
                return done
            done = self._go(d2, s2)
            if done is not None:
                return done

        # source exhausted: flush the last partial row once
        if self.row.is_empty():
            raise StopIteration
        last = self.row
        self.row = Row(self.width, last.cursor)
        return last
