from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

__all__ = [
    "Direction",
    "Style",
    "Note",
    "Instruction",
    "GLYPHS",
    "has_bit",
    "low_bits",
    "decode_byte",
]


# Bit helpers

def has_bit(value: int, idx: int) -> bool:
    return (value >> idx) & 1 == 1

def low_bits(value: int, shift: int, count: int) -> int:
    return (value >> shift) & ((1 << count) - 1)


class Direction(Enum):
    RIGHT = "right"
    LEFT = "left"

    @property
    def step(self) -> int:
        return 1 if self is Direction.RIGHT else -1

    @classmethod
    def from_bit(cls, flag: bool) -> "Direction":
        return cls.RIGHT if flag else cls.LEFT


class Style(IntEnum):
    STYLE0 = 0
    STYLE1 = 1
    STYLE2 = 2
    STYLE3 = 3
    STYLE4 = 4
    STYLE5 = 5
    STYLE6 = 6
    STYLE7 = 7


Instruction = Tuple[Direction, Style]

# indexed by Style
GLYPHS = {
    Direction.RIGHT: ">.*ox)pb",
    Direction.LEFT: "<~=_!(qd",
}


@dataclass(frozen=True, slots=True)
class Note:
    """A written cell. Empty cells are ``None`` in a row."""

    direction: Direction
    style: Style

    @property
    def glyph(self) -> str:
        return GLYPHS[self.direction][self.style]

    def __str__(self) -> str:
        return self.glyph


def decode_byte(byte: int) -> Tuple[Instruction, Instruction]:
    """Unpacks one byte into two (direction, style) instructions.

    Layout, low nibble first:
      bit 0    : direction of the first instruction (1 → right)
      bits 1-3 : style of the first instruction
      bit 4    : direction of the second instruction (1 → right)
      bits 5-7 : style of the second instruction
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte: {byte!r}")
    first = (Direction.from_bit(has_bit(byte, 0)), Style(low_bits(byte, 1, 3)))
    second = (Direction.from_bit(has_bit(byte, 4)), Style(low_bits(byte, 5, 3)))
    return first, second
