from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .dive import Dive
from .row import Row

DEFAULT_WIDTH = 16


@dataclass(frozen=True)
class Route:
    """All rows of a finished walk, topmost first, plus the closing column."""

    width: int
    rows: Tuple[Row, ...]
    end: int

    @classmethod
    def from_dive(cls, dive: Dive) -> "Route":
        rows = tuple(dive)
        end = rows[-1].cursor if rows else dive.width // 2
        return cls(width=dive.width, rows=rows, end=end)

    @property
    def start(self) -> int:
        return self.width // 2

    def __str__(self) -> str:
        return render_route(self)


def render_route(route: Route) -> str:
    """Bordered ASCII art; the 'v' marks on the borders show where the diver entered and left."""
    w = route.width
    half = w // 2
    lines: List[str] = []
    lines.append("+" + "-" * max(half - 1, 0) + "v" + "-" * (w - half) + "+")
    for row in route.rows:
        lines.append("|" + row.render() + "|")
    lines.append("+" + "-" * route.end + "v" + "-" * max(w - route.end - 1, 0) + "+")
    return "\n".join(lines)


def draw(data: Iterable[int], width: int = DEFAULT_WIDTH) -> str:
    return render_route(Route.from_dive(Dive(data, width)))
