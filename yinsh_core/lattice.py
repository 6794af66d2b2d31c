from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

Coord = Tuple[int, int]  # (a, b) on the triangular lattice


class Direction(Enum):
    """The six lattice directions, in counter-clockwise order."""
    N = 0
    NE = 1
    SE = 2
    S = 3
    SW = 4
    NW = 5

    def rotate60(self) -> 'Direction':
        """Rotates by 60 degrees counter-clockwise (NW wraps to N)."""
        return Direction((self.value + 1) % 6)

    def opposite(self) -> 'Direction':
        return self.rotate60().rotate60().rotate60()

    @property
    def vector(self) -> Coord:
        return _VECTORS[self]


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)

_VECTORS: Dict[Direction, Coord] = {
    Direction.N: (0, 1),
    Direction.NE: (1, 1),
    Direction.SE: (1, 0),
    Direction.S: (0, -1),
    Direction.SW: (-1, -1),
    Direction.NW: (-1, 0),
}

# Inclusive b-ranges for rows a = 1..11.
_ROW_RANGES: Tuple[Tuple[int, int], ...] = (
    (2, 5), (1, 7), (1, 8), (1, 9),
    (1, 10), (2, 10), (2, 11), (3, 11),
    (4, 11), (5, 11), (7, 10),
)

# Enumeration order matters: closest_coordinate breaks ties by it.
COORDS: Tuple[Coord, ...] = tuple(
    (a, b)
    for a, (lo, hi) in enumerate(_ROW_RANGES, start=1)
    for b in range(lo, hi + 1)
)

_COORD_SET: FrozenSet[Coord] = frozenset(COORDS)


def is_valid_point(c: Coord) -> bool:
    return c in _COORD_SET


def add_coords(c1: Coord, c2: Coord) -> Coord:
    """Vectorially adds two coordinates."""
    return c1[0] + c2[0], c1[1] + c2[1]


def step(c: Coord, d: Direction) -> Coord:
    """The next point from c along d (may be off the board)."""
    return add_coords(c, d.vector)


def connected(c1: Coord, c2: Coord) -> bool:
    """True if both points lie on one of the three lattice axes through each other."""
    (x, y), (a, b) = c1, c2
    return x == a or y == b or x - y == a - b


def neighbors(c: Coord) -> List[Coord]:
    """Valid points one step away from c."""
    return [n for n in (step(c, d) for d in DIRECTIONS) if is_valid_point(n)]


def reachable(c: Coord) -> List[Coord]:
    """All valid points sharing a line with c (c included)."""
    return [p for p in COORDS if connected(c, p)]


def five_adjacent(start: Coord, d: Direction) -> List[Coord]:
    """Five consecutive points from start along d, start included."""
    out = [start]
    while len(out) < 5:
        out.append(step(out[-1], d))
    return out
