from __future__ import annotations

from typing import AbstractSet, FrozenSet

from .board import Board, Player
from .lattice import Coord, Direction, step

# One probe per lattice axis; each is paired with its opposite.
_AXIS_PROBES = (Direction.NW, Direction.N, Direction.NE)


def run_length(markers: AbstractSet[Coord], start: Coord, d: Direction) -> int:
    """Number of consecutive members of markers from start along d, start included."""
    n = 0
    current = start
    while current in markers:
        n += 1
        current = step(current, d)
    return n


def part_of_combination_along(markers: AbstractSet[Coord], start: Coord, d: Direction) -> bool:
    # start is counted in both halves
    return run_length(markers, start, d) + run_length(markers, start, d.opposite()) >= 2 + 4


def part_of_combination(markers: AbstractSet[Coord], start: Coord) -> bool:
    """True if start belongs to five or more contiguous markers on any axis."""
    return any(part_of_combination_along(markers, start, d) for d in _AXIS_PROBES)


def highlighted_markers(board: Board, owner: Player) -> FrozenSet[Coord]:
    """The owner's markers that are part of a five-in-a-row."""
    mc = board.marker_coords(owner)
    return frozenset(c for c in mc if part_of_combination(mc, c))
