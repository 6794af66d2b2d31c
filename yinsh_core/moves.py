from __future__ import annotations

from typing import FrozenSet, List

from .board import Board
from .lattice import DIRECTIONS, Coord, Direction, is_valid_point, step


def destinations_in_direction(board: Board, origin: Coord, d: Direction) -> List[Coord]:
    """
    Walks from origin along d and collects every point a ring may land on.
    Empty points are collected until the first marker; after one or more markers
    only the first empty point behind them counts and the walk ends there.
    Rings and the board edge always end the walk.
    """
    out: List[Coord] = []
    jumped = False
    current = origin
    while True:
        current = step(current, d)
        if not is_valid_point(current) or board.has_ring(current):
            break
        if board.has_marker(current):
            jumped = True
            continue
        out.append(current)
        if jumped:
            break
    return out


def valid_ring_moves(board: Board, origin: Coord) -> FrozenSet[Coord]:
    """All legal destinations for the ring at origin."""
    dests = set()
    for d in DIRECTIONS:
        dests.update(destinations_in_direction(board, origin, d))
    return frozenset(c for c in dests if board.is_free(c))


def legal_moves(board: Board, origin: Coord) -> FrozenSet[Coord]:
    return valid_ring_moves(board, origin)
