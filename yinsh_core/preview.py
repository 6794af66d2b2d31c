from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from .board import Marker, Piece, Ring
from .lattice import Coord
from .moves import valid_ring_moves
from .state import GameState, MoveRing, PlaceMarker, PlaceRing


@dataclass(frozen=True)
class Preview:
    """What to overlay while the pointer rests near a point."""
    ghost: Optional[Piece] = None
    dots: FrozenSet[Coord] = frozenset()


def preview(state: GameState, point: Coord) -> Preview:
    phase = state.phase
    board = state.board
    me = state.active_player
    if isinstance(phase, PlaceRing):
        return Preview(ghost=Ring(me, point) if board.is_free(point) else None)
    if isinstance(phase, PlaceMarker):
        return Preview(ghost=Marker(me, point) if point in board.ring_coords(me) else None)
    if isinstance(phase, MoveRing):
        allowed = valid_ring_moves(board, phase.origin)
        return Preview(ghost=Ring(me, point) if point in allowed else None, dots=allowed)
    return Preview()
