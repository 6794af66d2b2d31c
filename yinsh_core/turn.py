from __future__ import annotations

from typing import FrozenSet

from .board import Marker, Ring
from .lattice import Coord
from .moves import valid_ring_moves
from .state import GameState, MoveRing, PlaceMarker, PlaceRing, RemoveRing, TurnPhase

RING_PLACEMENTS = 10


class UnsupportedPhaseError(ValueError):
    """Raised when a phase has no transition rule (run removal)."""

    def __init__(self, phase: TurnPhase) -> None:
        super().__init__(f"no transition defined for phase {type(phase).__name__}")
        self.phase = phase


def legal_choices(state: GameState) -> FrozenSet[Coord]:
    """Points the active player may pick in the current phase."""
    phase = state.phase
    board = state.board
    if isinstance(phase, PlaceRing):
        return frozenset(board.free_coords())
    if isinstance(phase, PlaceMarker):
        return board.ring_coords(state.active_player)
    if isinstance(phase, MoveRing):
        return valid_ring_moves(board, phase.origin)
    raise UnsupportedPhaseError(phase)


def is_legal_choice(state: GameState, point: Coord) -> bool:
    return point in legal_choices(state)


def advance(state: GameState, point: Coord) -> GameState:
    """
    Applies the active player's choice and returns the next state.
    Preconditions are not checked here: callers gate input with legal_choices().
    """
    phase = state.phase
    me = state.active_player
    board = state.board

    if isinstance(phase, PlaceRing):
        # Ring count is taken before placement: the 10th ring opens marker play
        # and the player who placed it lays the first marker.
        num_rings = len(board.rings())
        if num_rings < RING_PLACEMENTS - 1:
            return GameState(state.other_player(), PlaceRing(), board.place(Ring(me, point)))
        return GameState(me, PlaceMarker(), board.place(Ring(me, point)))

    if isinstance(phase, PlaceMarker):
        # The marker replaces the ring record on this point.
        return GameState(me, MoveRing(point), board.place(Marker(me, point)))

    if isinstance(phase, MoveRing):
        # origin keeps only the marker; the ring reappears at the destination.
        return GameState(state.other_player(), PlaceMarker(), board.place(Ring(me, point)))

    if isinstance(phase, RemoveRing):
        raise UnsupportedPhaseError(phase)

    raise TypeError(f"unknown phase: {phase!r}")
