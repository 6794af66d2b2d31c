from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from .board import Board, Player
from .lattice import Coord


@dataclass(frozen=True)
class PlaceRing:
    """Put a ring on any free point."""


@dataclass(frozen=True)
class PlaceMarker:
    """Turn one of the active player's rings into a marker."""


@dataclass(frozen=True)
class MoveRing:
    """Move the ring that just left a marker at origin."""
    origin: Coord


@dataclass(frozen=True)
class RemoveRing:
    """Resolve a completed run. No transition is defined for it."""


TurnPhase = Union[PlaceRing, PlaceMarker, MoveRing, RemoveRing]


@dataclass(frozen=True)
class GameState:
    """Represents whose turn it is, what they must do next, and the board."""
    active_player: Player
    phase: TurnPhase
    board: Board

    def other_player(self) -> Player:
        return self.active_player.other()

    def with_phase(self, phase: TurnPhase) -> 'GameState':
        return replace(self, phase=phase)
