from __future__ import annotations

from .board import Board, Marker, Player, Ring
from .state import GameState, PlaceRing

B, W = Player.B, Player.W


def initial_board() -> Board:
    """Demonstration layout: six rings and seven markers, W one short of a run."""
    return Board.from_pieces([
        Ring(B, (3, 4)),
        Ring(B, (4, 9)),
        Ring(B, (7, 9)),
        Ring(W, (8, 7)),
        Ring(W, (6, 3)),
        Ring(W, (4, 8)),
        Marker(W, (6, 4)),
        Marker(W, (6, 5)),
        Marker(W, (6, 7)),
        Marker(W, (5, 5)),
        Marker(W, (4, 5)),
        Marker(W, (3, 5)),
        Marker(B, (6, 6)),
    ])


def initial_state() -> GameState:
    return GameState(active_player=B, phase=PlaceRing(), board=initial_board())


def empty_state() -> GameState:
    """A fresh game: B places the first ring on an empty board."""
    return GameState(active_player=B, phase=PlaceRing(), board=Board())


LAYOUTS = {
    'demo': initial_state,
    'empty': empty_state,
}


def state_for_layout(name: str) -> GameState:
    try:
        return LAYOUTS[name]()
    except KeyError:
        raise ValueError(f"unknown layout {name!r} (expected one of {sorted(LAYOUTS)})") from None
