from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from .lattice import Coord
from .preview import Preview, preview
from .screen import Point, closest_coordinate
from .state import GameState
from .turn import advance, is_legal_choice


def _debug_enabled() -> bool:
    return os.getenv('YINSH_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


class DisplayMode(Enum):
    BOARD_ONLY = 'board_only'  # show the board, ignore input
    WAIT_TURN = 'wait_turn'    # waiting for the active player's choice


class Session:
    """
    Owns the one mutable cell of a running game: the current GameState.

    hover() is read-only; click() is the only call that replaces the state, and it
    does so as a whole. Not thread-safe: hosts with several threads must funnel
    events through a single queue.
    """

    def __init__(self, state: GameState, mode: DisplayMode = DisplayMode.WAIT_TURN) -> None:
        self.state = state
        self.mode = mode
        self.debug = _debug_enabled()

    def hover(self, xy: Point) -> Optional[Preview]:
        if self.mode is DisplayMode.BOARD_ONLY:
            return None
        return preview(self.state, closest_coordinate(xy))

    def click(self, xy: Point) -> Optional[GameState]:
        """Resolves a screen position and plays it; returns None if ignored."""
        return self.choose(closest_coordinate(xy))

    def choose(self, point: Coord) -> Optional[GameState]:
        """Plays a lattice point if it is a legal choice; returns None if ignored."""
        if self.mode is DisplayMode.BOARD_ONLY:
            if self.debug:
                print(f"[session] board-only, ignoring {point}")
            return None
        if not is_legal_choice(self.state, point):
            if self.debug:
                print(f"[session] {point} is not a legal choice in {type(self.state.phase).__name__}")
            return None
        self.state = advance(self.state, point)
        if self.debug:
            print(f"[session] played {point} -> {type(self.state.phase).__name__}, "
                  f"{self.state.active_player.value} to move")
        return self.state
