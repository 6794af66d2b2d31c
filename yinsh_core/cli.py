from __future__ import annotations

import argparse
from typing import Optional

from .board import Player
from .combination import highlighted_markers
from .lattice import Coord, is_valid_point
from .layouts import LAYOUTS, state_for_layout
from .session import Session
from .state import GameState
from .turn import UnsupportedPhaseError, legal_choices


def _highlights(state: GameState) -> set:
    return set(highlighted_markers(state.board, Player.B)) | set(highlighted_markers(state.board, Player.W))


def show(state: GameState) -> None:
    print(state.board.pretty(_highlights(state)))
    print(f"{state.active_player.value} to move: {type(state.phase).__name__}")


def parse_coord(text: str) -> Optional[Coord]:
    """Parses 'a,b' or 'a b'; returns None on malformed input."""
    sep = ',' if ',' in text else ' '
    try:
        a_s, b_s = [t for t in text.split(sep) if t != '']
        return int(a_s), int(b_s)
    except ValueError:
        return None


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description='Yinsh rule engine')
    parser.add_argument('--layout', choices=sorted(LAYOUTS), default='demo', help='Starting layout')
    parser.add_argument('--play', action='store_true', help='Play both sides interactively')
    args = parser.parse_args(argv)

    state = state_for_layout(args.layout)
    if not args.play:
        show(state)
        print('Legal choices:', sorted(legal_choices(state)))
        return

    session = Session(state)
    while True:
        show(session.state)
        try:
            choices = legal_choices(session.state)
        except UnsupportedPhaseError as e:
            print(f"error: {e}")
            return
        if not choices:
            print('No legal choices available.')
            return
        print('Legal choices:', sorted(choices))
        text = input('Enter a point as a,b or a b (q to quit): ').strip()
        if text.lower() in ('q', 'quit'):
            return
        point = parse_coord(text)
        if point is None or not is_valid_point(point):
            print('Could not parse a board point. Try again.')
            continue
        if session.choose(point) is None:
            print('Illegal choice. Try again.')


if __name__ == '__main__':
    main()
