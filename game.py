from __future__ import annotations

# Facade module that re-exports Yinsh core functionality.
# Used by the Flask app and tests; single-responsibility modules live under yinsh_core/*.

# Robust imports so this module works when imported as part of a package or
# directly from the repo root.
try:
    from .yinsh_core.lattice import (  # type: ignore
        COORDS,
        DIRECTIONS,
        Coord,
        Direction,
        add_coords,
        connected,
        five_adjacent,
        is_valid_point,
        neighbors,
        reachable,
    )
    from .yinsh_core.board import Board, Marker, Piece, Player, Ring  # type: ignore
    from .yinsh_core.state import (  # type: ignore
        GameState,
        MoveRing,
        PlaceMarker,
        PlaceRing,
        RemoveRing,
        TurnPhase,
    )
    from .yinsh_core.moves import legal_moves, valid_ring_moves  # type: ignore
    from .yinsh_core.combination import highlighted_markers, part_of_combination  # type: ignore
    from .yinsh_core.turn import (  # type: ignore
        UnsupportedPhaseError,
        advance,
        is_legal_choice,
        legal_choices,
    )
    from .yinsh_core.screen import closest_coordinate, screen_point  # type: ignore
    from .yinsh_core.layouts import empty_state, initial_board, initial_state, state_for_layout  # type: ignore
    from .yinsh_core.preview import Preview, preview  # type: ignore
    from .yinsh_core.session import DisplayMode, Session  # type: ignore
except ImportError:
    from yinsh_core.lattice import (  # type: ignore
        COORDS,
        DIRECTIONS,
        Coord,
        Direction,
        add_coords,
        connected,
        five_adjacent,
        is_valid_point,
        neighbors,
        reachable,
    )
    from yinsh_core.board import Board, Marker, Piece, Player, Ring  # type: ignore
    from yinsh_core.state import (  # type: ignore
        GameState,
        MoveRing,
        PlaceMarker,
        PlaceRing,
        RemoveRing,
        TurnPhase,
    )
    from yinsh_core.moves import legal_moves, valid_ring_moves  # type: ignore
    from yinsh_core.combination import highlighted_markers, part_of_combination  # type: ignore
    from yinsh_core.turn import (  # type: ignore
        UnsupportedPhaseError,
        advance,
        is_legal_choice,
        legal_choices,
    )
    from yinsh_core.screen import closest_coordinate, screen_point  # type: ignore
    from yinsh_core.layouts import empty_state, initial_board, initial_state, state_for_layout  # type: ignore
    from yinsh_core.preview import Preview, preview  # type: ignore
    from yinsh_core.session import DisplayMode, Session  # type: ignore


def main() -> None:
    # CLI driver delegated to yinsh_core.cli
    try:
        from .yinsh_core.cli import main as _main  # type: ignore
    except ImportError:
        from yinsh_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
