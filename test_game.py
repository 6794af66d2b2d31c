import unittest

from game import (
    COORDS,
    Marker,
    PlaceMarker,
    PlaceRing,
    Player,
    Session,
    advance,
    empty_state,
    highlighted_markers,
    legal_choices,
    legal_moves,
    screen_point,
)

RING_POINTS = [(2, 2), (3, 6), (4, 3), (5, 8), (6, 4), (7, 9), (8, 5), (9, 10), (10, 7), (5, 2)]


class TestYinshBasics(unittest.TestCase):
    def test_full_opening_through_session_clicks(self):
        session = Session(empty_state())
        # Ten ring placements, then five marker-and-move turns
        for target in RING_POINTS:
            self.assertEqual(session.state.phase, PlaceRing())
            self.assertIsNotNone(session.click(screen_point(target)))
        self.assertEqual(session.state.phase, PlaceMarker())

        for _ in range(5):
            mover = session.state.active_player
            board = session.state.board
            ring = next(c for c in sorted(legal_choices(session.state))
                        if legal_moves(board.place(Marker(mover, c)), c))
            self.assertIsNotNone(session.choose(ring))
            moves = sorted(legal_choices(session.state))
            self.assertTrue(moves)
            session.choose(moves[0])
            self.assertEqual(session.state.active_player, mover.other())
            self.assertEqual(session.state.phase, PlaceMarker())

        board = session.state.board
        self.assertEqual(len(board.rings()), 10)
        self.assertEqual(len(board.markers()), 5)
        self.assertEqual(len(board), 15)

    def test_every_point_playable_on_empty_board(self):
        s = empty_state()
        self.assertEqual(legal_choices(s), frozenset(COORDS))
        for c in COORDS:
            ns = advance(s, c)
            self.assertEqual(ns.board.at(c).owner, Player.B)

    def test_no_highlights_on_empty_board(self):
        s = empty_state()
        for p in Player:
            self.assertEqual(highlighted_markers(s.board, p), frozenset())


if __name__ == '__main__':
    unittest.main(verbosity=2)
