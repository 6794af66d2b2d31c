import math
import unittest

from game import (
    COORDS,
    DisplayMode,
    GameState,
    Marker,
    MoveRing,
    PlaceMarker,
    PlaceRing,
    Player,
    Preview,
    RemoveRing,
    Ring,
    Session,
    UnsupportedPhaseError,
    closest_coordinate,
    initial_state,
    legal_moves,
    preview,
    screen_point,
)

B, W = Player.B, Player.W


class TestScreen(unittest.TestCase):
    def test_given_every_point_when_round_tripping_then_same_coordinate(self):
        for c in COORDS:
            self.assertEqual(closest_coordinate(screen_point(c)), c)

    def test_given_known_point_when_projecting_then_expected_pixels(self):
        x, y = screen_point((1, 2))
        self.assertAlmostEqual(x, 30 * math.sqrt(3) - 15)
        self.assertAlmostEqual(y, 405.0)

    def test_given_neighbors_when_projecting_then_equal_spacing(self):
        x0, y0 = screen_point((6, 6))
        for c in [(6, 7), (7, 7), (7, 6), (6, 5), (5, 5), (5, 6)]:
            x1, y1 = screen_point(c)
            self.assertAlmostEqual(math.hypot(x1 - x0, y1 - y0), 60.0)

    def test_given_nearby_position_when_resolving_then_snaps_to_point(self):
        for c in COORDS:
            x, y = screen_point(c)
            self.assertEqual(closest_coordinate((x + 7.0, y - 5.0)), c)

    def test_given_far_away_position_when_resolving_then_some_board_point(self):
        self.assertIn(closest_coordinate((-10000.0, -10000.0)), COORDS)


class TestPreview(unittest.TestCase):
    def test_given_place_ring_when_hovering_then_ghost_only_on_free_points(self):
        s = initial_state()
        self.assertEqual(preview(s, (5, 6)), Preview(ghost=Ring(B, (5, 6))))
        self.assertEqual(preview(s, (6, 6)), Preview())

    def test_given_place_marker_when_hovering_then_ghost_only_on_own_rings(self):
        s = initial_state().with_phase(PlaceMarker())
        self.assertEqual(preview(s, (3, 4)).ghost, Marker(B, (3, 4)))
        self.assertIsNone(preview(s, (8, 7)).ghost)  # W ring

    def test_given_move_ring_when_hovering_then_dots_and_ghost_on_legal_points(self):
        s0 = initial_state().with_phase(PlaceMarker())
        board = s0.board.place(Marker(B, (3, 4)))
        s = GameState(active_player=B, phase=MoveRing((3, 4)), board=board)
        allowed = legal_moves(board, (3, 4))
        pv = preview(s, (3, 6))
        self.assertEqual(pv.dots, allowed)
        self.assertIn((3, 6), allowed)
        self.assertEqual(pv.ghost, Ring(B, (3, 6)))
        self.assertIsNone(preview(s, (3, 5)).ghost)

    def test_given_remove_ring_when_hovering_then_nothing(self):
        s = initial_state().with_phase(RemoveRing())
        self.assertEqual(preview(s, (5, 6)), Preview())


class TestSession(unittest.TestCase):
    def test_given_waiting_session_when_clicking_free_point_then_state_replaced(self):
        session = Session(initial_state())
        before = session.state
        ns = session.click(screen_point((5, 6)))
        self.assertIsNotNone(ns)
        self.assertIs(session.state, ns)
        self.assertEqual(ns.board.at((5, 6)), Ring(B, (5, 6)))
        self.assertEqual(ns.active_player, W)
        self.assertTrue(before.board.is_free((5, 6)))

    def test_given_illegal_click_when_clicking_then_ignored(self):
        session = Session(initial_state())
        before = session.state
        self.assertIsNone(session.click(screen_point((6, 6))))  # occupied
        self.assertIs(session.state, before)

    def test_given_remove_ring_phase_when_choosing_then_unsupported_and_state_kept(self):
        session = Session(initial_state().with_phase(RemoveRing()))
        before = session.state
        with self.assertRaises(UnsupportedPhaseError):
            session.choose((5, 6))
        self.assertIs(session.state, before)

    def test_given_board_only_session_when_using_pointer_then_read_only(self):
        session = Session(initial_state(), mode=DisplayMode.BOARD_ONLY)
        before = session.state
        self.assertIsNone(session.hover(screen_point((5, 6))))
        self.assertIsNone(session.click(screen_point((5, 6))))
        self.assertIs(session.state, before)

    def test_given_hover_when_moving_pointer_then_state_unchanged(self):
        session = Session(initial_state())
        before = session.state
        pv = session.hover(screen_point((5, 6)))
        self.assertEqual(pv.ghost, Ring(B, (5, 6)))
        self.assertIs(session.state, before)

    def test_given_full_turn_when_choosing_then_phases_cycle(self):
        s = GameState(active_player=B, phase=PlaceMarker(), board=initial_state().board)
        session = Session(s)
        self.assertIsNotNone(session.choose((3, 4)))
        self.assertEqual(session.state.phase, MoveRing((3, 4)))
        self.assertIsNone(session.choose((3, 5)))  # W marker, not a destination
        self.assertIsNotNone(session.choose((3, 6)))
        self.assertEqual(session.state.phase, PlaceMarker())
        self.assertEqual(session.state.active_player, W)
        self.assertNotEqual(session.state.phase, PlaceRing())


if __name__ == '__main__':
    unittest.main(verbosity=2)
