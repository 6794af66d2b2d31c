import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from yinsh_core import cli


class TestCli(unittest.TestCase):
    def test_given_text_when_parsing_coord_then_pairs_or_none(self):
        self.assertEqual(cli.parse_coord('3,4'), (3, 4))
        self.assertEqual(cli.parse_coord('3 4'), (3, 4))
        self.assertEqual(cli.parse_coord(' 3 ,  4'), (3, 4))
        self.assertIsNone(cli.parse_coord('3'))
        self.assertIsNone(cli.parse_coord('a,b'))
        self.assertIsNone(cli.parse_coord('1,2,3'))

    def test_given_no_play_flag_when_running_then_board_and_choices_printed(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            cli.main(['--layout', 'empty'])
        out = buf.getvalue()
        self.assertIn('B to move: PlaceRing', out)
        self.assertIn('Legal choices:', out)

    def test_given_play_session_when_entering_moves_then_state_advances_until_quit(self):
        inputs = iter(['6,6', 'nonsense', '6 6', '99,99', 'q'])
        buf = io.StringIO()
        with patch('builtins.input', lambda _prompt='': next(inputs)), redirect_stdout(buf):
            cli.main(['--layout', 'empty', '--play'])
        out = buf.getvalue()
        self.assertIn('W to move: PlaceRing', out)
        self.assertIn('Illegal choice. Try again.', out)      # 6,6 already taken
        self.assertIn('Could not parse a board point.', out)  # nonsense and 99,99


if __name__ == '__main__':
    unittest.main(verbosity=2)
