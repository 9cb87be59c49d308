"""Unit tests for RawLiteralSkipper and ScanState."""

import unittest

from line_length_linter.domain.rules.raw_literal import RawLiteralSkipper, ScanPhase, ScanState


class TestDelimiterDetection(unittest.TestCase):
    def test_contains_raw_delimiter(self) -> None:
        self.assertTrue(RawLiteralSkipper.contains_raw_delimiter('text = """'))
        self.assertTrue(RawLiteralSkipper.contains_raw_delimiter('"""'))
        self.assertFalse(RawLiteralSkipper.contains_raw_delimiter("text = '''"))
        self.assertFalse(RawLiteralSkipper.contains_raw_delimiter('text = ""'))

    def test_opens_block_only_for_odd_delimiter_count(self) -> None:
        self.assertTrue(RawLiteralSkipper.opens_block('query = """SELECT *'))
        self.assertFalse(RawLiteralSkipper.opens_block('doc = """one line"""'))


class TestSkipBlock(unittest.TestCase):
    def setUp(self) -> None:
        self.skipper = RawLiteralSkipper()

    def test_skips_to_closing_line(self) -> None:
        lines = ['a = """', "inside one", "inside two", '"""', "after"]
        state = ScanState(index=0, offset=len(lines[0]))

        self.skipper.skip_block(lines, state)

        self.assertEqual(state.index, 3)
        self.assertEqual(state.phase, ScanPhase.SCANNING)
        self.assertFalse(state.inside_raw)
        # End of line 3: lengths of lines 0..3 plus terminators after lines 0..2.
        self.assertEqual(state.offset, sum(len(line) for line in lines[:4]) + 3)

    def test_unterminated_block_stops_at_last_line(self) -> None:
        lines = ['a = """', "inside", "still inside"]
        state = ScanState(index=0, offset=len(lines[0]))

        self.skipper.skip_block(lines, state)

        self.assertEqual(state.index, len(lines) - 1)
        self.assertTrue(state.inside_raw)
        self.assertEqual(state.offset, sum(len(line) for line in lines) + 2)

    def test_opening_on_last_line_consumes_nothing(self) -> None:
        lines = ["x = 1", 'a = """']
        state = ScanState(index=1, offset=len(lines[0]) + 1 + len(lines[1]))

        self.skipper.skip_block(lines, state)

        self.assertEqual(state.index, 1)
        self.assertEqual(state.offset, len(lines[0]) + 1 + len(lines[1]))
