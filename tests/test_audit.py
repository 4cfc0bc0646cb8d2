import unittest

from crossgrid.core.constants import Orientation
from crossgrid.core.models import PlacedWord
from crossgrid.data.vocabulary import Vocabulary
from crossgrid.engine.audit import ResultAuditor
from crossgrid.engine.grid import GridConfig, LetterGrid


def commit(grid: LetterGrid, placed: PlacedWord) -> PlacedWord:
    for (row, col), letter in zip(placed.cells, placed.word):
        grid.commit_letter(row, col, letter, word_id=placed.id)
    return placed


class AuditTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid(GridConfig(height=7, width=7))
        self.auditor = ResultAuditor(Vocabulary(["seat", "tea", "moon"]))

    def test_crossing_words_pass(self) -> None:
        seat = commit(self.grid, PlacedWord("A0001", "SEAT", 3, 3, Orientation.ACROSS))
        tea = commit(self.grid, PlacedWord("D0002", "TEA", 2, 4, Orientation.DOWN, intersection=(3, 4)))
        result = self.auditor.audit(self.grid, [seat, tea])
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_unknown_run_is_reported(self) -> None:
        seat = commit(self.grid, PlacedWord("A0001", "SEAT", 3, 3, Orientation.ACROSS))
        self.grid.commit_letter(3, 2, "A")
        result = self.auditor.audit(self.grid, [seat])
        self.assertFalse(result.ok)
        self.assertIn("ASEAT", result.messages[0])

    def test_disconnected_letters_are_reported(self) -> None:
        seat = commit(self.grid, PlacedWord("A0001", "SEAT", 3, 3, Orientation.ACROSS))
        moon = commit(self.grid, PlacedWord("A0002", "MOON", 0, 0, Orientation.ACROSS))
        result = self.auditor.audit(self.grid, [seat, moon])
        self.assertFalse(result.ok)
        self.assertIn("not connected", result.messages[0])

    def test_word_missing_from_grid_is_reported(self) -> None:
        seat = PlacedWord("A0001", "SEAT", 3, 3, Orientation.ACROSS)
        result = self.auditor.audit(self.grid, [seat])
        self.assertFalse(result.ok)
        self.assertIn("A0001", result.messages[0])

    def test_empty_grid_passes(self) -> None:
        self.assertTrue(self.auditor.audit(self.grid, []).ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
