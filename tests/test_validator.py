import unittest

from crossgrid.core.constants import Orientation, RejectionReason
from crossgrid.core.models import PlacementCandidate
from crossgrid.data.vocabulary import Vocabulary
from crossgrid.engine.grid import GridConfig, LetterGrid
from crossgrid.engine.validator import PlacementValidator

ACROSS = Orientation.ACROSS
DOWN = Orientation.DOWN


def write(grid: LetterGrid, word: str, row: int, col: int, orientation: Orientation) -> None:
    dr, dc = orientation.step
    for index, letter in enumerate(word):
        grid.commit_letter(row + dr * index, col + dc * index, letter)


class ValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid(GridConfig(height=7, width=7))
        self.vocabulary = Vocabulary(["seat", "set", "eat", "east", "tea"])
        self.validator = PlacementValidator(self.grid, self.vocabulary)

    def test_first_word_through_center(self) -> None:
        candidate = PlacementCandidate("SEAT", 3, 3, ACROSS)
        self.assertTrue(self.validator.is_valid(candidate, first_word=True))

    def test_word_leaving_grid_is_out_of_bounds(self) -> None:
        result = self.validator.check(PlacementCandidate("SEAT", 3, 4, ACROSS), first_word=True)
        self.assertFalse(result.ok)
        self.assertEqual(result.reason, RejectionReason.OUT_OF_BOUNDS)

    def test_negative_start_is_out_of_bounds(self) -> None:
        result = self.validator.check(PlacementCandidate("TEA", -1, 2, DOWN), first_word=True)
        self.assertEqual(result.reason, RejectionReason.OUT_OF_BOUNDS)

    def test_end_to_end_contact_rejected(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        result = self.validator.check(PlacementCandidate("EAT", 3, 0, ACROSS))
        self.assertEqual(result.reason, RejectionReason.ADJACENT_END)

    def test_valid_crossing_accepted(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        candidate = PlacementCandidate("TEA", 2, 4, DOWN, intersection=(3, 4))
        result = self.validator.check(candidate)
        self.assertTrue(result.ok)
        self.assertIsNone(result.reason)

    def test_intersection_letter_must_match(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        candidate = PlacementCandidate("TEA", 3, 3, DOWN, intersection=(3, 3))
        result = self.validator.check(candidate)
        self.assertEqual(result.reason, RejectionReason.LETTER_CONFLICT)

    def test_passing_through_letter_without_declaring_it(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        # Same letter, but only the declared intersection may be reused.
        candidate = PlacementCandidate("SEAT", 3, 3, DOWN)
        result = self.validator.check(candidate)
        self.assertEqual(result.reason, RejectionReason.CELL_OCCUPIED)

    def test_unknown_crossword_rejected(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        # The A at (3,2) would read ASEAT across.
        candidate = PlacementCandidate("TEA", 1, 2, DOWN)
        result = self.validator.check(candidate)
        self.assertEqual(result.reason, RejectionReason.INVALID_CROSSWORD)
        self.assertIn("ASEAT", result.detail)

    def test_known_crossword_accepted(self) -> None:
        write(self.grid, "EAT", 3, 4, ACROSS)
        # The S at (3,3) extends EAT into SEAT, which is a known word.
        candidate = PlacementCandidate("SET", 3, 3, DOWN)
        self.assertTrue(self.validator.is_valid(candidate, first_word=True))

    def test_disconnected_word_rejected_after_first(self) -> None:
        write(self.grid, "EAT", 3, 4, ACROSS)
        result = self.validator.check(PlacementCandidate("SET", 3, 3, DOWN))
        self.assertEqual(result.reason, RejectionReason.NOT_CONNECTED)

    def test_intersection_off_the_word_is_not_a_connection(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        candidate = PlacementCandidate("TEA", 0, 0, DOWN, intersection=(3, 6))
        result = self.validator.check(candidate)
        self.assertEqual(result.reason, RejectionReason.NOT_CONNECTED)

    def test_validation_has_no_side_effects(self) -> None:
        write(self.grid, "SEAT", 3, 3, ACROSS)
        before = self.grid.to_jsonable()
        self.validator.check(PlacementCandidate("TEA", 2, 4, DOWN, intersection=(3, 4)))
        self.validator.check(PlacementCandidate("TEA", 1, 2, DOWN))
        self.assertEqual(self.grid.to_jsonable(), before)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
