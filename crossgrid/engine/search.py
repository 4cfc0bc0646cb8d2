"""Enumeration of legal positions for a word."""

from __future__ import annotations

from typing import List

from ..core.constants import ORIENTATIONS
from ..core.models import PlacementCandidate
from ..utils.logger import get_logger
from .grid import LetterGrid
from .validator import PlacementValidator


LOGGER = get_logger(__name__)


class CandidateSearch:
    """Collects every candidate the validator accepts for a word."""

    def __init__(self, grid: LetterGrid, validator: PlacementValidator) -> None:
        self.grid = grid
        self.validator = validator

    def find_candidates(self, word: str, first_word: bool = False) -> List[PlacementCandidate]:
        if first_word:
            return self._center_candidates(word)
        return self._connecting_candidates(word)

    def _center_candidates(self, word: str) -> List[PlacementCandidate]:
        row, col = self.grid.center
        candidates: List[PlacementCandidate] = []
        for orientation in ORIENTATIONS:
            candidate = PlacementCandidate(word, row, col, orientation)
            result = self.validator.check(candidate, first_word=True)
            if result.ok:
                candidates.append(candidate)
            else:
                LOGGER.debug("Centre %s rejected: %s", orientation.value, result.detail)
        return candidates

    def _connecting_candidates(self, word: str) -> List[PlacementCandidate]:
        candidates: List[PlacementCandidate] = []
        for row, col in self.grid.occupied_cells():
            existing = self.grid.letter_at(row, col)
            for index, letter in enumerate(word):
                if letter != existing:
                    continue
                for orientation in ORIENTATIONS:
                    dr, dc = orientation.step
                    candidate = PlacementCandidate(
                        word,
                        row - dr * index,
                        col - dc * index,
                        orientation,
                        intersection=(row, col),
                    )
                    result = self.validator.check(candidate)
                    if result.ok:
                        candidates.append(candidate)
                    else:
                        LOGGER.debug("Rejected %s: %s", result.reason.value, result.detail)
        return candidates
