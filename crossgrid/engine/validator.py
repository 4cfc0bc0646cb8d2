"""Legality checks for a single placement candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import RejectionReason
from ..core.models import PlacementCandidate
from ..data.vocabulary import Vocabulary
from .grid import LetterGrid


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[RejectionReason] = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.ok


ACCEPTED = ValidationResult(ok=True)


def _reject(reason: RejectionReason, detail: str) -> ValidationResult:
    return ValidationResult(ok=False, reason=reason, detail=detail)


class PlacementValidator:
    """Decides whether a candidate may be committed to the grid.

    Rules run in a fixed order and stop at the first failure:

    1. every cell of the word lies inside the grid;
    2. the cells just before and just after the word, along its own
       orientation, are empty or off the grid;
    3. each cell is free, except the declared intersection, and any
       perpendicular string it would form is one letter or a known word;
    4. apart from the first word of a run, the word passes through its
       declared intersection.

    A rejection is a normal search outcome and never raises.
    """

    def __init__(self, grid: LetterGrid, vocabulary: Vocabulary) -> None:
        self.grid = grid
        self.vocabulary = vocabulary

    def is_valid(self, candidate: PlacementCandidate, first_word: bool = False) -> bool:
        return self.check(candidate, first_word=first_word).ok

    def check(self, candidate: PlacementCandidate, first_word: bool = False) -> ValidationResult:
        result = self._check_boundary(candidate)
        if not result.ok:
            return result
        result = self._check_padding(candidate)
        if not result.ok:
            return result
        result = self._check_cells(candidate)
        if not result.ok:
            return result
        return self._check_connection(candidate, first_word)

    def _check_boundary(self, candidate: PlacementCandidate) -> ValidationResult:
        if not candidate.word:
            return _reject(RejectionReason.OUT_OF_BOUNDS, "empty word occupies no cells")
        for row, col in (candidate.cells[0], candidate.end):
            if not self.grid.in_bounds(row, col):
                return _reject(
                    RejectionReason.OUT_OF_BOUNDS,
                    f"'{candidate.word}' leaves the grid at {(row, col)}",
                )
        return ACCEPTED

    def _check_padding(self, candidate: PlacementCandidate) -> ValidationResult:
        dr, dc = candidate.orientation.step
        first_row, first_col = candidate.cells[0]
        last_row, last_col = candidate.end
        for row, col in ((first_row - dr, first_col - dc), (last_row + dr, last_col + dc)):
            if self.grid.in_bounds(row, col) and self.grid.is_occupied(row, col):
                return _reject(
                    RejectionReason.ADJACENT_END,
                    f"'{candidate.word}' would touch the letter at {(row, col)} end-to-end",
                )
        return ACCEPTED

    def _check_cells(self, candidate: PlacementCandidate) -> ValidationResult:
        cross = candidate.orientation.perpendicular
        dr, dc = cross.step
        for (row, col), letter in zip(candidate.cells, candidate.word):
            if (row, col) == candidate.intersection:
                existing = self.grid.letter_at(row, col)
                if existing != letter:
                    return _reject(
                        RejectionReason.LETTER_CONFLICT,
                        f"intersection {(row, col)} holds {existing!r}, not '{letter}'",
                    )
                continue
            if self.grid.is_occupied(row, col):
                return _reject(
                    RejectionReason.CELL_OCCUPIED,
                    f"'{candidate.word}' would pass through occupied cell {(row, col)}",
                )
            touches = any(
                self.grid.in_bounds(nr, nc) and self.grid.is_occupied(nr, nc)
                for nr, nc in ((row - dr, col - dc), (row + dr, col + dc))
            )
            if not touches:
                continue
            crossword = self.grid.read_run(row, col, cross, letter)
            if len(crossword) != 1 and not self.vocabulary.contains(crossword):
                return _reject(
                    RejectionReason.INVALID_CROSSWORD,
                    f"'{candidate.word}' forms unknown crossword '{crossword}' at {(row, col)}",
                )
        return ACCEPTED

    @staticmethod
    def _check_connection(candidate: PlacementCandidate, first_word: bool) -> ValidationResult:
        if first_word:
            return ACCEPTED
        if candidate.intersection is not None and candidate.intersection in candidate.cells:
            return ACCEPTED
        return _reject(
            RejectionReason.NOT_CONNECTED,
            f"'{candidate.word}' does not cross any placed word",
        )
