"""Deterministic integrity checks for a settled grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set

from ..core.constants import ORIENTATIONS
from ..core.exceptions import ValidationError
from ..core.models import CellKey, PlacedWord
from ..data.vocabulary import Vocabulary
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class AuditResult:
    ok: bool
    messages: List[str]


class ResultAuditor:
    """Runs deterministic validation over the final grid."""

    def __init__(self, vocabulary: Vocabulary) -> None:
        self.vocabulary = vocabulary

    def audit(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> AuditResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid)
            self._check_placed_words(grid, placed_words)
            self._check_runs(grid)
            self._check_connected(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Audit failed: %s", exc)
            return AuditResult(ok=False, messages=messages)
        return AuditResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for row, col in grid.occupied_cells():
            letter = grid.letter_at(row, col)
            if not letter or len(letter) != 1 or not ("A" <= letter <= "Z"):
                raise ValidationError(f"Invalid letter {letter!r} at ({row},{col})")

    def _check_placed_words(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> None:
        seen: Set[str] = set()
        for placed in placed_words:
            if placed.word in seen:
                raise ValidationError(f"Word '{placed.word}' placed more than once")
            seen.add(placed.word)
            if placed.word not in self.vocabulary:
                raise ValidationError(f"Placed word '{placed.word}' is not in the vocabulary")
            for (row, col), letter in zip(placed.cells, placed.word):
                if not grid.in_bounds(row, col):
                    raise ValidationError(f"Word {placed.id} leaves the grid at ({row},{col})")
                if grid.letter_at(row, col) != letter:
                    raise ValidationError(
                        f"Word {placed.id} expects '{letter}' at ({row},{col}), "
                        f"found {grid.letter_at(row, col)!r}"
                    )

    def _check_runs(self, grid: LetterGrid) -> None:
        for orientation in ORIENTATIONS:
            dr, dc = orientation.step
            for row, col in grid.occupied_cells():
                # Only read each run once, from its first cell.
                if grid.is_occupied(row - dr, col - dc):
                    continue
                run = grid.read_run(row, col, orientation)
                if len(run) >= 2 and run not in self.vocabulary:
                    raise ValidationError(
                        f"Unknown {orientation.value} string '{run}' at ({row},{col})"
                    )

    def _check_connected(self, grid: LetterGrid) -> None:
        occupied = grid.occupied_cells()
        if not occupied:
            return
        reached: Set[CellKey] = {occupied[0]}
        frontier: List[CellKey] = [occupied[0]]
        while frontier:
            row, col = frontier.pop()
            for neighbor in grid.neighbors(row, col):
                if neighbor in reached or not grid.is_occupied(*neighbor):
                    continue
                reached.add(neighbor)
                frontier.append(neighbor)
        if len(reached) != len(occupied):
            stray = sorted(set(occupied) - reached)[0]
            raise ValidationError(f"Letter at {stray} is not connected to the rest of the grid")
