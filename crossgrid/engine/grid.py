"""Grid representation and helper utilities."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from ..core.constants import ORTHOGONAL_STEPS, Bounds, Orientation
from ..core.exceptions import GridShapeError, LetterConflictError, PlacementError
from ..core.models import Cell, CellKey
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Shape of the letter grid."""

    height: int
    width: int

    def __post_init__(self) -> None:
        if self.height < 1 or self.width < 1:
            raise GridShapeError(
                f"Grid needs at least one row and one column, got {self.height}x{self.width}"
            )

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


class LetterGrid:
    """Direct-indexed letter matrix with occupancy tracking."""

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.bounds = config.bounds()
        self.cells: List[List[Cell]] = [
            [Cell() for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]
        self._occupied: Set[CellKey] = set()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    @property
    def center(self) -> CellKey:
        # Grids are square in practice; the row count sets both coordinates.
        middle = self.bounds.rows // 2
        return middle, middle

    @property
    def occupied_count(self) -> int:
        return len(self._occupied)

    def in_bounds(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def letter_at(self, row: int, col: int) -> Optional[str]:
        if not self.bounds.contains(row, col):
            return None
        return self.cells[row][col].letter

    def is_occupied(self, row: int, col: int) -> bool:
        return (row, col) in self._occupied

    def occupied_cells(self) -> List[CellKey]:
        """Occupied cells in row-major order."""

        return sorted(self._occupied)

    def neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def read_run(self, row: int, col: int, orientation: Orientation, letter: Optional[str] = None) -> str:
        """Return the contiguous letters along ``orientation`` through ``(row, col)``.

        ``letter`` stands in for the cell's own content, which lets callers
        read the string a not yet committed letter would form.
        """

        dr, dc = orientation.step
        center = letter if letter is not None else (self.letter_at(row, col) or "")
        before: List[str] = []
        r, c = row - dr, col - dc
        while self.bounds.contains(r, c) and self.cells[r][c].letter is not None:
            before.append(self.cells[r][c].letter)
            r, c = r - dr, c - dc
        after: List[str] = []
        r, c = row + dr, col + dc
        while self.bounds.contains(r, c) and self.cells[r][c].letter is not None:
            after.append(self.cells[r][c].letter)
            r, c = r + dr, c + dc
        return "".join(reversed(before)) + center + "".join(after)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def commit_letter(self, row: int, col: int, letter: str, word_id: Optional[str] = None) -> None:
        if not self.bounds.contains(row, col):
            raise PlacementError(f"Cell {(row, col)} is outside the {self.rows}x{self.cols} grid")
        cell = self.cells[row][col]
        if cell.letter is not None and cell.letter != letter:
            raise LetterConflictError(
                f"Cell {(row, col)} already holds '{cell.letter}', cannot write '{letter}'"
            )
        cell.letter = letter
        if word_id is not None:
            cell.part_of_word_ids.add(word_id)
        self._occupied.add((row, col))

    def reset(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.clear()
        self._occupied.clear()
        LOGGER.debug("Grid %sx%s cleared", self.rows, self.cols)

    def snapshot(self) -> "LetterGrid":
        """Detached copy that later runs on this grid leave untouched."""

        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[Optional[str]]]:
        return [[cell.letter for cell in row] for row in self.cells]
