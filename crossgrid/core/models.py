"""Data models supporting the word placer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .constants import Orientation

CellKey = Tuple[int, int]


def word_cells(start_row: int, start_col: int, orientation: Orientation, length: int) -> List[CellKey]:
    dr, dc = orientation.step
    return [(start_row + dr * i, start_col + dc * i) for i in range(length)]


@dataclass
class Cell:
    """A grid cell holding at most one letter."""

    letter: Optional[str] = None
    part_of_word_ids: Set[str] = field(default_factory=set)

    def clear(self) -> None:
        self.letter = None
        self.part_of_word_ids.clear()


@dataclass(frozen=True)
class PlacementCandidate:
    """A proposed, not yet committed, position for a word."""

    word: str
    start_row: int
    start_col: int
    orientation: Orientation
    intersection: Optional[CellKey] = None

    @property
    def cells(self) -> List[CellKey]:
        return word_cells(self.start_row, self.start_col, self.orientation, len(self.word))

    @property
    def end(self) -> CellKey:
        return self.cells[-1]


@dataclass
class PlacedWord:
    """A word committed to the grid."""

    id: str
    word: str
    start_row: int
    start_col: int
    orientation: Orientation
    intersection: Optional[CellKey] = None
    _cells: Optional[List[CellKey]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[CellKey]:
        if self._cells is None:
            self._cells = word_cells(self.start_row, self.start_col, self.orientation, self.length)
        return self._cells

    @classmethod
    def from_candidate(cls, word_id: str, candidate: PlacementCandidate) -> "PlacedWord":
        return cls(
            id=word_id,
            word=candidate.word,
            start_row=candidate.start_row,
            start_col=candidate.start_col,
            orientation=candidate.orientation,
            intersection=candidate.intersection,
        )

    def to_jsonable(self) -> dict:
        return {
            "id": self.id,
            "word": self.word,
            "start": [self.start_row, self.start_col],
            "orientation": self.orientation.value,
            "cells": [list(cell) for cell in self.cells],
        }
