"""Shared constants and enumerations for the word placer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Orientation(str, Enum):
    """Axis a word is written along."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Orientation.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Orientation":
        return Orientation.DOWN if self is Orientation.ACROSS else Orientation.ACROSS


class RejectionReason(str, Enum):
    """Why a placement candidate was refused by the validator."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    ADJACENT_END = "ADJACENT_END"
    LETTER_CONFLICT = "LETTER_CONFLICT"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    INVALID_CROSSWORD = "INVALID_CROSSWORD"
    NOT_CONNECTED = "NOT_CONNECTED"


ORIENTATIONS: Tuple[Orientation, ...] = (Orientation.ACROSS, Orientation.DOWN)
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
