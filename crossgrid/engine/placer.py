"""Placement orchestration.

A run resets the grid, shuffles the word list and then walks it once:

  1. Search: collect every legal candidate for the word.
  2. Commit: pick one candidate at random and write its letters.

A word without candidates is dropped for the rest of the run; nothing is ever
undone, so there is no backtracking.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..core.constants import Orientation
from ..core.models import CellKey, PlacedWord, PlacementCandidate
from ..data.normalization import clean_word
from ..data.vocabulary import Vocabulary
from ..utils.logger import get_logger
from .audit import ResultAuditor
from .grid import GridConfig, LetterGrid
from .search import CandidateSearch
from .validator import PlacementValidator


LOGGER = get_logger(__name__)


@dataclass
class PlacerConfig:
    height: int
    width: int
    seed: Optional[int] = None
    audit: bool = True

    def to_grid_config(self) -> GridConfig:
        return GridConfig(height=self.height, width=self.width)


@dataclass
class PlacementRun:
    """Working state of one ``place_words`` call."""

    grid: LetterGrid
    vocabulary: Vocabulary
    placed: Dict[str, PlacedWord] = field(default_factory=dict)

    @property
    def first_word(self) -> bool:
        return not self.placed


@dataclass
class PlacementResult:
    grid: LetterGrid
    placed_words: List[PlacedWord]
    unplaced_words: List[str]
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    def letters(self) -> Dict[CellKey, str]:
        return {
            (row, col): self.grid.letter_at(row, col) or ""
            for row, col in self.grid.occupied_cells()
        }

    def to_jsonable(self) -> dict:
        return {
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "seed": self.seed,
            "grid": self.grid.to_jsonable(),
            "letters": [
                {"row": row, "col": col, "letter": letter}
                for (row, col), letter in self.letters().items()
            ],
            "placed": [placed.to_jsonable() for placed in self.placed_words],
            "unplaced": list(self.unplaced_words),
            "validation": list(self.validation_messages),
        }


class WordPlacer:
    """Arranges words on a grid so that every word after the first crosses another.

    A placer owns its grid. Runs on the same instance must not overlap; each
    call to :meth:`place_words` replaces the previous run's state.
    """

    def __init__(self, config: PlacerConfig) -> None:
        self.config = config
        self.rng = random.Random(config.seed)
        self.grid = LetterGrid(config.to_grid_config())
        self._run = PlacementRun(grid=self.grid, vocabulary=Vocabulary([]))
        self._word_counter = 0

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def place_words(self, words: Iterable[str]) -> PlacementResult:
        vocabulary = words if isinstance(words, Vocabulary) else Vocabulary(words)
        self.reset(vocabulary)
        LOGGER.info(
            "Placing %s words on a %sx%s grid", len(vocabulary), self.grid.rows, self.grid.cols
        )

        order = vocabulary.words
        self.rng.shuffle(order)
        for word in order:
            self.try_place_word(word)

        return self._settle()

    def reset(self, vocabulary: Optional[Vocabulary] = None) -> None:
        self.grid.reset()
        self._run = PlacementRun(
            grid=self.grid,
            vocabulary=vocabulary if vocabulary is not None else self._run.vocabulary,
        )
        self._word_counter = 0

    def try_place_word(self, word: str) -> Optional[PlacedWord]:
        word = clean_word(word)
        if not word:
            LOGGER.warning("Skipping word without letters")
            return None
        run = self._run
        if word in run.placed:
            return run.placed[word]
        validator = PlacementValidator(run.grid, run.vocabulary)
        search = CandidateSearch(run.grid, validator)
        candidates = search.find_candidates(word, first_word=run.first_word)
        if not candidates:
            LOGGER.debug("No legal position for '%s'", word)
            return None
        chosen = self.rng.choice(candidates)
        placed = self._commit(chosen)
        LOGGER.debug(
            "Placed '%s' %s at (%s,%s) from %s candidates",
            word,
            chosen.orientation.value,
            chosen.start_row,
            chosen.start_col,
            len(candidates),
        )
        return placed

    @property
    def placed_words(self) -> List[PlacedWord]:
        return list(self._run.placed.values())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _commit(self, candidate: PlacementCandidate) -> PlacedWord:
        placed = PlacedWord.from_candidate(self._next_word_id(candidate.orientation), candidate)
        for (row, col), letter in zip(placed.cells, placed.word):
            if self.grid.is_occupied(row, col):
                # Intersection: the letter is already there, only the owner is new.
                self.grid.cell(row, col).part_of_word_ids.add(placed.id)
                continue
            self.grid.commit_letter(row, col, letter, word_id=placed.id)
        self._run.placed[placed.word] = placed
        return placed

    def _settle(self) -> PlacementResult:
        run = self._run
        placed_words = self.placed_words
        unplaced = [word for word in run.vocabulary if word not in run.placed]
        messages: List[str] = []
        if self.config.audit:
            messages = ResultAuditor(run.vocabulary).audit(run.grid, placed_words).messages
        LOGGER.info(
            "Placement settled: %s placed, %s dropped, %s cells filled",
            len(placed_words),
            len(unplaced),
            run.grid.occupied_count,
        )
        return PlacementResult(
            grid=run.grid.snapshot(),
            placed_words=placed_words,
            unplaced_words=unplaced,
            validation_messages=messages,
            seed=self.config.seed,
        )

    def _next_word_id(self, orientation: Orientation) -> str:
        self._word_counter += 1
        prefix = "A" if orientation is Orientation.ACROSS else "D"
        return f"{prefix}{self._word_counter:04d}"
