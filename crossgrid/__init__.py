"""Crossword-style word placement on a rectangular grid.

This package exposes the public API surface via:

- ``crossgrid.engine.placer.WordPlacer``: runs a placement over a word list.
- ``crossgrid.engine.grid.LetterGrid``: the letter matrix a run fills.
- ``crossgrid.data.vocabulary.Vocabulary``: normalized known-word set.
"""

from .engine.grid import GridConfig, LetterGrid
from .engine.placer import PlacementResult, PlacerConfig, WordPlacer
from .data.vocabulary import Vocabulary

__all__ = [
    "GridConfig",
    "LetterGrid",
    "PlacementResult",
    "PlacerConfig",
    "WordPlacer",
    "Vocabulary",
]

__version__ = "0.1.0"
