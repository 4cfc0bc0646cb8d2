"""Custom exception hierarchy for word placement."""


class CrosswordError(Exception):
    """Base exception for placement failures."""


class GridShapeError(CrosswordError, ValueError):
    """Raised when a grid is requested with fewer than one row or column."""


class PlacementError(CrosswordError):
    """Raised when a letter cannot be written into the grid."""


class LetterConflictError(PlacementError):
    """Raised when a committed letter would be overwritten by a different one."""


class VocabularyLoadError(CrosswordError):
    """Raised when a word list file cannot be read."""


class ValidationError(CrosswordError):
    """Raised when the settled grid fails an integrity check."""
