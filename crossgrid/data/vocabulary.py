"""Known-word set used for crossword membership checks."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Set

from ..core.exceptions import VocabularyLoadError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


class Vocabulary:
    """Normalized, de-duplicated word list that keeps input order.

    The same list serves two purposes: it is the set of words the placer tries
    to put on the grid, and it is the set of strings accepted when a placement
    forms a perpendicular crossword.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words: List[str] = []
        self._index: Set[str] = set()
        for raw in words:
            cleaned = clean_word(raw)
            if not cleaned:
                LOGGER.warning("Skipping word without letters: %r", raw)
                continue
            if cleaned in self._index:
                continue
            self._index.add(cleaned)
            self._words.append(cleaned)

    @classmethod
    def from_file(cls, path: Path | str) -> "Vocabulary":
        """Read one word per line. Blank lines and # comments are skipped."""

        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise VocabularyLoadError(f"Unable to read word list {path}: {exc}") from exc
        entries: List[str] = []
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            entries.append(line)
        LOGGER.info("Loaded %s entries from %s", len(entries), path)
        return cls(entries)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def contains(self, word: str) -> bool:
        return clean_word(word) in self._index

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Vocabulary({self._words!r})"
