"""
Word Statistics Collector
Counts word occurrences keyed by their lower-cased, truncated form
"""

import threading
from typing import Dict, List, Optional, Tuple

# Keys longer than this are cut, so words sharing a prefix collide
MAX_WORD_LENGTH = 10


class InvalidArgumentError(ValueError):
    """Raised when a missing word (None) is added."""


def normalize_word(word: str) -> str:
    """Lower-case the word, then keep at most MAX_WORD_LENGTH characters."""
    # lower() keeps "Ё" -> "ё" distinct from "е"; the cut counts code points after lowering
    return word.lower()[:MAX_WORD_LENGTH]


def _sort_key(entry: Tuple[int, str]):
    count, word = entry
    return -count, word


class WordsStatistics:
    """
    Accumulates word counts.

    Every instance owns its own store; nothing is shared between instances.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def add(self, word: Optional[str]):
        """
        Count one occurrence of word.
        None is rejected, empty or whitespace-only words are ignored.
        """
        if word is None:
            raise InvalidArgumentError("word must not be None")
        if not word.strip():
            return
        key = normalize_word(word)
        self._counts[key] = self._counts.get(key, 0) + 1

    def get_statistics(self) -> List[Tuple[int, str]]:
        """Return (count, word) pairs, most frequent first, ties by word."""
        entries = [(count, word) for word, count in self._counts.items()]
        entries.sort(key=_sort_key)
        return entries

    def __len__(self):
        return len(self._counts)


class SynchronizedWordsStatistics:
    """Serializes add and get_statistics calls on a shared collector."""

    def __init__(self, statistics: Optional[WordsStatistics] = None):
        self._statistics = statistics if statistics is not None else WordsStatistics()
        self._lock = threading.Lock()

    def add(self, word: Optional[str]):
        with self._lock:
            self._statistics.add(word)

    def get_statistics(self) -> List[Tuple[int, str]]:
        with self._lock:
            return self._statistics.get_statistics()

    def __len__(self):
        with self._lock:
            return len(self._statistics)
