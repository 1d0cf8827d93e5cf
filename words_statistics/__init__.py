from words_statistics.statistics import (
    MAX_WORD_LENGTH,
    InvalidArgumentError,
    SynchronizedWordsStatistics,
    WordsStatistics,
    normalize_word,
)

__all__ = [
    "MAX_WORD_LENGTH",
    "InvalidArgumentError",
    "SynchronizedWordsStatistics",
    "WordsStatistics",
    "normalize_word",
]
