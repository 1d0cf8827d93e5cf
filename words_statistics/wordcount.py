"""
Word Count Algorithm
Feeds lines of text into a words statistics collector
"""

import logging
import time
from typing import Iterable, List, Optional, Tuple

from words_statistics.statistics import WordsStatistics

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "word<TAB>count"


def split_words(line: str) -> List[str]:
    """Split a line of text into whitespace separated tokens"""
    return line.split()


def add_lines(statistics, lines: Iterable[str]) -> int:
    """
    Add every token of every line to the collector
    Returns the number of tokens added
    """
    words_added = 0
    for line in lines:
        for word in split_words(line):
            statistics.add(word)
            words_added += 1
    return words_added


def format_statistics(snapshot: List[Tuple[int, str]], limit: Optional[int] = None) -> List[str]:
    """Render (count, word) pairs as word<TAB>count lines"""
    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        snapshot = snapshot[:limit]
    return [f"{word}\t{count}" for count, word in snapshot]


# Return execution time in milliseconds
def count_file(file_path: str, encoding: str = "utf-8") -> Tuple[List[Tuple[int, str]], float]:
    """Count the words of a text file and return the snapshot with the execution time in milliseconds"""
    logger.info(f"Counting words in {file_path}")
    start_time = time.perf_counter()
    statistics = WordsStatistics()
    with open(file_path, "r", encoding=encoding) as f:
        words_added = add_lines(statistics, f)
    snapshot = statistics.get_statistics()
    end_time = time.perf_counter()
    execution_time = (end_time - start_time) * 1000
    logger.info(f"Counted {words_added} words ({len(snapshot)} distinct) in {execution_time:.2f} ms")
    return snapshot, execution_time
