"""Word frequency counting over a list of words."""

import logging
from collections import Counter
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def count_word_frequency(words: Iterable[str]) -> dict[str, int]:
    """
    Count words case-insensitively.

    Keys are lowercased and appear in first-seen order.
    """
    counts = Counter(word.lower() for word in words)
    logger.debug("Counted %d distinct word(s)", len(counts))
    return dict(counts)


def repeated_words(frequencies: dict[str, int], min_count: int = 2) -> list[tuple[str, int]]:
    """
    Words seen at least ``min_count`` times, most frequent first.

    Ties keep the order of ``frequencies``.
    """
    if min_count < 1:
        raise ValueError("min_count must be at least 1")
    repeated = [(word, count) for word, count in frequencies.items() if count >= min_count]
    return sorted(repeated, key=lambda pair: pair[1], reverse=True)


def format_frequencies(pairs: Iterable[tuple[str, int]]) -> str:
    return "\n".join(f"{word}: {count}" for word, count in pairs)
