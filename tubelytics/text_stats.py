"""Word-frequency statistics over video descriptions"""

import re
from collections import Counter
from collections.abc import Iterable

# Anything but ASCII letters and ASCII whitespace is removed, not split on
_NON_WORD_CHARS = re.compile(r"[^a-zA-Z\s]", re.ASCII)


def tokenize(description: str) -> list[str]:
    """
    Split one description into lowercase alphabetic tokens

    Example: "Cats & Dogs, 2024!" -> ["cats", "dogs"]
    """
    cleaned = _NON_WORD_CHARS.sub("", description.lower())
    return [word for word in cleaned.split() if word]


def word_frequency(descriptions: Iterable[str]) -> dict[str, int]:
    """
    Count token occurrences across descriptions

    Args:
        descriptions: Description texts, in the order they were fetched

    Returns:
        Mapping of token to count, ordered by descending count. Tokens with
        equal counts keep the order in which they were first seen.
    """
    counts: Counter[str] = Counter()
    for description in descriptions:
        counts.update(tokenize(description))

    return dict(counts.most_common())


def top_words(stats: dict[str, int], limit: int) -> dict[str, int]:
    """First `limit` entries of an already ranked frequency mapping"""
    if limit < 1:
        return {}
    return dict(list(stats.items())[:limit])
