"""
khmer_transliterator

Romanized Khmer -> Khmer script suggestions for a transliteration keyboard.
Typo tolerant (fuzzy search) and learns from accepted suggestions.

    from khmer_transliterator import Transliterator
    t = Transliterator.from_corpus()
    t.suggest("jg")            # up to 3 Khmer words
    t.accept("jg", "ជាង")      # learn from the user's choice
"""

from khmer_transliterator.core import (
    FeedbackTracker,
    Suggester,
    Transliterator,
    TrieIndex,
    levenshtein,
)
from khmer_transliterator.dataset import load_dataset, parse_corpus

__all__ = [
    "FeedbackTracker",
    "Suggester",
    "Transliterator",
    "TrieIndex",
    "levenshtein",
    "load_dataset",
    "parse_corpus",
]

__version__ = "0.1.0"
