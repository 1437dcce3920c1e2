"""
khmer_transliterator.core

The lookup/ranking engine behind the transliterator.
Contains:
 - Levenshtein edit distance (levenshtein)
 - BK-tree key index for fuzzy lookup (BKTree)
 - romanization trie with per-pair frequencies (TrieIndex)
 - exact > prefix > fuzzy suggestion composer (Suggester)
 - acceptance feedback / frequency learning (FeedbackTracker)
 - application facade (Transliterator)
"""

from .distance import levenshtein
from .bktree import BKTree
from .trie import TrieIndex, TrieNode
from .suggester import Suggester
from .feedback_tracker import FeedbackTracker
from .transliterator import Explanation, Transliterator

__all__ = [
    "levenshtein",
    "BKTree",
    "TrieIndex",
    "TrieNode",
    "Suggester",
    "FeedbackTracker",
    "Explanation",
    "Transliterator",
]
