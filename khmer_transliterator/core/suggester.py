# khmer_transliterator/core/suggester.py
"""
Suggester - merges the three TrieIndex search tiers into a short top-N list.

Pipeline (each later stage runs only while slots are still free):
  1. exact matches  (if they already fill the budget, stop here)
  2. prefix matches (completions of what the user is still typing)
  3. fuzzy matches  (typo tolerance, fixed small edit distance)

Results never repeat a word and keep tier priority: exact > prefix > fuzzy.
The Suggester holds no state of its own besides the index it reads from.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from khmer_transliterator.core.trie import TrieIndex, is_blank

DEFAULT_LIMIT = 3
DEFAULT_FUZZY_DISTANCE = 1


class Suggester:
    """
    Public API:
      suggest(text) -> List[str]  (at most `limit` distinct words)
    """

    def __init__(
        self,
        index: TrieIndex,
        limit: int = DEFAULT_LIMIT,
        fuzzy_distance: int = DEFAULT_FUZZY_DISTANCE,
    ) -> None:
        self.index = index
        self.limit = max(0, int(limit))
        self.fuzzy_distance = int(fuzzy_distance)

    def suggest(self, text: str) -> List[str]:
        if is_blank(text) or self.limit == 0:
            return []

        exact = self.index.search_exact(text)
        if len(exact) >= self.limit:
            return exact[: self.limit]

        out: List[str] = list(exact)
        stages: List[Callable[[], Iterable[str]]] = [
            lambda: self.index.search_prefix(text),
            lambda: self.index.search_fuzzy(text, self.fuzzy_distance),
        ]
        for stage in stages:
            if len(out) >= self.limit:
                break
            self._fill(out, stage())
        return out[: self.limit]

    def _fill(self, out: List[str], candidates: Iterable[str]) -> None:
        """Append unseen candidates until the budget is met."""
        for word in candidates:
            if len(out) >= self.limit:
                return
            if word not in out:
                out.append(word)
