# khmer_transliterator/core/transliterator.py
"""
Transliterator - application facade used by the CLI, the TUI and tests.
 - owns one TrieIndex, the Suggester reading it and a FeedbackTracker
 - explicit construction, no module-level singleton
 - reload() builds a new index off to the side and swaps it in atomically
 - explain() shows every search tier for one input (debug view)

Public API:
  suggest(text) -> List[str]
  search_exact(text) / search_prefix(text) / search_fuzzy(text, max_distance)
  accept(key, word) -> bool    # user picked a suggestion
  increment_frequency(key, word) -> bool
  explain(text) -> Explanation
  reload(path=None) -> bool
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from khmer_transliterator.core.feedback_tracker import FeedbackTracker
from khmer_transliterator.core.suggester import Suggester
from khmer_transliterator.core.trie import TrieIndex
from khmer_transliterator.utils.config_manager import Config

logger = logging.getLogger(__name__)


@dataclass
class Explanation:
    """Per-tier results for one input."""

    text: str
    exact: List[str] = field(default_factory=list)
    prefix: List[str] = field(default_factory=list)
    fuzzy: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


class Transliterator:
    def __init__(
        self,
        index: Optional[TrieIndex] = None,
        *,
        config: Optional[Config] = None,
        tracker: Optional[FeedbackTracker] = None,
    ) -> None:
        self.config = config or Config()
        self._swap_lock = threading.Lock()
        self.tracker = tracker or FeedbackTracker()
        self._install(index if index is not None else TrieIndex())

    @classmethod
    def from_corpus(cls, path=None, config: Optional[Config] = None) -> "Transliterator":
        """Load the corpus (packaged one unless a path is given or configured)."""
        # local import: dataset -> core.trie -> core/__init__ would cycle
        from khmer_transliterator.dataset import load_dataset

        config = config or Config()
        path = path or config.get("dataset_path") or None
        return cls(load_dataset(path), config=config)

    # wiring ---------------------------------------------------------------
    def _install(self, index: TrieIndex) -> None:
        suggester = Suggester(
            index,
            limit=self.config.get("max_suggestions", 3),
            fuzzy_distance=self.config.get("fuzzy_max_distance", 1),
        )
        with self._swap_lock:
            self.index = index
            self.suggester = suggester
            self.tracker.index = index

    def reload(self, path=None) -> bool:
        """
        Rebuild the index from the corpus and publish it in one step.
        When the corpus cannot be read the current index stays in place
        and False is returned.
        """
        from khmer_transliterator.dataset import load_dataset

        path = path or self.config.get("dataset_path") or None
        try:
            fresh = load_dataset(path, strict=True)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("reload failed, keeping current index: %s", e)
            return False
        self._install(fresh)
        logger.info("index reloaded: %d keys", len(fresh))
        return True

    # queries --------------------------------------------------------------
    def search_exact(self, text: str) -> List[str]:
        return self.index.search_exact(text)

    def search_prefix(self, text: str) -> List[str]:
        return self.index.search_prefix(text)

    def search_fuzzy(self, text: str, max_distance: Optional[int] = None) -> List[str]:
        if max_distance is None:
            max_distance = self.config.get("fuzzy_max_distance", 1)
        return self.index.search_fuzzy(text, max_distance)

    def suggest(self, text: str) -> List[str]:
        return self.suggester.suggest(text)

    def explain(self, text: str) -> Explanation:
        limit = self.config.get("preview_limit", 5)
        return Explanation(
            text=text,
            exact=self.search_exact(text),
            prefix=self.search_prefix(text)[:limit],
            fuzzy=self.search_fuzzy(text)[:limit],
            suggestions=self.suggest(text),
        )

    # learning -------------------------------------------------------------
    def accept(self, key: str, word: str) -> bool:
        """
        User picked `word` while typing `key`. The stored pair that produced
        the suggestion is strengthened; False when there is none.
        """
        return self.tracker.record_accept(
            key, word, max_distance=self.config.get("fuzzy_max_distance", 1)
        )

    def increment_frequency(self, key: str, word: str) -> bool:
        return self.index.increment_frequency(key, word)
