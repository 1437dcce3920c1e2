# khmer_transliterator/core/feedback_tracker.py
"""
FeedbackTracker
Records which suggestions the user accepted and feeds them back into the index.
 - quiet: events go to the module logger at DEBUG level only
 - in-memory counters per (romanization, word) pair
 - bounded tail of recent events for the CLI /stats view
 - optional TrieIndex hook: every accept strengthens the stored pair behind
   the pick by one; picks the index cannot place are not counted
Nothing is written to disk; learned frequencies live as long as the process.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import defaultdict, deque
from typing import Any, Deque, Dict, List, Optional, Tuple

from khmer_transliterator.core.trie import TrieIndex, is_blank, normalize_key

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


class FeedbackTracker:
    """
    Tracks accepted suggestions.
    Public API:
      record_accept(key, word, max_distance) -> bool
      accept_count(key, word)
      stats()
      dump_recent(n)
      reset()
    """

    def __init__(self, index: Optional[TrieIndex] = None, *, recent_max: int = 200):
        self.index = index
        self._accept: Dict[Pair, int] = defaultdict(int)
        self._recent: Deque[Dict[str, Any]] = deque(maxlen=recent_max)
        self._lock = threading.Lock()

    # Event recording --------------------------------------------------------------
    def record_accept(self, key: str, word: str, max_distance: int = 1) -> bool:
        """
        Record that `word` was picked while `key` was typed.
        With an index attached, the pick is credited to the stored key that
        produced it (exact, completion or fuzzy match; see
        TrieIndex.resolve_key) and picks the index cannot place are dropped.
        Returns True when the event was recorded.
        """
        if is_blank(key) or is_blank(word):
            return False

        typed = normalize_key(key)
        stored = typed
        # learning hook; the index takes its own lock
        if self.index is not None:
            stored = self.index.resolve_key(typed, word, max_distance)
            if stored is None or not self.index.increment_frequency(stored, word):
                logger.debug("ignoring accept of %r for %r: no such pair", word, typed)
                return False

        ev = {
            "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
            "typed": typed,
            "key": stored,
            "word": word,
        }
        with self._lock:
            self._accept[(stored, word)] += 1
            self._recent.append(ev)
        logger.debug("accepted %r for %r (stored key %r)", word, typed, stored)
        return True

    # Stats/queries -------------------------------------------------------------------------
    def accept_count(self, key: str, word: str) -> int:
        if is_blank(key) or is_blank(word):
            return 0
        with self._lock:
            return self._accept.get((normalize_key(key), word), 0)

    def stats(self) -> Dict[str, Any]:
        """Simple stats bundle used by the CLI /stats view."""
        with self._lock:
            top = sorted(self._accept.items(), key=lambda kv: (-kv[1], kv[0]))[:10]
            return {
                "total_events": sum(self._accept.values()),
                "unique_pairs": len(self._accept),
                "top_accepted": [(k, w, n) for (k, w), n in top],
            }

    def dump_recent(self, n: int = 50) -> List[Dict[str, Any]]:
        """Return the last n events."""
        with self._lock:
            return list(self._recent)[-n:] if n > 0 else []

    def reset(self) -> None:
        """Forget recorded events. Frequencies already learned by the index stay."""
        with self._lock:
            self._accept.clear()
            self._recent.clear()
