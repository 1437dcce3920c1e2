# trie.py
# Prefix tree mapping romanized keys to Khmer words.
# Every terminal node keeps a word -> frequency map, so one key can point at
# several words and ranking is driven by how often each pair was seen/chosen.
# A BK-tree over the terminal keys backs fuzzy (typo tolerant) search.

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Tuple

from khmer_transliterator.core.bktree import BKTree

logger = logging.getLogger(__name__)

Word = str
Freq = int
FuzzyCandidate = Tuple[int, int, Word]  # (distance, -freq, word)


def normalize_key(key: str) -> str:
    """Canonical form of a romanized key (case-insensitive)."""
    return key.lower()


def is_blank(s: object) -> bool:
    """True for non-strings, empty and whitespace-only strings."""
    return not isinstance(s, str) or not s.strip()


def rank_by_frequency(freqs: Dict[Word, Freq]) -> List[Word]:
    """
    Order words by frequency (highest first).
    Ties are broken lexicographically on the word so results are reproducible.
    """
    return [w for w, _ in sorted(freqs.items(), key=lambda t: (-t[1], t[0]))]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    values: Khmer word -> frequency, non-empty only where a key ends
    """

    __slots__ = ("children", "values")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.values: Dict[Word, Freq] = {}


class TrieIndex:
    """
    Romanization index used by the Transliterator and the Suggester for:
     - exact lookup of a typed key
     - prefix completion while the user is still typing
     - fuzzy lookup within an edit distance for typos
     - frequency learning from accepted suggestions

    All operations are total: blank or unknown input gives an empty result
    or a no-op, never an exception.

    Concurrency: a single re-entrant lock guards every operation, so readers
    never observe a half-finished insert and concurrent increments are not lost.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._keys = BKTree()
        self._lock = threading.RLock()

    # insertion -----------------------------------------------------
    def insert(self, key: str, value: str, freq: int = 1) -> None:
        """
        Add `freq` to the (key, value) pair, creating the path and the pair
        as needed. Repeated inserts accumulate.
        """
        if is_blank(key) or is_blank(value):
            return
        if freq < 0:
            logger.debug("ignoring negative frequency %d for %r -> %r", freq, key, value)
            return

        k = normalize_key(key)
        with self._lock:
            node = self._root
            for ch in k:
                node = node.children[ch]
            node.values[value] = node.values.get(value, 0) + freq
            self._keys.insert(k)

    # learning ------------------------------------------------------
    def increment_frequency(self, key: str, value: str) -> bool:
        """
        Strengthen an existing pair by exactly one.
        Unknown keys or words are ignored: learning never creates pairs.
        Returns True when a pair was strengthened.
        """
        if is_blank(key) or is_blank(value):
            return False

        with self._lock:
            node = self._walk(normalize_key(key))
            if node is None or value not in node.values:
                return False
            node.values[value] += 1
            return True

    def resolve_key(self, text: str, value: str, max_distance: int = 1) -> Optional[str]:
        """
        Stored key through which `text` reaches `value`, tried in suggestion
        order: the key itself, then the most frequent completion of `text`
        holding `value`, then the closest key within `max_distance` edits.
        None when `value` is not reachable from `text`.
        """
        if is_blank(text) or is_blank(value):
            return None

        q = normalize_key(text)
        with self._lock:
            node = self._walk(q)
            if node is not None:
                if value in node.values:
                    return q
                best: Optional[Tuple[int, str]] = None  # (-freq, key)
                for key, n in self._iter_terminals(node, q):
                    freq = n.values.get(value)
                    if freq is not None and (best is None or (-freq, key) < best):
                        best = (-freq, key)
                if best is not None:
                    return best[1]

            if max_distance < 0:
                return None
            found: Optional[Tuple[int, int, str]] = None  # (dist, -freq, key)
            for key, dist in self._keys.query(q, max_distance):
                n = self._walk(key)
                if n is None or value not in n.values:
                    continue
                cand = (dist, -n.values[value], key)
                if found is None or cand < found:
                    found = cand
            return found[2] if found is not None else None

    # search/traversal ---------------------------------------------------------
    def search_exact(self, key: str) -> List[Word]:
        """Words stored under exactly `key`, most frequent first."""
        if is_blank(key):
            return []

        with self._lock:
            node = self._walk(normalize_key(key))
            if node is None or not node.values:
                return []
            return rank_by_frequency(node.values)

    def search_prefix(self, prefix: str) -> List[Word]:
        """
        Words stored under any key starting with `prefix`.
        A word reachable through several keys has its frequencies summed.
        """
        if is_blank(prefix):
            return []

        with self._lock:
            node = self._walk(normalize_key(prefix))
            if node is None:
                return []

            totals: Dict[Word, Freq] = {}
            stack = [node]
            while stack:
                n = stack.pop()
                for word, freq in n.values.items():
                    totals[word] = totals.get(word, 0) + freq
                stack.extend(n.children.values())
            return rank_by_frequency(totals)

    def search_fuzzy(self, text: str, max_distance: int = 1) -> List[Word]:
        """
        Words whose key lies within `max_distance` edits of `text`.
        Ordered by distance, then frequency (desc), then word. A word that is
        reachable through several keys keeps only its best-ranked occurrence.
        """
        if is_blank(text) or max_distance < 0:
            return []

        q = normalize_key(text)
        with self._lock:
            candidates: List[FuzzyCandidate] = []
            for key, dist in self._keys.query(q, max_distance):
                node = self._walk(key)
                if node is None:
                    continue
                for word, freq in node.values.items():
                    candidates.append((dist, -freq, word))

        candidates.sort()
        out: List[Word] = []
        seen = set()
        for _dist, _neg_freq, word in candidates:
            if word in seen:
                continue
            seen.add(word)
            out.append(word)
        return out

    # inspection ------------------------------------------------------------
    def frequency(self, key: str, value: str) -> int:
        """Stored frequency of a pair, 0 when absent."""
        if is_blank(key) or is_blank(value):
            return 0
        with self._lock:
            node = self._walk(normalize_key(key))
            if node is None:
                return 0
            return node.values.get(value, 0)

    def keys(self) -> List[str]:
        """Every stored key, sorted. (Full walk; for inspection and tests.)"""
        with self._lock:
            return sorted(k for k, _node in self._iter_terminals())

    def pair_count(self) -> int:
        """Number of distinct (key, word) pairs."""
        with self._lock:
            return sum(len(node.values) for _k, node in self._iter_terminals())

    def __len__(self) -> int:
        """Number of distinct keys."""
        with self._lock:
            return len(self._keys)

    def __contains__(self, key: object) -> bool:
        if is_blank(key):
            return False
        with self._lock:
            node = self._walk(normalize_key(key))
            return node is not None and bool(node.values)

    # internal helpers ---------------------------------------------------------
    def _walk(self, key: str) -> Optional[TrieNode]:
        """Follow `key` from the root without creating nodes."""
        node = self._root
        for ch in key:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def _iter_terminals(
        self, start: Optional[TrieNode] = None, prefix: str = ""
    ) -> Iterator[Tuple[str, TrieNode]]:
        """DFS over (key, node) for nodes that end at least one key."""
        stack: List[Tuple[str, TrieNode]] = [(prefix, start or self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.values:
                yield prefix, node
            for ch, child in node.children.items():
                stack.append((prefix + ch, child))
