# bktree.py
# BK-tree over romanization keys for typo-tolerant lookup.
# The TrieIndex keeps one of these alongside the trie so fuzzy search
# does not have to compute an edit distance against every stored key.
# - Keys are stored as given; the caller normalizes (lowercase) first.
# - Query uses an explicit stack (no recursion) and prunes using the
#   triangle inequality of edit distance.

from typing import Dict, Iterable, List, Optional, Tuple

from khmer_transliterator.core.distance import levenshtein


class BKTree:
    """BK-tree for approximate key lookup."""

    class Node:
        __slots__ = ("key", "children")

        def __init__(self, key: str):
            self.key = key
            self.children: Dict[int, "BKTree.Node"] = {}

    def __init__(self):
        self.root: Optional[BKTree.Node] = None
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, key: str) -> bool:
        """
        Insert a key. Returns True when the key was new, False when it was
        already present (or empty).
        """
        if not key:
            return False

        if self.root is None:
            self.root = BKTree.Node(key)
            self._size = 1
            return True

        node = self.root
        while True:
            d = levenshtein(key, node.key)
            if d == 0:
                return False
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(key)
                self._size += 1
                return True
            node = child

    def insert_many(self, keys: Iterable[str]) -> None:
        for k in keys:
            self.insert(k)

    # query ---------------------------------------------------------------------------
    def query(self, key: str, max_dist: int = 1) -> List[Tuple[str, int]]:
        """
        Return list of (key, distance) for stored keys within max_dist of `key`.
        Sorted by (distance, key) so callers get a stable order.
        Distances must be exact here (no cutoff) or the pruning window breaks.
        """
        if not key or self.root is None or max_dist < 0:
            return []

        results: List[Tuple[str, int]] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            d = levenshtein(key, node.key)
            if d <= max_dist:
                results.append((node.key, d))

            # only children whose edge label lies in [d - max_dist, d + max_dist]
            low = max(1, d - max_dist)
            high = d + max_dist
            for dist_key, child in node.children.items():
                if low <= dist_key <= high:
                    stack.append(child)

        results.sort(key=lambda item: (item[1], item[0]))
        return results

    # utilities -------------------------------------------------------------------
    def __contains__(self, key: str) -> bool:
        return any(d == 0 for _k, d in self.query(key, 0))

    def __len__(self) -> int:
        return self._size

    def keys(self) -> List[str]:
        """All stored keys, unsorted."""
        out: List[str] = []
        if not self.root:
            return out
        stack = [self.root]
        while stack:
            n = stack.pop()
            out.append(n.key)
            stack.extend(n.children.values())
        return out
