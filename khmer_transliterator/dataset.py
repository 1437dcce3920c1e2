# khmer_transliterator/dataset.py
"""
Dataset loader: flat corpus -> TrieIndex.

Corpus format, one entry per line:
    <khmer word>: <romanization1>, <romanization2>, ...

Parsing is deliberately lenient. Blank lines, lines without ':' and lines
with an empty word or empty right-hand side are skipped without a report;
empty romanization tokens are skipped too. Every surviving pair is inserted
at frequency 1, so a pair that appears on several lines accumulates.

A missing or unreadable corpus gives an empty index instead of an error,
so the engine stays queryable (it just has nothing to suggest).
"""

from __future__ import annotations

import logging
import os
from importlib import resources
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from khmer_transliterator.core.trie import TrieIndex
from khmer_transliterator.utils.logger_utils import Log

logger = logging.getLogger(__name__)

PACKAGE = "khmer_transliterator"
DATASET_RESOURCE = "data/dataset.txt"

Entry = Tuple[str, List[str]]  # (khmer word, [romanizations])
Pair = Tuple[str, str]  # (romanization, khmer word)


def parse_line(line: str) -> Optional[Entry]:
    """Parse one corpus line; None when the line is blank or malformed."""
    if not line or not line.strip():
        return None

    word, sep, rest = line.partition(":")
    if not sep:
        return None

    word = word.strip()
    rest = rest.strip()
    if not word or not rest:
        return None

    keys = [tok.strip().lower() for tok in rest.split(",")]
    keys = [k for k in keys if k]
    if not keys:
        return None
    return word, keys


def iter_pairs(lines: Iterable[str]) -> Iterator[Pair]:
    """Yield (romanization, word) for every usable token, in corpus order."""
    for line in lines:
        entry = parse_line(line)
        if entry is None:
            continue
        word, keys = entry
        for key in keys:
            yield key, word


def parse_corpus(lines: Iterable[str]) -> Dict[str, List[str]]:
    """
    Romanization -> Khmer words, in corpus order.
    A word is listed once per occurrence, so repeated pairs show up repeated.
    """
    mapping: Dict[str, List[str]] = {}
    for key, word in iter_pairs(lines):
        mapping.setdefault(key, []).append(word)
    return mapping


def build_index(source: Union[Iterable[Pair], Dict[str, List[str]]]) -> TrieIndex:
    """Fresh index from (key, word) pairs or a parse_corpus() mapping."""
    index = TrieIndex()
    if isinstance(source, dict):
        pairs: Iterable[Pair] = (
            (key, word) for key, words in source.items() for word in words
        )
    else:
        pairs = source
    for key, word in pairs:
        index.insert(key, word)
    return index


def read_corpus(path: Optional[Union[str, "os.PathLike[str]"]] = None) -> List[str]:
    """
    Corpus lines from `path`, or from the packaged dataset when path is None.
    Raises OSError / UnicodeDecodeError; load_dataset() handles those.
    """
    if path is None:
        text = resources.files(PACKAGE).joinpath(DATASET_RESOURCE).read_text(
            encoding="utf-8-sig"
        )
    else:
        with open(path, "r", encoding="utf-8-sig") as fh:
            text = fh.read()
    return text.splitlines()


def load_dataset(
    path: Optional[Union[str, "os.PathLike[str]"]] = None, *, strict: bool = False
) -> TrieIndex:
    """
    Build a complete index from the corpus.
    The index is built off to the side and only returned once fully populated;
    on a read failure an empty index is returned instead, or the error is
    re-raised when `strict` is set.
    """
    source = path if path is not None else f"<package>/{DATASET_RESOURCE}"
    logger.debug("loading dataset from %s", source)
    try:
        with Log.time_block("dataset load"):
            lines = read_corpus(path)
            index = build_index(iter_pairs(lines))
    except (OSError, UnicodeDecodeError) as e:
        if strict:
            raise
        logger.warning("could not load dataset %s: %s; starting with an empty index", source, e)
        return TrieIndex()

    logger.info(
        "loaded %d keys (%d pairs) from %s", len(index), index.pair_count(), source
    )
    return index
