# tests/conftest.py - shared fixtures

import pytest

from khmer_transliterator.core.transliterator import Transliterator
from khmer_transliterator.core.trie import TrieIndex

SAMPLE_PAIRS = [
    ("ban", "បាន"),
    ("baan", "បាន"),
    ("jg", "ជាង"),
    ("cheang", "ជាង"),
    ("jeang", "ជាង"),
    ("jg", "ចង់"),
    ("jong", "ចង់"),
    ("chong", "ចង់"),
    ("slanh", "ស្លាញ់"),
    ("tov", "ទៅ"),
    ("tow", "ទៅ"),
]

CORPUS = """\
បាន: ban, baan
ជាង: cheang, jeang, jg

this line has no colon
: orphan, romanizations
ចង់:
ចង់: Chong, JONG, , jg
ទៅ: tov, tow
ទៅ: tov
"""


@pytest.fixture
def index():
    idx = TrieIndex()
    for key, word in SAMPLE_PAIRS:
        idx.insert(key, word)
    return idx


@pytest.fixture
def transliterator(index):
    return Transliterator(index)


@pytest.fixture
def corpus_file(tmp_path):
    p = tmp_path / "dataset.txt"
    p.write_text(CORPUS, encoding="utf-8")
    return p
