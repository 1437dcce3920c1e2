# tests/test_trie.py - TrieIndex insert/exact/prefix/learning

import pytest

from khmer_transliterator.core.trie import TrieIndex, rank_by_frequency


# -----------------------------------
# insert / exact
# -----------------------------------
def test_exact_returns_all_words_for_key(index):
    assert set(index.search_exact("jg")) == {"ជាង", "ចង់"}


def test_exact_missing_key_is_empty(index):
    assert index.search_exact("zzz") == []
    assert index.search_exact("ja") == []


def test_exact_inner_node_without_words_is_empty(index):
    # "jon" is a path towards "jong" but ends no key
    assert index.search_exact("jon") == []


@pytest.mark.parametrize("key", ["jg", "JG", "Jg", "jG"])
def test_exact_is_case_insensitive(index, key):
    assert index.search_exact(key) == index.search_exact("jg")


def test_insert_normalizes_key_case():
    idx = TrieIndex()
    idx.insert("BAN", "បាន")
    idx.insert("Ban", "បាន")
    assert idx.keys() == ["ban"]
    assert idx.frequency("ban", "បាន") == 2


@pytest.mark.parametrize("key, word", [("", "x"), ("   ", "x"), ("k", ""), ("k", "  \t")])
def test_blank_inserts_are_ignored(key, word):
    idx = TrieIndex()
    idx.insert(key, word)
    assert len(idx) == 0
    assert idx.keys() == []


def test_frequency_accumulates():
    a = TrieIndex()
    a.insert("jg", "ជាង")
    a.insert("jg", "ជាង")
    b = TrieIndex()
    b.insert("jg", "ជាង", 2)
    assert a.frequency("jg", "ជាង") == b.frequency("jg", "ជាង") == 2


def test_negative_frequency_is_ignored():
    idx = TrieIndex()
    idx.insert("jg", "ជាង", 3)
    idx.insert("jg", "ជាង", -5)
    assert idx.frequency("jg", "ជាង") == 3


def test_exact_orders_by_frequency_then_word():
    idx = TrieIndex()
    idx.insert("k", "b", 2)
    idx.insert("k", "a", 2)
    idx.insert("k", "c", 5)
    assert idx.search_exact("k") == ["c", "a", "b"]


def test_rank_by_frequency_tie_break():
    assert rank_by_frequency({"y": 1, "x": 1, "z": 3}) == ["z", "x", "y"]


# -----------------------------------
# prefix
# -----------------------------------
def test_prefix_sums_frequencies_across_keys():
    idx = TrieIndex()
    idx.insert("jg", "A")
    idx.insert("jong", "A", 2)
    idx.insert("jo", "B", 2)
    assert idx.search_prefix("j") == ["A", "B"]
    assert idx.search_prefix("jo") == ["A", "B"]  # A=2, B=2 -> tie broken by word


def test_prefix_includes_node_itself(index):
    assert "ទៅ" in index.search_prefix("tov")


def test_prefix_missing_path_is_empty(index):
    assert index.search_prefix("xq") == []
    assert index.search_prefix("") == []
    assert index.search_prefix("  ") == []


@pytest.mark.parametrize("key", ["ban", "jg", "ch", "j", "t", "slanh", "nothing"])
def test_exact_is_subset_of_prefix(index, key):
    assert set(index.search_exact(key)) <= set(index.search_prefix(key))


def test_prefix_is_case_insensitive(index):
    assert index.search_prefix("CH") == index.search_prefix("ch")


# -----------------------------------
# learning
# -----------------------------------
def test_increment_reorders_exact():
    idx = TrieIndex()
    idx.insert("jg", "ជាង", 1)
    idx.insert("jg", "ចង់", 1)
    assert set(idx.search_exact("jg")) == {"ជាង", "ចង់"}
    for _ in range(3):
        idx.increment_frequency("jg", "ចង់")
    assert idx.search_exact("jg")[0] == "ចង់"

    for _ in range(4):
        idx.increment_frequency("JG", "ជាង")
    assert idx.search_exact("jg") == ["ជាង", "ចង់"]


def test_increment_only_touches_one_pair(index):
    before = index.frequency("jg", "ជាង")
    other = index.frequency("jg", "ចង់")
    assert index.increment_frequency("jg", "ជាង") is True
    assert index.frequency("jg", "ជាង") == before + 1
    assert index.frequency("jg", "ចង់") == other
    assert index.frequency("cheang", "ជាង") == 1


@pytest.mark.parametrize(
    "key, word",
    [("jg", "unknown"), ("nokey", "ជាង"), ("j", "ជាង"), ("", "ជាង"), ("jg", " ")],
)
def test_increment_never_creates_pairs(index, key, word):
    before = {k: index.search_exact(k) for k in ("jg", "j", "nokey")}
    pairs = index.pair_count()
    assert index.increment_frequency(key, word) is False
    assert {k: index.search_exact(k) for k in ("jg", "j", "nokey")} == before
    assert index.pair_count() == pairs
    assert index.frequency(key, word) == 0


@pytest.mark.parametrize(
    "text, word, expected",
    [
        ("JG", "ជាង", "jg"),  # exact
        ("ch", "ជាង", "cheang"),  # completion
        ("ch", "ចង់", "chong"),
        ("j", "ចង់", "jg"),  # equal frequency: smaller key
        ("slah", "ស្លាញ់", "slanh"),  # fuzzy
        ("jg", "unknown", None),
        ("xyz", "ជាង", None),
        ("", "ជាង", None),
    ],
)
def test_resolve_key(index, text, word, expected):
    assert index.resolve_key(text, word) == expected


def test_resolve_key_prefers_frequent_completion(index):
    index.increment_frequency("jong", "ចង់")
    assert index.resolve_key("j", "ចង់") == "jong"


def test_resolve_key_respects_distance(index):
    assert index.resolve_key("slah", "ស្លាញ់", 0) is None
    assert index.resolve_key("slh", "ស្លាញ់", 1) is None
    assert index.resolve_key("slh", "ស្លាញ់", 2) == "slanh"


# -----------------------------------
# totality / inspection
# -----------------------------------
@pytest.mark.parametrize("junk", ["", " ", "\n\t", "🙂", "ខ្មែរ", "a b", None, 42])
def test_operations_are_total(index, junk):
    assert isinstance(index.search_exact(junk), list)
    assert isinstance(index.search_prefix(junk), list)
    assert isinstance(index.search_fuzzy(junk, 1), list)
    index.increment_frequency(junk, "ជាង")
    index.insert(junk, "")


def test_len_contains_and_keys(index):
    assert len(index) == 10  # distinct keys in SAMPLE_PAIRS
    assert "JG" in index
    assert "jon" not in index
    assert index.keys() == sorted(index.keys())
    assert all(k == k.lower() for k in index.keys())
