# tests/test_trie.py
# unit tests for PrefixIndex: insert/contains/prefix_query and cache behaviour

import pytest
from swiftsearch.core.trie import PrefixIndex, TrieNode


@pytest.fixture
def index():
    return PrefixIndex(["cat", "car", "cart", "dog"])


def test_prefix_query_sorted(index):
    assert index.prefix_query("ca", 8) == ["car", "cart", "cat"]


def test_prefix_query_limit(index):
    assert index.prefix_query("ca", 2) == ["car", "cart"]
    assert index.prefix_query("ca", 1) == ["car"]


def test_empty_prefix_gives_nothing(index):
    assert index.prefix_query("", 8) == []


def test_unknown_prefix_gives_nothing(index):
    assert index.prefix_query("xyz", 8) == []
    # walk stops on the first missing char even deep in a branch
    assert index.prefix_query("cax", 8) == []


def test_prefix_itself_included_when_word(index):
    assert index.prefix_query("car", 8) == ["car", "cart"]
    assert index.prefix_query("cart", 8) == ["cart"]


def test_default_limit_is_eight():
    idx = PrefixIndex([f"w{c}" for c in "abcdefghijkl"])
    assert len(idx.prefix_query("w")) == 8


def test_limit_below_one(index):
    assert index.prefix_query("ca", 0) == []
    assert index.prefix_query("ca", -3) == []
    assert index.cache_stats()["entries"] == 0


def test_limit_must_be_int(index):
    with pytest.raises(TypeError):
        index.prefix_query("ca", "2")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        index.prefix_query("ca", True)  # type: ignore[arg-type]


def test_contains_exact_only():
    idx = PrefixIndex(["cat"])
    assert idx.contains("cat")
    assert not idx.contains("ca")
    assert not idx.contains("cats")
    assert not idx.contains("dog")
    assert "cat" in idx
    assert 42 not in idx


def test_case_insensitive():
    idx = PrefixIndex()
    idx.insert("Java")
    idx.insert("JavaScript")
    assert idx.contains("java")
    assert idx.contains("JAVA")
    assert idx.prefix_query("JA", 8) == idx.prefix_query("ja", 8) == ["java", "javascript"]


def test_duplicate_insert_is_idempotent(index):
    before = index.prefix_query("ca", 8)
    nodes = index.node_count
    index.insert("cat")
    index.insert("CAT")
    assert index.contains("cat")
    assert len(index) == 4
    assert index.node_count == nodes
    assert index.prefix_query("ca", 8) == before


def test_insert_invalidates_cache():
    idx = PrefixIndex()
    idx.insert("cat")
    assert idx.prefix_query("ca") == ["cat"]
    idx.insert("car")
    assert idx.prefix_query("ca") == ["car", "cat"]


def test_duplicate_insert_still_clears_cache(index):
    index.prefix_query("ca", 8)
    assert index.cache_stats()["entries"] == 1
    index.insert("cat")
    assert index.cache_stats()["entries"] == 0


def test_missing_prefix_result_is_cached(index):
    assert index.prefix_query("zz", 8) == []
    assert index.prefix_query("zz", 8) == []
    stats = index.cache_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    # and a later insert makes it findable
    index.insert("zzz")
    assert index.prefix_query("zz", 8) == ["zzz"]


def test_repeated_query_is_a_cache_hit(index):
    first = index.prefix_query("ca", 8)
    second = index.prefix_query("CA", 8)
    assert first == second
    assert index.cache_stats()["hits"] == 1


def test_returned_list_does_not_alias_cache(index):
    out = index.prefix_query("ca", 8)
    out.append("bogus")
    out.clear()
    assert index.prefix_query("ca", 8) == ["car", "cart", "cat"]


def test_cached_entry_with_smaller_limit_is_not_reused(index):
    assert index.prefix_query("ca", 1) == ["car"]
    assert index.prefix_query("ca", 3) == ["car", "cart", "cat"]
    # the wider answer now serves narrower queries
    assert index.prefix_query("ca", 2) == ["car", "cart"]
    assert index.cache_stats()["hits"] == 1


def test_complete_cached_entry_serves_bigger_limit(index):
    assert index.prefix_query("ca", 8) == ["car", "cart", "cat"]
    assert index.prefix_query("ca", 50) == ["car", "cart", "cat"]
    assert index.cache_stats()["hits"] == 1


def test_empty_string_insert_ignored():
    idx = PrefixIndex()
    idx.insert("")
    assert not idx.root.is_terminal
    assert len(idx) == 0
    assert not idx.contains("")


def test_empty_string_insert_keeps_cache():
    idx = PrefixIndex(["cat"])
    idx.prefix_query("ca")
    idx.insert("")
    assert idx.cache_stats()["entries"] == 1
    assert idx.prefix_query("ca") == ["cat"]
    assert idx.cache_stats()["hits"] == 1


def test_non_string_rejected():
    idx = PrefixIndex()
    with pytest.raises(TypeError):
        idx.insert(123)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        idx.prefix_query(None)  # type: ignore[arg-type]


def test_bulk_load_counts_new_words():
    idx = PrefixIndex()
    assert idx.bulk_load(["b", "a", "B", "c", ""]) == 3
    assert idx.bulk_load(["a", "d"]) == 1
    assert list(idx.iter_words()) == ["a", "b", "c", "d"]


def test_bulk_load_order_independent():
    words = ["tea", "ten", "to", "inn", "in", "i", "tedious"]
    a = PrefixIndex(words)
    b = PrefixIndex(reversed(words))
    assert list(a.iter_words()) == list(b.iter_words())
    assert a.node_count == b.node_count
    for p in ("t", "te", "i", "in"):
        assert a.prefix_query(p, 8) == b.prefix_query(p, 8)


def test_results_sorted_regardless_of_insert_order():
    idx = PrefixIndex(["zeta", "alpha", "beta", "alphabet", "al", "b"])
    assert idx.prefix_query("a", 8) == ["al", "alpha", "alphabet"]
    assert list(idx.iter_words()) == sorted(idx.iter_words())


def test_round_trip_every_prefix():
    words = ["python", "pytest", "pyramid", "pandas", "polars", "pip"]
    idx = PrefixIndex(words)
    for w in words:
        assert idx.contains(w)
        for i in range(1, len(w) + 1):
            assert w in idx.prefix_query(w[:i], len(words))


def test_starts_with(index):
    assert index.starts_with("ca")
    assert index.starts_with("CART")
    assert not index.starts_with("cb")
    assert index.starts_with("")
    assert not PrefixIndex().starts_with("")


def test_traversal_stops_at_limit(monkeypatch):
    idx = PrefixIndex(["a" + c for c in "abcdefghij"] + ["b" + c for c in "abcdefghij"])
    visited = []
    real = PrefixIndex._collect

    def spy(self, node, path, results, limit):
        visited.append("".join(path))
        return real(self, node, path, results, limit)

    monkeypatch.setattr(PrefixIndex, "_collect", spy)
    assert idx.prefix_query("a", 2) == ["aa", "ab"]
    # root of the prefix plus the two children that produced results
    assert visited == ["a", "aa", "ab"]


def test_node_count_tracks_allocations():
    idx = PrefixIndex()
    assert idx.node_count == 1
    idx.insert("car")
    assert idx.node_count == 4
    idx.insert("cart")
    assert idx.node_count == 5


def test_trie_node_defaults():
    node = TrieNode()
    assert node.children == {}
    assert node.is_terminal is False
