from swiftsearch.core.query_cache import QueryCache


def test_miss_then_hit():
    c = QueryCache()
    assert c.get("ca", 8) is None
    c.put("ca", ["car", "cat"], 8)
    assert c.get("ca", 8) == ["car", "cat"]
    assert c.stats() == {"entries": 1, "hits": 1, "misses": 1}


def test_entry_is_snapshot():
    c = QueryCache()
    src = ["car", "cat"]
    c.put("ca", src, 8)
    src.append("cab")
    got = c.get("ca", 8)
    got.append("junk")
    assert c.get("ca", 8) == ["car", "cat"]


def test_limit_rules():
    c = QueryCache()
    c.put("a", ["a1", "a2"], 2)  # full page, may have been cut short
    assert c.get("a", 1) == ["a1"]
    assert c.get("a", 3) is None
    c.put("b", ["b1"], 5)  # short page, holds every match
    assert c.get("b", 100) == ["b1"]


def test_clear():
    c = QueryCache()
    c.put("a", [], 8)
    assert "a" in c
    c.clear()
    assert len(c) == 0
    assert "a" not in c
