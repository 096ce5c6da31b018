import pytest

from swiftsearch.core.autocompleter import AutoCompleter
from swiftsearch.profiling.profile import benchmark, summarize


def test_benchmark_counts():
    ac = AutoCompleter(words=["alpha", "beta", "gamma"])
    times = benchmark(ac, ["al", "be"], iterations=20, seed=1)
    assert len(times) == 20
    assert all(t >= 0 for t in times)
    assert benchmark(ac, [], iterations=5) == []


def test_cold_benchmark_never_hits_cache():
    ac = AutoCompleter(words=["alpha", "beta"])
    benchmark(ac, ["al"], iterations=10, cold=True)
    assert ac.stats()["cache"]["hits"] == 0
    benchmark(ac, ["al"], iterations=10)
    assert ac.stats()["cache"]["hits"] >= 9


def test_summarize():
    s = summarize([4.0, 1.0, 3.0, 2.0, 10.0, 5.0, 6.0, 7.0, 8.0, 9.0])
    assert s["count"] == 10
    assert s["mean_ms"] == pytest.approx(5.5)
    assert s["median_ms"] == pytest.approx(5.5)
    assert s["p90_ms"] == 9.0
    assert s["max_ms"] == 10.0
    assert summarize([])["count"] == 0


def test_summarize_p90_nearest_rank():
    # 0.9 * 15 = 13.5, nearest rank 14 -> index 13
    s = summarize([float(i) for i in range(15)])
    assert s["p90_ms"] == 13.0
    assert summarize([3.0])["p90_ms"] == 3.0
