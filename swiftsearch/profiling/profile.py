# profile.py - query latency measurement shared by the CLI /bench command and tools/profile_suggest.py

import math
import random
import statistics
import time
from typing import Dict, List, Optional, Sequence


def benchmark(ac, prefixes: Sequence[str], iterations: int = 200, limit: Optional[int] = None,
              cold: bool = False, seed: Optional[int] = None) -> List[float]:
    """
    Run `iterations` random prefix queries, return per-query latency in ms.
    cold=True empties the query cache before every call so each one walks the trie.
    """
    if not prefixes or iterations < 1:
        return []
    rng = random.Random(seed)
    times = []
    for _ in range(iterations):
        q = rng.choice(prefixes)
        if cold:
            ac.index.clear_cache()
        t0 = time.perf_counter()
        ac.search(q, limit)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def summarize(times: Sequence[float]) -> Dict[str, float]:
    if not times:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "p90_ms": 0.0, "max_ms": 0.0}
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(math.ceil(0.9 * len(times_sorted)) - 1, 0)],  # nearest rank
        "max_ms": times_sorted[-1],
    }
