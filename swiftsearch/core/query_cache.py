# query_cache.py - memoised prefix query results
#
# One entry per normalised prefix. Each entry remembers the limit it was
# computed with so a later query with a different limit can tell whether the
# stored list still answers it. Entries are tuples; readers get fresh lists.

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

Entry = Tuple[Tuple[str, ...], int]


class QueryCache:
    """Prefix -> (results, limit). Dropped wholesale whenever the trie changes."""

    __slots__ = ("_entries", "hits", "misses")

    def __init__(self) -> None:
        self._entries: Dict[str, Entry] = {}
        self.hits = 0
        self.misses = 0

    def get(self, prefix: str, limit: int) -> Optional[List[str]]:
        """
        Cached answer for (prefix, limit) or None.
        A stored list serves any limit up to the one it was built with, and any
        limit at all when it came back short (it already holds every match).
        """
        entry = self._entries.get(prefix)
        if entry is not None:
            results, built_with = entry
            if limit <= built_with or len(results) < built_with:
                self.hits += 1
                return list(results[:limit])
        self.misses += 1
        return None

    def put(self, prefix: str, results: Sequence[str], limit: int) -> None:
        self._entries[prefix] = (tuple(results), limit)

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> Dict[str, int]:
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._entries
