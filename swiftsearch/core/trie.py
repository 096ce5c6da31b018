# trie.py
# Prefix tree (trie) behind the search box.
# Words are case-folded on the way in, queries walk the tree and enumerate
# completions depth-first in sorted character order, capped at `limit`.
# Results are memoised per prefix in a QueryCache that any insert wipes.

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional

from swiftsearch.core.normalizer import normalize_term
from swiftsearch.core.query_cache import QueryCache

DEFAULT_LIMIT = 8


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_terminal: True if the path from the root spells a whole word
    """

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False


class PrefixIndex:
    """
    Trie + query cache used by the AutoCompleter for:
     - exact membership checks
     - bounded, lexicographically ordered prefix suggestions
    Not thread safe, callers serialise inserts and queries.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self.root = TrieNode()
        self._cache = QueryCache()
        self._size = 0
        self._node_count = 1
        if words is not None:
            self.bulk_load(words)

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.
        Lowercases everything and drops every cached query result,
        even when the word was already present.
        The empty string is ignored, the root never becomes a word.
        """
        word = normalize_term(word)
        if not word:
            return
        self._insert(word)
        self._cache.clear()

    def bulk_load(self, words: Iterable[str]) -> int:
        """Insert every word, returns how many of them were new."""
        before = self._size
        for word in words:
            self._insert(normalize_term(word))
        self._cache.clear()
        return self._size - before

    def _insert(self, word: str) -> None:
        if not word:
            return

        node = self.root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
                self._node_count += 1
            node = nxt
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    # lookup ---------------------------------------------------------
    def contains(self, word: str) -> bool:
        """Exact match only, a bare prefix of a longer word is not a member."""
        node = self._walk(normalize_term(word))
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        """True if at least one stored word begins with `prefix`."""
        if not self._size:
            return False
        return self._walk(normalize_term(prefix)) is not None

    def _walk(self, fragment: str) -> Optional[TrieNode]:
        node = self.root
        for ch in fragment:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # search/traversal ---------------------------------------------------------
    def prefix_query(self, prefix: str, limit: int = DEFAULT_LIMIT) -> List[str]:
        """
        Return up to `limit` words starting with `prefix`, sorted
        lexicographically. An empty prefix gives no suggestions.
        Results (including empty ones) are cached under the lowercased prefix.
        """
        key = normalize_term(prefix)
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError("limit must be an int")
        if not key or limit < 1:
            return []

        cached = self._cache.get(key, limit)
        if cached is not None:
            return cached

        out: List[str] = []
        node = self._walk(key)
        if node is not None:
            self._collect(node, [key], out, limit)
        self._cache.put(key, out, limit)
        return out

    # internal recursive collector ---------------------------------------------------------
    def _collect(
        self, node: TrieNode, path: List[str], results: List[str], limit: int
    ) -> None:
        """DFS in sorted child order, stops as soon as `limit` words are in."""
        if node.is_terminal:
            results.append("".join(path))
            if len(results) >= limit:
                return
        for ch in sorted(node.children):
            if len(results) >= limit:
                return
            path.append(ch)
            self._collect(node.children[ch], path, results, limit)
            path.pop()

    # convenience/debugging -----------------------------------------------------
    def iter_words(self) -> Iterator[str]:
        """Yield every stored word in lexicographic order."""

        def _walk(node: TrieNode, path: List[str]) -> Iterator[str]:
            if node.is_terminal:
                yield "".join(path)
            for ch in sorted(node.children):
                path.append(ch)
                yield from _walk(node.children[ch], path)
                path.pop()

        yield from _walk(self.root, [])

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_stats(self) -> Dict[str, int]:
        return self._cache.stats()

    @property
    def node_count(self) -> int:
        """Nodes allocated so far, root included."""
        return self._node_count

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        """Simple membership check."""
        return isinstance(word, str) and self.contains(word)
