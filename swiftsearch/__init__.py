"""
swiftsearch

Per-keystroke prefix autocomplete over a word list: a trie with a bounded,
sorted prefix enumeration and a per-prefix result cache, plus a rich CLI and
a textual search box on top.
"""

from swiftsearch.core import AutoCompleter, PrefixIndex, QueryCache, TrieNode

__all__ = ["AutoCompleter", "PrefixIndex", "QueryCache", "TrieNode"]

__version__ = "0.1.0"
