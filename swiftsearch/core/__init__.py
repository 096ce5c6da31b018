"""
swiftsearch.core

The prefix search engine behind the search box.
Contains:
 - the trie and its bounded prefix enumeration (PrefixIndex, TrieNode)
 - the per-prefix result cache (QueryCache)
 - the application facade the front-ends talk to (AutoCompleter)
"""

from .trie import PrefixIndex, TrieNode, DEFAULT_LIMIT
from .query_cache import QueryCache
from .autocompleter import AutoCompleter

__all__ = [
    "PrefixIndex",
    "TrieNode",
    "QueryCache",
    "AutoCompleter",
    "DEFAULT_LIMIT",
]
