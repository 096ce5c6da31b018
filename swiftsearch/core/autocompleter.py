# autocompleter.py
"""
AutoCompleter - application facade.

Purpose:
 - Own one PrefixIndex (constructed here, handed to whichever front-end needs it)
 - Bulk-load the dictionary at startup (word file or the built-in list)
 - Simple public API for UI/CLI/tests:
     search(prefix, limit), add_word(word), contains(word), load_words_file(path), stats()
 - Keep the latest suggestion list around for the UI to render
"""

from __future__ import annotations
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from swiftsearch.core.normalizer import clean_line, normalize_term
from swiftsearch.core.trie import PrefixIndex
from swiftsearch.data.words import WORDS
from swiftsearch.utils.config_manager import Config
from swiftsearch.utils.logger_utils import Log


class AutoCompleter:
    """Application facade exposing small API
    Public API:
      - search(prefix: str, limit: Optional[int] = None) -> List[str]
      - add_word(word: str) -> bool
      - contains(word: str) -> bool
      - load_words_file(path) -> int
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        config: Optional[Config] = None,
        log: Optional[Log] = None,
    ):
        self.cfg = config if config is not None else Config()
        self.log = log if log is not None else Log(
            path=self.cfg.get("log_path"), level=self.cfg.get("log_level", "INFO")
        )
        self.index = PrefixIndex()
        self.suggestions: List[str] = []
        self._started_at = time.time()

        if words is not None:
            self._bulk_load(words, source="caller")
        elif self.cfg.get("words_file"):
            self.load_words_file(self.cfg["words_file"])
        else:
            self._bulk_load(WORDS, source="built-in dictionary")

    @property
    def limit(self) -> int:
        return self.cfg.get("limit", 8)

    # Loading ---------------------------------------------------------
    def _bulk_load(self, words: Iterable[str], source: str) -> int:
        with self.log.time_block(f"bulk load ({source})"):
            added = self.index.bulk_load(words)
        self.log.info(f"[AutoCompleter] loaded {added} words from {source}, {len(self.index)} total")
        return added

    def load_words_file(self, path) -> int:
        """One word per line; blank lines and # comments are skipped."""
        path = Path(path)
        if not path.exists():
            self.log.error(f"[AutoCompleter] word file not found: {path}")
            raise FileNotFoundError(f"word file not found: {path}")
        with open(path, "r", encoding="utf8") as f:
            words = [w for w in (clean_line(ln) for ln in f) if w]
        return self._bulk_load(words, source=str(path))

    # Public API ---------------------------------------------------------
    def search(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """Suggestions for what has been typed so far; blank input clears them."""
        if not normalize_term(prefix).strip():
            self.suggestions = []
            return []
        self.suggestions = self.index.prefix_query(prefix, self.limit if limit is None else limit)
        self.log.debug(f"[AutoCompleter] search {prefix!r} -> {len(self.suggestions)} hits")
        return list(self.suggestions)

    def add_word(self, word: str) -> bool:
        """Insert a word, True if it was not known before."""
        word = word.strip()
        if not word:
            return False
        before = len(self.index)
        self.index.insert(word)
        added = len(self.index) > before
        self.log.info(f"[AutoCompleter] add {word!r} ({'new' if added else 'duplicate'})")
        return added

    def contains(self, word: str) -> bool:
        return self.index.contains(word)

    def stats(self) -> Dict[str, Any]:
        return {
            "words": len(self.index),
            "nodes": self.index.node_count,
            "cache": self.index.cache_stats(),
            "uptime_s": round(time.time() - self._started_at, 1),
        }
