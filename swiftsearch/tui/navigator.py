# navigator.py
# Keyboard state for the suggestion dropdown, kept apart from the widgets so
# the rules can be tested without a terminal:
#  - a new query resets the highlight and opens the list if anything was typed
#  - Up/Down wrap around the ends
#  - Enter picks the highlighted word, Escape just closes

from __future__ import annotations
from typing import List, Optional, Sequence


class SuggestionNavigator:
    """Query text, current suggestions and which one (if any) is highlighted."""

    def __init__(self) -> None:
        self.query = ""
        self.suggestions: List[str] = []
        self.active_index = -1
        self.is_open = False

    def update(self, query: str, suggestions: Sequence[str]) -> None:
        self.query = query
        self.suggestions = list(suggestions)
        self.active_index = -1
        self.is_open = bool(query)

    @property
    def visible(self) -> bool:
        return self.is_open and bool(self.suggestions)

    @property
    def active(self) -> Optional[str]:
        if 0 <= self.active_index < len(self.suggestions):
            return self.suggestions[self.active_index]
        return None

    def move_down(self) -> None:
        if not self.visible:
            return
        last = len(self.suggestions) - 1
        self.active_index = self.active_index + 1 if self.active_index < last else 0

    def move_up(self) -> None:
        if not self.visible:
            return
        last = len(self.suggestions) - 1
        self.active_index = self.active_index - 1 if self.active_index > 0 else last

    def select(self) -> Optional[str]:
        """Take the highlighted word, it becomes the query and the list closes."""
        if not self.visible:
            return None
        word = self.active
        if word is None:
            return None
        self.query = word
        self.is_open = False
        self.active_index = -1
        return word

    def close(self) -> None:
        self.is_open = False
