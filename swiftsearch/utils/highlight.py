# highlight.py - mark the typed fragment inside a suggestion

import re
from typing import List, Tuple

from rich.text import Text


def split_match(text: str, match: str) -> List[Tuple[str, bool]]:
    """
    Split `text` around every case-insensitive occurrence of `match`.
    split_match("JavaScript", "java") -> [("Java", True), ("Script", False)]
    """
    if not match:
        return [(text, False)]
    parts = re.split(f"({re.escape(match)})", text, flags=re.IGNORECASE)
    lowered = match.lower()
    return [(p, p.lower() == lowered) for p in parts if p]


def highlight(text: str, match: str, style: str = "bold") -> Text:
    """Rich Text with the matched pieces styled."""
    out = Text()
    for part, hit in split_match(text, match):
        out.append(part, style=style if hit else None)
    return out
