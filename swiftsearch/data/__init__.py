from .words import WORDS

__all__ = ["WORDS"]
