from .navigator import SuggestionNavigator

__all__ = ["SuggestionNavigator"]
