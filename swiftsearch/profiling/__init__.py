from .profile import benchmark, summarize

__all__ = ["benchmark", "summarize"]
