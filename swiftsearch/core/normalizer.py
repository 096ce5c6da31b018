# swiftsearch/core/normalizer.py


def normalize_term(s: str) -> str:
    """Case-fold a word or prefix. Nothing else is touched, not even whitespace."""
    if not isinstance(s, str):
        raise TypeError("expected a str, got %s" % type(s).__name__)
    return s.lower()


def clean_line(line: str) -> str:
    """Word-file line -> word ('' for blanks and # comments)."""
    s = line.strip()
    if not s or s.startswith("#"):
        return ""
    return s
