from swiftsearch.utils.highlight import highlight, split_match


def test_split_match_case_insensitive():
    assert split_match("JavaScript", "java") == [("Java", True), ("Script", False)]


def test_split_match_repeats_and_escapes():
    assert split_match("c++ and c++", "C++") == [("c++", True), (" and ", False), ("c++", True)]


def test_split_match_empty():
    assert split_match("react", "") == [("react", False)]
    assert split_match("react", "vue") == [("react", False)]


def test_highlight_styles_match():
    t = highlight("python", "py")
    assert t.plain == "python"
    assert [(s.start, s.end, str(s.style)) for s in t.spans] == [(0, 2, "bold")]
