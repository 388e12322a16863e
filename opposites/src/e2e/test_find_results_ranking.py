from backend.models import MatchResult
from backend.search import find_results


def test_single_pair_match():
    rows = find_results("set true value", 6, {"true": "false"}, True)
    assert rows == [MatchResult("true", "false", 5, True)]


def test_match_on_opposite_direction():
    rows = find_results("set false value", 7, {"true": "false"}, True)
    assert rows == [MatchResult("false", "true", 5, True)]


def test_empty_dictionary_yields_nothing():
    assert find_results("set true value", 6, {}, True) == []
    assert find_results("", 1, {}, False) == []


def test_sorted_by_length_then_alphabetically():
    opposites = {"<": ">", "<=": ">=", "==": "!=", "a<=b": "a>b"}
    rows = find_results("a<=b", 2, opposites, False)
    assert [r.word for r in rows] == ["<", "<=", "a<=b"]
    assert [r.idx for r in rows] == [2, 2, 1]


def test_equal_length_ties_break_alphabetically():
    rows = find_results("xyz", 2, {"xy": "ab", "yz": "cd"}, False)
    assert [r.word for r in rows] == ["xy", "yz"]


def test_ranking_is_deterministic_and_independent_of_order():
    a = {"on": "off", "button": "knob", "to": "from"}
    b = dict(reversed(list(a.items())))
    line = "button to"
    first = find_results(line, 5, a, True)
    assert first == find_results(line, 5, a, True)
    assert first == find_results(line, 5, b, True)
    # "to" also occurs inside "button" (columns 4..5)
    assert [r.word for r in first] == ["on", "to", "button"]


def test_mask_only_for_all_lowercase_pairs():
    rows = find_results("TRUE", 1, {"true": "false", "True": "False"}, True)
    # "true"/"false" is masked and matches case-insensitively; "True" does not match "TRUE"
    assert rows == [MatchResult("true", "false", 1, True)]


def test_mask_disabled_searches_verbatim():
    assert find_results("Enable", 1, {"enable": "disable"}, False) == []
    rows = find_results("ENABLE", 1, {"ENABLE": "disable"}, False)
    assert rows == [MatchResult("ENABLE", "disable", 1, False)]


def test_identical_matches_from_different_pairs_are_kept():
    rows = find_results("on", 1, {"on": "off", "no": "on"}, False)
    # both are "on" at column 1; equal keys keep collection order
    assert [r.summary for r in rows] == ["on -> off", "on -> no"]


def test_masked_search_keeps_indexes_of_length_changing_letters():
    # "İ".lower() is two characters; the lowered line must keep the original length
    rows = find_results("İ true", 4, {"true": "false"}, True)
    assert rows == [MatchResult("true", "false", 3, True)]


def test_lower_same_length():
    from backend.search import lower_same_length
    assert lower_same_length("İ TRUE") == "İ true"
    assert len(lower_same_length("İİx")) == 3
