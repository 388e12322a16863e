import pytest
from backend.mask import has_uppercase, get_case_mask, apply_case_mask


@pytest.mark.parametrize("s", ["", "enable", "123 == !=", "snake_case-42"])
def test_has_uppercase_false_for_empty_lower_or_symbols(s: str):
    assert has_uppercase(s) is False


@pytest.mark.parametrize("s", ["Enable", "x<=Y", "TRUE"])
def test_has_uppercase_true(s: str):
    assert has_uppercase(s) is True


def test_get_case_mask_flags_uppercase_positions():
    assert get_case_mask("Enable") == [True, False, False, False, False, False]
    assert get_case_mask("aB1_C") == [False, True, False, False, True]
    assert get_case_mask("") == []


@pytest.mark.parametrize("s", ["Enable", "tRuE", "ON", "x == Y"])
def test_apply_own_mask_is_identity(s: str):
    assert apply_case_mask(s, get_case_mask(s)) == s


def test_apply_case_mask_only_uppercases():
    # already uppercase characters are not lowered where the mask is False
    assert apply_case_mask("DisAble", [False] * 7) == "DisAble"
    assert apply_case_mask("disable", [True, False, False]) == "Disable"


def test_apply_case_mask_short_and_long_masks():
    assert apply_case_mask("false", [True, True]) == "FAlse"
    assert apply_case_mask("no", [True, True, True, True]) == "NO"
    assert apply_case_mask("", [True]) == ""
