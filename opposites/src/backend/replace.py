from __future__ import annotations
from .models import MatchResult
from .mask import get_case_mask, apply_case_mask


def replace_word_in_line(line: str, result: MatchResult) -> str:
    """
    Return `line` with result.word at result.idx swapped for its opposite.

    `result` must come from find_results() on the same line.
    """
    start = result.idx - 1
    end = start + len(result.word)
    new_word = result.opposite_word
    if result.use_mask:
        new_word = apply_case_mask(new_word, get_case_mask(line[start:end]))
    return line[:start] + new_word + line[end:]
