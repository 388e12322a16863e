from __future__ import annotations
from typing import List, Mapping
from .models import MatchResult
from .mask import has_uppercase

# Returned by find_word_in_line() when the word is not near the cursor
NOT_FOUND = -1


def lower_same_length(s: str) -> str:
    """Lowercase s per character, keeping characters whose lowercase form is longer (e.g. "İ")."""
    out: list[str] = []
    for ch in s:
        lc = ch.lower()
        out.append(lc if len(lc) == 1 else ch)
    return "".join(out)


def find_word_in_line(line: str, col: int, word: str) -> int:
    """
    /* ~~~ 1-based index of `word` in `line` touching column `col`, or NOT_FOUND ~~~ */

    The occurrence must start between col - (len(word) - 1) and col:

            |
        false            <- cursor at word end
          false          <- cursor in word
            false        <- cursor at word start
            |
    45678901234567890123 <- column in line

    Only the first occurrence at or after the lower bound is considered.
    Plain substring search; word boundaries are not respected.
    """
    if not word:
        return NOT_FOUND
    min_idx = max(1, col - (len(word) - 1))
    pos = line.find(word, min_idx - 1)
    if pos == -1:
        return NOT_FOUND
    idx = pos + 1
    return idx if idx <= col else NOT_FOUND


def find_results(
    line: str,
    col: int,
    opposites: Mapping[str, str],
    use_case_sensitive_mask: bool,
) -> List[MatchResult]:
    """Every dictionary word (either direction) near the cursor, shortest first."""
    # indexes found in the lowered line must stay valid in the original
    lowered = lower_same_length(line)
    results: List[MatchResult] = []

    for w, ow in opposites.items():
        for word, opposite_word in ((w, ow), (ow, w)):
            # mask only pairs without uppercase letters, so authored casing survives
            use_mask = use_case_sensitive_mask and not (
                has_uppercase(word) or has_uppercase(opposite_word)
            )
            idx = find_word_in_line(lowered if use_mask else line, col, word)
            if idx != NOT_FOUND:
                results.append(MatchResult(word, opposite_word, idx, use_mask))

    # by length, then alphabetically
    results.sort(key=lambda r: (len(r.word), r.word))
    return results
