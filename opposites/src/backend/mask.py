from __future__ import annotations
from typing import List, Sequence

CaseMask = List[bool]


def has_uppercase(s: str) -> bool:
    """True if any character of s is an uppercase letter."""
    return any(ch.isupper() for ch in s)


def get_case_mask(s: str) -> CaseMask:
    """One flag per character: True where s has an uppercase letter."""
    return [ch.isupper() for ch in s]


def apply_case_mask(s: str, mask: Sequence[bool]) -> str:
    """
    Uppercase s wherever mask is set.

    Only uppercase is applied; other characters are kept as they are.
    Positions past the end of a short mask stay unchanged and surplus
    mask entries are ignored.
    """
    out: list[str] = []
    for i, ch in enumerate(s):
        out.append(ch.upper() if i < len(mask) and mask[i] else ch)
    return "".join(out)
