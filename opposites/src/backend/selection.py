from __future__ import annotations
from typing import Callable, List, Optional, Sequence
from .models import MatchResult

# A selector gets the ranked results and returns a 1-based choice or CANCEL
Selector = Callable[[Sequence[MatchResult]], Optional[int]]
CANCEL = None


def format_choices(results: Sequence[MatchResult]) -> List[str]:
    choices = ["Multiple results found:"]
    for i, r in enumerate(results, start=1):
        choices.append(f"{i}. {r.summary}")
    return choices


def first_choice(results: Sequence[MatchResult]) -> Optional[int]:
    return 1 if results else CANCEL


def select_result(results: Sequence[MatchResult], selector: Selector) -> Optional[MatchResult]:
    """
    Pick one result:
      - none     -> None
      - one      -> that result, selector not called
      - several  -> selector's choice; CANCEL, 0 or an out-of-range index -> None
    """
    if not results:
        return None
    if len(results) == 1:
        return results[0]

    choice = selector(results)
    if choice is CANCEL or not 1 <= choice <= len(results):
        return None
    return results[choice - 1]


def parse_choice(raw: str) -> Optional[int]:
    """Turn typed input into a selector answer; blank or non-numeric means cancel."""
    raw = raw.strip()
    if not raw.isdigit():
        return CANCEL
    n = int(raw)
    return n if n > 0 else CANCEL
