from __future__ import annotations
import re
from typing import List, Optional, Sequence, Tuple

SNAKE = "snake"                       # foo_bar
SCREAMING_SNAKE = "screaming_snake"   # FOO_BAR
KEBAB = "kebab"                       # foo-bar
CAMEL = "camel"                       # fooBar
PASCAL = "pascal"                     # FooBar

CASE_TYPES = (SNAKE, SCREAMING_SNAKE, KEBAB, CAMEL, PASCAL)

_IDENT_CHAR = re.compile(r"[A-Za-z0-9_\-]")

# /* ~~~ acronym run | capitalized or lower word | trailing caps ~~~ */
_PART = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")


def split_words(word: str) -> List[str]:
    parts: List[str] = []
    for chunk in re.split(r"[_\-]+", word):
        parts.extend(_PART.findall(chunk))
    return parts


def detect_case_type(word: str) -> Optional[str]:
    if len(split_words(word)) < 2:
        return None
    has_lower = any(ch.islower() for ch in word)
    has_upper = any(ch.isupper() for ch in word)
    if "_" in word and "-" not in word:
        if not has_upper:
            return SNAKE
        if not has_lower:
            return SCREAMING_SNAKE
        return None
    if "-" in word:
        return KEBAB if "_" not in word and not has_upper else None
    if word[0].islower():
        return CAMEL
    if word[0].isupper() and has_lower:
        return PASCAL
    return None


def format_case(parts: Sequence[str], case_type: str) -> str:
    lower = [p.lower() for p in parts]
    if case_type == SNAKE:
        return "_".join(lower)
    if case_type == SCREAMING_SNAKE:
        return "_".join(p.upper() for p in parts)
    if case_type == KEBAB:
        return "-".join(lower)
    if case_type == CAMEL:
        return lower[0] + "".join(p.capitalize() for p in lower[1:])
    if case_type == PASCAL:
        return "".join(p.capitalize() for p in lower)
    raise ValueError(f"unknown case type: {case_type!r}")


def next_case_type(word: str, case_types: Sequence[str] = CASE_TYPES) -> Optional[str]:
    """`word` rendered in the case type following its current one, or None."""
    current = detect_case_type(word)
    if current is None or not case_types:
        return None
    parts = split_words(word)
    start = case_types.index(current) + 1 if current in case_types else 0
    for step in range(len(case_types)):
        candidate = format_case(parts, case_types[(start + step) % len(case_types)])
        if candidate != word:
            return candidate
    return None


def find_identifier(line: str, col: int) -> Optional[Tuple[int, str]]:
    """(1-based start, identifier) of the identifier under the cursor, or None."""
    i = col - 1
    # a cursor resting just past the identifier still selects it
    if not (0 <= i < len(line) and _IDENT_CHAR.match(line[i])):
        i -= 1
    if not 0 <= i < len(line) or not _IDENT_CHAR.match(line[i]):
        return None
    start = i
    while start > 0 and _IDENT_CHAR.match(line[start - 1]):
        start -= 1
    end = i + 1
    while end < len(line) and _IDENT_CHAR.match(line[end]):
        end += 1
    # leading/trailing dashes are operators or flags, not part of the name
    while start < end and line[start] == "-":
        start += 1
    while end > start and line[end - 1] == "-":
        end -= 1
    if start >= end:
        return None
    return start + 1, line[start:end]


def switch_word_to_next_case(line: str, col: int, case_types: Sequence[str] = CASE_TYPES) -> Optional[str]:
    found = find_identifier(line, col)
    if found is None:
        return None
    idx, ident = found
    new_ident = next_case_type(ident, case_types)
    if new_ident is None:
        return None
    return line[:idx - 1] + new_ident + line[idx - 1 + len(ident):]
