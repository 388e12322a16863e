from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional

# Outcome statuses of one switch invocation
SWITCHED = "switched"
NO_MATCH = "not_found"
CANCELLED = "cancelled"
LINE_TOO_LONG = "line_too_long"


@dataclass(frozen=True)
class MatchResult:
    word: str                 # matched dictionary word
    opposite_word: str        # replacement
    idx: int                  # 1-based start of the word in the line
    use_mask: bool            # matched case-insensitively; casing restored on replace

    @property
    def summary(self) -> str:
        return f"{self.word} -> {self.opposite_word}"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SwitchOutcome:
    status: str
    line: str                 # new line on success, otherwise the untouched one
    row: int
    col: int
    result: Optional[MatchResult] = None
    message: str = ""

    @property
    def changed(self) -> bool:
        return self.status == SWITCHED

    @property
    def position(self) -> str:
        return f"[{self.row}:{self.col}]"
