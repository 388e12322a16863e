from __future__ import annotations
from typing import List, Protocol, Tuple


class TextSource(Protocol):
    # Host buffer access; the column is 1-based
    def get_line(self) -> str: ...
    def get_cursor(self) -> Tuple[int, int]: ...
    def set_line(self, text: str) -> None: ...


class BufferSource(TextSource):
    """In-memory buffer (CLI, web API and tests)."""
    def __init__(self, text: str = "", row: int = 1, col: int = 1) -> None:
        self._lines: List[str] = text.split("\n")
        if not 1 <= row <= len(self._lines):
            raise ValueError(f"row {row} outside buffer of {len(self._lines)} line(s)")
        if col < 1:
            raise ValueError(f"col must be >= 1, got {col}")
        self.row = row
        self.col = col

    def get_line(self) -> str:
        return self._lines[self.row - 1]

    def get_cursor(self) -> Tuple[int, int]:
        return self.row, self.col

    def set_line(self, text: str) -> None:
        self._lines[self.row - 1] = text

    @property
    def text(self) -> str:
        return "\n".join(self._lines)
