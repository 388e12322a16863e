# backend/engine.py
from __future__ import annotations

import logging
from typing import List, Optional

from .config import Options
from .models import (
    MatchResult, SwitchOutcome,
    SWITCHED, NO_MATCH, CANCELLED, LINE_TOO_LONG,
)
from .search import find_results
from .replace import replace_word_in_line
from .selection import Selector, first_choice, select_result
from .source import TextSource, BufferSource
from .notify import Notifier, log_notifier
from .cases import switch_word_to_next_case

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - a host buffer (TextSource),
      - the match collector (search.find_results),
      - a selector for ambiguous matches (selection.select_result),
      - the replacement step (replace.replace_word_in_line).

    Public API (used by CLI/Flask/GUI):
      * switch(source, selector):    swap the word under the cursor for its opposite
      * switch_line(line, col, ...): same, on a detached line
      * results(line, col):          ranked candidates only
      * next_case(source):           cycle the identifier under the cursor through case types

    The line is only written back when a replacement was made.
    """

    def __init__(self, options: Optional[Options] = None, *, notifier: Optional[Notifier] = None) -> None:
        self.options = options or Options()
        self._notify = notifier or log_notifier

    # ------------- query -------------

    def results(self, line: str, col: int, *, filetype: Optional[str] = None) -> List[MatchResult]:
        return find_results(
            line, col,
            self.options.get_opposites(filetype),
            self.options.use_case_sensitive_mask,
        )

    # ------------- switching -------------

    # /* ~~~ search -> select -> replace for the line under the cursor ~~~ */
    def switch(
        self,
        source: TextSource,
        selector: Optional[Selector] = None,
        *,
        filetype: Optional[str] = None,
    ) -> SwitchOutcome:
        line = source.get_line()
        row, col = source.get_cursor()
        where = f"[{row}:{col}]"

        too_long = self._check_line_length(line, row, col)
        if too_long is not None:
            return too_long

        results = self.results(line, col, filetype=filetype)
        log.debug("%s %d candidate(s) for col %d", where, len(results), col)

        if not results:
            msg = f"{where} No opposite word found"
            if self.options.notify.not_found:
                self._notify(logging.INFO, msg)
            return SwitchOutcome(NO_MATCH, line, row, col, message=msg)

        result = select_result(results, selector or first_choice)
        if result is None:
            return SwitchOutcome(CANCELLED, line, row, col, message=f"{where} Cancelled")

        new_line = replace_word_in_line(line, result)
        source.set_line(new_line)
        msg = f"{where} {result.summary}"
        if self.options.notify.found:
            self._notify(logging.INFO, msg)
        return SwitchOutcome(SWITCHED, new_line, row, col, result=result, message=msg)

    def switch_line(
        self,
        line: str,
        col: int,
        selector: Optional[Selector] = None,
        *,
        filetype: Optional[str] = None,
    ) -> SwitchOutcome:
        return self.switch(BufferSource(line, row=1, col=col), selector, filetype=filetype)

    # ------------- cases -------------

    def next_case(self, source: TextSource) -> SwitchOutcome:
        line = source.get_line()
        row, col = source.get_cursor()
        where = f"[{row}:{col}]"

        too_long = self._check_line_length(line, row, col)
        if too_long is not None:
            return too_long

        new_line = switch_word_to_next_case(line, col, self.options.case_types)
        if new_line is None:
            msg = f"{where} No case type found"
            if self.options.notify.not_found:
                self._notify(logging.INFO, msg)
            return SwitchOutcome(NO_MATCH, line, row, col, message=msg)

        source.set_line(new_line)
        msg = f"{where} case switched"
        if self.options.notify.found:
            self._notify(logging.INFO, msg)
        return SwitchOutcome(SWITCHED, new_line, row, col, message=msg)

    # ------------- internals -------------

    def _check_line_length(self, line: str, row: int, col: int) -> Optional[SwitchOutcome]:
        limit = self.options.max_line_length
        if len(line) <= limit:
            return None
        msg = f"Line too long: {len(line)} (max: {limit})"
        self._notify(logging.ERROR, msg)
        return SwitchOutcome(LINE_TOO_LONG, line, row, col, message=msg)
