"""
Opposites Engine Module

Swaps the word under the cursor for its configured opposite
(true <-> false, enable <-> disable, ...) while keeping the casing the
word was typed in.

The module is split along the steps of one switch:
- Case masks (mask.py): read and re-apply per-character uppercase
- Search (search.py): locate dictionary words touching the cursor and rank them
- Selection (selection.py): auto-pick a single hit, ask a selector otherwise
- Replacement (replace.py): rebuild the line with the opposite word
- Engine (engine.py): ties the steps to a host buffer, options and notifications

Example Usage:
    from backend import Engine, BufferSource

    buf = BufferSource("set true value", col=6)
    outcome = Engine().switch(buf)
    print(outcome.line)   # set false value
"""

# src/backend/__init__.py
from .config import Options, NotifyOptions, ConfigError, load_options
from .models import MatchResult, SwitchOutcome
from .mask import has_uppercase, get_case_mask, apply_case_mask
from .search import NOT_FOUND, find_word_in_line, find_results
from .replace import replace_word_in_line
from .selection import CANCEL, select_result, format_choices, first_choice
from .source import TextSource, BufferSource
from .engine import Engine

__version__ = "1.0.0"
__all__ = [
    "Options", "NotifyOptions", "ConfigError", "load_options",
    "MatchResult", "SwitchOutcome",
    "has_uppercase", "get_case_mask", "apply_case_mask",
    "NOT_FOUND", "find_word_in_line", "find_results",
    "replace_word_in_line",
    "CANCEL", "select_result", "format_choices", "first_choice",
    "TextSource", "BufferSource",
    "Engine",
]
