"""Public API for the opposites engine (module-level facade)."""
from __future__ import annotations
import logging
from typing import List, Optional
from backend.config import Options, load_options
from backend.engine import Engine
from backend.models import MatchResult, SwitchOutcome
from backend.selection import CANCEL
from backend.source import BufferSource

_engine: Engine | None = None

def initialize(options: Options | None = None,
               config: str | None = None,
               verbose: bool = False) -> Engine:
    """
    Init modes:
      1) explicit Options object
      2) JSON config file path
      3) neither: built-in defaults
    """
    global _engine
    if verbose:
        logging.basicConfig(level=logging.INFO)
    if options is None and config:
        options = load_options(config)
    _engine = Engine(options)
    return _engine

def _require() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine

def results(line: str, col: int, filetype: str | None = None) -> List[MatchResult]:
    """Ranked candidates near the cursor (list[MatchResult])."""
    return _require().results(line, col, filetype=filetype)

def switch(line: str, col: int, choice: Optional[int] = None, filetype: str | None = None) -> SwitchOutcome:
    """Switch one detached line; `choice` answers the prompt when several words match."""
    return _require().switch_line(line, col, lambda _results: choice if choice else CANCEL, filetype=filetype)

def next_case(line: str, col: int) -> SwitchOutcome:
    return _require().next_case(BufferSource(line, col=col))
