from __future__ import annotations
import logging
from typing import Callable

Notifier = Callable[[int, str], None]

log = logging.getLogger("opposites")


def log_notifier(level: int, msg: str) -> None:
    log.log(level, msg)
