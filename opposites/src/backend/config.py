from __future__ import annotations
import json
from dataclasses import dataclass, field, replace as _dc_replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

# Lines longer than this are rejected before searching
MAX_LINE_LENGTH: int = 1000

# Mask casing for dictionary entries that contain no uppercase letters
USE_CASE_SENSITIVE_MASK: bool = True

# Notifications
NOTIFY_FOUND: bool = False
NOTIFY_NOT_FOUND: bool = True

# /* ~~~ word -> opposite word; every pair also works backwards ~~~ */
DEFAULT_OPPOSITES: Dict[str, str] = {
    "enable": "disable",
    "true": "false",
    "True": "False",
    "yes": "no",
    "on": "off",
    "left": "right",
    "up": "down",
    "min": "max",
    "==": "!=",
    "<=": ">=",
    "<": ">",
}

# /* ~~~ extra pairs merged over the base dictionary per file type ~~~ */
DEFAULT_OPPOSITES_BY_FT: Dict[str, Dict[str, str]] = {
    "lua": {"==": "~="},
    "sql": {"AND": "OR"},
}

# Order used when cycling an identifier through case types
DEFAULT_CASE_TYPES: Tuple[str, ...] = ("snake", "screaming_snake", "kebab", "camel", "pascal")


class ConfigError(ValueError):
    """Raised for malformed user options."""


@dataclass(frozen=True)
class NotifyOptions:
    found: bool = NOTIFY_FOUND
    not_found: bool = NOTIFY_NOT_FOUND


@dataclass(frozen=True)
class Options:
    """
    Explicit configuration handed to every engine call.

    Attributes
    ----------
    opposites : Dict[str, str]
        Base dictionary, word -> opposite word (case as authored).
    opposites_by_ft : Dict[str, Dict[str, str]]
        Per file type pairs merged over ``opposites`` by get_opposites().
    use_case_sensitive_mask : bool
        Re-apply the matched text's casing for all-lowercase pairs.
    max_line_length : int
        Longer lines are rejected upstream of the search.
    notify : NotifyOptions
        Whether to report "found" and "not found" outcomes.
    case_types : Tuple[str, ...]
        Cycle order for case switching.
    """
    opposites: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_OPPOSITES))
    opposites_by_ft: Dict[str, Dict[str, str]] = field(
        default_factory=lambda: {ft: dict(m) for ft, m in DEFAULT_OPPOSITES_BY_FT.items()}
    )
    use_case_sensitive_mask: bool = USE_CASE_SENSITIVE_MASK
    max_line_length: int = MAX_LINE_LENGTH
    notify: NotifyOptions = field(default_factory=NotifyOptions)
    case_types: Tuple[str, ...] = DEFAULT_CASE_TYPES

    def get_opposites(self, filetype: Optional[str] = None) -> Dict[str, str]:
        merged = dict(self.opposites)
        if filetype:
            merged.update(self.opposites_by_ft.get(filetype, {}))
        return merged

    def replace(self, **changes: Any) -> "Options":
        return _dc_replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Options":
        """Merge a user mapping (e.g. parsed JSON) over the defaults."""
        if not isinstance(data, Mapping):
            raise ConfigError("options must be a mapping")

        known = {"opposites", "opposites_by_ft", "use_case_sensitive_mask",
                 "max_line_length", "notify", "case_types"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(unknown)}")

        base = cls()
        kw: Dict[str, Any] = {}

        if "opposites" in data:
            kw["opposites"] = {**base.opposites, **_check_pairs(data["opposites"], "opposites")}
        if "opposites_by_ft" in data:
            by_ft = data["opposites_by_ft"]
            if not isinstance(by_ft, Mapping):
                raise ConfigError("opposites_by_ft must map file types to pair mappings")
            merged = {ft: dict(m) for ft, m in base.opposites_by_ft.items()}
            for ft, pairs in by_ft.items():
                merged.setdefault(str(ft), {}).update(_check_pairs(pairs, f"opposites_by_ft.{ft}"))
            kw["opposites_by_ft"] = merged
        if "use_case_sensitive_mask" in data:
            kw["use_case_sensitive_mask"] = _check_bool(data["use_case_sensitive_mask"], "use_case_sensitive_mask")
        if "max_line_length" in data:
            n = data["max_line_length"]
            if isinstance(n, bool) or not isinstance(n, int) or n < 0:
                raise ConfigError("max_line_length must be a non-negative integer")
            kw["max_line_length"] = n
        if "notify" in data:
            nt = data["notify"]
            if not isinstance(nt, Mapping) or set(nt) - {"found", "not_found"}:
                raise ConfigError("notify accepts only 'found' and 'not_found'")
            kw["notify"] = NotifyOptions(
                found=_check_bool(nt.get("found", base.notify.found), "notify.found"),
                not_found=_check_bool(nt.get("not_found", base.notify.not_found), "notify.not_found"),
            )
        if "case_types" in data:
            from .cases import CASE_TYPES
            types = data["case_types"]
            if not isinstance(types, (list, tuple)) or not types:
                raise ConfigError("case_types must be a non-empty list")
            bad = [t for t in types if t not in CASE_TYPES]
            if bad:
                raise ConfigError(f"unknown case type(s): {', '.join(map(str, bad))}")
            kw["case_types"] = tuple(types)

        return base.replace(**kw)


def _check_pairs(pairs: Any, where: str) -> Dict[str, str]:
    if not isinstance(pairs, Mapping):
        raise ConfigError(f"{where} must be a mapping of word -> opposite word")
    out: Dict[str, str] = {}
    for w, ow in pairs.items():
        if not isinstance(w, str) or not isinstance(ow, str) or not w or not ow:
            raise ConfigError(f"{where}: words must be non-empty strings ({w!r} -> {ow!r})")
        out[w] = ow
    return out


def _check_bool(v: Any, where: str) -> bool:
    if not isinstance(v, bool):
        raise ConfigError(f"{where} must be true or false")
    return v


def load_options(path: str | Path) -> Options:
    """Read options from a JSON file."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{p}: invalid JSON ({exc})") from exc
    return Options.from_dict(data)
