import json
from pathlib import Path
import pytest
from backend.config import ConfigError, DEFAULT_OPPOSITES, Options, load_options


def test_defaults():
    opts = Options()
    assert opts.opposites == DEFAULT_OPPOSITES
    assert opts.use_case_sensitive_mask is True
    assert opts.max_line_length == 1000
    assert opts.notify.found is False and opts.notify.not_found is True


def test_defaults_are_not_shared_between_instances():
    a = Options()
    a.opposites["foo"] = "bar"
    assert "foo" not in Options().opposites


def test_from_dict_merges_over_defaults():
    opts = Options.from_dict({
        "opposites": {"open": "close"},
        "opposites_by_ft": {"python": {"None": "True"}},
        "notify": {"found": True},
        "max_line_length": 80,
    })
    assert opts.opposites["open"] == "close"
    assert opts.opposites["true"] == "false"
    assert opts.get_opposites("python")["None"] == "True"
    assert opts.get_opposites("lua")["=="] == "~="
    assert opts.notify.found is True and opts.notify.not_found is True
    assert opts.max_line_length == 80


@pytest.mark.parametrize("bad", [
    {"colour": "red"},
    {"opposites": {"": "x"}},
    {"opposites": {"x": 1}},
    {"opposites": ["true", "false"]},
    {"use_case_sensitive_mask": "yes"},
    {"max_line_length": -1},
    {"max_line_length": True},
    {"notify": {"loud": True}},
    {"case_types": ["snake", "shouty"]},
    {"case_types": []},
])
def test_from_dict_rejects_bad_input(bad):
    with pytest.raises(ConfigError):
        Options.from_dict(bad)


def test_load_options_from_json(tmp_path: Path):
    p = tmp_path / "opposites.json"
    p.write_text(json.dumps({"use_case_sensitive_mask": False, "case_types": ["snake", "camel"]}), encoding="utf-8")
    opts = load_options(p)
    assert opts.use_case_sensitive_mask is False
    assert opts.case_types == ("snake", "camel")


def test_load_options_invalid_json(tmp_path: Path):
    p = tmp_path / "broken.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_options(p)


def test_replace_returns_new_options():
    base = Options()
    off = base.replace(use_case_sensitive_mask=False)
    assert base.use_case_sensitive_mask is True
    assert off.use_case_sensitive_mask is False
