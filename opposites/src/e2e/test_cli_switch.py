import json
from pathlib import Path
import pytest
from backend.__main__ import main


def test_cli_switches_single_match(capsys):
    rc = main(["--line", "set true value", "--col", "6"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "set false value"


def test_cli_not_found_exit_code(capsys):
    rc = main(["--line", "zzz", "--col", "1"])
    assert rc == 1
    assert "not found" in capsys.readouterr().out


def test_cli_prompts_on_multiple_results(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    rc = main(["--line", "x <= y", "--col", "3"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Multiple results found:" in out
    assert "1. < -> >" in out and "2. <= -> >=" in out
    assert out.strip().endswith("x >= y")


def test_cli_prompt_cancel(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    rc = main(["--line", "x <= y", "--col", "3"])
    assert rc == 1
    assert "cancelled" in capsys.readouterr().out


def test_cli_first_and_json(capsys):
    rc = main(["--line", "x <= y", "--col", "3", "--first", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert data["status"] == "switched"
    assert data["line"] == "x >= y"
    assert data["chosen"] == {"word": "<", "opposite_word": ">", "idx": 3, "use_mask": True}


def test_cli_config_and_no_mask(tmp_path: Path, capsys):
    cfg = tmp_path / "opts.json"
    cfg.write_text(json.dumps({"opposites": {"open": "close"}}), encoding="utf-8")
    assert main(["--line", "Open it", "--col", "2", "--config", str(cfg)]) == 0
    assert capsys.readouterr().out.strip() == "Close it"
    assert main(["--line", "Open it", "--col", "2", "--config", str(cfg), "--no-mask"]) == 1


def test_cli_case_mode(capsys):
    assert main(["--line", "let fooBar = 1", "--col", "6", "--case"]) == 0
    assert capsys.readouterr().out.strip() == "let FooBar = 1"


def test_cli_bad_config_is_usage_error(tmp_path: Path):
    cfg = tmp_path / "bad.json"
    cfg.write_text(json.dumps({"nope": 1}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--line", "x", "--config", str(cfg)])
    assert exc.value.code == 2


def test_cli_repl(monkeypatch, capsys):
    feed = iter(["8 yes or no", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(feed))
    assert main(["--repl", "--first"]) == 0
    assert "yes or yes" in capsys.readouterr().out


def test_cli_rejects_multi_line_input():
    with pytest.raises(SystemExit) as exc:
        main(["--line", "a\nset true value", "--col", "6"])
    assert exc.value.code == 2
