from pathlib import Path
from frontend.__main__ import main


def test_repl_switches_word_in_loaded_file(tmp_path: Path, monkeypatch, capsys):
    src = tmp_path / "settings.txt"
    src.write_text("debug = no\nset true value\n", encoding="utf-8")
    out_path = tmp_path / "out.txt"
    feed = iter([":goto 2 6", ":s", f":w {out_path}", ":q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(feed))

    assert main([str(src)]) == 0
    out = capsys.readouterr().out
    assert "[2:6] true -> false" in out
    assert out_path.read_text(encoding="utf-8") == "debug = no\nset false value\n"


def test_repl_reports_bad_position(monkeypatch, capsys):
    feed = iter([":i hello", ":goto 5 1", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(feed))
    assert main([]) == 0
    assert "bad position" in capsys.readouterr().out
