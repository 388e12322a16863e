from __future__ import annotations
import argparse, os, sys
from pathlib import Path
from . import initialize
from backend.__main__ import prompt_choice
from backend.source import BufferSource

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_buffer(buf: BufferSource):
    for i, line in enumerate(buf.text.split("\n"), start=1):
        marker = ">" if i == buf.row else " "
        print(f"{marker}{i:>4} | {line}")
        if i == buf.row:
            print(" " * (buf.col + 7) + _c("^", "1;36"))

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Opposites REPL (edit a buffer in the terminal)")
    parser.add_argument("file", nargs="?", default=None, help="Text file to load into the buffer")
    parser.add_argument("--config", default=None)
    parser.add_argument("--filetype", default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    eng = initialize(config=args.config, verbose=args.verbose)
    text = Path(args.file).read_text(encoding="utf-8") if args.file else ""
    filetype = args.filetype or (Path(args.file).suffix.lstrip(".") if args.file else None)
    buf = BufferSource(text)

    print("Commands: :goto ROW COL, :s (switch), :c (next case), :p (print), :i TEXT (append line), :w PATH, :q")
    while True:
        try:
            raw = input("> ")
        except EOFError:
            print(); break
        cmd, _, rest = raw.strip().partition(" ")
        if cmd in ("", ":q"):
            print("Goodbye!"); break
        if cmd == ":p":
            _print_buffer(buf); continue
        if cmd == ":goto":
            try:
                row, col = (int(x) for x in rest.split())
                buf = BufferSource(buf.text, row=row, col=col)
            except ValueError as exc:
                print(_c(f"(bad position: {exc})", "2;31")); continue
            _print_buffer(buf); continue
        if cmd == ":i":
            buf = BufferSource(buf.text + "\n" + rest if buf.text else rest,
                               row=buf.text.count("\n") + (2 if buf.text else 1), col=1)
            _print_buffer(buf); continue
        if cmd == ":w":
            Path(rest or args.file or "out.txt").write_text(buf.text, encoding="utf-8")
            print(_c("(written)", "2;36")); continue
        if cmd in (":s", ":c"):
            if cmd == ":s":
                out = eng.switch(buf, prompt_choice, filetype=filetype)
            else:
                out = eng.next_case(buf)
            print(_c(out.message, "2;32" if out.changed else "2;33"))
            _print_buffer(buf); continue
        print(_c(f"(unknown command {cmd!r})", "2;31"))
    return 0

if __name__ == "__main__":
    sys.exit(main())
