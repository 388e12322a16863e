from __future__ import annotations
import argparse, json, logging, sys
from typing import Optional, Sequence

from .config import Options, ConfigError, load_options
from .engine import Engine
from .models import MatchResult
from .selection import first_choice, format_choices, parse_choice
from .source import BufferSource


def prompt_choice(results: Sequence[MatchResult]) -> Optional[int]:
    """Selector that asks on stdin; empty input or EOF cancels."""
    for row in format_choices(results):
        print(row)
    try:
        raw = input("Type number and <Enter> (empty cancels): ")
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    return parse_choice(raw)


def _options(args: argparse.Namespace) -> Options:
    opts = load_options(args.config) if args.config else Options()
    if args.no_mask:
        opts = opts.replace(use_case_sensitive_mask=False)
    return opts


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Switch the word under the cursor to its opposite")
    p.add_argument("--line", default=None, help="Line to edit (omit with --repl)")
    p.add_argument("--col", type=int, default=1, help="1-based cursor column")
    p.add_argument("--config", default=None, help="JSON options file")
    p.add_argument("--filetype", default=None, help="File type for extra opposites (e.g. lua, sql)")
    p.add_argument("--no-mask", action="store_true", help="Disable case sensitive masking")
    p.add_argument("--case", action="store_true", help="Cycle the case type instead")
    p.add_argument("--first", action="store_true", help="Take the top-ranked result without asking")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--repl", action="store_true", help="Interactive loop: '<col> <line>' per input")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        eng = Engine(_options(args))
    except (ConfigError, OSError) as exc:
        p.error(str(exc))

    selector = first_choice if args.first else prompt_choice

    def run(line: str, col: int) -> int:
        if col < 1:
            print("error: column must be >= 1", file=sys.stderr)
            return 2
        buf = BufferSource(line, col=col)
        if args.case:
            out = eng.next_case(buf)
        else:
            out = eng.switch(buf, selector, filetype=args.filetype)
        if args.json:
            print(json.dumps({
                "status": out.status,
                "line": out.line,
                "chosen": out.result.to_dict() if out.result else None,
                "message": out.message,
            }, ensure_ascii=False, indent=2))
        else:
            print(out.line if out.changed else f"({out.status.replace('_', ' ')}) {out.message}")
        return 0 if out.changed else 1

    if args.line is not None:
        if "\n" in args.line or "\r" in args.line:
            p.error("--line must be a single line")
        return run(args.line, args.col)

    if args.repl:
        print("Type '<col> <line>' (empty line to exit).")
        while True:
            try:
                raw = input("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if not raw.strip():
                break
            col_s, _, line = raw.partition(" ")
            if not col_s.isdigit():
                print("expected: <col> <line>")
                continue
            run(line, int(col_s))
        return 0

    p.error("--line or --repl is required")
    return 2

if __name__ == "__main__":
    raise SystemExit(main())
