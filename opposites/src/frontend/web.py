from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from backend.engine import Engine
from backend.config import load_options
from backend.selection import CANCEL
from backend.source import BufferSource

app = Flask(__name__)
_engine: Engine | None = None

log = logging.getLogger(__name__)


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


class BadInput(ValueError):
    """Request parameters the API cannot use; answered with a 400."""


@app.errorhandler(BadInput)
def _bad_input(exc: BadInput):
    return jsonify({"error": str(exc)}), 400


def _params() -> dict:
    """Merge query string, form and JSON body (JSON wins)."""
    data = dict(request.args)
    data.update(request.form)
    if request.is_json:
        body = request.get_json(silent=True)
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise BadInput("JSON body must be an object")
        data.update(body)
    return data


def _line_and_col(data: dict) -> tuple[str, int]:
    line = data.get("line")
    if not isinstance(line, str):
        raise BadInput("'line' is required")
    # one line at a time; multi-line edits are not supported
    if "\n" in line or "\r" in line:
        raise BadInput("'line' must not contain line breaks")
    col = _int(data, "col")
    if col is None or col < 1:
        raise BadInput("'col' must be a 1-based column")
    return line, col


def _int(data: dict, key: str, default: int | None = None) -> int | None:
    v = data.get(key, default)
    if v is None or v == "":
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        raise BadInput(f"'{key}' must be an integer")


# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": True})


@app.route("/api/switch", methods=["GET", "POST"])
def api_switch():
    data = _params()
    line, col = _line_and_col(data)
    choice = _int(data, "choice")
    filetype = data.get("filetype") or None

    eng = _get_engine()
    ranked = eng.results(line, col, filetype=filetype)

    # several matches and no answer yet: hand the choices back to the caller
    if len(ranked) > 1 and choice is None:
        return jsonify({
            "status": "choose",
            "line": line,
            "results": [r.to_dict() for r in ranked],
            "chosen": None,
            "message": f"{len(ranked)} results found",
        })

    out = eng.switch(BufferSource(line, col=col), lambda _r: choice or CANCEL, filetype=filetype)
    return jsonify({
        "status": out.status,
        "line": out.line,
        "results": [r.to_dict() for r in ranked],
        "chosen": out.result.to_dict() if out.result else None,
        "message": out.message,
    })


@app.route("/api/case", methods=["GET", "POST"])
def api_case():
    line, col = _line_and_col(_params())
    out = _get_engine().next_case(BufferSource(line, col=col))
    return jsonify({"status": out.status, "line": out.line, "message": out.message})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: one input, caret position is the cursor column.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Opposites • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font:16px ui-monospace,Menlo,Consolas,monospace; }
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:8px }
.choices button{ margin:8px 8px 0 0; padding:8px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer }
kbd{ background:#111825; border:1px solid var(--border); padding:1px 6px; border-radius:6px }
</style>
</head>
<body>
<div class="container"><div class="card">
  <h1>Opposites</h1>
  <input id="line" value="set true value" autocomplete="off" />
  <div class="meta">Put the caret on a word: <kbd>Ctrl</kbd>+<kbd>Space</kbd> switches to the opposite,
    <kbd>Ctrl</kbd>+<kbd>Shift</kbd>+<kbd>Space</kbd> cycles the case.</div>
  <div class="meta" id="msg">Ready.</div>
  <div class="choices" id="choices"></div>
</div></div>
<script>
const line = document.querySelector("#line"), msg = document.querySelector("#msg"), choices = document.querySelector("#choices");
async function call(path, extra){
  const col = (line.selectionStart ?? 0) + 1;
  const body = Object.assign({line: line.value, col}, extra || {});
  const resp = await fetch(path, {method:"POST", headers:{"Content-Type":"application/json"}, body: JSON.stringify(body)});
  const data = await resp.json();
  choices.innerHTML = "";
  if(!resp.ok){ msg.textContent = `Error: ${data.error}`; return; }
  msg.textContent = `${data.status}: ${data.message}`;
  if(data.status === "choose"){
    data.results.forEach((r, i) => {
      const b = document.createElement("button");
      b.textContent = `${i+1}. ${r.word} -> ${r.opposite_word}`;
      b.onclick = () => { line.setSelectionRange(col-1, col-1); call(path, {choice: i+1}); };
      choices.appendChild(b);
    });
    return;
  }
  const pos = col - 1;
  line.value = data.line;
  line.focus();
  line.setSelectionRange(pos, pos);
}
line.addEventListener("keydown", (ev) => {
  if(ev.ctrlKey && ev.code === "Space"){
    ev.preventDefault();
    call(ev.shiftKey ? "/api/case" : "/api/switch");
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--config", default=None, help="JSON options file")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    global _engine
    _engine = Engine(load_options(args.config) if args.config else None)
    log.info("Serving on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
