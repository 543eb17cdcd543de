from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from flask import Flask, Response, jsonify, request

from autocorrect import config as CFG
from autocorrect.cli import add_corpus_args, open_engine
from autocorrect.engine import Autocorrector
from autocorrect.errors import AutocorrectError

app = Flask(__name__)
_engine: Autocorrector | None = None

log = logging.getLogger(__name__)


# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    if not q or _engine is None:
        return jsonify([])
    return jsonify(_engine.suggest(q))


@app.get("/api/health")
def api_health():
    return jsonify({"ok": _engine is not None, "words": len(_engine) if _engine else 0})


@app.errorhandler(AutocorrectError)
def on_autocorrect_error(exc: AutocorrectError):
    log.error("Request failed: %s", exc)
    return jsonify({"error": str(exc)}), 500


# ---------- UI ----------
_PAGE = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Autocorrect: Generate suggestions</title>
<style>
body{margin:24px auto;max-width:720px;font:16px/1.45 system-ui,sans-serif;background:#0b0f14;color:#cfd8e3}
input{width:100%;padding:10px 12px;border-radius:10px;border:1px solid #1c2530;background:#0b1117;color:inherit}
li{padding:4px 0}
.muted{color:#8a94a6}
</style>
</head>
<body>
<h1>Autocorrect</h1>
<p class="muted">Build your Autocorrector here!</p>
<input id="q" type="text" placeholder="Type a line…" autocomplete="off" autofocus />
<ol id="out"></ol>
<script>
const q = document.getElementById("q");
const out = document.getElementById("out");
let t = null;
async function suggest(){
  const r = await fetch("/api/suggest?q=" + encodeURIComponent(q.value));
  const rows = await r.json();
  out.innerHTML = "";
  for(const s of rows){
    const li = document.createElement("li");
    li.textContent = s;
    out.appendChild(li);
  }
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(suggest, 150); });
</script>
</body>
</html>
"""


@app.get("/autocorrect")
def autocorrect_page():
    return Response(_PAGE, mimetype="text/html")


def serve(engine: Autocorrector, *, host: str = CFG.DEFAULT_HOST,
          port: int = CFG.DEFAULT_PORT, debug: bool = False) -> None:
    global _engine
    _engine = engine
    app.run(host=host, port=port, debug=debug)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Autocorrector")
    add_corpus_args(ap)
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    args = ap.parse_args(argv)
    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)
    if not (args.data or args.database):
        ap.error("one of --data or --database is required")

    try:
        engine, store = open_engine(args)
    except (AutocorrectError, KeyError, ValueError) as exc:
        ap.exit(1, f"ERROR: {exc}\n")
    try:
        serve(engine, host=args.host, port=args.port, debug=args.verbose)
    finally:
        if store is not None:
            store.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
