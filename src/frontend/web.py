from __future__ import annotations
import argparse
import logging
import random
from flask import Flask, request, jsonify, Response
from ngram import config as CFG
from ngram.loader import TrainingSourceError, iter_training_files
from ngram.model import Model

log = logging.getLogger(__name__)

app = Flask(__name__)
_model: Model | None = None

# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": _model is not None})


@app.get("/api/stats")
def api_stats():
    return jsonify(_model.stats())  # type: ignore


@app.get("/api/sentence")
def api_sentence():
    n = max(1, min(50, request.args.get("n", 1, type=int)))
    max_words = request.args.get("max_words", CFG.MAX_WORDS, type=int)
    seed = request.args.get("seed", None, type=int)
    rng = random.Random(seed)
    rows = [_model.sentence(max_words, rng=rng) for _ in range(n)]  # type: ignore
    return jsonify(rows)


@app.post("/api/train")
def api_train():
    body = request.get_json(silent=True)
    if not isinstance(body, dict) or not ({"path", "text"} & body.keys()):
        return jsonify({"error": 'expected JSON {"path": ...} or {"text": ...}'}), 400
    try:
        if "text" in body:
            windows = _model.train_lines(str(body["text"]).splitlines())  # type: ignore
        else:
            windows = _model.train(str(body["path"]))  # type: ignore
    except TrainingSourceError as e:
        log.warning("Training request failed: %s", e)
        return jsonify({"error": str(e)}), 404
    return jsonify({"windows": windows, **_model.stats()})  # type: ignore

# ---------- UI ----------
@app.get("/")
def home():
    # One page, no external deps: stats + a button that asks for sentences.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>N-gram model • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px;
}
h1{ font-size:20px; margin:0 0 8px 0 }
.meta{ color:var(--muted); font-size:13px }
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer; margin-top:12px;
}
.btn:hover{ border-color:var(--accent) }
ol{ margin-top:16px }
li{ padding:6px 0; border-top:1px solid var(--border) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>N-gram model</h1>
      <div id="stats" class="meta">Loading…</div>
      <button id="gen" class="btn">Generate sentences</button>
      <ol id="out"></ol>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
async function loadStats(){
  const r = await fetch("/api/stats");
  const s = await r.json();
  $("#stats").textContent = `${s.name} • depth ${s.depth} • ${s.entries} prefixes • ${s.start} openers • ${s.tokens} tokens`;
}
async function generate(){
  const r = await fetch("/api/sentence?n=5");
  const rows = await r.json();
  $("#out").innerHTML = "";
  for(const s of rows){
    const li = document.createElement("li");
    li.textContent = s || "(empty model)";
    $("#out").appendChild(li);
  }
}
$("#gen").addEventListener("click", generate);
loadStats();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of an n-gram Model")
    ap.add_argument("--name", default="model")
    ap.add_argument("--depth", type=int, default=CFG.DEPTH)
    ap.add_argument("--db", dest="db", default=None)  # DSN: "sqlite:///path" or "memory://"
    ap.add_argument("--train", nargs="+", default=[])
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _model
    _model = Model(args.name, args.depth, dsn=args.db)
    try:
        for path in iter_training_files(args.train):
            _model.train(path)
        app.run(host=args.host, port=args.port, debug=args.verbose)
    except TrainingSourceError as e:
        ap.error(str(e))
    finally:
        _model.close()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
