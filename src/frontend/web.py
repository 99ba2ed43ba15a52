from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from hdrcomplete import Engine, UnsupportedModeError
from hdrcomplete import config as CFG
import frontend as shared

app = Flask(__name__)


def _engine_for(mode: str | None) -> Engine:
    eng = shared.get_engine()
    if not mode or mode == eng.mode:
        return eng
    # same search paths, different filename filter
    return Engine(mode, user_paths=eng.user_paths, system_paths=eng.system_paths)

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    line = request.args.get("line", "", type=str)
    mode = request.args.get("mode", None, type=str)
    if not line:
        return jsonify([])
    try:
        eng = _engine_for(mode)
    except UnsupportedModeError as e:
        return jsonify({"error": str(e)}), 400
    rows = eng.complete_line(line)
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/post_completion")
def api_post_completion():
    cand = request.args.get("candidate", "", type=str)
    after = request.args.get("after", "", type=str)
    return jsonify(shared.get_engine().post_completion(cand, after).to_dict())

@app.get("/api/health")
def api_health():
    eng = shared.get_engine()
    return jsonify({"ok": True, "mode": eng.mode, "modes": eng.modes()})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps: type an include line, see candidates.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>hdrcomplete • include autocomplete</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.mono{ font-family: ui-monospace, Menlo, Consolas, monospace }
.row{ display:grid; grid-template-columns:3rem 1fr 1fr; gap:10px; padding:10px 14px; border-top:1px solid var(--border); }
.head{ color:var(--muted); font-weight:600 }
.empty{ padding:24px; text-align:center; color:var(--muted); }
#stats{ color:var(--muted); font-size:13px; margin-top:6px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Include autocomplete</h1>
      <input id="q" class="mono" type="text" value="#include <" autocomplete="off" autofocus />
      <div id="stats">Ready.</div>
      <div class="row head"><div>#</div><div>Candidate</div><div>Directory</div></div>
      <div id="out" class="empty">Type an #include line.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
const esc = (s) => String(s).replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
let t;
async function search(){
  const resp = await fetch(`/api/complete?line=${encodeURIComponent(q.value)}`);
  const data = await resp.json();
  stats.textContent = Array.isArray(data) ? `Results: ${data.length}` : (data.error || "Error.");
  if(!Array.isArray(data) || data.length === 0){
    out.className = "empty"; out.innerHTML = "No matches."; return;
  }
  out.className = "";
  out.innerHTML = data.map((r,i)=>`
    <div class="row" title="${esc(r.file_location)}">
      <div>${i+1}</div><div class="mono">${esc(r.display_text)}</div><div class="mono">${esc(r.source_directory)}</div>
    </div>`).join("");
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(search, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve include completion over HTTP")
    ap.add_argument("--mode", default=CFG.DEFAULT_MODE)
    ap.add_argument("-I", "--user-path", action="append", dest="user_paths", default=None)
    ap.add_argument("--system-path", action="append", dest="system_paths", default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    try:
        shared.initialize(args.mode, user_paths=args.user_paths,
                          system_paths=args.system_paths, verbose=args.verbose)
    except UnsupportedModeError as e:
        ap.error(str(e))

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
