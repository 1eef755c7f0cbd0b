from __future__ import annotations

import math
import os
import sys
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        GameConfig,
        InvalidStateError,
        Session,
        build_frame,
    )
except ImportError:
    from game import (  # type: ignore
        GameConfig,
        InvalidStateError,
        Session,
        build_frame,
    )

CONFIG = GameConfig.from_env()

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


def _config_to_json(cfg: GameConfig) -> Dict[str, Any]:
    return {
        "spawnPolicy": cfg.spawn_policy,
        "tickMs": int(cfg.tick_ms),
        "wrapEdges": bool(cfg.wrap_edges),
    }


def _session_payload(session: Session) -> Dict[str, Any]:
    return {
        "state": session.to_json(),
        "moves": session.moves(),
        "frame": build_frame(session.grid, session.controller.controlled),
    }


def _whole(value: Any) -> int:
    """Accepts a JSON integer only; floats, strings and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _finite(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"expected a finite number, got {value!r}")
    return number


def _seed_from(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed")
    if seed is None:
        return None
    return _whole(seed)


def _session_from_body(body: Dict[str, Any]) -> Tuple[Optional[Session], Any]:
    """Decodes the posted state. Returns (session, None) or (None, error response)."""
    s_in = body.get("state")
    if s_in is None:
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        session = Session.from_json(s_in, config=CONFIG, seed=_seed_from(body))
    except (InvalidStateError, TypeError, ValueError, OverflowError) as e:
        app.logger.warning("rejected state: %s", e)
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)
    return session, None


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        seed = _seed_from(body)
    except (TypeError, ValueError, OverflowError):
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    session = Session.new(CONFIG, seed=seed)
    payload = _session_payload(session)
    payload.update({"ok": True, "config": _config_to_json(CONFIG)})
    return jsonify(payload)


@app.post("/api/moves")
def api_moves() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    session, err = _session_from_body(body)
    if err is not None:
        return err
    return jsonify({"ok": True, "moves": session.moves()})


@app.post("/api/click")
def api_click() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    session, err = _session_from_body(body)
    if err is not None:
        return err
    try:
        if "tile" in body:
            tx, ty = body["tile"]
            outcome = session.click(_whole(tx), _whole(ty))
        elif "pixel" in body:
            px, py = body["pixel"]
            outcome = session.click_pixel(_finite(px), _finite(py))
        else:
            return jsonify({"ok": False, "error": "tile or pixel required"}), 400
    except (TypeError, ValueError, OverflowError) as e:
        return jsonify({"ok": False, "error": f"bad target: {e}"}), 400
    if session.resets:
        app.logger.info("board was full; reset before respawn")
    payload = _session_payload(session)
    payload.update({"ok": True, "outcome": outcome})
    return jsonify(payload)


@app.post("/api/tick")
def api_tick() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    session, err = _session_from_body(body)
    if err is not None:
        return err
    spawned = session.tick()
    if session.resets:
        app.logger.info("board was full; reset on tick")
    payload = _session_payload(session)
    payload.update({"ok": True, "spawned": list(spawned) if spawned is not None else None})
    return jsonify(payload)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
