from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Optional

from flask import Flask, jsonify, request, send_from_directory

from game import (
    BoardController,
    DataFetchError,
    JeopardyClient,
    JeopardyError,
    ViewState,
    load_settings,
)

logger = logging.getLogger(__name__)

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))


def build_controller() -> BoardController:
    settings = load_settings()
    return BoardController(
        JeopardyClient(settings.api_base, timeout_s=settings.http_timeout),
        ViewState(),
        num_categories=settings.num_categories,
        pool_size=settings.pool_size,
        concurrent=settings.concurrent_fetch,
    )


def _error_status(e: JeopardyError) -> int:
    return 502 if isinstance(e, DataFetchError) else 500


def _asset(app: Flask, name: str, content_type: str) -> Any:
    resp = send_from_directory(app.static_folder, name)
    resp.headers["Content-Type"] = content_type
    return resp


def create_app(controller: Optional[BoardController] = None) -> Flask:
    app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)
    app.config["BOARD_CONTROLLER"] = controller or build_controller()

    def board_controller() -> BoardController:
        return app.config["BOARD_CONTROLLER"]

    # ---------- Static routes ----------

    @app.get("/")
    def index() -> Any:
        return send_from_directory(app.static_folder, "index.html")

    @app.get("/main.js")
    def main_js() -> Any:
        return _asset(app, "main.js", "application/javascript; charset=utf-8")

    @app.get("/styles.css")
    def styles_css() -> Any:
        return _asset(app, "styles.css", "text/css; charset=utf-8")

    @app.get("/health")
    def health() -> Any:
        return jsonify({"status": "ok"})

    # ---------- Board API (used by main.js) ----------

    @app.get("/api/board")
    def api_board() -> Any:
        ctl = board_controller()
        return jsonify({"ok": True, "view": ctl.snapshot()})

    @app.post("/api/start")
    def api_start() -> Any:
        ctl = board_controller()
        try:
            board = asyncio.run(ctl.start())
        except JeopardyError as e:
            logger.warning("api_start failed: %s", e)
            return jsonify({"ok": False, "error": str(e), "view": ctl.snapshot()}), _error_status(e)
        except Exception as e:
            logger.exception("api_start crashed")
            return jsonify({"ok": False, "error": str(e), "view": ctl.snapshot()}), 500
        if board is None:
            # A newer start() took over while this one was in flight.
            return jsonify({"ok": False, "error": "superseded by a newer game", "view": ctl.snapshot()}), 409
        return jsonify({"ok": True, "view": ctl.snapshot()})

    @app.post("/api/reveal")
    def api_reveal() -> Any:
        ctl = board_controller()
        body = request.get_json(force=True, silent=True) or {}
        try:
            col = int(body["col"])
            row = int(body["row"])
        except (KeyError, TypeError, ValueError):
            return jsonify({"ok": False, "error": "col and row required"}), 400
        try:
            result = ctl.click(col, row)
        except IndexError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        if result is None:
            return jsonify({"ok": False, "error": "no board; start a game first"}), 409
        state, text = result
        view = ctl.snapshot()
        return jsonify({
            "ok": True,
            "state": state.value,
            "text": text,
            "style": view["cells"][row][col]["style"],
            "view": view,
        })

    return app


app = create_app()


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
