# log_search/api.py
from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from log_search.config import ServerConfig
from log_search.logger import logs
from log_search.metrics import LatencyTracker
from log_search.search_engine import SearchEngine


def create_app(
    engine: SearchEngine,
    tracker: LatencyTracker | None = None,
    config: ServerConfig | None = None,
) -> Flask:
    """
    Build the HTTP front of one engine.

    The engine is expected to be fully loaded (and sealed) already;
    handlers only read from it.
    """
    config = config or ServerConfig()
    tracker = tracker or LatencyTracker()

    app = Flask(__name__)
    app.config["ENGINE"] = engine
    app.config["TRACKER"] = tracker

    @app.after_request
    def _cors(resp):
        # the browser search page is served from another origin
        resp.headers["Access-Control-Allow-Origin"] = config.cors_origin
        return resp

    @app.get("/search")
    def search():
        query = request.args.get("q", "")
        if not query:
            return jsonify({"error": "Missing query parameter 'q'"}), 400

        engine: SearchEngine = current_app.config["ENGINE"]
        resp = engine.search(query)
        current_app.config["TRACKER"].record(resp.elapsed_ms)
        logs.debug(f"[search] q={query!r} count={resp.count} time_ms={resp.time_ms}")
        return jsonify(resp.to_dict())

    @app.get("/health")
    def health():
        engine: SearchEngine = current_app.config["ENGINE"]
        return jsonify({
            "ok": True,
            "records": len(engine.store),
            "terms": len(engine.index),
        })

    @app.get("/stats")
    def stats():
        return jsonify(current_app.config["TRACKER"].snapshot())

    return app
