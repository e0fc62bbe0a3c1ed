"""
Flask HTTP service exposing both search strategies.

Routes:
- POST /find-path-dfs       exhaustive search
- POST /find-path-dijkstra  breadth-first search
- GET  /ping                liveness check

Run with: python scripts/serve.py
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from gridroute.config import CORS_ALLOWED_ORIGINS, GRID_SIZE
from gridroute.errors import InvalidCellError, SearchBudgetExceeded
from gridroute.search import SearchStrategy, get_strategy
from gridroute.server.codec import MalformedRequestError, decode_request, encode_result

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(
    app,
    origins=CORS_ALLOWED_ORIGINS,
    send_wildcard=True,
    methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Strategies hold no per-call state, so one instance serves every request
STRATEGIES: dict[str, SearchStrategy] = {
    "dfs": get_strategy("dfs"),
    "dijkstra": get_strategy("dijkstra"),
}


def _find_path(strategy_name: str):
    strategy = STRATEGIES[strategy_name]
    payload = request.get_json(silent=True)

    try:
        path_request = decode_request(payload)
    except MalformedRequestError as e:
        logger.warning(f"Rejected {strategy_name} request: {e}")
        return jsonify({"error": str(e)}), 400

    logger.info(
        f"Received {strategy_name} request: {path_request.start} -> {path_request.end} "
        f"({len(path_request.obstacles)} obstacles)"
    )

    try:
        result = strategy.find_path(
            path_request.start,
            path_request.end,
            path_request.obstacles,
            GRID_SIZE,
        )
    except InvalidCellError as e:
        logger.warning(f"Rejected {strategy_name} request: {e}")
        return jsonify({"error": str(e)}), 400
    except SearchBudgetExceeded as e:
        return jsonify({"error": str(e), "path": []}), 503

    return jsonify(encode_result(result))


@app.route("/find-path-dfs", methods=["POST"])
def find_path_dfs():
    return _find_path("dfs")


@app.route("/find-path-dijkstra", methods=["POST"])
def find_path_dijkstra():
    return _find_path("dijkstra")


@app.route("/ping")
def ping():
    return jsonify({"ping": "pong"})
