# src/matchtrace/dashboard/server.py
"""
HTTP + Socket.IO shell around the matching engines.

REST:
    GET  /api/health
    POST /api/kmp/execute             {text, pattern}
    POST /api/rabin-karp/execute      {text, pattern, base?, modulo?}
    GET  /api/kmp/info, /api/rabin-karp/info
    GET  /api/kmp/failure-graph?pattern=...&format=dot|svg|json

Socket.IO:
    client -> "replay" {algorithm, text, pattern, base?, modulo?, delay?}
    server -> "replay_start", "replay_step" (one per step), "replay_complete"
              or "replay_error"
"""

import math

from flask import Flask, current_app, jsonify, request
from flask_socketio import SocketIO, emit

from matchtrace.dashboard.info import KMP_INFO, RABIN_KARP_INFO
from matchtrace.main import ALGORITHMS, KMP, RABIN_KARP, run_algorithm
from matchtrace.matcher.poly_hash import DEFAULT_BASE, DEFAULT_MODULUS
from matchtrace.normalizer import InvalidInput
from matchtrace.visualization.failure_graph import export_failure_links_to_dot, export_failure_links_to_json
from matchtrace.visualization.graphviz_renderer import render_dot_to_svg

socketio = SocketIO(cors_allowed_origins="*")

DEFAULT_CONFIG = {
    "DEFAULT_BASE": DEFAULT_BASE,
    "DEFAULT_MODULO": DEFAULT_MODULUS,
    "SOCKETIO_ASYNC_MODE": "eventlet",
    "REPLAY_MAX_DELAY": 2.0,
}


def _invalid(message: str):
    return jsonify({"error": "Invalid input", "message": message}), 400


def _request_args(payload, with_hash: bool, config) -> dict:
    """Pull text/pattern (and hash parameters) out of a decoded JSON body."""
    if not isinstance(payload, dict):
        raise InvalidInput("Request body must be a JSON object")

    args = {"text": payload.get("text"), "pattern": payload.get("pattern")}
    for key in ("text", "pattern"):
        if not isinstance(args[key], str):
            raise InvalidInput(f"{key.capitalize()} is required and must be a string")

    if with_hash:
        base = payload.get("base")
        modulo = payload.get("modulo")
        args["base"] = config["DEFAULT_BASE"] if base is None else base
        args["modulus"] = config["DEFAULT_MODULO"] if modulo is None else modulo
    return args


def _execute(algorithm: str, label: str):
    try:
        args = _request_args(request.get_json(silent=True), algorithm == RABIN_KARP, current_app.config)
        result = run_algorithm(algorithm, **args)
    except InvalidInput as e:
        return _invalid(str(e))
    except Exception as e:
        print(f"[!] {label} execution error: {e!r}")
        return jsonify({"error": "Execution error", "message": str(e)}), 500

    return jsonify({"success": True, "data": result.to_dict()})


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    if config:
        app.config.update(config)
    app.json.sort_keys = False
    socketio.init_app(app, async_mode=app.config["SOCKETIO_ASYNC_MODE"])

    @app.after_request
    def allow_cors(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response

    @app.route("/api/health")
    def health():
        return {"status": "ok", "message": "String Matching Algorithm API"}

    @app.route("/api/kmp/execute", methods=["POST"])
    def kmp_execute():
        return _execute(KMP, "KMP")

    @app.route("/api/rabin-karp/execute", methods=["POST"])
    def rabin_karp_execute():
        return _execute(RABIN_KARP, "Rabin-Karp")

    @app.route("/api/kmp/info")
    def kmp_info():
        return jsonify(KMP_INFO)

    @app.route("/api/rabin-karp/info")
    def rabin_karp_info():
        return jsonify(RABIN_KARP_INFO)

    @app.route("/api/kmp/failure-graph")
    def failure_graph():
        """Failure-link automaton of ?pattern= as DOT source, SVG or JSON."""
        pattern = request.args.get("pattern", "")
        fmt = request.args.get("format", "svg")
        if fmt not in ("dot", "svg", "json"):
            return _invalid("format must be one of dot, svg, json")
        try:
            if fmt == "json":
                return jsonify(export_failure_links_to_json(pattern))
            dot_data = export_failure_links_to_dot(pattern)
        except InvalidInput as e:
            return _invalid(str(e))

        if fmt == "dot":
            return dot_data, 200, {"Content-Type": "text/plain; charset=utf-8"}
        return render_dot_to_svg(dot_data), 200, {"Content-Type": "image/svg+xml"}

    return app


@socketio.on("replay")
def handle_replay(payload):
    """Stream one run's trace step by step to the requesting client."""
    config = current_app.config
    try:
        algorithm = payload.get("algorithm") if isinstance(payload, dict) else None
        if algorithm not in ALGORITHMS:
            raise InvalidInput(f"algorithm must be one of {', '.join(ALGORITHMS)}")
        args = _request_args(payload, algorithm == RABIN_KARP, config)
        result = run_algorithm(algorithm, **args)
        delay = float(payload.get("delay", 0) or 0)
        if not math.isfinite(delay):
            raise InvalidInput("delay must be a finite number of seconds")
    except (InvalidInput, TypeError, ValueError) as e:
        emit("replay_error", {"error": "Invalid input", "message": str(e)})
        return

    delay = min(max(delay, 0.0), config["REPLAY_MAX_DELAY"])
    phases = (("preprocessing", result.preprocessing), ("matching", result.matching))

    emit("replay_start", {
        "algorithm": result.algorithm,
        "text": result.text,
        "pattern": result.pattern,
        "preprocessingSteps": len(result.preprocessing.steps),
        "matchingSteps": len(result.matching.steps),
    })
    for phase_name, phase in phases:
        for index, step in enumerate(phase.steps):
            emit("replay_step", {"phase": phase_name, "index": index, "step": step.to_dict()})
            if delay:
                socketio.sleep(delay)
    emit("replay_complete", result.summary.to_dict())
