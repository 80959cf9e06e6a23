import logging
import math

import networkx as nx
from flask import Flask, jsonify, request
from prometheus_client import make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from .a_star import AStarPathFinder
from .config import Config
from .graph import NetworkXGraph, euclidean_heuristic, haversine_heuristic, zero_heuristic
from .logging_config import setup_logging
from .metrics import BAD_REQUESTS, DURATION, EXPANDED, SEARCHES

logger = logging.getLogger(__name__)


class BadRequest(ValueError):
    def __init__(self, reason, detail):
        super().__init__(detail)
        self.reason = reason
        self.detail = detail


def _node_id(value, what):
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise BadRequest("bad_node", f"{what} must be a string or integer node id")
    return value


def _number(value, what, reason, non_negative=False):
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise BadRequest(reason, f"{what} {value!r} is not a number") from e
    if not math.isfinite(number):
        raise BadRequest(reason, f"{what} must be finite")
    if non_negative and number < 0:
        raise BadRequest(reason, f"{what} must be non-negative")
    return number


def build_graph(payload, cfg):
    edges = payload.get("edges")
    if not isinstance(edges, list):
        raise BadRequest("bad_edges", "edges must be a list of [source, target, weight]")
    if len(edges) > cfg.MAX_EDGES:
        raise BadRequest("too_many_edges", f"at most {cfg.MAX_EDGES} edges are accepted")

    G = nx.DiGraph() if payload.get("directed", True) else nx.Graph()
    nodes = payload.get("nodes") or []
    if not isinstance(nodes, list):
        raise BadRequest("bad_nodes", "nodes must be a list of {id, x, y}")
    for node in nodes:
        try:
            node_id, x, y = node["id"], node["x"], node["y"]
        except (KeyError, TypeError) as e:
            raise BadRequest("bad_nodes", f"nodes entries need id, x and y: {e}") from e
        G.add_node(_node_id(node_id, "node id"),
                   x=_number(x, "node x", "bad_nodes"), y=_number(y, "node y", "bad_nodes"))

    for edge in edges:
        if not isinstance(edge, list) or len(edge) != 3:
            raise BadRequest("bad_edges", "each edge must be [source, target, weight]")
        u, v, w = edge
        w = _number(w, "edge weight", "bad_weight", non_negative=True)
        u, v = _node_id(u, "edge source"), _node_id(v, "edge target")
        # keep the cheapest of parallel edges
        if G.has_edge(u, v) and G.edges[u, v]["weight"] <= w:
            continue
        G.add_edge(u, v, weight=w)
    return G


def build_heuristic(payload, G):
    name = payload.get("heuristic") or "zero"
    if not isinstance(name, str):
        raise BadRequest("bad_heuristic", "heuristic must be a string")
    name = name.lower()
    if name == "zero":
        return zero_heuristic
    if name == "euclidean":
        scale = _number(payload.get("heuristic_scale", 1.0), "heuristic_scale", "bad_heuristic", non_negative=True)
        return euclidean_heuristic(G, scale=scale)
    if name == "haversine":
        speed = payload.get("speed_mps")
        if speed is None:
            return haversine_heuristic(G)
        speed = _number(speed, "speed_mps", "bad_heuristic")
        if speed <= 0:
            raise BadRequest("bad_heuristic", "speed_mps must be positive")
        return haversine_heuristic(G, speed_mps=speed)
    raise BadRequest("bad_heuristic", f"unknown heuristic '{name}'")


def create_app(config=None):
    app = Flask(__name__)
    cfg = config or Config()
    setup_logging(cfg.LOG_LEVEL)

    if cfg.METRICS_ENABLED:
        # attach /metrics
        app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {"/metrics": make_wsgi_app()})

    @app.get("/healthz")
    def healthz():
        return {"ok": True}, 200

    @app.post("/route")
    def route():
        payload = request.get_json(force=True, silent=True)
        if not isinstance(payload, dict):
            BAD_REQUESTS.labels(reason="bad_json").inc()
            return jsonify({"error": "bad_request", "detail": "body must be a JSON object"}), 400

        try:
            if "source" not in payload or "target" not in payload:
                raise BadRequest("missing_endpoints", "source and target are required")
            src = _node_id(payload["source"], "source")
            dst = _node_id(payload["target"], "target")
            G = build_graph(payload, cfg)
            heuristic = build_heuristic(payload, G)
            deadline_ms = _number(payload.get("deadline_ms", cfg.SEARCH_DEADLINE_MS), "deadline_ms", "bad_deadline")
        except BadRequest as e:
            logger.warning("rejected route request: %s", e.detail)
            BAD_REQUESTS.labels(reason=e.reason).inc()
            return jsonify({"error": "bad_request", "detail": e.detail}), 400

        deadline_sec = int(min(max(0, deadline_ms), cfg.MAX_DEADLINE_MS)) / 1000.0
        finder = AStarPathFinder(NetworkXGraph(G, heuristic=heuristic))

        with DURATION.time():
            result = finder.find_shortest_path(src, dst, deadline_sec)
        EXPANDED.observe(result.explored_count)
        SEARCHES.labels(outcome=result.outcome.value).inc()
        logger.info("route %r -> %r: %s (%d expanded, %d edges)",
                    src, dst, result.outcome.value, result.explored_count, G.number_of_edges())

        resp = {"source": src, "target": dst, "deadline_ms": int(deadline_sec * 1000), **result.to_dict()}
        if not result.is_solved:
            resp["error"] = result.outcome.value
            return jsonify(resp), 422
        return jsonify(resp), 200

    return app
