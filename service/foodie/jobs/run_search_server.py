"""HTTP entrypoint that serves restaurant searches (Cloud Run friendly)."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from foodie.core.config import get_settings
from foodie.search.aggregator import SearchAggregator
from foodie.search.catalog import catalog_as_dict, validate_selection
from foodie.search.errors import InvalidRequest, SearchError
from foodie.search.models import CombinationMode, SearchCriteria
from foodie.search.selection import random_pick, shuffled

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App & aggregator ----------
app = Flask(__name__)
_aggregator: Optional[SearchAggregator] = None

_PICK_MODES = {"list", "random", "shuffle"}


def get_aggregator() -> SearchAggregator:
    global _aggregator
    if _aggregator is None:
        _aggregator = SearchAggregator(settings=get_settings())
    return _aggregator


# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; only reads settings, never calls Yelp."""
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "yelp_configured": bool(settings.yelp_api_key),
                "revision": os.getenv("K_REVISION", "unknown"),
            }
        ),
        200,
    )


@app.get("/catalog")
def catalog() -> Any:
    return jsonify({"data": catalog_as_dict()}), 200


@app.post("/search")
def search() -> Any:
    """
    Run a restaurant search.
    Required JSON fields: latitude, longitude, radius (miles, 1-7)
    Optional: filters (list of tokens), mode ("all" | "any"), pick ("list" | "random" | "shuffle")
    """
    payload: Dict[str, Any] = request.get_json(silent=True) or {}

    missing = [f for f in ("latitude", "longitude", "radius") if payload.get(f) is None]
    if missing:
        return jsonify({"error": f"missing fields: {', '.join(missing)}"}), 400

    try:
        latitude = float(payload["latitude"])
        longitude = float(payload["longitude"])
    except (TypeError, ValueError):
        return jsonify({"error": "latitude and longitude must be numeric"}), 400

    radius_raw = payload["radius"]
    if isinstance(radius_raw, bool) or not isinstance(radius_raw, (int, str)):
        return jsonify({"error": "radius must be an integer"}), 400
    try:
        radius = int(radius_raw)
    except ValueError:
        return jsonify({"error": "radius must be an integer"}), 400

    filters = payload.get("filters") or []
    if not isinstance(filters, list) or not all(isinstance(f, str) for f in filters):
        return jsonify({"error": "filters must be a list of strings"}), 400

    pick = str(payload.get("pick") or "list").lower()
    if pick not in _PICK_MODES:
        return jsonify({"error": f"pick must be one of: {', '.join(sorted(_PICK_MODES))}"}), 400

    try:
        validate_selection(filters, radius)
        criteria = SearchCriteria.create(
            filters=filters,
            latitude=latitude,
            longitude=longitude,
            radius_miles=radius,
            mode=CombinationMode.parse(str(payload.get("mode") or CombinationMode.MATCH_ALL.value)),
        )
    except InvalidRequest as exc:
        return jsonify({"error": str(exc)}), 400

    try:
        restaurants = get_aggregator().search(criteria)
    except InvalidRequest as exc:
        return jsonify({"error": str(exc)}), 400
    except SearchError as exc:
        logger.error("Search failed: %s", exc)
        return jsonify({"error": f"search failed: {exc}"}), 502

    if pick == "random":
        chosen = random_pick(restaurants)
        return jsonify({"data": {"restaurant": chosen.to_dict() if chosen else None}}), 200
    if pick == "shuffle":
        restaurants = shuffled(restaurants)
    return jsonify({"data": {"count": len(restaurants), "restaurants": [r.to_dict() for r in restaurants]}}), 200


def main() -> None:
    port = get_settings().server_port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
