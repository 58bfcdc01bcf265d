"""Analytics API endpoints."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from mindscape.core.analytics import services
from mindscape.core.analytics.schemas import WindowQuery
from mindscape.core.analytics.windows import resolve_window
from mindscape.core.utils.dates import to_local_naive

analytics_api_bp = Blueprint("analytics_api", __name__)


def _window():
    """Resolve the request window; explicit start/end beat a range preset."""
    try:
        params = WindowQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return None, (jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_url=False, include_context=False)}), 400)
    start, end = resolve_window(params.range or current_app.config["DEFAULT_WINDOW"])
    if params.start is not None:
        start = to_local_naive(params.start)
    if params.end is not None:
        end = to_local_naive(params.end)
    return (start, end), None


def _series_response(builder):
    window, error = _window()
    if error:
        return error
    start, end = window
    series = builder(start, end)
    return jsonify(
        {
            "ok": True,
            "start": start.isoformat(),
            "end": end.isoformat(),
            "items": [point.model_dump(mode="json") for point in series],
        }
    )


@analytics_api_bp.get("/trend")
def trend():
    return _series_response(services.trend_series)


@analytics_api_bp.get("/effectiveness")
def effectiveness():
    return _series_response(services.effectiveness_series)


@analytics_api_bp.get("/distribution")
def distribution():
    return _series_response(services.distribution_series)


@analytics_api_bp.get("/variation")
def variation():
    return _series_response(services.variation_series)
