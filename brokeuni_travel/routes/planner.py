# brokeuni_travel/routes/planner.py
"""Planner HTTP routes and blueprint configuration."""

import logging
import os

from flask import Blueprint, jsonify, render_template, request

from brokeuni_travel.api.cities import POPULAR_CITIES, filter_cities
from brokeuni_travel.api.constants import (
    DIETARY_PREFERENCES,
    INTERESTS_OPTIONS,
    LOADING_ITEMS,
    TRAVEL_PREFERENCES,
)
from brokeuni_travel.api.errors import CityLookupError, FormValidationError
from brokeuni_travel.api.services.autocomplete import MIN_QUERY_LENGTH, merge_suggestions
from brokeuni_travel.api.services.flow import FlowState, PlannerFlow
from brokeuni_travel.api.services.itinerary_view import build_itinerary_view, render_itinerary
from brokeuni_travel.api.services.trip_form import TripForm

logger = logging.getLogger(__name__)


def _options():
    return {
        "interests": list(INTERESTS_OPTIONS),
        "travel_preferences": list(TRAVEL_PREFERENCES),
        "dietary_preferences": list(DIETARY_PREFERENCES),
        "loading_items": list(LOADING_ITEMS),
    }


def create_planner_blueprint(base_dir, generator, city_lookup):
    """Create and configure the planner blueprint.

    Args:
        base_dir: Absolute path to the package directory holding
            ``templates`` and ``static``
        generator: Object with ``generate(TripRequest) -> Itinerary``
        city_lookup: Object with ``search(query) -> list[str]``

    Returns:
        Configured Flask Blueprint
    """
    planner_bp = Blueprint(
        "planner",
        __name__,
        template_folder=os.path.join(base_dir, "templates"),
        static_folder=os.path.join(base_dir, "static"),
        static_url_path="/static",
        url_prefix="/planner",
    )

    @planner_bp.route("/")
    def index():
        """Main planner page (input, loading and result views)."""
        return render_template("index.html", options=_options(), form=TripForm().to_dict())

    @planner_bp.route("/api/options")
    def api_options():
        """Option lists, form defaults and the static city list."""
        payload = _options()
        payload["defaults"] = TripForm.defaults()
        payload["cities"] = list(POPULAR_CITIES)
        return jsonify(payload)

    @planner_bp.route("/api/cities")
    def api_cities():
        """Local matches merged with one remote lookup."""
        query = request.args.get("q", "")
        if len(query) < MIN_QUERY_LENGTH:
            return jsonify({"query": query, "suggestions": []})

        local = filter_cities(query)
        try:
            remote = city_lookup.search(query)
        except CityLookupError as e:
            logger.warning(f"City lookup failed for '{query}': {e}")
            remote = []
        return jsonify({"query": query, "suggestions": merge_suggestions(remote, local)})

    @planner_bp.route("/api/itinerary", methods=["POST"])
    def api_itinerary():
        """Generate an itinerary for a JSON trip request."""
        try:
            form = TripForm.from_payload(request.get_json(silent=True))
            trip_request = form.submit()
        except FormValidationError as e:
            return jsonify({"error": str(e)}), 400

        flow = PlannerFlow()
        if flow.run(trip_request, generator.generate) is not FlowState.RESULT:
            return jsonify({"error": flow.error, "request": trip_request.to_dict()}), 502

        return jsonify({
            "request": trip_request.to_dict(),
            "itinerary": flow.itinerary.to_dict(),
            "view": build_itinerary_view(flow.itinerary, trip_request),
            "html": render_itinerary(flow.itinerary, trip_request),
        })

    @planner_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "planner"})

    return planner_bp


__all__ = ["create_planner_blueprint"]
