from dataclasses import replace

import pytest

from brokeuni_travel.api.models import BudgetBreakdown, BudgetReport
from brokeuni_travel.api.services.itinerary_view import (
    build_itinerary_view,
    difference_label,
    format_gbp,
    render_itinerary,
)


def _report(total, estimated):
    return BudgetReport(total, estimated, BudgetBreakdown(0, 0, 0))


def test_format_gbp():
    assert format_gbp(0) == "£0.00"
    assert format_gbp(7.5) == "£7.50"


@pytest.mark.parametrize("estimated, label", [
    (80, "£20.00 Under"),
    (120, "£20.00 Over"),
    (100, "£0.00 Under"),
])
def test_difference_label(estimated, label):
    assert difference_label(_report(100, estimated)) == label


def test_view_uses_reported_figures(itinerary, trip_request):
    view = build_itinerary_view(itinerary, trip_request)
    assert view["people_label"] == "students"
    assert [c["label"] for c in view["cards"]] == ["TRAVEL", "FOOD & DRINK", "ENTERTAINMENT"]
    assert [c["amount"] for c in view["cards"]] == ["£25.00", "£30.00", "£25.00"]
    assert view["total_budget"] == "£100.00"
    assert view["estimated_cost"] == "£80.00"
    assert view["difference"] == "£20.00 Under"
    assert view["under_budget"] is True
    assert view["schedule"][0]["cost"] == "~£12.50"
    assert view["schedule"][1]["location"] is None


def test_view_over_budget(itinerary, trip_request):
    itinerary.budget.estimated_cost = 120
    view = build_itinerary_view(itinerary, trip_request)
    assert view["difference"] == "£20.00 Over"
    assert view["under_budget"] is False


def test_single_person_label(itinerary, trip_request):
    view = build_itinerary_view(itinerary, replace(trip_request, people_count=1))
    assert view["people_label"] == "student"


def test_render_itinerary(app, itinerary, trip_request):
    with app.app_context():
        html = render_itinerary(itinerary, trip_request)
    assert "£20.00 Under" in html
    assert "Prepared for 2 students" in html
    assert "Manchester Art Gallery" in html
    assert "Mackie Mayor, Northern Quarter" in html
    assert html.index("Coach to Manchester") < html.index("Lunch at Mackie Mayor")
    assert "FOOD &amp; DRINK" in html
