# brokeuni_travel/api/services/itinerary_view.py
"""Derived values and HTML rendering for the itinerary result screen."""

from typing import Any, Dict

from flask import render_template

from brokeuni_travel.api.models import BudgetReport, Itinerary, TripRequest

BREAKDOWN_CARDS = (
    ("TRAVEL", "travel", "card-travel"),
    ("FOOD & DRINK", "food_and_drink", "card-food"),
    ("ENTERTAINMENT", "entertainment", "card-entertainment"),
)


def format_gbp(amount: float) -> str:
    return f"£{amount:.2f}"


def difference_label(report: BudgetReport) -> str:
    """Signed budget difference, e.g. ``£20.00 Under`` or ``£20.00 Over``."""
    difference = report.difference
    if difference >= 0:
        return f"{format_gbp(difference)} Under"
    return f"{format_gbp(abs(difference))} Over"


def build_itinerary_view(itinerary: Itinerary, request: TripRequest) -> Dict[str, Any]:
    """Template context for ``_itinerary.html``.

    Budget figures are displayed exactly as reported by the generation
    service; nothing is recomputed from the schedule.
    """
    budget = itinerary.budget
    people = request.people_count
    return {
        "destination": itinerary.summary.destination,
        "purpose": itinerary.summary.purpose,
        "people_count": people,
        "people_label": "students" if people > 1 else "student",
        "cards": [
            {
                "label": label,
                "amount": format_gbp(getattr(budget.breakdown, attr)),
                "css_class": css_class,
            }
            for label, attr, css_class in BREAKDOWN_CARDS
        ],
        "total_budget": format_gbp(budget.total_budget),
        "estimated_cost": format_gbp(budget.estimated_cost),
        "difference": difference_label(budget),
        "under_budget": budget.difference >= 0,
        "schedule": [
            {
                "time": item.time,
                "activity": item.activity,
                "location": item.location,
                "cost": f"~{format_gbp(item.cost_per_person)}",
                "description": item.description,
            }
            for item in itinerary.schedule
        ],
    }


def render_itinerary(itinerary: Itinerary, request: TripRequest) -> str:
    """Render the result partial. Needs an application context."""
    return render_template("_itinerary.html", view=build_itinerary_view(itinerary, request))
