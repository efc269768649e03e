"""Shared data structures for day-trip planning.

``TripRequest`` is what the form submits; the ``Itinerary`` family mirrors
the JSON document the generation service returns.  The itinerary classes
read and write the service's camelCase keys so ``to_dict`` produces the
same shape that ``from_dict`` accepts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TripRequest:
    """Parameters of one day trip, immutable once submitted."""

    start_city: str
    destination_city: str
    trip_date: str  # ISO date, e.g. "2026-10-19"
    budget_per_person: float
    people_count: int
    interests: Tuple[str, ...] = ()
    travel_preference: str = ""
    dietary_preference: str = ""

    @property
    def total_budget(self) -> float:
        return self.budget_per_person * self.people_count

    def to_dict(self) -> dict:
        return {
            "start_city": self.start_city,
            "destination_city": self.destination_city,
            "trip_date": self.trip_date,
            "budget_per_person": self.budget_per_person,
            "people_count": self.people_count,
            "interests": list(self.interests),
            "travel_preference": self.travel_preference,
            "dietary_preference": self.dietary_preference,
        }


@dataclass
class TripSummary:
    destination: str
    purpose: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TripSummary":
        return cls(destination=str(data["destination"]), purpose=str(data["purpose"]))

    def to_dict(self) -> dict:
        return {"destination": self.destination, "purpose": self.purpose}


@dataclass
class ScheduleItem:
    """A single entry of the day's timeline; ``cost_per_person`` is in GBP."""

    time: str  # free text, e.g. "09:30"
    activity: str
    description: str
    cost_per_person: float
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleItem":
        return cls(
            time=str(data["time"]),
            activity=str(data["activity"]),
            description=str(data["description"]),
            cost_per_person=float(data["cost"]),
            location=data.get("location") or None,
        )

    def to_dict(self) -> dict:
        result = {
            "time": self.time,
            "activity": self.activity,
            "description": self.description,
            "cost": self.cost_per_person,
        }
        if self.location:
            result["location"] = self.location
        return result


@dataclass
class BudgetBreakdown:
    travel: float
    food_and_drink: float
    entertainment: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BudgetBreakdown":
        return cls(
            travel=float(data["travel"]),
            food_and_drink=float(data["foodAndDrink"]),
            entertainment=float(data["entertainment"]),
        )

    def to_dict(self) -> dict:
        return {
            "travel": self.travel,
            "foodAndDrink": self.food_and_drink,
            "entertainment": self.entertainment,
        }


@dataclass
class BudgetReport:
    total_budget: float
    estimated_cost: float
    breakdown: BudgetBreakdown

    @property
    def difference(self) -> float:
        """Positive when the plan is under budget."""
        return self.total_budget - self.estimated_cost

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BudgetReport":
        return cls(
            total_budget=float(data["totalBudget"]),
            estimated_cost=float(data["estimatedCost"]),
            breakdown=BudgetBreakdown.from_dict(data["breakdown"]),
        )

    def to_dict(self) -> dict:
        return {
            "totalBudget": self.total_budget,
            "estimatedCost": self.estimated_cost,
            "breakdown": self.breakdown.to_dict(),
        }


@dataclass
class Itinerary:
    summary: TripSummary
    budget: BudgetReport
    schedule: List[ScheduleItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Itinerary":
        """Build an itinerary from the service payload.

        Raises KeyError, TypeError or ValueError when the payload does not
        have the requested shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        return cls(
            summary=TripSummary.from_dict(data["tripSummary"]),
            budget=BudgetReport.from_dict(data["budget"]),
            schedule=[ScheduleItem.from_dict(item) for item in data["schedule"]],
        )

    def to_dict(self) -> dict:
        return {
            "tripSummary": self.summary.to_dict(),
            "schedule": [item.to_dict() for item in self.schedule],
            "budget": self.budget.to_dict(),
        }
