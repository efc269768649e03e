# brokeuni_travel/api/services/trip_form.py
"""Mutable form state that becomes an immutable ``TripRequest`` on submit."""

import logging
import math
from datetime import date
from typing import Any, Dict, List, Optional

from brokeuni_travel.api.constants import (
    DIETARY_PREFERENCES,
    INTERESTS_OPTIONS,
    TRAVEL_PREFERENCES,
)
from brokeuni_travel.api.errors import FormValidationError
from brokeuni_travel.api.models import TripRequest

logger = logging.getLogger(__name__)

CITY_FIELDS = ("start_city", "destination_city")
NUMERIC_FIELDS = {"budget_per_person": float, "people_count": int}
CHOICE_FIELDS = {
    "travel_preference": TRAVEL_PREFERENCES,
    "dietary_preference": DIETARY_PREFERENCES,
}
TEXT_FIELDS = CITY_FIELDS + ("trip_date",)

MIN_BUDGET_PER_PERSON = 10
MIN_PEOPLE = 1
NO_INTERESTS_MESSAGE = "Please select at least one interest!"


def _coerce_number(name: str, value: Any):
    caster = NUMERIC_FIELDS[name]
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise FormValidationError(f"{name} must be a number") from None
    if not math.isfinite(number):
        raise FormValidationError(f"{name} must be a finite number")
    if caster is int:
        if not number.is_integer():
            raise FormValidationError(f"{name} must be a whole number")
        return int(number)
    return number


class TripForm:
    """Holds the trip parameters while the user edits them."""

    def __init__(self, initial: Optional[TripRequest] = None, today: Optional[date] = None):
        if initial is not None:
            self._data = initial.to_dict()
        else:
            self._data = self.defaults(today)

    @staticmethod
    def defaults(today: Optional[date] = None) -> Dict[str, Any]:
        return {
            "start_city": "",
            "destination_city": "",
            "trip_date": (today or date.today()).isoformat(),
            "budget_per_person": 50.0,
            "people_count": 1,
            "interests": [],
            "travel_preference": TRAVEL_PREFERENCES[0],
            "dietary_preference": DIETARY_PREFERENCES[0],
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], today: Optional[date] = None) -> "TripForm":
        """Build a form from a JSON request body.

        There is no browser form in front of the JSON API, so the native
        constraints (required fields, numeric minimums) are checked here.
        """
        if not isinstance(payload, dict):
            raise FormValidationError("Request body must be a JSON object")

        form = cls(today=today)
        for name in TEXT_FIELDS + tuple(NUMERIC_FIELDS) + tuple(CHOICE_FIELDS):
            if name in payload:
                form.set_field(name, payload[name])

        interests = payload.get("interests") or []
        if not isinstance(interests, list):
            raise FormValidationError("interests must be a list")
        for interest in interests:
            if interest not in form.interests:
                form.toggle_interest(interest)

        for name in TEXT_FIELDS:
            if not str(form.get(name)).strip():
                raise FormValidationError(f"{name} is required")
        if form.get("budget_per_person") < MIN_BUDGET_PER_PERSON:
            raise FormValidationError(
                f"budget_per_person must be at least {MIN_BUDGET_PER_PERSON}"
            )
        if form.get("people_count") < MIN_PEOPLE:
            raise FormValidationError(f"people_count must be at least {MIN_PEOPLE}")
        return form

    # ------------------------------------------------------------------ #
    # Field updates
    # ------------------------------------------------------------------ #
    def get(self, name: str) -> Any:
        return self._data[name]

    @property
    def interests(self) -> List[str]:
        return list(self._data["interests"])

    def set_field(self, name: str, value: Any) -> None:
        if name in NUMERIC_FIELDS:
            self._data[name] = _coerce_number(name, value)
        elif name in CHOICE_FIELDS:
            if value not in CHOICE_FIELDS[name]:
                raise FormValidationError(f"Unknown {name}: {value}")
            self._data[name] = value
        elif name in TEXT_FIELDS:
            self._data[name] = "" if value is None else str(value)
        else:
            raise FormValidationError(f"Unknown field: {name}")

    def set_city(self, name: str, value: str) -> None:
        if name not in CITY_FIELDS:
            raise FormValidationError(f"Not a city field: {name}")
        self._data[name] = value

    def toggle_interest(self, interest: str) -> bool:
        """Flip membership of ``interest``; returns True if it is now selected."""
        if interest not in INTERESTS_OPTIONS:
            raise FormValidationError(f"Unknown interest: {interest}")
        interests = self._data["interests"]
        if interest in interests:
            interests.remove(interest)
            return False
        interests.append(interest)
        return True

    # ------------------------------------------------------------------ #
    # Submission
    # ------------------------------------------------------------------ #
    def validate(self) -> None:
        if not self._data["interests"]:
            raise FormValidationError(NO_INTERESTS_MESSAGE)

    def submit(self) -> TripRequest:
        self.validate()
        request = TripRequest(
            start_city=self._data["start_city"],
            destination_city=self._data["destination_city"],
            trip_date=self._data["trip_date"],
            budget_per_person=self._data["budget_per_person"],
            people_count=self._data["people_count"],
            interests=tuple(self._data["interests"]),
            travel_preference=self._data["travel_preference"],
            dietary_preference=self._data["dietary_preference"],
        )
        logger.debug("Form submitted: %s -> %s", request.start_city, request.destination_city)
        return request

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self._data)
        data["interests"] = list(data["interests"])
        return data
