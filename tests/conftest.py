import copy
from datetime import date

import pytest

from brokeuni_travel.api.errors import CityLookupError
from brokeuni_travel.api.models import Itinerary, TripRequest
from brokeuni_travel.app import create_app


ITINERARY_PAYLOAD = {
    "tripSummary": {
        "destination": "Manchester",
        "purpose": "An artsy and foodie exploration of Manchester",
    },
    "schedule": [
        {
            "time": "09:00",
            "activity": "Coach to Manchester",
            "description": "Cheapest early coach with a student railcard alternative.",
            "cost": 12.5,
            "location": "Shudehill Interchange",
        },
        {
            "time": "11:00",
            "activity": "Manchester Art Gallery",
            "description": "Free entry; start with the Pre-Raphaelites.",
            "cost": 0,
        },
        {
            "time": "13:00",
            "activity": "Lunch at Mackie Mayor",
            "description": "Shared plates in a restored market hall.",
            "cost": 15,
            "location": "Mackie Mayor, Northern Quarter",
        },
    ],
    "budget": {
        "totalBudget": 100,
        "estimatedCost": 80,
        "breakdown": {"travel": 25, "foodAndDrink": 30, "entertainment": 25},
    },
}


@pytest.fixture
def itinerary_payload():
    return copy.deepcopy(ITINERARY_PAYLOAD)


@pytest.fixture
def itinerary(itinerary_payload):
    return Itinerary.from_dict(itinerary_payload)


@pytest.fixture
def trip_request():
    return TripRequest(
        start_city="Leeds",
        destination_city="Manchester",
        trip_date="2026-10-24",
        budget_per_person=50.0,
        people_count=2,
        interests=("Foodie", "Art & Culture"),
        travel_preference="Public Transport",
        dietary_preference="Vegetarian",
    )


@pytest.fixture
def today():
    return date(2026, 10, 19)


class FakeGenerator:
    """Stands in for GenerationClient; raises ``error`` when set."""

    def __init__(self, itinerary=None, error=None):
        self.itinerary = itinerary
        self.error = error
        self.calls = []

    def generate(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.itinerary


class FakeLookup:
    """Stands in for the remote city lookup."""

    def __init__(self, results=None, error=False):
        self.results = results or {}
        self.error = error
        self.queries = []

    def search(self, query):
        self.queries.append(query)
        if isinstance(self.error, Exception):
            raise self.error
        if self.error:
            raise CityLookupError("lookup unavailable")
        return list(self.results.get(query, []))


class ManualHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fired = True
        self.callback()


class ManualScheduler:
    """Debounce scheduler whose timers only fire when the test says so."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, callback):
        handle = ManualHandle(delay, callback)
        self.handles.append(handle)
        return handle

    def pending(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def fire_pending(self):
        for handle in self.pending():
            handle.fire()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def generator(itinerary):
    return FakeGenerator(itinerary=itinerary)


@pytest.fixture
def city_lookup():
    return FakeLookup({"man": ["Manchester", "Manchester Airport"], "york": ["York"]})


@pytest.fixture
def app_and_socketio(generator, city_lookup, scheduler):
    return create_app(
        config={"TESTING": True, "PLANNER_BACKGROUND_TASKS": False},
        generator=generator,
        city_lookup=city_lookup,
        scheduler=scheduler,
    )


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def client(app):
    return app.test_client()
