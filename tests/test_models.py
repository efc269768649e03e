import pytest

from brokeuni_travel.api.models import Itinerary


def test_itinerary_from_dict(itinerary_payload):
    itinerary = Itinerary.from_dict(itinerary_payload)
    assert itinerary.summary.destination == "Manchester"
    assert [item.time for item in itinerary.schedule] == ["09:00", "11:00", "13:00"]
    assert itinerary.schedule[0].cost_per_person == 12.5
    assert itinerary.schedule[1].location is None
    assert itinerary.budget.breakdown.food_and_drink == 30.0
    assert itinerary.budget.difference == 20.0


def test_itinerary_to_dict_uses_service_keys(itinerary_payload):
    data = Itinerary.from_dict(itinerary_payload).to_dict()
    assert data["budget"]["breakdown"] == {"travel": 25.0, "foodAndDrink": 30.0, "entertainment": 25.0}
    assert "location" not in data["schedule"][1]
    assert data["schedule"][2]["location"] == "Mackie Mayor, Northern Quarter"


def test_schedule_order_is_kept(itinerary_payload):
    itinerary_payload["schedule"].reverse()
    itinerary = Itinerary.from_dict(itinerary_payload)
    assert [item.time for item in itinerary.schedule] == ["13:00", "11:00", "09:00"]


@pytest.mark.parametrize("mutate", [
    lambda p: p.pop("budget"),
    lambda p: p["tripSummary"].pop("purpose"),
    lambda p: p["schedule"][0].pop("cost"),
    lambda p: p["budget"]["breakdown"].update(travel="cheap"),
])
def test_itinerary_from_dict_rejects_wrong_shape(itinerary_payload, mutate):
    mutate(itinerary_payload)
    with pytest.raises((KeyError, TypeError, ValueError)):
        Itinerary.from_dict(itinerary_payload)


def test_trip_request_total_budget(trip_request):
    assert trip_request.total_budget == 100.0
    assert trip_request.to_dict()["interests"] == ["Foodie", "Art & Culture"]
