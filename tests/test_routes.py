from brokeuni_travel.api.errors import GenerationParseError
from brokeuni_travel.api.services.flow import FLOW_FAILED_MESSAGE
from brokeuni_travel.api.services.trip_form import NO_INTERESTS_MESSAGE


def _trip(**overrides):
    payload = {
        "start_city": "Leeds",
        "destination_city": "Manchester",
        "trip_date": "2026-10-24",
        "budget_per_person": 50,
        "people_count": 2,
        "interests": ["Foodie"],
        "travel_preference": "Public Transport",
        "dietary_preference": "Vegetarian",
    }
    payload.update(overrides)
    return payload


def test_health(client):
    response = client.get("/planner/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "service": "planner"}


def test_index_renders_form(client):
    response = client.get("/planner/")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Plan my day" in body
    assert 'id="destination_city"' in body
    assert "Art &amp; Culture" in body


def test_static_assets_are_served(client):
    assert client.get("/planner/static/planner.js").status_code == 200


def test_options(client):
    data = client.get("/planner/api/options").get_json()
    assert data["defaults"]["budget_per_person"] == 50.0
    assert data["defaults"]["people_count"] == 1
    assert data["defaults"]["travel_preference"] == data["travel_preferences"][0]
    assert "York" in data["cities"]


def test_cities_short_query_is_empty(client, city_lookup):
    data = client.get("/planner/api/cities?q=m").get_json()
    assert data["suggestions"] == []
    assert city_lookup.queries == []


def test_cities_merges_remote_first(client):
    data = client.get("/planner/api/cities?q=man").get_json()
    assert data["suggestions"][:2] == ["Manchester", "Manchester Airport"]
    assert data["suggestions"].count("Manchester") == 1


def test_cities_degrades_to_local_on_lookup_failure(client, city_lookup):
    city_lookup.error = True
    data = client.get("/planner/api/cities?q=york").get_json()
    assert data["suggestions"] == ["York"]


def test_itinerary_success(client, generator):
    response = client.post("/planner/api/itinerary", json=_trip())
    assert response.status_code == 200
    data = response.get_json()
    assert data["itinerary"]["tripSummary"]["destination"] == "Manchester"
    assert data["view"]["difference"] == "£20.00 Under"
    assert "£20.00 Under" in data["html"]
    assert len(generator.calls) == 1
    assert generator.calls[0].interests == ("Foodie",)


def test_itinerary_without_interests_never_calls_generator(client, generator):
    response = client.post("/planner/api/itinerary", json=_trip(interests=[]))
    assert response.status_code == 400
    assert response.get_json()["error"] == NO_INTERESTS_MESSAGE
    assert generator.calls == []


def test_itinerary_rejects_non_finite_budget(client, generator):
    response = client.post("/planner/api/itinerary", json=_trip(budget_per_person="nan"))
    assert response.status_code == 400
    assert generator.calls == []


def test_itinerary_invalid_body(client, generator):
    response = client.post("/planner/api/itinerary", data="nope", content_type="text/plain")
    assert response.status_code == 400
    assert generator.calls == []


def test_itinerary_generation_failure(client, generator):
    generator.error = GenerationParseError("garbage")
    response = client.post("/planner/api/itinerary", json=_trip())
    assert response.status_code == 502
    data = response.get_json()
    assert data["error"] == FLOW_FAILED_MESSAGE
    assert data["request"]["destination_city"] == "Manchester"
