import pytest

from brokeuni_travel.api.errors import (
    FlowStateError,
    GenerationParseError,
    GenerationSchemaError,
    GenerationServiceError,
)
from brokeuni_travel.api.services.flow import FLOW_FAILED_MESSAGE, FlowState, PlannerFlow
from tests.conftest import FakeGenerator


def test_starts_on_input():
    flow = PlannerFlow()
    assert flow.state is FlowState.INPUT
    assert flow.request is None and flow.itinerary is None and flow.error is None


def test_submit_moves_to_loading_and_clears_error(trip_request):
    flow = PlannerFlow()
    flow.error = "previous failure"
    flow.submit(trip_request)
    assert flow.state is FlowState.LOADING
    assert flow.request is trip_request
    assert flow.error is None


def test_success_moves_to_result(trip_request, itinerary):
    flow = PlannerFlow()
    assert flow.run(trip_request, FakeGenerator(itinerary).generate) is FlowState.RESULT
    assert flow.itinerary is itinerary
    assert flow.request is trip_request


@pytest.mark.parametrize("error", [
    GenerationServiceError("connection reset"),
    GenerationParseError("not json"),
    GenerationSchemaError("missing budget"),
])
def test_any_generation_failure_returns_to_input(trip_request, error):
    flow = PlannerFlow()
    assert flow.run(trip_request, FakeGenerator(error=error).generate) is FlowState.INPUT
    assert flow.error == FLOW_FAILED_MESSAGE
    assert flow.request is trip_request
    assert flow.itinerary is None


def test_go_back_clears_itinerary_but_keeps_request(trip_request, itinerary):
    flow = PlannerFlow()
    flow.run(trip_request, FakeGenerator(itinerary).generate)
    flow.go_back()
    assert flow.state is FlowState.INPUT
    assert flow.itinerary is None
    assert flow.request is trip_request


def test_submit_only_accepted_on_input(trip_request, itinerary):
    flow = PlannerFlow()
    flow.submit(trip_request)
    with pytest.raises(FlowStateError):
        flow.submit(trip_request)

    flow.succeed(itinerary)
    with pytest.raises(FlowStateError):
        flow.submit(trip_request)


def test_out_of_order_events_are_rejected(itinerary):
    flow = PlannerFlow()
    with pytest.raises(FlowStateError):
        flow.succeed(itinerary)
    with pytest.raises(FlowStateError):
        flow.fail()
    with pytest.raises(FlowStateError):
        flow.go_back()


def test_unexpected_exceptions_return_to_input(trip_request):
    flow = PlannerFlow()
    state = flow.run(trip_request, FakeGenerator(error=RuntimeError("boom")).generate)
    assert state is FlowState.INPUT
    assert flow.error == FLOW_FAILED_MESSAGE
    assert flow.request is trip_request
    assert flow.itinerary is None

    flow.submit(trip_request)
    assert flow.state is FlowState.LOADING


def test_to_dict(trip_request, itinerary):
    flow = PlannerFlow()
    flow.run(trip_request, FakeGenerator(itinerary).generate)
    data = flow.to_dict()
    assert data["state"] == "result"
    assert data["request"]["destination_city"] == "Manchester"
    assert data["itinerary"]["budget"]["totalBudget"] == 100.0
    assert data["error"] is None
