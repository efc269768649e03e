# brokeuni_travel/api/services/flow.py
"""Three-screen flow: input -> loading -> result."""

import enum
import logging
from typing import Callable, Optional

from brokeuni_travel.api.errors import FlowStateError, GenerationError
from brokeuni_travel.api.models import Itinerary, TripRequest

logger = logging.getLogger(__name__)

FLOW_FAILED_MESSAGE = (
    "Oh no! Something went wrong while brewing your trip. Please try again."
)


class FlowState(str, enum.Enum):
    INPUT = "input"
    LOADING = "loading"
    RESULT = "result"


class PlannerFlow:
    """Decides which screen is shown and what it carries.

    An itinerary is only ever held together with the request that
    produced it, and a submit is only accepted from the input screen.
    """

    def __init__(self):
        self.state = FlowState.INPUT
        self.request: Optional[TripRequest] = None
        self.itinerary: Optional[Itinerary] = None
        self.error: Optional[str] = None

    def _require(self, expected: FlowState, event: str) -> None:
        if self.state is not expected:
            raise FlowStateError(
                f"Cannot {event} while in '{self.state.value}' (expected '{expected.value}')"
            )

    def submit(self, request: TripRequest) -> None:
        self._require(FlowState.INPUT, "submit")
        self.request = request
        self.error = None
        self.state = FlowState.LOADING

    def succeed(self, itinerary: Itinerary) -> None:
        self._require(FlowState.LOADING, "complete")
        self.itinerary = itinerary
        self.state = FlowState.RESULT

    def fail(self, message: str = FLOW_FAILED_MESSAGE) -> None:
        self._require(FlowState.LOADING, "fail")
        self.error = message
        self.state = FlowState.INPUT

    def go_back(self) -> None:
        self._require(FlowState.RESULT, "go back")
        self.itinerary = None
        self.state = FlowState.INPUT

    def run(self, request: TripRequest, generate: Callable[[TripRequest], Itinerary]) -> FlowState:
        """Submit ``request`` and settle the flow with the outcome of ``generate``."""
        self.submit(request)
        return self.settle(generate)

    def settle(self, generate: Callable[[TripRequest], Itinerary]) -> FlowState:
        """Generate for the captured request; any failure returns to input."""
        self._require(FlowState.LOADING, "generate")
        try:
            itinerary = generate(self.request)
        except GenerationError as exc:
            logger.error("Itinerary generation failed (%s): %s", exc.kind, exc.detail or exc)
            self.fail()
        except Exception:
            logger.exception("Unexpected error during itinerary generation")
            self.fail()
        else:
            self.succeed(itinerary)
        return self.state

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "request": self.request.to_dict() if self.request else None,
            "itinerary": self.itinerary.to_dict() if self.itinerary else None,
            "error": self.error,
        }
