# brokeuni_travel/api/services/planner_session.py
"""Per-connection planner state and the registry that tracks it."""

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional

from brokeuni_travel.api.errors import FormValidationError
from brokeuni_travel.api.models import Itinerary, TripRequest
from brokeuni_travel.api.services.autocomplete import (
    DEFAULT_DEBOUNCE_SECONDS,
    CityAutocomplete,
    SuggestionState,
    start_timer,
)
from brokeuni_travel.api.services.flow import FlowState, PlannerFlow
from brokeuni_travel.api.services.trip_form import CITY_FIELDS, TripForm

logger = logging.getLogger(__name__)


class PlannerSession:
    """Everything one browser tab is working on: form, flow and autocompletes."""

    def __init__(
        self,
        session_id: str,
        fetch: Callable[[str], List[str]],
        on_suggestions: Optional[Callable[[SuggestionState], None]] = None,
        scheduler: Callable = start_timer,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        self.session_id = session_id
        self.created_at = datetime.now()
        self.form = TripForm()
        self.flow = PlannerFlow()
        self.autocompletes: Dict[str, CityAutocomplete] = {
            field: CityAutocomplete(
                field,
                fetch,
                on_change=on_suggestions,
                scheduler=scheduler,
                delay=debounce_seconds,
            )
            for field in CITY_FIELDS
        }

    def autocomplete(self, field: str) -> CityAutocomplete:
        try:
            return self.autocompletes[field]
        except KeyError:
            raise FormValidationError(f"Not a city field: {field}") from None

    # -- city fields -------------------------------------------------------
    def type_city(self, field: str, text: str) -> SuggestionState:
        controller = self.autocomplete(field)
        self.form.set_city(field, text)
        return controller.type(text)

    def select_city(self, field: str, value: str) -> SuggestionState:
        controller = self.autocomplete(field)
        self.form.set_city(field, value)
        return controller.select(value)

    # -- flow --------------------------------------------------------------
    def submit(self) -> TripRequest:
        """Validate the form and move the flow to ``loading``."""
        request = self.form.submit()
        self.flow.submit(request)
        for controller in self.autocompletes.values():
            controller.dismiss()
        return request

    def generate(self, generate: Callable[[TripRequest], Itinerary]) -> FlowState:
        """Run generation for the submitted request and settle the flow."""
        state = self.flow.settle(generate)
        self.reseed_form()
        return state

    def reseed_form(self) -> None:
        """Back on the input screen the form starts from the last request."""
        if self.flow.state is FlowState.INPUT and self.flow.request is not None:
            self.form = TripForm(self.flow.request)

    def go_back(self) -> None:
        self.flow.go_back()
        self.reseed_form()

    def close(self) -> None:
        for controller in self.autocompletes.values():
            controller.close()


class SessionRegistry:
    """Thread-safe map of Socket.IO session id -> ``PlannerSession``."""

    def __init__(self):
        self.sessions: Dict[str, PlannerSession] = {}
        self.lock = threading.Lock()

    def add(self, session: PlannerSession) -> PlannerSession:
        with self.lock:
            previous = self.sessions.get(session.session_id)
            self.sessions[session.session_id] = session
        if previous is not None:
            previous.close()
        logger.info(f"Created planner session {session.session_id}")
        return session

    def get(self, session_id: str) -> Optional[PlannerSession]:
        with self.lock:
            return self.sessions.get(session_id)

    def remove(self, session_id: str) -> None:
        with self.lock:
            session = self.sessions.pop(session_id, None)
        if session is not None:
            session.close()
            logger.info(f"Closed planner session {session_id}")

    def __len__(self) -> int:
        with self.lock:
            return len(self.sessions)
