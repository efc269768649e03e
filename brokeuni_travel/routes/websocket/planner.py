# brokeuni_travel/routes/websocket/planner.py
"""WebSocket handlers for form edits and the input/loading/result flow."""

import logging
from flask import current_app, request

from brokeuni_travel.api.errors import FlowStateError, FormValidationError
from brokeuni_travel.api.services.flow import FlowState
from brokeuni_travel.api.services.itinerary_view import render_itinerary
from .base import BaseWebSocketHandler

logger = logging.getLogger(__name__)


def state_payload(session, html=None):
    """Body of the ``state`` event for the session's current screen."""
    flow = session.flow
    payload = {"state": flow.state.value}
    if flow.state is FlowState.INPUT:
        payload["form"] = session.form.to_dict()
        payload["error"] = flow.error
    elif flow.state is FlowState.RESULT:
        payload["request"] = flow.request.to_dict()
        payload["itinerary"] = flow.itinerary.to_dict()
        if html is not None:
            payload["html"] = html
    return payload


class PlannerHandler(BaseWebSocketHandler):
    """Handles form updates, plan submission and navigation back."""

    def __init__(self, socketio, registry, generator, background=True, **kwargs):
        super().__init__(socketio, registry, **kwargs)
        self.generator = generator
        self.background = background

    def _generate(self, app, session, sid):
        """Run generation and report the outcome. May run off the request thread."""
        rendered = {}

        def generate_and_render(trip_request):
            itinerary = self.generator.generate(trip_request)
            rendered['html'] = render_itinerary(itinerary, trip_request)
            return itinerary

        with app.app_context():
            state = session.generate(generate_and_render)
            logger.info(f"Planner session {sid} finished generation: {state.value}")
            try:
                self.emit_to_client('state', state_payload(session, rendered.get('html')), to=sid)
            except Exception as exc:
                self.handle_error(exc, 'plan_trip', sid=sid)

    def register_handlers(self):
        """Register planner event handlers."""

        @self.socketio.on('update_field', namespace=self.namespace)
        def handle_update_field(data):
            session = self.current_session()
            if session is None:
                return
            data = data or {}
            try:
                session.form.set_field(data.get('name', ''), data.get('value'))
            except FormValidationError as exc:
                self.emit_to_client('form_error', {'message': str(exc), 'event': 'update_field'})
                return
            self.emit_to_client('form', session.form.to_dict())

        @self.socketio.on('toggle_interest', namespace=self.namespace)
        def handle_toggle_interest(data):
            session = self.current_session()
            if session is None:
                return
            try:
                session.form.toggle_interest((data or {}).get('interest', ''))
            except FormValidationError as exc:
                self.emit_to_client('form_error', {'message': str(exc), 'event': 'toggle_interest'})
                return
            self.emit_to_client('form', session.form.to_dict())

        @self.socketio.on('plan_trip', namespace=self.namespace)
        def handle_plan_trip(data=None):
            """Validate, switch to the loading screen and start generation."""
            session = self.current_session()
            if session is None:
                self.emit_to_client('error', {'message': 'No session available', 'event': 'plan_trip'})
                return

            try:
                trip_request = session.submit()
            except FormValidationError as exc:
                self.emit_to_client('alert', {'message': str(exc)})
                return
            except FlowStateError as exc:
                self.handle_error(exc, 'plan_trip')
                return

            self.log_event('plan_trip', {'destination': trip_request.destination_city})
            self.emit_to_client('state', state_payload(session))

            app = current_app._get_current_object()
            if self.background:
                self.socketio.start_background_task(self._generate, app, session, request.sid)
            else:
                self._generate(app, session, request.sid)

        @self.socketio.on('go_back', namespace=self.namespace)
        def handle_go_back(data=None):
            """Leave the result screen; the last request stays in the form."""
            session = self.current_session()
            if session is None:
                return
            try:
                session.go_back()
            except FlowStateError as exc:
                self.handle_error(exc, 'go_back')
                return
            self.emit_to_client('state', state_payload(session))
