# brokeuni_travel/routes/websocket/connection.py
"""WebSocket connection and disconnection handlers."""

import logging
from flask import request

from brokeuni_travel.api.services.planner_session import PlannerSession
from .base import BaseWebSocketHandler
from .planner import state_payload

logger = logging.getLogger(__name__)


class ConnectionHandler(BaseWebSocketHandler):
    """Creates a planner session per connection and closes it on disconnect."""

    def __init__(self, socketio, registry, city_lookup, scheduler, debounce_seconds, **kwargs):
        super().__init__(socketio, registry, **kwargs)
        self.city_lookup = city_lookup
        self.scheduler = scheduler
        self.debounce_seconds = debounce_seconds

    def _suggestion_emitter(self, sid):
        # Called from the debounce thread too, so it addresses the sid explicitly.
        def _emit(state):
            self.emit_to_client('suggestions', state.to_dict(), to=sid)
        return _emit

    def register_handlers(self):
        """Register connection-related event handlers."""

        @self.socketio.on('connect', namespace=self.namespace)
        def handle_connect(auth=None):
            """Handle WebSocket connection from browser."""
            sid = request.sid
            self.log_event('connect')
            session = self.registry.add(PlannerSession(
                sid,
                self.city_lookup.search,
                on_suggestions=self._suggestion_emitter(sid),
                scheduler=self.scheduler,
                debounce_seconds=self.debounce_seconds,
            ))
            self.emit_to_client('connected', {'session_id': sid, 'status': 'connected'})
            self.emit_to_client('state', state_payload(session))

        @self.socketio.on('disconnect', namespace=self.namespace)
        def handle_disconnect(*args):
            """Handle WebSocket disconnection."""
            self.log_event('disconnect')
            self.registry.remove(request.sid)
