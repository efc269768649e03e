# brokeuni_travel/routes/websocket/autocomplete.py
"""WebSocket handlers for the city autocomplete fields."""

import logging

from brokeuni_travel.api.errors import FormValidationError
from .base import BaseWebSocketHandler

logger = logging.getLogger(__name__)


class AutocompleteHandler(BaseWebSocketHandler):
    """Routes city input events to the session's autocomplete controllers.

    Each controller publishes its new state through the ``suggestions``
    event wired up at connect time.
    """

    def _dispatch(self, event_name, data, action):
        session = self.current_session()
        if session is None:
            self.emit_to_client('error', {'message': 'No session available', 'event': event_name})
            return
        data = data or {}
        try:
            action(session, data.get('field', ''), data.get('value', ''))
        except FormValidationError as exc:
            self.emit_to_client('form_error', {'message': str(exc), 'event': event_name})

    def register_handlers(self):
        """Register autocomplete event handlers."""

        @self.socketio.on('city_input', namespace=self.namespace)
        def handle_city_input(data):
            self._dispatch('city_input', data,
                           lambda s, field, value: s.type_city(field, value))

        @self.socketio.on('city_focus', namespace=self.namespace)
        def handle_city_focus(data):
            self._dispatch('city_focus', data,
                           lambda s, field, value: s.autocomplete(field).focus())

        @self.socketio.on('city_select', namespace=self.namespace)
        def handle_city_select(data):
            self._dispatch('city_select', data,
                           lambda s, field, value: s.select_city(field, value))

        @self.socketio.on('city_dismiss', namespace=self.namespace)
        def handle_city_dismiss(data):
            self._dispatch('city_dismiss', data,
                           lambda s, field, value: s.autocomplete(field).dismiss())
