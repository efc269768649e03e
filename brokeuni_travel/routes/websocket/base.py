# brokeuni_travel/routes/websocket/base.py
"""Base WebSocket handler with common functionality."""

import logging
from flask import request
from flask_socketio import emit

from brokeuni_travel.routes import NAMESPACE

logger = logging.getLogger(__name__)


class BaseWebSocketHandler:
    """Base class for planner WebSocket handlers."""

    def __init__(self, socketio, registry, namespace=NAMESPACE):
        self.socketio = socketio
        self.registry = registry
        self.namespace = namespace

    def emit_to_client(self, event, data, to=None):
        """Emit to the current client, or to ``to`` from outside a request."""
        if to:
            self.socketio.emit(event, data, to=to, namespace=self.namespace)
        else:
            emit(event, data, namespace=self.namespace)

    def current_session(self):
        """Planner session of the connected client, or None."""
        return self.registry.get(request.sid)

    def log_event(self, event_name, data=None):
        """Log WebSocket events consistently."""
        if data:
            logger.info(f"[WS] {event_name} - Client: {request.sid}, Data: {data}")
        else:
            logger.info(f"[WS] {event_name} - Client: {request.sid}")

    def handle_error(self, error, event_name="", sid=None):
        """Handle and log errors consistently."""
        client = sid or request.sid
        logger.error(f"[WS] Error in {event_name} - Client: {client}, Error: {error}")
        self.emit_to_client('error', {'message': str(error), 'event': event_name}, to=sid)
