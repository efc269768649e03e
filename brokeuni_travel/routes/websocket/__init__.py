# brokeuni_travel/routes/websocket/__init__.py
"""WebSocket route handlers initialization."""

import logging

from brokeuni_travel.api.services.autocomplete import DEFAULT_DEBOUNCE_SECONDS, start_timer
from brokeuni_travel.api.services.planner_session import SessionRegistry
from brokeuni_travel.routes import NAMESPACE
from .autocomplete import AutocompleteHandler
from .connection import ConnectionHandler
from .planner import PlannerHandler

logger = logging.getLogger(__name__)


def register_websocket_handlers(
    socketio,
    generator,
    city_lookup,
    scheduler=start_timer,
    debounce_seconds=DEFAULT_DEBOUNCE_SECONDS,
    background=True,
):
    """Register all planner WebSocket event handlers with SocketIO.

    Args:
        socketio: Flask-SocketIO instance
        generator: Itinerary generator shared by every session
        city_lookup: Remote city lookup shared by every session
        scheduler: Debounce timer factory for the autocomplete fields
        debounce_seconds: Quiet period before a remote city lookup
        background: Run generation in a Socket.IO background task

    Returns:
        The SessionRegistry holding one PlannerSession per connection
    """
    logger.info("Registering planner WebSocket handlers...")
    registry = SessionRegistry()

    handlers = [
        ConnectionHandler(socketio, registry, city_lookup, scheduler, debounce_seconds),
        AutocompleteHandler(socketio, registry),
        PlannerHandler(socketio, registry, generator, background=background),
    ]
    for handler in handlers:
        logger.info(f"Registering {type(handler).__name__} for namespace: {NAMESPACE}")
        handler.register_handlers()

    logger.info("✅ Planner WebSocket handlers registered successfully")
    return registry


__all__ = ['register_websocket_handlers', 'NAMESPACE']
