# brokeuni_travel/app.py
"""Application factory: Flask app, CORS, Socket.IO and planner routes."""

import logging
import os

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from openai import OpenAI

from brokeuni_travel.api.config import (
    get_autocomplete_config,
    get_cors_origins,
    get_generation_config,
    get_geocoding_config,
    get_openai_api_key,
)
from brokeuni_travel.api.geocoding import create_city_lookup
from brokeuni_travel.api.llm import GenerationClient
from brokeuni_travel.api.services.autocomplete import start_timer
from brokeuni_travel.routes.planner import create_planner_blueprint
from brokeuni_travel.routes.websocket import register_websocket_handlers

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def create_generator():
    """Build the OpenAI-backed generator from environment configuration."""
    cfg = get_generation_config()
    client = OpenAI(api_key=get_openai_api_key())
    logger.info("Itinerary generation uses model %s", cfg["model"])
    return GenerationClient(
        client,
        model=cfg["model"],
        temperature=cfg["temperature"],
        max_tokens=cfg["max_tokens"],
    )


def create_app(config=None, generator=None, city_lookup=None, scheduler=start_timer):
    """Create the planner application.

    Dependencies that are not passed in are built once here from the
    environment, so nothing talks to an external service at import time.

    Returns:
        (app, socketio)
    """
    app = Flask(__name__, static_folder=None)

    flask_secret_key = os.getenv("FLASK_SECRET_KEY") or os.urandom(32).hex()
    if "FLASK_SECRET_KEY" not in os.environ:
        logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
    app.secret_key = flask_secret_key

    app.config.update(
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
        PLANNER_BACKGROUND_TASKS=True,
        AUTOCOMPLETE_DEBOUNCE_SECONDS=get_autocomplete_config()["debounce_seconds"],
    )
    if config:
        app.config.update(config)

    origins = get_cors_origins()
    CORS(app, origins=origins, supports_credentials=True)

    socketio = SocketIO(
        app,
        cors_allowed_origins=origins,
        async_mode="threading",
        logger=False,
        engineio_logger=False,
    )
    logger.info("Socket.IO initialised (async_mode=threading)")

    if generator is None:
        generator = create_generator()
    if city_lookup is None:
        city_lookup = create_city_lookup(get_geocoding_config())

    app.register_blueprint(create_planner_blueprint(BASE_DIR, generator, city_lookup))
    app.extensions["planner_sessions"] = register_websocket_handlers(
        socketio,
        generator,
        city_lookup,
        scheduler=scheduler,
        debounce_seconds=app.config["AUTOCOMPLETE_DEBOUNCE_SECONDS"],
        background=app.config["PLANNER_BACKGROUND_TASKS"],
    )
    return app, socketio
