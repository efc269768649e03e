"""
Broke Uni Student day-trip planner – main application entry point

* Flask app + Socket.IO (threading async mode, no eventlet/gevent needed).
* The planner UI lives at `/planner/`; its Socket.IO namespace is
  `/planner/ws` on the default `/socket.io/` path.
"""

import logging

from flask import redirect, url_for
from dotenv import load_dotenv

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Application
# --------------------------------------------------------------------------- #
from brokeuni_travel.api.config import get_port  # noqa: E402
from brokeuni_travel.app import create_app  # noqa: E402
from brokeuni_travel.routes import NAMESPACE  # noqa: E402

app, socketio = create_app()


@app.route("/")
def root():
    return redirect(url_for("planner.index"))


@app.route("/debug")
def debug():
    """Simple JSON health endpoint."""
    return {
        "status": "ok",
        "socketio_initialized": True,
        "active_sessions": len(app.extensions["planner_sessions"]),
        "endpoints": {
            "planner": "/planner/",
            "websocket_namespace": NAMESPACE,
        },
    }


# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    port = get_port()
    logger.info("Starting planner on http://localhost:%d/planner/", port)
    socketio.run(app, host="0.0.0.0", port=port, debug=False, allow_unsafe_werkzeug=True)

__all__ = ["app", "socketio"]
