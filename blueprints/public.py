"""Root routes: the demo page and the health check."""

from datetime import UTC, datetime

from flask import Blueprint, current_app, jsonify
from flask.typing import ResponseReturnValue
from vortex_sdk import __version__ as vortex_sdk_version

SERVICE_NAME = "vortex-python-demo"

public_bp = Blueprint("public", __name__)


@public_bp.route("/")
def index() -> ResponseReturnValue:
    """Serve the single-page demo interface."""
    return current_app.send_static_file("index.html")


@public_bp.route("/health")
def health() -> ResponseReturnValue:
    return jsonify(
        {
            "status": "OK",
            "service": SERVICE_NAME,
            "version": vortex_sdk_version,
            "timestamp": datetime.now(UTC).isoformat(),
        }
    )
