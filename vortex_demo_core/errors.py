"""Error types and JSON error handlers."""

from flask import Flask, jsonify
from flask.typing import ResponseReturnValue


class ApiError(Exception):
    """An error that is reported to the client as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def register_error_handlers(app: Flask) -> None:
    """Render every error as a JSON body with an ``error`` field."""

    @app.errorhandler(ApiError)
    def api_error(error: ApiError) -> ResponseReturnValue:
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not Found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method Not Allowed"}), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({"error": "Request body too large"}), 413

    @app.errorhandler(429)
    def too_many_requests(error):
        return jsonify({"error": "Too many requests"}), 429

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, "original_exception", None)
        if original is not None:
            app.logger.error(f"Unexpected error: {original}")
        return jsonify({"error": "Internal server error"}), 500
