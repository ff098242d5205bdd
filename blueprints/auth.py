"""Authentication routes for login, logout and the current user.

Provides a minimal JSON login against the hardcoded demo users. In
production, integrate a proper user system with hashed passwords.
"""

from flask import Blueprint, jsonify, request, session
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import BadRequest

from services.audit import log_action
from services.auth import authenticate, current_demo_user, end_session, start_session
from vortex_demo_core.errors import ApiError

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")
"""Auth blueprint routes."""


@auth_bp.route("/login", methods=["POST"])
def login() -> ResponseReturnValue:
    """Check credentials and start a session for the matching demo user."""
    try:
        data = request.get_json(force=True)
    except BadRequest as e:
        raise ApiError(400, "Invalid JSON") from e
    if not isinstance(data, dict):
        raise ApiError(400, "Invalid JSON")

    email = data.get("email")
    password = data.get("password")
    if email is None or password is None:
        raise ApiError(400, "Email and password are required")

    user = authenticate(email, password)
    if user is None:
        log_action(
            "login",
            "session",
            details={"email": email},
            success=False,
            error_message="Invalid credentials",
        )
        raise ApiError(401, "Invalid credentials")

    start_session(session, user)
    log_action("login", "session", resource_id=user.id)

    return jsonify({"success": True, "user": user.to_public_dict()})


@auth_bp.route("/logout", methods=["POST"])
def logout() -> ResponseReturnValue:
    """Clear the session. Succeeds whether or not anyone was logged in."""
    user = current_demo_user()
    end_session(session)
    if user is not None:
        log_action("logout", "session", resource_id=user.id)
    return jsonify({"success": True})


@auth_bp.route("/user")
def current() -> ResponseReturnValue:
    user = current_demo_user()
    if user is None:
        raise ApiError(401, "Not authenticated")
    return jsonify(user.to_public_dict())
