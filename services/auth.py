"""Authentication and session resolution for the demo users.

Credentials are compared in plain text against the fixed demo table. The
session only ever carries ``user_id`` and ``user_email``; every request
re-resolves that pair against the table so a forged or stale cookie never
yields a partially populated user.
"""

from collections.abc import MutableMapping
from typing import Any

from flask_login import current_user

from vortex_demo_core.models.user import DemoUser, find_user, list_users

SESSION_USER_ID = "user_id"
SESSION_USER_EMAIL = "user_email"

AUTO_JOIN_SCOPE = "autoJoin"


def authenticate(email: str, password: str) -> DemoUser | None:
    """Return the demo user matching both email and password, if any."""
    for user in list_users():
        if user.email == email and user.password == password:
            return user
    return None


def resolve_session(session: MutableMapping[str, Any]) -> DemoUser | None:
    """Resolve the user named by the session, failing closed."""
    user_id = session.get(SESSION_USER_ID)
    user_email = session.get(SESSION_USER_EMAIL)
    if not user_id or not user_email:
        return None
    return find_user(user_id, user_email)


def start_session(session: MutableMapping[str, Any], user: DemoUser) -> None:
    """Replace the session contents with the identity of ``user``."""
    session.clear()
    session[SESSION_USER_ID] = user.id
    session[SESSION_USER_EMAIL] = user.email


def end_session(session: MutableMapping[str, Any]) -> None:
    session.clear()


def current_demo_user() -> DemoUser | None:
    """Return the authenticated user for the current request, if any."""
    if current_user.is_authenticated:
        return current_user._get_current_object()
    return None


def vortex_claims(user: DemoUser | None) -> dict | None:
    """Build the minimal user claims handed to the Vortex SDK."""
    if user is None:
        return None
    admin_scopes = [AUTO_JOIN_SCOPE] if user.is_auto_join_admin else []
    return {
        "id": user.id,
        "email": user.email,
        "admin_scopes": admin_scopes,
    }
