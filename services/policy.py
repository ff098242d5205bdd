"""Authorization policy for Vortex operations."""

from typing import Protocol

from flask import current_app

JWT = "JWT"
GET_INVITATIONS = "GET_INVITATIONS"
GET_INVITATION = "GET_INVITATION"
REVOKE_INVITATION = "REVOKE_INVITATION"
ACCEPT_INVITATIONS = "ACCEPT_INVITATIONS"
GET_GROUP_INVITATIONS = "GET_GROUP_INVITATIONS"
DELETE_GROUP_INVITATIONS = "DELETE_GROUP_INVITATIONS"
REINVITE = "REINVITE"

EXTENSION_KEY = "vortex_policy"


class AuthorizationPolicy(Protocol):
    """Decides whether a user may perform a Vortex operation."""

    def allows(self, operation: str, claims: dict | None) -> bool: ...


class AllowAuthenticated:
    """Allow every operation to any authenticated user.

    Suitable for the demo only. Swap in a stricter policy through
    ``create_app(policy=...)``.
    """

    def allows(self, operation: str, claims: dict | None) -> bool:
        return claims is not None


def init_app(app, policy: AuthorizationPolicy | None = None) -> None:
    app.extensions[EXTENSION_KEY] = policy or AllowAuthenticated()


def get_policy() -> AuthorizationPolicy:
    return current_app.extensions[EXTENSION_KEY]
