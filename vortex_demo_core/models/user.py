"""Demo user table for the Vortex demo.

For demonstration purposes only. The records below are fixed for the life of
the process; real applications should back this with a proper user store and
hashed credentials.
"""

from dataclasses import dataclass

from flask_login import UserMixin


@dataclass(frozen=True)
class DemoUser(UserMixin):
    """A hardcoded demo account."""

    id: str
    email: str
    password: str
    is_auto_join_admin: bool = False

    @property
    def label(self) -> str:
        return "auto-join admin" if self.is_auto_join_admin else "regular user"

    def to_public_dict(self) -> dict:
        """Return the user fields that are safe to send to the browser."""
        return {
            "id": self.id,
            "email": self.email,
            "is_auto_join_admin": self.is_auto_join_admin,
        }


DEMO_USERS: tuple[DemoUser, ...] = (
    DemoUser(
        id="admin-user-123",
        email="admin@example.com",
        password="password123",
        is_auto_join_admin=True,
    ),
    DemoUser(
        id="user-user-456",
        email="user@example.com",
        password="userpass",
        is_auto_join_admin=False,
    ),
)


def list_users() -> tuple[DemoUser, ...]:
    """Return the fixed set of demo users."""
    return DEMO_USERS


def find_user(user_id: str | None, email: str | None) -> DemoUser | None:
    """Return the user whose id and email both match, if any."""
    if not user_id or not email:
        return None
    for user in list_users():
        if user.id == user_id and user.email == email:
            return user
    return None
