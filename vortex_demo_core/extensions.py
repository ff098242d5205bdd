"""Flask extension instances.

Provides the login manager, rate limiting and a JSON provider that
understands the SDK's pydantic models.
"""

from typing import Any

from flask.json.provider import DefaultJSONProvider
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["1000 per hour", "100 per minute"],
    storage_uri="memory://",
    strategy="fixed-window",
)

login_manager = LoginManager()


class SdkJSONProvider(DefaultJSONProvider):
    """JSON provider that serializes pydantic models returned by the SDK."""

    @staticmethod
    def default(o: Any) -> Any:
        if hasattr(o, "model_dump"):
            return o.model_dump(by_alias=True, exclude_none=True)
        return DefaultJSONProvider.default(o)
