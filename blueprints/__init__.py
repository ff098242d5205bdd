"""Blueprint package for the demo routes.

Exports the registered blueprints to be imported by the application factory.
"""

from .auth import auth_bp  # noqa: F401
from .public import public_bp  # noqa: F401
from .vortex import vortex_bp  # noqa: F401
