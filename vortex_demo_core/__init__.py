"""Core application factory and setup for the Vortex demo.

Exposes the `create_app` factory used by both the CLI entrypoint and tests.
"""

import os
from typing import Any

from flask import Flask, session
from werkzeug.middleware.proxy_fix import ProxyFix

from blueprints import auth_bp, public_bp, vortex_bp
from services import policy as policy_service
from services import vortex_client as vortex_service
from services.audit import audit_logger
from services.auth import resolve_session
from services.policy import AuthorizationPolicy
from services.security import security_headers

from .config import get_config
from .errors import register_error_handlers
from .extensions import SdkJSONProvider, limiter, login_manager
from .models.user import DemoUser


def create_app(
    test_config: dict | None = None,
    vortex_client: Any = None,
    policy: AuthorizationPolicy | None = None,
) -> Flask:
    """Application factory.

    Args:
        test_config: Optional overrides to apply when testing.
        vortex_client: Optional Vortex client to use instead of building one
            from the configured API key.
        policy: Optional authorization policy for Vortex operations.

    Returns:
        A configured `Flask` application instance.
    """
    # Ensure Flask knows where to find the top-level static folder
    package_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(package_dir, ".."))
    static_dir = os.path.join(project_root, "static")

    app = Flask(__name__, static_folder=static_dir)
    app.json = SdkJSONProvider(app)

    # Configuration
    if test_config is None:
        config_obj = get_config()
        app.config.from_object(config_obj)
        # Validate production settings
        if hasattr(config_obj, "validate"):
            config_obj.validate()
    else:
        app.config.from_object(get_config())
        app.config.update(test_config)

    # Ensure instance folder exists
    os.makedirs(app.instance_path, exist_ok=True)

    # Extensions
    login_manager.init_app(app)
    # The session carries only user_id and user_email
    login_manager.session_protection = None
    limiter.init_app(app)
    audit_logger.init_app(app)
    security_headers.init_app(app)
    vortex_service.init_app(app, vortex_client)
    policy_service.init_app(app, policy)

    @login_manager.request_loader
    def load_user_from_session(_request) -> DemoUser | None:
        return resolve_session(session)

    # Reverse proxy (intentional replacement of wsgi_app with wrapped middleware)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)  # type: ignore[invalid-assignment]

    # Blueprints
    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(vortex_bp)

    # Errors
    register_error_handlers(app)

    return app
