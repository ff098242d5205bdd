"""Configuration objects for different environments."""

import os

DEV_SECRET_KEY = "dev-key-change-in-production"


def _parse_bool(val: str) -> bool:
    """Parse a string as boolean for env config."""
    return str(val).strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.environ.get("SECRET_KEY", DEV_SECRET_KEY)
    # Vortex SDK credentials; the base URL falls back to the SDK default when unset
    VORTEX_API_KEY = os.environ.get("VORTEX_API_KEY", "demo-api-key")
    VORTEX_BASE_URL = os.environ.get("VORTEX_BASE_URL") or None
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    MAX_CONTENT_LENGTH = 1024 * 1024
    # Audit log location; defaults to <instance>/audit.log
    AUDIT_LOG_PATH = os.environ.get("AUDIT_LOG_PATH") or None
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "8000"))
    # SSL/HTTPS (security.py also reads these from env if not on config)
    SSL_CERT_FILE = os.environ.get("SSL_CERT_FILE") or None
    SSL_KEY_FILE = os.environ.get("SSL_KEY_FILE") or None
    FORCE_HTTPS = _parse_bool(os.environ.get("FORCE_HTTPS", "false"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = _parse_bool(os.environ.get("SESSION_COOKIE_SECURE", "true"))

    @classmethod
    def validate(cls) -> None:
        """Refuse to start in production with the development secret key."""
        if cls.SECRET_KEY == DEV_SECRET_KEY:
            raise RuntimeError("SECRET_KEY must be set in production")


def get_config():
    """Return a config class based on the VORTEX_DEMO_ENV environment variable."""
    env = os.environ.get("VORTEX_DEMO_ENV", "development").lower()
    if env.startswith("prod"):
        return ProductionConfig
    return DevelopmentConfig
