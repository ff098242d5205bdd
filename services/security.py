"""Security headers and HTTPS handling.

Provides security headers, HTTPS redirects, and SSL/TLS configuration
for the demo server.
"""

import os

from flask import Flask, redirect, request


class SecurityHeaders:
    """Middleware for adding security headers to responses."""

    def __init__(self, app: Flask | None = None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask):
        """Initialize security headers middleware."""
        app.after_request(self.add_security_headers)

        if app.config.get("FORCE_HTTPS"):
            app.before_request(self.force_https)

    def add_security_headers(self, response):
        """Add security headers to all responses."""
        # The demo page loads the Vortex React bundle from public CDNs
        csp_policy = (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net https://unpkg.com; "
            "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
            "img-src 'self' data: https:; "
            "connect-src 'self' https:; "
            "frame-ancestors 'none'; "
            "base-uri 'self'; "
            "form-action 'self';"
        )
        response.headers["Content-Security-Policy"] = csp_policy
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if request.is_secure or request.headers.get("X-Forwarded-Proto") == "https":
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        # Session and SDK responses carry per-user data
        if request.endpoint and request.endpoint.startswith(("auth.", "vortex.")):
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"

        return response

    def force_https(self):
        """Redirect HTTP requests to HTTPS."""
        if (
            not request.is_secure
            and request.headers.get("X-Forwarded-Proto") != "https"
        ):
            # Don't redirect the health check
            if request.endpoint == "public.health":
                return None

            return redirect(request.url.replace("http://", "https://", 1), code=301)
        return None


def configure_ssl_context(app: Flask) -> tuple | None:
    """Configure SSL context for HTTPS support.

    Args:
        app: Flask application instance

    Returns:
        SSL context tuple (cert_file, key_file) or None
    """
    cert_file = app.config.get("SSL_CERT_FILE") or os.environ.get("SSL_CERT_FILE")
    key_file = app.config.get("SSL_KEY_FILE") or os.environ.get("SSL_KEY_FILE")

    if cert_file and key_file:
        if os.path.exists(cert_file) and os.path.exists(key_file):
            app.logger.info(f"SSL configured with cert: {cert_file}")
            return (cert_file, key_file)
        app.logger.warning(f"SSL files not found: {cert_file}, {key_file}")

    return None


security_headers = SecurityHeaders()
