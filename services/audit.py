"""Audit logging for authentication events and Vortex operations.

Each entry is written as one JSON object per line to the audit log, so the
file can be tailed or shipped without extra parsing.
"""

import json
import logging
import os
from datetime import UTC, datetime
from typing import Any

from flask import current_app, has_request_context, request
from flask_login import current_user


class AuditLogger:
    """Centralized audit logging for session and Vortex actions."""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize the audit logger with Flask app."""
        audit_log_path = app.config.get("AUDIT_LOG_PATH") or os.path.join(
            app.instance_path, "audit.log"
        )

        # One logger per application so two apps never share a file
        audit_logger = logging.getLogger(f"vortex_demo.audit.{id(app):x}")
        audit_logger.setLevel(logging.INFO)

        handler = logging.FileHandler(audit_log_path)
        handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)

        # Replace a handler left behind by an app that reused this id
        for old_handler in list(audit_logger.handlers):
            audit_logger.removeHandler(old_handler)
            old_handler.close()
        audit_logger.addHandler(handler)

        app.audit_logger = audit_logger

    def log_action(
        self,
        action: str,
        resource_type: str,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
        success: bool = True,
        error_message: str | None = None,
    ):
        """Log an audited action.

        Args:
            action: The action performed (e.g., 'login', 'logout', 'jwt')
            resource_type: Type of resource (e.g., 'session', 'vortex')
            resource_id: ID of the resource, such as the user id
            details: Additional details about the action
            success: Whether the action was successful
            error_message: Error message if action failed
        """
        try:
            user_id = "anonymous"
            if current_user and current_user.is_authenticated:
                user_id = current_user.id

            ip_address = "unknown"
            user_agent = "unknown"
            if has_request_context():
                ip_address = request.remote_addr or "unknown"
                user_agent = request.headers.get("User-Agent", "unknown")

            audit_entry = {
                "timestamp": datetime.now(UTC).isoformat(),
                "user_id": user_id,
                "ip_address": ip_address,
                "user_agent": user_agent,
                "action": action,
                "resource_type": resource_type,
                "resource_id": resource_id,
                "success": success,
                "details": details or {},
            }

            if error_message:
                audit_entry["error_message"] = error_message

            logger = getattr(current_app, "audit_logger", None)
            if isinstance(logger, logging.Logger):
                log_message = json.dumps(audit_entry, separators=(",", ":"))
                if success:
                    logger.info(log_message)
                else:
                    logger.error(log_message)

        except Exception as e:
            # Don't let audit logging break the request
            current_app.logger.warning(f"Audit logging failed: {e}")


# Global audit logger instance
audit_logger = AuditLogger()


def log_action(
    action: str,
    resource_type: str,
    resource_id: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
    error_message: str | None = None,
):
    """Convenience function for logging audited actions."""
    audit_logger.log_action(
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        details=details,
        success=success,
        error_message=error_message,
    )


def read_audit_log(path: str, limit: int = 100) -> list[dict]:
    """Return the most recent audit entries from ``path``, newest first."""
    if not os.path.exists(path):
        return []

    with open(path) as f:
        lines = f.readlines()

    entries = []
    for line in lines[-limit:]:
        # Format: "timestamp - level - json_data"
        parts = line.strip().split(" - ", 2)
        if len(parts) < 3:
            continue
        try:
            entries.append(json.loads(parts[2]))
        except json.JSONDecodeError:
            continue

    return list(reversed(entries))
