"""Vortex API routes.

Each route resolves the session to user claims, asks the authorization
policy, and delegates to the Vortex SDK client. The paths match the other
Vortex SDK demos so the React provider can talk to any of them.
"""

from collections.abc import Callable
from functools import wraps

from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue
from vortex_sdk import VortexApiError
from werkzeug.exceptions import BadRequest, HTTPException

from services import policy
from services.audit import log_action
from services.auth import current_demo_user, vortex_claims
from services.policy import get_policy
from services.vortex_client import get_vortex_client
from vortex_demo_core.errors import ApiError

vortex_bp = Blueprint("vortex", __name__, url_prefix="/api/vortex")

VortexView = Callable[..., ResponseReturnValue]


def vortex_operation(operation: str, description: str) -> Callable[[VortexView], VortexView]:
    """Guard a view with authentication, authorization and SDK error mapping.

    The wrapped view receives the user claims as its first argument.
    """

    def decorator(view: VortexView) -> VortexView:
        @wraps(view)
        def wrapper(*args, **kwargs) -> ResponseReturnValue:
            claims = vortex_claims(current_demo_user())
            if claims is None:
                raise ApiError(401, "Authentication required")
            if not get_policy().allows(operation, claims):
                raise ApiError(403, f"Not authorized to {description}")

            try:
                response = view(claims, *args, **kwargs)
            except (ApiError, HTTPException):
                raise
            except VortexApiError as e:
                message = getattr(e, "message", None) or str(e)
                current_app.logger.error(f"Vortex error: {message}")
                log_action(
                    operation.lower(),
                    "vortex",
                    details=kwargs,
                    success=False,
                    error_message=message,
                )
                raise ApiError(500, f"Vortex error: {message}") from e
            except Exception as e:
                current_app.logger.exception(f"Unexpected error: {e}")
                log_action(
                    operation.lower(),
                    "vortex",
                    details=kwargs,
                    success=False,
                    error_message=str(e),
                )
                raise ApiError(500, "Internal server error") from e

            log_action(operation.lower(), "vortex", details=kwargs)
            return response

        return wrapper

    return decorator


@vortex_bp.route("/jwt", methods=["POST"])
@vortex_operation(policy.JWT, "generate JWT")
def generate_jwt(claims: dict) -> ResponseReturnValue:
    """Issue a Vortex JWT for the logged-in user."""
    jwt = get_vortex_client().generate_jwt(user=claims)
    return jsonify({"jwt": jwt})


@vortex_bp.route("/invitations", methods=["GET"])
@vortex_operation(policy.GET_INVITATIONS, "get invitations")
def get_invitations_by_target(claims: dict) -> ResponseReturnValue:
    """List invitations, e.g. ``?targetType=email&targetValue=user@example.com``."""
    target_type = request.args.get("targetType")
    target_value = request.args.get("targetValue")
    if target_type is None or target_value is None:
        raise ApiError(400, "Missing targetType or targetValue")

    invitations = get_vortex_client().get_invitations_by_target_sync(
        target_type, target_value
    )
    return jsonify({"invitations": invitations})


@vortex_bp.route("/invitations/accept", methods=["POST"])
@vortex_operation(policy.ACCEPT_INVITATIONS, "accept invitations")
def accept_invitations(claims: dict) -> ResponseReturnValue:
    if not request.get_data():
        raise ApiError(400, "Request body is required")
    try:
        data = request.get_json(force=True)
    except BadRequest as e:
        raise ApiError(400, "Invalid JSON in request body") from e
    if not isinstance(data, dict):
        raise ApiError(400, "Invalid JSON in request body")

    invitation_ids = data.get("invitationIds")
    target = data.get("target")
    if invitation_ids is None or target is None:
        raise ApiError(400, "Missing invitationIds or target")

    result = get_vortex_client().accept_invitations_sync(invitation_ids, target)
    return jsonify(result)


@vortex_bp.route("/invitations/<invitation_id>", methods=["GET"])
@vortex_operation(policy.GET_INVITATION, "get invitation")
def get_invitation(claims: dict, invitation_id: str) -> ResponseReturnValue:
    invitation = get_vortex_client().get_invitation_sync(invitation_id)
    return jsonify(invitation)


@vortex_bp.route("/invitations/<invitation_id>", methods=["DELETE"])
@vortex_operation(policy.REVOKE_INVITATION, "revoke invitation")
def revoke_invitation(claims: dict, invitation_id: str) -> ResponseReturnValue:
    get_vortex_client().revoke_invitation_sync(invitation_id)
    return jsonify({"success": True})


@vortex_bp.route("/invitations/by-group/<group_type>/<group_id>", methods=["GET"])
@vortex_operation(policy.GET_GROUP_INVITATIONS, "get group invitations")
def get_invitations_by_group(
    claims: dict, group_type: str, group_id: str
) -> ResponseReturnValue:
    invitations = get_vortex_client().get_invitations_by_group_sync(group_type, group_id)
    return jsonify({"invitations": invitations})


@vortex_bp.route("/invitations/by-group/<group_type>/<group_id>", methods=["DELETE"])
@vortex_operation(policy.DELETE_GROUP_INVITATIONS, "delete group invitations")
def delete_invitations_by_group(
    claims: dict, group_type: str, group_id: str
) -> ResponseReturnValue:
    get_vortex_client().delete_invitations_by_group_sync(group_type, group_id)
    return jsonify({"success": True})


@vortex_bp.route("/invitations/<invitation_id>/reinvite", methods=["POST"])
@vortex_operation(policy.REINVITE, "reinvite")
def reinvite(claims: dict, invitation_id: str) -> ResponseReturnValue:
    result = get_vortex_client().reinvite_sync(invitation_id)
    return jsonify(result)
