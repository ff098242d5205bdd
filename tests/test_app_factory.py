from unittest.mock import MagicMock

from flask import Flask

from services import vortex_client as vortex_service
from vortex_demo_core import create_app
from vortex_demo_core.extensions import SdkJSONProvider

# create_app is exercised via the flask_app fixture in conftest


def test_app_factory_smoke(flask_app: Flask):
    assert isinstance(flask_app, Flask)
    assert isinstance(flask_app.json, SdkJSONProvider)


def test_app_has_blueprints(flask_app: Flask):
    rules = [r.rule for r in flask_app.url_map.iter_rules()]
    assert "/" in rules
    assert "/health" in rules
    assert "/auth/login" in rules
    assert "/auth/logout" in rules
    assert "/auth/user" in rules
    assert "/api/vortex/jwt" in rules
    assert "/api/vortex/invitations/by-group/<group_type>/<group_id>" in rules
    assert "/api/vortex/invitations/<invitation_id>/reinvite" in rules


def test_not_found_is_json(client):
    res = client.get("/does-not-exist")
    assert res.status_code == 404
    assert res.get_json() == {"error": "Not Found"}


def test_method_not_allowed_is_json(client):
    res = client.get("/auth/login")
    assert res.status_code == 405
    assert res.get_json() == {"error": "Method Not Allowed"}


def test_injected_client_is_used(flask_app: Flask, vortex_client):
    with flask_app.app_context():
        assert vortex_service.get_vortex_client() is vortex_client


def test_client_built_lazily_from_config(test_config, monkeypatch):
    vortex_cls = MagicMock(name="Vortex")
    monkeypatch.setattr(vortex_service, "Vortex", vortex_cls)
    flask_app = create_app(test_config)

    vortex_cls.assert_not_called()
    with flask_app.app_context():
        first = vortex_service.get_vortex_client()
        second = vortex_service.get_vortex_client()

    assert first is second
    vortex_cls.assert_called_once_with("test-api-key")


def test_client_uses_base_url_when_configured(test_config, monkeypatch):
    vortex_cls = MagicMock(name="Vortex")
    monkeypatch.setattr(vortex_service, "Vortex", vortex_cls)
    test_config["VORTEX_BASE_URL"] = "https://vortex.internal.example"
    flask_app = create_app(test_config)

    with flask_app.app_context():
        vortex_service.get_vortex_client()

    vortex_cls.assert_called_once_with(
        "test-api-key", base_url="https://vortex.internal.example"
    )


class _Model:
    """Stands in for a pydantic model returned by the SDK."""

    def model_dump(self, by_alias=False, exclude_none=False):
        return {"invitationId": "inv-1"} if by_alias else {"invitation_id": "inv-1"}


def test_json_provider_serializes_sdk_models(logged_in_client, vortex_client):
    vortex_client.get_invitation_sync.return_value = _Model()
    res = logged_in_client.get("/api/vortex/invitations/inv-1")
    assert res.get_json() == {"invitationId": "inv-1"}
