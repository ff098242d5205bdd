import json

import pytest
from click.testing import CliRunner
from flask import Flask

import vortex_demo_core
from vortex_demo_core.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patched_app(flask_app: Flask, monkeypatch):
    monkeypatch.setattr(vortex_demo_core, "create_app", lambda: flask_app)
    return flask_app


def test_users_lists_demo_accounts(runner):
    result = runner.invoke(cli, ["users"])
    assert result.exit_code == 0
    assert "admin@example.com / password123 (auto-join admin)" in result.output
    assert "user@example.com / userpass (regular user)" in result.output


def test_routes_lists_vortex_api(runner, patched_app):
    result = runner.invoke(cli, ["routes"])
    assert result.exit_code == 0
    assert "/api/vortex/jwt" in result.output
    assert "/api/vortex/invitations/<invitation_id>/reinvite" in result.output
    assert "DELETE" in result.output


def test_run_prints_banner_and_starts_server(runner, patched_app, monkeypatch):
    calls = {}

    def fake_run(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(patched_app, "run", fake_run)
    result = runner.invoke(cli, ["run", "--port", "4567", "--no-debug"])

    assert result.exit_code == 0, result.output
    assert "Visit http://localhost:4567 to try the demo" in result.output
    assert "Health check: http://localhost:4567/health" in result.output
    assert "admin@example.com" in result.output
    assert calls["port"] == 4567
    assert calls["debug"] is False


def test_audit_shows_recent_entries(runner, tmp_path):
    log_path = tmp_path / "audit.log"
    entries = [
        {"timestamp": "2026-01-01T00:00:00+00:00", "user_id": "anonymous", "action": "login", "success": False},
        {"timestamp": "2026-01-01T00:00:05+00:00", "user_id": "admin-user-123", "action": "login", "success": True},
    ]
    log_path.write_text(
        "".join(
            f"2026-01-01 00:00:00 - INFO - {json.dumps(e)}\n" for e in entries
        )
        + "not an audit line\n"
    )

    result = runner.invoke(cli, ["audit", "--path", str(log_path)])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0].endswith("admin-user-123 login ok")
    assert lines[1].endswith("anonymous login FAILED")


def test_audit_without_log(runner, tmp_path):
    result = runner.invoke(cli, ["audit", "--path", str(tmp_path / "missing.log")])
    assert result.exit_code == 0
    assert "No audit entries found." in result.output
