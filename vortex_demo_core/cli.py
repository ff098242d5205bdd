"""Command line interface for the Vortex demo server.

Starts the development server, lists the demo accounts, and inspects the
registered routes and recent audit entries.
"""

import os

import click

from services.audit import read_audit_log
from services.security import configure_ssl_context

from .models.user import list_users


def print_banner(host: str, port: int) -> None:
    """Print the startup banner with the useful URLs and demo accounts."""
    base_url = f"http://{'localhost' if host == '0.0.0.0' else host}:{port}"
    click.echo("Demo Python server starting...")
    click.echo(f"Visit {base_url} to try the demo")
    click.echo(f"Vortex API routes available at {base_url}/api/vortex")
    click.echo(f"Health check: {base_url}/health")
    click.echo()
    echo_users()


def echo_users() -> None:
    click.echo("Demo users:")
    for user in list_users():
        click.echo(f"  - {user.email} / {user.password} ({user.label})")


@click.group()
@click.version_option(package_name="vortex-demo")
def cli():
    """vortex-demo - demo server for the Vortex Python SDK."""


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default: HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port to bind (default: PORT or 8000)")
@click.option("--debug/--no-debug", default=None, help="Enable the Flask debugger")
def run(host: str | None, port: int | None, debug: bool | None):
    """Start the development server."""
    from . import create_app

    app = create_app()
    host = host or app.config["HOST"]
    port = port or app.config["PORT"]
    if debug is None:
        debug = bool(app.config.get("DEBUG"))

    print_banner(host, port)
    app.run(host=host, port=port, debug=debug, ssl_context=configure_ssl_context(app))


@cli.command()
def users():
    """List the demo accounts."""
    echo_users()


@cli.command()
def routes():
    """List the registered HTTP routes."""
    from . import create_app

    app = create_app()
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        methods = ",".join(sorted(rule.methods - {"HEAD", "OPTIONS"}))
        click.echo(f"{methods:<12} {rule.rule}")


@cli.command()
@click.option("--limit", "-n", type=int, default=20, show_default=True)
@click.option(
    "--path",
    type=click.Path(dir_okay=False),
    default=lambda: os.environ.get("AUDIT_LOG_PATH") or os.path.join("instance", "audit.log"),
    help="Audit log file",
)
def audit(limit: int, path: str):
    """Show the most recent audit log entries."""
    entries = read_audit_log(path, limit=limit)
    if not entries:
        click.echo("No audit entries found.")
        return
    for entry in entries:
        status = "ok" if entry.get("success") else "FAILED"
        click.echo(
            f"{entry.get('timestamp')} {entry.get('user_id')} "
            f"{entry.get('action')} {status}"
        )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
