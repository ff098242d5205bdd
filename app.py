"""Run entrypoint for the Vortex demo using the core factory."""

from services.security import configure_ssl_context
from vortex_demo_core import create_app
from vortex_demo_core.cli import print_banner

app = create_app()


def main() -> None:
    """Run the development server."""
    host = app.config["HOST"]
    port = app.config["PORT"]
    print_banner(host, port)
    app.run(debug=True, host=host, port=port, ssl_context=configure_ssl_context(app))


if __name__ == "__main__":
    main()
