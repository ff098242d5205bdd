"""Vortex SDK client wiring.

The client is built lazily, once per application, from ``VORTEX_API_KEY``
and ``VORTEX_BASE_URL``. A ready-made client can be injected through
``create_app(vortex_client=...)``. Views use the SDK's ``*_sync`` methods,
which share one blocking ``httpx.Client`` across requests.
"""

from typing import Any

from flask import Flask, current_app
from vortex_sdk import Vortex

EXTENSION_KEY = "vortex"


def init_app(app: Flask, client: Any = None) -> None:
    app.extensions[EXTENSION_KEY] = client


def build_client(api_key: str, base_url: str | None = None) -> Vortex:
    """Create a Vortex SDK client."""
    if base_url:
        return Vortex(api_key, base_url=base_url)
    return Vortex(api_key)


def get_vortex_client() -> Any:
    """Return the application's Vortex client, creating it on first use."""
    client = current_app.extensions.get(EXTENSION_KEY)
    if client is None:
        client = build_client(
            current_app.config["VORTEX_API_KEY"],
            current_app.config.get("VORTEX_BASE_URL"),
        )
        current_app.extensions[EXTENSION_KEY] = client
    return client
