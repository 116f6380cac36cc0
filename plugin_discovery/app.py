"""Application setup and command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from flask import Blueprint, Flask

from .plugins import PluginsService


class Environment:
    """Service environment; reports on the service's health."""

    def is_healthy(self) -> bool:
        return True


_ENVIRONMENT = Environment()


def get_environment() -> Environment:
    """Return the process-wide environment."""
    return _ENVIRONMENT


def create_app(environment: Environment | None = None) -> Flask:
    """Build the Flask application with all services registered."""
    app = Flask("plugin_discovery")
    app.extensions["environment"] = environment if environment is not None else get_environment()
    api = Blueprint("api", __name__)
    for service in (PluginsService(),):
        service.add_routes(api)
    app.register_blueprint(api)
    return app


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="plugin-discovery", description="Serve the plugin list.")
    parser.add_argument("--host", default="127.0.0.1", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)
    app = create_app(get_environment())
    app.run(host=args.host, port=args.port)
    return 0