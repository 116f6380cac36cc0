"""Discovery of plugins registered as tagged routes in Kong."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from flask import jsonify, request

from .kong import Client, KongError, Route, Service

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "http"
DEFAULT_PLUGIN_TAG = "pcm-plugin"
ERROR_MESSAGE = "Error sending request"


@dataclass(frozen=True)
class PluginInfo:
    """A plugin as reported to clients."""

    name: str = ""
    route: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class Settings:
    """Where Kong lives and which tag marks plugin routes."""

    host: str
    scheme: str = DEFAULT_SCHEME
    plugin_tag: str = DEFAULT_PLUGIN_TAG

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read KONG_HOST (required), KONG_SCHEME and KONG_PLUGIN_TAG."""
        environ = os.environ if environ is None else environ
        host = environ.get("KONG_HOST", "")
        if not host:
            raise ValueError(
                "missing kong host (expected to be passed via ENV['KONG_HOST'])"
            )
        return cls(
            host=host,
            scheme=environ.get("KONG_SCHEME") or DEFAULT_SCHEME,
            plugin_tag=environ.get("KONG_PLUGIN_TAG") or DEFAULT_PLUGIN_TAG,
        )

    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"


def collect_plugins(
    routes: Iterable[Route], services: Iterable[Service]
) -> list[PluginInfo]:
    """Turn routes bound to a service into plugins named after that service."""
    names = {service.id: service.name for service in services}
    return [
        PluginInfo(
            name=names.get(route.service.id, ""),
            route=route.name,
            url=route.paths[0] if route.paths else "",
        )
        for route in routes
        if route.service is not None
    ]


def list_plugins(settings: Settings) -> list[PluginInfo]:
    """Query Kong and return the plugins it knows about."""
    client = Client(settings.base_url())
    routes = client.list_routes(settings.plugin_tag)
    return collect_plugins(routes, client.list_services())


class PluginsService:
    """Registers the plugin listing endpoint on a Flask app or blueprint."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def add_routes(self, app: Any) -> None:
        app.add_url_rule("/plugins/", "list_plugins", self._view, methods=["GET"])

    def _view(self):
        try:
            plugins = list_plugins(Settings.from_environ(self._environ))
        except (ValueError, KongError) as exc:
            logger.error("GET\t%s\t500\t%s", request.host + request.path, exc)
            return jsonify(ERROR_MESSAGE), 500
        return jsonify([plugin.to_dict() for plugin in plugins]), 200