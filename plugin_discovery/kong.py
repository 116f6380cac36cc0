"""Client for the Kong admin API: routes and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar
from urllib.parse import urljoin

import requests

T = TypeVar("T")


class KongError(Exception):
    """Raised when a request to the Kong admin API fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class Service:
    """A Kong service."""

    id: str = ""
    name: str = ""
    host: str = ""
    port: int = 0
    protocol: str = ""
    created_at: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Service:
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            host=data.get("host") or "",
            port=int(data.get("port") or 0),
            protocol=data.get("protocol") or "",
            created_at=int(data.get("created_at") or 0),
        )


@dataclass
class Route:
    """A Kong route, optionally bound to a service."""

    id: str = ""
    name: str = ""
    protocols: list[str] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
    hosts: list[str] = field(default_factory=list)
    service: Service | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Route:
        service = data.get("service")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            protocols=list(data.get("protocols") or []),
            paths=list(data.get("paths") or []),
            methods=list(data.get("methods") or []),
            hosts=list(data.get("hosts") or []),
            service=Service.from_dict(service) if service is not None else None,
        )


class Client:
    """Reads routes and services from a Kong admin endpoint."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def list_routes(self, tags: str = "") -> list[Route]:
        """Return all routes, filtered by tag when one is given."""
        params = {"tags": tags} if tags else None
        return self._collect("/routes", params, "ListRoute", Route.from_dict)

    def list_services(self) -> list[Service]:
        """Return all services."""
        return self._collect("/services", None, "ListServices", Service.from_dict)

    def _collect(
        self,
        path: str,
        params: dict[str, str] | None,
        operation: str,
        parse: Callable[[dict[str, Any]], T],
    ) -> list[T]:
        url = self.base_url + path
        results: list[T] = []
        while url:
            try:
                response = self._session.get(
                    url,
                    params=params,
                    headers={"Content-Type": "application/json"},
                    timeout=self._timeout,
                )
            except requests.RequestException as exc:
                raise KongError(f"error sending {operation} request, {exc}") from exc
            status = response.status_code
            if status != 200:
                raise KongError(
                    f"request {operation} failed with status code: {status}", status
                )
            try:
                payload = response.json()
                results.extend(parse(item) for item in payload.get("data") or [])
                next_cursor = payload.get("next")
            except (ValueError, TypeError, AttributeError) as exc:
                raise KongError(f"error decoding response, {exc}", status) from exc
            url = urljoin(self.base_url + "/", next_cursor) if next_cursor else ""
            params = None
        return results