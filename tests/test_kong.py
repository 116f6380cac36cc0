import pytest
import requests
import responses

from plugin_discovery.kong import Client, KongError, Route, Service

BASE_URL = "http://kong.test/"

SERVICE_ID = "61717d6c-95eb-4be9-9350-b2c9e3723d38"
ROUTE_ID = "e9e806ee-e303-40e4-9bee-27fcd9a39c1e"
ROUTE_SERVICE_ID = "79cba7ef-6d5a-4d79-926e-6147f33d2770"


def _services_payload():
    service = {
        "id": SERVICE_ID,
        "name": "product-api",
        "host": "product-api.net",
        "port": 443,
        "protocol": "https",
        "created_at": 1702492055,
        "updated_at": 1702492055,
        "retries": 5,
        "enabled": True,
        "tags": None,
        "path": None,
        "connect_timeout": 60000,
    }
    return {"data": [service], "next": None}


def _routes_payload():
    route = {
        "id": ROUTE_ID,
        "name": "example_route",
        "paths": ["/mock"],
        "protocols": ["http", "https"],
        "methods": None,
        "hosts": None,
        "service": {"id": ROUTE_SERVICE_ID},
        "tags": ["pcm-plugin"],
        "strip_path": True,
        "preserve_host": False,
        "regex_priority": 0,
    }
    return {"data": [route], "next": None}


def test_list_services():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/services", json=_services_payload())
        services = Client(BASE_URL).list_services()

    assert len(services) == 1
    service = services[0]
    assert service.id == SERVICE_ID
    assert service.name == "product-api"
    assert service.host == "product-api.net"
    assert service.port == 443
    assert service.protocol == "https"
    assert service.created_at == 1702492055


def test_list_routes():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/routes", json=_routes_payload())
        routes = Client(BASE_URL).list_routes("cloud")
        request_url = rsps.calls[0].request.url

    assert len(routes) == 1
    route = routes[0]
    assert route.id == ROUTE_ID
    assert route.name == "example_route"
    assert "/mock" in route.paths
    assert route.service is not None
    assert route.service.id == ROUTE_SERVICE_ID
    assert request_url == "http://kong.test/routes?tags=cloud"


def test_list_routes_null_lists_become_empty():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/routes", json=_routes_payload())
        route = Client(BASE_URL).list_routes("cloud")[0]
    assert route.methods == []
    assert route.hosts == []
    assert route.protocols == ["http", "https"]


def test_list_routes_without_tags_sends_no_query():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/routes", json=_routes_payload())
        routes = Client(BASE_URL).list_routes("")
        request_url = rsps.calls[0].request.url
    assert request_url == "http://kong.test/routes"
    assert [route.name for route in routes] == ["example_route"]


def test_list_services_follows_next_cursor():
    first = {
        "data": [{"id": "a", "name": "first"}],
        "next": "/services?offset=page2",
    }
    second = {"data": [{"id": "b", "name": "second"}], "next": None}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/services", json=first)
        rsps.add(responses.GET, "http://kong.test/services", json=second)
        services = Client(BASE_URL).list_services()
        second_url = rsps.calls[1].request.url

    assert [s.name for s in services] == ["first", "second"]
    assert "offset=page2" in second_url


def test_non_ok_status_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/services", status=503)
        with pytest.raises(KongError, match="ListServices failed with status code: 503") as info:
            Client(BASE_URL).list_services()
    assert info.value.status_code == 503


def test_undecodable_body_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://kong.test/routes", body="not json")
        with pytest.raises(KongError, match="error decoding response"):
            Client(BASE_URL).list_routes("cloud")


def test_wrong_field_type_raises_decode_error():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "http://kong.test/services",
            json={"data": [{"id": "a", "port": "not-a-number"}], "next": None},
        )
        with pytest.raises(KongError, match="error decoding response"):
            Client(BASE_URL).list_services()


def test_connection_error_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "http://kong.test/routes",
            body=requests.ConnectionError("refused"),
        )
        with pytest.raises(KongError, match="error sending ListRoute request"):
            Client(BASE_URL).list_routes("cloud")


def test_route_from_dict_without_service():
    route = Route.from_dict({"id": "r1", "name": "plain", "paths": ["/x"]})
    assert route.service is None
    assert route.paths == ["/x"]


def test_service_from_dict_defaults():
    service = Service.from_dict({"id": "s1"})
    assert service == Service(id="s1")