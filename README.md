# plugin-discovery

A small Flask service that tells clients which plugins are available behind a
Kong API gateway. Plugins are ordinary Kong routes carrying a particular tag.
The service asks Kong's admin API for the routes with that tag and for all
services, pairs each route with the service it points to, and returns the
result as JSON.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the service

```
plugin-discovery --host 0.0.0.0 --port 8080
```

Options:

- `--host` – address to listen on (default `127.0.0.1`)
- `--port` – port to listen on (default `8080`)

The service runs on Flask's built-in server. Kong is located through
environment variables, read on every request:

| Variable          | Meaning                                    | Default      |
|-------------------|--------------------------------------------|--------------|
| `KONG_HOST`       | Host (and port) of the Kong admin API      | required     |
| `KONG_SCHEME`     | Scheme for the Kong admin API              | `http`       |
| `KONG_PLUGIN_TAG` | Tag that marks a Kong route as a plugin    | `pcm-plugin` |

## The plugins endpoint

`GET /plugins/` answers with a JSON list. Each entry describes one tagged route
that is attached to a service:

```json
[
  {"name": "product-api", "route": "example_route", "url": "/mock"}
]
```

- `name` – the name of the Kong service the route belongs to, or an empty
  string if no service with that id is listed
- `route` – the name of the route
- `url` – the first path of the route, or an empty string if it has none

Routes without a service are left out. If `KONG_HOST` is not set, if Kong
cannot be reached, or if it answers with an error or with something that
cannot be decoded, the endpoint responds with status 500 and the JSON string
`"Error sending request"`, and logs the failure.

## Using the library

`plugin_discovery.kong.Client` reads routes and services from a Kong admin
endpoint, following the `next` cursor of each page until there is none:

```python
from plugin_discovery.kong import Client
from plugin_discovery.plugins import collect_plugins

client = Client("http://localhost:8001", timeout=5)
routes = client.list_routes("pcm-plugin")   # an empty tag lists all routes
services = client.list_services()

for plugin in collect_plugins(routes, services):
    print(plugin.to_dict())
```

`Client` also accepts a `requests.Session` through its `session` argument.
`Client.list_routes` and `Client.list_services` return lists of `Route` and
`Service` dataclasses and raise `KongError` when a request fails, when Kong
answers with a status other than 200 (the status is kept in
`KongError.status_code`), or when the answer cannot be decoded.

In `plugin_discovery.plugins`:

- `Settings.from_environ(environ)` builds settings from a mapping (by default
  `os.environ`) and raises `ValueError` when `KONG_HOST` is missing;
  `Settings.base_url()` gives `scheme://host`.
- `list_plugins(settings)` queries Kong and returns `PluginInfo` objects.
- `PluginsService(environ).add_routes(app)` registers `GET /plugins/` on a
  Flask app or blueprint.

In `plugin_discovery.app`, `create_app(environment)` builds the Flask
application and stores the environment in `app.extensions["environment"]`;
`get_environment()` returns the process-wide `Environment`.

## What it does not do

There is no health or readiness endpoint: `Environment.is_healthy()` always
returns `True` and nothing serves it over HTTP. The service keeps no state and
no cache; every request to `/plugins/` queries Kong anew. Plugins are only
read, never registered or changed in Kong.