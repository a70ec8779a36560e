"""Shared fixtures: a Client wired to an in-memory router instead of the network."""

import json

import httpx
import pytest

from .client import Client

BASE_URL = "https://github.test/api-v3/"
UPLOAD_URL = "https://github.test/api-uploads/"

_PREFIXES = ("/api-v3", "/api-uploads")


class Mux:
    """Route requests by path to canned responses and record what was sent.

    Paths are registered without the API prefix, e.g. ``/repos/o/r``.
    """

    def __init__(self):
        self._routes: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    def route(self, path, handler=None, *, method=None, json=None, status=200, headers=None, content=None):
        """Answer requests to path.

        handler, when given, receives the httpx.Request and returns an
        httpx.Response; otherwise the keyword arguments describe the response.
        """
        if handler is None:
            body = content
            response_headers = dict(headers or {})
            if json is not None:
                body = _json_dumps(json)
                response_headers.setdefault("Content-Type", "application/json")

            def handler(request):
                return httpx.Response(status, headers=response_headers, content=body or b"")

        self._routes[path] = (method, handler)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        for prefix in _PREFIXES:
            if path.startswith(prefix + "/"):
                path = path[len(prefix):]
                break
        if path not in self._routes:
            return httpx.Response(404, json={"message": "Not Found"})
        method, handler = self._routes[path]
        if method is not None:
            assert request.method == method, f"{path}: expected {method}, got {request.method}"
        return handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)

    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)


def _json_dumps(data) -> bytes:
    return json.dumps(data).encode()


@pytest.fixture
def mux():
    return Mux()


@pytest.fixture
def client(mux):
    http = httpx.Client(transport=httpx.MockTransport(mux), follow_redirects=True)
    c = Client(http, base_url=BASE_URL, upload_url=UPLOAD_URL)
    yield c
    c.close()
