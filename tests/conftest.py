"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from ims_connector import Connector

ASSETS_BODY = (
    '[{"id":1,"name":"Asset 1","is_deleted":false,"last_updated":"1991-02-06T00:00:00.000000+00:00",'
    '"note":null,"json_data":null,"type_id":3,"primary_ip_device_id":5,"site_id":1,"tags":[7]},'
    '{"id":2,"name":"Asset 2","is_deleted":false,"last_updated":"1991-02-06T00:00:00.000000+00:00",'
    '"note":null,"json_data":null,"type_id":4,"primary_ip_device_id":6,"site_id":1,"tags":[8]}]'
)


class StubServer:
    """Records requests and answers login/assets calls with canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.login_status = 200
        self.login_body: bytes = json.dumps({"key": "tok"}).encode()
        self.assets_status = 200
        self.assets_body: bytes = ASSETS_BODY.encode()
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.path == "/api/auth/login/":
            return httpx.Response(self.login_status, content=self.login_body)
        if request.url.path == "/api/assets/":
            return httpx.Response(self.assets_status, content=self.assets_body)
        return httpx.Response(404, content=b"<h1>Not Found</h1>")

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def connector():
    """Connector that never touches the network."""
    subject = Connector("some_username", "some_password", "192.168.137.253:8000", 5)
    yield subject
    subject.close()


@pytest.fixture
def server():
    return StubServer()


@pytest.fixture
def stubbed_connector(server):
    """Connector wired to the in-process stub server."""
    subject = Connector("u", "p", "192.168.1.1:8000", 5, transport=httpx.MockTransport(server))
    yield subject
    subject.close()


@pytest.fixture
def assets_body() -> bytes:
    return ASSETS_BODY.encode()
