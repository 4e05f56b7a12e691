"""Pytest fixtures for gateway client tests."""

import json

import httpx
import pytest

from gewe_api.client import GeweClient

BASE_URL = "https://gewe.test/gewe/v2/api"
TOKEN = "test-token"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every outbound request."""

    def __init__(self, handler):
        self.requests = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client():
    """Build a GeweClient wired to a RecordingTransport around `handler`."""

    def factory(handler=None):
        if handler is None:
            handler = lambda request: httpx.Response(200, json={"ret": 200, "msg": "操作成功", "data": {}})
        transport = RecordingTransport(handler)
        client = GeweClient(BASE_URL, TOKEN, timeout=5.0, transport=transport)
        return client, transport

    return factory
