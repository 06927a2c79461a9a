import json

import httpx
import pytest
from fastapi.testclient import TestClient

from src.config.settings import Settings
from src.main import create_app


class FakeUpstream:
    """Stands in for the HuggingFace router and records what it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"id": "x", "choices": []})
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, hf_token="test-token", vite_huggingface_api_key="")


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(settings, upstream):
    app = create_app(settings=settings, transport=upstream.transport)
    with TestClient(app) as test_client:
        yield test_client
