"""
Pytest configuration and shared fixtures.
The upstream backend is replaced with an in-process httpx.MockTransport.
"""
import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from translate_relay.main import app
from translate_relay.api.routes.translate import get_translation_service
from translate_relay.utils.translator import TranslationService


class FakeUpstream:
    """Records upstream calls and answers via a replaceable responder."""

    def __init__(self):
        self.calls = []
        self.responder = self.echo

    @staticmethod
    async def echo(payload: dict) -> httpx.Response:
        return httpx.Response(
            200,
            json={"translatedText": f"[{payload['target']}] {payload['q']}"},
        )

    async def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.calls.append(payload)
        return await self.responder(payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def service(upstream):
    """Translation service wired to the fake upstream."""
    return TranslationService(
        url="http://upstream.test/translate",
        timeout=2.0,
        max_batch_size=100,
        transport=upstream.transport(),
    )


@pytest.fixture(autouse=True)
def _override_translation_dependency(service):
    """Route the API through the fake upstream instead of the real backend."""
    app.dependency_overrides[get_translation_service] = lambda: service
    yield
    app.dependency_overrides.pop(get_translation_service, None)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async HTTP client for testing the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
