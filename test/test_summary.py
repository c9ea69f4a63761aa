"""
Tests for AI summary generation

The DeepSeek API is replaced with an httpx.MockTransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from editorial.config import settings
from editorial.exceptions import ConfigurationError, EditorialError, UpstreamAPIError, ValidationError
from editorial.routes import ai
from editorial.routes._helpers import get_http_transport
from editorial.services.summary_service import build_payload, generate_summary


def _completion(text):
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "deepseek_api_key", "sk-test")
    monkeypatch.setattr(settings, "deepseek_api_url", "https://deepseek.test/v1/chat/completions")


class TestGenerateSummary:
    """Test the summary service"""

    async def test_success(self, api_key):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=_completion("A short summary."))

        summary = await generate_summary("Long article text", transport=httpx.MockTransport(handler))

        assert summary == "A short summary."
        assert seen[0].headers["authorization"] == "Bearer sk-test"
        assert str(seen[0].url) == "https://deepseek.test/v1/chat/completions"

    async def test_content_required(self, api_key):
        with pytest.raises(ValidationError):
            await generate_summary("")

    async def test_missing_key_sends_nothing(self, monkeypatch):
        monkeypatch.setattr(settings, "deepseek_api_key", None)
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_completion("x"))

        with pytest.raises(ConfigurationError) as exc_info:
            await generate_summary("text", transport=httpx.MockTransport(handler))

        assert exc_info.value.message == "DeepSeek API key not configured"
        assert calls == []

    async def test_upstream_status_propagated_without_body(self, api_key):
        transport = httpx.MockTransport(lambda request: httpx.Response(429, text="quota exceeded for org-123"))

        with pytest.raises(UpstreamAPIError) as exc_info:
            await generate_summary("text", transport=transport)

        assert exc_info.value.status_code == 429
        assert exc_info.value.message == "Failed to generate summary"
        assert "org-123" not in str(exc_info.value)

    async def test_transport_error(self, api_key):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(EditorialError) as exc_info:
            await generate_summary("text", transport=httpx.MockTransport(handler))

        assert exc_info.value.status_code == 500

    async def test_malformed_response(self, api_key):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []}))

        with pytest.raises(EditorialError):
            await generate_summary("text", transport=transport)

    def test_payload(self):
        payload = build_payload("Body", "deepseek-chat")
        assert payload["model"] == "deepseek-chat"
        assert payload["messages"][0]["role"] == "system"
        assert payload["messages"][1]["content"].endswith("Body")
        assert payload["max_tokens"] == 500


class TestSummaryRoute:
    """Test POST /api/ai/generate-summary"""

    @pytest.fixture
    def client_with(self, make_app):
        def _client(handler):
            test_app = make_app((ai.router, "/api/ai"))
            test_app.dependency_overrides[get_http_transport] = lambda: httpx.MockTransport(handler)
            return TestClient(test_app)

        return _client

    def test_success(self, client_with, api_key):
        with client_with(lambda request: httpx.Response(200, json=_completion("Summary"))) as client:
            response = client.post("/api/ai/generate-summary", json={"content": "Article"})

        assert response.status_code == 200
        assert response.json() == {"summary": "Summary"}

    def test_missing_content(self, client_with, api_key):
        with client_with(lambda request: httpx.Response(200, json=_completion("x"))) as client:
            response = client.post("/api/ai/generate-summary", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Content is required"}

    def test_missing_key(self, client_with, monkeypatch):
        monkeypatch.setattr(settings, "deepseek_api_key", None)
        with client_with(lambda request: httpx.Response(200, json=_completion("x"))) as client:
            response = client.post("/api/ai/generate-summary", json={"content": "Article"})

        assert response.status_code == 500
        assert response.json() == {"error": "DeepSeek API key not configured"}

    def test_upstream_failure(self, client_with, api_key):
        with client_with(lambda request: httpx.Response(429, text="rate limited: secret details")) as client:
            response = client.post("/api/ai/generate-summary", json={"content": "Article"})

        assert response.status_code == 429
        assert response.json() == {"error": "Failed to generate summary"}
