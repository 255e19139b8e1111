"""Unit tests for the generation proxy client."""

import json

import httpx
import pytest

from presenter_hub.models.generation import PresentationRequest
from presenter_hub.services.generation_client import GenerationClient
from presenter_hub.utils.error_handling import GenerationError


def _client(handler) -> GenerationClient:
    return GenerationClient("http://proxy.test/", timeout=5, transport=httpx.MockTransport(handler))


@pytest.fixture
def request_model() -> PresentationRequest:
    return PresentationRequest(title="Solar", content="costs", slide_by_slide=True, api_key="k")


class TestGenerate:
    """Test successful and failing proxy calls."""

    def test_success(self, request_model, plain_text):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"result": plain_text, "source": "gemini-api", "title": "Solar"}
            )

        result = _client(handler).generate(request_model)

        assert result.result == plain_text
        assert result.source == "gemini-api"
        assert seen["url"] == "http://proxy.test/api/presentation"
        assert seen["body"] == {
            "title": "Solar",
            "content": "costs",
            "slideBySlide": True,
            "apiKey": "k",
        }

    def test_non_2xx(self, request_model):
        def handler(request):
            return httpx.Response(500, text='{"error": "Failed to generate presentation"}')

        with pytest.raises(GenerationError) as exc_info:
            _client(handler).generate(request_model)

        assert exc_info.value.status_code == 500
        assert "Failed to generate presentation" in exc_info.value.body

    def test_network_error(self, request_model):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        with pytest.raises(GenerationError, match="Failed to reach generation proxy"):
            _client(handler).generate(request_model)

    def test_non_json_body(self, request_model):
        def handler(request):
            return httpx.Response(200, text="<html>proxy page</html>")

        with pytest.raises(GenerationError, match="Unexpected response"):
            _client(handler).generate(request_model)

    def test_missing_result_field(self, request_model):
        def handler(request):
            return httpx.Response(200, json={"source": "gemini-api"})

        with pytest.raises(GenerationError):
            _client(handler).generate(request_model)
