"""Unit tests for the GoogleTranslateClient and the TranslationService."""

import json

import httpx
import pytest

from blog.application.interfaces import Translator
from blog.application.services import TranslationService
from blog.domain.exceptions import TranslationProviderError
from blog.infrastructure.translation import GoogleTranslateClient


# ── Helpers ──


def _mock_translate_response(*texts: str) -> dict:
    """Build a mock Translation v2 JSON response."""
    return {
        "data": {
            "translations": [
                {"translatedText": text, "detectedSourceLanguage": "ja"} for text in texts
            ]
        }
    }


def _make_mock_transport(
    response_data: dict | None = None,
    status_code: int = 200,
    captured: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response and records requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return httpx.Response(status_code, json=response_data or {})

    return httpx.MockTransport(handler)


def _client(transport: httpx.MockTransport, api_key: str = "test-key") -> GoogleTranslateClient:
    return GoogleTranslateClient(
        api_key=api_key,
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── GoogleTranslateClient ──


@pytest.mark.asyncio
async def test_translate_sends_v2_request_and_parses_response():
    captured: list[httpx.Request] = []
    transport = _make_mock_transport(_mock_translate_response("Hello", "World"), captured=captured)

    result = await _client(transport).translate(["こんにちは", "世界"], "en")

    assert result == ["Hello", "World"]
    request = captured[0]
    assert request.method == "POST"
    assert request.url.params["key"] == "test-key"
    assert json.loads(request.content) == {
        "q": ["こんにちは", "世界"],
        "target": "en",
        "format": "text",
    }


@pytest.mark.asyncio
async def test_translate_unescapes_html_entities():
    transport = _make_mock_transport(_mock_translate_response("Tom &amp; Jerry&#39;s"))
    result = await _client(transport).translate(["トムとジェリー"], "en")
    assert result == ["Tom & Jerry's"]


@pytest.mark.asyncio
async def test_translate_error_handling():
    """Provider errors carry the provider status and message."""
    error_data = {"error": {"code": 400, "message": "Invalid Value"}}
    transport = _make_mock_transport(error_data, status_code=400)

    with pytest.raises(TranslationProviderError) as exc_info:
        await _client(transport).translate(["x"], "zz")

    assert exc_info.value.status_code == 400
    assert "Invalid Value" in exc_info.value.message


@pytest.mark.asyncio
async def test_translate_malformed_response_is_bad_gateway():
    transport = _make_mock_transport({"unexpected": True})
    with pytest.raises(TranslationProviderError) as exc_info:
        await _client(transport).translate(["x"], "en")
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_translate_count_mismatch_is_bad_gateway():
    transport = _make_mock_transport(_mock_translate_response("only one"))
    with pytest.raises(TranslationProviderError) as exc_info:
        await _client(transport).translate(["a", "b"], "en")
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_translate_network_error_is_bad_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = GoogleTranslateClient(
        api_key="test-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    with pytest.raises(TranslationProviderError) as exc_info:
        await client.translate(["x"], "en")
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_translate_without_api_key_is_unavailable():
    captured: list[httpx.Request] = []
    transport = _make_mock_transport(_mock_translate_response("x"), captured=captured)

    with pytest.raises(TranslationProviderError) as exc_info:
        await _client(transport, api_key="").translate(["x"], "en")

    assert exc_info.value.status_code == 503
    assert captured == []


@pytest.mark.asyncio
async def test_translate_empty_batch_skips_provider():
    captured: list[httpx.Request] = []
    transport = _make_mock_transport(captured=captured)
    assert await _client(transport).translate([], "en") == []
    assert captured == []


# ── TranslationService ──


class EchoTranslator(Translator):
    """Upper-cases instead of translating."""

    def __init__(self):
        self.calls: list[tuple[list[str], str]] = []

    @property
    def provider_name(self) -> str:
        return "echo"

    async def translate(self, texts: list[str], target_language: str) -> list[str]:
        self.calls.append((texts, target_language))
        return [t.upper() for t in texts]


@pytest.mark.asyncio
async def test_service_string_in_string_out():
    translator = EchoTranslator()
    result = await TranslationService(translator).translate("hello", "en")
    assert result == "HELLO"
    assert translator.calls == [(["hello"], "en")]


@pytest.mark.asyncio
async def test_service_list_in_list_out():
    result = await TranslationService(EchoTranslator()).translate(["a", "b"], "fr")
    assert result == ["A", "B"]
