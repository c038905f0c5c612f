import asyncio
import json

import httpx
import pytest

from app.schemas.generation import FailureKind, GenerationFailure, GenerationSuccess
from app.services.gemini import FALLBACK_EMAIL_BODY, GeminiClient, build_request_body, extract_text

from .conftest import TEST_API_KEY, GeminiSpy, gemini_payload

API_URL = "https://gemini.test/v1beta/models/test:generateContent"


def _client(make_http_client, handler) -> GeminiClient:
    return GeminiClient(api_url=API_URL, http_client=make_http_client(handler))


@pytest.mark.asyncio
async def test_success_extracts_first_candidate_text(make_http_client):
    spy = GeminiSpy(body={"candidates": [{"content": {"parts": [{"text": "Hello"}]}}]})
    result = await _client(make_http_client, spy).generate("write it", TEST_API_KEY)

    assert result == GenerationSuccess(email_body="Hello")
    assert result.ok
    assert spy.calls == 1


@pytest.mark.asyncio
async def test_request_shape(make_http_client):
    spy = GeminiSpy()
    await _client(make_http_client, spy).generate("the prompt", TEST_API_KEY)

    request = spy.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/test:generateContent"
    assert request.url.params["key"] == TEST_API_KEY
    assert json.loads(request.content) == {"contents": [{"parts": [{"text": "the prompt"}]}]}
    assert build_request_body("the prompt") == json.loads(request.content)


@pytest.mark.asyncio
async def test_non_success_status_maps_to_http_error(make_http_client):
    spy = GeminiSpy(status_code=429, body='"rate limited"')
    result = await _client(make_http_client, spy).generate("p", TEST_API_KEY)

    assert isinstance(result, GenerationFailure)
    assert result.kind == FailureKind.PROVIDER_HTTP_ERROR
    assert result.status_code == 429
    assert result.detail == '"rate limited"'
    assert spy.calls == 1


@pytest.mark.asyncio
async def test_error_body_never_echoes_api_key(make_http_client):
    spy = GeminiSpy(status_code=400, body=f"API key not valid: {TEST_API_KEY}")
    result = await _client(make_http_client, spy).generate("p", TEST_API_KEY)

    assert result.kind == FailureKind.PROVIDER_HTTP_ERROR
    assert TEST_API_KEY not in result.detail
    assert TEST_API_KEY not in result.message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"candidates": []},
        {},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        [],
    ],
)
async def test_missing_text_returns_fallback_body(make_http_client, body):
    result = await _client(make_http_client, GeminiSpy(body=body)).generate("p", TEST_API_KEY)

    assert isinstance(result, GenerationSuccess)
    assert result.email_body == FALLBACK_EMAIL_BODY
    assert result.fallback_used


@pytest.mark.asyncio
async def test_malformed_json_is_parse_error(make_http_client):
    result = await _client(make_http_client, GeminiSpy(body="{not json")).generate("p", TEST_API_KEY)

    assert isinstance(result, GenerationFailure)
    assert result.kind == FailureKind.PROVIDER_PARSE_ERROR
    assert result.status_code == 200


@pytest.mark.asyncio
async def test_timeout_is_cancelled(make_http_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    result = await _client(make_http_client, handler).generate("p", TEST_API_KEY)

    assert result.kind == FailureKind.CANCELLED
    assert TEST_API_KEY not in (result.detail or "")


@pytest.mark.asyncio
async def test_connection_error_is_http_error_without_status(make_http_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

    result = await _client(make_http_client, handler).generate("p", TEST_API_KEY)

    assert result.kind == FailureKind.PROVIDER_HTTP_ERROR
    assert result.status_code is None
    assert TEST_API_KEY not in result.detail


@pytest.mark.asyncio
async def test_task_cancellation_propagates(make_http_client):
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.sleep(10)
        return httpx.Response(200, json=gemini_payload("late"))

    client = _client(make_http_client, handler)
    task = asyncio.create_task(client.generate("p", TEST_API_KEY))
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


def test_extract_text():
    assert extract_text(gemini_payload("Hi")) == "Hi"
    assert extract_text({"candidates": [{"content": {"parts": [{"text": 5}]}}]}) is None
    assert extract_text(None) is None
