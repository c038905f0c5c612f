import pytest

from app.schemas.generation import FailureKind, GenerationFailure, GenerationStyle, GenerationSuccess
from app.services.gemini import GenerationConfig
from app.services.generate import PLACEHOLDER_API_KEY, generate_email, is_configured_api_key

from .conftest import GeminiSpy


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", [None, "", "   ", PLACEHOLDER_API_KEY])
async def test_missing_key_is_configuration_error_without_network(api_key, make_request, make_http_client):
    spy = GeminiSpy()
    config = GenerationConfig(api_key=api_key)

    result = await generate_email(make_request(), config, client=make_http_client(spy))

    assert isinstance(result, GenerationFailure)
    assert result.kind == FailureKind.CONFIGURATION_ERROR
    assert spy.calls == 0


@pytest.mark.asyncio
async def test_sends_built_prompt_and_returns_client_result(
    make_request, sender, recipient_text, generation_config, make_http_client
):
    spy = GeminiSpy()
    req = make_request(style=GenerationStyle.MINIMAL, sender=sender)

    result = await generate_email(req, generation_config, client=make_http_client(spy))

    assert result == GenerationSuccess(email_body="Hello")
    assert spy.calls == 1
    prompt = spy.sent_prompt()
    assert recipient_text in prompt
    assert "under 80 words" in prompt
    assert str(spy.requests[0].url).startswith(generation_config.api_url)


@pytest.mark.asyncio
async def test_provider_failure_is_returned_unchanged(make_request, generation_config, make_http_client):
    spy = GeminiSpy(status_code=503, body="overloaded")

    result = await generate_email(make_request(), generation_config, client=make_http_client(spy))

    assert result.kind == FailureKind.PROVIDER_HTTP_ERROR
    assert result.status_code == 503
    assert result.user_message == "Failed to generate email. Please try again."


def test_is_configured_api_key():
    assert is_configured_api_key("abc")
    assert not is_configured_api_key(None)
    assert not is_configured_api_key("")
    assert not is_configured_api_key(PLACEHOLDER_API_KEY)
