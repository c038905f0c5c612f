"""
Gemini client: one POST per prompt, response normalized into a GenerationResult.
Failures are returned as values; nothing here logs or retries.
"""
import json
from dataclasses import dataclass
from typing import Any

import httpx

from app.schemas.generation import (
    FailureKind,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
)

DEFAULT_GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
)
DEFAULT_TIMEOUT_SECONDS = 45.0

# Returned as a successful body when a 2xx response carries no text.
FALLBACK_EMAIL_BODY = "Failed to generate email"


@dataclass(frozen=True)
class GenerationConfig:
    api_key: str | None
    api_url: str = DEFAULT_GEMINI_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def build_request_body(prompt: str) -> dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_text(payload: Any) -> str | None:
    """candidates[0].content.parts[0].text, or None if any step is missing or empty."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text


def _redact(text: str, api_key: str) -> str:
    if api_key:
        return text.replace(api_key, "***")
    return text


class GeminiClient:
    def __init__(
        self,
        api_url: str = DEFAULT_GEMINI_API_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self._http_client = http_client

    @classmethod
    def from_config(cls, config: GenerationConfig, http_client: httpx.AsyncClient | None = None) -> "GeminiClient":
        return cls(api_url=config.api_url, http_client=http_client, timeout_seconds=config.timeout_seconds)

    async def _post(self, prompt: str, api_key: str) -> httpx.Response:
        kwargs: dict[str, Any] = {
            "params": {"key": api_key},
            "json": build_request_body(prompt),
        }
        if self._http_client is not None:
            return await self._http_client.post(self.api_url, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            return await client.post(self.api_url, **kwargs)

    async def generate(self, prompt: str, api_key: str) -> GenerationResult:
        try:
            response = await self._post(prompt, api_key)
        except httpx.TimeoutException as e:
            return GenerationFailure(
                kind=FailureKind.CANCELLED,
                message="Gemini request timed out",
                detail=_redact(f"{type(e).__name__}: {e}", api_key),
            )
        except httpx.RequestError as e:
            return GenerationFailure(
                kind=FailureKind.PROVIDER_HTTP_ERROR,
                message="Gemini request failed before a response was received",
                detail=_redact(f"{type(e).__name__}: {e}", api_key),
            )

        if not response.is_success:
            return GenerationFailure(
                kind=FailureKind.PROVIDER_HTTP_ERROR,
                message=f"Gemini API request failed with status {response.status_code}",
                status_code=response.status_code,
                detail=_redact(response.text, api_key),
            )

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return GenerationFailure(
                kind=FailureKind.PROVIDER_PARSE_ERROR,
                message="Gemini returned a body that is not valid JSON",
                status_code=response.status_code,
                detail=_redact(str(e), api_key),
            )

        text = extract_text(payload)
        if text is None:
            return GenerationSuccess(email_body=FALLBACK_EMAIL_BODY, fallback_used=True)
        return GenerationSuccess(email_body=text)
