"""
Pytest fixtures: mocked Gemini transport, in-memory database, ASGI client.
"""
import json
from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.db.base import Base
from app.schemas.generation import GenerationRequest, GenerationStyle, SenderProfile
from app.services.gemini import GenerationConfig

TEST_API_KEY = "test-key-123"


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class GeminiSpy:
    """Records every request and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: str | dict | None = None) -> None:
        self.status_code = status_code
        self.body = gemini_payload("Hello") if body is None else body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def sent_prompt(self, index: int = 0) -> str:
        payload = json.loads(self.requests[index].content)
        return payload["contents"][0]["parts"][0]["text"]


@pytest.fixture
def gemini_spy() -> GeminiSpy:
    return GeminiSpy()


@pytest_asyncio.fixture
async def make_http_client():
    clients: list[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        await client.aclose()


@pytest.fixture
def generation_config() -> GenerationConfig:
    return GenerationConfig(api_key=TEST_API_KEY, api_url="https://gemini.test/v1beta/models/test:generateContent")


@pytest.fixture
def sender() -> SenderProfile:
    return SenderProfile(
        full_name="Jane Q. Doe",
        current_role="Backend Engineer at Acme",
        target_roles="Staff Engineer, Platform roles",
        about_me="6 years building Python services; studied CS at Georgia Tech.",
        linkedin_url="https://www.linkedin.com/in/janedoe",
    )


@pytest.fixture
def recipient_text() -> str:
    return "John Smith\nDirector of Engineering at Stripe\nPreviously Google, Georgia Tech alum"


@pytest.fixture
def make_request(recipient_text: str):
    def factory(style=GenerationStyle.DEFAULT, sender=None, custom=None) -> GenerationRequest:
        return GenerationRequest(
            recipient_profile_text=recipient_text,
            style=style,
            custom_instructions=custom,
            sender_profile=sender,
        )

    return factory


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session
