"""
Orchestrates: config check -> prompt construction -> Gemini call -> (optional) persistence.
"""
import logging
from dataclasses import replace

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import EmailHistory, UserProfile, WorkedStatus
from app.prompts import build_prompt
from app.schemas.generation import (
    FailureKind,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    SenderProfile,
)
from app.services.gemini import GeminiClient, GenerationConfig
from app.services.profiles import get_profile

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "YOUR_GEMINI_API_KEY_HERE"


def is_configured_api_key(api_key: str | None) -> bool:
    return bool(api_key and api_key.strip()) and api_key != PLACEHOLDER_API_KEY


async def generate_email(
    req: GenerationRequest,
    config: GenerationConfig,
    client: httpx.AsyncClient | None = None,
) -> GenerationResult:
    """Never calls the provider when the key is missing or still the placeholder."""
    if not is_configured_api_key(config.api_key):
        return GenerationFailure(
            kind=FailureKind.CONFIGURATION_ERROR,
            message="Gemini API key is not configured",
        )
    prompt = build_prompt(req)
    return await GeminiClient.from_config(config, http_client=client).generate(prompt, config.api_key)


def sender_from_profile(profile: UserProfile | None) -> SenderProfile | None:
    if profile is None:
        return None
    return SenderProfile(
        full_name=profile.full_name,
        current_role=profile.current_role,
        target_roles=profile.target_roles,
        about_me=profile.about_me,
        linkedin_url=profile.linkedin_url,
    )


def log_generation_result(result: GenerationResult, context: str) -> None:
    if isinstance(result, GenerationFailure):
        logger.error(
            "Email generation failed (%s): kind=%s status=%s message=%s detail=%s",
            context,
            result.kind.value,
            result.status_code,
            result.message,
            (result.detail or "")[:500],
        )
    elif result.fallback_used:
        # Provider said 2xx but returned no text; the body is the fixed fallback string
        logger.warning("Gemini returned no usable text (%s); returning fallback body", context)


class GenerateEmailService:
    def __init__(
        self,
        session: AsyncSession,
        config: GenerationConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.session = session
        self.config = config
        self.http_client = http_client

    async def run(self, user_id: int, req: GenerationRequest) -> tuple[GenerationResult, EmailHistory | None]:
        """Generate with the user's stored profile and persist the email on success."""
        profile = await get_profile(self.session, user_id)
        if profile is not None:
            logger.info("Using stored profile for personalization: user_id=%s", user_id)
        else:
            logger.info("No stored profile for user_id=%s, using generic prompt", user_id)

        req = replace(req, sender_profile=sender_from_profile(profile))
        logger.info(
            "Generating %s email for user_id=%s from %d chars of profile data",
            req.style.value,
            user_id,
            len(req.recipient_profile_text),
        )
        result = await generate_email(req, self.config, client=self.http_client)
        log_generation_result(result, f"user_id={user_id}")
        if isinstance(result, GenerationFailure):
            return result, None

        history = EmailHistory(
            user_id=user_id,
            linkedin_profile_data=req.recipient_profile_text,
            generated_email=result.email_body,
            worked_status=WorkedStatus.UNKNOWN,
        )
        self.session.add(history)
        await self.session.flush()
        await self.session.refresh(history)
        logger.info("Saved generated email for user_id=%s as history id=%s", user_id, history.id)
        return result, history
