import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db import get_session
from app.models.user_profile import utcnow
from app.schemas.email import (
    EmailHistoryResponse,
    GenerateEmailRequest,
    GenerateEmailResponse,
    ProfileRequest,
    ProfileResponse,
    UpdateEmailRequest,
    UpdateStatusRequest,
)
from app.schemas.generation import FailureKind, GenerationFailure, GenerationResult
from app.services import history as history_service
from app.services.gemini import GenerationConfig
from app.services.generate import GenerateEmailService, generate_email, log_generation_result
from app.services.profiles import get_profile, upsert_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

NOT_CONFIGURED_MESSAGE = "Email generation is not configured."
HISTORY_NOT_FOUND = "Email history not found"


def get_generation_config() -> GenerationConfig:
    return settings.generation_config()


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Shared client opened in the app lifespan; None means one client per call."""
    return getattr(request.app.state, "http_client", None)


def raise_for_failure(result: GenerationResult) -> None:
    if not isinstance(result, GenerationFailure):
        return
    if result.kind == FailureKind.CONFIGURATION_ERROR:
        raise HTTPException(status_code=500, detail=NOT_CONFIGURED_MESSAGE)
    raise HTTPException(status_code=502, detail=result.user_message)


@router.post("/email/generate/guest", response_model=GenerateEmailResponse)
async def generate_guest_email(
    body: GenerateEmailRequest,
    request: Request,
    config: GenerationConfig = Depends(get_generation_config),
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> GenerateEmailResponse:
    """Generate an email without a sender profile; nothing is stored."""
    ip_address = request.client.host if request.client else "unknown"
    if len(body.linkedin_profile_data) > settings.guest_max_profile_chars:
        raise HTTPException(status_code=400, detail="LinkedIn profile data too large")

    logger.info("Guest email generation request from %s, style=%s", ip_address, body.email_type.value)
    result = await generate_email(body.to_generation_request(), config, client=http_client)
    log_generation_result(result, f"guest ip={ip_address}")
    raise_for_failure(result)
    return GenerateEmailResponse(id=0, generated_email=result.email_body, created_at=utcnow())


@router.post("/users/{user_id}/emails", response_model=GenerateEmailResponse)
async def generate_user_email(
    user_id: int,
    body: GenerateEmailRequest,
    session: AsyncSession = Depends(get_session),
    config: GenerationConfig = Depends(get_generation_config),
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> GenerateEmailResponse:
    """Generate a personalized email with the user's stored profile and save it to history."""
    service = GenerateEmailService(session, config, http_client=http_client)
    result, history = await service.run(user_id, body.to_generation_request())
    raise_for_failure(result)
    return GenerateEmailResponse(
        id=history.id,
        generated_email=history.generated_email,
        created_at=history.created_at,
    )


@router.get("/users/{user_id}/profile", response_model=ProfileResponse)
async def read_profile(user_id: int, session: AsyncSession = Depends(get_session)) -> ProfileResponse:
    profile = await get_profile(session, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileResponse.model_validate(profile)


@router.post("/users/{user_id}/profile", response_model=ProfileResponse)
async def save_profile(
    user_id: int,
    body: ProfileRequest,
    session: AsyncSession = Depends(get_session),
) -> ProfileResponse:
    profile = await upsert_profile(session, user_id, body)
    return ProfileResponse.model_validate(profile)


@router.get("/users/{user_id}/emails", response_model=list[EmailHistoryResponse])
async def list_emails(user_id: int, session: AsyncSession = Depends(get_session)) -> list[EmailHistoryResponse]:
    rows = await history_service.list_history(session, user_id)
    return [EmailHistoryResponse.model_validate(row) for row in rows]


@router.get("/users/{user_id}/emails/{history_id}", response_model=EmailHistoryResponse)
async def read_email(
    user_id: int,
    history_id: int,
    session: AsyncSession = Depends(get_session),
) -> EmailHistoryResponse:
    row = await history_service.get_history(session, user_id, history_id)
    if row is None:
        raise HTTPException(status_code=404, detail=HISTORY_NOT_FOUND)
    return EmailHistoryResponse.model_validate(row)


@router.patch("/users/{user_id}/emails/{history_id}/status", response_model=EmailHistoryResponse)
async def update_email_status(
    user_id: int,
    history_id: int,
    body: UpdateStatusRequest,
    session: AsyncSession = Depends(get_session),
) -> EmailHistoryResponse:
    row = await history_service.update_status(session, user_id, history_id, body.worked_status)
    if row is None:
        raise HTTPException(status_code=404, detail=HISTORY_NOT_FOUND)
    return EmailHistoryResponse.model_validate(row)


@router.put("/users/{user_id}/emails/{history_id}", response_model=EmailHistoryResponse)
async def update_email(
    user_id: int,
    history_id: int,
    body: UpdateEmailRequest,
    session: AsyncSession = Depends(get_session),
) -> EmailHistoryResponse:
    row = await history_service.update_body(session, user_id, history_id, body.generated_email)
    if row is None:
        raise HTTPException(status_code=404, detail=HISTORY_NOT_FOUND)
    return EmailHistoryResponse.model_validate(row)


@router.delete("/users/{user_id}/emails/{history_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_email(
    user_id: int,
    history_id: int,
    session: AsyncSession = Depends(get_session),
) -> Response:
    if not await history_service.delete_history(session, user_id, history_id):
        raise HTTPException(status_code=404, detail=HISTORY_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
