"""
Email history for a user: list, read, status feedback, manual edits, delete.
Every lookup is scoped by user_id; a row owned by someone else reads as missing.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import EmailHistory, WorkedStatus

logger = logging.getLogger(__name__)


async def list_history(session: AsyncSession, user_id: int) -> list[EmailHistory]:
    result = await session.execute(
        select(EmailHistory)
        .where(EmailHistory.user_id == user_id)
        .order_by(EmailHistory.created_at.desc(), EmailHistory.id.desc())
    )
    return list(result.scalars().all())


async def get_history(session: AsyncSession, user_id: int, history_id: int) -> EmailHistory | None:
    result = await session.execute(
        select(EmailHistory).where(EmailHistory.id == history_id, EmailHistory.user_id == user_id)
    )
    return result.scalars().one_or_none()


async def update_status(
    session: AsyncSession, user_id: int, history_id: int, status: WorkedStatus
) -> EmailHistory | None:
    history = await get_history(session, user_id, history_id)
    if history is None:
        return None
    history.worked_status = status
    await session.flush()
    await session.refresh(history)
    logger.info("Marked history id=%s as %s for user_id=%s", history_id, status.value, user_id)
    return history


async def update_body(
    session: AsyncSession, user_id: int, history_id: int, generated_email: str
) -> EmailHistory | None:
    history = await get_history(session, user_id, history_id)
    if history is None:
        return None
    history.generated_email = generated_email
    await session.flush()
    await session.refresh(history)
    return history


async def delete_history(session: AsyncSession, user_id: int, history_id: int) -> bool:
    history = await get_history(session, user_id, history_id)
    if history is None:
        return False
    await session.delete(history)
    await session.flush()
    logger.info("Deleted history id=%s for user_id=%s", history_id, user_id)
    return True
