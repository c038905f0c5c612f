import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import UserProfile
from app.schemas.email import ProfileRequest

logger = logging.getLogger(__name__)


async def get_profile(session: AsyncSession, user_id: int) -> UserProfile | None:
    result = await session.execute(select(UserProfile).where(UserProfile.user_id == user_id))
    return result.scalars().one_or_none()


async def upsert_profile(session: AsyncSession, user_id: int, body: ProfileRequest) -> UserProfile:
    profile = await get_profile(session, user_id)
    if profile is None:
        profile = UserProfile(user_id=user_id)
        session.add(profile)
        logger.info("Creating profile for user_id=%s", user_id)
    else:
        logger.info("Updating profile for user_id=%s", user_id)

    profile.full_name = body.full_name.strip()
    profile.current_role = (body.current_role or "").strip() or None
    profile.target_roles = body.target_roles.strip()
    profile.about_me = body.about_me.strip()
    profile.linkedin_url = str(body.linkedin_url) if body.linkedin_url else None
    await session.flush()
    await session.refresh(profile)
    return profile
