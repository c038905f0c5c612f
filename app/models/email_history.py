import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.user_profile import utcnow


class WorkedStatus(str, enum.Enum):
    UNKNOWN = "Unknown"
    WORKED = "Worked"
    DIDNT_WORK = "DidntWork"


class EmailHistory(Base):
    __tablename__ = "email_histories"
    __table_args__ = (Index("ix_email_histories_user_created", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    linkedin_profile_data: Mapped[str] = mapped_column(Text, nullable=False)
    generated_email: Mapped[str] = mapped_column(Text, nullable=False)
    worked_status: Mapped[WorkedStatus] = mapped_column(
        Enum(WorkedStatus, name="worked_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=WorkedStatus.UNKNOWN,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
