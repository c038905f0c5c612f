from .user_profile import UserProfile
from .email_history import EmailHistory, WorkedStatus

__all__ = ["UserProfile", "EmailHistory", "WorkedStatus"]
