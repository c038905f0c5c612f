"""
In-process types for prompt construction and generation results.
Built per request by the API layer and discarded once the email is returned.
"""
from dataclasses import dataclass
from enum import Enum


class GenerationStyle(str, Enum):
    DEFAULT = "Default"
    MINIMAL = "Minimal"
    ABOUT_THEM = "AboutThem"
    CUSTOM = "Custom"

    @classmethod
    def _missing_(cls, value):
        # Extension clients still send the numeric enum (0-3)
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        return None


@dataclass(frozen=True)
class SenderProfile:
    full_name: str
    target_roles: str = ""
    about_me: str = ""
    current_role: str | None = None
    linkedin_url: str | None = None


@dataclass(frozen=True)
class GenerationRequest:
    recipient_profile_text: str
    style: GenerationStyle = GenerationStyle.DEFAULT
    custom_instructions: str | None = None
    sender_profile: SenderProfile | None = None


class FailureKind(str, Enum):
    CONFIGURATION_ERROR = "configuration_error"
    PROVIDER_HTTP_ERROR = "provider_http_error"
    PROVIDER_PARSE_ERROR = "provider_parse_error"
    CANCELLED = "cancelled"


USER_FACING_FAILURE_MESSAGE = "Failed to generate email. Please try again."


@dataclass(frozen=True)
class GenerationSuccess:
    email_body: str
    # True when the provider answered 2xx but carried no usable text
    fallback_used: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class GenerationFailure:
    kind: FailureKind
    message: str
    status_code: int | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def user_message(self) -> str:
        return USER_FACING_FAILURE_MESSAGE


GenerationResult = GenerationSuccess | GenerationFailure
