"""
Render the provider prompt for a generation request.
One render function per style; every template asks for the email body only.
"""
from collections.abc import Callable

from app.prompts.templates import (
    ABOUT_THEM_PROMPT,
    CONNECTION_AWARE_PROMPT,
    CUSTOM_PROMPT,
    GENERIC_OPENING_PROMPT,
    MINIMAL_PROMPT,
)
from app.schemas.generation import GenerationRequest, GenerationStyle, SenderProfile

DEFAULT_SENDER_NAME = "A professional"
NOT_SPECIFIED = "Not specified"
FALLBACK_CUSTOM_INSTRUCTIONS = "Write a professional networking email."


def first_name(full_name: str | None) -> str:
    """First whitespace-delimited token of the name, or "" when there is none."""
    if not full_name or not full_name.strip():
        return ""
    return full_name.split()[0]


def _or_default(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


def _sender_field(sender: SenderProfile | None, attr: str, default: str) -> str:
    if sender is None:
        return default
    return _or_default(getattr(sender, attr), default)


def _render_default(req: GenerationRequest) -> str:
    sender = req.sender_profile
    if sender is None or not sender.full_name.strip():
        return GENERIC_OPENING_PROMPT.format(recipient_profile=req.recipient_profile_text)
    return CONNECTION_AWARE_PROMPT.format(
        sender_name=sender.full_name,
        sender_current_role=_or_default(sender.current_role, NOT_SPECIFIED),
        sender_target_roles=sender.target_roles,
        sender_about_me=sender.about_me,
        recipient_profile=req.recipient_profile_text,
        sender_first_name=first_name(sender.full_name),
    )


def _render_minimal(req: GenerationRequest) -> str:
    sender_name = _sender_field(req.sender_profile, "full_name", DEFAULT_SENDER_NAME)
    return MINIMAL_PROMPT.format(
        sender_name=sender_name,
        sender_current_role=_sender_field(req.sender_profile, "current_role", "Software professional"),
        sender_about_me=_sender_field(req.sender_profile, "about_me", "relevant technical experience"),
        recipient_profile=req.recipient_profile_text,
        sender_first_name=first_name(sender_name),
    )


def _render_about_them(req: GenerationRequest) -> str:
    sender_name = _sender_field(req.sender_profile, "full_name", DEFAULT_SENDER_NAME)
    return ABOUT_THEM_PROMPT.format(
        sender_name=sender_name,
        sender_current_role=_sender_field(req.sender_profile, "current_role", NOT_SPECIFIED),
        sender_target_roles=_sender_field(req.sender_profile, "target_roles", "career growth"),
        recipient_profile=req.recipient_profile_text,
        sender_first_name=first_name(sender_name),
    )


def _render_custom(req: GenerationRequest) -> str:
    sender_name = _sender_field(req.sender_profile, "full_name", DEFAULT_SENDER_NAME)
    return CUSTOM_PROMPT.format(
        sender_name=sender_name,
        sender_current_role=_sender_field(req.sender_profile, "current_role", NOT_SPECIFIED),
        sender_about_me=_sender_field(req.sender_profile, "about_me", "relevant background and experience"),
        recipient_profile=req.recipient_profile_text,
        custom_instructions=_or_default(req.custom_instructions, FALLBACK_CUSTOM_INSTRUCTIONS),
        sender_first_name=first_name(sender_name),
    )


STYLE_RENDERERS: dict[GenerationStyle, Callable[[GenerationRequest], str]] = {
    GenerationStyle.DEFAULT: _render_default,
    GenerationStyle.MINIMAL: _render_minimal,
    GenerationStyle.ABOUT_THEM: _render_about_them,
    GenerationStyle.CUSTOM: _render_custom,
}


def build_prompt(req: GenerationRequest) -> str:
    """Pure and total: unknown styles render the Default template."""
    render = STYLE_RENDERERS.get(req.style, _render_default)
    return render(req)
