from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator, model_validator

from app.models.email_history import WorkedStatus
from app.schemas.generation import GenerationRequest, GenerationStyle, SenderProfile


class ApiModel(BaseModel):
    """camelCase on the wire (what the extension sends), snake_case in Python."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class GenerateEmailRequest(ApiModel):
    linkedin_profile_data: str = Field(..., alias="linkedInProfileData")
    email_type: GenerationStyle = Field(GenerationStyle.DEFAULT, alias="emailType")
    custom_prompt: str | None = Field(None, alias="customPrompt")

    @field_validator("email_type", mode="before")
    @classmethod
    def accept_numeric_style(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return GenerationStyle(v)
        return v

    @field_validator("linkedin_profile_data")
    @classmethod
    def require_profile_data(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("LinkedIn profile data is required")
        return v

    @model_validator(mode="after")
    def require_custom_prompt(self) -> "GenerateEmailRequest":
        if self.email_type == GenerationStyle.CUSTOM and not (self.custom_prompt or "").strip():
            raise ValueError("Custom prompt is required when email type is 'Custom'")
        return self

    def to_generation_request(self, sender: SenderProfile | None = None) -> GenerationRequest:
        return GenerationRequest(
            recipient_profile_text=self.linkedin_profile_data,
            style=self.email_type,
            custom_instructions=self.custom_prompt,
            sender_profile=sender,
        )


class GenerateEmailResponse(ApiModel):
    id: int
    generated_email: str = Field(..., alias="generatedEmail")
    created_at: datetime = Field(..., alias="createdAt")


class ProfileRequest(ApiModel):
    full_name: str = Field(..., alias="fullName", max_length=100)
    current_role: str | None = Field(None, alias="currentRole", max_length=100)
    target_roles: str = Field(..., alias="targetRoles", max_length=500)
    about_me: str = Field(..., alias="aboutMe", max_length=2000)
    linkedin_url: HttpUrl | None = Field(None, alias="linkedInUrl")

    @field_validator("full_name", "target_roles", "about_me")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("linkedin_url")
    @classmethod
    def url_length(cls, v: HttpUrl | None) -> HttpUrl | None:
        if v is not None and len(str(v)) > 200:
            raise ValueError("LinkedIn URL must be at most 200 characters")
        return v


class ProfileResponse(ApiModel):
    id: int
    full_name: str = Field(..., alias="fullName")
    current_role: str | None = Field(None, alias="currentRole")
    target_roles: str = Field(..., alias="targetRoles")
    about_me: str = Field(..., alias="aboutMe")
    linkedin_url: str | None = Field(None, alias="linkedInUrl")


class EmailHistoryResponse(ApiModel):
    id: int
    linkedin_profile_data: str = Field(..., alias="linkedInProfileData")
    generated_email: str = Field(..., alias="generatedEmail")
    worked_status: WorkedStatus = Field(..., alias="workedStatus")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class UpdateStatusRequest(ApiModel):
    worked_status: WorkedStatus = Field(..., alias="workedStatus")

    @field_validator("worked_status", mode="before")
    @classmethod
    def accept_numeric_status(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            members = list(WorkedStatus)
            if 0 <= v < len(members):
                return members[v]
        return v


class UpdateEmailRequest(ApiModel):
    generated_email: str = Field(..., alias="generatedEmail", min_length=1)
