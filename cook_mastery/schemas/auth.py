"""Authentication schemas."""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from cook_mastery.models.enums import DifficultyLevel
from cook_mastery.schemas.profile import USERNAME_PATTERN, ProfileResponse


class SignUpRequest(BaseModel):
    """Account registration request."""

    email: EmailStr = Field(..., max_length=255)
    username: str = Field(..., min_length=3, max_length=20, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=8, max_length=128)
    selected_level: DifficultyLevel


class LoginRequest(BaseModel):
    """Login with email or username."""

    identifier: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Account information."""

    id: UUID
    email: str


class SessionResponse(BaseModel):
    """Current account and profile."""

    user: UserResponse
    profile: ProfileResponse


class AuthResponse(SessionResponse):
    """Authentication response with token, user and profile."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
