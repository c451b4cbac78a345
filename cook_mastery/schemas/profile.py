"""Profile and progress schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cook_mastery.models.enums import DifficultyLevel

USERNAME_PATTERN = r"^[A-Za-z0-9_]+$"


class ProfileResponse(BaseModel):
    """Profile information response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    selected_level: DifficultyLevel
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    """Update username and/or selected level."""

    username: str | None = Field(None, min_length=3, max_length=20, pattern=USERNAME_PATTERN)
    selected_level: DifficultyLevel | None = None

    @model_validator(mode="after")
    def require_one_field(self) -> "ProfileUpdate":
        if self.username is None and self.selected_level is None:
            raise ValueError("At least one field must be provided for update")
        return self


class LevelProgress(BaseModel):
    """Completion counts for one level."""

    level: DifficultyLevel
    total_count: int
    completed_count: int
    completion_percent: float
    is_up_to_date: bool


class ProgressSummary(BaseModel):
    """Per-level progress and advancement eligibility."""

    user_id: UUID
    selected_level: DifficultyLevel
    level_progress: list[LevelProgress]
    can_advance: bool
