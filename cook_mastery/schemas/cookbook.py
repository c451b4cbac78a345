"""Cookbook entry schemas."""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    field_validator,
    model_validator,
)

from cook_mastery.schemas.pagination import PaginationMeta

_http_url = TypeAdapter(HttpUrl)


def _check_recipe_url(value: str) -> str:
    """Require an http(s) URL but keep the string exactly as submitted."""
    try:
        _http_url.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError("Must be a valid http or https URL") from e
    return value


RecipeUrl = Annotated[str, AfterValidator(_check_recipe_url)]


class CookbookEntryCreate(BaseModel):
    """Create a cookbook entry."""

    url: RecipeUrl
    title: str = Field(..., min_length=1, max_length=255)
    notes: str | None = Field(None, max_length=5000)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required and cannot be empty")
        return value


class CookbookEntryUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied."""

    url: RecipeUrl | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    notes: str | None = Field(None, max_length=5000)

    @model_validator(mode="after")
    def check_fields(self) -> "CookbookEntryUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        for name in ("url", "title"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        if self.title is not None and not self.title.strip():
            raise ValueError("Title cannot be empty")
        return self

    def changes(self) -> dict[str, Any]:
        """Columns to write, keyed by column name."""
        data = self.model_dump(exclude_unset=True)
        if "title" in data:
            data["title"] = self.title.strip()
        return data


class CookbookEntryResponse(BaseModel):
    """Cookbook entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    url: str
    title: str
    notes: str | None
    created_at: datetime
    updated_at: datetime


class CookbookListResponse(BaseModel):
    entries: list[CookbookEntryResponse]
    pagination: PaginationMeta


class MessageResponse(BaseModel):
    message: str
