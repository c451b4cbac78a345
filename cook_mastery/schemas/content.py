"""Tutorial and article schemas."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from cook_mastery.models.enums import (
    CompletionStatus,
    ContentSort,
    DifficultyLevel,
    TutorialCategory,
)
from cook_mastery.schemas.pagination import PaginationMeta


@dataclass(frozen=True)
class ContentQuery:
    """Predicates, ordering and page window for a content listing.

    ``None`` filters are not applied. ``category`` only exists on tutorials.
    """

    level: DifficultyLevel | None = None
    category: TutorialCategory | None = None
    sort: ContentSort = ContentSort.DIFFICULTY_ASC
    page: int = 1
    limit: int = 20
    include_completed: bool = True


# --- Tutorial ---


class TutorialStep(BaseModel):
    """A single tutorial step."""

    order: int
    title: str
    content: str


class TutorialListItem(BaseModel):
    """Tutorial list item (without body content)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    category: TutorialCategory
    level: DifficultyLevel
    difficulty_weight: int
    summary: str
    created_at: datetime
    is_completed: bool = False
    completed_at: datetime | None = None


class TutorialDetail(TutorialListItem):
    """Tutorial with full content and steps."""

    content: str
    steps: list[TutorialStep]
    practice_recommendations: str
    key_takeaways: str
    updated_at: datetime


class TutorialListResponse(BaseModel):
    items: list[TutorialListItem]
    pagination: PaginationMeta


# --- Article ---


class ArticleListItem(BaseModel):
    """Article list item (without body content)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    level: DifficultyLevel
    difficulty_weight: int
    summary: str
    created_at: datetime
    is_completed: bool = False
    completed_at: datetime | None = None


class ArticleDetail(ArticleListItem):
    """Article with full content."""

    content: str
    key_takeaways: str
    updated_at: datetime


class ArticleListResponse(BaseModel):
    items: list[ArticleListItem]
    pagination: PaginationMeta


# --- Feed ---


class FeedResponse(BaseModel):
    """First page of tutorials and articles fetched together."""

    tutorials: TutorialListResponse
    articles: ArticleListResponse


# --- Completion ---


class CompletionResponse(BaseModel):
    """Result of marking content complete."""

    content_id: UUID
    user_id: UUID
    completed_at: datetime
    status: CompletionStatus
