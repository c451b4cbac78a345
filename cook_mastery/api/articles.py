"""Article API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from cook_mastery.api.dependencies import (
    PRIVATE_CACHE,
    PUBLIC_CACHE,
    get_completion_service,
    get_content_service,
    get_current_user,
    get_optional_user,
)
from cook_mastery.config import get_settings
from cook_mastery.errors import NotFoundError
from cook_mastery.models.enums import CompletionStatus, ContentKind, ContentSort, DifficultyLevel
from cook_mastery.models.user import User
from cook_mastery.schemas.content import (
    ArticleDetail,
    ArticleListResponse,
    CompletionResponse,
    ContentQuery,
)
from cook_mastery.services.completion_service import CompletionService
from cook_mastery.services.content_service import ContentService

settings = get_settings()

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    response: Response,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
    level: DifficultyLevel | None = None,
    sort: ContentSort = ContentSort.DIFFICULTY_ASC,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    include_completed: bool = True,
):
    """List articles with filters, sorting and pagination."""
    criteria = ContentQuery(
        level=level,
        sort=sort,
        page=page,
        limit=limit,
        include_completed=include_completed,
    )
    viewer_id = current_user.id if current_user else None
    items, pagination = service.list_content(ContentKind.ARTICLE, criteria, viewer_id)

    response.headers["Cache-Control"] = PRIVATE_CACHE if viewer_id else PUBLIC_CACHE
    return {"items": items, "pagination": pagination}


@router.get("/{article_id}", response_model=ArticleDetail)
async def get_article(
    article_id: UUID,
    response: Response,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Get an article and the caller's completion state."""
    viewer_id = current_user.id if current_user else None
    article = service.get_detail(ContentKind.ARTICLE, article_id, viewer_id)
    if article is None:
        raise NotFoundError("Article not found")

    response.headers["Cache-Control"] = PRIVATE_CACHE if viewer_id else PUBLIC_CACHE
    return article


@router.post(
    "/{article_id}/complete",
    response_model=CompletionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def complete_article(
    article_id: UUID,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CompletionService, Depends(get_completion_service)],
):
    """Mark an article as completed (idempotent)."""
    completion = service.complete(ContentKind.ARTICLE, article_id, current_user.id)
    if completion is None:
        raise NotFoundError("Article not found")

    if completion.status == CompletionStatus.ALREADY_COMPLETED:
        response.status_code = status.HTTP_200_OK
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return completion
