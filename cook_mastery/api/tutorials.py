"""Tutorial API endpoints."""

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
from cook_mastery.models.enums import (
    CompletionStatus,
    ContentKind,
    ContentSort,
    DifficultyLevel,
    TutorialCategory,
)
from cook_mastery.models.user import User
from cook_mastery.schemas.content import (
    CompletionResponse,
    ContentQuery,
    TutorialDetail,
    TutorialListResponse,
)
from cook_mastery.services.completion_service import CompletionService
from cook_mastery.services.content_service import ContentService

settings = get_settings()

router = APIRouter(prefix="/api/tutorials", tags=["tutorials"])


@router.get("", response_model=TutorialListResponse)
async def list_tutorials(
    response: Response,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
    level: DifficultyLevel | None = None,
    category: TutorialCategory | None = None,
    sort: ContentSort = ContentSort.DIFFICULTY_ASC,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    include_completed: bool = True,
):
    """List tutorials with filters, sorting and pagination."""
    criteria = ContentQuery(
        level=level,
        category=category,
        sort=sort,
        page=page,
        limit=limit,
        include_completed=include_completed,
    )
    viewer_id = current_user.id if current_user else None
    items, pagination = service.list_content(ContentKind.TUTORIAL, criteria, viewer_id)

    response.headers["Cache-Control"] = PRIVATE_CACHE if viewer_id else PUBLIC_CACHE
    return {"items": items, "pagination": pagination}


@router.get("/{tutorial_id}", response_model=TutorialDetail)
async def get_tutorial(
    tutorial_id: UUID,
    response: Response,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Get a tutorial with its steps and the caller's completion state."""
    viewer_id = current_user.id if current_user else None
    tutorial = service.get_detail(ContentKind.TUTORIAL, tutorial_id, viewer_id)
    if tutorial is None:
        raise NotFoundError("Tutorial not found")

    response.headers["Cache-Control"] = PRIVATE_CACHE if viewer_id else PUBLIC_CACHE
    return tutorial


@router.post(
    "/{tutorial_id}/complete",
    response_model=CompletionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def complete_tutorial(
    tutorial_id: UUID,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CompletionService, Depends(get_completion_service)],
):
    """Mark a tutorial as completed (idempotent)."""
    completion = service.complete(ContentKind.TUTORIAL, tutorial_id, current_user.id)
    if completion is None:
        raise NotFoundError("Tutorial not found")

    if completion.status == CompletionStatus.ALREADY_COMPLETED:
        response.status_code = status.HTTP_200_OK
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return completion
