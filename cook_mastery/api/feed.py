"""Combined tutorial and article feed."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import sessionmaker

from cook_mastery.api.dependencies import PRIVATE_CACHE, PUBLIC_CACHE, get_optional_user
from cook_mastery.config import get_settings
from cook_mastery.database import get_session_factory
from cook_mastery.models.enums import ContentKind, ContentSort, DifficultyLevel
from cook_mastery.models.user import User
from cook_mastery.schemas.content import ContentQuery, FeedResponse
from cook_mastery.services.content_service import list_feed

settings = get_settings()

router = APIRouter(prefix="/api/feed", tags=["feed"])


@router.get("", response_model=FeedResponse)
async def get_feed(
    response: Response,
    current_user: Annotated[User | None, Depends(get_optional_user)],
    session_factory: Annotated[sessionmaker, Depends(get_session_factory)],
    level: DifficultyLevel | None = None,
    sort: ContentSort = ContentSort.DIFFICULTY_ASC,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    include_completed: bool = True,
):
    """First page of tutorials and articles, fetched concurrently.

    Signed-in callers without an explicit level get their profile's level.
    """
    viewer_id = current_user.id if current_user else None
    if level is None and current_user is not None and current_user.profile is not None:
        level = current_user.profile.selected_level

    criteria = ContentQuery(
        level=level,
        sort=sort,
        page=1,
        limit=limit,
        include_completed=include_completed,
    )
    results = await list_feed(session_factory, criteria, viewer_id)

    response.headers["Cache-Control"] = PRIVATE_CACHE if viewer_id else PUBLIC_CACHE
    tutorials, tutorial_pagination = results[ContentKind.TUTORIAL]
    articles, article_pagination = results[ContentKind.ARTICLE]
    return {
        "tutorials": {"items": tutorials, "pagination": tutorial_pagination},
        "articles": {"items": articles, "pagination": article_pagination},
    }
