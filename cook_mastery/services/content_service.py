"""Content listing service for tutorials and articles."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session, sessionmaker

from cook_mastery.models.completion import UserArticle, UserTutorial
from cook_mastery.models.content import Article, Tutorial
from cook_mastery.models.enums import ContentKind, ContentSort
from cook_mastery.schemas.content import (
    ArticleDetail,
    ArticleListItem,
    ContentQuery,
    TutorialDetail,
    TutorialListItem,
)
from cook_mastery.schemas.pagination import PaginationMeta, page_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentType:
    """Tables and schemas backing one kind of content."""

    kind: ContentKind
    model: Any
    completion_model: Any
    content_fk: str  # column on completion_model referencing model.id
    list_schema: type[BaseModel]
    detail_schema: type[BaseModel]

    @property
    def completion_content_column(self):
        return getattr(self.completion_model, self.content_fk)


CONTENT_TYPES: dict[ContentKind, ContentType] = {
    ContentKind.TUTORIAL: ContentType(
        kind=ContentKind.TUTORIAL,
        model=Tutorial,
        completion_model=UserTutorial,
        content_fk="tutorial_id",
        list_schema=TutorialListItem,
        detail_schema=TutorialDetail,
    ),
    ContentKind.ARTICLE: ContentType(
        kind=ContentKind.ARTICLE,
        model=Article,
        completion_model=UserArticle,
        content_fk="article_id",
        list_schema=ArticleListItem,
        detail_schema=ArticleDetail,
    ),
}


def build_content_query(db: Session, content_type: ContentType, criteria: ContentQuery) -> Query:
    """Apply the filters and ordering of ``criteria`` to a query over one content table.

    Every sort mode ends with ``id`` so rows with equal sort keys keep the
    same relative order from page to page.
    """
    model = content_type.model
    query = db.query(model)

    if criteria.level is not None:
        query = query.filter(model.level == criteria.level)
    if criteria.category is not None and hasattr(model, "category"):
        query = query.filter(model.category == criteria.category)

    if criteria.sort == ContentSort.DIFFICULTY_ASC:
        query = query.order_by(
            model.difficulty_weight.asc(), model.created_at.desc(), model.id.desc()
        )
    else:
        query = query.order_by(model.created_at.desc(), model.id.desc())

    return query


class ContentService:
    """Service for reading tutorials and articles."""

    def __init__(self, db: Session):
        self.db = db

    def list_content(
        self,
        kind: ContentKind,
        criteria: ContentQuery,
        viewer_id: UUID | None = None,
    ) -> tuple[list[BaseModel], PaginationMeta]:
        """List one page of content with optional completion status for the viewer."""
        content_type = CONTENT_TYPES[kind]
        query = build_content_query(self.db, content_type, criteria)

        total_items = query.order_by(None).count()
        offset = page_offset(criteria.page, criteria.limit)
        rows = query.offset(offset).limit(criteria.limit).all()

        completed: dict[UUID, datetime] = {}
        if viewer_id is not None and criteria.include_completed and rows:
            completed = self._completed_at_by_id(content_type, viewer_id, [r.id for r in rows])

        items = [self._to_schema(content_type.list_schema, row, completed) for row in rows]
        return items, PaginationMeta.build(criteria.page, criteria.limit, total_items)

    def get_detail(
        self,
        kind: ContentKind,
        content_id: UUID,
        viewer_id: UUID | None = None,
    ) -> BaseModel | None:
        """Get one content item, or None if it does not exist."""
        content_type = CONTENT_TYPES[kind]
        row = self.db.query(content_type.model).filter(content_type.model.id == content_id).first()
        if row is None:
            return None

        completed: dict[UUID, datetime] = {}
        if viewer_id is not None:
            completed = self._completed_at_by_id(content_type, viewer_id, [row.id])

        detail = self._to_schema(content_type.detail_schema, row, completed)
        if kind == ContentKind.TUTORIAL:
            detail.steps.sort(key=lambda step: step.order)
        return detail

    def _completed_at_by_id(
        self, content_type: ContentType, viewer_id: UUID, content_ids: list[UUID]
    ) -> dict[UUID, datetime]:
        """Completion timestamps for the given ids.

        A failure here is logged and treated as "nothing completed" so the
        listing itself still succeeds.
        """
        completion = content_type.completion_model
        fk_column = content_type.completion_content_column
        try:
            rows = (
                self.db.query(fk_column, completion.completed_at)
                .filter(completion.user_id == viewer_id, fk_column.in_(content_ids))
                .all()
            )
        except SQLAlchemyError as e:
            logger.warning(f"Completion lookup failed for {content_type.kind.value}s: {e}")
            self.db.rollback()
            return {}
        return {content_id: completed_at for content_id, completed_at in rows}

    @staticmethod
    def _to_schema(schema: type[BaseModel], row, completed: dict[UUID, datetime]) -> BaseModel:
        item = schema.model_validate(row)
        completed_at = completed.get(row.id)
        item.is_completed = completed_at is not None
        item.completed_at = completed_at
        return item


def _list_in_own_session(
    session_factory: sessionmaker,
    kind: ContentKind,
    criteria: ContentQuery,
    viewer_id: UUID | None,
) -> tuple[list[BaseModel], PaginationMeta]:
    db = session_factory()
    try:
        return ContentService(db).list_content(kind, criteria, viewer_id)
    finally:
        db.close()


async def list_feed(
    session_factory: sessionmaker,
    criteria: ContentQuery,
    viewer_id: UUID | None = None,
) -> dict[ContentKind, tuple[list[BaseModel], PaginationMeta]]:
    """List tutorials and articles concurrently.

    Each listing runs in a worker thread on its own session. If either one
    raises, the exception propagates and no partial result is returned.
    """
    tutorials, articles = await asyncio.gather(
        asyncio.to_thread(
            _list_in_own_session, session_factory, ContentKind.TUTORIAL, criteria, viewer_id
        ),
        asyncio.to_thread(
            _list_in_own_session, session_factory, ContentKind.ARTICLE, criteria, viewer_id
        ),
    )
    return {ContentKind.TUTORIAL: tutorials, ContentKind.ARTICLE: articles}
