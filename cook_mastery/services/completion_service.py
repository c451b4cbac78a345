"""Completion service for marking tutorials and articles as finished."""

import logging
from uuid import UUID

from sqlalchemy import insert as generic_insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cook_mastery.models.enums import CompletionStatus, ContentKind
from cook_mastery.schemas.content import CompletionResponse
from cook_mastery.services.content_service import CONTENT_TYPES, ContentType

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CompletionService:
    """Service for idempotent completion tracking."""

    def __init__(self, db: Session):
        self.db = db

    def complete(
        self, kind: ContentKind, content_id: UUID, user_id: UUID
    ) -> CompletionResponse | None:
        """Record that ``user_id`` finished ``content_id``.

        Returns None if the content does not exist. The first call creates the
        record; later calls return it unchanged with status already_completed.
        The write is a single insert-or-ignore against the (user, content)
        primary key, so concurrent duplicate calls cannot create two rows.
        """
        content_type = CONTENT_TYPES[kind]
        model = content_type.model
        if self.db.query(model.id).filter(model.id == content_id).first() is None:
            return None

        created = self._insert_if_absent(content_type, content_id, user_id)

        completion = content_type.completion_model
        record = (
            self.db.query(completion)
            .filter(
                completion.user_id == user_id,
                content_type.completion_content_column == content_id,
            )
            .one()
        )

        status = CompletionStatus.CREATED if created else CompletionStatus.ALREADY_COMPLETED
        logger.info(f"Completion {status.value}: user {user_id} {kind.value} {content_id}")
        return CompletionResponse(
            content_id=content_id,
            user_id=user_id,
            completed_at=record.completed_at,
            status=status,
        )

    def _insert_if_absent(
        self, content_type: ContentType, content_id: UUID, user_id: UUID
    ) -> bool:
        """Insert the completion row unless it exists. Returns True if a row was written."""
        values = {"user_id": user_id, content_type.content_fk: content_id}
        dialect_insert = _DIALECT_INSERTS.get(self.db.get_bind().dialect.name)

        if dialect_insert is not None:
            stmt = (
                dialect_insert(content_type.completion_model)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["user_id", content_type.content_fk])
            )
            result = self.db.execute(stmt)
            self.db.commit()
            return result.rowcount == 1

        # Other backends: rely on the primary key and treat a violation as "exists"
        try:
            self.db.execute(generic_insert(content_type.completion_model).values(**values))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return False
        return True
