"""Cookbook service for user-owned recipe bookmarks."""

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from cook_mastery.models.cookbook import CookbookEntry
from cook_mastery.models.enums import CookbookSort
from cook_mastery.schemas.cookbook import CookbookEntryCreate, CookbookEntryUpdate
from cook_mastery.schemas.pagination import PaginationMeta, page_offset

logger = logging.getLogger(__name__)

# Every ordering ends with id so equal keys paginate stably
SORT_ORDERS = {
    CookbookSort.NEWEST: (CookbookEntry.created_at.desc(), CookbookEntry.id.desc()),
    CookbookSort.OLDEST: (CookbookEntry.created_at.asc(), CookbookEntry.id.asc()),
    CookbookSort.TITLE_ASC: (CookbookEntry.title.asc(), CookbookEntry.id.asc()),
}


class CookbookService:
    """Service for cookbook CRUD. Every query is filtered by owner."""

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, user_id: UUID):
        return self.db.query(CookbookEntry).filter(CookbookEntry.user_id == user_id)

    def list_entries(
        self,
        user_id: UUID,
        sort: CookbookSort = CookbookSort.NEWEST,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[CookbookEntry], PaginationMeta]:
        """List one page of the user's entries."""
        query = self._owned(user_id)
        total_items = query.count()
        entries = (
            query.order_by(*SORT_ORDERS[sort])
            .offset(page_offset(page, limit))
            .limit(limit)
            .all()
        )
        return entries, PaginationMeta.build(page, limit, total_items)

    def get_entry(self, user_id: UUID, entry_id: UUID) -> CookbookEntry | None:
        """Get an entry, or None if it does not exist or belongs to someone else."""
        return self._owned(user_id).filter(CookbookEntry.id == entry_id).first()

    def create_entry(self, user_id: UUID, data: CookbookEntryCreate) -> CookbookEntry:
        """Create an entry owned by ``user_id``."""
        entry = CookbookEntry(
            user_id=user_id,
            url=data.url,
            title=data.title,
            notes=data.notes,
        )
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def update_entry(
        self, user_id: UUID, entry_id: UUID, data: CookbookEntryUpdate
    ) -> CookbookEntry | None:
        """Apply the provided fields. Returns None if the entry is not the user's."""
        entry = self.get_entry(user_id, entry_id)
        if entry is None:
            return None

        for field, value in data.changes().items():
            setattr(entry, field, value)

        self.db.commit()
        self.db.refresh(entry)
        return entry

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an entry. Returns True if a row was removed."""
        deleted = (
            self._owned(user_id)
            .filter(CookbookEntry.id == entry_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info(f"Deleted cookbook entry {entry_id} for user {user_id}")
        return deleted > 0
