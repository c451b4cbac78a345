"""CookbookEntry model."""

import uuid

from sqlalchemy import Column, ForeignKey, String, Text, Uuid

from cook_mastery.database import Base
from cook_mastery.models.mixins import TimestampMixin


class CookbookEntry(Base, TimestampMixin):
    """A user-private bookmark of an external recipe."""

    __tablename__ = "cookbook_entries"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(Text, nullable=False)
    title = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)
