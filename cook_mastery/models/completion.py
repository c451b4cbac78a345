"""Completion records linking users to finished content."""

from sqlalchemy import Column, DateTime, ForeignKey, Uuid, func

from cook_mastery.database import Base


class UserTutorial(Base):
    """A user finished a tutorial. At most one row per pair."""

    __tablename__ = "user_tutorials"

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    tutorial_id = Column(
        Uuid, ForeignKey("tutorials.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    completed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class UserArticle(Base):
    """A user finished an article. At most one row per pair."""

    __tablename__ = "user_articles"

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    article_id = Column(
        Uuid, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    completed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
