"""Tutorial and Article models (read-only published content)."""

import uuid

from sqlalchemy import JSON, CheckConstraint, Column, Enum, Index, SmallInteger, String, Text, Uuid

from cook_mastery.database import Base
from cook_mastery.models.enums import DifficultyLevel, TutorialCategory
from cook_mastery.models.mixins import TimestampMixin


class Tutorial(Base, TimestampMixin):
    """Structured, step-by-step learning content."""

    __tablename__ = "tutorials"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    category = Column(Enum(TutorialCategory, name="tutorial_category"), nullable=False)
    level = Column(Enum(DifficultyLevel, name="difficulty_level"), nullable=False)
    difficulty_weight = Column(SmallInteger, nullable=False)
    summary = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    steps = Column(JSON, nullable=False, default=list)  # [{"order", "title", "content"}]
    practice_recommendations = Column(Text, nullable=False, default="")
    key_takeaways = Column(Text, nullable=False, default="")

    __table_args__ = (
        CheckConstraint(
            "difficulty_weight BETWEEN 1 AND 5", name="ck_tutorials_difficulty_weight"
        ),
        Index("ix_tutorials_level_weight_created", "level", "difficulty_weight", "created_at"),
        Index("ix_tutorials_created_at", "created_at"),
    )


class Article(Base, TimestampMixin):
    """Concept explanations and theory."""

    __tablename__ = "articles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    level = Column(Enum(DifficultyLevel, name="difficulty_level"), nullable=False)
    difficulty_weight = Column(SmallInteger, nullable=False)
    summary = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    key_takeaways = Column(Text, nullable=False, default="")

    __table_args__ = (
        CheckConstraint("difficulty_weight BETWEEN 1 AND 5", name="ck_articles_difficulty_weight"),
        Index("ix_articles_level_weight_created", "level", "difficulty_weight", "created_at"),
        Index("ix_articles_created_at", "created_at"),
    )
