"""Enums for model fields."""

from enum import Enum


class DifficultyLevel(str, Enum):
    """Difficulty tier shared by content and profiles."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    EXPERIENCED = "EXPERIENCED"

    @classmethod
    def ordered(cls) -> list["DifficultyLevel"]:
        """Canonical order, easiest first."""
        return [cls.BEGINNER, cls.INTERMEDIATE, cls.EXPERIENCED]

    def is_highest(self) -> bool:
        """Check if there is no level above this one."""
        return self == DifficultyLevel.EXPERIENCED


class TutorialCategory(str, Enum):
    """Kind of tutorial."""

    PRACTICAL = "PRACTICAL"
    THEORETICAL = "THEORETICAL"
    EQUIPMENT = "EQUIPMENT"


class ContentKind(str, Enum):
    """Learning content types."""

    TUTORIAL = "tutorial"
    ARTICLE = "article"


class ContentSort(str, Enum):
    """Sort modes for content listings."""

    DIFFICULTY_ASC = "difficulty_asc"
    NEWEST = "newest"


class CookbookSort(str, Enum):
    """Sort modes for cookbook listings."""

    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE_ASC = "title_asc"


class CompletionStatus(str, Enum):
    """Outcome of a mark-complete call."""

    CREATED = "created"
    ALREADY_COMPLETED = "already_completed"
