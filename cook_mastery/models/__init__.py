"""SQLAlchemy models."""

from cook_mastery.models.completion import UserArticle, UserTutorial
from cook_mastery.models.content import Article, Tutorial
from cook_mastery.models.cookbook import CookbookEntry
from cook_mastery.models.user import Profile, User

__all__ = [
    "User",
    "Profile",
    "Tutorial",
    "Article",
    "UserTutorial",
    "UserArticle",
    "CookbookEntry",
]
