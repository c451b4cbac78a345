"""Pydantic schemas for API requests and responses."""

from cook_mastery.schemas.auth import AuthResponse, LoginRequest, SignUpRequest, UserResponse
from cook_mastery.schemas.cookbook import (
    CookbookEntryCreate,
    CookbookEntryResponse,
    CookbookEntryUpdate,
    CookbookListResponse,
)
from cook_mastery.schemas.pagination import PaginationMeta
from cook_mastery.schemas.profile import ProfileResponse, ProfileUpdate, ProgressSummary

__all__ = [
    "SignUpRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "PaginationMeta",
    "CookbookEntryCreate",
    "CookbookEntryUpdate",
    "CookbookEntryResponse",
    "CookbookListResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "ProgressSummary",
]
