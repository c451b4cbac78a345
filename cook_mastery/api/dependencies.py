"""FastAPI dependencies for authentication and services."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cook_mastery.database import get_db
from cook_mastery.errors import UnauthorizedError
from cook_mastery.models.user import Profile, User
from cook_mastery.services.auth import decode_access_token, get_user_by_id
from cook_mastery.services.completion_service import CompletionService
from cook_mastery.services.content_service import ContentService
from cook_mastery.services.cookbook_service import CookbookService
from cook_mastery.services.profile_service import ProfileService
from cook_mastery.services.progress_service import ProgressService

# Missing credentials are handled here so anonymous access can be allowed per route
security = HTTPBearer(auto_error=False)

PRIVATE_CACHE = "private, no-cache"
PUBLIC_CACHE = "public, max-age=600"


def _user_from_credentials(
    credentials: HTTPAuthorizationCredentials | None, db: Session
) -> User | None:
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None or payload.get("sub") is None:
        return None

    try:
        user_id = UUID(payload["sub"])
    except ValueError:
        return None

    return get_user_by_id(db, user_id)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    user = _user_from_credentials(credentials, db)
    if user is None:
        raise UnauthorizedError("Authentication required")
    return user


def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User | None:
    """Get the current user, or None for anonymous or invalid credentials."""
    return _user_from_credentials(credentials, db)


def get_current_profile(
    current_user: Annotated[User, Depends(get_current_user)],
) -> Profile:
    """Get the authenticated user's profile."""
    if current_user.profile is None:
        raise UnauthorizedError("Profile not found")
    return current_user.profile


def get_content_service(
    db: Annotated[Session, Depends(get_db)],
) -> ContentService:
    """Get content service with dependencies."""
    return ContentService(db)


def get_completion_service(
    db: Annotated[Session, Depends(get_db)],
) -> CompletionService:
    """Get completion service with dependencies."""
    return CompletionService(db)


def get_progress_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProgressService:
    """Get progress service with dependencies."""
    return ProgressService(db)


def get_cookbook_service(
    db: Annotated[Session, Depends(get_db)],
) -> CookbookService:
    """Get cookbook service with dependencies."""
    return CookbookService(db)


def get_profile_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProfileService:
    """Get profile service with dependencies."""
    return ProfileService(db)
