"""Profile and progress API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from cook_mastery.api.dependencies import (
    PRIVATE_CACHE,
    get_current_profile,
    get_profile_service,
    get_progress_service,
)
from cook_mastery.errors import NotFoundError
from cook_mastery.models.user import Profile
from cook_mastery.schemas.profile import ProfileResponse, ProfileUpdate, ProgressSummary
from cook_mastery.services.profile_service import ProfileService
from cook_mastery.services.progress_service import ProgressService

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    response: Response,
    profile: Annotated[Profile, Depends(get_current_profile)],
):
    """Get the current user's profile."""
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return profile


@router.patch("/profile", response_model=ProfileResponse)
async def update_profile(
    data: ProfileUpdate,
    response: Response,
    profile: Annotated[Profile, Depends(get_current_profile)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Change username and/or selected level."""
    updated = service.update_profile(profile.id, data)
    if updated is None:
        raise NotFoundError("Profile not found")
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return updated


@router.get("/progress/summary", response_model=ProgressSummary)
async def get_progress_summary(
    response: Response,
    profile: Annotated[Profile, Depends(get_current_profile)],
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Per-level completion and whether the user can move up a level."""
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return service.get_summary(profile.id, profile.selected_level)
