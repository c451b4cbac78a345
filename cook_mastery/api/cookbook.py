"""Cookbook API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from cook_mastery.api.dependencies import PRIVATE_CACHE, get_cookbook_service, get_current_user
from cook_mastery.config import get_settings
from cook_mastery.errors import NotFoundError
from cook_mastery.models.enums import CookbookSort
from cook_mastery.models.user import User
from cook_mastery.schemas.cookbook import (
    CookbookEntryCreate,
    CookbookEntryResponse,
    CookbookEntryUpdate,
    CookbookListResponse,
    MessageResponse,
)
from cook_mastery.services.cookbook_service import CookbookService

settings = get_settings()

router = APIRouter(prefix="/api/cookbook", tags=["cookbook"])


@router.get("", response_model=CookbookListResponse)
async def list_entries(
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CookbookService, Depends(get_cookbook_service)],
    sort: CookbookSort = CookbookSort.NEWEST,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
):
    """List the current user's cookbook entries."""
    entries, pagination = service.list_entries(current_user.id, sort, page, limit)
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return {"entries": entries, "pagination": pagination}


@router.post("", response_model=CookbookEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    data: CookbookEntryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CookbookService, Depends(get_cookbook_service)],
):
    """Save a recipe link."""
    return service.create_entry(current_user.id, data)


@router.get("/{entry_id}", response_model=CookbookEntryResponse)
async def get_entry(
    entry_id: UUID,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CookbookService, Depends(get_cookbook_service)],
):
    """Get one of the current user's entries."""
    entry = service.get_entry(current_user.id, entry_id)
    if entry is None:
        raise NotFoundError("Cookbook entry not found")
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return entry


@router.patch("/{entry_id}", response_model=CookbookEntryResponse)
async def update_entry(
    entry_id: UUID,
    data: CookbookEntryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CookbookService, Depends(get_cookbook_service)],
):
    """Update only the fields present in the body."""
    entry = service.update_entry(current_user.id, entry_id, data)
    if entry is None:
        raise NotFoundError("Cookbook entry not found")
    return entry


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_entry(
    entry_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CookbookService, Depends(get_cookbook_service)],
):
    """Delete one of the current user's entries."""
    if not service.delete_entry(current_user.id, entry_id):
        raise NotFoundError("Cookbook entry not found")
    return {"message": "Cookbook entry deleted successfully"}
