"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from cook_mastery.api.dependencies import PRIVATE_CACHE, get_current_user
from cook_mastery.database import get_db
from cook_mastery.errors import UnauthorizedError
from cook_mastery.models.user import User
from cook_mastery.schemas.auth import (
    AuthResponse,
    LoginRequest,
    SessionResponse,
    SignUpRequest,
    UserResponse,
)
from cook_mastery.schemas.cookbook import MessageResponse
from cook_mastery.schemas.profile import ProfileResponse
from cook_mastery.services.auth import authenticate_user, create_access_token, create_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(user.id, user.email),
        user=UserResponse(id=user.id, email=user.email),
        profile=ProfileResponse.model_validate(user.profile),
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignUpRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Create an account and its profile."""
    user = create_user(db, data.email, data.password, data.username, data.selected_level)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email or username and password."""
    user = authenticate_user(db, credentials.identifier, credentials.password)

    # Same error for unknown identifier and wrong password
    if not user:
        raise UnauthorizedError("Invalid credentials")

    return _auth_response(user)


@router.get("/session", response_model=SessionResponse)
async def get_session(
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current account and profile."""
    response.headers["Cache-Control"] = PRIVATE_CACHE
    return SessionResponse(
        user=UserResponse(id=current_user.id, email=current_user.email),
        profile=ProfileResponse.model_validate(current_user.profile),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Logout (client should discard token)."""
    return {"message": "Logged out successfully"}
