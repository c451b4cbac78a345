"""Profile service."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cook_mastery.errors import ConflictError
from cook_mastery.models.user import Profile
from cook_mastery.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)


def username_conflict() -> ConflictError:
    return ConflictError(
        "Username already taken", {"username": "This username is already in use"}
    )


class ProfileService:
    """Service for reading and editing the caller's profile."""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.db.query(Profile).filter(Profile.id == user_id).first()

    def update_profile(self, user_id: UUID, data: ProfileUpdate) -> Profile | None:
        """Update username and/or selected level.

        Raises ConflictError when another user holds the requested username.
        """
        profile = self.get_profile(user_id)
        if profile is None:
            return None

        if data.username is not None and data.username != profile.username:
            taken = (
                self.db.query(Profile.id)
                .filter(Profile.username == data.username, Profile.id != user_id)
                .first()
            )
            if taken:
                raise username_conflict()
            profile.username = data.username

        if data.selected_level is not None:
            profile.selected_level = data.selected_level

        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent rename
            self.db.rollback()
            logger.warning(f"Username conflict on commit for user {user_id}: {e}")
            raise username_conflict() from e

        self.db.refresh(profile)
        return profile
