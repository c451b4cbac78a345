"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cook_mastery.config import get_settings
from cook_mastery.errors import ConflictError
from cook_mastery.models.enums import DifficultyLevel
from cook_mastery.models.user import Profile, User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: UUID, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def _is_email(identifier: str) -> bool:
    try:
        validate_email(identifier, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def resolve_identifier(db: Session, identifier: str) -> User | None:
    """Find a user by email, or by username when the identifier is not an email."""
    if _is_email(identifier):
        return get_user_by_email(db, identifier)
    return db.query(User).join(Profile).filter(Profile.username == identifier).first()


def authenticate_user(db: Session, identifier: str, password: str) -> User | None:
    """Authenticate a user by email or username and password."""
    user = resolve_identifier(db, identifier)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: UUID) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def username_taken(db: Session, username: str) -> bool:
    """Check if a username is in use (case-sensitive)."""
    return db.query(Profile.id).filter(Profile.username == username).first() is not None


def username_conflict() -> ConflictError:
    return ConflictError(
        "Username is already taken", {"username": "This username is already taken"}
    )


def email_conflict() -> ConflictError:
    return ConflictError(
        "Email is already registered", {"email": "This email is already registered"}
    )


def create_user(
    db: Session, email: str, password: str, username: str, selected_level: DifficultyLevel
) -> User:
    """Create a new user together with their profile.

    Raises ConflictError when the username or email is already in use.
    """
    if username_taken(db, username):
        raise username_conflict()
    if get_user_by_email(db, email):
        raise email_conflict()

    user = User(email=email, password_hash=get_password_hash(password))
    user.profile = Profile(username=username, selected_level=selected_level)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup
        db.rollback()
        logger.warning(f"Signup conflict on commit for {email}: {e}")
        conflict = username_conflict() if username_taken(db, username) else email_conflict()
        raise conflict from e
    db.refresh(user)
    return user
