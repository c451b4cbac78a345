"""Pytest configuration and fixtures."""

import os
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cook_mastery.database import Base, get_db, get_session_factory
from cook_mastery.main import app
from cook_mastery.models import Article, Tutorial
from cook_mastery.models.enums import DifficultyLevel, TutorialCategory


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-up user's details."""

    def __init__(self, *args, user_id: str | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/cook_mastery", "/cook_mastery_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: TestingSessionLocal
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, email: str, username: str, level: str = "BEGINNER") -> AuthHeaders:
    response = client.post(
        "/api/auth/signup",
        json={
            "email": email,
            "username": username,
            "password": "testpass123",
            "selected_level": level,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        user_id=data["user"]["id"],
        username=data["profile"]["username"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return signup(client, "test@example.com", "test_cook")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return signup(client, "other@example.com", "other_cook")


@pytest.fixture
def make_tutorial(db):
    """Insert a tutorial. ``age_days`` moves created_at into the past."""

    def _make(
        title: str = "Knife Skills",
        level: DifficultyLevel = DifficultyLevel.BEGINNER,
        difficulty_weight: int = 1,
        category: TutorialCategory = TutorialCategory.PRACTICAL,
        age_days: int = 0,
        steps: list[dict] | None = None,
    ) -> Tutorial:
        created = BASE_TIME - timedelta(days=age_days)
        tutorial = Tutorial(
            title=title,
            category=category,
            level=level,
            difficulty_weight=difficulty_weight,
            summary=f"{title} summary",
            content=f"{title} content",
            steps=steps if steps is not None else [],
            practice_recommendations="Practice daily",
            key_takeaways="Keep your knife sharp",
            created_at=created,
            updated_at=created,
        )
        db.add(tutorial)
        db.commit()
        db.refresh(tutorial)
        return tutorial

    return _make


@pytest.fixture
def make_article(db):
    """Insert an article. ``age_days`` moves created_at into the past."""

    def _make(
        title: str = "Why Salt Matters",
        level: DifficultyLevel = DifficultyLevel.BEGINNER,
        difficulty_weight: int = 1,
        age_days: int = 0,
    ) -> Article:
        created = BASE_TIME - timedelta(days=age_days)
        article = Article(
            title=title,
            level=level,
            difficulty_weight=difficulty_weight,
            summary=f"{title} summary",
            content=f"{title} content",
            key_takeaways="Season early",
            created_at=created,
            updated_at=created,
        )
        db.add(article)
        db.commit()
        db.refresh(article)
        return article

    return _make
