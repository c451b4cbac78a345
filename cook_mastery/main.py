"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cook_mastery.api import articles, auth, cookbook, feed, profile, tutorials
from cook_mastery.config import get_settings
from cook_mastery.errors import register_error_handlers
from cook_mastery.logging_config import setup_logging

settings = get_settings()

setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Schema is managed by Alembic; nothing to initialise here
    yield


app = FastAPI(
    title="Cook Mastery API",
    description="Cooking tutorials and articles with progress tracking and a personal cookbook",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:4321",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(auth.router)
app.include_router(tutorials.router)
app.include_router(articles.router)
app.include_router(feed.router)
app.include_router(cookbook.router)
app.include_router(profile.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
