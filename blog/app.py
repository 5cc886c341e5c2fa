"""FastAPI application factory for the blog API."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from blog.core.config import Settings, get_settings
from blog.core.logger import configure_logging, get_logger
from blog.db.session import Database
from blog.domain.ports import PostRepository
from blog.repositories.memory_repository import InMemoryPostRepository
from blog.repositories.sql_repository import SQLPostRepository
from blog.routers import posts as posts_router
from blog.services.post_service import PostService

logger = get_logger(__name__)


def _build_repository(settings: Settings) -> tuple[PostRepository, Optional[Database]]:
    if settings.storage_backend == "memory":
        return InMemoryPostRepository(), None
    if settings.storage_backend != "sql":
        raise RuntimeError(f"Unknown STORAGE_BACKEND: {settings.storage_backend!r}")
    database = Database.from_settings(settings)
    return SQLPostRepository(database), database


def create_app(settings: Settings | None = None, repository: PostRepository | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory blog.app:create_app``)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    database: Optional[Database] = None
    if repository is None:
        repository, database = _build_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            database.create_all()
        logger.info(f"Blog API ready ({settings.app_env}, backend={type(repository).__name__})")
        try:
            yield
        finally:
            if database is not None:
                database.dispose()

    app = FastAPI(title="Blog API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.post_service = PostService(repository)

    @app.get("/", response_class=PlainTextResponse)
    def hello():
        return "Hello world!"

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "service": "blog"}

    app.include_router(posts_router.router)
    return app
