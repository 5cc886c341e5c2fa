"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from blog.core.config import Settings
from blog.core.logger import get_logger
from blog.db.errors import ConnectionAcquisitionFailed

Base = declarative_base()

logger = get_logger(__name__)


def _engine_options(url: str, pool_size: int, pool_timeout: float) -> dict:
    parsed = make_url(url)
    options: dict = {}
    if parsed.get_backend_name() == "sqlite":
        # Each pooled connection would open its own empty in-memory database.
        if parsed.database in (None, "", ":memory:") or parsed.query.get("mode") == "memory":
            raise RuntimeError(
                "In-memory SQLite is not supported by the SQL backend; use STORAGE_BACKEND=memory instead."
            )
        # Sessions are opened on worker threads, never on the creating one.
        options["connect_args"] = {"check_same_thread": False}
    options.update(
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )
    return options


class Database:
    """Pool handle passed to the repositories.

    The pool holds at most ``pool_size`` connections; a caller waiting longer
    than ``pool_timeout`` seconds for one gets ConnectionAcquisitionFailed.
    """

    def __init__(self, url: str, *, pool_size: int = 5, pool_timeout: float = 30.0, echo: bool = False) -> None:
        if not (url or "").strip():
            raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
        self.url = url
        self.engine = create_engine(url, future=True, echo=echo, **_engine_options(url, pool_size, pool_timeout))
        self._sessionmaker = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout,
            echo=settings.db_echo,
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session already holding its pooled connection."""
        session: Session = self._sessionmaker()
        try:
            session.connection()
        except SQLAlchemyError as exc:
            session.close()
            logger.error(f"Failed to acquire a database connection: {exc}")
            raise ConnectionAcquisitionFailed(f"Could not acquire a database connection: {exc}") from exc
        try:
            yield session
        finally:
            session.close()

    def create_all(self) -> None:
        from . import models  # noqa: F401  # ensure models are imported for metadata

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
