"""Post repository backed by SQLAlchemy."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog.core.logger import get_logger
from blog.db.errors import QueryFailed, TransactionAborted
from blog.db.models import PostRow
from blog.db.session import Database
from blog.domain.errors import StorageError, ValidationError
from blog.domain.ports import PostRepository
from blog.domain.post import Post

logger = get_logger(__name__)

T = TypeVar("T")

# Dialects whose INSERT cannot hand back the generated key; the id is read
# afterwards from this connection-scoped function.
LAST_INSERT_ID_SQL = {
    "sqlite": "SELECT last_insert_rowid()",
    "mysql": "SELECT LAST_INSERT_ID()",
    "mariadb": "SELECT LAST_INSERT_ID()",
}


def _to_domain(row: PostRow) -> Post:
    return Post.with_id(row.id, row.title, row.slug, row.body)


def _to_values(post: Post) -> dict:
    return {"title": post.title, "slug": post.slug, "body": post.body}


class SQLPostRepository(PostRepository):
    """PostRepository over a pooled SQL connection.

    Blocking work runs in the worker thread pool. Each call holds exactly one
    connection and returns it to the pool before finishing. ``find_all``
    returns posts in ascending id order.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    # -------------------------- async port --------------------------
    async def find_all(self) -> list[Post]:
        return await run_in_threadpool(self.find_all_sync)

    async def find_by_id(self, post_id: int) -> Optional[Post]:
        return await run_in_threadpool(self.find_by_id_sync, post_id)

    async def save(self, post: Post) -> Post:
        return await run_in_threadpool(self.save_sync, post)

    async def update(self, post_id: int, post: Post) -> Optional[Post]:
        return await run_in_threadpool(self.update_sync, post_id, post)

    async def delete(self, post_id: int) -> bool:
        return await run_in_threadpool(self.delete_sync, post_id)

    # -------------------------- blocking --------------------------
    def find_all_sync(self) -> list[Post]:
        def op(session: Session) -> list[Post]:
            rows = session.execute(select(PostRow).order_by(PostRow.id)).scalars().all()
            return [_to_domain(row) for row in rows]

        return self._query("find_all", op)

    def find_by_id_sync(self, post_id: int) -> Optional[Post]:
        def op(session: Session) -> Optional[Post]:
            row = self._select_row(session, post_id)
            return _to_domain(row) if row else None

        return self._query("find_by_id", op)

    def save_sync(self, post: Post) -> Post:
        """Insert, read the generated id and fetch the row in one transaction."""
        if post.id is not None:
            raise ValidationError(f"Post #{post.id} is already stored; use update")
        with self.database.session() as session:
            try:
                new_id = self._insert(session, post)
                row = self._select_row(session, new_id)
                if row is None:
                    raise TransactionAborted(f"Post #{new_id} vanished before commit")
                created = _to_domain(row)
                session.commit()
            except StorageError:
                session.rollback()
                logger.error("Failed to create post: inserted row could not be read back")
                raise
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error(f"Failed to create post: {exc}")
                raise TransactionAborted(f"Failed to create post: {exc}") from exc
        logger.info(f"Created post #{created.id} ({created.slug})")
        return created

    def update_sync(self, post_id: int, post: Post) -> Optional[Post]:
        def op(session: Session) -> Optional[Post]:
            stmt = update(PostRow).where(PostRow.id == post_id).values(title=post.title, body=post.body)
            result = session.execute(stmt)
            if result.rowcount == 0:
                session.rollback()
                return None
            row = self._select_row(session, post_id)
            updated = _to_domain(row) if row else None
            session.commit()
            return updated

        return self._query("update", op)

    def delete_sync(self, post_id: int) -> bool:
        def op(session: Session) -> bool:
            result = session.execute(delete(PostRow).where(PostRow.id == post_id))
            session.commit()
            return result.rowcount > 0

        return self._query("delete", op)

    # -------------------------- helpers --------------------------
    def _query(self, operation: str, op: Callable[[Session], T]) -> T:
        with self.database.session() as session:
            try:
                return op(session)
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error(f"Post {operation} failed: {exc}")
                raise QueryFailed(f"Post {operation} failed: {exc}") from exc

    def _insert(self, session: Session, post: Post) -> int:
        dialect = session.get_bind().dialect.name
        last_id_sql = LAST_INSERT_ID_SQL.get(dialect)
        if last_id_sql is None:
            stmt = insert(PostRow).values(**_to_values(post)).returning(PostRow.id)
            return session.execute(stmt).scalar_one()
        session.execute(insert(PostRow).values(**_to_values(post)))
        return session.execute(text(last_id_sql)).scalar_one()

    @staticmethod
    def _select_row(session: Session, post_id: int) -> Optional[PostRow]:
        return session.execute(select(PostRow).where(PostRow.id == post_id)).scalar_one_or_none()
