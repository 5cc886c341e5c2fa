"""Utility script to create the posts table."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from blog.core.config import get_settings
from .session import Database


def create_all(database: Database) -> None:
    database.create_all()


if __name__ == "__main__":
    db = Database.from_settings(get_settings())
    try:
        create_all(db)
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    finally:
        db.dispose()
