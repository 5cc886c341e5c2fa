"""SQLAlchemy model for the posts table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class PostRow(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    # Not unique: slug uniqueness is left to callers for now.
    slug = Column(Text, nullable=False)
    body = Column(Text, nullable=False)
