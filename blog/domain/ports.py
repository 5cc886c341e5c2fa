"""Repository port: the persistence contract the services depend on."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.post import Post


class PostRepository(ABC):
    """Storage-independent operations on posts.

    Every method may raise StorageError. Absence is reported as None/False,
    never as an exception.
    """

    @abstractmethod
    async def find_all(self) -> list[Post]:
        """Return every stored post."""

    @abstractmethod
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """Return the post with this id, or None when no such row exists."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a post that has no id yet and return it with the assigned id.

        A post that already carries an id raises ValidationError.
        """

    @abstractmethod
    async def update(self, post_id: int, post: Post) -> Optional[Post]:
        """Persist title/body of an existing post; None when the id is unknown."""

    @abstractmethod
    async def delete(self, post_id: int) -> bool:
        """Remove the post; True iff a row was deleted."""
