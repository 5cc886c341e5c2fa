"""In-process PostRepository used by tests and by STORAGE_BACKEND=memory."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional

from blog.domain.errors import ValidationError
from blog.domain.ports import PostRepository
from blog.domain.post import Post


class InMemoryPostRepository(PostRepository):
    """Dict-backed repository; hands out copies so callers never share state."""

    def __init__(self) -> None:
        self._rows: dict[int, Post] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    async def find_all(self) -> list[Post]:
        with self._lock:
            return [replace(post) for _id, post in sorted(self._rows.items())]

    async def find_by_id(self, post_id: int) -> Optional[Post]:
        with self._lock:
            post = self._rows.get(post_id)
            return replace(post) if post else None

    async def save(self, post: Post) -> Post:
        if post.id is not None:
            raise ValidationError(f"Post #{post.id} is already stored; use update")
        with self._lock:
            stored = Post.with_id(self._next_id, post.title, post.slug, post.body)
            self._rows[stored.id] = stored
            self._next_id += 1
            return replace(stored)

    async def update(self, post_id: int, post: Post) -> Optional[Post]:
        with self._lock:
            stored = self._rows.get(post_id)
            if stored is None:
                return None
            stored.update(post.title, post.body)
            return replace(stored)

    async def delete(self, post_id: int) -> bool:
        with self._lock:
            return self._rows.pop(post_id, None) is not None
