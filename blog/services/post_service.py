"""Post use cases (list, lookup, create, edit, remove)."""

from __future__ import annotations

from typing import Optional

from blog.core.logger import get_logger
from blog.domain.errors import ValidationError
from blog.domain.ports import PostRepository
from blog.domain.post import Post

logger = get_logger(__name__)

# Largest id a 64-bit signed INTEGER column can hold.
MAX_POST_ID = 2**63 - 1


def _check_id(post_id) -> int:
    if isinstance(post_id, bool) or not isinstance(post_id, int):
        raise ValidationError("Invalid post ID")
    if not 0 < post_id <= MAX_POST_ID:
        raise ValidationError("Invalid post ID")
    return post_id


class PostService:
    """Validates caller input and sequences repository calls."""

    def __init__(self, repository: PostRepository) -> None:
        self.repository = repository

    async def get_all_posts(self) -> list[Post]:
        return await self.repository.find_all()

    async def get_post_by_id(self, post_id: int) -> Optional[Post]:
        _check_id(post_id)
        return await self.repository.find_by_id(post_id)

    async def create_post(self, title: str, slug: str, body: str) -> Post:
        post = Post.new(title, slug, body)
        post.validate()
        # Slug uniqueness is not checked here; see DESIGN.md.
        created = await self.repository.save(post)
        logger.info(f"Post #{created.id} published as '{created.slug}'")
        return created

    async def update_post(self, post_id: int, title: str, body: str) -> Optional[Post]:
        """Fetch, edit and write back a post.

        Read-modify-write without a version check: two concurrent edits of
        the same post end with the last writer's content.
        """
        _check_id(post_id)
        post = await self.repository.find_by_id(post_id)
        if post is None:
            return None
        post.update(title, body)
        post.validate()
        updated = await self.repository.update(post_id, post)
        if updated is not None:
            logger.info(f"Post #{post_id} updated")
        return updated

    async def delete_post(self, post_id: int) -> bool:
        _check_id(post_id)
        deleted = await self.repository.delete(post_id)
        if deleted:
            logger.info(f"Post #{post_id} deleted")
        return deleted
