"""Post entity: the in-memory representation of a blog post."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from blog.domain.errors import ValidationError


@dataclass
class Post:
    """A blog post, independent of how it is stored.

    ``id`` is None until the store assigns one; after that it never changes,
    and neither does ``slug``.
    """

    title: str
    slug: str
    body: str
    id: Optional[int] = None

    @classmethod
    def new(cls, title: str, slug: str, body: str) -> "Post":
        return cls(title=title, slug=slug, body=body)

    @classmethod
    def with_id(cls, post_id: int, title: str, slug: str, body: str) -> "Post":
        return cls(title=title, slug=slug, body=body, id=post_id)

    def validate(self) -> None:
        """Raise ValidationError when title, slug or body is blank."""
        if not (self.title or "").strip():
            raise ValidationError("Title cannot be empty")
        if not (self.slug or "").strip():
            raise ValidationError("Slug cannot be empty")
        if not (self.body or "").strip():
            raise ValidationError("Body cannot be empty")

    def update(self, title: str, body: str) -> None:
        self.title = title
        self.body = body

    def to_dict(self) -> dict:
        return asdict(self)
