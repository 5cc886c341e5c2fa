"""Domain layer: the Post entity, its errors and the repository port."""

from .errors import PostError, StorageError, ValidationError
from .ports import PostRepository
from .post import Post

__all__ = ["Post", "PostError", "PostRepository", "StorageError", "ValidationError"]
