"""Error taxonomy shared by every layer of the blog backend."""
from __future__ import annotations


class PostError(Exception):
    """Base exception for post workflows."""


class ValidationError(PostError):
    """Raised when caller input is malformed (empty field, non-positive id)."""


class StorageError(PostError):
    """Raised when the store cannot complete an operation.

    The underlying driver exception is chained with ``raise ... from`` and is
    also available as ``cause``.
    """

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__
