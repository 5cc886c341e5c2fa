"""Storage failures raised by the SQL backend."""
from __future__ import annotations

from blog.domain.errors import StorageError


class ConnectionAcquisitionFailed(StorageError):
    """No pooled connection could be obtained within the pool timeout."""


class QueryFailed(StorageError):
    """A statement was rejected by the store."""


class TransactionAborted(StorageError):
    """A multi-statement write was rolled back."""
