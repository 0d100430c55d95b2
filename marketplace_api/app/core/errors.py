"""
Exceptions raised by the storage layer.

Lookups never raise: a missing record is reported as ``None``.  The
only write operations that can fail are the ones guarded by a
uniqueness constraint, and they raise ``ConflictError``.
"""


class StorageError(Exception):
    """Base class for errors signalled by the store."""


class ConflictError(StorageError):
    """A uniqueness constraint was violated.

    ``field`` names the offending attribute (``"email"`` or
    ``"username"``) so handlers can build a precise message.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
