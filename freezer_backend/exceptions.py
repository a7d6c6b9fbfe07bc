"""Application errors, rendered as plain-text responses by middleware.errors."""
from fastapi import status


class FreezerAPIError(Exception):
    """Base error carrying the message sent to the client and its HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class StorageFilterError(FreezerAPIError):
    """Storage query parameters are unparsable or contradict each other."""

    status_code = status.HTTP_400_BAD_REQUEST


class BadRequestError(FreezerAPIError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FreezerAPIError):
    """A lookup that must yield exactly one row yielded none.

    Reported as 500 to keep the status codes existing clients rely on.
    """


class DuplicateError(FreezerAPIError):
    """A unique name is already taken."""


class PersistenceError(FreezerAPIError):
    """Wraps a database driver error; the message is the driver's description."""


class ExpirationError(FreezerAPIError):
    """The expiration date of a storage entry falls outside the supported calendar."""
