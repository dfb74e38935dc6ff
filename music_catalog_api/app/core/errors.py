"""
Error hierarchy for the catalog service.

Rejections are raised by the service layer when a referenced row is
missing; the API layer translates them into ``400`` responses with an
``error`` field.  ``StoreFault`` wraps failures reported by SQLite and
is never recovered by the services.
"""

from fastapi import status


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RejectionError(CatalogError):
    """A request that cannot be carried out against the current catalog."""

    http_status = status.HTTP_400_BAD_REQUEST


class ReferenceNotFound(RejectionError):
    """A single reference (artist, album, playlist) does not resolve."""

    def __init__(self, message: str, entity: str, reference: int) -> None:
        super().__init__(message)
        self.entity = entity
        self.reference = reference


class IncompleteReferenceSet(RejectionError):
    """Fewer rows were found than references were requested."""

    def __init__(self, message: str, entity: str, requested: int, found: int) -> None:
        super().__init__(message)
        self.entity = entity
        self.requested = requested
        self.found = found


class EntityNotFound(CatalogError):
    """A row addressed directly by a read endpoint does not exist."""

    http_status = status.HTTP_404_NOT_FOUND


class StoreFault(CatalogError):
    """The backing store rejected or failed a statement."""
