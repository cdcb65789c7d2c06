"""Domain exceptions shared by the API and the importer."""

from typing import Any


class TeamsAPIError(Exception):
    """Base exception carrying the HTTP status used to render it."""

    def __init__(self, message: str, status_code: int = 500, details: Any = None) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Error envelope for JSON responses."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(TeamsAPIError):
    """Bad client input (pagination, identifiers)."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, status_code=400, details=details)


class MissingIdentifierError(ValidationError):
    """A lookup was requested without an id."""

    def __init__(self, message: str = "Team ID is required") -> None:
        super().__init__(message)


class NotFoundError(TeamsAPIError):
    def __init__(self, message: str = "Team not found") -> None:
        super().__init__(message, status_code=404)


class StorageError(TeamsAPIError):
    """A query or connection against the database failed."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, status_code=500, details=details)


class TeamQueryError(StorageError):
    pass


class StorageConnectionError(StorageError):
    pass


class ImportAbortedError(Exception):
    """The import run stopped before exhausting the external source."""


class PageRetryLimitError(ImportAbortedError):
    def __init__(self, offset: int, attempts: int) -> None:
        self.offset = offset
        self.attempts = attempts
        super().__init__(f"Giving up on page at offset {offset} after {attempts} failed attempts")
