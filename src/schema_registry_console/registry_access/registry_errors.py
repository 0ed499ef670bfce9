"""Schema registry failure entities."""

from __future__ import annotations

NOT_FOUND_STATUS = 404


class RegistryError(Exception):
    """Raised when a schema registry call fails.

    The HTTP status reported by the registry is carried as ``status_code`` so
    callers can branch on it without inspecting the message text.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == NOT_FOUND_STATUS


class SchemaDecodeError(Exception):
    """Raised when a fetched schema cannot be decoded as a JSON document."""
