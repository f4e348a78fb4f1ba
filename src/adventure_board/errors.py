"""
Error taxonomy for adventure-board.

Server-side errors carry the HTTP status they map to; the API layer turns
them into the ``{"success": false, "error": ...}`` envelope. Messages are
meant for clients, so store internals never go into them.
"""

from __future__ import annotations


class BoardError(Exception):
    """Base error. ``message`` is safe to show to API clients."""

    status_code: int = 500

    def __init__(self, message: str = "Internal server error", *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, object]:
        return {"success": False, "error": self.message}


class InvalidRequestError(BoardError):
    """A required parameter is missing or malformed."""

    status_code = 400


class NotFoundError(BoardError):
    """The requested entity does not exist (or is not active)."""

    status_code = 404


class StoreError(BoardError):
    """The relational store failed or could not be reached."""

    status_code = 500


class DataIntegrityError(StoreError):
    """A row violates an invariant the store is expected to uphold."""


class ClientFetchError(Exception):
    """Raised by the polling client when a fetch or envelope parse fails."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
