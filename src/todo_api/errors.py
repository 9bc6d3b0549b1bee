from __future__ import annotations


# PUBLIC_INTERFACE
class ApiError(Exception):
    """
    Base class for errors that map onto an HTTP status and an
    ``{"error": message}`` JSON body.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(ApiError):
    """Malformed id or request body; rejected before reaching storage."""

    status_code = 400


class NotFoundError(ApiError):
    """No todo exists with the requested id."""

    status_code = 404


class InternalInconsistencyError(ApiError):
    """A mutation expected to find a row but did not."""

    status_code = 500
