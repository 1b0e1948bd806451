"""Error taxonomy shared by services, the aggregator and the HTTP layer."""

from fastapi import HTTPException, status


class ForkedError(Exception):
    """Base exception for domain errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(ForkedError):
    """Raised for missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ForkedError):
    """Raised when a bearer token is missing, invalid or points to no user."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ForkedError):
    """Raised when a referenced document does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ForkedError):
    """Raised when the document store fails or holds corrupt data."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: ForkedError) -> HTTPException:
    """Convert a domain error into the matching HTTP error response."""
    headers = None
    if isinstance(error, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(status_code=error.status_code, detail=error.message, headers=headers)
