"""Application error types.

Every error carries a user-facing message and the HTTP status the API answers
with. Handlers log the underlying cause; the message is all the user sees.
"""

from fastapi import status


class FitnessTrackerError(Exception):
    """Base class for errors surfaced to the user."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingSessionError(FitnessTrackerError):
    """Raised when an action needs a signed-in user and there is none."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "You must be logged in.") -> None:
        super().__init__(message)


class SessionPendingError(FitnessTrackerError):
    """Raised when the auth provider could not resolve the session yet."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(
        self, message: str = "Session could not be verified. Please retry."
    ) -> None:
        super().__init__(message)


class ValidationError(FitnessTrackerError):
    """Raised when a required field is missing or a value is out of range."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FitnessTrackerError):
    """Raised when a requested row does not exist for the user."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreOperationError(FitnessTrackerError):
    """Raised when the persistence or auth backend rejects a call."""

    status_code = status.HTTP_502_BAD_GATEWAY
