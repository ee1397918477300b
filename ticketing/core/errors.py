"""Domain errors raised by the services and rendered by the API error handlers."""


class DomainError(Exception):
    """Base domain error carrying a user-safe message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Malformed, missing or out-of-range input."""

    status_code = 422


class NotFoundError(DomainError):
    """A referenced id does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Uniqueness violation or a delete blocked by dependent rows."""

    status_code = 409
