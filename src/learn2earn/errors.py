"""Domain errors raised by services and mapped to JSON responses at the boundary."""


class AppError(Exception):
    """Base class for errors that become a ``{"error": message}`` response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400


class ConflictError(AppError):
    """Duplicate registration or repeated one-shot action."""

    status_code = 400


class AuthError(AppError):
    """Bad credentials or missing/invalid session."""

    status_code = 401


class NotFoundError(AppError):
    status_code = 404
