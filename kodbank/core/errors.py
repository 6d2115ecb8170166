"""Error taxonomy raised by services and translated to HTTP responses in kodbank.main."""

from typing import Any


class AppError(Exception):
    """Base for errors that map to a client-visible status and message."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed request input."""

    status_code = 400


class ConflictError(AppError):
    """A unique field (username or email) is already taken."""

    status_code = 400


class InvalidCredentialsError(AppError):
    """Bad username/password pair or missing session cookie."""

    status_code = 401


class InvalidTokenError(InvalidCredentialsError):
    """Session token is malformed, tampered with, or expired. One message for all cases."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class NotFoundError(AppError):
    """The referenced account no longer exists."""

    status_code = 404


class UpstreamError(AppError):
    """Third-party API failure; carries the upstream status and body when there was one."""

    status_code = 502

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        cause: Exception | None = None,
    ) -> None:
        self.body = body
        self.cause = cause
        super().__init__(message, status_code)


class InternalError(AppError):
    """Anything unexpected. Details are logged, never returned."""

    status_code = 500
