"""Application exceptions, translated to HTTP responses in main.py."""

from fastapi import status


class AppError(Exception):
    """Base exception for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An internal error occurred",
        errors: dict[str, list[str]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_dict(self) -> dict:
        rv = {"detail": self.message, "status_code": self.status_code}
        if self.errors:
            rv["errors"] = self.errors
        return rv


class InvalidArgument(AppError, ValueError):
    """A precondition of a pricing computation is violated."""

    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(AppError):
    """Request data failed validation. Carries field-level messages."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        message: str = "One or more validation errors occurred.",
        errors: dict[str, list[str]] | None = None,
    ):
        super().__init__(message, errors)


class DomainRuleViolation(AppError):
    """A state-dependent business rule is violated."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
