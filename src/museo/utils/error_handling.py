"""Custom exceptions and helpers for consistent error reporting."""

from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    code = "app_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(AppError, ValueError):
    """Raised when an operation receives an argument it cannot accept."""

    code = "invalid_argument"

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message)


class PreconditionViolatedError(AppError):
    """Raised when an operation is called on an object not ready for it."""

    code = "precondition_violated"

    def __init__(self, message: str = "Precondition violated"):
        super().__init__(message)


def to_payload(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a plain dict suitable for reporting."""
    return {
        "status": "error",
        "code": error.code,
        "message": error.message,
    }
