"""Custom exceptions and helpers for consistent error responses."""

from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    """Raised when an inbound payload cannot be understood."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


class UnknownFieldError(AppError):
    """Raised when a field name is not part of the booking record."""

    def __init__(self, name: str):
        super().__init__(f"Unknown booking field: {name}")
        self.name = name


class ReadOnlyFieldError(AppError):
    """Raised when a derived field is written directly."""

    def __init__(self, name: str):
        super().__init__(f"Field is derived and cannot be set: {name}")
        self.name = name


class UnknownEventError(AppError):
    """Raised when the presentation layer sends an event we do not route."""

    def __init__(self, event_type: str):
        super().__init__(f"Unknown event type: {event_type}")
        self.event_type = event_type


class InvalidTransitionError(AppError):
    """Raised when the form lifecycle is asked to make an illegal move."""

    def __init__(self, current: str, target: str):
        super().__init__(
            f"Invalid form state transition: {current} -> {target}", status_code=409
        )
        self.current = current
        self.target = target


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into the dict handed back to the presentation layer."""
    return {
        "status": "error",
        "status_code": error.status_code,
        "message": str(error),
    }
