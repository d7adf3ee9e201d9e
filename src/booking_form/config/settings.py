"""
Environment-specific configuration settings.

Defaults mirror the copy shown on the booking page.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Booking form settings."""

    # Environment
    environment: str = "dev"
    log_level: str = "INFO"

    # Display
    currency_symbol: str = "$"

    # One-shot notification copy
    success_message: str = "Booking details captured locally. No data was stored."
    invalid_message: str = "Please correct the highlighted fields and try again."
    failure_message: str = "Something went wrong. Please try again."

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        defaults = cls()
        return cls(
            environment=os.environ.get("ENVIRONMENT", defaults.environment),
            log_level=os.environ.get("LOG_LEVEL", defaults.log_level).upper(),
            currency_symbol=os.environ.get(
                "BOOKING_CURRENCY_SYMBOL", defaults.currency_symbol
            ),
            success_message=os.environ.get(
                "BOOKING_SUCCESS_MESSAGE", defaults.success_message
            ),
            invalid_message=os.environ.get(
                "BOOKING_INVALID_MESSAGE", defaults.invalid_message
            ),
            failure_message=os.environ.get(
                "BOOKING_FAILURE_MESSAGE", defaults.failure_message
            ),
        )
