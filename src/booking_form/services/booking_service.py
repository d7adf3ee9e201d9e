"""Booking action run once a record passes validation."""

from dataclasses import dataclass
from typing import Optional

from booking_form.models.booking import BookingRecord
from booking_form.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class BookingResult:
    """Simple DTO describing the booking outcome."""

    status: str
    reason: Optional[str] = None


class BookingService:
    """Captures a booking in memory only; nothing is stored or sent."""

    def process(self, record: BookingRecord) -> BookingResult:
        """Acknowledge the booking without persisting it."""
        logger.info(
            "Booking captured locally",
            extra={
                "ticket_type_id": record.ticket_type_id,
                "quantity": record.quantity,
                "total_price": str(record.total_price),
            },
        )
        return BookingResult(status="captured")

    def __call__(self, record: BookingRecord) -> BookingResult:
        return self.process(record)
