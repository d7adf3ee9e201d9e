"""Pydantic models for the booking form."""

from booking_form.models.booking import (  # noqa: F401
    BookingField,
    BookingRecord,
    BookingSubmission,
    ErrorCode,
    FieldError,
    ValidationState,
    default_record,
)
from booking_form.models.catalog import TicketOffering  # noqa: F401
from booking_form.models.form import (  # noqa: F401
    BookingEvent,
    EventType,
    FormSnapshot,
    SubmissionState,
    SubmitOutcome,
    TicketOption,
)
