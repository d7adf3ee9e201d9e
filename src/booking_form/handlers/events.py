"""
Inbound event router.

Turns events coming from the presentation layer into form machine calls
and answers with the fresh snapshot. Viewport events only matter to the
overlay and are acknowledged without touching the form.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from pydantic import ValidationError as PydanticValidationError

from booking_form.models.form import VIEWPORT_EVENTS, BookingEvent, EventType
from booking_form.services.form_machine import BookingFormMachine
from booking_form.utils.error_handling import (
    AppError,
    UnknownEventError,
    ValidationError,
    to_response,
)
from booking_form.utils.logging_config import get_logger

logger = get_logger(__name__)


def _field_changed(machine: BookingFormMachine, event: BookingEvent) -> str:
    if not event.name:
        raise ValidationError("fieldChanged requires a field name")
    machine.set_field(event.name, event.value)
    return "updated"


def _submit_requested(machine: BookingFormMachine, event: BookingEvent) -> str:
    return machine.submit().value


def _reset_requested(machine: BookingFormMachine, event: BookingEvent) -> str:
    return "reset" if machine.reset() else "ignored"


_ROUTES: Dict[EventType, Callable[[BookingFormMachine, BookingEvent], str]] = {
    EventType.FIELD_CHANGED: _field_changed,
    EventType.SUBMIT_REQUESTED: _submit_requested,
    EventType.RESET_REQUESTED: _reset_requested,
}


def parse_event(payload: Dict[str, Any]) -> BookingEvent:
    """Validate a raw event dict.

    Raises:
        UnknownEventError: If the event type is not one we route.
        ValidationError: If the payload is malformed otherwise.
    """
    event_type = payload.get("type") if isinstance(payload, dict) else None
    if not isinstance(event_type, str) or event_type not in {e.value for e in EventType}:
        raise UnknownEventError(str(event_type))
    try:
        return BookingEvent.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(f"Malformed {event_type} event") from exc


def handle_event(machine: BookingFormMachine, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Dispatch one event and return the outcome plus the current snapshot."""
    try:
        event = parse_event(payload)
        if event.type in VIEWPORT_EVENTS:
            logger.debug("Viewport event ignored by form", extra={"event": event.type.value})
            outcome = "ignored"
        else:
            outcome = _ROUTES[event.type](machine, event)
    except AppError as exc:
        logger.warning("Event rejected", extra={"error": str(exc)})
        response = to_response(exc)
        response["snapshot"] = machine.snapshot().to_payload()
        return response

    return {
        "status": "ok",
        "outcome": outcome,
        "snapshot": machine.snapshot().to_payload(),
    }
