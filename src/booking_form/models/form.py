"""Form lifecycle models shared with the presentation layer."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from booking_form.models.booking import BookingRecord


class SubmissionState(str, Enum):
    """Lifecycle of one booking attempt."""

    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class SubmitOutcome(str, Enum):
    """How a submit request resolved."""

    SUCCEEDED = "succeeded"
    INVALID = "invalid"
    FAILED = "failed"
    IGNORED = "ignored"


class TicketOption(BaseModel):
    """One entry of the ticket selection list."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str


class FormSnapshot(BaseModel):
    """Read-only view of the form handed to whatever renders it."""

    model_config = ConfigDict(frozen=True)

    record: BookingRecord
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    state: SubmissionState
    touched: List[str] = Field(default_factory=list)
    dirty: List[str] = Field(default_factory=list)
    total_display: str
    ticket_options: List[TicketOption] = Field(default_factory=list)

    @property
    def is_submitting(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    def to_payload(self) -> Dict[str, Any]:
        """JSON-friendly dict using the camelCase names the UI speaks."""
        return {
            "record": self.record.model_dump(mode="json", by_alias=True),
            "errors": {to_camel(name): messages for name, messages in self.errors.items()},
            "state": self.state.value,
            "isSubmitting": self.is_submitting,
            "touched": [to_camel(name) for name in self.touched],
            "dirty": [to_camel(name) for name in self.dirty],
            "totalDisplay": self.total_display,
            "ticketOptions": [option.model_dump() for option in self.ticket_options],
        }


class EventType(str, Enum):
    """Inbound events from the presentation layer."""

    FIELD_CHANGED = "fieldChanged"
    SUBMIT_REQUESTED = "submitRequested"
    RESET_REQUESTED = "resetRequested"
    RESIZE = "resize"
    SCROLL = "scroll"


# Viewport events belong to the overlay; the form never reacts to them.
VIEWPORT_EVENTS = frozenset({EventType.RESIZE, EventType.SCROLL})


class BookingEvent(BaseModel):
    """A single inbound event."""

    type: EventType
    name: Optional[str] = None
    value: Any = None
