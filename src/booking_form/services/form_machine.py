"""
Booking form state machine.

Owns the record under edit, its validation errors and the submission
lifecycle for one booking session. Every operation runs synchronously to
completion, so events are handled strictly in arrival order.

    EDITING --submit--> SUBMITTING --invalid/failed--> EDITING
                                   --succeeded------> SUBMITTED --reset--> EDITING
"""

from __future__ import annotations

from typing import Any, Callable, Dict, FrozenSet, List, Optional, Union

from booking_form.config.settings import Settings
from booking_form.models.booking import (
    DERIVED_FIELDS,
    PRICE_INPUTS,
    BookingField,
    BookingRecord,
    ValidationState,
    default_record,
)
from booking_form.models.form import (
    FormSnapshot,
    SubmissionState,
    SubmitOutcome,
    TicketOption,
)
from booking_form.services.booking_service import BookingService
from booking_form.services.catalog_service import Catalog
from booking_form.services.notification_service import LoggingNotifier, Notifier
from booking_form.services.schema_validator import SchemaValidator
from booking_form.utils.error_handling import (
    InvalidTransitionError,
    ReadOnlyFieldError,
    UnknownFieldError,
)
from booking_form.utils.logging_config import get_logger
from booking_form.utils.validators import coerce_quantity, coerce_text

logger = get_logger(__name__)

BookingAction = Callable[[BookingRecord], Any]

_ALLOWED_TRANSITIONS = {
    SubmissionState.EDITING: {SubmissionState.SUBMITTING},
    SubmissionState.SUBMITTING: {SubmissionState.EDITING, SubmissionState.SUBMITTED},
    SubmissionState.SUBMITTED: {SubmissionState.EDITING},
}


class BookingFormMachine:
    """Form values, errors, touched fields and submission state for one session."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        notifier: Optional[Notifier] = None,
        booking_action: Optional[BookingAction] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.catalog = catalog or Catalog()
        self.validator = SchemaValidator(self.catalog)
        self.notifier = notifier or LoggingNotifier()
        self.booking_action = booking_action or BookingService()
        self.settings = settings or Settings.from_environment()

        self._record = default_record()
        self._errors: ValidationState = {}
        self._touched: set = set()
        self._state = SubmissionState.EDITING

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def record(self) -> BookingRecord:
        """A copy of the record; edits go through set_field."""
        return self._record.model_copy()

    @property
    def errors(self) -> ValidationState:
        return {field: list(errors) for field, errors in self._errors.items()}

    @property
    def touched_fields(self) -> FrozenSet[BookingField]:
        return frozenset(self._touched)

    @property
    def dirty_fields(self) -> FrozenSet[BookingField]:
        defaults = default_record()
        return frozenset(
            field for field in BookingField if self._record.get(field) != defaults.get(field)
        )

    @property
    def is_dirty(self) -> bool:
        return bool(self.dirty_fields)

    @property
    def is_valid(self) -> bool:
        return self.validator.is_valid(self._record)

    def field_errors(self, name: Union[str, BookingField]) -> List[str]:
        field = self._resolve(name)
        return [error.message for error in self._errors.get(field, [])]

    def set_field(self, name: Union[str, BookingField], value: Any) -> None:
        """Apply a user edit, re-derive the total and re-validate what changed.

        Raises:
            UnknownFieldError: If name is not a booking field.
            ReadOnlyFieldError: If name is the derived total price.
        """
        field = self._resolve(name)
        if field in DERIVED_FIELDS:
            raise ReadOnlyFieldError(field.value)
        if self._state != SubmissionState.EDITING:
            logger.warning(
                "Field edit ignored outside editing",
                extra={"field": field.value, "state": self._state.value},
            )
            return

        setattr(self._record, field.value, self._coerce(field, value))
        self._touched.add(field)
        if field in PRICE_INPUTS:
            self.validator.derive(self._record)

        results = self.validator.validate_fields(
            self._record, [field, BookingField.TOTAL_PRICE]
        )
        for changed, errors in results.items():
            if errors:
                self._errors[changed] = errors
            else:
                self._errors.pop(changed, None)

        logger.debug(
            "Field updated",
            extra={"field": field.value, "error_count": len(results[field])},
        )

    def submit(self) -> SubmitOutcome:
        """Validate the whole record and run the booking action.

        Exactly one notification is fired per call that is not ignored.
        """
        if self._state != SubmissionState.EDITING:
            logger.warning("Submit ignored", extra={"state": self._state.value})
            return SubmitOutcome.IGNORED

        self._transition(SubmissionState.SUBMITTING)
        self.validator.derive(self._record)
        self._errors = self.validator.validate_record(self._record)

        if self._errors:
            self._transition(SubmissionState.EDITING)
            logger.info(
                "Submit rejected by validation",
                extra={"fields": sorted(field.value for field in self._errors)},
            )
            self.notifier.notify_failure(self.settings.invalid_message)
            return SubmitOutcome.INVALID

        try:
            self.booking_action(self._record.model_copy())
        except Exception:
            logger.exception("Booking action failed")
            self._transition(SubmissionState.EDITING)
            self.notifier.notify_failure(self.settings.failure_message)
            return SubmitOutcome.FAILED

        self._transition(SubmissionState.SUBMITTED)
        self._restore_defaults()
        logger.info("Booking submitted")
        self.notifier.notify_success(self.settings.success_message)
        return SubmitOutcome.SUCCEEDED

    def reset(self) -> bool:
        """Leave the confirmation screen and start a new booking."""
        if self._state != SubmissionState.SUBMITTED:
            logger.warning("Reset ignored", extra={"state": self._state.value})
            return False

        self._restore_defaults()
        self._transition(SubmissionState.EDITING)
        return True

    def snapshot(self) -> FormSnapshot:
        order = list(BookingField)
        dirty = self.dirty_fields
        return FormSnapshot(
            record=self._record.model_copy(),
            errors=as_dict(self._errors),
            state=self._state,
            touched=[field.value for field in order if field in self._touched],
            dirty=[field.value for field in order if field in dirty],
            total_display=f"{self._record.total_price:.2f}",
            ticket_options=self.ticket_options(),
        )

    def ticket_options(self) -> List[TicketOption]:
        """Selection list entries, priced in the configured currency."""
        return [
            TicketOption(
                id=offering.id,
                label=self.catalog.option_label(offering, self.settings.currency_symbol),
            )
            for offering in self.catalog
        ]

    def _resolve(self, name: Union[str, BookingField]) -> BookingField:
        try:
            return BookingField.parse(name)
        except ValueError:
            raise UnknownFieldError(str(name)) from None

    def _coerce(self, field: BookingField, value: Any) -> Any:
        if field == BookingField.QUANTITY:
            return coerce_quantity(value)
        return coerce_text(value)

    def _restore_defaults(self) -> None:
        self._record = default_record()
        self._errors = {}
        self._touched.clear()

    def _transition(self, target: SubmissionState) -> None:
        if target not in _ALLOWED_TRANSITIONS[self._state]:
            raise InvalidTransitionError(self._state.value, target.value)
        logger.debug(
            "Form state changed",
            extra={"from_state": self._state.value, "to_state": target.value},
        )
        self._state = target


def as_dict(state: ValidationState) -> Dict[str, List[str]]:
    """Flatten a validation state to field name -> messages."""
    return {field.value: [error.message for error in errors] for field, errors in state.items()}
