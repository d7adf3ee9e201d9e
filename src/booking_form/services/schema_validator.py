"""
Schema validation and total price derivation for booking records.

Derivation is an explicit, pure step run before any validation of the
total price; validation never mutates the record it is given.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from booking_form.models.booking import (
    FIELD_RULES,
    BookingField,
    BookingRecord,
    BookingSubmission,
    FieldError,
    ValidationState,
)
from booking_form.services.catalog_service import Catalog


def compute_total_price(
    catalog: Catalog, ticket_type_id: Optional[str], quantity: Union[int, Decimal, float]
) -> Decimal:
    """Unit price times quantity, or zero when the ticket id does not resolve.

    The product is exact for any quantity size.
    """
    offering = catalog.lookup(ticket_type_id)
    if offering is None:
        return Decimal("0")
    amount = Decimal(quantity) if isinstance(quantity, (int, Decimal)) else Decimal(str(quantity))
    with localcontext() as ctx:
        ctx.prec = max(
            ctx.prec,
            len(offering.unit_price.as_tuple().digits) + len(amount.as_tuple().digits),
        )
        return offering.unit_price * amount


class SchemaValidator:
    """Validates booking records against the submission schema."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def derive(self, record: BookingRecord) -> BookingRecord:
        """Restore the total price invariant on the record in place."""
        record.total_price = compute_total_price(
            self.catalog, record.ticket_type_id, record.quantity
        )
        return record

    def validate_record(self, record: BookingRecord) -> ValidationState:
        """Whole-record validation: every field, all failures collected."""
        return self._run(record, fields=BookingField)

    def validate_fields(
        self, record: BookingRecord, fields: Iterable[BookingField]
    ) -> ValidationState:
        """Validate only the given fields.

        Fields that pass are present with an empty list so callers can clear
        stale errors.
        """
        wanted = list(fields)
        state = self._run(record, fields=wanted)
        return {field: state.get(field, []) for field in wanted}

    def is_valid(self, record: BookingRecord) -> bool:
        return not self.validate_record(record)

    def _run(self, record: BookingRecord, fields: Iterable[BookingField]) -> ValidationState:
        wanted = set(fields)
        state: ValidationState = {}
        try:
            BookingSubmission.model_validate(
                record.model_dump(), context={"ticket_ids": self.catalog.ids()}
            )
        except ValidationError as exc:
            for error in exc.errors():
                field = BookingField(error["loc"][0])
                if field not in wanted or field in state:
                    continue
                code, message = FIELD_RULES[field]
                state[field] = [FieldError(field=field, code=code, message=message)]
        return state
