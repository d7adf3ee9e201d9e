"""Booking record models and the declarative schema used to validate them."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictInt,
    ValidationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel


class BookingField(str, Enum):
    """Fields of the booking record, in display order."""

    FULL_NAME = "full_name"
    EMAIL = "email"
    ADDRESS = "address"
    TICKET_TYPE_ID = "ticket_type_id"
    QUANTITY = "quantity"
    TOTAL_PRICE = "total_price"

    @property
    def alias(self) -> str:
        return to_camel(self.value)

    @classmethod
    def parse(cls, name: Union[str, "BookingField"]) -> "BookingField":
        """Accept either the snake_case name or the camelCase alias.

        Raises ValueError for anything else.
        """
        if isinstance(name, cls):
            return name
        for member in cls:
            if name in (member.value, member.alias):
                return member
        raise ValueError(f"Unknown booking field: {name}")


# Fields recomputed from others; never written from user input.
DERIVED_FIELDS = frozenset({BookingField.TOTAL_PRICE})

# Edits to these fields trigger a total price recomputation.
PRICE_INPUTS = frozenset({BookingField.TICKET_TYPE_ID, BookingField.QUANTITY})


class ErrorCode(str, Enum):
    """Per-field validation error kinds."""

    TOO_SHORT = "too_short"
    INVALID_FORMAT = "invalid_format"
    REQUIRED = "required"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"


class FieldError(BaseModel):
    """A single validation failure attached to a field."""

    model_config = ConfigDict(frozen=True)

    field: BookingField
    code: ErrorCode
    message: str


# Field name -> errors; fields without errors are absent.
ValidationState = Dict[BookingField, List[FieldError]]


class BookingRecord(BaseModel):
    """The mutable record under edit.

    Holds whatever the user typed, valid or not; the schema below decides
    whether it can be submitted.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str = ""
    email: str = ""
    address: str = ""
    ticket_type_id: str = ""
    quantity: Union[int, Decimal] = 1
    total_price: Decimal = Decimal("0")

    @field_serializer("quantity", "total_price", when_used="json")
    def serialize_number(self, value: Union[int, Decimal]) -> Union[int, float]:
        """Numbers stay numbers on the wire."""
        if isinstance(value, (int, float)):
            return value
        if value == value.to_integral_value():
            return int(value)
        return float(value)

    def get(self, field: BookingField):
        return getattr(self, field.value)

    def field_values(self) -> Dict[BookingField, object]:
        return {field: self.get(field) for field in BookingField}


def default_record() -> BookingRecord:
    """A fresh record holding the documented defaults."""
    return BookingRecord()


class BookingSubmission(BaseModel):
    """Declarative constraints a record must satisfy before submission.

    The set of known ticket ids is passed through the validation context
    under ``"ticket_ids"``.
    """

    full_name: str = Field(min_length=2)
    email: EmailStr
    address: str = Field(min_length=5)
    ticket_type_id: str = Field(min_length=1)
    quantity: StrictInt = Field(ge=1)
    total_price: Decimal = Field(ge=0)

    @field_validator("email", mode="before")
    @classmethod
    def validate_bare_address(cls, value):
        """Only a bare address is accepted, not a "Name <address>" form."""
        if isinstance(value, str) and any(char in "<>" or char.isspace() for char in value):
            raise ValueError("email must be a bare address")
        return value

    @field_validator("ticket_type_id")
    @classmethod
    def validate_known_ticket(cls, value: str, info: ValidationInfo) -> str:
        """Unresolved ids count as no selection at all."""
        known = (info.context or {}).get("ticket_ids")
        if known is not None and value not in known:
            raise ValueError("ticket type is not in the catalog")
        return value


# Code and message reported for any schema failure on each field.
FIELD_RULES: Dict[BookingField, tuple[ErrorCode, str]] = {
    BookingField.FULL_NAME: (ErrorCode.TOO_SHORT, "Name must be at least 2 characters"),
    BookingField.EMAIL: (ErrorCode.INVALID_FORMAT, "Invalid email address"),
    BookingField.ADDRESS: (ErrorCode.TOO_SHORT, "Address must be at least 5 characters"),
    BookingField.TICKET_TYPE_ID: (ErrorCode.REQUIRED, "Please select a ticket type"),
    BookingField.QUANTITY: (ErrorCode.INVALID_QUANTITY, "Quantity must be at least 1"),
    BookingField.TOTAL_PRICE: (ErrorCode.INVALID_PRICE, "Price must be 0 or greater"),
}
