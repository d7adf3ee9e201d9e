"""
Pytest configuration and shared fixtures.

Environment defaults keep Settings.from_environment deterministic no
matter what the developer shell exports.
"""

import os
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
for _name in (
    "BOOKING_CURRENCY_SYMBOL",
    "BOOKING_SUCCESS_MESSAGE",
    "BOOKING_INVALID_MESSAGE",
    "BOOKING_FAILURE_MESSAGE",
):
    os.environ.pop(_name, None)

from booking_form.config.settings import Settings  # noqa: E402
from booking_form.models.catalog import TicketOffering  # noqa: E402
from booking_form.services.catalog_service import Catalog  # noqa: E402
from booking_form.services.form_machine import BookingFormMachine  # noqa: E402
from booking_form.services.notification_service import Notifier  # noqa: E402

VALID_FIELDS = {
    "full_name": "Jane Doe",
    "email": "jane.doe@gmail.com",
    "address": "12 Harbour Road, Leith",
    "ticket_type_id": "vip",
    "quantity": 2,
}


@pytest.fixture
def valid_fields() -> dict:
    return dict(VALID_FIELDS)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog(
        [
            TicketOffering(id="day", label="Day Pass", unit_price=Decimal("12.50")),
            TicketOffering(id="free", label="Free Entry", unit_price=Decimal("0")),
        ]
    )


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock(spec=Notifier)


@pytest.fixture
def booking_action() -> MagicMock:
    return MagicMock(name="booking_action")


@pytest.fixture
def machine(catalog, notifier, booking_action) -> BookingFormMachine:
    return BookingFormMachine(
        catalog=catalog,
        notifier=notifier,
        booking_action=booking_action,
        settings=Settings(),
    )


@pytest.fixture
def filled_machine(machine) -> BookingFormMachine:
    for name, value in VALID_FIELDS.items():
        machine.set_field(name, value)
    return machine
