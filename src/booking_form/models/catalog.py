"""Ticket catalog models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class TicketOffering(BaseModel):
    """A ticket a visitor can choose. Defined once, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str
    unit_price: Decimal = Field(ge=0)
