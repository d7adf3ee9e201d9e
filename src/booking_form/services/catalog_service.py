"""Static ticket catalog."""

from decimal import Decimal
from typing import Iterable, Iterator, Optional, Tuple

from booking_form.models.catalog import TicketOffering

DEFAULT_OFFERINGS: Tuple[TicketOffering, ...] = (
    TicketOffering(id="standard", label="Standard Ticket", unit_price=Decimal("50")),
    TicketOffering(id="vip", label="VIP Ticket", unit_price=Decimal("100")),
    TicketOffering(id="premium", label="Premium Ticket", unit_price=Decimal("150")),
)


class Catalog:
    """Fixed lookup of ticket offerings, kept in display order."""

    def __init__(self, offerings: Iterable[TicketOffering] = DEFAULT_OFFERINGS):
        self._offerings = tuple(offerings)
        self._by_id = {}
        for offering in self._offerings:
            if offering.id in self._by_id:
                raise ValueError(f"Duplicate ticket offering id: {offering.id}")
            self._by_id[offering.id] = offering

    def lookup(self, offering_id: Optional[str]) -> Optional[TicketOffering]:
        """Return the offering for an id, or None when it is unknown."""
        if not offering_id:
            return None
        return self._by_id.get(offering_id)

    def ids(self) -> frozenset:
        return frozenset(self._by_id)

    def option_label(self, offering: TicketOffering, currency_symbol: str = "$") -> str:
        """Text shown for an offering in a selection list."""
        return f"{offering.label} - {currency_symbol}{offering.unit_price}"

    def __iter__(self) -> Iterator[TicketOffering]:
        return iter(self._offerings)

    def __len__(self) -> int:
        return len(self._offerings)

    def __contains__(self, offering_id: object) -> bool:
        return offering_id in self._by_id
