"""
Catalog lookup tests.

Run with: pytest tests/unit/test_catalog.py -v
"""

from decimal import Decimal

import pytest

from booking_form.models.catalog import TicketOffering
from booking_form.services.catalog_service import Catalog


class TestDefaultCatalog:
    """Test the built-in offerings."""

    def test_default_offerings_in_display_order(self, catalog):
        """Standard, VIP and Premium are offered in that order."""
        assert [offering.id for offering in catalog] == ["standard", "vip", "premium"]
        assert len(catalog) == 3

    @pytest.mark.parametrize(
        "offering_id, price",
        [("standard", Decimal("50")), ("vip", Decimal("100")), ("premium", Decimal("150"))],
    )
    def test_unit_prices(self, catalog, offering_id, price):
        """Unit prices match the published price list."""
        assert catalog.lookup(offering_id).unit_price == price

    def test_option_label(self, catalog):
        """Selection list text shows label and price."""
        vip = catalog.lookup("vip")
        assert catalog.option_label(vip) == "VIP Ticket - $100"
        assert catalog.option_label(vip, currency_symbol="£") == "VIP Ticket - £100"


class TestLookup:
    """Test Catalog.lookup."""

    @pytest.mark.parametrize("offering_id", ["", None, "gold", "VIP"])
    def test_unknown_ids_not_found(self, catalog, offering_id):
        """Empty, missing and differently-cased ids are not found."""
        assert catalog.lookup(offering_id) is None

    def test_contains(self, catalog):
        """Membership checks go by id."""
        assert "premium" in catalog
        assert "gold" not in catalog

    def test_ids(self, small_catalog):
        """ids() lists every offering id."""
        assert small_catalog.ids() == frozenset({"day", "free"})

    def test_duplicate_ids_rejected(self):
        """Two offerings cannot share an id."""
        offering = TicketOffering(id="day", label="Day Pass", unit_price=10)
        with pytest.raises(ValueError):
            Catalog([offering, offering])
