"""Tests for suggested order and waste risk."""

import pytest
from datetime import timedelta

from src.models import CaseQuantities
from src.planning import (
    available_cases,
    generate_window,
    set_field,
    suggested_order,
    waste_horizon,
    waste_risk,
)


class TestSuggestedOrder:
    """Tests for suggested_order."""

    def test_no_shortfall(self):
        """1.28 required against 7 available needs no order."""
        order = suggested_order(
            CaseQuantities(large=1.28, small=0.30),
            CaseQuantities(large=7, small=1),
        )

        assert order.large == 0
        assert order.small == 0

    def test_shortfall(self):
        order = suggested_order(
            CaseQuantities(large=10, small=2.5),
            CaseQuantities(large=7, small=1),
        )

        assert order.large == pytest.approx(3)
        assert order.small == pytest.approx(1.5)

    @pytest.mark.parametrize("required,available", [
        (0, 0), (0, 5), (5, 0), (3.3, 3.3), (1e-9, 0), (100, 99.99),
    ])
    def test_never_negative(self, required, available):
        order = suggested_order(
            CaseQuantities(large=required, small=available),
            CaseQuantities(large=available, small=required),
        )

        assert order.large >= 0
        assert order.small >= 0


class TestWasteHorizon:
    """Tests for the shelf life horizon bounds."""

    def test_full_horizon(self, window):
        assert waste_horizon(window, 2) == (2, 5)

    def test_clipped_to_window_end(self, today):
        """arrive_index 2 in a 4-row window ends at index 3."""
        window = generate_window(today + timedelta(days=2), 1, today)

        assert len(window) == 4
        assert waste_horizon(window, 2) == (2, 3)

    def test_negative_index_starts_at_zero(self, window):
        assert waste_horizon(window, -1) == (0, 3)


class TestWasteRisk:
    """Tests for waste_risk."""

    def test_surplus_over_four_day_demand(self, filled_window, usage):
        """Horizon sales 4500 need 2.88 large; 7 available leaves 4.12."""
        available = available_cases(filled_window)

        waste = waste_risk(filled_window, available, 2, usage)

        assert waste.large == pytest.approx(7 - 2.88)
        assert waste.small == pytest.approx(1 - 0.675)

    def test_no_waste_when_demand_covers_stock(self, filled_window, usage):
        waste = waste_risk(filled_window, CaseQuantities(large=1, small=0.1), 2, usage)

        assert waste == CaseQuantities()

    def test_sales_before_delivery_not_in_horizon(self, filled_window, usage):
        """Pre-delivery sales do not reduce waste (known simplification)."""
        window = set_field(filled_window, 0, "sales_amount", "100000")

        available = CaseQuantities(large=7, small=1)
        assert waste_risk(window, available, 2, usage) == waste_risk(filled_window, available, 2, usage)

    def test_fallback_index_zero(self, filled_window, usage):
        """Horizon starts at row 0 when the delivery day is not in the window."""
        available = CaseQuantities(large=7, small=1)

        waste = waste_risk(filled_window, available, 0, usage)

        # Rows 0-3: 1000 + 500 + 2000 + 1000
        assert waste.large == pytest.approx(7 - 4.5 * 0.64)

    def test_empty_window(self, empty_window, usage):
        assert waste_risk(empty_window, CaseQuantities(), 0, usage) == CaseQuantities()
