"""Tests for available supply calculation."""

import pytest
from datetime import timedelta

from src.models import CaseQuantities
from src.planning import available_cases, generate_window, set_field
from src.planning.cells import apply_edits


class TestAvailableCases:
    """Tests for available_cases."""

    def test_on_hand_plus_on_order(self, filled_window):
        """5 large / 1 small on hand plus 2 large on order gives 7 / 1."""
        available = available_cases(filled_window)

        assert available.large == pytest.approx(7)
        assert available.small == pytest.approx(1)

    def test_only_day_zero_on_hand_counts(self, filled_window):
        """On-hand entered on later pre-delivery days is ignored."""
        window = set_field(filled_window, 1, "on_hand_large", "100")

        assert available_cases(window).large == pytest.approx(7)

    def test_on_order_summed_over_pre_delivery_days(self, today):
        window = generate_window(today + timedelta(days=3), 2, today)
        window = apply_edits(window, [
            (0, "on_order_small", "1"),
            (1, "on_order_small", "2"),
            (2, "on_order_small", "3.5"),
        ])

        assert available_cases(window).small == pytest.approx(6.5)

    def test_stock_at_or_after_delivery_not_summed(self, filled_window):
        """Stale stock values on delivery and later rows never count."""
        window = filled_window
        for index in range(2, len(window)):
            window = set_field(window, index, "on_order_large", "50")
            window = set_field(window, index, "on_order_small", "50")
            window = set_field(window, index, "on_hand_large", "50")

        assert available_cases(window) == available_cases(filled_window)

    def test_delivery_today_collects_nothing(self, today):
        """With delivery at index 0 there are no pre-delivery rows."""
        window = generate_window(today, 3, today)
        window = set_field(window, 0, "on_hand_large", "5")

        assert available_cases(window) == CaseQuantities()

    def test_explicit_arrive_index(self, filled_window):
        """Passing the delivery index explicitly limits the collected rows."""
        assert available_cases(filled_window, arrive_index=1).large == pytest.approx(5)

    def test_unparsable_stock_is_zero(self, window):
        window = set_field(window, 0, "on_hand_large", "lots")
        window = set_field(window, 1, "on_order_large", "3")

        assert available_cases(window).large == pytest.approx(3)

    def test_empty_window(self, empty_window):
        assert available_cases(empty_window) == CaseQuantities()
