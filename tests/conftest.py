"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, timedelta

from src.models import PlanningWindow, UsageFactors
from src.planning import generate_window, set_field


@pytest.fixture
def today():
    """Fixed 'today' (a Monday) so windows are deterministic."""
    return date(2026, 10, 5)


@pytest.fixture
def usage():
    """Locked usage factors."""
    return UsageFactors(large=0.64, small=0.15)


@pytest.fixture
def empty_window(today):
    """Window for inputs that are not configured yet."""
    return PlanningWindow(today=today)


@pytest.fixture
def window(today):
    """Delivery in 2 days, order must last 3 days (6 rows, delivery at index 2)."""
    return generate_window(today + timedelta(days=2), 3, today)


@pytest.fixture
def filled_window(window):
    """Window with sales on every day and stock entered before delivery.

    Sales: 1000, 500, 2000, 1000, 1000, 500 (total 6000)
    Day 0 on-hand: 5 large, 1 small
    On-order: 2 large on day 1
    """
    sales = ["1000", "500", "2000", "1000", "1000", "500"]
    for index, amount in enumerate(sales):
        window = set_field(window, index, "sales_amount", amount)
    window = set_field(window, 0, "on_hand_large", "5")
    window = set_field(window, 0, "on_hand_small", "1")
    window = set_field(window, 1, "on_order_large", "2")
    return window
