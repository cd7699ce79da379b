"""Tests for the plan summary handed to the UI."""

import pytest
from dataclasses import replace
from datetime import date, timedelta

from src.models import CaseQuantities, SizeClass
from src.planning import (
    build_plan_summary,
    format_delivery_date,
    format_row_label,
    generate_window,
    set_field,
)
from src.planning.summary import waste_warnings


class TestFormatting:
    """Tests for date labels."""

    def test_delivery_date_has_no_zero_padding(self):
        assert format_delivery_date(date(2026, 3, 7)) == "3-7-2026"

    def test_delivery_date_unset(self):
        assert format_delivery_date(None) == ""

    def test_row_label_includes_weekday(self):
        assert format_row_label(date(2026, 10, 5)) == "10-5-2026 (Mon)"


class TestWasteWarnings:
    """Warnings appear only when the display-rounded waste is above zero."""

    def test_both_classes(self):
        warnings = waste_warnings(CaseQuantities(large=4.12, small=0.5))

        assert [w.size for w in warnings] == [SizeClass.LARGE, SizeClass.SMALL]
        assert warnings[0].message == "Warning: 4.12 cases of large meat may go unused."

    def test_rounds_to_zero(self):
        assert waste_warnings(CaseQuantities(large=0.004, small=0)) == []

    def test_small_only(self):
        warnings = waste_warnings(CaseQuantities(large=0, small=1.5))

        assert len(warnings) == 1
        assert warnings[0].size == SizeClass.SMALL
        assert warnings[0].message == "Warning: 1.50 cases of small meat may go unused."


class TestBuildPlanSummary:
    """Tests for build_plan_summary."""

    def test_empty_window(self, empty_window):
        summary = build_plan_summary(empty_window)

        assert summary.total_sales == 0
        assert summary.suggested_order == CaseQuantities()
        assert summary.waste == CaseQuantities()
        assert summary.arrive_index is None
        assert summary.delivery_date_label == ""
        assert not summary.has_waste_risk

    def test_filled_window(self, filled_window, usage):
        summary = build_plan_summary(filled_window, usage)

        assert summary.total_sales == pytest.approx(6000)
        assert summary.required.large == pytest.approx(3.84)
        assert summary.required.small == pytest.approx(0.9)
        assert summary.available == CaseQuantities(large=7, small=1)
        assert summary.suggested_order == CaseQuantities()
        assert summary.arrive_index == 2
        assert summary.horizon_start_index == 2
        assert summary.delivery_date_label == "10-7-2026"
        assert summary.display_waste.large == pytest.approx(4.12)
        assert summary.warning_for(SizeClass.LARGE) is not None

    def test_shortfall_without_waste(self, today, usage):
        """No stock and steady sales: order everything, waste nothing."""
        window = generate_window(today + timedelta(days=1), 2, today)
        for index in range(len(window)):
            window = set_field(window, index, "sales_amount", "2500")

        summary = build_plan_summary(window, usage)

        assert summary.required.large == pytest.approx(6.4)
        assert summary.display_order.large == pytest.approx(6.4)
        assert summary.display_order.small == pytest.approx(1.5)
        assert summary.waste == CaseQuantities()
        assert summary.warnings == []

    def test_delivery_missing_uses_both_fallbacks(self, filled_window, usage, today):
        window = replace(filled_window, delivery_date=today + timedelta(days=30))

        summary = build_plan_summary(window, usage)

        assert summary.arrive_index is None
        assert summary.horizon_start_index == 0
        # Nothing is collected without a delivery row
        assert summary.available == CaseQuantities()
        assert summary.delivery_date_label == "11-4-2026"

    def test_recomputed_after_edit(self, filled_window, usage):
        """Summaries are derived fresh from the window, never cached."""
        before = build_plan_summary(filled_window, usage)
        edited = set_field(filled_window, 0, "on_hand_large", "0")
        after = build_plan_summary(edited, usage)

        assert before.available.large == pytest.approx(7)
        assert after.available.large == pytest.approx(2)
        assert after.suggested_order.large == pytest.approx(1.84)

    def test_display_values_rounded(self, today, usage):
        window = generate_window(today + timedelta(days=1), 1, today)
        window = set_field(window, 0, "sales_amount", "1234")

        summary = build_plan_summary(window, usage)

        assert summary.suggested_order.large == pytest.approx(0.78976)
        assert summary.display_order.large == 0.79
