"""Tests for planning data models."""

import pytest
from datetime import date
from pydantic import ValidationError

from src.models import (
    DEFAULT_USAGE_FACTORS,
    STOCK_FIELDS,
    CaseQuantities,
    DayRecord,
    EditableField,
    PlanningWindow,
    SizeClass,
    UsageFactors,
)


class TestEditableField:
    """Tests for EditableField enum."""

    def test_stock_fields(self):
        assert EditableField.SALES_AMOUNT not in STOCK_FIELDS
        assert len(STOCK_FIELDS) == 4

    def test_string_representation(self):
        assert str(EditableField.ON_ORDER_SMALL) == "on_order_small"


class TestDayRecord:
    """Tests for DayRecord."""

    def test_defaults_unset(self):
        record = DayRecord(date=date(2026, 10, 5))

        assert record.sales_amount == ""
        assert record.get(EditableField.ON_HAND_SMALL) == ""

    def test_with_value_returns_copy(self):
        record = DayRecord(date=date(2026, 10, 5))

        updated = record.with_value("on_hand_large", 5)

        assert updated.on_hand_large == "5"
        assert record.on_hand_large == ""

    def test_immutable(self):
        record = DayRecord(date=date(2026, 10, 5))

        with pytest.raises(AttributeError):
            record.sales_amount = "10"


class TestPlanningWindow:
    """Tests for PlanningWindow."""

    def test_empty(self):
        window = PlanningWindow()

        assert window.is_empty
        assert window.last_index == -1
        assert window.index_of(date(2026, 10, 5)) is None

    def test_index_of(self, window, today):
        assert window.index_of(today) == 0
        assert window.index_of(window.delivery_date) == 2
        assert window.index_of(None) is None

    def test_with_record(self, window, today):
        updated = window.with_record(1, DayRecord(date=window[1].date, sales_amount="9"))

        assert updated[1].sales_amount == "9"
        assert window[1].sales_amount == ""
        assert len(updated) == len(window)


class TestCaseQuantities:
    """Tests for CaseQuantities."""

    def test_get_by_size(self):
        quantities = CaseQuantities(large=2, small=1)

        assert quantities.get(SizeClass.LARGE) == 2
        assert quantities.get("small") == 1

    def test_rounded(self):
        assert CaseQuantities(large=1.234, small=0.005001).rounded(2) == CaseQuantities(large=1.23, small=0.01)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            CaseQuantities(large=-1)


class TestUsageFactors:
    """Tests for UsageFactors."""

    def test_locked_defaults(self):
        assert DEFAULT_USAGE_FACTORS.large == 0.64
        assert DEFAULT_USAGE_FACTORS.small == 0.15

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_USAGE_FACTORS.large = 1.0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            UsageFactors(large=-0.1)

    def test_cases_for_sales(self):
        cases = UsageFactors(large=0.64, small=0.15).cases_for_sales(2000)

        assert cases.large == pytest.approx(1.28)
        assert cases.small == pytest.approx(0.30)
