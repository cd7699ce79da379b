"""Demand calculation: sales forecasts to required cases."""

from typing import List

from src.models.case_quantities import CaseQuantities, UsageFactors
from src.models.day_record import DayRecord, PlanningWindow
from src.config.constants import DISPLAY_DECIMALS
from src.planning.quantities import parse_quantity


def total_sales(window: PlanningWindow) -> float:
    """Sum of sales over every day in the window (unparsable entries count as 0)."""
    return sum(parse_quantity(record.sales_amount) for record in window)


def required_cases(window: PlanningWindow, usage: UsageFactors) -> CaseQuantities:
    """
    Cases required to cover the forecast sales of the whole window.

    Sales are summed first and converted once, so no per-day rounding
    leaks into the total.

    Args:
        window: Planning window
        usage: Usage factors

    Returns:
        Required cases per size class
    """
    return usage.cases_for_sales(total_sales(window))


def daily_usage(record: DayRecord, usage: UsageFactors) -> CaseQuantities:
    """Cases used on one day, rounded for display only."""
    return usage.cases_for_sales(parse_quantity(record.sales_amount)).rounded(DISPLAY_DECIMALS)


def daily_usage_series(window: PlanningWindow, usage: UsageFactors) -> List[CaseQuantities]:
    """Display-rounded daily usage for every row of the window."""
    return [daily_usage(record, usage) for record in window]
