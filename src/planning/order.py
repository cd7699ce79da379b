"""Suggested order quantity and short-horizon waste risk.

Waste risk assumes the delivered meat lasts SHELF_LIFE_DAYS days counting the
delivery day. It compares all available stock against the demand of that
horizon only, which gives an upper bound on waste rather than a day-by-day
depletion simulation. Stock consumed before delivery is not deducted.
"""

from typing import Tuple

from src.models.case_quantities import CaseQuantities, UsageFactors
from src.models.day_record import PlanningWindow
from src.config.constants import SHELF_LIFE_DAYS
from src.planning.quantities import parse_quantity


def suggested_order(required: CaseQuantities, available: CaseQuantities) -> CaseQuantities:
    """Shortfall of available versus required cases, never negative."""
    return CaseQuantities(
        large=max(required.large - available.large, 0.0),
        small=max(required.small - available.small, 0.0),
    )


def waste_horizon(window: PlanningWindow, arrive_index: int) -> Tuple[int, int]:
    """
    Inclusive (start, end) row indexes of the shelf life horizon.

    The horizon is the delivery day plus the following days of shelf life,
    clipped to the end of the window.
    """
    start = max(arrive_index, 0)
    end = min(start + SHELF_LIFE_DAYS - 1, window.last_index)
    return start, end


def waste_risk(
    window: PlanningWindow,
    available: CaseQuantities,
    arrive_index: int,
    usage: UsageFactors,
) -> CaseQuantities:
    """
    Stock likely to go unused within the shelf life horizon.

    Args:
        window: Planning window
        available: Available cases (see supply.available_cases)
        arrive_index: Delivery row index (use the horizon fallback when the
            delivery day is not in the window)
        usage: Usage factors

    Returns:
        Cases per size class that horizon demand cannot consume
    """
    start, end = waste_horizon(window, arrive_index)
    horizon_sales = sum(parse_quantity(record.sales_amount) for record in window.records[start:end + 1])
    horizon_required = usage.cases_for_sales(horizon_sales)

    return CaseQuantities(
        large=max(available.large - horizon_required.large, 0.0),
        small=max(available.small - horizon_required.small, 0.0),
    )
