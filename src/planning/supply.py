"""Supply calculation: on-hand and on-order stock to available cases."""

from typing import Optional

from src.models.case_quantities import CaseQuantities
from src.models.day_record import PlanningWindow
from src.planning.classification import horizon_arrive_index
from src.planning.quantities import parse_quantity


def available_cases(window: PlanningWindow, arrive_index: Optional[int] = None) -> CaseQuantities:
    """
    Stock available by delivery: starting inventory plus restocks.

    Starting inventory is the on-hand count of day 0 only; on-hand values on
    later days are ignored. Restocks are the on-order counts of every day
    before delivery. Stock fields on or after the delivery day are never
    collected, so they are skipped even if a stale value is present.

    Args:
        window: Planning window
        arrive_index: Delivery row index (defaults to the window's own
            delivery row, 0 if it is not in the window)

    Returns:
        Available cases per size class
    """
    if arrive_index is None:
        arrive_index = horizon_arrive_index(window)

    collected = window.records[:max(arrive_index, 0)]
    if not collected:
        return CaseQuantities()

    first = collected[0]
    initial_large = parse_quantity(first.on_hand_large)
    initial_small = parse_quantity(first.on_hand_small)
    restock_large = sum(parse_quantity(record.on_order_large) for record in collected)
    restock_small = sum(parse_quantity(record.on_order_small) for record in collected)

    return CaseQuantities(
        large=initial_large + restock_large,
        small=initial_small + restock_small,
    )
