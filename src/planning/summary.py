"""Plan summary: every derived total the interface displays.

This is the contract between the planning engine and the UI. A summary is
rebuilt from the window on every read and never cached, so it can never go
stale relative to the values the user has entered.
"""

import logging
from datetime import date as Date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.models.case_quantities import (
    DEFAULT_USAGE_FACTORS,
    CaseQuantities,
    SizeClass,
    UsageFactors,
)
from src.models.day_record import PlanningWindow
from src.planning.classification import find_arrive_index, horizon_arrive_index
from src.config.constants import DELIVERY_DATE_FORMAT, DISPLAY_DECIMALS, ROW_LABEL_FORMAT
from src.planning.demand import required_cases, total_sales
from src.planning.order import suggested_order, waste_risk
from src.planning.supply import available_cases

logger = logging.getLogger(__name__)


def format_delivery_date(day: Optional[Date]) -> str:
    """Delivery date as M-D-YYYY without zero padding ('' if unset)."""
    if day is None:
        return ""
    return DELIVERY_DATE_FORMAT.format(d=day)


def format_row_label(day: Date) -> str:
    """Planning table row label, e.g. '10-5-2026 (Mon)'."""
    return ROW_LABEL_FORMAT.format(d=day)


class WasteWarning(BaseModel):
    """Warning that part of the delivery may spoil before it is used."""
    size: SizeClass = Field(..., description="Meat size class")
    quantity: float = Field(..., gt=0, description="Cases that may go unused (display-rounded)")

    model_config = ConfigDict(frozen=True)

    @property
    def message(self) -> str:
        return f"Warning: {self.quantity:.2f} cases of {self.size} meat may go unused."


class PlanSummary(BaseModel):
    """
    Derived totals for a planning window.

    Quantities are raw (unrounded); use the display_* helpers for values
    shown to the user.
    """
    total_sales: float = Field(default=0.0, ge=0, description="Total forecast sales ($)")
    required: CaseQuantities = Field(default_factory=CaseQuantities)
    available: CaseQuantities = Field(default_factory=CaseQuantities)
    suggested_order: CaseQuantities = Field(default_factory=CaseQuantities)
    waste: CaseQuantities = Field(default_factory=CaseQuantities)
    arrive_index: Optional[int] = Field(None, description="Delivery row index (None if not in window)")
    horizon_start_index: int = Field(default=0, ge=0, description="First row of the waste horizon")
    delivery_date_label: str = Field(default="", description="Delivery date as M-D-YYYY")
    warnings: List[WasteWarning] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def display_order(self) -> CaseQuantities:
        return self.suggested_order.rounded(DISPLAY_DECIMALS)

    @property
    def display_waste(self) -> CaseQuantities:
        return self.waste.rounded(DISPLAY_DECIMALS)

    @property
    def has_waste_risk(self) -> bool:
        return bool(self.warnings)

    def warning_for(self, size: SizeClass) -> Optional[WasteWarning]:
        for warning in self.warnings:
            if warning.size == SizeClass(size):
                return warning
        return None


def waste_warnings(waste: CaseQuantities) -> List[WasteWarning]:
    """Warnings for every size class whose display-rounded waste is above zero."""
    rounded = waste.rounded(DISPLAY_DECIMALS)
    return [
        WasteWarning(size=size, quantity=rounded.get(size))
        for size in SizeClass
        if rounded.get(size) > 0
    ]


def build_plan_summary(
    window: PlanningWindow,
    usage: UsageFactors = DEFAULT_USAGE_FACTORS,
) -> PlanSummary:
    """
    Compute every derived total for a window.

    An empty window (inputs not configured yet) produces an all-zero
    summary with no warnings and a blank delivery date.

    Args:
        window: Planning window
        usage: Usage factors (locked defaults unless overridden in tests)

    Returns:
        PlanSummary
    """
    if window.is_empty:
        return PlanSummary()

    horizon_index = horizon_arrive_index(window)
    required = required_cases(window, usage)
    available = available_cases(window, horizon_index)
    order = suggested_order(required, available)
    waste = waste_risk(window, available, horizon_index, usage)

    summary = PlanSummary(
        total_sales=total_sales(window),
        required=required,
        available=available,
        suggested_order=order,
        waste=waste,
        arrive_index=find_arrive_index(window),
        horizon_start_index=horizon_index,
        delivery_date_label=format_delivery_date(window.delivery_date),
        warnings=waste_warnings(waste),
    )

    logger.debug(
        f"Plan summary: required {required}, available {available}, "
        f"order {order}, waste {waste}"
    )
    return summary
