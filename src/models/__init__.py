"""Data models for the meat order planner."""

from .day_record import DayRecord, PlanningWindow, EditableField, STOCK_FIELDS
from .case_quantities import CaseQuantities, SizeClass, UsageFactors, DEFAULT_USAGE_FACTORS

__all__ = [
    # Planning window
    "DayRecord",
    "PlanningWindow",
    "EditableField",
    "STOCK_FIELDS",
    # Quantities and usage
    "CaseQuantities",
    "SizeClass",
    "UsageFactors",
    "DEFAULT_USAGE_FACTORS",
]
