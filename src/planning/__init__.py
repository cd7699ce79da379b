"""
Order planning engine for perishable meat.

Pure functions that turn a planning window of per-day sales and stock into
required cases, available supply, a suggested order and a waste estimate.
"""

from .window import generate_window, replace_window, needs_regeneration, coerce_duration, days_to_arrive
from .cells import set_field, apply_edits
from .quantities import parse_quantity
from .demand import total_sales, required_cases, daily_usage, daily_usage_series
from .supply import available_cases
from .order import suggested_order, waste_risk, waste_horizon
from .classification import (
    RowKind,
    RowClassification,
    classify_rows,
    find_arrive_index,
    horizon_arrive_index,
    is_cell_editable,
)
from .summary import PlanSummary, WasteWarning, build_plan_summary, format_delivery_date, format_row_label

__all__ = [
    # Window
    'generate_window',
    'replace_window',
    'needs_regeneration',
    'coerce_duration',
    'days_to_arrive',
    # Edits
    'set_field',
    'apply_edits',
    'parse_quantity',
    # Calculators
    'total_sales',
    'required_cases',
    'daily_usage',
    'daily_usage_series',
    'available_cases',
    'suggested_order',
    'waste_risk',
    'waste_horizon',
    # Classification
    'RowKind',
    'RowClassification',
    'classify_rows',
    'find_arrive_index',
    'horizon_arrive_index',
    'is_cell_editable',
    # Summary
    'PlanSummary',
    'WasteWarning',
    'build_plan_summary',
    'format_delivery_date',
    'format_row_label',
]
