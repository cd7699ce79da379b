"""Reusable UI components for the order planner."""

from .planning_table import (
    render_planning_table,
    window_to_dataframe,
    dataframe_to_edits,
    highlight_row,
    table_key,
)
from .plan_summary import (
    render_usage_factors,
    render_legend,
    render_plan_summary,
    render_validation_issues,
)
from .usage_chart import render_daily_usage_chart
from .styling import apply_custom_css, colored_metric, section_header, legend_item

__all__ = [
    # Planning table
    'render_planning_table',
    'window_to_dataframe',
    'dataframe_to_edits',
    'highlight_row',
    'table_key',
    # Summary panel
    'render_usage_factors',
    'render_legend',
    'render_plan_summary',
    'render_validation_issues',
    # Charts
    'render_daily_usage_chart',
    # Styling
    'apply_custom_css',
    'colored_metric',
    'section_header',
    'legend_item',
]
