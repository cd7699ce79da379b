"""Fixed configuration for the order planner."""

from .constants import (
    USAGE_LARGE_CASES_PER_1K,
    USAGE_SMALL_CASES_PER_1K,
    SALES_UNIT_DOLLARS,
    SHELF_LIFE_DAYS,
    HORIZON_FALLBACK_INDEX,
    HIGHLIGHT_FALLBACK_INDEX,
    DISPLAY_DECIMALS,
    DELIVERY_DATE_FORMAT,
    ROW_LABEL_FORMAT,
    LOG_LEVEL_ENV_VAR,
    DEFAULT_LOG_LEVEL,
)
from .logging_conf import configure_logging, resolve_log_level

__all__ = [
    'USAGE_LARGE_CASES_PER_1K',
    'USAGE_SMALL_CASES_PER_1K',
    'SALES_UNIT_DOLLARS',
    'SHELF_LIFE_DAYS',
    'HORIZON_FALLBACK_INDEX',
    'HIGHLIGHT_FALLBACK_INDEX',
    'DISPLAY_DECIMALS',
    'DELIVERY_DATE_FORMAT',
    'ROW_LABEL_FORMAT',
    'LOG_LEVEL_ENV_VAR',
    'DEFAULT_LOG_LEVEL',
    'configure_logging',
    'resolve_log_level',
]
