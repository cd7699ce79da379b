"""Centralized constants for the order planner.

This module contains the fixed business parameters used across the planning
calculations: usage factors, the shelf life horizon used for waste risk,
display precision and date formats. Centralizing these values keeps the
calculators and the UI consistent.
"""

# ============================================================================
# USAGE FACTORS (cases per $1,000 of sales)
# ============================================================================

#: Cases of large meat consumed per $1,000 of sales (locked)
USAGE_LARGE_CASES_PER_1K = 0.64

#: Cases of small meat consumed per $1,000 of sales (locked)
USAGE_SMALL_CASES_PER_1K = 0.15

#: Sales amount that one usage factor refers to
SALES_UNIT_DOLLARS = 1000.0


# ============================================================================
# SHELF LIFE
# ============================================================================

#: Days a delivery stays usable, counting the delivery day itself
SHELF_LIFE_DAYS = 4


# ============================================================================
# ARRIVE INDEX FALLBACKS
# ============================================================================

#: Waste horizon starts here when the delivery day is not in the window
HORIZON_FALLBACK_INDEX = 0

#: No row is highlighted when the delivery day is not in the window
HIGHLIGHT_FALLBACK_INDEX = None


# ============================================================================
# DISPLAY
# ============================================================================

#: Decimal places for case quantities shown to the user
DISPLAY_DECIMALS = 2

#: Delivery date format, e.g. 10-5-2026 (month-day-year, no zero padding)
DELIVERY_DATE_FORMAT = "{d.month}-{d.day}-{d.year}"

#: Row label format, e.g. 10-5-2026 (Mon)
ROW_LABEL_FORMAT = "{d.month}-{d.day}-{d.year} ({d:%a})"


# ============================================================================
# LOGGING
# ============================================================================

#: Environment variable holding the log level for the Streamlit app
LOG_LEVEL_ENV_VAR = "MEAT_PLANNER_LOG_LEVEL"

#: Log level used when the environment variable is unset or invalid
DEFAULT_LOG_LEVEL = "WARNING"
