"""Planning window generation.

The window runs from today through the delivery date plus the number of days
the new order must last. It is always regenerated wholesale: when the delivery
date or duration changes, every value entered for the old window is dropped
rather than realigned to the new one.
"""

import logging
from datetime import date as Date, datetime, timedelta
from typing import Any, Optional

from src.models.day_record import DayRecord, PlanningWindow
from src.planning.quantities import NUMBER_PATTERN

logger = logging.getLogger(__name__)


def coerce_duration(value: Any) -> Optional[int]:
    """
    Interpret a duration input as a positive whole number of days.

    Args:
        value: Duration as entered (int, float or text)

    Returns:
        Positive integer number of days, or None if missing or invalid

    Examples:
        >>> coerce_duration("5")
        5
        >>> coerce_duration(3.0)
        3
        >>> coerce_duration("5.0")
        5
        >>> coerce_duration("0") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value > 0 else None

    if not isinstance(value, float):
        text = str(value).strip()
        if not NUMBER_PATTERN.fullmatch(text):
            return None
        value = float(text)

    if not value.is_integer():
        return None
    days = int(value)

    return days if days > 0 else None


def days_to_arrive(delivery_date: Date, today: Date) -> int:
    """Whole days from today until delivery, floored at zero."""
    return max(0, (delivery_date - today).days)


def generate_window(
    delivery_date: Optional[Date],
    duration_days: Any,
    today: Date,
) -> PlanningWindow:
    """
    Build a fresh planning window with every value unset.

    Args:
        delivery_date: Requested delivery date (None if not chosen yet)
        duration_days: Days the new order must last (positive integer)
        today: First day of the window

    Returns:
        PlanningWindow with days_to_arrive + duration_days + 1 records, or an
        empty window if either input is missing or invalid
    """
    if isinstance(delivery_date, datetime):
        delivery_date = delivery_date.date()
    elif not isinstance(delivery_date, Date):
        delivery_date = None

    duration = coerce_duration(duration_days)
    if delivery_date is None or duration is None:
        logger.debug("Delivery date or duration missing; returning empty window")
        return PlanningWindow(today=today, delivery_date=delivery_date, duration_days=duration)

    total_days = days_to_arrive(delivery_date, today) + duration
    records = tuple(DayRecord(date=today + timedelta(days=i)) for i in range(total_days + 1))

    logger.info(
        f"Generated planning window {today} to {records[-1].date} "
        f"({len(records)} days, delivery {delivery_date}, duration {duration}d)"
    )

    return PlanningWindow(
        records=records,
        today=today,
        delivery_date=delivery_date,
        duration_days=duration,
    )


def needs_regeneration(
    window: Optional[PlanningWindow],
    delivery_date: Optional[Date],
    duration_days: Any,
    today: Date,
) -> bool:
    """True if the window was built from different inputs than these."""
    if window is None:
        return True
    return (
        window.today != today
        or window.delivery_date != delivery_date
        or window.duration_days != coerce_duration(duration_days)
    )


def replace_window(
    current: Optional[PlanningWindow],
    delivery_date: Optional[Date],
    duration_days: Any,
    today: Date,
) -> PlanningWindow:
    """
    Return the window to plan with for these inputs.

    The current window is kept only when it was generated from exactly the
    same inputs. Otherwise it is discarded along with all entered values and
    a new empty window is generated.

    Args:
        current: Window currently held by the session (None if none yet)
        delivery_date: Requested delivery date
        duration_days: Days the new order must last
        today: First day of the window

    Returns:
        The current window, or a freshly generated one
    """
    if not needs_regeneration(current, delivery_date, duration_days, today):
        return current

    if current is not None and not current.is_empty:
        logger.info("Planning inputs changed; discarding entered values")

    return generate_window(delivery_date, duration_days, today)
