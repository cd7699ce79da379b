"""Single-cell edits to a planning window.

Windows and records are immutable: an edit returns a new window that shares
every untouched record with the old one.
"""

import logging
from typing import Any, Iterable, Tuple

from src.models.day_record import EditableField, PlanningWindow
from src.planning.classification import find_arrive_index, is_cell_editable

logger = logging.getLogger(__name__)

CellEdit = Tuple[int, EditableField, Any]


def set_field(window: PlanningWindow, index: int, field: EditableField, value: Any) -> PlanningWindow:
    """
    Replace one field on one record.

    The raw value is stored as text; it is not validated here. Calculations
    treat anything unparsable as zero.

    Args:
        window: Window to edit
        index: Record index (0 = today)
        field: Field to replace
        value: Raw value as entered

    Returns:
        New window with the edit applied

    Raises:
        IndexError: If index is outside the window
        ValueError: If field is not an editable field name
    """
    if not 0 <= index < len(window):
        raise IndexError(f"Row index {index} outside planning window of {len(window)} days")

    field = EditableField(field)
    record = window[index].with_value(field, value)
    logger.debug(f"Set {field} on {record.date} to {record.get(field)!r}")
    return window.with_record(index, record)


def apply_edits(
    window: PlanningWindow,
    edits: Iterable[CellEdit],
    editable_only: bool = True,
) -> PlanningWindow:
    """
    Apply a sparse set of (index, field, value) edits in order.

    Args:
        window: Window to edit
        edits: Edits to apply
        editable_only: Skip stock edits on rows where stock is not collected

    Returns:
        New window with the edits applied
    """
    arrive_index = find_arrive_index(window)
    for index, field, value in edits:
        field = EditableField(field)
        if editable_only and not is_cell_editable(index, field, arrive_index):
            logger.debug(f"Ignoring edit to non-editable cell {field} at row {index}")
            continue
        window = set_field(window, index, field, value)
    return window
