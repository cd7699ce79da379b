"""Row classification for the planning table.

Decides which row is the delivery day, which rows fall inside the period the
new order must cover, and which cells the user may edit. Stock fields are
only collected for days strictly before delivery.

The delivery row lookup has two deliberately different fallbacks when the
delivery date is not in the window: waste math starts at index 0
(HORIZON_FALLBACK_INDEX) while no row is highlighted (HIGHLIGHT_FALLBACK_INDEX).
"""

from dataclasses import dataclass
from datetime import date as Date
from enum import Enum
from typing import List, Optional

from src.models.day_record import EditableField, PlanningWindow
from src.config.constants import HIGHLIGHT_FALLBACK_INDEX, HORIZON_FALLBACK_INDEX


class RowKind(str, Enum):
    """Visual category of a planning table row."""
    DELIVERY = "delivery"
    CONSUMPTION = "consumption"
    PLAIN = "plain"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RowClassification:
    """
    Classification of one planning table row.

    Attributes:
        index: Row index in the window
        date: Calendar date of the row
        is_delivery: Row is the delivery day
        is_consumption: Row is one of the days the delivery must cover
        stock_editable: On-hand/on-order cells are collected for this row
    """
    index: int
    date: Date
    is_delivery: bool
    is_consumption: bool
    stock_editable: bool

    @property
    def kind(self) -> RowKind:
        if self.is_delivery:
            return RowKind.DELIVERY
        if self.is_consumption:
            return RowKind.CONSUMPTION
        return RowKind.PLAIN


def find_arrive_index(window: PlanningWindow) -> Optional[int]:
    """Index of the delivery day for highlighting, or None if not in the window."""
    index = window.index_of(window.delivery_date)
    return HIGHLIGHT_FALLBACK_INDEX if index is None else index


def horizon_arrive_index(window: PlanningWindow) -> int:
    """Index of the delivery day for waste and supply math (0 if not in the window)."""
    index = window.index_of(window.delivery_date)
    return HORIZON_FALLBACK_INDEX if index is None else index


def is_cell_editable(index: int, field: EditableField, arrive_index: Optional[int]) -> bool:
    """
    Check whether a cell accepts user input.

    Sales are always editable. Stock fields are editable only on days
    strictly before delivery, and nowhere when there is no delivery row.
    """
    if not EditableField(field).is_stock_field:
        return True
    if arrive_index is None:
        return False
    return index < arrive_index


def classify_rows(window: PlanningWindow) -> List[RowClassification]:
    """
    Classify every row of the window.

    Args:
        window: Planning window

    Returns:
        One RowClassification per record, in window order
    """
    arrive_index = find_arrive_index(window)
    duration = window.duration_days or 0

    rows = []
    for index, record in enumerate(window):
        is_delivery = arrive_index is not None and index == arrive_index
        is_consumption = (
            arrive_index is not None
            and arrive_index < index <= arrive_index + duration
        )
        rows.append(RowClassification(
            index=index,
            date=record.date,
            is_delivery=is_delivery,
            is_consumption=is_consumption,
            stock_editable=is_cell_editable(index, EditableField.ON_HAND_LARGE, arrive_index),
        ))
    return rows
