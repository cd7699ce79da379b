"""Planning window data models.

A planning window is the ordered run of calendar days from today through the
last day the new order must cover. Each day carries the raw values the user
typed for sales and stock, kept as text so they can be shown back unchanged.
"""

from dataclasses import dataclass, replace
from datetime import date as Date
from enum import Enum
from typing import Any, Iterator, Optional, Tuple


class EditableField(str, Enum):
    """Per-day fields the user can type into."""
    SALES_AMOUNT = "sales_amount"
    ON_HAND_LARGE = "on_hand_large"
    ON_HAND_SMALL = "on_hand_small"
    ON_ORDER_LARGE = "on_order_large"
    ON_ORDER_SMALL = "on_order_small"

    @property
    def is_stock_field(self) -> bool:
        """True for on-hand and on-order fields (collected before delivery only)."""
        return self is not EditableField.SALES_AMOUNT

    def __str__(self) -> str:
        return self.value


STOCK_FIELDS: Tuple[EditableField, ...] = tuple(f for f in EditableField if f.is_stock_field)


@dataclass(frozen=True)
class DayRecord:
    """
    One calendar day in the planning window.

    Attributes:
        date: Calendar date of this row
        sales_amount: Forecast sales in dollars (raw text, '' when unset)
        on_hand_large: Cases of large meat on hand (raw text)
        on_hand_small: Cases of small meat on hand (raw text)
        on_order_large: Cases of large meat arriving this day (raw text)
        on_order_small: Cases of small meat arriving this day (raw text)
    """
    date: Date
    sales_amount: str = ""
    on_hand_large: str = ""
    on_hand_small: str = ""
    on_order_large: str = ""
    on_order_small: str = ""

    def get(self, field: EditableField) -> str:
        """Raw text stored for a field."""
        return getattr(self, EditableField(field).value)

    def with_value(self, field: EditableField, value: Any) -> "DayRecord":
        """Copy of this record with one field replaced by the raw value."""
        raw = "" if value is None else str(value)
        return replace(self, **{EditableField(field).value: raw})

    def __str__(self) -> str:
        return f"{self.date.isoformat()}: sales={self.sales_amount or '-'}"


@dataclass(frozen=True)
class PlanningWindow:
    """
    Ordered, contiguous run of DayRecords starting at today.

    Index 0 is today; the last index is the delivery offset plus the
    duration the order must cover. An empty window means the inputs are
    not complete yet.

    Attributes:
        records: Day records in ascending date order
        today: Date the window was generated from
        delivery_date: Requested delivery date (None if not set)
        duration_days: Days the new order must last (None if not set)
    """
    records: Tuple[DayRecord, ...] = ()
    today: Optional[Date] = None
    delivery_date: Optional[Date] = None
    duration_days: Optional[int] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[DayRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> DayRecord:
        return self.records[index]

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def last_index(self) -> int:
        """Index of the final record (-1 for an empty window)."""
        return len(self.records) - 1

    @property
    def dates(self) -> list[Date]:
        return [record.date for record in self.records]

    def index_of(self, day: Optional[Date]) -> Optional[int]:
        """
        Find the index of the record for a calendar date.

        Args:
            day: Date to look up (None is never found)

        Returns:
            Record index, or None if the date is not in the window
        """
        if day is None:
            return None
        for index, record in enumerate(self.records):
            if record.date == day:
                return index
        return None

    def with_record(self, index: int, record: DayRecord) -> "PlanningWindow":
        """Copy of this window with one record swapped out."""
        records = list(self.records)
        records[index] = record
        return replace(self, records=tuple(records))
