"""Editable planning table component.

Builds the per-day table from a PlanningWindow, renders it with
st.data_editor, and turns the edited DataFrame back into cell edits.
Stock cells on or after the delivery day show a dash and any edit to them
is ignored.
"""

import math
from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from src.models.case_quantities import UsageFactors
from src.models.day_record import EditableField, PlanningWindow
from src.planning.cells import CellEdit
from src.planning.classification import RowKind, classify_rows
from src.planning.demand import daily_usage
from src.planning.summary import format_row_label

DATE_COLUMN = 'Date (Day)'
USAGE_LARGE_COLUMN = 'Usage Lg/day'
USAGE_SMALL_COLUMN = 'Usage Sm/day'
KIND_COLUMN = '_kind'

#: Table column for each editable field, in display order
FIELD_COLUMNS: Dict[EditableField, str] = {
    EditableField.SALES_AMOUNT: 'Sales$',
    EditableField.ON_HAND_LARGE: 'On-hand Lg',
    EditableField.ON_HAND_SMALL: 'On-hand Sm',
    EditableField.ON_ORDER_LARGE: 'On-order Lg',
    EditableField.ON_ORDER_SMALL: 'On-order Sm',
}

#: Placeholder shown in stock cells that are not collected
LOCKED_CELL = '—'

#: Shown under the table; the editor cannot lock single cells
LOCKED_CELL_NOTE = f"Stock cells marked {LOCKED_CELL} are on or after the delivery day; anything typed there is ignored."

ROW_COLORS = {
    RowKind.DELIVERY: 'background-color: #dcfce7',
    RowKind.CONSUMPTION: 'background-color: #fef9c3',
    RowKind.PLAIN: '',
}


def window_to_dataframe(window: PlanningWindow, usage: UsageFactors) -> pd.DataFrame:
    """Convert a planning window to the table shown to the user.

    Args:
        window: Planning window
        usage: Usage factors for the per-day usage columns

    Returns:
        DataFrame with one row per day, raw text in editable columns and a
        hidden '_kind' column used for row colouring
    """
    columns = [
        DATE_COLUMN,
        FIELD_COLUMNS[EditableField.SALES_AMOUNT],
        USAGE_LARGE_COLUMN,
        USAGE_SMALL_COLUMN,
        *[FIELD_COLUMNS[f] for f in FIELD_COLUMNS if f.is_stock_field],
        KIND_COLUMN,
    ]
    if window.is_empty:
        return pd.DataFrame(columns=columns)

    data = []
    for record, row in zip(window, classify_rows(window)):
        used = daily_usage(record, usage)
        entry = {
            DATE_COLUMN: format_row_label(record.date),
            FIELD_COLUMNS[EditableField.SALES_AMOUNT]: record.sales_amount,
            USAGE_LARGE_COLUMN: f"{used.large:.2f}",
            USAGE_SMALL_COLUMN: f"{used.small:.2f}",
            KIND_COLUMN: row.kind.value,
        }
        for field, column in FIELD_COLUMNS.items():
            if field.is_stock_field:
                entry[column] = record.get(field) if row.stock_editable else LOCKED_CELL
        data.append(entry)

    return pd.DataFrame(data, columns=columns)


def highlight_row(row: pd.Series) -> List[str]:
    """Row style for delivery (green) and consumption (yellow) days."""
    style = ROW_COLORS.get(RowKind(row[KIND_COLUMN]), '')
    return [style] * len(row)


def _normalize_cell(value) -> str:
    """Editor cell value as raw text ('' for empty/None/NaN)."""
    if value is None:
        return ''
    if isinstance(value, float) and math.isnan(value):
        return ''
    return str(value)


def dataframe_to_edits(window: PlanningWindow, edited_df: pd.DataFrame) -> List[CellEdit]:
    """Find cells whose text differs from the window.

    Locked stock cells are never reported. Rows beyond the window (if the
    editor ever returns any) are ignored.

    Args:
        window: Window the table was built from
        edited_df: DataFrame returned by st.data_editor

    Returns:
        List of (index, field, value) edits
    """
    edits: List[CellEdit] = []
    rows = classify_rows(window)

    for index, (_, edited_row) in enumerate(edited_df.iterrows()):
        if index >= len(window):
            break
        record = window[index]
        for field, column in FIELD_COLUMNS.items():
            if column not in edited_row:
                continue
            if field.is_stock_field and not rows[index].stock_editable:
                continue
            value = _normalize_cell(edited_row[column])
            if value != record.get(field):
                edits.append((index, field, value))

    return edits


def table_key(window: PlanningWindow) -> str:
    """Editor widget key for a window.

    Includes every input the window is generated from, so a regenerated
    window (new delivery date, duration or day) starts with a fresh editor
    instead of replaying edits onto shifted rows.
    """
    return f"planning_table_{window.today}_{window.delivery_date}_{window.duration_days}"


def _text_column(label: str, help_text: str):
    return st.column_config.TextColumn(label, help=help_text)


def render_planning_table(
    window: PlanningWindow,
    usage: UsageFactors,
    key: Optional[str] = None,
) -> List[CellEdit]:
    """Render the editable planning table.

    Args:
        window: Planning window
        usage: Usage factors
        key: Widget key (defaults to table_key(window))

    Returns:
        Edits made by the user since the window was last stored
    """
    if window.is_empty:
        st.info("Choose a delivery date and duration to start planning")
        return []

    df = window_to_dataframe(window, usage)
    edited_df = st.data_editor(
        df.style.apply(highlight_row, axis=1),
        use_container_width=True,
        hide_index=True,
        num_rows="fixed",
        key=key or table_key(window),
        disabled=[DATE_COLUMN, USAGE_LARGE_COLUMN, USAGE_SMALL_COLUMN, KIND_COLUMN],
        column_config={
            KIND_COLUMN: None,
            FIELD_COLUMNS[EditableField.SALES_AMOUNT]: _text_column('Sales$', "Forecast sales in dollars"),
            FIELD_COLUMNS[EditableField.ON_HAND_LARGE]: _text_column('On-hand Lg', "Cases of large meat on hand today"),
            FIELD_COLUMNS[EditableField.ON_HAND_SMALL]: _text_column('On-hand Sm', "Cases of small meat on hand today"),
            FIELD_COLUMNS[EditableField.ON_ORDER_LARGE]: _text_column('On-order Lg', "Cases of large meat arriving this day"),
            FIELD_COLUMNS[EditableField.ON_ORDER_SMALL]: _text_column('On-order Sm', "Cases of small meat arriving this day"),
        },
    )

    st.caption(f"{len(df)} days from {window[0].date} to {window[window.last_index].date}")
    st.caption(LOCKED_CELL_NOTE)
    return dataframe_to_edits(window, edited_df)
