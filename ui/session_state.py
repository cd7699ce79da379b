"""Session state management for the order planner.

The session owns the planning window. Derived totals are never stored here;
pages rebuild them from the window on every rerun.

Keys:
- delivery_date / duration_days: last inputs the window was generated from
- planning_window: current PlanningWindow (empty until inputs are complete)
"""

import logging
from datetime import date as Date
from typing import Any, Iterable, Optional

import streamlit as st

from src.models.day_record import PlanningWindow
from src.planning.cells import CellEdit, apply_edits
from src.planning.window import replace_window

logger = logging.getLogger(__name__)

WINDOW_KEY = 'planning_window'


def initialize_session_state():
    """Initialize all session state variables with defaults."""
    defaults = {
        'delivery_date': None,
        'duration_days': None,
        WINDOW_KEY: PlanningWindow(),
    }

    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_window() -> PlanningWindow:
    """Current planning window (empty if none generated yet)."""
    window = st.session_state.get(WINDOW_KEY)
    if window is None:
        return PlanningWindow()
    return window


def sync_inputs(delivery_date: Optional[Date], duration_days: Any, today: Date) -> PlanningWindow:
    """Store form inputs and regenerate the window if they changed.

    A change to delivery date or duration replaces the window wholesale,
    dropping every value entered for the old one.

    Args:
        delivery_date: Delivery date from the form
        duration_days: Duration from the form
        today: Current date

    Returns:
        Window to plan with
    """
    current = st.session_state.get(WINDOW_KEY)
    window = replace_window(current, delivery_date, duration_days, today)

    st.session_state['delivery_date'] = delivery_date
    st.session_state['duration_days'] = duration_days
    st.session_state[WINDOW_KEY] = window
    return window


def store_edits(edits: Iterable[CellEdit]) -> PlanningWindow:
    """Apply table edits to the stored window.

    Edits to stock cells on or after the delivery day are dropped.

    Args:
        edits: (index, field, value) edits from the planning table

    Returns:
        Updated window
    """
    edits = list(edits)
    window = get_window()
    if edits:
        window = apply_edits(window, edits)
        st.session_state[WINDOW_KEY] = window
        logger.debug(f"Stored {len(edits)} table edit(s)")
    return window


def clear_plan():
    """Clear inputs and the planning window."""
    st.session_state['delivery_date'] = None
    st.session_state['duration_days'] = None
    st.session_state[WINDOW_KEY] = PlanningWindow()
