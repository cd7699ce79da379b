"""Main Streamlit application for meat order planning.

Enter a delivery date, how many days the new order must last and the daily
sales forecast; the page suggests how many cases of large and small meat to
order and warns when part of the delivery is likely to spoil.

Run with:
    streamlit run ui/app.py
"""

import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st
from src.config import configure_logging
from src.models import DEFAULT_USAGE_FACTORS
from src.planning import build_plan_summary
from src.validation import validate_plan_inputs
from ui import session_state
from ui.components import (
    apply_custom_css,
    render_daily_usage_chart,
    render_legend,
    render_plan_summary,
    render_planning_table,
    render_usage_factors,
    render_validation_issues,
    section_header,
    table_key,
)

configure_logging()

# Set page configuration
st.set_page_config(
    page_title="Meat Genie",
    page_icon="🥩",
    layout="wide",
)

apply_custom_css()
session_state.initialize_session_state()

usage = DEFAULT_USAGE_FACTORS
today = date.today()

st.markdown(section_header("Meat Genie", level=1, icon="🥩"), unsafe_allow_html=True)
render_legend()

# Planning inputs
col1, col2, col3 = st.columns(3)

with col1:
    delivery_date = st.date_input(
        "Delivery Date:",
        value=st.session_state['delivery_date'],
        min_value=today,
        help="Date the new order arrives",
    )

with col2:
    duration_days = st.number_input(
        "Days new order must last:",
        value=st.session_state['duration_days'],
        min_value=1,
        step=1,
        help="Number of days after delivery the order must cover",
    )

with col3:
    render_usage_factors(usage)

issues = validate_plan_inputs(delivery_date, duration_days, today)
render_validation_issues(issues)

window = session_state.sync_inputs(delivery_date, duration_days, today)

if not window.is_empty:
    st.divider()

    edits = render_planning_table(window, usage, key=table_key(window))
    if edits:
        # Usage columns were built from the window before these edits
        session_state.store_edits(edits)
        st.rerun()

    summary = build_plan_summary(window, usage)

    st.divider()
    st.markdown(section_header("Suggested Order Qty", level=2), unsafe_allow_html=True)
    render_plan_summary(summary)

    st.plotly_chart(render_daily_usage_chart(window, usage, summary), use_container_width=True)

    if st.button("Clear plan", help="Forget the delivery date, duration and every entered value"):
        session_state.clear_plan()
        st.rerun()
