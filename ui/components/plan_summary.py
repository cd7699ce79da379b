"""Summary panel components: usage factors, legend, order and warnings."""

from typing import List

import streamlit as st

from src.models.case_quantities import UsageFactors
from src.planning.summary import PlanSummary
from src.validation.input_validator import ValidationIssue, ValidationSeverity
from ui.components.styling import colored_metric, legend_item


def render_usage_factors(usage: UsageFactors):
    """Show the locked usage factors."""
    st.markdown("**Usage Factors (locked):**")
    st.markdown(f"Large: {usage.large} cases/$1k")
    st.markdown(f"Small: {usage.small} cases/$1k")


def render_legend():
    """Row colour legend for the planning table."""
    st.markdown(
        legend_item("delivery", "Delivery Day") + legend_item("consumption", "Consumption Days"),
        unsafe_allow_html=True,
    )


def render_plan_summary(summary: PlanSummary):
    """
    Render the suggested order and waste warnings.

    Args:
        summary: PlanSummary for the current window
    """
    order = summary.display_order

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown(colored_metric("Order Large", f"{order.large:.2f} cases", "primary"), unsafe_allow_html=True)
    with col2:
        st.markdown(colored_metric("Order Small", f"{order.small:.2f} cases", "secondary"), unsafe_allow_html=True)
    with col3:
        st.markdown(colored_metric("Delivery Date", summary.delivery_date_label or "-", "accent"), unsafe_allow_html=True)

    with st.expander("Calculation details"):
        st.markdown(f"Total forecast sales: ${summary.total_sales:,.2f}")
        st.markdown(f"Required: {summary.required.large:.2f} large / {summary.required.small:.2f} small cases")
        st.markdown(f"Available: {summary.available.large:.2f} large / {summary.available.small:.2f} small cases")

    for warning in summary.warnings:
        st.markdown(f'<p class="waste-warning">{warning.message}</p>', unsafe_allow_html=True)


def render_validation_issues(issues: List[ValidationIssue]):
    """Show input validation issues, most severe first."""
    renderers = {
        ValidationSeverity.ERROR: st.error,
        ValidationSeverity.WARNING: st.warning,
        ValidationSeverity.INFO: st.info,
    }
    order = [ValidationSeverity.ERROR, ValidationSeverity.WARNING, ValidationSeverity.INFO]

    for severity in order:
        for issue in issues:
            if issue.severity != severity:
                continue
            text = f"**{issue.title}** {issue.description}"
            if issue.fix_guidance:
                text += f" {issue.fix_guidance}"
            renderers[severity](text)
