"""Styling helper functions for the Streamlit application.

This module applies the design system defined in ui/assets/styles.css:
- Loading and injecting custom CSS
- Section headers
- Colored metric cards
- Planning table legend swatches

Usage:
    import streamlit as st
    from ui.components.styling import apply_custom_css, colored_metric

    apply_custom_css()
    st.markdown(colored_metric("Order Large", "3.20 cases", "primary"), unsafe_allow_html=True)
"""

from pathlib import Path
from typing import Literal, Optional
import streamlit as st

ColorType = Literal["primary", "secondary", "accent", "success", "warning", "error"]
HeaderLevel = Literal[1, 2, 3]
LegendKind = Literal["delivery", "consumption"]


def apply_custom_css() -> None:
    """Load and inject custom CSS from ui/assets/styles.css into the app."""
    css_file = Path(__file__).parent.parent / "assets" / "styles.css"

    if css_file.exists():
        with open(css_file) as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    else:
        st.warning(f"⚠️ CSS file not found at {css_file}")


def colored_metric(label: str, value: str, color: ColorType = "primary") -> str:
    """Generate a colored metric card HTML component.

    Args:
        label: Metric label (e.g., "Order Large")
        value: Metric value (e.g., "3.20 cases")
        color: Border color variant

    Returns:
        HTML string for the colored metric card

    Example:
        >>> st.markdown(colored_metric("Order Small", "0.75 cases", "secondary"), unsafe_allow_html=True)
    """
    return f'''
    <div class="metric-card metric-card-{color}">
        <div class="metric-label">{label}</div>
        <div class="metric-value-large">{value}</div>
    </div>
    '''


def section_header(text: str, level: HeaderLevel = 1, icon: Optional[str] = None) -> str:
    """Generate a styled section header HTML component.

    Args:
        text: Header text
        level: Header level - 1 (page title), 2 (section), 3 (subsection)
        icon: Optional emoji or icon to display before the text

    Returns:
        HTML string for the styled header
    """
    class_map = {
        1: "page-title",
        2: "section-header",
        3: "subsection-header"
    }

    icon_html = f"{icon} " if icon else ""
    css_class = class_map.get(level, "section-header")

    return f'<div class="{css_class}">{icon_html}{text}</div>'


def legend_item(kind: LegendKind, label: str) -> str:
    """Colour swatch with label for the planning table legend."""
    return (
        f'<span class="legend-item">'
        f'<span class="legend-swatch legend-swatch-{kind}"></span>{label}'
        f'</span>'
    )
