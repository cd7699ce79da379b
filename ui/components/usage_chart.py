"""Daily usage visualization using Plotly."""

import plotly.graph_objects as go

from src.models.case_quantities import UsageFactors
from src.models.day_record import PlanningWindow
from src.planning.classification import find_arrive_index
from src.planning.demand import daily_usage_series
from src.planning.order import waste_horizon
from src.planning.summary import format_row_label, PlanSummary


def render_daily_usage_chart(
    window: PlanningWindow,
    usage: UsageFactors,
    summary: PlanSummary,
    height: int = 360,
):
    """
    Render daily case usage as a grouped bar chart.

    The shelf life horizon after delivery is shaded so the user can see
    which days' demand counts against waste.

    Args:
        window: Planning window
        usage: Usage factors
        summary: PlanSummary for the window
        height: Chart height in pixels

    Returns:
        Plotly figure object
    """
    fig = go.Figure()

    if window.is_empty:
        fig.add_annotation(
            text="No planning window yet",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False,
            font=dict(size=16)
        )
        fig.update_layout(title='Daily Usage', title_x=0.5, height=height)
        return fig

    labels = [format_row_label(record.date) for record in window]
    series = daily_usage_series(window, usage)

    fig.add_trace(go.Bar(
        name='Large',
        x=labels,
        y=[day.large for day in series],
        marker=dict(color='#FF6B6B'),
        hovertemplate='%{x}<br>Large: %{y:.2f} cases<extra></extra>',
    ))

    fig.add_trace(go.Bar(
        name='Small',
        x=labels,
        y=[day.small for day in series],
        marker=dict(color='#4ECDC4'),
        hovertemplate='%{x}<br>Small: %{y:.2f} cases<extra></extra>',
    ))

    if find_arrive_index(window) is not None:
        start, end = waste_horizon(window, summary.horizon_start_index)
        fig.add_vrect(
            x0=start - 0.5,
            x1=end + 0.5,
            fillcolor='#dcfce7',
            opacity=0.5,
            layer='below',
            line_width=0,
            annotation_text='Shelf life',
            annotation_position='top left',
        )

    fig.update_layout(
        title='Daily Usage',
        title_x=0.5,
        xaxis_title='Date',
        yaxis_title='Cases',
        barmode='group',
        height=height,
        hovermode='x unified',
    )

    return fig
