"""Plotly visualisation helpers for the Expense Dashboard.

This module defines a suite of functions that accept the series returned
by the corresponding functions in :mod:`aggregation` and produce
interactive Plotly figures.  Each function is focused on a specific chart
type to keep the code easy to navigate.

All functions return a `plotly.graph_objects.Figure` instance that
Streamlit can render via ``st.plotly_chart``.  Empty inputs produce an
empty figure titled ``"No data yet"`` instead of raising.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .config import CURRENCY_SYMBOL
from .constants import CHART_COLORS, TREND_COLOR
from .formatting import format_short_date

EMPTY_TITLE = "No data yet"
_HOVER_AMOUNT = CURRENCY_SYMBOL + "%{value:,.2f}"


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=EMPTY_TITLE)
    return fig


def _totals_frame(series: pd.Series) -> pd.DataFrame:
    df = series.reset_index()
    df.columns = ["Name", "Value"]
    return df


def create_category_pie_chart(series: pd.Series, title: str | None = None) -> go.Figure:
    """Generate a donut chart of spending per category.

    Parameters
    ----------
    series : pandas.Series
        Category totals as returned by :func:`aggregation.category_totals`.
    title : str, optional
        Title for the chart.

    Returns
    -------
    plotly.graph_objects.Figure
        Donut chart, slices coloured from ``CHART_COLORS`` in series order.
    """
    if series.empty:
        return _empty_figure()
    df = _totals_frame(series)
    fig = px.pie(
        df,
        names="Name",
        values="Value",
        hole=0.6,
        color_discrete_sequence=CHART_COLORS,
    )
    fig.update_traces(sort=False, hovertemplate="%{label}: " + _HOVER_AMOUNT + "<extra></extra>")
    fig.update_layout(title=title or "Distribution by Category")
    return fig


def create_spending_bar_chart(series: pd.Series, title: str | None = None) -> go.Figure:
    """Generate a horizontal bar chart of spending per category.

    Parameters
    ----------
    series : pandas.Series
        Category totals, largest first.
    title : str, optional
        Title for the chart.

    Returns
    -------
    plotly.graph_objects.Figure
        Horizontal bar chart with the largest category at the top.
    """
    if series.empty:
        return _empty_figure()
    df = _totals_frame(series)
    colors = [CHART_COLORS[index % len(CHART_COLORS)] for index in range(len(df))]
    fig = go.Figure(
        go.Bar(
            x=df["Value"],
            y=df["Name"],
            orientation="h",
            marker_color=colors,
            hovertemplate="%{y}: " + CURRENCY_SYMBOL + "%{x:,.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title or "Spending Magnitude",
        xaxis_visible=False,
        yaxis_autorange="reversed",
    )
    return fig


def create_payment_mode_chart(series: pd.Series, title: str | None = None) -> go.Figure:
    """Generate a pie chart of spending per payment mode."""
    if series.empty:
        return _empty_figure()
    df = _totals_frame(series)
    fig = px.pie(df, names="Name", values="Value", color_discrete_sequence=CHART_COLORS)
    fig.update_traces(sort=False, hovertemplate="%{label}: " + _HOVER_AMOUNT + "<extra></extra>")
    fig.update_layout(title=title or "Payment Preferences")
    return fig


def create_trend_chart(trend: pd.Series, title: str | None = None) -> go.Figure:
    """Create an area chart of daily spending.

    Parameters
    ----------
    trend : pandas.Series
        Daily totals indexed by date, as returned by
        :func:`aggregation.daily_trend`.  Zero-valued days are plotted so the
        chart always spans the full window.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Area chart with short date labels on the x axis.
    """
    if trend.empty:
        return _empty_figure()
    labels = [format_short_date(day) for day in trend.index]
    fig = go.Figure(
        go.Scatter(
            x=labels,
            y=trend.values,
            mode="lines",
            line={"color": TREND_COLOR, "width": 2, "shape": "spline"},
            fill="tozeroy",
            hovertemplate="%{x}: " + CURRENCY_SYMBOL + "%{y:,.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title or "Expense Trend",
        xaxis_title=None,
        yaxis_title=None,
    )
    return fig
