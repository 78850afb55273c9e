# charts.py - Plotly figures for the article sections
from typing import Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from .config import RATING_DOMAIN, RECENT_YEAR, WEIGHT_DOMAIN
from .queries import QuizResult
from .records import GameRecord
from .regression import TrendSegment

CHART_COLORS = ["#ff4d4d", "#4da6ff", "#ffd700", "#00cc66", "#ff99cc"]
POINT_COLOR = "#457b9d"
RECENT_COLOR = "#e63946"
MATCH_COLOR = "#ffd700"
CHART_BG = "#111111"
MUTED = "#a0a0a0"


def _dark_layout(fig: go.Figure, title: str, height: int = 480) -> go.Figure:
    fig.update_layout(
        title=title,
        plot_bgcolor=CHART_BG,
        paper_bgcolor=CHART_BG,
        font_color=MUTED,
        height=height,
        hovermode="closest",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
    )
    return fig


def create_mechanics_evolution_chart(yearly: pd.DataFrame, mechanics: Sequence[str],
                                     highlight: Optional[Sequence[str]] = None) -> go.Figure:
    """Games per year using each tracked mechanic (raw counts, not shares)."""
    highlight = set(highlight or mechanics)
    fig = go.Figure()
    for i, mech in enumerate(mechanics):
        if mech not in yearly.columns:
            continue
        on = mech in highlight
        fig.add_trace(go.Scatter(
            x=yearly["year"], y=yearly[mech],
            mode="lines+markers", name=mech,
            line=dict(color=CHART_COLORS[i % len(CHART_COLORS)], width=4 if on else 1, shape="spline"),
            opacity=1.0 if on else 0.2,
            hovertemplate=f"<b>{mech}</b><br>%{{x}}: %{{y}} games<extra></extra>",
        ))
    fig.update_xaxes(title_text="Year", tickformat="d")
    fig.update_yaxes(title_text="Games", rangemode="tozero")
    return _dark_layout(fig, "The Rise of Mechanics")


def create_complexity_chart(points: Sequence[GameRecord], trend: Optional[TrendSegment] = None,
                            show_recent: bool = False) -> go.Figure:
    """Weight vs rating scatter, optionally with the trend segment and recent games."""
    recent = [p for p in points if show_recent and p.year is not None and p.year > RECENT_YEAR]
    older = [p for p in points if not (show_recent and p.year is not None and p.year > RECENT_YEAR)]

    fig = go.Figure()
    for data, name, color, size, opacity in [
        (older, "Games", POINT_COLOR, 3, 0.3),
        (recent, f"Published after {RECENT_YEAR}", RECENT_COLOR, 4, 0.6),
    ]:
        if not data:
            continue
        fig.add_trace(go.Scattergl(
            x=[p.weight for p in data], y=[p.rating for p in data],
            mode="markers", name=name,
            marker=dict(size=size, color=color, opacity=opacity),
            text=[p.name for p in data],
            hovertemplate="<b>%{text}</b><br>Weight: %{x:.2f}<br>Rating: %{y:.2f}<extra></extra>",
        ))

    if trend is not None:
        fig.add_trace(go.Scatter(
            x=[trend.x1, trend.x2], y=[trend.y1, trend.y2],
            mode="lines", name="Trend",
            line=dict(color="white", width=3), opacity=0.7,
        ))

    fig.update_xaxes(title_text="Complexity (Weight)", range=list(WEIGHT_DOMAIN))
    fig.update_yaxes(title_text="Average Rating", range=list(RATING_DOMAIN))
    return _dark_layout(fig, "Heavier Games, Higher Ratings?")


def create_quiz_results_chart(result: QuizResult) -> go.Figure:
    """Background games, the 100 closest matches and the reader's own marker."""
    fig = go.Figure()
    fig.add_trace(go.Scattergl(
        x=[g.weight for g in result.background], y=[g.rating for g in result.background],
        mode="markers", name="All games",
        marker=dict(size=3, color=CHART_COLORS[1], opacity=0.08),
        hoverinfo="skip",
    ))
    fig.add_trace(go.Scatter(
        x=[g.weight for g in result.top_similar], y=[g.rating for g in result.top_similar],
        mode="markers", name="Similar games",
        marker=dict(size=7, color=MATCH_COLOR, opacity=0.4),
        text=[g.name for g in result.top_similar],
        hovertemplate="<b>%{text}</b><br>Weight: %{x:.2f}<br>Rating: %{y:.2f}<extra></extra>",
    ))
    pos = result.user_position
    fig.add_trace(go.Scatter(
        x=[pos.x], y=[pos.y],
        mode="markers+text", name="You",
        marker=dict(size=18, color=CHART_COLORS[0], line=dict(color="white", width=2)),
        text=["YOU"], textposition="top center", textfont=dict(color="white", size=14),
    ))
    fig.update_xaxes(title_text="Complexity (Weight)", range=list(WEIGHT_DOMAIN), tickformat=".1f")
    fig.update_yaxes(title_text="Average Rating", range=list(RATING_DOMAIN))
    return _dark_layout(fig, "Where You Land", height=500)
