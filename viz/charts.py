"""Chart factories: one function per chart, each returns a go.Figure."""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

_TEMPLATE = "plotly_dark"
_MY_COLOR = "#6EE7F7"
_FOE_COLOR = "#F76E6E"
_BUDGET_COLOR = "#888888"


def latency_by_turn(turn_stats: list[dict], budget_ms: float | None) -> go.Figure:
    df = pd.DataFrame(turn_stats)
    fig = go.Figure()

    for drone_id, rows in df.groupby("drone_id"):
        fig.add_trace(
            go.Scatter(
                x=rows["turn"],
                y=rows["decision_ms"],
                mode="lines+markers",
                line=dict(width=2),
                marker=dict(size=4),
                name=f"drone {drone_id}",
                hovertemplate="turn %{x}<br>%{y:.1f} ms<extra></extra>",
            )
        )
    if budget_ms:
        fig.add_hline(
            y=budget_ms,
            line_dash="dash",
            line_color=_BUDGET_COLOR,
            annotation_text=f"budget {budget_ms:.0f} ms",
            annotation_font_color=_BUDGET_COLOR,
        )

    fig.update_layout(
        title="Decision Latency per Turn",
        template=_TEMPLATE,
        height=320,
        xaxis_title="turn",
        yaxis_title="latency (ms)",
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=40, l=60, r=20),
    )
    return fig


def latency_percentile_bars(turn_stats: list[dict]) -> go.Figure:
    df = pd.DataFrame(turn_stats)
    percentiles = [25, 50, 75, 95]
    labels = ["p25", "p50", "p75", "p95"]
    values = [float(np.percentile(df["decision_ms"], p)) for p in percentiles]

    fig = go.Figure(
        go.Bar(
            x=labels,
            y=values,
            marker_color=_MY_COLOR,
            text=[f"{v:.1f} ms" for v in values],
            textposition="outside",
            hovertemplate="%{x}: %{y:.1f} ms<extra></extra>",
        )
    )
    fig.update_layout(
        title="Latency Percentiles (p25 / p50 / p75 / p95)",
        template=_TEMPLATE,
        height=320,
        xaxis_title="percentile",
        yaxis_title="latency (ms)",
        showlegend=False,
        margin=dict(t=60, b=50, l=60, r=20),
    )
    return fig


def action_mix(turn_stats: list[dict]) -> go.Figure:
    df = pd.DataFrame(turn_stats)
    df["light_label"] = np.where(df["light"], "light on", "light off")
    counts = df.groupby(["action_type", "light_label"]).size()
    total = len(df)

    fig = go.Figure()
    for light_label, color in [("light on", _MY_COLOR), ("light off", _BUDGET_COLOR)]:
        pcts = [
            counts.get((action, light_label), 0) / total * 100 for action in ("move", "wait")
        ]
        fig.add_trace(
            go.Bar(
                name=light_label,
                x=["move", "wait"],
                y=pcts,
                marker_color=color,
                text=[f"{p:.1f}%" for p in pcts],
                textposition="inside",
                hovertemplate=f"{light_label}: %{{y:.1f}}%<extra></extra>",
            )
        )

    fig.update_layout(
        title="Action Mix: how often does the drone move, wait, and light up?",
        template=_TEMPLATE,
        height=320,
        barmode="stack",
        xaxis_title="action",
        yaxis=dict(title="% of decisions", ticksuffix="%", range=[0, 100]),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=60, l=60, r=20),
    )
    return fig


def score_progression(turn_stats: list[dict]) -> go.Figure:
    df = pd.DataFrame(turn_stats).drop_duplicates("turn").sort_values("turn")

    fig = go.Figure()
    for column, label, color in [
        ("my_score", "me", _MY_COLOR),
        ("foe_score", "opponent", _FOE_COLOR),
    ]:
        fig.add_trace(
            go.Scatter(
                x=df["turn"],
                y=df[column],
                mode="lines",
                line=dict(color=color, width=2, shape="hv"),
                name=label,
                hovertemplate=f"turn %{{x}}<br>{label}: %{{y}}<extra></extra>",
            )
        )

    fig.update_layout(
        title="Score Progression",
        template=_TEMPLATE,
        height=320,
        xaxis_title="turn",
        yaxis_title="score",
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=60, b=40, l=60, r=20),
    )
    return fig
