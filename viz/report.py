"""Assembles chart figures into a single self-contained HTML benchmark report."""

from __future__ import annotations

import datetime

import plotly.io as pio

from viz.charts import action_mix, latency_by_turn, latency_percentile_bars, score_progression

_CSS = """
* { box-sizing: border-box; margin: 0; padding: 0; }
body {
    background: #0e0e0e;
    color: #e0e0e0;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
    padding: 2.5rem 3rem;
    max-width: 1400px;
    margin: 0 auto;
}
header { margin-bottom: 2.5rem; }
h1 { font-size: 1.5rem; font-weight: 600; letter-spacing: -0.02em; }
.meta { color: #666; font-size: 0.85rem; margin-top: 0.4rem; }
.meta span { margin-right: 1.5rem; }
h2 {
    font-size: 0.75rem;
    font-weight: 600;
    letter-spacing: 0.1em;
    text-transform: uppercase;
    color: #555;
    margin: 2.5rem 0 1rem;
    padding-bottom: 0.5rem;
    border-bottom: 1px solid #1e1e1e;
}
.charts { display: flex; flex-wrap: wrap; gap: 1rem; }
.chart { flex: 1 1 560px; min-width: 0; background: #141414; border-radius: 8px; overflow: hidden; }
.chart-full { flex: 1 1 100%; background: #141414; border-radius: 8px; overflow: hidden; }
.empty { color: #555; font-style: italic; }
"""

_HTML_BASE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Seabed: {agent} on {transcript}</title>
  <style>{css}</style>
</head>
<body>
  <header>
    <h1>Seabed Replay Benchmark</h1>
    <p class="meta">
      <span>{agent}</span>
      <span>{transcript}</span>
      <span>{n_turns} turns</span>
      <span>avg {avg_ms} ms · max {max_ms} ms</span>
      <span>{date}</span>
    </p>
  </header>
  {body}
</body>
</html>
"""

_SECTIONS = """\
  <h2>Turn Budget</h2>
  <div class="charts">
    <div class="chart-full">{latency_by_turn}</div>
    <div class="chart">{latency_percentile_bars}</div>
    <div class="chart">{action_mix}</div>
  </div>

  <h2>Game</h2>
  <div class="charts">
    <div class="chart-full">{score_progression}</div>
  </div>
"""


def _fig_div(fig, *, first: bool) -> str:
    return pio.to_html(
        fig,
        full_html=False,
        include_plotlyjs=first,
        config={"displayModeBar": False, "responsive": True},
    )


def _ms(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.1f}"


def build_report(data: dict) -> str:
    s = data["summary"]
    ts = data["turn_stats"]

    if ts:
        figs = [
            latency_by_turn(ts, s.get("budget_ms")),
            latency_percentile_bars(ts),
            action_mix(ts),
            score_progression(ts),
        ]
        divs = [_fig_div(fig, first=(i == 0)) for i, fig in enumerate(figs)]
        body = _SECTIONS.format(
            latency_by_turn=divs[0],
            latency_percentile_bars=divs[1],
            action_mix=divs[2],
            score_progression=divs[3],
        )
    else:
        body = '<p class="empty">No decisions recorded.</p>'

    date = datetime.datetime.now().strftime("%Y-%m-%d %H:%M")

    return _HTML_BASE.format(
        css=_CSS,
        agent=s["agent"],
        transcript=s["transcript"],
        n_turns=s["n_turns"],
        avg_ms=_ms(s.get("avg_decision_ms")),
        max_ms=_ms(s.get("max_decision_ms")),
        date=date,
        body=body,
    )
