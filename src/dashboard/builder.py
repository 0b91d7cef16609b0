"""Single-file HTML dashboard builder.

``DashboardBuilder.build()`` returns the complete page so callers can write it
wherever needed. Chart handles live in a ``RenderSession`` owned by the
builder; rebuilding disposes the previous handle for a canvas before a new
one is attached.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from healthdata.config import DashboardConfig
from healthdata.loader import source_name
from healthdata.models import HealthDocument

from .chart_config import ChartSeries, chart_config_json
from .constants import HR_CHART_ID, WEIGHT_CHART_ID
from .derive import DashboardView, derive_dashboard
from .render import (
    esc,
    render_blood_table,
    render_chart_card,
    render_error_panel,
    render_kpis,
    render_summary,
    render_workout_table,
)

LOGGER = logging.getLogger(__name__)


class ChartHandle:
    """One chart bound to a canvas. Disposed handles emit no script."""

    def __init__(self, canvas_id: str, series: ChartSeries):
        self.canvas_id = canvas_id
        self.series = series
        self.disposed = False

    def dispose(self) -> None:
        self.disposed = True

    def script(self) -> str:
        if self.disposed:
            return ""
        # "<" is escaped so labels cannot close the script tag
        config = chart_config_json(self.series).replace("<", "\\u003c")
        return (
            "(function(){"
            f"const el=document.getElementById('{self.canvas_id}'); if(!el) return;"
            " const prev=Chart.getChart(el); if(prev) prev.destroy();"
            f" new Chart(el, {config});"
            "})();"
        )


class RenderSession:
    """Holds the live chart handles of a dashboard, one per canvas."""

    def __init__(self):
        self.charts: Dict[str, ChartHandle] = {}

    def attach_chart(self, canvas_id: str, series: ChartSeries) -> ChartHandle:
        previous = self.charts.pop(canvas_id, None)
        if previous is not None:
            previous.dispose()
        handle = ChartHandle(canvas_id, series)
        self.charts[canvas_id] = handle
        return handle

    def scripts(self) -> str:
        return "\n".join(h.script() for h in self.charts.values() if not h.disposed)

    def close(self) -> None:
        for handle in self.charts.values():
            handle.dispose()
        self.charts.clear()

    def __enter__(self) -> "RenderSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DashboardBuilder:
    STYLES = [
        "    body { font-family: 'Inter', sans-serif; background: linear-gradient(135deg, #0f172a 0%, #1e293b 100%); }",
        "    .main-content { width: 90vw; max-width: 1400px; margin: 0 auto; }",
        "    @media (max-width: 900px) { .main-content { width: 98vw; } }",
        "    canvas { background-color: rgba(15, 23, 42, 0.95) !important; border-radius: 8px; }",
        "    .glass-card { background: rgba(15, 23, 42, 0.95) !important; backdrop-filter: blur(16px); border: 1px solid rgba(51, 65, 85, 0.4); }",
        "    .chart-container { background: rgba(15, 23, 42, 0.95) !important; border-radius: 16px; padding: 24px; border: 1px solid rgba(51, 65, 85, 0.3); }",
        "    .gradient-text { background: linear-gradient(135deg, #06b6d4 0%, #3b82f6 50%, #8b5cf6 100%); -webkit-background-clip: text; -webkit-text-fill-color: transparent; }",
        "    .status-normal { color: #34d399; }",
        "    .status-high { color: #f87171; }",
        "    .status-low { color: #fbbf24; }",
        "    * { box-sizing: border-box; }",
        "    html, body { background: #0f172a !important; }",
        "    tbody tr:hover { background: rgba(30, 41, 59, 0.8) !important; }",
        "    th, td { border-color: rgba(51, 65, 85, 0.4) !important; }",
    ]

    def __init__(self, config: Optional[DashboardConfig] = None):
        self.config = config or DashboardConfig()
        self.session = RenderSession()

    def _head(self) -> List[str]:
        return [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"  <title>{esc(self.config.title)}</title>",
            '  <script src="https://cdn.tailwindcss.com"></script>',
            '  <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>',
            '  <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap" rel="stylesheet">',
            "  <style>",
            *self.STYLES,
            "  </style>",
            "</head>",
            '<body class="bg-slate-900 font-inter min-h-screen">',
            '<div class="main-content px-4 py-8">',
            f'<h1 class="text-5xl font-extrabold text-center gradient-text mb-12 tracking-tight">{esc(self.config.title)}</h1>',
        ]

    def render_view(self, view: DashboardView) -> str:
        self.session.attach_chart(WEIGHT_CHART_ID, view.weight_chart)
        self.session.attach_chart(HR_CHART_ID, view.hr_chart)
        html_parts = self._head()
        html_parts += [
            render_kpis(view.kpis),
            render_chart_card(WEIGHT_CHART_ID, view.weight_chart.title),
            render_chart_card(HR_CHART_ID, view.hr_chart.title),
            render_workout_table(view.workouts),
            render_blood_table(view.blood_tests),
            render_summary(view.summary),
            "</div>",
            f"<script>\n{self.session.scripts()}\n</script>",
            "</body></html>",
        ]
        return "\n".join(html_parts)

    def build(self, document: HealthDocument) -> str:
        view = derive_dashboard(document, self.config)
        LOGGER.info(
            f"Rendering dashboard: {len(view.weight_chart.labels)} check-ins, "
            f"{len(view.workouts)} workouts, {len(view.blood_tests)} blood tests"
        )
        return self.render_view(view)

    def build_error_page(self, error: Exception) -> str:
        # no partial dashboard: drop any charts from an earlier build
        self.session.close()
        html_parts = self._head()
        html_parts += [
            render_error_panel(error, source_name(self.config.data_source)),
            "</div>",
            "</body></html>",
        ]
        return "\n".join(html_parts)


__all__ = ["ChartHandle", "RenderSession", "DashboardBuilder"]
