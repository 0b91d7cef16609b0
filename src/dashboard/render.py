"""
HTML rendering for KPI cards, tables, the doctor summary and the error panel.
"""

import html
from typing import List

from .constants import NO_BLOOD_TEXT, NO_WORKOUTS_TEXT
from .summary import KpiSnapshot
from .tables import BloodRow, WorkoutRow

TH = '<th class="px-4 py-3 text-left text-sm font-semibold text-slate-200 bg-slate-900/70">{}</th>'
TD = '<td class="border-t border-slate-700/50 px-4 py-3 text-slate-300">{}</td>'
TD_STATUS = '<td class="border-t border-slate-700/50 px-4 py-3 font-semibold {}">{}</td>'
TD_EMPTY_ROW = '<tr><td colspan="{}" class="px-4 py-5 text-center text-slate-400">{}</td></tr>'


def esc(value) -> str:
    return html.escape(str(value))


def render_kpis(kpis: KpiSnapshot) -> str:
    cards = [
        ("weight", "Weight (kg)", kpis.weight),
        ("bodyFat", "Body Fat (%)", kpis.body_fat),
        ("rhr", "Resting HR", kpis.resting_hr),
        ("steps", "Steps", kpis.steps),
    ]
    parts = ['<section class="grid grid-cols-2 md:grid-cols-4 gap-4 mb-8">']
    for element_id, label, value in cards:
        parts.append(
            '<div class="glass-card rounded-xl p-5 text-center">'
            f'<div class="text-sm text-slate-400">{esc(label)}</div>'
            f'<div id="{element_id}" class="text-3xl font-bold text-cyan-400 mt-2">{esc(value)}</div>'
            "</div>"
        )
    parts.append("</section>")
    return "".join(parts)


def render_chart_card(canvas_id: str, title: str) -> str:
    return (
        '<div class="chart-container mb-8">'
        f'<h2 class="text-2xl font-bold text-center text-cyan-400 mb-6">{esc(title)}</h2>'
        f'<canvas id="{esc(canvas_id)}" height="150"></canvas>'
        "</div>"
    )


def _table(title: str, table_id: str, headers: List[str], body_rows: List[str]) -> str:
    head = "".join(TH.format(esc(h)) for h in headers)
    return (
        '<section class="mb-10">'
        f'<h2 class="text-2xl font-bold text-cyan-400 mb-4">{esc(title)}</h2>'
        '<div class="overflow-x-auto">'
        '<table class="min-w-full glass-card rounded-xl shadow-2xl border border-slate-600 overflow-hidden">'
        f"<thead><tr>{head}</tr></thead>"
        f'<tbody id="{table_id}">' + "".join(body_rows) + "</tbody></table></div></section>"
    )


def render_workout_table(rows: List[WorkoutRow]) -> str:
    headers = ["Date", "Type", "Duration (min)", "Calories"]
    if not rows:
        body = [TD_EMPTY_ROW.format(len(headers), esc(NO_WORKOUTS_TEXT))]
    else:
        body = [
            "<tr>"
            + TD.format(esc(r.date))
            + TD.format(esc(r.type))
            + TD.format(esc(r.duration))
            + TD.format(esc(r.calories))
            + "</tr>"
            for r in rows
        ]
    return _table("Recent Workouts", "workoutTable", headers, body)


def render_blood_table(rows: List[BloodRow]) -> str:
    headers = ["Date", "Test", "Value", "Range", "Status"]
    if not rows:
        body = [TD_EMPTY_ROW.format(len(headers), esc(NO_BLOOD_TEXT))]
    else:
        body = [
            "<tr>"
            + TD.format(esc(r.date))
            + TD.format(esc(r.name))
            + TD.format(esc(r.value_text))
            + TD.format(esc(r.range_text))
            + TD_STATUS.format(esc(r.status_class), esc(r.status))
            + "</tr>"
            for r in rows
        ]
    return _table("Blood Reports", "bloodTable", headers, body)


def render_summary(text: str) -> str:
    return (
        '<section class="glass-card rounded-xl p-6 mb-10">'
        '<h2 class="text-2xl font-bold text-cyan-400 mb-4">Doctor Summary</h2>'
        f'<p id="doctorSummary" class="text-slate-200 leading-relaxed">{esc(text)}</p>'
        "</section>"
    )


LOAD_ERROR_CAUSES = [
    "health_data.json is missing or not in the site root",
    "File name case mismatch (must be exactly health_data.json)",
    "JSON has a syntax error (missing comma, quote, bracket)",
    "The site has not been deployed yet",
]


def render_error_panel(error: Exception, source_name: str = "health_data.json") -> str:
    causes = "".join(
        f"<li>{esc(c.replace('health_data.json', source_name))}</li>" for c in LOAD_ERROR_CAUSES
    )
    return (
        '<section id="loadError" class="card glass-card rounded-xl p-6 mb-10 border border-red-500/40">'
        '<h2 class="text-2xl font-bold text-red-400 mb-4">Data Load Error</h2>'
        f'<p class="text-slate-200">Could not load <strong>{esc(source_name)}</strong>. Common causes:</p>'
        f'<ul class="list-disc mt-3 pl-5 text-slate-300">{causes}</ul>'
        f'<p class="mt-3 text-slate-400">Technical details: {esc(error)}</p>'
        "</section>"
    )


__all__ = [
    "render_kpis",
    "render_chart_card",
    "render_workout_table",
    "render_blood_table",
    "render_summary",
    "render_error_panel",
]
