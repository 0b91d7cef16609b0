"""Chart series shaping and Chart.js configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import json

import pandas as pd

from healthdata.models import DailyCheckin

PALETTE = ["#06b6d4", "#f59e42", "#ef4444", "#8b5cf6", "#10b981"]


@dataclass(frozen=True)
class ChartSeries:
    """Labels plus named value series; a None value is a gap in the line."""

    title: str
    labels: List[str] = field(default_factory=list)
    datasets: List[Tuple[str, List[Optional[float]]]] = field(default_factory=list)


def gap_values(values: Sequence[Optional[float]]) -> List[Optional[float]]:
    """Shape already-normalized values for Chart.js: NaN and None both become None (a gap)."""
    s = pd.Series(list(values), dtype="float64")
    return s.astype(object).where(s.notna(), None).tolist()


def build_weight_series(checkins: Sequence[DailyCheckin]) -> ChartSeries:
    return ChartSeries(
        title="Weight & Body Fat",
        labels=[c.date for c in checkins],
        datasets=[
            ("Weight (kg)", gap_values([c.weight_kg for c in checkins])),
            ("Body Fat (%)", gap_values([c.body_fat_pct for c in checkins])),
        ],
    )


def build_hr_series(checkins: Sequence[DailyCheckin]) -> ChartSeries:
    return ChartSeries(
        title="Heart Rate",
        labels=[c.date for c in checkins],
        datasets=[
            ("Resting HR", gap_values([c.resting_hr for c in checkins])),
            ("Zone 2 Walk HR", gap_values([c.zone2_walk_hr for c in checkins])),
        ],
    )


def build_chart_datasets(series: ChartSeries, palette: List[str] = PALETTE):
    datasets = []
    for idx, (label, data) in enumerate(series.datasets):
        datasets.append(
            {
                "label": label,
                "data": data,
                "borderColor": palette[idx % len(palette)],
                "backgroundColor": palette[idx % len(palette)],
                "tension": 0.25,
            }
        )
    return datasets


def build_chart_config(series: ChartSeries, palette: List[str] = PALETTE):
    return {
        "type": "line",
        "data": {"labels": list(series.labels), "datasets": build_chart_datasets(series, palette)},
        "options": {
            "responsive": True,
            "plugins": {
                "legend": {"position": "bottom"},
                "tooltip": {"mode": "index", "intersect": False},
            },
            "interaction": {"mode": "index", "intersect": False},
            "scales": {"y": {"beginAtZero": False}},
        },
    }


def chart_config_json(series: ChartSeries, palette: List[str] = PALETTE) -> str:
    # allow_nan=False: gaps are None, which serializes as null
    return json.dumps(build_chart_config(series, palette), allow_nan=False)


__all__ = [
    "ChartSeries",
    "gap_values",
    "build_weight_series",
    "build_hr_series",
    "build_chart_datasets",
    "build_chart_config",
    "chart_config_json",
]
