"""Everything the presenters need for one build, derived in a single pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from healthdata.config import DashboardConfig
from healthdata.models import HealthDocument

from .chart_config import ChartSeries, build_hr_series, build_weight_series
from .normalize import normalize_document
from .summary import KpiSnapshot, build_kpi_snapshot, compose_summary
from .tables import BloodRow, WorkoutRow, build_blood_rows, build_workout_rows


@dataclass(frozen=True)
class DashboardView:
    kpis: KpiSnapshot
    weight_chart: ChartSeries
    hr_chart: ChartSeries
    workouts: List[WorkoutRow]
    blood_tests: List[BloodRow]
    summary: str


def derive_dashboard(
    document: HealthDocument, config: Optional[DashboardConfig] = None
) -> DashboardView:
    config = config or DashboardConfig()
    records = normalize_document(document)
    return DashboardView(
        kpis=build_kpi_snapshot(records.checkins),
        weight_chart=build_weight_series(records.checkins),
        hr_chart=build_hr_series(records.checkins),
        workouts=build_workout_rows(records.workouts, config.workout_limit),
        blood_tests=build_blood_rows(records.blood_tests, config.blood_limit),
        summary=compose_summary(
            document, records.checkins, records.blood_tests, config.lab_flag_limit
        ),
    )


__all__ = ["DashboardView", "derive_dashboard"]
