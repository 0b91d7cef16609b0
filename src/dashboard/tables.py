"""Row derivation for the workout and blood report tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from healthdata.models import BloodTest, Workout
from utils import SHORT_DASH, format_number, value_or_dash

from .constants import BLOOD_LIMIT, WORKOUT_LIMIT
from .labs import LabStatus, classify_test, status_class


@dataclass(frozen=True)
class WorkoutRow:
    date: str
    type: str
    duration: str
    calories: str


@dataclass(frozen=True)
class BloodRow:
    date: str
    name: str
    value_text: str
    range_text: str
    status: LabStatus
    status_class: str


def _with_unit(text: str, unit) -> str:
    return f"{text} {unit or ''}".strip()


def build_workout_rows(workouts: Sequence[Workout], limit: int = WORKOUT_LIMIT) -> List[WorkoutRow]:
    """Rows for the ``limit`` most recent workouts; expects descending order."""
    return [
        WorkoutRow(
            date=w.date,
            type=w.type or SHORT_DASH,
            duration=value_or_dash(w.duration_min),
            calories=value_or_dash(w.calories),
        )
        for w in workouts[:limit]
    ]


def blood_value_text(test: BloodTest) -> str:
    if test.value is None:
        return SHORT_DASH
    return _with_unit(format_number(test.value), test.unit)


def blood_range_text(test: BloodTest) -> str:
    # shown only when both bounds are known
    if test.range_low is None or test.range_high is None:
        return SHORT_DASH
    return _with_unit(f"{format_number(test.range_low)}–{format_number(test.range_high)}", test.unit)


def build_blood_rows(tests: Sequence[BloodTest], limit: int = BLOOD_LIMIT) -> List[BloodRow]:
    rows: List[BloodRow] = []
    for t in tests[:limit]:
        status = classify_test(t)
        rows.append(
            BloodRow(
                date=t.date or SHORT_DASH,
                name=t.name or SHORT_DASH,
                value_text=blood_value_text(t),
                range_text=blood_range_text(t),
                status=status,
                status_class=status_class(status),
            )
        )
    return rows


__all__ = [
    "WorkoutRow",
    "BloodRow",
    "build_workout_rows",
    "build_blood_rows",
    "blood_value_text",
    "blood_range_text",
]
