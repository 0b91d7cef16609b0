"""
Record models for the health data document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from utils import num_or_none, text_or_none


@dataclass(frozen=True)
class DailyCheckin:
    """One day of body metrics. ``date`` is an ISO date string."""

    date: str = ""
    weight_kg: Optional[float] = None
    body_fat_pct: Optional[float] = None
    resting_hr: Optional[float] = None
    zone2_walk_hr: Optional[float] = None
    steps: Optional[float] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyCheckin":
        return cls(
            date=data["date"],
            weight_kg=num_or_none(data.get("weightKg")),
            body_fat_pct=num_or_none(data.get("bodyFatPct")),
            resting_hr=num_or_none(data.get("restingHr")),
            zone2_walk_hr=num_or_none(data.get("zone2WalkHr")),
            steps=num_or_none(data.get("steps")),
            notes=text_or_none(data.get("notes")),
        )


@dataclass(frozen=True)
class Workout:
    date: str = ""
    type: Optional[str] = None
    duration_min: Optional[float] = None
    calories: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workout":
        return cls(
            date=data["date"],
            type=text_or_none(data.get("type")),
            duration_min=num_or_none(data.get("durationMin")),
            calories=num_or_none(data.get("calories")),
        )


@dataclass(frozen=True)
class BloodTest:
    """A single lab result. Either range bound may be absent."""

    date: str = ""
    name: Optional[str] = None
    value: Optional[float] = None
    unit: Optional[str] = None
    range_low: Optional[float] = None
    range_high: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BloodTest":
        return cls(
            date=data["date"],
            name=text_or_none(data.get("name")),
            value=num_or_none(data.get("value")),
            unit=text_or_none(data.get("unit")),
            range_low=num_or_none(data.get("rangeLow")),
            range_high=num_or_none(data.get("rangeHigh")),
        )


@dataclass(frozen=True)
class Baseline:
    date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Baseline":
        return cls(date=text_or_none(data.get("date")))


@dataclass(frozen=True)
class HealthDocument:
    """Immutable snapshot of one loaded document."""

    daily_checkins: Tuple[DailyCheckin, ...] = field(default_factory=tuple)
    workouts: Tuple[Workout, ...] = field(default_factory=tuple)
    blood_tests: Tuple[BloodTest, ...] = field(default_factory=tuple)
    baseline: Optional[Baseline] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HealthDocument":
        """Build from a payload already checked by ``validate_document``.

        A ``baseline`` that is not an object is ignored.
        """
        baseline = data.get("baseline")
        return cls(
            daily_checkins=tuple(DailyCheckin.from_dict(d) for d in data.get("dailyCheckins") or []),
            workouts=tuple(Workout.from_dict(w) for w in data.get("workouts") or []),
            blood_tests=tuple(BloodTest.from_dict(t) for t in data.get("bloodTests") or []),
            baseline=Baseline.from_dict(baseline) if isinstance(baseline, dict) else None,
        )

    def counts(self) -> Dict[str, int]:
        return {
            "dailyCheckins": len(self.daily_checkins),
            "workouts": len(self.workouts),
            "bloodTests": len(self.blood_tests),
        }
