"""
Record ordering for a loaded document.

Dates are compared as plain strings. ISO-8601 dates sort lexically in
chronological order, so no date parsing happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from healthdata.models import BloodTest, DailyCheckin, HealthDocument, Workout


def _by_date(records: Iterable, descending: bool):
    # sorted() is stable in both directions, so equal dates keep input order
    return tuple(sorted(records, key=lambda r: r.date, reverse=descending))


def sort_checkins(checkins: Iterable[DailyCheckin]) -> Tuple[DailyCheckin, ...]:
    return _by_date(checkins, descending=False)


def sort_workouts(workouts: Iterable[Workout]) -> Tuple[Workout, ...]:
    return _by_date(workouts, descending=True)


def sort_blood_tests(tests: Iterable[BloodTest]) -> Tuple[BloodTest, ...]:
    return _by_date(tests, descending=True)


@dataclass(frozen=True)
class SortedRecords:
    checkins: Tuple[DailyCheckin, ...]
    workouts: Tuple[Workout, ...]
    blood_tests: Tuple[BloodTest, ...]


def normalize_document(document: HealthDocument) -> SortedRecords:
    return SortedRecords(
        checkins=sort_checkins(document.daily_checkins),
        workouts=sort_workouts(document.workouts),
        blood_tests=sort_blood_tests(document.blood_tests),
    )


__all__ = [
    "SortedRecords",
    "normalize_document",
    "sort_checkins",
    "sort_workouts",
    "sort_blood_tests",
]
