"""Lab result classification against reference ranges."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from healthdata.models import BloodTest
from utils import format_number, num_or_none, SHORT_DASH

from .constants import LAB_FLAG_LIMIT, NO_FLAGS_TEXT


class LabStatus(str, Enum):
    NORMAL = "Normal"
    HIGH = "High"
    LOW = "Low"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


STATUS_CLASSES = {
    LabStatus.NORMAL: "status-normal",
    LabStatus.HIGH: "status-high",
    LabStatus.LOW: "status-low",
}


def classify(value, low, high) -> LabStatus:
    """Classify ``value`` against an optional ``low``/``high`` range.

    A single present bound is used on its own: with only a high bound a
    result is High or Normal, never Low (and symmetrically for a low bound).
    Non-numeric inputs count as absent.
    """
    v = num_or_none(value)
    lo = num_or_none(low)
    hi = num_or_none(high)

    if v is None or (lo is None and hi is None):
        return LabStatus.UNKNOWN
    if lo is not None and v < lo:
        return LabStatus.LOW
    if hi is not None and v > hi:
        return LabStatus.HIGH
    return LabStatus.NORMAL


def classify_test(test: BloodTest) -> LabStatus:
    return classify(test.value, test.range_low, test.range_high)


def status_class(status: LabStatus) -> str:
    return STATUS_CLASSES.get(status, "")


def flagged_tests(
    tests: Iterable[BloodTest], limit: int = LAB_FLAG_LIMIT
) -> List[Tuple[BloodTest, LabStatus]]:
    """First ``limit`` High/Low results, in the order given (most recent first)."""
    flagged: List[Tuple[BloodTest, LabStatus]] = []
    for test in tests:
        if len(flagged) >= limit:
            break
        status = classify_test(test)
        if status in (LabStatus.HIGH, LabStatus.LOW):
            flagged.append((test, status))
    return flagged


def format_flag(test: BloodTest, status: LabStatus) -> str:
    unit = f" {test.unit}" if test.unit else ""
    return f"{test.name or SHORT_DASH}: {format_number(test.value)}{unit} ({status})"


def lab_flags_text(tests: Iterable[BloodTest], limit: int = LAB_FLAG_LIMIT) -> str:
    flagged = flagged_tests(tests, limit)
    if not flagged:
        return NO_FLAGS_TEXT
    return "; ".join(format_flag(t, s) for t, s in flagged)


__all__ = [
    "LabStatus",
    "classify",
    "classify_test",
    "status_class",
    "flagged_tests",
    "format_flag",
    "lab_flags_text",
]
