"""KPI snapshot, per-metric deltas and the doctor summary narrative."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from healthdata.models import BloodTest, DailyCheckin, HealthDocument
from utils import EM_DASH, num_or_none, value_or_dash

from .constants import LAB_FLAG_LIMIT
from .labs import lab_flags_text

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class KpiSnapshot:
    weight: str
    body_fat: str
    resting_hr: str
    steps: str


def latest(checkins: Sequence[DailyCheckin]) -> DailyCheckin:
    return checkins[-1] if checkins else DailyCheckin()


def first(checkins: Sequence[DailyCheckin]) -> DailyCheckin:
    return checkins[0] if checkins else DailyCheckin()


def build_kpi_snapshot(checkins: Sequence[DailyCheckin]) -> KpiSnapshot:
    """Last-value-wins snapshot of the newest check-in; missing values read '--'."""
    last = latest(checkins)
    return KpiSnapshot(
        weight=value_or_dash(last.weight_kg),
        body_fat=value_or_dash(last.body_fat_pct),
        resting_hr=value_or_dash(last.resting_hr),
        steps=value_or_dash(last.steps),
    )


def delta(a, b) -> Optional[float]:
    na = num_or_none(a)
    nb = num_or_none(b)
    if na is None or nb is None:
        return None
    return na - nb


def format_delta(n: Optional[float]) -> str:
    """Format a delta to at most 2 decimals with an explicit '+' when positive.

    Rounding is half-up (away from zero) on the shortest decimal form of the
    float, so 1.005 formats as '+1.01'. Zero, including values that round to
    zero, formats as '0'.
    """
    if n is None:
        return EM_DASH
    d = Decimal(repr(float(n)))
    ctx = Context(prec=max(28, d.adjusted() + 4), rounding=ROUND_HALF_UP)
    rounded = d.quantize(CENTS, context=ctx)
    if rounded == 0:
        return "0"
    text = format(rounded.normalize(context=ctx), "f")
    return f"+{text}" if rounded > 0 else text


def compose_summary(
    document: HealthDocument,
    checkins: Sequence[DailyCheckin],
    blood_tests: Sequence[BloodTest],
    flag_limit: int = LAB_FLAG_LIMIT,
) -> str:
    """Build the narrative paragraph.

    ``checkins`` must be sorted ascending and ``blood_tests`` descending by
    date. Flags are taken from the whole blood test list, not the table slice.
    """
    last = latest(checkins)
    start = first(checkins)
    baseline_date = (document.baseline.date if document.baseline else None) or start.date or EM_DASH

    weight_delta = delta(last.weight_kg, start.weight_kg)
    bf_delta = delta(last.body_fat_pct, start.body_fat_pct)
    rhr_delta = delta(last.resting_hr, start.resting_hr)

    sentences = [
        f"Baseline date: {baseline_date}.",
        f"Latest check-in: {last.date or EM_DASH}.",
        f"Weight: {value_or_dash(last.weight_kg)} kg ({format_delta(weight_delta)} since first entry).",
        f"Body fat: {value_or_dash(last.body_fat_pct)}% ({format_delta(bf_delta)} since first entry).",
        f"Resting HR: {value_or_dash(last.resting_hr)} ({format_delta(rhr_delta)} since first entry).",
        f"Notes: {last.notes or EM_DASH}",
        f"Lab flags: {lab_flags_text(blood_tests, flag_limit)}",
    ]
    return " ".join(sentences)


__all__ = [
    "KpiSnapshot",
    "build_kpi_snapshot",
    "delta",
    "format_delta",
    "compose_summary",
]
