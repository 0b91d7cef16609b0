import pytest

from dashboard.labs import (
    LabStatus,
    classify,
    flagged_tests,
    lab_flags_text,
    status_class,
)
from dashboard.constants import NO_FLAGS_TEXT
from healthdata.models import BloodTest


@pytest.mark.parametrize(
    "value, expected",
    [
        (69.9, LabStatus.LOW),
        (70, LabStatus.NORMAL),
        (85, LabStatus.NORMAL),
        (100, LabStatus.NORMAL),
        (100.1, LabStatus.HIGH),
    ],
)
def test_classify_within_two_sided_range(value, expected):
    assert classify(value, 70, 100) is expected


def test_missing_low_bound_never_yields_low():
    assert classify(-50, None, 100) is LabStatus.NORMAL
    assert classify(150, None, 100) is LabStatus.HIGH


def test_missing_high_bound_never_yields_high():
    assert classify(500, 70, None) is LabStatus.NORMAL
    assert classify(10, 70, None) is LabStatus.LOW


def test_unknown_when_value_or_both_bounds_missing():
    assert classify(None, 70, 100) is LabStatus.UNKNOWN
    assert classify("pending", 70, 100) is LabStatus.UNKNOWN
    assert classify(90, None, None) is LabStatus.UNKNOWN
    assert classify(float("nan"), None, None) is LabStatus.UNKNOWN


def test_raw_string_inputs_are_coerced():
    assert classify("110", "70", "100") is LabStatus.HIGH
    assert classify(90, "", "100") is LabStatus.NORMAL


def test_status_class_mapping():
    assert status_class(LabStatus.NORMAL) == "status-normal"
    assert status_class(LabStatus.HIGH) == "status-high"
    assert status_class(LabStatus.LOW) == "status-low"
    assert status_class(LabStatus.UNKNOWN) == ""
    assert str(LabStatus.HIGH) == "High"


def _test(date, name, value, low=70, high=100, unit="mg/dL"):
    return BloodTest(date=date, name=name, value=value, unit=unit, range_low=low, range_high=high)


def test_flags_keep_order_and_stop_at_limit():
    tests = [_test(f"2024-01-{d:02d}", f"T{d}", 200) for d in range(20, 10, -1)]
    tests.insert(1, _test("2024-01-19", "Fine", 80))
    flagged = flagged_tests(tests, limit=5)
    assert [t.name for t, _ in flagged] == ["T20", "T19", "T18", "T17", "T16"]
    assert all(s is LabStatus.HIGH for _, s in flagged)


def test_flags_text_format_and_fallback():
    tests = [
        _test("2024-02-01", "Glucose", 110.0),
        _test("2024-02-01", "Ferritin", 12, low=15, high=None, unit=None),
        _test("2024-02-01", "HDL", 85),
    ]
    assert lab_flags_text(tests) == "Glucose: 110 mg/dL (High); Ferritin: 12 (Low)"
    assert lab_flags_text([_test("2024-02-01", "HDL", 85)]) == NO_FLAGS_TEXT
    assert lab_flags_text([]) == NO_FLAGS_TEXT
