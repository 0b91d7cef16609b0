"""Validation for the health_data.json payload."""

from __future__ import annotations
from typing import Any, Dict

from .errors import DocumentValidationError

COLLECTION_KEYS = ("dailyCheckins", "workouts", "bloodTests")


def _validate_collection(key: str, entries: Any) -> None:
    if not isinstance(entries, list):
        raise DocumentValidationError(f"'{key}' must be a list")
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise DocumentValidationError(f"{key}[{idx}] is not an object")
        # records are ordered by their date string, so it has to be one
        if not isinstance(entry.get("date"), str):
            raise DocumentValidationError(f"{key}[{idx}] missing 'date' string")


def validate_document(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DocumentValidationError("Root must be an object")
    for key in COLLECTION_KEYS:
        entries = data.get(key)
        # any falsy value (null, false, 0, "") reads as an empty collection
        if not entries:
            continue
        _validate_collection(key, entries)
    return data
