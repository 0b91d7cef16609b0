"""Health data document: models, loading & validation."""

from .config import DashboardConfig  # noqa: F401
from .errors import DocumentValidationError, LoadError  # noqa: F401
from .loader import load_document, parse_document  # noqa: F401
from .models import Baseline, BloodTest, DailyCheckin, HealthDocument, Workout  # noqa: F401
from .validator import validate_document  # noqa: F401

__all__ = [
    "DashboardConfig",
    "LoadError",
    "DocumentValidationError",
    "load_document",
    "parse_document",
    "validate_document",
    "DailyCheckin",
    "Workout",
    "BloodTest",
    "Baseline",
    "HealthDocument",
]
