"""Dashboard derivation & HTML generation."""

from .builder import DashboardBuilder, RenderSession  # noqa: F401
from .derive import DashboardView, derive_dashboard  # noqa: F401
from .labs import LabStatus, classify  # noqa: F401
from .summary import delta, format_delta  # noqa: F401

__all__ = [
    "DashboardBuilder",
    "RenderSession",
    "DashboardView",
    "derive_dashboard",
    "LabStatus",
    "classify",
    "delta",
    "format_delta",
]
