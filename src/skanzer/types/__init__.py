"""Shared type aliases for Skanzer."""

from .common import Category, LineContext, RiskLevel, ScanStatus, Severity
from .config import ThresholdConfig

__all__ = [
    "Category",
    "LineContext",
    "RiskLevel",
    "ScanStatus",
    "Severity",
    "ThresholdConfig",
]
