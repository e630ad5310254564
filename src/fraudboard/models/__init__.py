# Copyright (c) Syntropy Systems
"""Pydantic models for fraudboard."""

from fraudboard.models.metrics import (
    Curve,
    CurveDocument,
    CurvePoint,
    PerformanceMetrics,
    RawCurveData,
)
from fraudboard.models.view import DashboardStatus, DashboardViewModel

__all__ = [
    "Curve",
    "CurveDocument",
    "CurvePoint",
    "DashboardStatus",
    "DashboardViewModel",
    "PerformanceMetrics",
    "RawCurveData",
]
