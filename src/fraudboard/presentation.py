# Copyright (c) Syntropy Systems
"""Formatting helpers shared by the terminal and web views."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fraudboard.models.view import DashboardStatus

if TYPE_CHECKING:
    from fraudboard.models.metrics import Curve, PerformanceMetrics


@dataclass(frozen=True)
class StatCard:
    """A titled summary value."""

    title: str
    value: str


STATUS_STYLES: dict[DashboardStatus, str] = {
    DashboardStatus.LOADING: "dim",
    DashboardStatus.READY: "green",
    DashboardStatus.DEGRADED: "yellow",
    DashboardStatus.FAILED: "red",
}


def format_percent(value: float) -> str:
    """Format a [0, 1] ratio as a percentage with one decimal."""
    return f"{value * 100:.1f}%"


def stat_cards(metrics: PerformanceMetrics) -> list[StatCard]:
    """Build the four summary cards."""
    return [
        StatCard("Optimal Threshold", f"{metrics.best_threshold:.2f}"),
        StatCard("Fraud Recall", format_percent(metrics.recall)),
        StatCard("Fraud Precision", format_percent(metrics.precision)),
        StatCard("Fraud F1-Score", f"{metrics.f1_score:.2f}"),
    ]


def curve_polyline(curve: Curve, width: float = 600, height: float = 300) -> str:
    """Map a curve onto SVG polyline points.

    Recall runs along x, precision along y; y is flipped so that precision
    1.0 is at the top.
    """
    return " ".join(
        f"{point.recall * width:.1f},{(1 - point.precision) * height:.1f}"
        for point in curve
    )


def curve_area(curve: Curve, width: float = 600, height: float = 300) -> str:
    """Polygon points for the shaded area under the curve."""
    if not curve:
        return ""
    first = curve[0].recall * width
    last = curve[-1].recall * width
    return f"{first:.1f},{height:.1f} {curve_polyline(curve, width, height)} {last:.1f},{height:.1f}"


def sample_points(curve: Curve, limit: int) -> Curve:
    """Pick at most limit evenly spaced points, always keeping both ends."""
    if len(curve) <= limit:
        return curve
    if limit < 2:  # noqa: PLR2004
        return curve[:max(limit, 0)]
    step = (len(curve) - 1) / (limit - 1)
    return tuple(curve[round(i * step)] for i in range(limit))
