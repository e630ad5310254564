# Copyright (c) Syntropy Systems
"""Synthetic results shown when real artifacts are unavailable."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from fraudboard.models.metrics import Curve, CurvePoint, PerformanceMetrics

# (recall, precision), ascending by recall
_SYNTHETIC_POINTS = (
    (0.0, 1.0),
    (0.1, 0.97),
    (0.2, 0.94),
    (0.3, 0.9),
    (0.4, 0.85),
    (0.5, 0.78),
    (0.6, 0.69),
    (0.7, 0.58),
    (0.8, 0.45),
    (0.9, 0.31),
    (1.0, 0.12),
)


@dataclass(frozen=True)
class SyntheticResult:
    """Placeholder metrics and curve."""

    metrics: PerformanceMetrics
    curve: Curve


FallbackProvider = Callable[[], SyntheticResult]


def synthetic_result() -> SyntheticResult:
    """Return the fixed placeholder dataset.

    Never fails and performs no I/O. Every call builds equal values from the
    same constants.
    """
    metrics = PerformanceMetrics(
        best_threshold=0.5,
        recall=0.5,
        precision=0.78,
        f1_score=0.61,
    )
    curve = tuple(
        CurvePoint(recall=recall, precision=precision)
        for recall, precision in _SYNTHETIC_POINTS
    )
    return SyntheticResult(metrics=metrics, curve=curve)
