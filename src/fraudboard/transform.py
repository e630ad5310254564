# Copyright (c) Syntropy Systems
"""Assemble raw curve arrays into a chart-ready curve."""
from __future__ import annotations

from typing import TYPE_CHECKING

from fraudboard.errors import TransformError, TransformErrorKind
from fraudboard.models.metrics import CurvePoint

if TYPE_CHECKING:
    from fraudboard.models.metrics import Curve, RawCurveData


def assemble(raw: RawCurveData) -> Curve:
    """Pair recall and precision values and sort the points by recall.

    The sort is stable, so points with equal recall keep their input order.
    No points are added or removed.

    Args:
        raw: Index-aligned recall and precision sequences

    Returns:
        Curve sorted ascending by recall

    Raises:
        TransformError: If the sequences differ in length or are empty

    """
    if len(raw.recall) != len(raw.precision):
        msg = (
            f"Curve length mismatch: {len(raw.recall)} recall values "
            f"but {len(raw.precision)} precision values"
        )
        raise TransformError(TransformErrorKind.LENGTH_MISMATCH, msg)

    if not raw.recall:
        msg = "Curve has no points"
        raise TransformError(TransformErrorKind.EMPTY, msg)

    points = [
        CurvePoint(recall=recall, precision=precision)
        for recall, precision in zip(raw.recall, raw.precision)
    ]
    return tuple(sorted(points, key=lambda point: point.recall))
