# Copyright (c) Syntropy Systems
"""Pydantic models for classifier evaluation results."""

from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator, Field, model_validator
from typing_extensions import Self, TypeAlias

from .base import FrozenModel


def _require_number(value: object) -> object:
    # bool is an int subclass; JSON true/false must not pass as 1.0/0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"expected a number, got {type(value).__name__}"
        raise ValueError(msg)  # noqa: TRY004
    return value


UnitInterval: TypeAlias = Annotated[
    float,
    BeforeValidator(_require_number),
    Field(ge=0.0, le=1.0),
]


class PerformanceMetrics(FrozenModel):
    """Summary statistics at the model's chosen decision threshold."""

    best_threshold: UnitInterval
    recall: UnitInterval
    precision: UnitInterval
    f1_score: UnitInterval


class RawCurveData(FrozenModel):
    """Precision-recall curve as two index-aligned sequences.

    Equal length is not enforced here; see CurveDocument.
    """

    recall: tuple[UnitInterval, ...]
    precision: tuple[UnitInterval, ...]


class CurveDocument(FrozenModel):
    """Curve artifact as stored on disk or served over HTTP."""

    recall: list[UnitInterval]
    precision: list[UnitInterval]

    @model_validator(mode="after")
    def _check_lengths(self) -> Self:
        if len(self.recall) != len(self.precision):
            msg = (
                f"length mismatch: recall has {len(self.recall)} values, "
                f"precision has {len(self.precision)}"
            )
            raise ValueError(msg)
        return self

    def to_raw(self) -> RawCurveData:
        """Convert to the immutable in-memory representation."""
        return RawCurveData(recall=tuple(self.recall), precision=tuple(self.precision))


class CurvePoint(FrozenModel):
    """A single (recall, precision) point on the curve."""

    recall: float
    precision: float


# Sorted by recall, ascending
Curve: TypeAlias = tuple[CurvePoint, ...]
