# Copyright (c) Syntropy Systems
"""View model published to the presentation layer."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import Field, model_validator
from typing_extensions import Self

from .base import FrozenModel
from .metrics import Curve, PerformanceMetrics


def utcnow() -> str:
    """Get current UTC time as ISO format string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class DashboardStatus(str, Enum):
    """Which of the four dashboard states is current."""

    LOADING = "loading"
    READY = "ready"
    DEGRADED = "degraded"
    FAILED = "failed"


_REQUIRED: dict[DashboardStatus, frozenset[str]] = {
    DashboardStatus.LOADING: frozenset(),
    DashboardStatus.READY: frozenset({"metrics", "curve"}),
    DashboardStatus.DEGRADED: frozenset({"metrics", "curve", "warning"}),
    DashboardStatus.FAILED: frozenset({"error"}),
}
_OPTIONAL_FIELDS = ("metrics", "curve", "warning", "error")


class DashboardViewModel(FrozenModel):
    """Read-only snapshot of the dashboard for one load cycle."""

    status: DashboardStatus
    metrics: PerformanceMetrics | None = None
    curve: Curve | None = None
    warning: str | None = None
    error: str | None = None
    cycle: int = 0
    generated_at: str = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def _check_fields_match_status(self) -> Self:
        required = _REQUIRED[self.status]
        for name in _OPTIONAL_FIELDS:
            present = getattr(self, name) is not None
            if name in required and not present:
                msg = f"{self.status.value} state requires '{name}'"
                raise ValueError(msg)
            if name not in required and present:
                msg = f"{self.status.value} state does not carry '{name}'"
                raise ValueError(msg)
        return self

    @classmethod
    def loading(cls, cycle: int = 0) -> Self:
        """Build a Loading view model."""
        return cls(status=DashboardStatus.LOADING, cycle=cycle)

    @classmethod
    def ready(cls, metrics: PerformanceMetrics, curve: Curve, cycle: int = 0) -> Self:
        """Build a Ready view model from real results."""
        return cls(
            status=DashboardStatus.READY,
            metrics=metrics,
            curve=curve,
            cycle=cycle,
        )

    @classmethod
    def degraded(
        cls,
        metrics: PerformanceMetrics,
        curve: Curve,
        warning: str,
        cycle: int = 0,
    ) -> Self:
        """Build a Degraded view model carrying fallback data and a warning."""
        return cls(
            status=DashboardStatus.DEGRADED,
            metrics=metrics,
            curve=curve,
            warning=warning,
            cycle=cycle,
        )

    @classmethod
    def failed(cls, error: str, cycle: int = 0) -> Self:
        """Build a Failed view model."""
        return cls(status=DashboardStatus.FAILED, error=error, cycle=cycle)

    @property
    def is_terminal(self) -> bool:
        """Whether this state ends a load cycle."""
        return self.status is not DashboardStatus.LOADING
