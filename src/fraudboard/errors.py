# Copyright (c) Syntropy Systems
"""Error types raised by the fraudboard pipeline."""
from __future__ import annotations

from enum import Enum


class FraudboardError(Exception):
    """Base class for recoverable pipeline errors.

    Every subclass carries a human-readable ``detail`` that ends up as the
    warning (or error) string of the published view model.
    """

    detail: str

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class RepositoryErrorKind(str, Enum):
    """Why the metrics repository could not produce results."""

    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    PARTIAL_FAILURE = "partial_failure"


class RepositoryError(FraudboardError):
    """The result artifacts could not be retrieved or validated."""

    kind: RepositoryErrorKind
    failed: tuple[str, ...]
    cause: RepositoryErrorKind | None

    def __init__(
        self,
        kind: RepositoryErrorKind,
        detail: str,
        failed: tuple[str, ...] = (),
        cause: RepositoryErrorKind | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            kind: Error category
            detail: Human-readable description
            failed: Logical names of the artifacts that failed
            cause: Underlying category of the failed artifact (partial failures)

        """
        super().__init__(detail)
        self.kind = kind
        self.failed = failed
        self.cause = cause


class TransformErrorKind(str, Enum):
    """Why raw curve data could not be assembled into a curve."""

    LENGTH_MISMATCH = "length_mismatch"
    EMPTY = "empty"


class TransformError(FraudboardError):
    """Raw curve data is not a valid curve."""

    kind: TransformErrorKind

    def __init__(self, kind: TransformErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.kind = kind


class ArtifactNotFoundError(FraudboardError):
    """An artifact source has nothing under the requested name."""


class ArtifactSourceError(FraudboardError):
    """An artifact source failed for a reason other than absence."""
