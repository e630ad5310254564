# Copyright (c) Syntropy Systems
"""Retrieval and validation of the two result artifacts."""
from __future__ import annotations

import logging
from concurrent.futures import Future, wait
from dataclasses import dataclass
from threading import Thread
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from fraudboard.errors import (
    ArtifactNotFoundError,
    ArtifactSourceError,
    RepositoryError,
    RepositoryErrorKind,
)
from fraudboard.models.metrics import CurveDocument, PerformanceMetrics, RawCurveData
from fraudboard.sources import create_source

if TYPE_CHECKING:
    from fraudboard.config import FraudboardConfig
    from fraudboard.sources import ArtifactSource

logger = logging.getLogger(__name__)

DEFAULT_METRICS_ARTIFACT = "performance_metrics.json"
DEFAULT_CURVE_ARTIFACT = "pr_curve_data.json"
DEFAULT_FETCH_TIMEOUT = 5.0

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class FetchedResults:
    """Both artifacts, retrieved and validated."""

    metrics: PerformanceMetrics
    curve: RawCurveData


@dataclass(frozen=True)
class _Outcome(Generic[ModelT]):
    """Result of retrieving and validating a single artifact."""

    label: str
    name: str
    value: ModelT | None = None
    kind: RepositoryErrorKind | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.value is not None

    def describe(self) -> str:
        state = "not found" if self.kind is RepositoryErrorKind.NOT_FOUND else "malformed"
        return f"{self.label} artifact '{self.name}' {state} ({self.detail})"


def format_validation_error(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into one line."""
    parts: list[str] = []
    for item in error.errors(include_url=False):
        loc = ".".join(str(part) for part in item["loc"])
        message = str(item["msg"]).removeprefix("Value error, ")
        parts.append(f"{loc}: {message}" if loc else message)
    return "; ".join(parts)


class MetricsRepository:
    """Fetches the metrics and curve artifacts and validates their shape.

    Both artifacts are requested concurrently and the repository waits for
    both outcomes before reporting. There is no retry.
    """

    source: ArtifactSource
    metrics_name: str
    curve_name: str
    timeout: float

    def __init__(
        self,
        source: ArtifactSource,
        metrics_name: str = DEFAULT_METRICS_ARTIFACT,
        curve_name: str = DEFAULT_CURVE_ARTIFACT,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ) -> None:
        """Initialize the repository.

        Args:
            source: Where artifacts are read from
            metrics_name: Logical name of the metrics document
            curve_name: Logical name of the curve document
            timeout: Seconds to wait for both retrievals; anything slower
                counts as not found

        """
        self.source = source
        self.metrics_name = metrics_name
        self.curve_name = curve_name
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: FraudboardConfig) -> MetricsRepository:
        """Build a repository with the source and names from config."""
        return cls(
            create_source(config),
            metrics_name=config.metrics_artifact,
            curve_name=config.curve_artifact,
            timeout=config.fetch_timeout,
        )

    def fetch_results(self) -> FetchedResults:
        """Retrieve and validate both artifacts.

        Returns:
            Validated metrics and raw curve data

        Raises:
            RepositoryError: NOT_FOUND or MALFORMED when both artifacts
                failed, PARTIAL_FAILURE when only one did

        """
        metrics_future = self._start_read(self.metrics_name)
        curve_future = self._start_read(self.curve_name)
        _ = wait([metrics_future, curve_future], timeout=self.timeout)

        metrics = self._resolve(metrics_future, "metrics", self.metrics_name, PerformanceMetrics)
        curve_doc = self._resolve(curve_future, "curve", self.curve_name, CurveDocument)

        if metrics.value is not None and curve_doc.value is not None:
            return FetchedResults(metrics=metrics.value, curve=curve_doc.value.to_raw())

        raise self._classify(metrics, curve_doc)

    def _start_read(self, name: str) -> Future[bytes]:
        """Read an artifact on a daemon thread.

        Reads abandoned after the timeout keep running in the background but
        never hold up interpreter exit.
        """
        future: Future[bytes] = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(self.source.read(name, self.timeout))
            except Exception as e:  # noqa: BLE001
                future.set_exception(e)

        Thread(target=run, name=f"fraudboard-fetch-{name}", daemon=True).start()
        return future

    def _resolve(
        self,
        future: Future[bytes],
        label: str,
        name: str,
        model: type[ModelT],
    ) -> _Outcome[ModelT]:
        """Turn a finished (or abandoned) retrieval into an outcome."""
        if not future.done():
            detail = f"timed out after {self.timeout}s"
            logger.debug("Retrieval of %s timed out", name)
            return _Outcome(label, name, kind=RepositoryErrorKind.NOT_FOUND, detail=detail)

        try:
            payload = future.result()
        except (ArtifactNotFoundError, ArtifactSourceError) as e:
            logger.debug("Retrieval of %s failed: %s", name, e.detail)
            return _Outcome(label, name, kind=RepositoryErrorKind.NOT_FOUND, detail=e.detail)
        except Exception as e:  # noqa: BLE001
            detail = f"{type(e).__name__}: {e}"
            logger.warning("Retrieval of %s raised %s", name, detail, exc_info=e)
            return _Outcome(label, name, kind=RepositoryErrorKind.NOT_FOUND, detail=detail)

        try:
            value = model.model_validate_json(payload)
        except ValidationError as e:
            detail = format_validation_error(e)
            logger.debug("Artifact %s is malformed: %s", name, detail)
            return _Outcome(label, name, kind=RepositoryErrorKind.MALFORMED, detail=detail)

        return _Outcome(label, name, value=value)

    @staticmethod
    def _classify(
        metrics: _Outcome[PerformanceMetrics],
        curve: _Outcome[CurveDocument],
    ) -> RepositoryError:
        """Build the error for a fetch where at least one artifact failed."""
        failures = [outcome for outcome in (metrics, curve) if not outcome.ok]

        if len(failures) == 1:
            failure = failures[0]
            detail = f"Partial failure: {failure.describe()}"
            return RepositoryError(
                RepositoryErrorKind.PARTIAL_FAILURE,
                detail,
                failed=(failure.name,),
                cause=failure.kind,
            )

        kinds = {failure.kind for failure in failures}
        kind = (
            RepositoryErrorKind.MALFORMED
            if RepositoryErrorKind.MALFORMED in kinds
            else RepositoryErrorKind.NOT_FOUND
        )
        detail = "Results unavailable: " + "; ".join(f.describe() for f in failures)
        return RepositoryError(
            kind,
            detail,
            failed=tuple(failure.name for failure in failures),
        )
