# Copyright (c) Syntropy Systems
"""Dashboard state machine: turns load cycles into published view models."""
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol

from fraudboard.config import FallbackPolicy, RefreshPolicy
from fraudboard.errors import FraudboardError
from fraudboard.fallback import synthetic_result
from fraudboard.models.view import DashboardStatus, DashboardViewModel
from fraudboard.repository import MetricsRepository
from fraudboard.transform import assemble

if TYPE_CHECKING:
    from collections.abc import Callable

    from fraudboard.config import FraudboardConfig
    from fraudboard.fallback import FallbackProvider
    from fraudboard.models.metrics import Curve, RawCurveData
    from fraudboard.repository import FetchedResults

    Subscriber = Callable[[DashboardViewModel], None]

logger = logging.getLogger(__name__)


class _ResultsFetcher(Protocol):
    def fetch_results(self) -> FetchedResults:
        ...


class DashboardStateMachine:
    """Owns the published DashboardViewModel.

    Each load cycle starts at Loading and commits exactly one of Ready,
    Degraded or Failed. Only the newest cycle may commit; results of older
    cycles still in flight are dropped. Readers only ever see whole view
    models.
    """

    _repository: _ResultsFetcher
    _fallback: FallbackProvider
    _transformer: Callable[[RawCurveData], Curve]
    fallback_policy: FallbackPolicy
    refresh_policy: RefreshPolicy

    def __init__(
        self,
        repository: _ResultsFetcher,
        fallback: FallbackProvider = synthetic_result,
        transformer: Callable[[RawCurveData], Curve] = assemble,
        fallback_policy: FallbackPolicy = FallbackPolicy.DEGRADE,
        refresh_policy: RefreshPolicy = RefreshPolicy.KEEP_LAST,
    ) -> None:
        """Initialize the state machine in the Loading state.

        Args:
            repository: Provides fetch_results()
            fallback: Returns placeholder data when real results are unusable
            transformer: Turns raw curve data into a sorted curve
            fallback_policy: DEGRADE shows fallback data, STRICT shows an error
            refresh_policy: KEEP_LAST keeps the previous state visible while a
                refresh runs, BLANK switches to Loading immediately

        """
        self._repository = repository
        self._fallback = fallback
        self._transformer = transformer
        self.fallback_policy = fallback_policy
        self.refresh_policy = refresh_policy

        self._state_lock = threading.Lock()
        self._commit_lock = threading.RLock()
        self._current = DashboardViewModel.loading()
        self._latest_cycle = 0
        self._committed_cycle = 0
        self._subscribers: list[Subscriber] = []

    @classmethod
    def from_config(cls, config: FraudboardConfig) -> DashboardStateMachine:
        """Build a state machine reading artifacts as configured."""
        return cls(
            MetricsRepository.from_config(config),
            fallback_policy=config.fallback_policy,
            refresh_policy=config.refresh_policy,
        )

    @property
    def current(self) -> DashboardViewModel:
        """The published view model."""
        with self._state_lock:
            return self._current

    @property
    def latest_cycle(self) -> int:
        """Number of the most recently started load cycle."""
        with self._state_lock:
            return self._latest_cycle

    @property
    def is_loading(self) -> bool:
        """Whether a load cycle is in flight (or none has finished yet)."""
        with self._state_lock:
            return (
                self._committed_cycle < self._latest_cycle
                or self._current.status is DashboardStatus.LOADING
            )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call callback with every committed view model.

        Returns:
            A function that removes the subscription

        """
        with self._state_lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._state_lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def load(self) -> DashboardViewModel:
        """Run one load cycle in the calling thread.

        Returns:
            The published view model after the cycle ends. If a newer cycle
            was started meanwhile, this cycle's result is dropped and
            whatever is published is returned.

        """
        cycle = self._start_cycle()
        return self._finish_cycle(cycle)

    def refresh_in_background(self) -> threading.Thread:
        """Start a load cycle on a daemon thread and return the thread."""
        cycle = self._start_cycle()
        thread = threading.Thread(
            target=self._finish_cycle,
            args=(cycle,),
            name=f"fraudboard-cycle-{cycle}",
            daemon=True,
        )
        thread.start()
        return thread

    def _start_cycle(self) -> int:
        with self._state_lock:
            self._latest_cycle += 1
            cycle = self._latest_cycle
            if self.refresh_policy is RefreshPolicy.BLANK:
                self._current = DashboardViewModel.loading(cycle)
        logger.debug("Starting load cycle %d", cycle)
        return cycle

    def _finish_cycle(self, cycle: int) -> DashboardViewModel:
        return self._commit(self._run_cycle(cycle))

    def _run_cycle(self, cycle: int) -> DashboardViewModel:
        """Fetch, assemble and build the terminal view model for a cycle."""
        try:
            results = self._repository.fetch_results()
            curve = self._transformer(results.curve)
        except FraudboardError as e:
            return self._recover(e.detail, cycle)
        except Exception as e:
            logger.exception("Load cycle %d failed unexpectedly", cycle)
            return DashboardViewModel.failed(f"Unexpected error: {e}", cycle)

        logger.info("Load cycle %d ready with %d curve points", cycle, len(curve))
        return DashboardViewModel.ready(results.metrics, curve, cycle)

    def _recover(self, detail: str, cycle: int) -> DashboardViewModel:
        """Build the view model for a cycle whose real results are unusable."""
        if self.fallback_policy is FallbackPolicy.STRICT:
            logger.warning("Load cycle %d failed: %s", cycle, detail)
            return DashboardViewModel.failed(detail, cycle)

        try:
            fallback = self._fallback()
        except Exception as e:
            logger.exception("Fallback data unavailable in cycle %d", cycle)
            return DashboardViewModel.failed(f"{detail}; fallback unavailable: {e}", cycle)

        logger.warning("Load cycle %d showing fallback data: %s", cycle, detail)
        return DashboardViewModel.degraded(fallback.metrics, fallback.curve, detail, cycle)

    def _commit(self, view: DashboardViewModel) -> DashboardViewModel:
        """Publish view unless a newer cycle has started, then notify."""
        with self._commit_lock:
            with self._state_lock:
                if view.cycle != self._latest_cycle:
                    logger.debug(
                        "Dropping result of cycle %d, cycle %d is newer",
                        view.cycle,
                        self._latest_cycle,
                    )
                    return self._current
                self._current = view
                self._committed_cycle = view.cycle
                subscribers = list(self._subscribers)

            for callback in subscribers:
                try:
                    callback(view)
                except Exception:
                    logger.exception("Dashboard subscriber failed")

            return view
