# Copyright (c) Syntropy Systems
"""Tests for the synthetic fallback dataset."""

from fraudboard.fallback import SyntheticResult, synthetic_result
from fraudboard.models.metrics import PerformanceMetrics


class TestSyntheticResult:
    """Tests for synthetic_result()."""

    def test_returns_metrics_and_curve(self):
        """Test the dataset has both parts."""
        result = synthetic_result()

        assert isinstance(result, SyntheticResult)
        assert isinstance(result.metrics, PerformanceMetrics)
        assert len(result.curve) > 1

    def test_repeated_calls_are_identical(self):
        """Test every call yields the same values."""
        first = synthetic_result()

        for _ in range(5):
            again = synthetic_result()
            assert again == first
            assert again.metrics.model_dump() == first.metrics.model_dump()
            assert [p.model_dump() for p in again.curve] == [
                p.model_dump() for p in first.curve
            ]

    def test_curve_is_sorted_by_recall(self):
        """Test the fallback curve is chart-ready."""
        recalls = [point.recall for point in synthetic_result().curve]

        assert recalls == sorted(recalls)

    def test_values_in_unit_interval(self):
        """Test every value is a valid ratio."""
        result = synthetic_result()

        for value in result.metrics.model_dump().values():
            assert 0.0 <= value <= 1.0
        for point in result.curve:
            assert 0.0 <= point.recall <= 1.0
            assert 0.0 <= point.precision <= 1.0
