# Copyright (c) Syntropy Systems
"""Tests for view formatting helpers."""

from fraudboard.models.metrics import CurvePoint, PerformanceMetrics
from fraudboard.presentation import (
    StatCard,
    curve_area,
    curve_polyline,
    format_percent,
    sample_points,
    stat_cards,
)


def make_curve(n: int) -> tuple[CurvePoint, ...]:
    return tuple(CurvePoint(recall=i / (n - 1), precision=1 - i / (n - 1)) for i in range(n))


class TestStatCards:
    """Tests for the summary cards."""

    def test_reference_metrics(self):
        """Test titles and formatting of the four cards."""
        metrics = PerformanceMetrics(
            best_threshold=0.40, recall=0.54, precision=0.54, f1_score=0.542
        )

        assert stat_cards(metrics) == [
            StatCard("Optimal Threshold", "0.40"),
            StatCard("Fraud Recall", "54.0%"),
            StatCard("Fraud Precision", "54.0%"),
            StatCard("Fraud F1-Score", "0.54"),
        ]

    def test_format_percent(self):
        """Test percentage rounding."""
        assert format_percent(0.8766) == "87.7%"
        assert format_percent(1.0) == "100.0%"


class TestCurveGeometry:
    """Tests for the SVG point strings."""

    def test_polyline(self):
        """Test recall maps to x and precision to flipped y."""
        curve = (CurvePoint(recall=0.0, precision=1.0), CurvePoint(recall=1.0, precision=0.4))

        assert curve_polyline(curve, width=100, height=50) == "0.0,0.0 100.0,30.0"

    def test_area_closes_to_baseline(self):
        """Test the shaded area starts and ends on the x axis."""
        curve = (CurvePoint(recall=0.2, precision=1.0), CurvePoint(recall=0.8, precision=0.5))

        assert curve_area(curve, width=100, height=50) == "20.0,50.0 20.0,0.0 80.0,25.0 80.0,50.0"

    def test_empty_curve(self):
        """Test empty curves produce empty strings."""
        assert curve_polyline(()) == ""
        assert curve_area(()) == ""


class TestSamplePoints:
    """Tests for downsampling long curves."""

    def test_short_curve_unchanged(self):
        """Test curves within the limit are returned as-is."""
        curve = make_curve(5)

        assert sample_points(curve, 10) is curve

    def test_keeps_both_ends(self):
        """Test downsampling keeps first and last point."""
        curve = make_curve(101)

        sampled = sample_points(curve, 11)

        assert len(sampled) == 11
        assert sampled[0] == curve[0]
        assert sampled[-1] == curve[-1]
        assert [p.recall for p in sampled] == sorted(p.recall for p in sampled)

    def test_tiny_limit(self):
        """Test limits below two."""
        curve = make_curve(5)

        assert sample_points(curve, 1) == curve[:1]
        assert sample_points(curve, 0) == ()
