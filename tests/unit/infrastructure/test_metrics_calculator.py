"""Tests for the scikit-learn metrics calculator adapter."""

import math

import pytest
from domain.services import EvaluationAssembler, split_dataset
from domain.value_objects import (
    ClusterModel,
    Dataset,
    KernelRegressionModel,
    PredictionResult,
)
from infrastructure.adapters import SklearnMetricsCalculator


class TestSklearnMetricsCalculator:
    """Tests for SklearnMetricsCalculator."""

    def test_compute_metrics(self) -> None:
        """Test RMSE, MAE and max error of a small result set."""
        results = (
            PredictionResult(
                water_ml=0.0, observed_moisture=10.0, predicted_moisture=7.0, cluster_id=0
            ),
            PredictionResult(
                water_ml=10.0, observed_moisture=20.0, predicted_moisture=24.0, cluster_id=1
            ),
        )

        metrics = SklearnMetricsCalculator().compute(results)

        assert metrics["rmse"] == pytest.approx(math.sqrt((9.0 + 16.0) / 2))
        assert metrics["mae"] == pytest.approx(3.5)
        assert metrics["max_abs_error"] == pytest.approx(4.0)
        assert metrics["test_samples"] == 2.0

    def test_compute_metrics_without_results(self) -> None:
        """Test metrics for an empty result set."""
        assert SklearnMetricsCalculator().compute(()) == {"test_samples": 0.0}

    def test_build_report_metrics(self, canonical_dataset: Dataset) -> None:
        """Test RMSE, MAE and max error on the test subset of a report."""
        split = split_dataset(canonical_dataset, 0.8)
        assembler = EvaluationAssembler(SklearnMetricsCalculator())

        report = assembler.build_report(
            canonical_dataset,
            split,
            KernelRegressionModel(support_points=(), coefficients=(), bias=80.0, gamma=0.1),
            ClusterModel(
                centroids=(10.0, 45.0, 75.0), max_iterations=100, n_iterations=1, converged=True
            ),
        )

        errors = [5.35, 5.45]
        assert report.metrics["rmse"] == pytest.approx(
            math.sqrt(sum(e * e for e in errors) / 2)
        )
        assert report.metrics["mae"] == pytest.approx(5.4)
        assert report.metrics["max_abs_error"] == pytest.approx(5.45)
        assert report.metrics["test_samples"] == 2.0
