"""Metrics calculator interface.

Contract for scoring regression predictions on the evaluation subset.
"""

from abc import ABC, abstractmethod

from domain.value_objects import PredictionResult


class IMetricsCalculator(ABC):
    """Contract for regression error metrics."""

    @abstractmethod
    def compute(self, results: tuple[PredictionResult, ...]) -> dict[str, float]:
        """Score predicted against observed moisture.

        Args:
            results: Prediction results of the evaluation subset

        Returns:
            Metric name to value (e.g. rmse, mae, max_abs_error, test_samples)
        """
        pass
