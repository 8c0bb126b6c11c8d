"""scikit-learn metrics calculator adapter.

Infrastructure adapter that implements IMetricsCalculator with
sklearn.metrics.
"""

import numpy as np
from domain.interfaces import IMetricsCalculator
from domain.value_objects import PredictionResult
from sklearn.metrics import max_error, mean_absolute_error, mean_squared_error


class SklearnMetricsCalculator(IMetricsCalculator):
    """Test-set RMSE, MAE and max absolute error."""

    def compute(self, results: tuple[PredictionResult, ...]) -> dict[str, float]:
        """Compute regression error metrics over prediction results.

        Args:
            results: Prediction results of the evaluation subset

        Returns:
            rmse, mae, max_abs_error and test_samples; only test_samples
            when there are no results
        """
        if not results:
            return {"test_samples": 0.0}

        y_true = np.asarray([r.observed_moisture for r in results], dtype=float)
        y_pred = np.asarray([r.predicted_moisture for r in results], dtype=float)
        return {
            "rmse": float(np.sqrt(mean_squared_error(y_true, y_pred))),
            "mae": float(mean_absolute_error(y_true, y_pred)),
            "max_abs_error": float(max_error(y_true, y_pred)),
            "test_samples": float(len(results)),
        }
