"""Console report writer adapter.

Infrastructure adapter that implements IReportWriter with plain-text tables.
"""

import sys
from typing import TextIO

from domain.interfaces import IReportWriter
from domain.value_objects import Dataset, EvaluationReport


class ConsoleReportWriter(IReportWriter):
    """Writes raw data and prediction tables to a text stream."""

    RULE = "-" * 48

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the writer.

        Args:
            stream: Output stream (defaults to stdout at write time)
        """
        self._stream = stream

    def write_raw_data(self, dataset: Dataset) -> None:
        """Write every observation with its row number."""
        self._line("=== Raw Data ===")
        self._line("No\tWater Added (mL)\tSensor Moisture (%)")
        self._line(self.RULE)
        for number, obs in enumerate(dataset.observations, start=1):
            self._line(f"{number}\t{obs.water_ml:g}\t\t\t{obs.moisture_pct:g}")

    def write_report(self, report: EvaluationReport) -> None:
        """Write the SVR and k-means prediction tables and summary lines."""
        self._line("")
        self._line("=== SVR Predictions ===")
        self._line("Test Input\tPrediction")
        self._line(self.RULE[:26])
        for result in report.results:
            self._line(f"{result.water_ml:.1f} mL\t\t{result.predicted_moisture:.2f}%")

        metrics = report.metrics
        if "rmse" in metrics:
            self._line(
                f"Test RMSE: {metrics['rmse']:.2f}  MAE: {metrics['mae']:.2f}"
            )

        self._line("")
        self._line("=== K-Means Predictions ===")
        self._line("Test Input\tCluster")
        self._line(self.RULE[:26])
        for result in report.results:
            self._line(f"{result.water_ml:.1f} mL\t\t{result.cluster_id}")

        centroids = ", ".join(
            f"{cluster_id}: {centroid:.2f}"
            for cluster_id, centroid in enumerate(report.cluster_model.centroids)
        )
        self._line(f"Centroids (mL): {centroids}")

    def write_message(self, message: str) -> None:
        """Write a single free-form line."""
        self._line(message)

    def _line(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(text + "\n")
        stream.flush()
