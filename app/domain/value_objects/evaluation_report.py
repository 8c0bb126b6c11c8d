"""Evaluation report value object.

Everything the reporting and visualization collaborators consume for one run.
"""

from dataclasses import dataclass, field

from .cluster_model import ClusterModel
from .dataset import Dataset
from .dataset_split import DatasetSplit
from .prediction_result import PredictionResult
from .regression_model import KernelRegressionModel


@dataclass(frozen=True)
class EvaluationReport:
    """Result of one pipeline run.

    Attributes:
        dataset: Full dataset, shown as raw data
        split: Train/test partition used for the run
        results: One prediction result per test observation, in test order
        regression_model: Fitted kernel regression model
        cluster_model: Fitted cluster model
        metrics: Regression error metrics on the test subset
    """

    dataset: Dataset
    split: DatasetSplit
    results: tuple[PredictionResult, ...]
    regression_model: KernelRegressionModel
    cluster_model: ClusterModel
    metrics: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate report consistency."""
        if len(self.results) != self.split.test.size:
            raise ValueError(
                f"Expected {self.split.test.size} results (one per test observation), "
                f"got {len(self.results)}"
            )

    @property
    def raw_points(self) -> list[tuple[float, float]]:
        """Return ``(water_ml, moisture_pct)`` for every observation."""
        return self.dataset.pairs()

    @property
    def regression_points(self) -> list[tuple[float, float]]:
        """Return ``(water_ml, predicted_moisture)`` for each test observation."""
        return [(r.water_ml, r.predicted_moisture) for r in self.results]

    @property
    def cluster_points(self) -> list[tuple[float, float, int]]:
        """Return ``(water_ml, observed_moisture, cluster_id)`` for each test observation."""
        return [(r.water_ml, r.observed_moisture, r.cluster_id) for r in self.results]
