"""Evaluation assembler.

Domain service that runs fitted models over the evaluation subset.
"""

from domain.interfaces import IMetricsCalculator
from domain.value_objects import (
    ClusterModel,
    Dataset,
    DatasetSplit,
    EvaluationReport,
    KernelRegressionModel,
    PredictionResult,
)


class EvaluationAssembler:
    """Service producing prediction results and evaluation reports.

    This service only reads the fitted models and the observations it is
    given. Error metrics are delegated to an IMetricsCalculator.
    """

    def __init__(self, metrics_calculator: IMetricsCalculator | None = None) -> None:
        """Initialize the assembler.

        Args:
            metrics_calculator: Scores the test predictions (optional; without
                it the report only carries ``test_samples``)
        """
        self._metrics_calculator = metrics_calculator

    def assemble(
        self,
        regression_model: KernelRegressionModel,
        cluster_model: ClusterModel,
        test: Dataset,
    ) -> tuple[PredictionResult, ...]:
        """Predict every test observation with both models.

        Args:
            regression_model: Fitted kernel regression model
            cluster_model: Fitted cluster model
            test: Evaluation observations

        Returns:
            One result per observation, in the order of ``test``
        """
        return tuple(
            PredictionResult(
                water_ml=obs.water_ml,
                observed_moisture=obs.moisture_pct,
                predicted_moisture=regression_model.predict(obs.water_ml),
                cluster_id=cluster_model.predict(obs.water_ml),
            )
            for obs in test.observations
        )

    def build_report(
        self,
        dataset: Dataset,
        split: DatasetSplit,
        regression_model: KernelRegressionModel,
        cluster_model: ClusterModel,
    ) -> EvaluationReport:
        """Assemble results and test metrics into a report.

        Args:
            dataset: Full dataset of the run
            split: Partition used to fit and evaluate
            regression_model: Fitted kernel regression model
            cluster_model: Fitted cluster model

        Returns:
            EvaluationReport for reporting and visualization
        """
        results = self.assemble(regression_model, cluster_model, split.test)
        if self._metrics_calculator is None:
            metrics = {"test_samples": float(len(results))}
        else:
            metrics = self._metrics_calculator.compute(results)

        return EvaluationReport(
            dataset=dataset,
            split=split,
            results=results,
            regression_model=regression_model,
            cluster_model=cluster_model,
            metrics=metrics,
        )
