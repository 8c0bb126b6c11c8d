"""Moisture Pipeline Service.

Main application service that coordinates domain and infrastructure
for the split, fit and evaluate use case.
"""

import logging

from domain.interfaces import (
    IClusterTrainer,
    IMetricsCalculator,
    IObservationSource,
    IProgressIndicator,
    IRegressionTrainer,
)
from domain.services import EvaluationAssembler, split_dataset
from domain.value_objects import (
    ClusterModel,
    Dataset,
    EvaluationReport,
    PipelineConfig,
)

_LOGGER = logging.getLogger(__name__)


class MoisturePipelineService:
    """Application service for the modeling pipeline.

    This service is the main entry point for a modeling run.
    It orchestrates domain services and infrastructure adapters.
    """

    def __init__(
        self,
        regression_trainer: IRegressionTrainer,
        cluster_trainer: IClusterTrainer,
        config: PipelineConfig | None = None,
        progress_indicator: IProgressIndicator | None = None,
        metrics_calculator: IMetricsCalculator | None = None,
    ) -> None:
        """Initialize the pipeline service.

        Args:
            regression_trainer: Kernel regression trainer implementation
            cluster_trainer: Cluster trainer implementation
            config: Pipeline configuration (defaults when omitted)
            progress_indicator: Cosmetic indicator shown while clustering (optional)
            metrics_calculator: Scores predictions on the test subset (optional)
        """
        self._regression_trainer = regression_trainer
        self._cluster_trainer = cluster_trainer
        self._config = config or PipelineConfig()
        self._progress_indicator = progress_indicator
        self._assembler = EvaluationAssembler(metrics_calculator)

    @property
    def config(self) -> PipelineConfig:
        """Return the pipeline configuration."""
        return self._config

    def run(self, dataset: Dataset) -> EvaluationReport:
        """Split the dataset, fit both models and evaluate them.

        Args:
            dataset: Ordered observations

        Returns:
            Evaluation report of the run

        Raises:
            InsufficientDataError: If the split leaves an empty subset
            FitError: If either model cannot be fitted
        """
        split = split_dataset(dataset, self._config.split_ratio)
        _LOGGER.info(
            "Split %d observations into %d training and %d test samples (ratio %.2f)",
            dataset.size,
            split.train.size,
            split.test.size,
            split.ratio,
        )

        _LOGGER.info("Training kernel regression model")
        regression_model = self._regression_trainer.train(split.train)
        _LOGGER.info(
            "Kernel regression model trained with %d support points",
            regression_model.n_support,
        )

        _LOGGER.info("Training k-means model (k=%d)", self._config.n_clusters)
        cluster_model = self._train_clusters(split.train)
        _LOGGER.info(
            "K-means model trained in %d iterations, centroids: %s",
            cluster_model.n_iterations,
            ", ".join(f"{c:.2f}" for c in cluster_model.centroids),
        )

        report = self._assembler.build_report(
            dataset=dataset,
            split=split,
            regression_model=regression_model,
            cluster_model=cluster_model,
        )
        _LOGGER.info("Evaluation completed, metrics: %s", report.metrics)
        return report

    def run_from_source(self, source: IObservationSource) -> EvaluationReport:
        """Load observations from a source and run the pipeline.

        Args:
            source: Observation source

        Returns:
            Evaluation report of the run
        """
        dataset = source.load()
        _LOGGER.info("Loaded %d observations", dataset.size)
        return self.run(dataset)

    def _train_clusters(self, training_set: Dataset) -> ClusterModel:
        """Fit the cluster model, showing progress if an indicator is set."""
        if self._progress_indicator is None:
            return self._cluster_trainer.train(training_set)

        with self._progress_indicator:
            return self._cluster_trainer.train(training_set)
