"""Pytest fixtures for integration tests.

This module provides the real adapters wired with the default
configuration, plus test doubles for failure scenarios.
"""

from pathlib import Path

import pytest
from application.services import MoisturePipelineService
from domain.exceptions import FitError
from domain.interfaces import IClusterTrainer, IProgressIndicator
from domain.value_objects import ClusterModel, Dataset, PipelineConfig
from infrastructure.adapters import (
    LloydKMeansTrainer,
    SklearnMetricsCalculator,
    SklearnSVRTrainer,
)


class RecordingProgressIndicator(IProgressIndicator):
    """Progress indicator that records start/stop calls."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def start(self) -> None:
        self.calls.append("start")

    def stop(self) -> None:
        self.calls.append("stop")


class FailingClusterTrainer(IClusterTrainer):
    """Cluster trainer that always fails."""

    def train(self, training_set: Dataset) -> ClusterModel:
        raise FitError("clustering failed")


@pytest.fixture
def config(tmp_path: Path) -> PipelineConfig:
    """Default configuration writing the plot into a temporary directory."""
    return PipelineConfig(plot_path=str(tmp_path / "plot.png"))


@pytest.fixture
def progress_indicator() -> RecordingProgressIndicator:
    """Create a recording progress indicator."""
    return RecordingProgressIndicator()


@pytest.fixture
def pipeline_service(
    config: PipelineConfig,
    progress_indicator: RecordingProgressIndicator,
) -> MoisturePipelineService:
    """Create the pipeline service with real trainers."""
    return MoisturePipelineService(
        regression_trainer=SklearnSVRTrainer.from_config(config),
        cluster_trainer=LloydKMeansTrainer.from_config(config),
        config=config,
        progress_indicator=progress_indicator,
        metrics_calculator=SklearnMetricsCalculator(),
    )


@pytest.fixture
def failing_cluster_trainer() -> FailingClusterTrainer:
    """Create a cluster trainer that raises FitError."""
    return FailingClusterTrainer()
