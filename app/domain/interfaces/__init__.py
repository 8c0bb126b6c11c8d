"""Domain interfaces for modeling operations.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .cluster_trainer import IClusterTrainer
from .metrics_calculator import IMetricsCalculator
from .observation_source import IObservationSource
from .plot_renderer import IPlotRenderer
from .progress_indicator import IProgressIndicator
from .regression_trainer import IRegressionTrainer
from .report_writer import IReportWriter

__all__ = [
    "IClusterTrainer",
    "IMetricsCalculator",
    "IObservationSource",
    "IPlotRenderer",
    "IProgressIndicator",
    "IRegressionTrainer",
    "IReportWriter",
]
