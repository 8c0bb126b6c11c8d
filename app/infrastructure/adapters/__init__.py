"""Infrastructure adapters for modeling operations.

These adapters implement domain interfaces using external libraries
like scikit-learn, NumPy and matplotlib.
"""

from .console_report_writer import ConsoleReportWriter
from .csv_observation_source import CALIBRATION_CSV, CsvObservationSource
from .lloyd_kmeans_trainer import LloydKMeansTrainer
from .matplotlib_plot_renderer import MatplotlibPlotRenderer
from .sklearn_metrics_calculator import SklearnMetricsCalculator
from .sklearn_svr_trainer import SklearnSVRTrainer
from .threaded_progress_indicator import ThreadedProgressIndicator

__all__ = [
    "CALIBRATION_CSV",
    "ConsoleReportWriter",
    "CsvObservationSource",
    "LloydKMeansTrainer",
    "MatplotlibPlotRenderer",
    "SklearnMetricsCalculator",
    "SklearnSVRTrainer",
    "ThreadedProgressIndicator",
]
