"""Value objects for the soil moisture domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .cluster_model import ClusterModel
from .dataset import Dataset, Observation
from .dataset_split import DatasetSplit
from .evaluation_report import EvaluationReport
from .model_info import ModelInfo
from .pipeline_config import PipelineConfig
from .prediction_result import PredictionResult
from .regression_model import KernelRegressionModel, gaussian_kernel

__all__ = [
    "ClusterModel",
    "Dataset",
    "DatasetSplit",
    "EvaluationReport",
    "KernelRegressionModel",
    "ModelInfo",
    "Observation",
    "PipelineConfig",
    "PredictionResult",
    "gaussian_kernel",
]
