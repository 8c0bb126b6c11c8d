"""Prediction result value object.

Immutable data structure for per-observation model outputs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PredictionResult:
    """Outputs of both models for one evaluation observation.

    Attributes:
        water_ml: Water added in mL (model input)
        observed_moisture: Sensor moisture measured for this input (%)
        predicted_moisture: Kernel regression prediction (%), unclamped
        cluster_id: Nearest cluster id assigned by the cluster model
    """

    water_ml: float
    observed_moisture: float
    predicted_moisture: float
    cluster_id: int

    def __post_init__(self) -> None:
        """Validate prediction result values."""
        if self.cluster_id < 0:
            raise ValueError(f"cluster_id must be non-negative, got {self.cluster_id}")

    @property
    def residual(self) -> float:
        """Return observed minus predicted moisture."""
        return self.observed_moisture - self.predicted_moisture
