"""Model info value object.

Immutable data structure for fitted model metadata.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ModelInfo:
    """Information about a fitted model.

    Attributes:
        model_id: Unique identifier for the model
        model_type: Kind of model (e.g. "svr", "kmeans")
        created_at: When the model was fitted
        training_samples: Number of samples used for fitting
        parameters: Hyperparameters the model was fitted with
        metrics: Training metrics (e.g., RMSE, R², inertia)
        version: Model version string
    """

    model_id: str
    model_type: str
    created_at: datetime
    training_samples: int
    parameters: dict[str, float] = field(default_factory=dict)
    metrics: dict[str, float] = field(default_factory=dict)
    version: str = "1.0.0"

    def __post_init__(self) -> None:
        """Validate model info values."""
        if not self.model_id:
            raise ValueError("model_id cannot be empty")
        if not self.model_type:
            raise ValueError("model_type cannot be empty")
        if self.training_samples < 1:
            raise ValueError(
                f"training_samples must be at least 1, got {self.training_samples}"
            )
