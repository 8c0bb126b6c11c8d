"""Cluster model value object."""

from dataclasses import dataclass, field
from typing import Iterable

from .model_info import ModelInfo


@dataclass(frozen=True)
class ClusterModel:
    """Fitted one-dimensional k-means model.

    Attributes:
        centroids: Centroid value of each cluster, indexed by cluster id
        max_iterations: Cap on centroid-update rounds used during the fit
        n_iterations: Centroid-update rounds actually performed
        converged: True if assignments stopped changing before the cap
        training_labels: Cluster id of each training input, in training order
        info: Fit metadata (ignored for equality)
    """

    centroids: tuple[float, ...]
    max_iterations: int
    n_iterations: int
    converged: bool
    training_labels: tuple[int, ...] = ()
    info: ModelInfo | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate model values."""
        if not self.centroids:
            raise ValueError("centroids cannot be empty")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations}")
        if not 0 <= self.n_iterations <= self.max_iterations:
            raise ValueError(
                f"n_iterations must be between 0 and {self.max_iterations}, "
                f"got {self.n_iterations}"
            )

    @property
    def n_clusters(self) -> int:
        """Return the number of clusters."""
        return len(self.centroids)

    def predict(self, water_ml: float) -> int:
        """Return the id of the nearest centroid.

        Ties are broken by the lowest cluster id.
        """
        best_id = 0
        best_distance = abs(self.centroids[0] - water_ml)
        for cluster_id, centroid in enumerate(self.centroids[1:], start=1):
            distance = abs(centroid - water_ml)
            if distance < best_distance:
                best_id = cluster_id
                best_distance = distance
        return best_id

    def predict_many(self, inputs: Iterable[float]) -> tuple[int, ...]:
        """Assign several inputs, preserving their order."""
        return tuple(self.predict(x) for x in inputs)
