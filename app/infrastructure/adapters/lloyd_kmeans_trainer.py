"""Lloyd k-means trainer adapter.

Infrastructure adapter that implements IClusterTrainer with a NumPy
implementation of Lloyd's algorithm on scalar inputs.
"""

import logging
import uuid
from datetime import datetime

import numpy as np
from domain.exceptions import FitError
from domain.interfaces import IClusterTrainer
from domain.value_objects import ClusterModel, Dataset, ModelInfo, PipelineConfig

_LOGGER = logging.getLogger(__name__)


class LloydKMeansTrainer(IClusterTrainer):
    """Deterministic k-means trainer for one-dimensional inputs.

    Initial centroids are evenly spaced order statistics of the distinct
    training inputs, so repeated fits on the same data always produce the
    same centroids and labels.
    """

    def __init__(self, n_clusters: int = 3, max_iterations: int = 100) -> None:
        """Initialize the k-means trainer.

        Args:
            n_clusters: Number of clusters k
            max_iterations: Cap on centroid-update rounds
        """
        if n_clusters < 1:
            raise ValueError(f"n_clusters must be at least 1, got {n_clusters}")
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
        self._n_clusters = n_clusters
        self._max_iterations = max_iterations

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "LloydKMeansTrainer":
        """Create a trainer from the pipeline configuration."""
        return cls(n_clusters=config.n_clusters, max_iterations=config.max_iterations)

    def train(self, training_set: Dataset) -> ClusterModel:
        """Fit k-means on the training inputs.

        Args:
            training_set: Observations whose inputs are clustered

        Returns:
            ClusterModel with centroids ordered by cluster id

        Raises:
            FitError: If there are fewer distinct inputs than clusters
        """
        values = np.asarray(training_set.inputs, dtype=float)
        distinct = np.unique(values)
        if distinct.size < self._n_clusters:
            raise FitError(
                f"K-means with k={self._n_clusters} needs at least {self._n_clusters} "
                f"distinct input values, got {distinct.size}"
            )

        model_id = f"kmeans_{uuid.uuid4().hex[:8]}"
        _LOGGER.info(
            "Training new k-means model: %s (k=%d, %d samples)",
            model_id,
            self._n_clusters,
            values.size,
        )

        centroids = self._initial_centroids(distinct)
        labels = self._assign(values, centroids)
        n_iterations = 0
        converged = False

        while n_iterations < self._max_iterations:
            n_iterations += 1
            centroids = self._update(values, labels, centroids)
            new_labels = self._assign(values, centroids)
            if np.array_equal(new_labels, labels):
                converged = True
                break
            labels = new_labels

        if not converged:
            _LOGGER.warning(
                "K-means model %s stopped at the iteration cap (%d) before converging",
                model_id,
                self._max_iterations,
            )

        inertia = float(np.sum((values - centroids[labels]) ** 2))
        metrics = {
            "inertia": inertia,
            "n_iterations": float(n_iterations),
        }
        _LOGGER.info("Model %s trained with metrics: %s", model_id, metrics)

        info = ModelInfo(
            model_id=model_id,
            model_type="kmeans",
            created_at=datetime.now(),
            training_samples=training_set.size,
            parameters={
                "n_clusters": float(self._n_clusters),
                "max_iterations": float(self._max_iterations),
            },
            metrics=metrics,
        )

        return ClusterModel(
            centroids=tuple(float(c) for c in centroids),
            max_iterations=self._max_iterations,
            n_iterations=n_iterations,
            converged=converged,
            training_labels=tuple(int(label) for label in labels),
            info=info,
        )

    def _initial_centroids(self, distinct: np.ndarray) -> np.ndarray:
        """Pick evenly spaced order statistics of the sorted distinct inputs."""
        positions = np.linspace(0, distinct.size - 1, self._n_clusters)
        # Half-up rounding keeps indices strictly increasing when size >= k
        indices = np.floor(positions + 0.5).astype(int)
        return distinct[indices].astype(float)

    @staticmethod
    def _assign(values: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Assign each value to its nearest centroid.

        np.argmin returns the first minimum, so ties go to the lowest id.
        """
        distances = np.abs(values[:, np.newaxis] - centroids[np.newaxis, :])
        return np.argmin(distances, axis=1)

    def _update(
        self,
        values: np.ndarray,
        labels: np.ndarray,
        centroids: np.ndarray,
    ) -> np.ndarray:
        """Recompute centroids as the mean of their members.

        An empty cluster keeps its previous centroid.
        """
        updated = centroids.copy()
        for cluster_id in range(self._n_clusters):
            members = values[labels == cluster_id]
            if members.size:
                updated[cluster_id] = members.mean()
        return updated
