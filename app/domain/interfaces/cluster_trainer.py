"""Cluster trainer interface.

Contract for fitting cluster models.
"""

from abc import ABC, abstractmethod

from domain.value_objects import ClusterModel, Dataset


class IClusterTrainer(ABC):
    """Contract for cluster model fitting."""

    @abstractmethod
    def train(self, training_set: Dataset) -> ClusterModel:
        """Fit a cluster model on the inputs of the provided observations.

        Args:
            training_set: Observations to fit on (only inputs are clustered)

        Returns:
            Immutable fitted model

        Raises:
            FitError: If there are fewer distinct inputs than clusters
        """
        pass
