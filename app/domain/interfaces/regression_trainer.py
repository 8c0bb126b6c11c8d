"""Regression trainer interface.

Contract for fitting kernel regression models.
"""

from abc import ABC, abstractmethod

from domain.value_objects import Dataset, KernelRegressionModel


class IRegressionTrainer(ABC):
    """Contract for kernel regression fitting."""

    @abstractmethod
    def train(self, training_set: Dataset) -> KernelRegressionModel:
        """Fit a regression model on the provided observations.

        Args:
            training_set: Observations to fit on

        Returns:
            Immutable fitted model

        Raises:
            FitError: If the inputs are degenerate or the solver does not converge
        """
        pass
