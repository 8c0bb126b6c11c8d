"""scikit-learn SVR trainer adapter.

Infrastructure adapter that implements IRegressionTrainer using
scikit-learn's epsilon-SVR (libsvm SMO solver) with a Gaussian kernel.
"""

import logging
import uuid
import warnings
from datetime import datetime
from typing import Any

import numpy as np
from domain.exceptions import FitError
from domain.interfaces import IRegressionTrainer
from domain.value_objects import (
    Dataset,
    KernelRegressionModel,
    ModelInfo,
    PipelineConfig,
)
from sklearn.exceptions import ConvergenceWarning
from sklearn.metrics import mean_squared_error, r2_score
from sklearn.svm import SVR

_LOGGER = logging.getLogger(__name__)


class SklearnSVRTrainer(IRegressionTrainer):
    """scikit-learn implementation of the kernel regression trainer.

    The dual quadratic program is solved by libsvm; the fitted support
    points, dual coefficients and intercept are copied into an immutable
    KernelRegressionModel so that prediction does not depend on sklearn.
    """

    MIN_DISTINCT_INPUTS = 2

    def __init__(self, hyperparams: dict[str, Any] | None = None) -> None:
        """Initialize the SVR trainer.

        Args:
            hyperparams: SVR hyperparameters (optional)
        """
        self._hyperparams = hyperparams or self._default_hyperparams()
        if self._hyperparams.get("kernel", "rbf") != "rbf":
            raise ValueError(
                f"Only the Gaussian (rbf) kernel is supported, got {self._hyperparams['kernel']}"
            )
        gamma = self._hyperparams.get("gamma")
        if isinstance(gamma, bool) or not isinstance(gamma, (int, float)) or gamma <= 0:
            raise ValueError(f"gamma must be a positive number, got {gamma!r}")

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "SklearnSVRTrainer":
        """Create a trainer from the pipeline configuration."""
        return cls(
            hyperparams={
                "kernel": "rbf",
                "gamma": config.gamma,
                "C": config.regularization_c,
                "epsilon": config.epsilon,
                "max_iter": config.solver_max_iterations,
            }
        )

    @staticmethod
    def _default_hyperparams() -> dict[str, Any]:
        """Get default SVR hyperparameters."""
        defaults = PipelineConfig()
        return {
            "kernel": "rbf",
            "gamma": defaults.gamma,
            "C": defaults.regularization_c,
            "epsilon": defaults.epsilon,
            "max_iter": defaults.solver_max_iterations,
        }

    @property
    def hyperparams(self) -> dict[str, Any]:
        """Return a copy of the SVR hyperparameters."""
        return dict(self._hyperparams)

    def train(self, training_set: Dataset) -> KernelRegressionModel:
        """Fit a Gaussian-kernel epsilon-SVR model.

        Args:
            training_set: Observations to fit on

        Returns:
            KernelRegressionModel with support points and coefficients

        Raises:
            FitError: If inputs are degenerate or libsvm does not converge
        """
        if training_set.distinct_input_count < self.MIN_DISTINCT_INPUTS:
            raise FitError(
                f"Kernel regression needs at least {self.MIN_DISTINCT_INPUTS} distinct "
                f"input values, got {training_set.distinct_input_count}"
            )

        model_id = f"svr_{uuid.uuid4().hex[:8]}"
        _LOGGER.info(
            "Training new SVR model: %s (%d samples)", model_id, training_set.size
        )

        X, y = self._prepare_data(training_set)
        svr = SVR(**self._hyperparams)

        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            try:
                svr.fit(X, y)
            except ConvergenceWarning as e:
                raise FitError(f"SVR solver did not converge: {e}") from e
            except ValueError as e:
                raise FitError(f"SVR fit failed: {e}") from e

        support_points = tuple(float(v) for v in svr.support_vectors_[:, 0])
        coefficients = tuple(float(c) for c in svr.dual_coef_[0])
        bias = float(svr.intercept_[0])
        if not np.all(np.isfinite(coefficients)) or not np.isfinite(bias):
            raise FitError("SVR produced non-finite coefficients")

        y_pred = svr.predict(X)
        metrics = {
            "rmse": float(np.sqrt(mean_squared_error(y, y_pred))),
            "r2": float(r2_score(y, y_pred)),
            "n_support": float(len(support_points)),
        }
        _LOGGER.info("Model %s trained with metrics: %s", model_id, metrics)

        info = ModelInfo(
            model_id=model_id,
            model_type="svr",
            created_at=datetime.now(),
            training_samples=training_set.size,
            parameters={
                key: float(value)
                for key, value in self._hyperparams.items()
                if isinstance(value, (int, float))
            },
            metrics=metrics,
        )

        return KernelRegressionModel(
            support_points=support_points,
            coefficients=coefficients,
            bias=bias,
            gamma=float(self._hyperparams["gamma"]),
            info=info,
        )

    def _prepare_data(self, training_set: Dataset) -> tuple[np.ndarray, np.ndarray]:
        """Prepare training data as numpy arrays.

        Args:
            training_set: Dataset value object

        Returns:
            Tuple of (single-column features array, labels array)
        """
        X = np.asarray(training_set.inputs, dtype=float).reshape(-1, 1)
        y = np.asarray(training_set.targets, dtype=float)
        return X, y
