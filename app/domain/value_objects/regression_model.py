"""Kernel regression model value object.

Immutable fitted representation of a Gaussian-kernel support vector regressor.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable

from .model_info import ModelInfo


def gaussian_kernel(a: float, b: float, gamma: float) -> float:
    """Gaussian similarity ``exp(-gamma * (a - b)^2)``."""
    return math.exp(-gamma * (a - b) ** 2)


@dataclass(frozen=True)
class KernelRegressionModel:
    """Fitted Gaussian-kernel regression model.

    Predictions are ``sum_i coefficients[i] * K(support_points[i], x) + bias``.
    They are not clamped to the 0-100 % range; the model may extrapolate.

    Attributes:
        support_points: Training inputs retained as support points
        coefficients: Dual coefficient of each support point
        bias: Intercept term
        gamma: Kernel width, i.e. 1 / bandwidth
        info: Fit metadata (ignored for equality)
    """

    support_points: tuple[float, ...]
    coefficients: tuple[float, ...]
    bias: float
    gamma: float
    info: ModelInfo | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate model values."""
        if len(self.support_points) != len(self.coefficients):
            raise ValueError(
                f"support_points and coefficients must have the same length, "
                f"got {len(self.support_points)} and {len(self.coefficients)}"
            )
        if self.gamma <= 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")

    @property
    def n_support(self) -> int:
        """Return the number of support points."""
        return len(self.support_points)

    def predict(self, water_ml: float) -> float:
        """Predict the sensor moisture for a quantity of added water."""
        total = self.bias
        for support, coefficient in zip(self.support_points, self.coefficients):
            total += coefficient * gaussian_kernel(support, water_ml, self.gamma)
        return total

    def predict_many(self, inputs: Iterable[float]) -> tuple[float, ...]:
        """Predict for several inputs, preserving their order."""
        return tuple(self.predict(x) for x in inputs)
