"""Dataset split value object."""

from dataclasses import dataclass

from .dataset import Dataset


@dataclass(frozen=True)
class DatasetSplit:
    """Ordered partition of a dataset into training and evaluation subsets.

    Attributes:
        train: Leading observations used for fitting
        test: Remaining observations used for evaluation
        ratio: Requested training ratio in (0, 1)
    """

    train: Dataset
    test: Dataset
    ratio: float

    def __post_init__(self) -> None:
        """Validate split values."""
        if not 0.0 < self.ratio < 1.0:
            raise ValueError(f"ratio must be between 0 and 1 (exclusive), got {self.ratio}")

    @property
    def size(self) -> int:
        """Return the total number of observations across both subsets."""
        return self.train.size + self.test.size
