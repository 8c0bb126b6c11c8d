"""Dataset splitter.

Deterministic, order-based train/test partitioning.
"""

import math

from domain.exceptions import InsufficientDataError
from domain.value_objects import Dataset, DatasetSplit


def train_size_for(total: int, ratio: float) -> int:
    """Return the number of leading observations assigned to training.

    Uses half-up rounding of ``ratio * total`` so that the rule does not
    depend on the platform's tie-breaking convention.

    Args:
        total: Number of observations in the dataset
        ratio: Training ratio in (0, 1)

    Returns:
        Training subset size (may be 0 or ``total`` for tiny datasets)
    """
    return int(math.floor(ratio * total + 0.5))


def split_dataset(dataset: Dataset, ratio: float) -> DatasetSplit:
    """Split a dataset into ordered training and evaluation subsets.

    The first ``round(ratio * n)`` observations, in dataset order, form the
    training subset and the remainder forms the evaluation subset. There is
    no shuffling, so a given dataset and ratio always yield the same split.

    Args:
        dataset: Observations to split
        ratio: Training ratio, strictly between 0 and 1

    Returns:
        The ordered split

    Raises:
        ValueError: If ratio is outside (0, 1)
        InsufficientDataError: If either subset would be empty
    """
    if not 0.0 < ratio < 1.0:
        raise ValueError(f"ratio must be between 0 and 1 (exclusive), got {ratio}")
    if dataset.size < 2:
        raise InsufficientDataError(
            f"At least 2 observations are required to split, got {dataset.size}"
        )

    n_train = train_size_for(dataset.size, ratio)
    if n_train == 0 or n_train == dataset.size:
        raise InsufficientDataError(
            f"Splitting {dataset.size} observations with ratio {ratio} "
            f"would leave an empty {'train' if n_train == 0 else 'test'} subset"
        )

    return DatasetSplit(
        train=Dataset.from_sequence(dataset.observations[:n_train]),
        test=Dataset.from_sequence(dataset.observations[n_train:]),
        ratio=ratio,
    )
