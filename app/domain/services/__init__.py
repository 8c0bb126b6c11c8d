"""Domain services for modeling operations.

Services contain pure business logic and operate on value objects.
"""

from .dataset_splitter import split_dataset, train_size_for
from .evaluation_assembler import EvaluationAssembler

__all__ = [
    "EvaluationAssembler",
    "split_dataset",
    "train_size_for",
]
