"""Observation source interface.

Contract for loading calibration observations.
"""

from abc import ABC, abstractmethod

from domain.value_objects import Dataset


class IObservationSource(ABC):
    """Contract for data ingestion."""

    @abstractmethod
    def load(self) -> Dataset:
        """Load observations in source order.

        Returns:
            Non-empty dataset of validated observations

        Raises:
            DataError: If a record is malformed or nothing could be loaded
        """
        pass
