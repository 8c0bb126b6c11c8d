"""Dataset value objects.

Immutable data structures for calibration observations.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from domain.exceptions import DataError


@dataclass(frozen=True)
class Observation:
    """A single water-addition-to-moisture measurement.

    Attributes:
        water_ml: Water added to the soil sample in mL (model input)
        moisture_pct: Sensor-measured moisture in % (model target)
    """

    water_ml: float
    moisture_pct: float

    def __post_init__(self) -> None:
        """Validate observation values."""
        if not _is_finite_number(self.water_ml):
            raise DataError(f"water_ml must be a finite number, got {self.water_ml!r}")
        if not _is_finite_number(self.moisture_pct):
            raise DataError(
                f"moisture_pct must be a finite number, got {self.moisture_pct!r}"
            )


@dataclass(frozen=True)
class Dataset:
    """Ordered collection of observations.

    Insertion order is preserved; splitting relies on it.

    Attributes:
        observations: Sequence of observations in load order
    """

    observations: tuple[Observation, ...]

    def __post_init__(self) -> None:
        """Validate dataset."""
        if not self.observations:
            raise DataError("Dataset must contain at least one observation")

    @classmethod
    def from_sequence(cls, observations: Sequence[Observation]) -> "Dataset":
        """Create a Dataset from a sequence of observations."""
        return cls(observations=tuple(observations))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "Dataset":
        """Create a Dataset from ``(water_ml, moisture_pct)`` pairs."""
        return cls(
            observations=tuple(
                Observation(water_ml=water_ml, moisture_pct=moisture_pct)
                for water_ml, moisture_pct in pairs
            )
        )

    @property
    def size(self) -> int:
        """Return the number of observations."""
        return len(self.observations)

    @property
    def inputs(self) -> tuple[float, ...]:
        """Return the water inputs in dataset order."""
        return tuple(obs.water_ml for obs in self.observations)

    @property
    def targets(self) -> tuple[float, ...]:
        """Return the moisture targets in dataset order."""
        return tuple(obs.moisture_pct for obs in self.observations)

    @property
    def distinct_input_count(self) -> int:
        """Return the number of distinct water input values."""
        return len(set(self.inputs))

    def pairs(self) -> list[tuple[float, float]]:
        """Return observations as ``(water_ml, moisture_pct)`` tuples."""
        return [(obs.water_ml, obs.moisture_pct) for obs in self.observations]


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
