"""Pytest configuration for Soil Moisture Models tests.

This module configures the Python path for tests to find the application modules.
"""

import sys
from pathlib import Path

import pytest

# Add the application directory to the Python path for test imports
APP_DIR = Path(__file__).parent.parent / "app"
sys.path.insert(0, str(APP_DIR))

from domain.value_objects import Dataset  # noqa: E402

CANONICAL_PAIRS = [
    (0.0, 0.96),
    (10.0, 10.95),
    (20.0, 29.97),
    (30.0, 48.40),
    (40.0, 54.90),
    (50.0, 71.00),
    (60.0, 77.70),
    (70.0, 77.98),
    (80.0, 82.54),
    (90.0, 85.35),
    (100.0, 85.45),
]


@pytest.fixture
def canonical_dataset() -> Dataset:
    """The eleven calibration observations, in measurement order."""
    return Dataset.from_pairs(CANONICAL_PAIRS)


@pytest.fixture
def canonical_train(canonical_dataset: Dataset) -> Dataset:
    """First nine calibration observations (inputs 0-80 mL)."""
    return Dataset.from_sequence(canonical_dataset.observations[:9])
