"""CSV observation source adapter.

Infrastructure adapter that implements IObservationSource by parsing
delimited calibration records.
"""

import csv
import io
import logging
import math
from pathlib import Path

from domain.exceptions import DataError
from domain.interfaces import IObservationSource
from domain.value_objects import Dataset, Observation

_LOGGER = logging.getLogger(__name__)

# Calibration run on a 100 g soil sample: water added in 10 mL steps,
# sensor moisture and its difference from the added water percentage.
CALIBRATION_CSV = """\
no,soil,water_added,water_added_ml,moisture_sensor,difference,notes
1,100gr,0 mL,0%,0.96%,0.96%,
2,100gr,10mL,10%,10.95%,0.95%,
3,100gr,20mL,20%,29.97%,9.97%,
4,100gr,30mL,30%,48.40%,18.40%,
5,100gr,40mL,40%,54.90%,14.90%,
6,100gr,50 mL,50%,71.00%,21.00%,
7,100gr,60mL,60%,77.70%,17.70%,
8,100gr,70mL,70%,77.98%,17.98%,
9,100gr,80mL,80%,82.54%,2.54%,
10,100gr,90mL,90%,85.35%,4.65%,
11,100gr,100mL,100%,85.45%,14.55%,
"""


class CsvObservationSource(IObservationSource):
    """CSV implementation of the observation source.

    Values may carry a trailing ``%`` and surrounding whitespace.
    The input and target columns are selected by header name.
    """

    DEFAULT_INPUT_COLUMN = "water_added_ml"
    DEFAULT_TARGET_COLUMN = "moisture_sensor"

    def __init__(
        self,
        text: str = CALIBRATION_CSV,
        input_column: str = DEFAULT_INPUT_COLUMN,
        target_column: str = DEFAULT_TARGET_COLUMN,
        delimiter: str = ",",
    ) -> None:
        """Initialize the CSV source.

        Args:
            text: Delimited text with a header row
            input_column: Header of the water input column
            target_column: Header of the moisture target column
            delimiter: Field delimiter
        """
        self._text = text
        self._input_column = input_column
        self._target_column = target_column
        self._delimiter = delimiter

    @classmethod
    def from_path(cls, path: str | Path, **kwargs: str) -> "CsvObservationSource":
        """Create a source from a CSV file.

        Raises:
            DataError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise DataError(f"Cannot read observations from {path}: {e}") from e
        return cls(text=text, **kwargs)

    def load(self) -> Dataset:
        """Parse every record into an observation, in file order.

        Returns:
            Dataset of parsed observations

        Raises:
            DataError: If a column is missing, a field is not numeric,
                or no record was found
        """
        reader = csv.DictReader(io.StringIO(self._text.strip()), delimiter=self._delimiter)
        fieldnames = [name.strip() for name in (reader.fieldnames or [])]
        for column in (self._input_column, self._target_column):
            if column not in fieldnames:
                raise DataError(
                    f"Missing column '{column}' (available: {', '.join(fieldnames) or 'none'})"
                )
        reader.fieldnames = fieldnames

        observations = []
        for row_number, row in enumerate(reader, start=1):
            if not any(isinstance(value, str) and value.strip() for value in row.values()):
                continue
            observations.append(
                Observation(
                    water_ml=self._parse_value(row, self._input_column, row_number),
                    moisture_pct=self._parse_value(row, self._target_column, row_number),
                )
            )

        if not observations:
            raise DataError("No observations found in CSV input")

        _LOGGER.debug(
            "Parsed %d observations from columns %s -> %s",
            len(observations),
            self._input_column,
            self._target_column,
        )
        return Dataset.from_sequence(observations)

    @staticmethod
    def _parse_value(row: dict[str, str | None], column: str, row_number: int) -> float:
        """Parse a numeric field, stripping whitespace and a trailing percent sign."""
        raw = (row.get(column) or "").strip()
        cleaned = raw.rstrip("%").strip()
        try:
            value = float(cleaned)
        except ValueError as e:
            raise DataError(
                f"Row {row_number}: column '{column}' is not numeric: {raw!r}"
            ) from e
        if not math.isfinite(value):
            raise DataError(f"Row {row_number}: column '{column}' is not finite: {raw!r}")
        return value
