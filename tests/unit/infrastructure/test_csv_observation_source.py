"""Tests for the CSV observation source adapter."""

from pathlib import Path

import pytest
from domain.exceptions import DataError
from infrastructure.adapters import CALIBRATION_CSV, CsvObservationSource


class TestCsvObservationSource:
    """Tests for CsvObservationSource."""

    def test_embedded_calibration_data(self) -> None:
        """Test that the built-in records load as the canonical observations."""
        dataset = CsvObservationSource().load()

        assert dataset.size == 11
        assert dataset.pairs()[:3] == [(0.0, 0.96), (10.0, 10.95), (20.0, 29.97)]
        assert dataset.pairs()[-1] == (100.0, 85.45)

    def test_percent_signs_and_whitespace_are_stripped(self) -> None:
        """Test value normalization."""
        text = "water,moisture\n 10 , 12.5% \n20,  30 %\n"
        source = CsvObservationSource(text, input_column="water", target_column="moisture")

        assert source.load().pairs() == [(10.0, 12.5), (20.0, 30.0)]

    def test_header_names_are_stripped(self) -> None:
        """Test that padded header names still match."""
        text = " water ; moisture \n1;2\n"
        source = CsvObservationSource(
            text, input_column="water", target_column="moisture", delimiter=";"
        )

        assert source.load().pairs() == [(1.0, 2.0)]

    def test_blank_lines_are_skipped(self) -> None:
        """Test that empty records are ignored."""
        text = "water,moisture\n1,2\n\n,\n3,4\n"
        source = CsvObservationSource(text, input_column="water", target_column="moisture")

        assert source.load().size == 2

    def test_missing_column_raises_error(self) -> None:
        """Test that an unknown column is reported."""
        source = CsvObservationSource(CALIBRATION_CSV, target_column="humidity")
        with pytest.raises(DataError, match="Missing column 'humidity'"):
            source.load()

    def test_non_numeric_value_raises_error(self) -> None:
        """Test that a malformed field reports its row and column."""
        text = "water,moisture\n1,2\n3,wet\n"
        source = CsvObservationSource(text, input_column="water", target_column="moisture")
        with pytest.raises(DataError, match="Row 2: column 'moisture' is not numeric"):
            source.load()

    def test_non_finite_value_raises_error(self) -> None:
        """Test that infinities are rejected."""
        text = "water,moisture\ninf,2\n"
        source = CsvObservationSource(text, input_column="water", target_column="moisture")
        with pytest.raises(DataError, match="is not finite"):
            source.load()

    def test_header_only_raises_error(self) -> None:
        """Test that a file without records is rejected."""
        source = CsvObservationSource(
            "water,moisture\n", input_column="water", target_column="moisture"
        )
        with pytest.raises(DataError, match="No observations found"):
            source.load()

    def test_from_path(self, tmp_path: Path) -> None:
        """Test loading records from a file."""
        csv_file = tmp_path / "calibration.csv"
        csv_file.write_text(CALIBRATION_CSV, encoding="utf-8")

        dataset = CsvObservationSource.from_path(csv_file).load()

        assert dataset.size == 11
        assert dataset.inputs[-1] == 100.0

    def test_from_missing_path_raises_error(self, tmp_path: Path) -> None:
        """Test that an unreadable file is reported as DataError."""
        with pytest.raises(DataError, match="Cannot read observations"):
            CsvObservationSource.from_path(tmp_path / "missing.csv")
