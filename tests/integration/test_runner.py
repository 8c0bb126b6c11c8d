"""Integration tests for the command-line runner."""

import io
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from domain.exceptions import RenderError
from domain.interfaces import IReportWriter
from domain.value_objects import Dataset, EvaluationReport, PipelineConfig
from infrastructure.adapters import ConsoleReportWriter, CsvObservationSource
from infrastructure.cli import runner


class RecordingReportWriter(IReportWriter):
    """Report writer that records what it was asked to write."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def write_raw_data(self, dataset: Dataset) -> None:
        self.calls.append("raw_data")

    def write_report(self, report: EvaluationReport) -> None:
        self.calls.append("report")

    def write_message(self, message: str) -> None:
        self.calls.append(message)


class TestRunner:
    """Tests for the runner exit statuses and output."""

    def test_successful_run(self, config: PipelineConfig) -> None:
        """Test a complete run writing the report and the plot."""
        stream = io.StringIO()

        status = runner.run(config, writer=ConsoleReportWriter(stream), show_progress=False)

        assert status == runner.EXIT_OK
        output = stream.getvalue()
        assert output.index("=== Raw Data ===") < output.index("=== Training Models ===")
        assert output.index("=== SVR Predictions ===") < output.index(
            "=== K-Means Predictions ==="
        )
        assert f"Plot saved as {config.plot_path}" in output
        assert Path(config.plot_path).read_bytes()[:4] == b"\x89PNG"

    def test_bad_data_returns_pipeline_error(
        self, config: PipelineConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that malformed data ends the run before any report."""
        stream = io.StringIO()
        source = CsvObservationSource(
            "water,moisture\n1,dry\n", input_column="water", target_column="moisture"
        )

        with caplog.at_level(logging.ERROR):
            status = runner.run(
                config, source=source, writer=ConsoleReportWriter(stream), show_progress=False
            )

        assert status == runner.EXIT_PIPELINE_ERROR
        assert stream.getvalue() == ""
        assert "not numeric" in caplog.text
        assert not Path(config.plot_path).exists()

    def test_unwritable_plot_returns_render_error(self, tmp_path: Path) -> None:
        """Test that the report is still printed when the plot fails."""
        config = PipelineConfig(plot_path=str(tmp_path / "missing" / "plot.png"))
        stream = io.StringIO()

        status = runner.run(config, writer=ConsoleReportWriter(stream), show_progress=False)

        assert status == runner.EXIT_RENDER_ERROR
        output = stream.getvalue()
        assert "=== K-Means Predictions ===" in output
        assert "Plot saved as" not in output

    def test_renderer_failure_is_reported_after_report(self, config: PipelineConfig) -> None:
        """Test that a backend failure maps to the render exit status."""
        stream = io.StringIO()

        with patch.object(
            runner.MatplotlibPlotRenderer,
            "render",
            side_effect=RenderError("backend unavailable"),
        ) as mock_render:
            status = runner.run(config, writer=ConsoleReportWriter(stream), show_progress=False)

        assert status == runner.EXIT_RENDER_ERROR
        mock_render.assert_called_once()
        assert "=== SVR Predictions ===" in stream.getvalue()

    def test_run_accepts_any_report_writer(self, config: PipelineConfig) -> None:
        """Test that run only relies on the IReportWriter contract."""
        writer = RecordingReportWriter()

        status = runner.run(config, writer=writer, show_progress=False)

        assert status == runner.EXIT_OK
        assert writer.calls[:2] == ["raw_data", "\n=== Training Models ==="]
        assert writer.calls[2] == "report"
        assert writer.calls[-1] == f"\nPlot saved as {config.plot_path}"

    def test_load_config_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the PLOT_OUTPUT_PATH override."""
        target = str(tmp_path / "out.png")
        monkeypatch.setenv("PLOT_OUTPUT_PATH", target)

        assert runner.load_config().plot_path == target

    def test_load_config_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default plot destination."""
        monkeypatch.delenv("PLOT_OUTPUT_PATH", raising=False)
        assert runner.load_config().plot_path == "plot.png"

    def test_main_rejects_invalid_configuration(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that an empty PLOT_OUTPUT_PATH is logged, not raised."""
        monkeypatch.setenv("PLOT_OUTPUT_PATH", "")

        with caplog.at_level(logging.ERROR):
            status = runner.main()

        assert status == runner.EXIT_PIPELINE_ERROR
        assert "Invalid configuration: plot_path cannot be empty" in caplog.text

    def test_main_runs_in_working_directory(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test the argument-free entry point."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PLOT_OUTPUT_PATH", raising=False)

        assert runner.main() == runner.EXIT_OK
        assert (tmp_path / "plot.png").exists()
        assert "Plot saved as plot.png" in capsys.readouterr().out
