"""Command-line runner.

Argument-free entry point: loads the calibration data, fits both models,
prints the report and renders the scatter plot.
"""

import logging
import os
import sys
from pathlib import Path

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import MoisturePipelineService  # noqa: E402
from domain.exceptions import DataError, FitError, RenderError  # noqa: E402
from domain.interfaces import IObservationSource, IReportWriter  # noqa: E402
from domain.value_objects import PipelineConfig  # noqa: E402
from infrastructure.adapters import (  # noqa: E402
    ConsoleReportWriter,
    CsvObservationSource,
    LloydKMeansTrainer,
    MatplotlibPlotRenderer,
    SklearnMetricsCalculator,
    SklearnSVRTrainer,
    ThreadedProgressIndicator,
)

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PIPELINE_ERROR = 1
EXIT_RENDER_ERROR = 2


def configure_logging() -> None:
    """Configure logging from the LOG_LEVEL environment variable."""
    log_level = os.getenv("LOG_LEVEL", "info").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_config() -> PipelineConfig:
    """Build the pipeline configuration from defaults and environment."""
    return PipelineConfig(plot_path=os.getenv("PLOT_OUTPUT_PATH", "plot.png"))


def build_service(
    config: PipelineConfig,
    show_progress: bool = True,
) -> MoisturePipelineService:
    """Wire the pipeline service with its infrastructure adapters."""
    return MoisturePipelineService(
        regression_trainer=SklearnSVRTrainer.from_config(config),
        cluster_trainer=LloydKMeansTrainer.from_config(config),
        config=config,
        progress_indicator=ThreadedProgressIndicator() if show_progress else None,
        metrics_calculator=SklearnMetricsCalculator(),
    )


def run(
    config: PipelineConfig,
    source: IObservationSource | None = None,
    writer: IReportWriter | None = None,
    show_progress: bool = True,
) -> int:
    """Run the pipeline once and return a process exit status."""
    source = source or CsvObservationSource()
    writer = writer or ConsoleReportWriter()
    service = build_service(config, show_progress=show_progress)

    try:
        dataset = source.load()
        writer.write_raw_data(dataset)
        writer.write_message("\n=== Training Models ===")
        report = service.run(dataset)
    except (DataError, FitError) as e:
        _LOGGER.error("Modeling run failed: %s", e)
        return EXIT_PIPELINE_ERROR

    writer.write_report(report)

    try:
        plot_path = MatplotlibPlotRenderer.from_config(config).render(report)
    except RenderError as e:
        _LOGGER.error("Report completed but the plot could not be rendered: %s", e)
        return EXIT_RENDER_ERROR

    writer.write_message(f"\nPlot saved as {plot_path}")
    return EXIT_OK


def main() -> int:
    """Main entry point for the runner."""
    configure_logging()
    try:
        config = load_config()
    except ValueError as e:
        _LOGGER.error("Invalid configuration: %s", e)
        return EXIT_PIPELINE_ERROR

    _LOGGER.info("Starting soil moisture modeling run (plot: %s)", config.plot_path)
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
