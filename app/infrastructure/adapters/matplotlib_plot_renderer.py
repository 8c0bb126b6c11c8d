"""Matplotlib plot renderer adapter.

Infrastructure adapter that implements IPlotRenderer with a headless
matplotlib backend.
"""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from domain.exceptions import RenderError  # noqa: E402
from domain.interfaces import IPlotRenderer  # noqa: E402
from domain.value_objects import EvaluationReport, PipelineConfig  # noqa: E402

_LOGGER = logging.getLogger(__name__)


class MatplotlibPlotRenderer(IPlotRenderer):
    """Scatter-plot renderer for raw data, SVR predictions and clusters.

    Cluster assignments are drawn at each test observation's own
    ``(input, observed_target)`` position.
    """

    DPI = 100
    AXIS_RANGE = (0.0, 100.0)
    CLUSTER_COLORS = ("green", "magenta", "cyan")

    def __init__(
        self,
        output_path: str | Path = "plot.png",
        width: int = 800,
        height: int = 600,
    ) -> None:
        """Initialize the renderer.

        Args:
            output_path: Destination PNG file
            width: Image width in pixels
            height: Image height in pixels
        """
        if width < 1 or height < 1:
            raise ValueError(f"plot size must be positive, got {width}x{height}")
        self._output_path = Path(output_path)
        self._width = width
        self._height = height

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "MatplotlibPlotRenderer":
        """Create a renderer from the pipeline configuration."""
        return cls(
            output_path=config.plot_path,
            width=config.plot_width,
            height=config.plot_height,
        )

    @property
    def output_path(self) -> Path:
        """Return the destination file."""
        return self._output_path

    def render(self, report: EvaluationReport) -> str:
        """Render the three point sets to a PNG file.

        Args:
            report: Evaluation report providing the point sets

        Returns:
            Path of the written image

        Raises:
            RenderError: If the image cannot be written
        """
        fig, ax = plt.subplots(
            figsize=(self._width / self.DPI, self._height / self.DPI),
            dpi=self.DPI,
        )
        try:
            self._draw(ax, report)
            fig.savefig(self._output_path, dpi=self.DPI, format="png")
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to render plot to {self._output_path}: {e}") from e
        finally:
            plt.close(fig)

        _LOGGER.info("Plot saved to %s", self._output_path)
        return str(self._output_path)

    def _draw(self, ax: plt.Axes, report: EvaluationReport) -> None:
        """Draw series, axes and legend."""
        ax.set_title("Model Prediction Results", fontsize=16)
        ax.set_xlim(*self.AXIS_RANGE)
        ax.set_ylim(*self.AXIS_RANGE)
        ax.set_xlabel("Water Added (mL)")
        ax.set_ylabel("Sensor Moisture (%)")
        ax.grid(True, alpha=0.3)

        raw_x, raw_y = zip(*report.raw_points)
        ax.scatter(raw_x, raw_y, s=50, color="blue", label="Raw Data", zorder=2)

        if report.regression_points:
            svr_x, svr_y = zip(*report.regression_points)
            ax.scatter(svr_x, svr_y, s=50, color="red", label="SVR Prediction", zorder=3)

        if report.cluster_points:
            cluster_x, cluster_y, cluster_ids = zip(*report.cluster_points)
            colors = [
                self.CLUSTER_COLORS[cluster_id % len(self.CLUSTER_COLORS)]
                for cluster_id in cluster_ids
            ]
            ax.scatter(
                cluster_x,
                cluster_y,
                s=100,
                marker="^",
                c=colors,
                label="K-Means Prediction",
                zorder=4,
            )

        ax.legend(loc="upper left", facecolor="white", framealpha=0.8, edgecolor="black")
