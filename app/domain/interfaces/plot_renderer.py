"""Plot renderer interface.

Contract for rendering the run's point sets to an image.
"""

from abc import ABC, abstractmethod

from domain.value_objects import EvaluationReport


class IPlotRenderer(ABC):
    """Contract for visualization output."""

    @abstractmethod
    def render(self, report: EvaluationReport) -> str:
        """Render raw points, regression predictions and cluster assignments.

        Args:
            report: Evaluation report providing the three point sets

        Returns:
            Path of the written image

        Raises:
            RenderError: If the image cannot be produced
        """
        pass
