"""Report writer interface.

Contract for textual reporting of a run.
"""

from abc import ABC, abstractmethod

from domain.value_objects import Dataset, EvaluationReport


class IReportWriter(ABC):
    """Contract for textual report output."""

    @abstractmethod
    def write_raw_data(self, dataset: Dataset) -> None:
        """Write the full dataset as a table.

        Args:
            dataset: Observations to display
        """
        pass

    @abstractmethod
    def write_report(self, report: EvaluationReport) -> None:
        """Write the prediction tables of a run.

        Args:
            report: Evaluation report to display
        """
        pass

    @abstractmethod
    def write_message(self, message: str) -> None:
        """Write a single free-form line (e.g. a section banner).

        Args:
            message: Text to display
        """
        pass
