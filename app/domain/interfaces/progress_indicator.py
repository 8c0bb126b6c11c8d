"""Progress indicator interface.

Contract for cosmetic feedback during long-running fits.
"""

from abc import ABC, abstractmethod


class IProgressIndicator(ABC):
    """Contract for a start/stop progress indicator.

    Implementations must not touch model state; stopping must guarantee
    that any background activity has terminated.
    """

    @abstractmethod
    def start(self) -> None:
        """Start displaying progress."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop displaying progress and wait for it to finish."""
        pass

    def __enter__(self) -> "IProgressIndicator":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
