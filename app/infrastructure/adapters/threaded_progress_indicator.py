"""Threaded progress indicator adapter.

Infrastructure adapter that implements IProgressIndicator with a
background thread redrawing an animated line.
"""

import sys
import threading
from typing import TextIO

from domain.interfaces import IProgressIndicator


class ThreadedProgressIndicator(IProgressIndicator):
    """Animated "working..." line drawn from a background thread.

    The thread shares nothing with the caller except a stop event, and
    stop() joins it before returning.
    """

    def __init__(
        self,
        message: str = "Training K-Means",
        interval: float = 0.5,
        stream: TextIO | None = None,
        done_message: str | None = None,
    ) -> None:
        """Initialize the indicator.

        Args:
            message: Text shown while running
            interval: Seconds between redraws
            stream: Output stream (defaults to stdout)
            done_message: Text shown once stopped
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._message = message
        self._interval = interval
        self._stream = stream or sys.stdout
        self._done_message = done_message or f"{message} done!"
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Return True while the background thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread (no-op if already running)."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._animate,
            name="progress-indicator",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the thread to stop and wait until it has terminated."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None

    def _animate(self) -> None:
        dots = 0
        while not self._stop_event.is_set():
            self._stream.write(f"\r{self._message}{'.' * dots}   ")
            self._stream.flush()
            dots = (dots + 1) % 4
            self._stop_event.wait(self._interval)
        # Pad to overwrite the longest animated frame
        self._stream.write(f"\r{self._done_message}        \n")
        self._stream.flush()
