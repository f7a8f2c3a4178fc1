"""
OTUN - Progress Reporter
Spinner status line showing which stage of the run is active.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


SPINNER_CHARS = "/-\\|"
REDRAW_DELAY = 0.04

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_LINE = "\r\033[K"


class ProgressReporter:
    """
    Redraws "<glyph> <label>" from a background thread until stopped.

    The pipeline is the only writer of the label and the thread the only
    reader; replacing the string reference is enough to hand it over.
    Use it as a context manager so stop() runs on every exit path.
    """

    def __init__(self, stream: Optional[TextIO] = None, enabled: Optional[bool] = None):
        """
        Initialize the reporter.

        Args:
            stream: Where to draw. Defaults to stdout.
            enabled: Draw at all. Defaults to whether the stream is a terminal.
        """
        self.stream = stream or sys.stdout
        if enabled is None:
            isatty = getattr(self.stream, "isatty", None)
            enabled = bool(isatty and isatty())
        self.enabled = enabled
        self.label = ""
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._cursor_hidden = False
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, label: str = "") -> None:
        """Start the spinner thread with an initial label."""
        self.set_label(label)
        if not self.enabled or self.running:
            return
        self._stop_event.clear()
        # Set before writing so stop() restores the cursor even if start() is interrupted
        self._cursor_hidden = True
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()
        self._thread = threading.Thread(target=self._spin, name="otun-progress", daemon=True)
        self._thread.start()

    def set_label(self, label: str) -> None:
        """Replace the label shown on the next redraw."""
        logger.debug(f"Stage: {label}")
        self.label = label

    def stop(self) -> None:
        """Stop the spinner and restore a clean terminal line. Safe to call repeatedly."""
        with self._lock:
            thread = self._thread
            if thread is None and not self._cursor_hidden:
                return
            self._stop_event.set()
            if thread is not None:
                thread.join()
            self.stream.write(CLEAR_LINE + SHOW_CURSOR)
            self.stream.flush()
            # Cleared last so an interrupted stop() is redone by the next call
            self._thread = None
            self._cursor_hidden = False

    def _spin(self) -> None:
        i = 0
        while not self._stop_event.is_set():
            self.stream.write(f"{CLEAR_LINE}{SPINNER_CHARS[i]} {self.label}")
            self.stream.flush()
            i = (i + 1) % len(SPINNER_CHARS)
            self._stop_event.wait(REDRAW_DELAY)

    def __enter__(self) -> "ProgressReporter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
