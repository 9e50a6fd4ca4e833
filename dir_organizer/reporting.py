"""
Progress reporting collaborators.

The organizer only needs two calls, ``info`` and ``warn``. Anything that
provides them can be passed in, such as a logger wrapper or the CLI
spinner.
"""

import logging
import threading
from typing import List, Optional, Protocol, Tuple


class Reporter(Protocol):
    """Sink for progress and error messages."""

    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...


class LoggingReporter:
    """Forward messages to a standard logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("dir_organizer")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


class RecordingReporter:
    """Keep every message in memory, in the order received.

    Moves report from worker threads, so appends are guarded by a lock.
    """

    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []
        self._lock = threading.Lock()

    def info(self, message: str) -> None:
        with self._lock:
            self.messages.append(("info", message))

    def warn(self, message: str) -> None:
        with self._lock:
            self.messages.append(("warn", message))

    @property
    def infos(self) -> List[str]:
        with self._lock:
            return [msg for level, msg in self.messages if level == "info"]

    @property
    def warnings(self) -> List[str]:
        with self._lock:
            return [msg for level, msg in self.messages if level == "warn"]
