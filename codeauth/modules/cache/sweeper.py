"""
Background sweeper that periodically flushes the session cache.
"""

import logging
import threading
from typing import Optional

from .session_cache import SessionCache

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Clears a SessionCache every `interval` seconds on a daemon thread."""

    def __init__(self, cache: SessionCache, interval: float):
        """
        Initialize the sweeper.

        Args:
            cache: Cache to flush
            interval: Seconds between two full clears
        """
        self.cache = cache
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the sweeper thread. A sweeper can only be started once."""
        if self._thread is not None:
            raise RuntimeError("Cache sweeper has already been started")

        self._thread = threading.Thread(
            target=self._run, name="codeauth-cache-sweeper", daemon=True
        )
        self._thread.start()
        logger.info(f"Session cache sweeper started (clearing every {self.interval}s)")

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """Stop the sweeper thread. Safe to call more than once."""
        self._stop_event.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout)
            logger.info("Session cache sweeper stopped")

    def _run(self) -> None:
        # wait() returns True only once stop() has been called
        while not self._stop_event.wait(self.interval):
            evicted = self.cache.clear_all()
            logger.debug(f"Session cache cleared ({evicted} entries evicted)")
