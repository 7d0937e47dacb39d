"""
Session cache for CodeAuth session tokens.

Holds the last known attributes of session tokens so that session info
lookups can skip the network. Entries are hints only: the CodeAuth
service stays the authority on whether a token is valid.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from ...logging_config import mask_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """Last known state of a session token."""

    email: str
    expiration: int
    refresh_left: int


class SessionCache:
    """
    Thread-safe mapping from session token to CacheEntry.

    Entries have no expiry of their own. They leave the cache through
    remove() when a token is invalidated or replaced, or all at once
    through clear_all() when the sweeper fires.
    """

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def try_get(self, token: str) -> Optional[CacheEntry]:
        """
        Look up a token without touching the network.

        Args:
            token: Session token

        Returns:
            Cached entry or None if not present
        """
        with self._lock:
            return self._entries.get(token)

    def put(self, token: str, entry: CacheEntry) -> CacheEntry:
        """
        Insert an entry only if the token is not cached yet.

        The first writer wins; a concurrent insert for the same token
        never overwrites the stored entry.

        Args:
            token: Session token
            entry: Attributes reported by the service

        Returns:
            The entry stored for the token after the call
        """
        with self._lock:
            stored = self._entries.setdefault(token, entry)

        if stored is not entry:
            logger.debug(f"Session {mask_token(token)} already cached, keeping existing entry")
        return stored

    def remove(self, token: str) -> bool:
        """
        Drop a token from the cache.

        Args:
            token: Session token

        Returns:
            True if an entry was removed
        """
        with self._lock:
            removed = self._entries.pop(token, None) is not None

        if removed:
            logger.debug(f"Evicted session {mask_token(token)} from cache")
        return removed

    def clear_all(self) -> int:
        """Empty the cache and return how many entries were evicted."""
        with self._lock:
            count = len(self._entries)
            self._entries = {}
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._entries
