"""Service interfaces following Black Box Design principles."""
from typing import Optional, Protocol, Type

from pydantic import BaseModel

from ..api.models import ApiPath
from ..cache.session_cache import CacheEntry
from ..request.executor import ApiOutcome


class RequestSender(Protocol):
    """Protocol for API transport - allows swappable implementations."""

    async def call(
        self,
        path: ApiPath,
        body: BaseModel,
        payload_model: Optional[Type[BaseModel]] = None
    ) -> ApiOutcome:
        """
        Send one request.

        Returns:
            ApiOutcome; transport failures are reported, never raised
        """
        ...


class SessionStore(Protocol):
    """Protocol for session caches."""

    def try_get(self, token: str) -> Optional[CacheEntry]:
        ...

    def put(self, token: str, entry: CacheEntry) -> CacheEntry:
        """Insert only if absent; returns the stored entry."""
        ...

    def remove(self, token: str) -> bool:
        ...

    def clear_all(self) -> int:
        ...
