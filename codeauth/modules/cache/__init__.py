"""
Cache Module - Black Box Interface

Purpose: Best-effort session metadata to short-circuit remote lookups
Interface: try_get(), put(), remove(), clear_all(), CacheSweeper
Hidden: Locking, storage layout, sweeper thread

Replaceable with any backend exposing the same insert-if-absent semantics.
"""

from .session_cache import CacheEntry, SessionCache
from .sweeper import CacheSweeper

__all__ = ["CacheEntry", "SessionCache", "CacheSweeper"]
