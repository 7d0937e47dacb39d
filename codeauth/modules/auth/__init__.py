"""
Authentication Module - Black Box Interface

Purpose: Sign users in and manage their session tokens through CodeAuth
Interface: initialize(), sign_in_*(), session_info(), session_refresh(), session_invalidate()
Hidden: Request building, cache consistency rules, sweeper lifecycle

This module can be backed by any RequestSender / SessionStore without
affecting callers.
"""

from .errors import AlreadyInitializedError, CodeAuthError, NotInitializedError
from .factory import CodeAuthFactory
from .service import CodeAuth

__all__ = [
    "CodeAuth",
    "CodeAuthFactory",
    "CodeAuthError",
    "NotInitializedError",
    "AlreadyInitializedError",
]
