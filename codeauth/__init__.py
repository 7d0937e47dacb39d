"""
CodeAuth - Python SDK for the CodeAuth authentication service

Signs users in by email or social OAuth2 and manages their session tokens,
caching session metadata to save round trips and soften rate limits.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- auth: CodeAuth client facade and one-shot initialization
- cache: Session cache and its periodic sweeper
- request: HTTP request execution and outcome classification
- api: Wire models, results and error codes
"""

from typing import Optional

from .config.provider import CodeAuthConfig, EnvConfigProvider
from .modules.api import ErrorCode, InvalidateType, SocialType
from .modules.auth import (
    AlreadyInitializedError,
    CodeAuth,
    CodeAuthError,
    CodeAuthFactory,
    NotInitializedError,
)

__version__ = "1.0.0"

# Process-wide default client
_instance: Optional[CodeAuth] = None


def get_client() -> CodeAuth:
    """Get the process-wide default CodeAuth client (initialize it before use)."""
    global _instance
    if _instance is None:
        _instance = CodeAuth()
    return _instance


__all__ = [
    "CodeAuth",
    "CodeAuthConfig",
    "CodeAuthFactory",
    "EnvConfigProvider",
    "ErrorCode",
    "SocialType",
    "InvalidateType",
    "CodeAuthError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "get_client",
]
