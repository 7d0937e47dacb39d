"""
Config Module - Black Box Interface

Purpose: SDK configuration management
Interface: CodeAuthConfig, EnvConfigProvider, StaticConfigProvider
Hidden: Environment parsing, validation logic

Can be replaced with any provider that returns a CodeAuthConfig.
"""

from .provider import (
    CodeAuthConfig,
    ConfigProvider,
    EnvConfigProvider,
    StaticConfigProvider,
    validate_cache_duration,
)

__all__ = [
    "CodeAuthConfig",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "validate_cache_duration",
]
