"""Configuration provider following Black Box Design principles."""
import logging
import os
from dataclasses import dataclass
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

# Below this the sweeper clears too often to dampen most rate limits
MIN_EFFECTIVE_CACHE_DURATION = 15


@dataclass
class CodeAuthConfig:
    """CodeAuth SDK configuration."""
    endpoint: Optional[str]
    project_id: Optional[str]
    use_cache: bool = True
    cache_duration: int = 30
    request_timeout: float = 5.0

    @property
    def is_configured(self) -> bool:
        """Check if the remote project is properly configured."""
        return bool(self.endpoint) and bool(self.project_id)


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_codeauth_config(self) -> CodeAuthConfig:
        """Get CodeAuth configuration."""
        ...


class StaticConfigProvider:
    """Provider that hands out a ready-made configuration."""

    def __init__(self, config: CodeAuthConfig):
        self._config = config

    def get_codeauth_config(self) -> CodeAuthConfig:
        return self._config


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_codeauth_config(self) -> CodeAuthConfig:
        """Get CodeAuth configuration from environment variables."""
        endpoint = os.getenv("CODEAUTH_ENDPOINT")
        project_id = os.getenv("CODEAUTH_PROJECT_ID")

        # Endpoint and project are required - there is no sensible default
        missing = [
            name
            for name, value in (("CODEAUTH_ENDPOINT", endpoint), ("CODEAUTH_PROJECT_ID", project_id))
            if not value
        ]
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Both values can be found inside your CodeAuth project settings."
            )

        return CodeAuthConfig(
            endpoint=endpoint,
            project_id=project_id,
            use_cache=os.getenv("CODEAUTH_USE_CACHE", "true").lower() == "true",
            cache_duration=int(os.getenv("CODEAUTH_CACHE_DURATION", "30")),
            request_timeout=float(os.getenv("CODEAUTH_REQUEST_TIMEOUT", "5.0")),
        )


def validate_cache_duration(cache_duration: int) -> int:
    """
    Validate the sweeper interval.

    Args:
        cache_duration: Seconds between full cache clears

    Returns:
        The validated duration

    Raises:
        ValueError: If the duration is not positive
    """
    if cache_duration <= 0:
        raise ValueError(f"cache_duration must be positive, got {cache_duration}")

    if cache_duration < MIN_EFFECTIVE_CACHE_DURATION:
        logger.warning(
            f"cache_duration of {cache_duration}s is below {MIN_EFFECTIVE_CACHE_DURATION}s "
            "and will not effectively mitigate rate limits"
        )
    return cache_duration
