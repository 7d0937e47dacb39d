"""
CodeAuth Factory following Black Box Design principles.

This factory:
- Reads configuration from a provider
- Wires the cache and transport into the service
- Returns an initialized CodeAuth facade
"""

import logging
from typing import Optional

import httpx

from ...config.provider import ConfigProvider
from .service import CodeAuth

logger = logging.getLogger(__name__)


class CodeAuthFactory:
    """
    Factory for building the CodeAuth client.

    This is the composition root that:
    - Creates the client with its dependencies
    - Applies configuration through initialize()
    - Returns only the public interface
    """

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        http_client: Optional[httpx.AsyncClient] = None
    ) -> CodeAuth:
        """
        Build an initialized CodeAuth client.

        Args:
            config_provider: Configuration provider
            http_client: Optional shared httpx client

        Returns:
            Initialized CodeAuth client
        """
        config = config_provider.get_codeauth_config()

        if config.use_cache:
            logger.info("Building CodeAuth client with session cache")
        else:
            logger.info("Building CodeAuth client without session cache")

        client = CodeAuth(http_client=http_client)
        client.initialize_from_config(config)
        return client
