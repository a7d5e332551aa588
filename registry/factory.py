"""
Registry Factory

Factory pattern for creating registry client implementations.
Follows same pattern as media/factory.py for consistency.

Automatically configures from environment variables.
"""

import logging
from typing import Literal, Optional

from config.settings import HTTP_TIMEOUT, REGISTRY_DATA_METHOD, REGISTRY_SERVER_URL
from registry.implementations.http_registry import HttpRegistryClient
from registry.implementations.mock_registry import MockRegistryClient
from registry.interfaces.registry_interface import RegistryClientInterface

# Type alias
RegistryMode = Literal["auto", "http", "mock"]


class RegistryFactory:
    """
    Factory for creating registry client implementations.

    Reads configuration from environment variables:
    - REGISTRY_SERVER_URL: Base URL of the Video Registry
    - REGISTRY_DATA_METHOD: POST or PUT for data uploads
    - HTTP_TIMEOUT: Per-request timeout

    Usage:
        # Auto-detect from environment
        client = RegistryFactory.create_client()

        # Force mock for testing
        client = RegistryFactory.create_client(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_client(
        cls,
        mode: RegistryMode = "auto",
        server_url: Optional[str] = None,
        timeout: Optional[float] = None,
        data_method: Optional[str] = None,
    ) -> RegistryClientInterface:
        """
        Create a registry client instance.

        Args:
            mode: "auto" (from env), "http" (force real), "mock" (force sim)
            server_url: Override REGISTRY_SERVER_URL
            timeout: Override HTTP_TIMEOUT
            data_method: Override REGISTRY_DATA_METHOD

        Returns:
            RegistryClientInterface implementation

        Raises:
            RuntimeError: If mode="http" but the client cannot be configured
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Registry client (forced)")
            return MockRegistryClient()

        if mode == "http":
            try:
                client = cls._create_http_client(server_url, timeout, data_method)
                cls._logger.info("Creating HTTP Registry client (forced)")
                return client
            except ValueError as e:
                raise RuntimeError(
                    f"HTTP registry client requested but not available: {e}"
                ) from e

        # mode == "auto" - try HTTP first, fall back to mock
        try:
            client = cls._create_http_client(server_url, timeout, data_method)
            cls._logger.info("Creating HTTP Registry client (auto-detected)")
            return client
        except ValueError as e:
            cls._logger.warning(
                f"HTTP registry client not available ({e}), using Mock Registry"
            )
            return MockRegistryClient()

    @classmethod
    def _create_http_client(
        cls,
        server_url: Optional[str],
        timeout: Optional[float],
        data_method: Optional[str],
    ) -> HttpRegistryClient:
        url = server_url or REGISTRY_SERVER_URL
        if not url:
            raise ValueError(
                "REGISTRY_SERVER_URL not set in environment. "
                "Add to .env file: REGISTRY_SERVER_URL=http://host:port"
            )

        return HttpRegistryClient(
            server_url=url,
            timeout=timeout or HTTP_TIMEOUT,
            data_method=data_method or REGISTRY_DATA_METHOD,
        )


# Convenience function for quick creation
def create_registry_client(
    force_mock: bool = False,
    server_url: Optional[str] = None,
) -> RegistryClientInterface:
    """
    Quick registry client creation with simple mock override.

    Example:
        client = create_registry_client()
        client = create_registry_client(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return RegistryFactory.create_client(mode=mode, server_url=server_url)
