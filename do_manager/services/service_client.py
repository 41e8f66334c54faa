"""
Service Client - Backend selection for the service interfaces

This module builds the domains and regions services for the backend named in
the configuration: the DigitalOcean API or the in-memory mock.
"""

import logging
from typing import Dict, Optional, Tuple

from .api_service import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    APIClient,
    DomainsAPIService,
    RegionsAPIService,
)
from .base_service import DomainsService, RegionsService
from .mock_service import MockDomainsService, MockRegionsService
from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)

BACKENDS = ("api", "mock")


class ServiceClient:
    """Gives commands access to the services of one backend."""

    def __init__(self, config: Dict, services: Optional[Tuple] = None):
        """Initialize service client with configuration or prebuilt services."""
        self.config = config
        if services is not None:
            self.backend = "custom"
            self.domains, self.regions = services
            return

        self.backend = config.get("default_backend", "api")
        self.domains, self.regions = self._get_services()

    def _get_services(self):
        """Build the services for the configured backend."""
        if self.backend == "api":
            access_token = self.config.get("access_token")
            if not access_token:
                raise ConfigurationError(
                    "no access token configured; set DIGITALOCEAN_ACCESS_TOKEN, "
                    "pass --access-token or add access_token to the config file"
                )
            client = APIClient(
                access_token,
                api_url=self.config.get("api_url") or DEFAULT_API_URL,
                timeout=self.config.get("timeout") or DEFAULT_TIMEOUT,
            )
            logger.info(f"Using DigitalOcean API at {client.api_url}")
            return DomainsAPIService(client), RegionsAPIService(client)

        if self.backend == "mock":
            mock_config = self.config.get("mock", {})
            logger.info("Using mock backend")
            return MockDomainsService(mock_config), MockRegionsService(mock_config)

        raise ConfigurationError(
            f"unknown backend '{self.backend}', expected one of: {', '.join(BACKENDS)}"
        )

    @classmethod
    def from_services(
        cls, domains: DomainsService, regions: RegionsService = None
    ) -> "ServiceClient":
        """Wrap already built services, e.g. mocks set up by a test."""
        if regions is None:
            regions = MockRegionsService()
        return cls({}, services=(domains, regions))
