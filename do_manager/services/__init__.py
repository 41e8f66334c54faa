"""
Service implementations.

This package contains the service interfaces and their implementations
for the DigitalOcean API and an in-memory mock.
"""

from .base_service import DomainsService, RegionsService
from .api_service import APIClient, DomainsAPIService, RegionsAPIService
from .mock_service import MockDomainsService, MockRegionsService
from .service_client import ServiceClient

__all__ = [
    "DomainsService",
    "RegionsService",
    "APIClient",
    "DomainsAPIService",
    "RegionsAPIService",
    "MockDomainsService",
    "MockRegionsService",
    "ServiceClient",
]
