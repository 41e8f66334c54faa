"""
DigitalOcean Resource Manager - Command line access to the DigitalOcean API

Manage domains, domain records and regions from the shell, against the
live API or an in-memory mock backend.
"""

__version__ = "1.0.0"
__author__ = "DigitalOcean Resource Manager Team"
__description__ = "Command line client for the DigitalOcean domains, records and regions API"

from .core.models import Domain, DomainRecord, Region
from .services.service_client import ServiceClient

__all__ = [
    "Domain",
    "DomainRecord",
    "Region",
    "ServiceClient",
]
