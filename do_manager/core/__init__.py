"""
Core command functionality.

This package contains the data model, error kinds and command handlers.
"""

from .errors import (
    APIError,
    ConfigurationError,
    DOManagerError,
    InvalidInputError,
    MissingArgumentsError,
    NotFoundError,
)
from .models import (
    Domain,
    DomainCreateRequest,
    DomainRecord,
    DomainRecordEditRequest,
    Region,
)

__all__ = [
    "APIError",
    "ConfigurationError",
    "DOManagerError",
    "InvalidInputError",
    "MissingArgumentsError",
    "NotFoundError",
    "Domain",
    "DomainCreateRequest",
    "DomainRecord",
    "DomainRecordEditRequest",
    "Region",
]
