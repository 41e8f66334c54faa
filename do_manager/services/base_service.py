"""
Base service interfaces.

This module defines the abstract base classes that every backend
(the HTTP API client and the in-memory mock) must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import (
    Domain,
    DomainCreateRequest,
    DomainRecord,
    DomainRecordEditRequest,
    Region,
)


class DomainsService(ABC):
    """Abstract base class for domain and domain record operations."""

    @abstractmethod
    def list(self) -> List[Domain]:
        """List all domains."""
        pass

    @abstractmethod
    def get(self, name: str) -> Domain:
        """Get a domain by name."""
        pass

    @abstractmethod
    def create(self, request: DomainCreateRequest) -> Domain:
        """Create a new domain."""
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete a domain by name."""
        pass

    @abstractmethod
    def records(self, domain_name: str) -> List[DomainRecord]:
        """List the records of a domain."""
        pass

    @abstractmethod
    def create_record(
        self, domain_name: str, request: DomainRecordEditRequest
    ) -> DomainRecord:
        """Create a record in a domain."""
        pass

    @abstractmethod
    def edit_record(
        self, domain_name: str, record_id: int, request: DomainRecordEditRequest
    ) -> DomainRecord:
        """Update an existing record."""
        pass

    @abstractmethod
    def delete_record(self, domain_name: str, record_id: int) -> None:
        """Delete a record from a domain."""
        pass


class RegionsService(ABC):
    """Abstract base class for region operations."""

    @abstractmethod
    def list(self) -> List[Region]:
        """List all regions."""
        pass
