"""
Mock services for testing and demonstration.

The mock services keep domains, records and regions in memory, record every
call made to them and can be told to fail or to return canned values, so
commands can be verified without a live network.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .base_service import DomainsService, RegionsService
from ..core.errors import APIError, NotFoundError
from ..core.models import (
    Domain,
    DomainCreateRequest,
    DomainRecord,
    DomainRecordEditRequest,
    Region,
)
from ..utils.validators import sanitize_fqdn

logger = logging.getLogger(__name__)

_UNSET = object()


class MockService:
    """Call recording and canned behaviour shared by the mock services."""

    def __init__(self):
        self.calls: List[Tuple[str, Tuple]] = []
        self._failures: Dict[str, List[Tuple[Exception, Optional[Callable]]]] = {}
        self._returns: Dict[str, Any] = {}

    def fail_with(
        self, method: str, error: Exception, when: Optional[Callable[..., bool]] = None
    ):
        """Make ``method`` raise ``error``, optionally only when ``when(*args)`` holds."""
        self._failures.setdefault(method, []).append((error, when))
        return self

    def returns(self, method: str, value: Any):
        """Make ``method`` return ``value`` instead of consulting the store."""
        self._returns[method] = value
        return self

    def calls_to(self, method: str) -> List[Tuple]:
        """Arguments of every call made to ``method``, in order."""
        return [args for name, args in self.calls if name == method]

    def _called(self, method: str, *args) -> Any:
        self.calls.append((method, args))
        logger.debug(f"Mock: {method}{args}")

        for error, when in self._failures.get(method, []):
            if when is None or when(*args):
                raise error

        return self._returns.get(method, _UNSET)


class MockDomainsService(MockService, DomainsService):
    """In-memory domains service."""

    def __init__(self, config: Dict = None):
        """Initialize mock domains service."""
        super().__init__()
        self.domains: List[Domain] = []
        self.records_by_domain: Dict[str, List[DomainRecord]] = {}
        self._next_record_id = 1

        for entry in (config or {}).get("domains", []):
            self.create(DomainCreateRequest(entry["name"], entry.get("ip_address", "")))
        self.calls.clear()

        logger.info("Mock domains service initialized")

    def _find_domain(self, name: str) -> int:
        normalized = sanitize_fqdn(name)
        for i, domain in enumerate(self.domains):
            if sanitize_fqdn(domain.name) == normalized:
                return i
        raise NotFoundError(
            "The resource you were accessing could not be found.", status_code=404
        )

    def _domain_records(self, name: str) -> List[DomainRecord]:
        domain = self.domains[self._find_domain(name)]
        return self.records_by_domain.setdefault(sanitize_fqdn(domain.name), [])

    def _find_record(self, records: List[DomainRecord], record_id: int) -> int:
        for i, record in enumerate(records):
            if record.id == record_id:
                return i
        raise NotFoundError(
            "The resource you were accessing could not be found.", status_code=404
        )

    def list(self) -> List[Domain]:
        canned = self._called("list")
        if canned is not _UNSET:
            return canned
        logger.info(f"Mock: Retrieved {len(self.domains)} domains")
        return list(self.domains)

    def get(self, name: str) -> Domain:
        canned = self._called("get", name)
        if canned is not _UNSET:
            return canned
        return self.domains[self._find_domain(name)]

    def create(self, request: DomainCreateRequest) -> Domain:
        canned = self._called("create", request)
        if canned is not _UNSET:
            return canned

        if any(sanitize_fqdn(d.name) == sanitize_fqdn(request.name) for d in self.domains):
            raise APIError(f"{request.name} already exists", status_code=422)

        domain = Domain(name=request.name, ttl=1800, ip_address=request.ip_address)
        self.domains.append(domain)
        records = self.records_by_domain.setdefault(sanitize_fqdn(domain.name), [])
        if request.ip_address:
            records.append(self._new_record(DomainRecordEditRequest("A", "@", request.ip_address)))
        logger.info(f"Mock: Created domain {domain.name}")
        return domain

    def delete(self, name: str) -> None:
        canned = self._called("delete", name)
        if canned is not _UNSET:
            return None

        domain = self.domains.pop(self._find_domain(name))
        self.records_by_domain.pop(sanitize_fqdn(domain.name), None)
        logger.info(f"Mock: Deleted domain {domain.name}")

    def records(self, domain_name: str) -> List[DomainRecord]:
        canned = self._called("records", domain_name)
        if canned is not _UNSET:
            return canned
        return list(self._domain_records(domain_name))

    def create_record(
        self, domain_name: str, request: DomainRecordEditRequest
    ) -> DomainRecord:
        canned = self._called("create_record", domain_name, request)
        if canned is not _UNSET:
            return canned

        record = self._new_record(request)
        self._domain_records(domain_name).append(record)
        logger.info(f"Mock: Created {record.type} record {record.id} in {domain_name}")
        return record

    def edit_record(
        self, domain_name: str, record_id: int, request: DomainRecordEditRequest
    ) -> DomainRecord:
        canned = self._called("edit_record", domain_name, record_id, request)
        if canned is not _UNSET:
            return canned

        records = self._domain_records(domain_name)
        i = self._find_record(records, record_id)
        current = records[i]
        # Unset request fields keep their current value
        records[i] = DomainRecord(
            id=current.id,
            type=request.type or current.type,
            name=request.name or current.name,
            data=request.data or current.data,
            priority=request.priority or current.priority,
            port=request.port or current.port,
            weight=request.weight or current.weight,
        )
        logger.info(f"Mock: Updated record {record_id} in {domain_name}")
        return records[i]

    def delete_record(self, domain_name: str, record_id: int) -> None:
        canned = self._called("delete_record", domain_name, record_id)
        if canned is not _UNSET:
            return None

        records = self._domain_records(domain_name)
        del records[self._find_record(records, record_id)]
        logger.info(f"Mock: Deleted record {record_id} from {domain_name}")

    def _new_record(self, request: DomainRecordEditRequest) -> DomainRecord:
        record = DomainRecord(
            id=self._next_record_id,
            type=request.type,
            name=request.name,
            data=request.data,
            priority=request.priority,
            port=request.port,
            weight=request.weight,
        )
        self._next_record_id += 1
        return record


class MockRegionsService(MockService, RegionsService):
    """In-memory regions service."""

    def __init__(self, config: Dict = None):
        """Initialize mock regions service."""
        super().__init__()
        self.regions: List[Region] = [
            Region.from_dict(entry) for entry in (config or {}).get("regions", [])
        ]
        logger.info("Mock regions service initialized")

    def list(self) -> List[Region]:
        canned = self._called("list")
        if canned is not _UNSET:
            return canned
        return list(self.regions)
