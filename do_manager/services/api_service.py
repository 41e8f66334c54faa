"""
DigitalOcean API service implementation.

This module talks to the DigitalOcean v2 REST API using the requests library
and turns the JSON responses into the DTOs of ``core.models``.
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import requests

from .base_service import DomainsService, RegionsService
from ..core.errors import APIError, NotFoundError
from ..core.models import (
    Domain,
    DomainCreateRequest,
    DomainRecord,
    DomainRecordEditRequest,
    Region,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.digitalocean.com/v2"
DEFAULT_TIMEOUT = 30
PER_PAGE = 200


class APIClient:
    """Thin wrapper around a requests session for the DigitalOcean API."""

    def __init__(
        self,
        access_token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize API client."""
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {access_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        logger.debug(f"API client initialized for {self.api_url}")

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        json: Optional[Dict] = None,
    ) -> Optional[Dict]:
        """Send a request and return the decoded JSON body."""
        url = path if path.startswith("http") else f"{self.api_url}{path}"
        logger.debug(f"{method} {url}")

        response = self.session.request(
            method, url, params=params, json=json, timeout=self.timeout
        )

        if not response.ok:
            self._handle_api_error(response, method, url)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def paginate(self, path: str, key: str) -> List[Dict]:
        """Collect ``key`` items from every page of a list endpoint."""
        items = []
        url = path
        params = {"per_page": PER_PAGE}

        while url:
            body = self.request("GET", url, params=params) or {}
            items.extend(body.get(key, []))

            # The "next" link already carries the paging query string
            url = body.get("links", {}).get("pages", {}).get("next")
            params = None

        return items

    def _handle_api_error(self, response: requests.Response, method: str, url: str):
        """Raise the error matching an unsuccessful response."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = body.get("message") or response.reason or "request failed"
        error_class = NotFoundError if response.status_code == 404 else APIError
        logger.error(f"{method} {url} failed with {response.status_code}: {message}")
        raise error_class(
            message,
            status_code=response.status_code,
            error_id=body.get("id"),
            request_id=body.get("request_id")
            or response.headers.get("x-request-id"),
        )


class DomainsAPIService(DomainsService):
    """Domains service backed by the DigitalOcean API."""

    def __init__(self, client: APIClient):
        self.client = client

    @staticmethod
    def _domain_path(name: str) -> str:
        return f"/domains/{quote(name, safe='')}"

    def list(self) -> List[Domain]:
        domains = [Domain.from_dict(d) for d in self.client.paginate("/domains", "domains")]
        logger.info(f"Retrieved {len(domains)} domains")
        return domains

    def get(self, name: str) -> Domain:
        body = self.client.request("GET", self._domain_path(name))
        return Domain.from_dict(body["domain"])

    def create(self, request: DomainCreateRequest) -> Domain:
        body = self.client.request("POST", "/domains", json=request.to_dict())
        domain = Domain.from_dict(body["domain"])
        logger.info(f"Created domain {domain.name}")
        return domain

    def delete(self, name: str) -> None:
        self.client.request("DELETE", self._domain_path(name))
        logger.info(f"Deleted domain {name}")

    def records(self, domain_name: str) -> List[DomainRecord]:
        path = f"{self._domain_path(domain_name)}/records"
        records = [
            DomainRecord.from_dict(r)
            for r in self.client.paginate(path, "domain_records")
        ]
        logger.info(f"Retrieved {len(records)} records for {domain_name}")
        return records

    def create_record(
        self, domain_name: str, request: DomainRecordEditRequest
    ) -> DomainRecord:
        path = f"{self._domain_path(domain_name)}/records"
        body = self.client.request("POST", path, json=request.to_dict())
        record = DomainRecord.from_dict(body["domain_record"])
        logger.info(f"Created {record.type} record {record.id} in {domain_name}")
        return record

    def edit_record(
        self, domain_name: str, record_id: int, request: DomainRecordEditRequest
    ) -> DomainRecord:
        path = f"{self._domain_path(domain_name)}/records/{record_id}"
        body = self.client.request("PUT", path, json=request.to_dict())
        record = DomainRecord.from_dict(body["domain_record"])
        logger.info(f"Updated record {record.id} in {domain_name}")
        return record

    def delete_record(self, domain_name: str, record_id: int) -> None:
        path = f"{self._domain_path(domain_name)}/records/{record_id}"
        self.client.request("DELETE", path)
        logger.info(f"Deleted record {record_id} from {domain_name}")


class RegionsAPIService(RegionsService):
    """Regions service backed by the DigitalOcean API."""

    def __init__(self, client: APIClient):
        self.client = client

    def list(self) -> List[Region]:
        regions = [Region.from_dict(r) for r in self.client.paginate("/regions", "regions")]
        logger.info(f"Retrieved {len(regions)} regions")
        return regions
