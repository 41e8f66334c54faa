#!/usr/bin/env python3
"""
Tests for the DigitalOcean API services.

The requests session is patched so no network traffic happens.
"""

import json
import unittest
from unittest.mock import call, patch

import requests

from do_manager.core.errors import APIError, NotFoundError
from do_manager.core.models import (
    Domain,
    DomainCreateRequest,
    DomainRecord,
    DomainRecordEditRequest,
)
from do_manager.services.api_service import (
    APIClient,
    DomainsAPIService,
    RegionsAPIService,
)

API = "https://api.digitalocean.com/v2"


def make_response(status_code, body=None, reason="", headers=None):
    """Build a requests.Response with a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = json.dumps(body).encode() if body is not None else b""
    response.headers.update(headers or {})
    return response


class APIServiceTestCase(unittest.TestCase):
    def setUp(self):
        """Set up test fixtures."""
        self.client = APIClient("secret-token", timeout=10)
        patcher = patch.object(self.client.session, "request")
        self.request = patcher.start()
        self.addCleanup(patcher.stop)


class TestAPIClient(APIServiceTestCase):
    """Test the HTTP wrapper."""

    def test_headers(self):
        """Test that the token is sent as a bearer token."""
        headers = self.client.session.headers
        self.assertEqual(headers["Authorization"], "Bearer secret-token")
        self.assertEqual(headers["Content-Type"], "application/json")

    def test_custom_api_url(self):
        """Test that a trailing slash on the API URL is ignored."""
        client = APIClient("t", api_url="http://localhost:8080/v2/")
        self.assertEqual(client.api_url, "http://localhost:8080/v2")

    def test_not_found(self):
        """Test that 404 responses raise NotFoundError."""
        self.request.return_value = make_response(
            404,
            {
                "id": "not_found",
                "message": "The resource you were accessing could not be found.",
                "request_id": "abc-123",
            },
            reason="Not Found",
        )

        with self.assertRaises(NotFoundError) as ctx:
            self.client.request("GET", "/domains/missing.com")

        error = ctx.exception
        self.assertEqual(error.status_code, 404)
        self.assertEqual(error.error_id, "not_found")
        self.assertEqual(error.request_id, "abc-123")
        self.assertEqual(
            str(error),
            "404 The resource you were accessing could not be found. (request abc-123)",
        )

    def test_server_error(self):
        """Test that other failures raise APIError."""
        self.request.return_value = make_response(
            500, reason="Internal Server Error", headers={"x-request-id": "req-9"}
        )

        with self.assertRaises(APIError) as ctx:
            self.client.request("GET", "/domains")

        self.assertNotIsInstance(ctx.exception, NotFoundError)
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.message, "Internal Server Error")
        self.assertEqual(ctx.exception.request_id, "req-9")

    def test_transport_errors_propagate(self):
        """Test that connection errors are not wrapped."""
        self.request.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(requests.ConnectionError):
            self.client.request("GET", "/domains")

    def test_no_content(self):
        """Test that empty responses decode to None."""
        self.request.return_value = make_response(204)

        self.assertIsNone(self.client.request("DELETE", "/domains/example.com"))

    def test_paginate(self):
        """Test that every page of a list endpoint is collected."""
        next_url = f"{API}/domains?page=2&per_page=200"
        self.request.side_effect = [
            make_response(
                200,
                {
                    "domains": [{"name": "a.com"}, {"name": "b.com"}],
                    "links": {"pages": {"next": next_url, "last": next_url}},
                    "meta": {"total": 3},
                },
            ),
            make_response(200, {"domains": [{"name": "c.com"}], "links": {}, "meta": {"total": 3}}),
        ]

        items = self.client.paginate("/domains", "domains")

        self.assertEqual([i["name"] for i in items], ["a.com", "b.com", "c.com"])
        self.assertEqual(
            self.request.call_args_list,
            [
                call("GET", f"{API}/domains", params={"per_page": 200}, json=None, timeout=10),
                call("GET", next_url, params=None, json=None, timeout=10),
            ],
        )


class TestDomainsAPIService(APIServiceTestCase):
    """Test the domains API service."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.service = DomainsAPIService(self.client)

    def test_list(self):
        """Test listing domains."""
        self.request.return_value = make_response(
            200,
            {
                "domains": [
                    {"name": "example.com", "ttl": 1800, "zone_file": "$ORIGIN example.com."},
                    {"name": "example.org", "ttl": 1800, "zone_file": None},
                ],
                "links": {},
            },
        )

        domains = self.service.list()

        self.assertEqual([d.name for d in domains], ["example.com", "example.org"])
        self.assertEqual(domains[0].zone_file, "$ORIGIN example.com.")

    def test_get(self):
        """Test getting a domain by name."""
        self.request.return_value = make_response(
            200, {"domain": {"name": "example.com", "ttl": 1800, "zone_file": ""}}
        )

        domain = self.service.get("example.com")

        self.assertEqual(domain, Domain("example.com", ttl=1800))
        self.assertEqual(self.request.call_args[0], ("GET", f"{API}/domains/example.com"))

    def test_create(self):
        """Test creating a domain."""
        self.request.return_value = make_response(
            201, {"domain": {"name": "example.com", "ttl": 1800, "zone_file": None}}
        )

        domain = self.service.create(DomainCreateRequest("example.com", "1.2.3.4"))

        self.assertEqual(domain.name, "example.com")
        args, kwargs = self.request.call_args
        self.assertEqual(args, ("POST", f"{API}/domains"))
        self.assertEqual(kwargs["json"], {"name": "example.com", "ip_address": "1.2.3.4"})

    def test_delete(self):
        """Test deleting a domain."""
        self.request.return_value = make_response(204)

        self.assertIsNone(self.service.delete("example.com"))
        self.assertEqual(self.request.call_args[0], ("DELETE", f"{API}/domains/example.com"))

    def test_records(self):
        """Test listing records."""
        self.request.return_value = make_response(
            200,
            {
                "domain_records": [
                    {"id": 1, "type": "NS", "name": "@", "data": "ns1.digitalocean.com",
                     "priority": None, "port": None, "weight": None},
                    {"id": 2, "type": "MX", "name": "@", "data": "mail.example.com",
                     "priority": 10, "port": None, "weight": None},
                ],
                "links": {},
            },
        )

        records = self.service.records("example.com")

        self.assertEqual(
            records,
            [
                DomainRecord(1, "NS", "@", "ns1.digitalocean.com"),
                DomainRecord(2, "MX", "@", "mail.example.com", priority=10),
            ],
        )
        self.assertEqual(self.request.call_args[0], ("GET", f"{API}/domains/example.com/records"))

    def test_create_record(self):
        """Test creating a record."""
        self.request.return_value = make_response(
            201,
            {"domain_record": {"id": 28448433, "type": "A", "name": "www", "data": "1.2.3.4",
                               "priority": None, "port": None, "weight": None}},
        )

        record = self.service.create_record(
            "example.com", DomainRecordEditRequest("A", "www", "1.2.3.4")
        )

        self.assertEqual(record, DomainRecord(28448433, "A", "www", "1.2.3.4"))
        args, kwargs = self.request.call_args
        self.assertEqual(args, ("POST", f"{API}/domains/example.com/records"))
        self.assertEqual(kwargs["json"], {"type": "A", "name": "www", "data": "1.2.3.4"})

    def test_edit_record(self):
        """Test updating a record."""
        self.request.return_value = make_response(
            200,
            {"domain_record": {"id": 7, "type": "A", "name": "www", "data": "5.6.7.8"}},
        )

        record = self.service.edit_record(
            "example.com", 7, DomainRecordEditRequest("", data="5.6.7.8")
        )

        self.assertEqual(record.data, "5.6.7.8")
        args, kwargs = self.request.call_args
        self.assertEqual(args, ("PUT", f"{API}/domains/example.com/records/7"))
        self.assertEqual(kwargs["json"], {"data": "5.6.7.8"})

    def test_delete_record(self):
        """Test deleting a record."""
        self.request.return_value = make_response(204)

        self.service.delete_record("example.com", 7)

        self.assertEqual(
            self.request.call_args[0], ("DELETE", f"{API}/domains/example.com/records/7")
        )

    def test_delete_record_not_found(self):
        """Test that a missing record raises NotFoundError."""
        self.request.return_value = make_response(
            404, {"id": "not_found", "message": "The resource you were accessing could not be found."}
        )

        with self.assertRaises(NotFoundError):
            self.service.delete_record("example.com", 99)


class TestRegionsAPIService(APIServiceTestCase):
    """Test the regions API service."""

    def test_list(self):
        """Test listing regions."""
        self.request.return_value = make_response(
            200,
            {
                "regions": [
                    {"slug": "nyc3", "name": "New York 3", "available": True,
                     "sizes": ["s-1vcpu-1gb"], "features": ["backups", "ipv6"]},
                    {"slug": "sfo1", "name": "San Francisco 1", "available": False,
                     "sizes": [], "features": []},
                ],
                "links": {},
            },
        )

        regions = RegionsAPIService(self.client).list()

        self.assertEqual([r.slug for r in regions], ["nyc3", "sfo1"])
        self.assertEqual(regions[0].features, ("backups", "ipv6"))
        self.assertFalse(regions[1].available)
        self.assertEqual(self.request.call_args[0], ("GET", f"{API}/regions"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
