"""
Domain and domain record command handlers.

Each handler checks its positional arguments, builds a request from the
flags, calls the domains service and hands the result to the displayer.
"""

import logging

from .command import CmdConfig
from .errors import InvalidInputError
from .models import DomainCreateRequest, DomainRecordEditRequest
from ..display.displayer import DomainDisplay, DomainRecordDisplay
from ..utils.validators import (
    parse_record_id,
    validate_fqdn,
    validate_ipv4,
    validate_record_type,
)

logger = logging.getLogger(__name__)

ARG_IP_ADDRESS = "ip_address"
ARG_RECORD_ID = "record_id"
ARG_RECORD_TYPE = "record_type"
ARG_RECORD_NAME = "record_name"
ARG_RECORD_DATA = "record_data"
ARG_RECORD_PRIORITY = "record_priority"
ARG_RECORD_PORT = "record_port"
ARG_RECORD_WEIGHT = "record_weight"


def _domain_name(c: CmdConfig) -> str:
    name = c.args[0].strip()
    if not name:
        raise InvalidInputError("invalid domain name")
    return name


def run_domain_create(c: CmdConfig):
    """Create a domain, optionally pointing its apex at an IP address."""
    c.require_args(1, 1)
    name = _domain_name(c)
    if not validate_fqdn(name):
        raise InvalidInputError(f"invalid domain name {name!r}")

    ip_address = c.get_string(ARG_IP_ADDRESS)
    if ip_address and not validate_ipv4(ip_address):
        raise InvalidInputError(f"invalid IP address {ip_address!r}")

    domain = c.domains().create(DomainCreateRequest(name=name, ip_address=ip_address))
    c.display(DomainDisplay([domain]))


def run_domain_list(c: CmdConfig):
    """List all domains."""
    c.require_args(0, 0)
    domains = c.domains().list()
    c.display(DomainDisplay(domains))


def run_domain_get(c: CmdConfig):
    """Retrieve a domain by name."""
    c.require_args(1, 1)
    domain = c.domains().get(_domain_name(c))
    c.display(DomainDisplay([domain]))


def run_domain_delete(c: CmdConfig):
    """Delete a domain by name."""
    c.require_args(1, 1)
    c.domains().delete(_domain_name(c))


def run_record_list(c: CmdConfig):
    """List the records of a domain."""
    c.require_args(1, 1)
    records = c.domains().records(_domain_name(c))
    c.display(DomainRecordDisplay(records))


def _record_request(c: CmdConfig, record_type: str) -> DomainRecordEditRequest:
    return DomainRecordEditRequest(
        type=record_type,
        name=c.get_string(ARG_RECORD_NAME),
        data=c.get_string(ARG_RECORD_DATA),
        priority=c.get_int(ARG_RECORD_PRIORITY),
        port=c.get_int(ARG_RECORD_PORT),
        weight=c.get_int(ARG_RECORD_WEIGHT),
    )


def run_record_create(c: CmdConfig):
    """Create a record in a domain."""
    c.require_args(1, 1)
    name = _domain_name(c)

    # An empty type fails here whatever the other flags hold
    record_type = validate_record_type(c.get_string(ARG_RECORD_TYPE))

    record = c.domains().create_record(name, _record_request(c, record_type))
    c.display(DomainRecordDisplay([record]))


def run_record_update(c: CmdConfig):
    """Update a record of a domain."""
    c.require_args(1, 1)
    name = _domain_name(c)

    record_id = c.get_int(ARG_RECORD_ID)
    if record_id < 1:
        raise InvalidInputError("record update requires a positive --record-id")

    record_type = c.get_string(ARG_RECORD_TYPE)
    if record_type:
        record_type = validate_record_type(record_type)

    record = c.domains().edit_record(name, record_id, _record_request(c, record_type))
    c.display(DomainRecordDisplay([record]))


def run_record_delete(c: CmdConfig):
    """Delete one or more records, stopping at the first failure."""
    c.require_args(2)
    name, ids = _domain_name(c), c.args[1:]

    ds = c.domains()
    for value in ids:
        record_id = parse_record_id(value)
        ds.delete_record(name, record_id)
        logger.info(f"Deleted record {record_id} from {name}")
