"""
Validators - Input validation for command arguments

This module provides validation functions for domain names, IPv4 addresses,
record types and record identifiers given on the command line.
"""

import ipaddress
import logging
import re

import dns.rdatatype

from ..core.errors import InvalidInputError

logger = logging.getLogger(__name__)

_LABEL_RE = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?$")
_INT_RE = re.compile(r"-?[0-9]+")


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate a Fully Qualified Domain Name.

    Args:
        fqdn: The domain name to validate

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    if fqdn.endswith("."):
        logger.debug(f"FQDN ends with dot: {fqdn}")
        return False

    if len(fqdn) > 253:
        logger.debug(f"FQDN too long: {fqdn}")
        return False

    labels = fqdn.split(".")
    if len(labels) < 2:
        logger.debug(f"FQDN must have at least 2 labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.debug(f"Invalid label '{label}' in FQDN: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """Validate a single domain label."""
    if len(label) == 0 or len(label) > 63:
        return False

    # Letters, digits and hyphens; no leading or trailing hyphen
    return bool(_LABEL_RE.match(label))


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        logger.debug(f"Invalid IPv4 address: {ipv4}")
        return False


def validate_record_type(record_type: str) -> str:
    """
    Normalize a DNS record type mnemonic.

    Args:
        record_type: Record type as typed by the user, e.g. ``a`` or ``MX``

    Returns:
        The upper-cased mnemonic

    Raises:
        InvalidInputError: if the type is empty or not a known DNS type
    """
    if not record_type or not record_type.strip():
        raise InvalidInputError("record request is missing type")

    mnemonic = record_type.strip().upper()
    try:
        dns.rdatatype.from_text(mnemonic)
    except dns.rdatatype.UnknownRdatatype:
        raise InvalidInputError(f"unknown record type {record_type!r}")

    return mnemonic


def parse_int(value) -> int:
    """
    Parse a plain decimal integer.

    Only an optional minus sign followed by digits is accepted, so values
    like ``1_0``, ``+5`` or `` 5`` are rejected instead of being read as
    numbers.

    Raises:
        ValueError: if ``value`` is not a plain decimal integer
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")
    return int(value)


def parse_record_id(value: str) -> int:
    """Parse a record id given as a positional argument."""
    try:
        record_id = parse_int(value)
    except ValueError:
        raise InvalidInputError(f"invalid record id {value!r}")

    if record_id < 1:
        raise InvalidInputError(f"invalid record id {value!r}")

    return record_id


def sanitize_fqdn(fqdn: str) -> str:
    """
    Sanitize FQDN by normalizing case and stripping dots.

    Args:
        fqdn: The FQDN to sanitize

    Returns:
        Sanitized FQDN
    """
    if not fqdn:
        return fqdn

    fqdn = fqdn.strip().strip(".").lower()
    fqdn = re.sub(r"\.+", ".", fqdn)

    return fqdn
