"""
Utility functions and helpers.

This package contains validation functions for command line input.
"""

from .validators import (
    parse_int,
    parse_record_id,
    sanitize_fqdn,
    validate_fqdn,
    validate_ipv4,
    validate_record_type,
)

__all__ = [
    "parse_int",
    "parse_record_id",
    "sanitize_fqdn",
    "validate_fqdn",
    "validate_ipv4",
    "validate_record_type",
]
