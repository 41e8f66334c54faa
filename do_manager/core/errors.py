"""
Error kinds raised by commands and services.

Every error short-circuits the running command; the CLI entry point prints
the message and exits with a non-zero status.
"""

from typing import Optional


class DOManagerError(Exception):
    """Base class for all errors raised by the DigitalOcean Resource Manager."""


class MissingArgumentsError(DOManagerError):
    """A command was invoked with too few positional arguments."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"({namespace}) command is missing required arguments")


class InvalidInputError(DOManagerError, ValueError):
    """A flag or argument has an unusable value."""


class ConfigurationError(DOManagerError):
    """The loaded configuration cannot be used to build a backend."""


class APIError(DOManagerError):
    """The remote API answered with an error status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_id: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_id = error_id
        self.request_id = request_id
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        text = f"{self.status_code} {self.message}"
        if self.request_id:
            text += f" (request {self.request_id})"
        return text


class NotFoundError(APIError):
    """The requested resource does not exist."""
