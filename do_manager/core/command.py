"""
Command configuration passed to every command handler.
"""

import logging
from typing import Dict, List

from .errors import InvalidInputError, MissingArgumentsError
from ..display.displayer import Displayable, Displayer
from ..services.base_service import DomainsService, RegionsService
from ..utils.validators import parse_int

logger = logging.getLogger(__name__)


class CmdConfig:
    """Arguments, flags and collaborators of one command invocation."""

    def __init__(
        self,
        ns: str,
        args: List[str],
        flags: Dict,
        client,
        displayer: Displayer,
    ):
        self.ns = ns
        self.args = list(args)
        self.flags = flags
        self.client = client
        self.displayer = displayer

    def domains(self) -> DomainsService:
        return self.client.domains

    def regions(self) -> RegionsService:
        return self.client.regions

    def require_args(self, minimum: int, maximum: int = None):
        """Check the number of positional arguments before any remote call."""
        if len(self.args) < minimum:
            raise MissingArgumentsError(self.ns)
        if maximum is not None and len(self.args) > maximum:
            raise InvalidInputError(
                f"({self.ns}) command accepts at most {maximum} argument(s), got {len(self.args)}"
            )

    def get_string(self, name: str) -> str:
        value = self.flags.get(name)
        return "" if value is None else str(value)

    def get_int(self, name: str) -> int:
        value = self.flags.get(name)
        if value is None:
            return 0
        try:
            return parse_int(value)
        except ValueError:
            raise InvalidInputError(f"invalid value {value!r} for --{name}")

    def display(self, item: Displayable):
        self.displayer.display(item)
