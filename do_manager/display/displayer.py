"""
Displayer - Rendering of command results

Results are wrapped in a Displayable item that knows its columns, then
printed as a borderless rich table or as JSON.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from ..core.errors import InvalidInputError
from ..core.models import Domain, DomainRecord, Region

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


class Displayable(ABC):
    """A list of entities that can be rendered by the Displayer."""

    @abstractmethod
    def cols(self) -> List[str]:
        """Default columns, in display order."""

    @abstractmethod
    def col_map(self) -> Dict[str, str]:
        """Header text for every column."""

    @abstractmethod
    def kv(self) -> List[Dict]:
        """One dict of column values per entity."""

    @abstractmethod
    def json_data(self) -> List[Dict]:
        """JSON-ready representation of the entities."""


class DomainDisplay(Displayable):
    def __init__(self, domains: Sequence[Domain]):
        self.domains = list(domains)

    def cols(self) -> List[str]:
        return ["Domain", "TTL"]

    def col_map(self) -> Dict[str, str]:
        return {"Domain": "Domain", "TTL": "TTL"}

    def kv(self) -> List[Dict]:
        return [{"Domain": d.name, "TTL": d.ttl} for d in self.domains]

    def json_data(self) -> List[Dict]:
        return [d.to_dict() for d in self.domains]


class DomainRecordDisplay(Displayable):
    def __init__(self, domain_records: Sequence[DomainRecord]):
        self.domain_records = list(domain_records)

    def cols(self) -> List[str]:
        return ["ID", "Type", "Name", "Data", "Priority", "Port", "Weight"]

    def col_map(self) -> Dict[str, str]:
        return {
            "ID": "ID",
            "Type": "Type",
            "Name": "Name",
            "Data": "Data",
            "Priority": "Priority",
            "Port": "Port",
            "Weight": "Weight",
        }

    def kv(self) -> List[Dict]:
        return [
            {
                "ID": r.id,
                "Type": r.type,
                "Name": r.name,
                "Data": r.data,
                "Priority": r.priority,
                "Port": r.port,
                "Weight": r.weight,
            }
            for r in self.domain_records
        ]

    def json_data(self) -> List[Dict]:
        return [r.to_dict() for r in self.domain_records]


class RegionDisplay(Displayable):
    def __init__(self, regions: Sequence[Region]):
        self.regions = list(regions)

    def cols(self) -> List[str]:
        return ["Slug", "Name", "Available"]

    def col_map(self) -> Dict[str, str]:
        return {"Slug": "Slug", "Name": "Name", "Available": "Available"}

    def kv(self) -> List[Dict]:
        return [
            {
                "Slug": r.slug,
                "Name": r.name,
                "Available": "true" if r.available else "false",
            }
            for r in self.regions
        ]

    def json_data(self) -> List[Dict]:
        return [r.to_dict() for r in self.regions]


class Displayer:
    """Writes Displayable items to the console."""

    def __init__(
        self,
        output: str = "text",
        no_header: bool = False,
        columns: Optional[List[str]] = None,
        console: Optional[Console] = None,
    ):
        if output not in OUTPUT_FORMATS:
            raise InvalidInputError(
                f"unknown output type '{output}', expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.output = output
        self.no_header = no_header
        self.columns = columns
        self.console = console or Console()

    def display(self, item: Displayable):
        """Render ``item`` in the configured output format."""
        if self.output == "json":
            self.console.print_json(json.dumps(item.json_data()))
            return

        self.console.print(self._build_table(item))

    def _select_columns(self, item: Displayable) -> List[str]:
        if not self.columns:
            return item.cols()

        # Column names from --format match case-insensitively
        known = {c.lower(): c for c in item.col_map()}
        selected = []
        for name in self.columns:
            key = name.strip().lower()
            if key not in known:
                raise InvalidInputError(
                    f"unknown column '{name.strip()}', expected one of: {', '.join(item.cols())}"
                )
            selected.append(known[key])
        return selected

    def _build_table(self, item: Displayable) -> Table:
        columns = self._select_columns(item)
        headers = item.col_map()

        table = Table(
            box=None if self.no_header else box.SIMPLE_HEAD,
            show_header=not self.no_header,
            show_edge=False,
            pad_edge=False,
        )
        for column in columns:
            table.add_column(headers[column], overflow="fold")

        rows = item.kv()
        for row in rows:
            table.add_row(*(str(row[column]) for column in columns))

        logger.debug(f"Displaying {len(rows)} rows")
        return table
