"""
Transport DTOs for the DigitalOcean API.

Response entities are built with ``from_dict`` from decoded API JSON and
request objects are turned into JSON bodies with ``to_dict``.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, Tuple


def _int(value) -> int:
    # The API sends null for priority, port and weight on most record types.
    return int(value) if value is not None else 0


@dataclass(frozen=True)
class Domain:
    """A domain registered with the DNS service."""

    name: str
    ttl: int = 0
    zone_file: str = ""
    ip_address: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "Domain":
        return cls(
            name=data["name"],
            ttl=_int(data.get("ttl")),
            zone_file=data.get("zone_file") or "",
            ip_address=data.get("ip_address") or "",
        )

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class DomainRecord:
    """A single DNS record inside a domain."""

    id: int
    type: str
    name: str = ""
    data: str = ""
    priority: int = 0
    port: int = 0
    weight: int = 0

    @classmethod
    def from_dict(cls, data: Dict) -> "DomainRecord":
        return cls(
            id=int(data["id"]),
            type=data["type"],
            name=data.get("name") or "",
            data=data.get("data") or "",
            priority=_int(data.get("priority")),
            port=_int(data.get("port")),
            weight=_int(data.get("weight")),
        )

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class Region:
    """A datacenter region."""

    slug: str
    name: str
    available: bool = True
    sizes: Tuple[str, ...] = field(default_factory=tuple)
    features: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict) -> "Region":
        return cls(
            slug=data["slug"],
            name=data["name"],
            available=bool(data.get("available", True)),
            sizes=tuple(data.get("sizes") or ()),
            features=tuple(data.get("features") or ()),
        )

    def to_dict(self) -> Dict:
        result = asdict(self)
        result["sizes"] = list(self.sizes)
        result["features"] = list(self.features)
        return result


@dataclass(frozen=True)
class DomainCreateRequest:
    """Body of a domain create call."""

    name: str
    ip_address: str = ""

    def to_dict(self) -> Dict:
        body = {"name": self.name}
        if self.ip_address:
            body["ip_address"] = self.ip_address
        return body


@dataclass(frozen=True)
class DomainRecordEditRequest:
    """Body of a record create or update call."""

    type: str
    name: str = ""
    data: str = ""
    priority: int = 0
    port: int = 0
    weight: int = 0

    def to_dict(self) -> Dict:
        # Unset fields are left out so an update only touches what was given
        return {key: value for key, value in asdict(self).items() if value}
