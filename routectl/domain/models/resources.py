"""Domain entities for platform resources.

`RouteResource` is the shape the platform client speaks; `Route` is the
enriched value the route service hands back to callers, carrying the
denormalized space and domain names.
"""

from dataclasses import dataclass

from .common import GUID


@dataclass
class Organization:
    guid: GUID
    name: str


@dataclass
class Space:
    guid: GUID
    name: str
    organization_guid: GUID = GUID("")


@dataclass
class Domain:
    guid: GUID
    name: str


@dataclass
class RouteResource:
    """Route as stored by the backend. `guid` is empty before creation."""

    space_guid: GUID
    domain_guid: GUID
    host: str = ""
    path: str = ""
    guid: GUID = GUID("")


@dataclass
class Route:
    """Route enriched with the names of its space and domain."""

    guid: GUID
    space_guid: GUID
    domain_guid: GUID
    host: str = ""
    path: str = ""
    space_name: str = ""
    domain_name: str = ""

    @property
    def url(self) -> str:
        """host.domain/path, or domain/path for a hostless route."""
        base = f"{self.host}.{self.domain_name}" if self.host else self.domain_name
        return f"{base}{self.path}"


def normalize_route_path(path: str) -> str:
    """Prefixes a non-empty path with '/' unless it already has one.

    Idempotent; the empty path stays empty.
    """
    if path and not path.startswith("/"):
        return "/" + path
    return path
