"""Name -> resource resolution.

Turns human-supplied organization, space and domain names into the
resources (and GUIDs) the platform API requires. Each lookup issues one
filtered query and expects exactly one match.
"""

import logging
from typing import List, Type, TypeVar

from routectl.domain.errors import (
    DomainNotFoundError,
    MultipleResourcesFoundError,
    NotFoundError,
    OrganizationNotFoundError,
    SpaceNotFoundError,
)
from routectl.domain.interfaces.platform_client import PlatformClient
from routectl.domain.models.common import FilterKey, GUID, Query
from routectl.domain.models.resources import Domain, Organization, Space
from routectl.domain.models.warnings import Warnings

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _exactly_one(matches: List[R], name: str, not_found: Type[NotFoundError]) -> R:
    if not matches:
        raise not_found(name)
    if len(matches) > 1:
        raise MultipleResourcesFoundError(not_found.resource, name, len(matches))
    return matches[0]


class ResolverService:
    """Resolves resource names against the platform API."""

    def __init__(self, client: PlatformClient):
        self.client = client

    async def get_organization_by_name(self, name: str, warnings: Warnings) -> Organization:
        logger.debug(f"Resolving organization '{name}'")
        orgs = await warnings.collect(
            self.client.get_organizations(Query(FilterKey.NAME, [name]))
        )
        return _exactly_one(orgs, name, OrganizationNotFoundError)

    async def get_space_by_name_and_organization(
        self, name: str, organization_guid: GUID, warnings: Warnings
    ) -> Space:
        logger.debug(f"Resolving space '{name}' in organization {organization_guid}")
        spaces = await warnings.collect(
            self.client.get_spaces(
                Query(FilterKey.NAME, [name]),
                Query(FilterKey.ORGANIZATION_GUID, [organization_guid]),
            )
        )
        return _exactly_one(spaces, name, SpaceNotFoundError)

    async def get_domain_by_name(self, name: str, warnings: Warnings) -> Domain:
        logger.debug(f"Resolving domain '{name}'")
        domains = await warnings.collect(
            self.client.get_domains(Query(FilterKey.NAME, [name]))
        )
        return _exactly_one(domains, name, DomainNotFoundError)
