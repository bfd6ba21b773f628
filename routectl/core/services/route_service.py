"""Core service for route operations.

Coordinates name resolution, the platform API calls, error translation
and result enrichment for creating, listing and deleting routes. Every
method takes the caller's `Warnings` accumulator and appends the warnings
of each sub-call in call order, including on the failure path.
"""

import logging
from typing import Dict, List

from routectl.core.services.job_service import JobService
from routectl.core.services.resolver_service import ResolverService
from routectl.domain.errors import RouteAlreadyExistsError, RouteNotFoundError, RouteNotUniqueError
from routectl.domain.interfaces.platform_client import PlatformClient
from routectl.domain.models.common import FilterKey, GUID, Query
from routectl.domain.models.resources import Route, RouteResource, normalize_route_path
from routectl.domain.models.warnings import Warnings

logger = logging.getLogger(__name__)


def _distinct(values: List[str]) -> List[str]:
    """Deduplicates, keeping first-seen order."""
    seen = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


class RouteService:
    """Orchestrates the route use cases."""

    def __init__(
        self,
        client: PlatformClient,
        resolver: ResolverService,
        job_service: JobService,
    ):
        """Initializes the RouteService with its dependencies."""
        self.client = client
        self.resolver = resolver
        self.job_service = job_service

    async def create_route(
        self,
        org_name: str,
        space_name: str,
        domain_name: str,
        host: str,
        path: str,
        warnings: Warnings,
    ) -> Route:
        """Creates a route in the named space.

        Resolves the domain, then the organization, then the space; the
        first failing lookup aborts the operation.

        Raises:
            NotFoundError: If the domain, organization or space does not exist.
            RouteAlreadyExistsError: If the backend reports the route is not unique.
        """
        logger.info(f"Creating route host='{host}' domain='{domain_name}' path='{path}' in {org_name}/{space_name}")
        domain = await self.resolver.get_domain_by_name(domain_name, warnings)
        org = await self.resolver.get_organization_by_name(org_name, warnings)
        space = await self.resolver.get_space_by_name_and_organization(space_name, org.guid, warnings)

        request = RouteResource(
            space_guid=space.guid,
            domain_guid=domain.guid,
            host=host,
            path=normalize_route_path(path),
        )
        try:
            created = await warnings.collect(self.client.create_route(request))
        except RouteNotUniqueError as e:
            logger.info(f"Route {host}.{domain_name}{request.path} already exists")
            raise RouteAlreadyExistsError(e) from e

        logger.info(f"Created route {created.guid}")
        return Route(
            guid=created.guid,
            space_guid=created.space_guid,
            domain_guid=created.domain_guid,
            host=created.host,
            path=created.path,
            space_name=space_name,
            domain_name=domain_name,
        )

    async def get_routes_by_space(self, space_guid: GUID, warnings: Warnings) -> List[Route]:
        """Lists the routes of a space, enriched with space and domain names."""
        logger.info(f"Listing routes for space {space_guid}")
        routes = await warnings.collect(
            self.client.get_routes(Query(FilterKey.SPACE_GUID, [space_guid]))
        )
        return await self._enrich(routes, warnings)

    async def get_routes_by_org(self, org_guid: GUID, warnings: Warnings) -> List[Route]:
        """Lists the routes of every space in an organization."""
        logger.info(f"Listing routes for organization {org_guid}")
        routes = await warnings.collect(
            self.client.get_routes(Query(FilterKey.ORGANIZATION_GUID, [org_guid]))
        )
        return await self._enrich(routes, warnings)

    async def delete_route(self, domain_name: str, host: str, path: str, warnings: Warnings) -> None:
        """Deletes the route identified by domain, host and path.

        Waits for the backend delete job to finish.

        Raises:
            DomainNotFoundError: If the domain does not exist.
            RouteNotFoundError: If no route matches.
            JobFailedError: If the delete job fails.
        """
        logger.info(f"Deleting route host='{host}' domain='{domain_name}' path='{path}'")
        domain = await self.resolver.get_domain_by_name(domain_name, warnings)
        path = normalize_route_path(path)

        routes = await warnings.collect(
            self.client.get_routes(
                Query(FilterKey.DOMAIN_GUID, [domain.guid]),
                Query(FilterKey.HOSTNAME, [host]),
                Query(FilterKey.PATH, [path]),
            )
        )
        if not routes:
            raise RouteNotFoundError(domain_name, host, path)

        job_url = await warnings.collect(self.client.delete_route(routes[0].guid))
        await self.job_service.poll(job_url, warnings)
        logger.info(f"Deleted route {routes[0].guid}")

    async def _enrich(self, routes: List[RouteResource], warnings: Warnings) -> List[Route]:
        """Joins routes with their spaces and domains.

        Issues one batched lookup per resource kind over the distinct GUIDs,
        even when there are no routes, so their warnings are always reported.
        A space or domain missing from the batch leaves its name empty.
        """
        space_guids = _distinct([r.space_guid for r in routes])
        domain_guids = _distinct([r.domain_guid for r in routes])
        logger.debug(f"Enriching {len(routes)} route(s): {len(space_guids)} space(s), {len(domain_guids)} domain(s)")

        spaces = await warnings.collect(self.client.get_spaces(Query(FilterKey.GUID, space_guids)))
        domains = await warnings.collect(self.client.get_domains(Query(FilterKey.GUID, domain_guids)))

        space_names: Dict[str, str] = {space.guid: space.name for space in spaces}
        domain_names: Dict[str, str] = {domain.guid: domain.name for domain in domains}

        return [
            Route(
                guid=route.guid,
                space_guid=route.space_guid,
                domain_guid=route.domain_guid,
                host=route.host,
                path=route.path,
                space_name=space_names.get(route.space_guid, ""),
                domain_name=domain_names.get(route.domain_guid, ""),
            )
            for route in routes
        ]
