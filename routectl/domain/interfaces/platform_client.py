"""Interface for the platform REST API.

Defines the typed client contract the orchestration core consumes.
Transport, request signing, pagination and retry behaviour belong to the
implementation, not to this contract.
"""

import abc
from typing import List, Tuple

from ..models.common import JobURL, Query
from ..models.resources import Domain, Organization, RouteResource, Space

APIWarnings = List[str]


class PlatformClient(abc.ABC):
    """Abstract Base Class for platform API interactions.

    Every call returns its payload together with the warnings the backend
    attached to the response. Failures are raised as
    `routectl.domain.errors.APIError` (or a subclass), optionally carrying
    warnings of their own; any other exception is passed through untouched
    by callers.
    """

    @abc.abstractmethod
    async def get_organizations(self, *queries: Query) -> Tuple[List[Organization], APIWarnings]:
        """Lists organizations matching all of the given filters."""
        pass

    @abc.abstractmethod
    async def get_spaces(self, *queries: Query) -> Tuple[List[Space], APIWarnings]:
        """Lists spaces matching all of the given filters."""
        pass

    @abc.abstractmethod
    async def get_domains(self, *queries: Query) -> Tuple[List[Domain], APIWarnings]:
        """Lists domains matching all of the given filters."""
        pass

    @abc.abstractmethod
    async def get_routes(self, *queries: Query) -> Tuple[List[RouteResource], APIWarnings]:
        """Lists routes matching all of the given filters."""
        pass

    @abc.abstractmethod
    async def create_route(self, route: RouteResource) -> Tuple[RouteResource, APIWarnings]:
        """Creates a route.

        Raises:
            RouteNotUniqueError: If host, domain and path are already taken.
        """
        pass

    @abc.abstractmethod
    async def delete_route(self, route_guid: str) -> Tuple[JobURL, APIWarnings]:
        """Requests deletion of a route, returning the handle of the delete job."""
        pass

    @abc.abstractmethod
    async def poll_job(self, job_url: JobURL) -> APIWarnings:
        """Waits until the job reaches a terminal state.

        Returns:
            The warnings collected while polling.

        Raises:
            JobFailedError: If the job finished in a failed state.
            asyncio.CancelledError / asyncio.TimeoutError: Cancellation and
                timeout policy is owned by the implementation.
        """
        pass
