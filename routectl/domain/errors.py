"""Domain error taxonomy.

`APIError` is what collaborators (platform client, identity provider)
raise; it may carry the warnings the backend sent with the failure.
`ActionError` is the base for failures this package raises itself.
"""

from typing import Iterable, Optional


class APIError(Exception):
    """Failure reported by an external collaborator."""

    def __init__(self, message: str = "", warnings: Optional[Iterable[str]] = None):
        self.warnings = list(warnings or [])
        super().__init__(message)


class RouteNotUniqueError(APIError):
    """The backend refused to create a route whose host/domain/path is taken."""


class JobFailedError(APIError):
    """A polled backend job reached a failed terminal state."""

    def __init__(self, job_url: str, detail: str = "", warnings: Optional[Iterable[str]] = None):
        self.job_url = job_url
        self.detail = detail
        message = f"Job {job_url} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, warnings)


class ActionError(Exception):
    """Base class for errors raised by the orchestration layer."""


class NotFoundError(ActionError):
    """A named resource could not be found."""

    resource = "Resource"

    def __init__(self, name: str = ""):
        self.name = name
        super().__init__(f"{self.resource} '{name}' not found.")


class OrganizationNotFoundError(NotFoundError):
    resource = "Organization"


class SpaceNotFoundError(NotFoundError):
    resource = "Space"


class DomainNotFoundError(NotFoundError):
    resource = "Domain"


class RouteNotFoundError(NotFoundError):
    resource = "Route"

    def __init__(self, domain_name: str, host: str = "", path: str = ""):
        self.domain_name = domain_name
        self.host = host
        self.path = path
        ActionError.__init__(
            self,
            f"Route with host '{host}', domain '{domain_name}', and path '{path or '/'}' not found.",
        )
        self.name = domain_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteNotFoundError):
            return NotImplemented
        return (self.domain_name, self.host, self.path) == (other.domain_name, other.host, other.path)

    __hash__ = ActionError.__hash__


class MultipleResourcesFoundError(ActionError):
    """A lookup that must be unique matched more than one resource."""

    def __init__(self, resource: str, name: str, count: int):
        self.resource = resource
        self.name = name
        self.count = count
        super().__init__(f"Expected one {resource.lower()} named '{name}', found {count}.")


class RouteAlreadyExistsError(ActionError):
    """Route creation collided with an existing route."""

    def __init__(self, err: Exception):
        self.err = err
        super().__init__(f"Route already exists: {err}")


class PasswordGrantTypeLogoutRequiredError(ActionError):
    """A password login was attempted while logged in with client credentials."""

    def __init__(self):
        super().__init__(
            "Password login is not allowed while authenticated with client credentials. "
            "Log out first."
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PasswordGrantTypeLogoutRequiredError)

    __hash__ = ActionError.__hash__


class ConfigurationError(Exception):
    """The runtime configuration is missing or invalid."""
