"""Command Handler: Orchestrates CLI command execution.

Receives already-parsed arguments from the main entry point (main.py),
delegates the work to the application services (RouteService,
AuthService, ResolverService) and reports the outcome through the
UserInterface. Warnings are always displayed, before any error.
Each handler returns True on success and False on failure.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from routectl.core.services.auth_service import AuthService
from routectl.core.services.resolver_service import ResolverService
from routectl.core.services.route_service import RouteService
from routectl.domain.errors import ActionError, APIError
from routectl.domain.interfaces.session_store import SessionStore, TargetInfo
from routectl.domain.interfaces.user_interface import UserInterface
from routectl.domain.models.auth import AuthState, GrantType
from routectl.domain.models.common import Credentials, GUID
from routectl.domain.models.warnings import Warnings

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATE_DESCRIPTIONS = {
    AuthState.UNAUTHENTICATED: "Not logged in. Use 'routectl auth' to log in.",
    AuthState.PASSWORD_AUTHENTICATED: "Logged in with a password.",
    AuthState.CLIENT_CREDENTIALS_AUTHENTICATED: "Logged in with client credentials.",
}


class CommandHandler:
    """Handles incoming commands and delegates to appropriate services."""

    def __init__(
        self,
        route_service: RouteService,
        auth_service: AuthService,
        resolver: ResolverService,
        store: SessionStore,
        ui: UserInterface,
    ):
        """Initializes the CommandHandler with required services."""
        self.route_service = route_service
        self.auth_service = auth_service
        self.resolver = resolver
        self.store = store
        self.ui = ui

    async def _run(self, command: str, action: Callable[[Warnings], Awaitable[T]]) -> Optional[T]:
        """Runs an action, then displays its warnings and any failure.

        Returns the action's result, or None if it failed.
        """
        warnings = Warnings()
        try:
            result = await action(warnings)
        except (ActionError, APIError) as e:
            logger.info(f"'{command}' failed: {e}")
            self.ui.display_warnings(list(warnings))
            self.ui.display_error(str(e))
            return None
        except Exception as e:
            logger.error(f"Unexpected error during '{command}': {e}", exc_info=True)
            self.ui.display_warnings(list(warnings))
            self.ui.display_error(f"{command} failed: {e}")
            return None
        self.ui.display_warnings(list(warnings))
        return result

    async def handle_auth(
        self,
        username: str,
        password: str,
        client_credentials: bool = False,
        origin: str = "",
        mfa_code: Optional[str] = None,
    ) -> bool:
        """Handles the 'auth' command."""
        if client_credentials:
            grant_type = GrantType.CLIENT_CREDENTIALS
            credentials: Credentials = {"client_id": username, "client_secret": password}
        else:
            grant_type = GrantType.PASSWORD
            credentials = {"username": username, "password": password}
        if mfa_code:
            credentials["mfaCode"] = mfa_code

        self.ui.display_info("Authenticating...")
        try:
            await self.auth_service.authenticate(credentials, origin, grant_type)
        except (ActionError, APIError) as e:
            self.ui.display_error(str(e))
            return False
        except Exception as e:
            logger.error(f"Unexpected error during 'auth': {e}", exc_info=True)
            self.ui.display_error(f"auth failed: {e}")
            return False
        self.ui.display_info("OK")
        self.ui.display_info("Use 'routectl target' to target an org and space.")
        return True

    async def handle_status(self) -> bool:
        """Handles the 'status' command: shows the login state and target."""
        state = self.auth_service.current_state()
        self.ui.display_info(STATE_DESCRIPTIONS[state])
        org_name = self._targeted_name(self.store.targeted_organization()) or "(none)"
        space_name = self._targeted_name(self.store.targeted_space()) or "(none)"
        self.ui.display_info(f"org:   {org_name}")
        self.ui.display_info(f"space: {space_name}")
        return True

    async def handle_target(self, org_name: str, space_name: Optional[str] = None) -> bool:
        """Handles the 'target' command: resolves names and records them."""

        async def target(warnings: Warnings) -> bool:
            org = await self.resolver.get_organization_by_name(org_name, warnings)
            space = None
            if space_name:
                space = await self.resolver.get_space_by_name_and_organization(space_name, org.guid, warnings)
            # Only touch the store once every name resolved.
            self.store.target_organization(org.guid, org.name)
            if space is not None:
                self.store.target_space(space.guid, space.name)
            return True

        if await self._run("target", target) is None:
            return False
        message = f"Targeted org {org_name}"
        if space_name:
            message += f", space {space_name}"
        self.ui.display_info(message)
        return True

    async def handle_create_route(
        self,
        domain_name: str,
        host: str = "",
        path: str = "",
        org_name: Optional[str] = None,
        space_name: Optional[str] = None,
    ) -> bool:
        """Handles the 'create-route' command, defaulting to the targeted org/space."""
        org_name = org_name or self._targeted_name(self.store.targeted_organization())
        space_name = space_name or self._targeted_name(self.store.targeted_space())
        if not org_name or not space_name:
            self.ui.display_error("No org and space targeted. Use 'routectl target -o ORG -s SPACE'.")
            return False

        route = await self._run(
            "create-route",
            lambda warnings: self.route_service.create_route(
                org_name, space_name, domain_name, host, path, warnings
            ),
        )
        if route is None:
            return False
        self.ui.display_info(f"Route {route.url} has been created.")
        return True

    async def handle_routes(self, org_level: bool = False) -> bool:
        """Handles the 'routes' command for the targeted space or org."""
        if org_level:
            target = self.store.targeted_organization()
            missing = "No org targeted. Use 'routectl target -o ORG'."
        else:
            target = self.store.targeted_space()
            missing = "No space targeted. Use 'routectl target -o ORG -s SPACE'."
        if target is None:
            self.ui.display_error(missing)
            return False

        guid, name = target
        if org_level:
            routes = await self._run(
                "routes", lambda warnings: self.route_service.get_routes_by_org(GUID(guid), warnings)
            )
        else:
            routes = await self._run(
                "routes", lambda warnings: self.route_service.get_routes_by_space(GUID(guid), warnings)
            )
        if routes is None:
            return False
        if not routes:
            self.ui.display_info(f"No routes found in {name}.")
        else:
            self.ui.display_routes(routes, title=f"Routes in {name}")
        return True

    async def handle_delete_route(self, domain_name: str, host: str = "", path: str = "") -> bool:
        """Handles the 'delete-route' command."""
        self.ui.display_info(f"Deleting route {host + '.' if host else ''}{domain_name}{path}...")

        async def delete(warnings: Warnings) -> bool:
            await self.route_service.delete_route(domain_name, host, path, warnings)
            return True

        if await self._run("delete-route", delete) is None:
            return False
        self.ui.display_info("OK")
        return True

    @staticmethod
    def _targeted_name(target: Optional[TargetInfo]) -> str:
        return target[1] if target else ""
