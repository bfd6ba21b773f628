"""Main entry point for the routectl application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import asyncio
import logging
from typing import Any, Coroutine, Dict, Optional

import typer
from typing_extensions import Annotated

# --- Core Layer ---
from routectl.core.command_handler import CommandHandler
from routectl.core.services.auth_service import AuthService
from routectl.core.services.job_service import JobService
from routectl.core.services.resolver_service import ResolverService
from routectl.core.services.route_service import RouteService

# --- Domain Layer ---
from routectl.domain.errors import ConfigurationError

# --- Infrastructure Layer ---
from routectl.infrastructure.cli.display import ConsoleDisplay
from routectl.infrastructure.config.settings import get_config, get_default_origin, get_session_file, load_configuration
from routectl.infrastructure.monitoring.logger_setup import DEFAULT_LOG_FORMAT, level_from_name, setup_logging
from routectl.infrastructure.plugins.client_factory import build_platform_client, build_uaa_client
from routectl.infrastructure.session.yaml_session_store import YamlSessionStore

logger = logging.getLogger(__name__)

# --- Dependency Injection Container (Manual) ---

_dependencies: Optional[Dict[str, Any]] = None


def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.

    Raises:
        ConfigurationError: If the session file cannot be read or the API
            clients cannot be loaded.
    """
    # 1. Configuration and logging
    load_configuration()
    setup_logging(
        log_level=level_from_name(get_config("logging.level", "WARNING")),
        log_format=get_config("logging.format", DEFAULT_LOG_FORMAT),
        log_file=get_config("logging.file"),
    )
    logger.info("Initializing application dependencies...")

    dependencies: Dict[str, Any] = {}

    # 2. Infrastructure adapters
    dependencies["ui"] = ConsoleDisplay()
    dependencies["store"] = YamlSessionStore(get_session_file())
    dependencies["platform_client"] = build_platform_client()
    dependencies["uaa_client"] = build_uaa_client()

    # 3. Core services
    dependencies["resolver"] = ResolverService(dependencies["platform_client"])
    dependencies["job_service"] = JobService(dependencies["platform_client"])
    dependencies["route_service"] = RouteService(
        client=dependencies["platform_client"],
        resolver=dependencies["resolver"],
        job_service=dependencies["job_service"],
    )
    dependencies["auth_service"] = AuthService(
        uaa_client=dependencies["uaa_client"],
        store=dependencies["store"],
    )

    # 4. Command handler
    dependencies["command_handler"] = CommandHandler(
        route_service=dependencies["route_service"],
        auth_service=dependencies["auth_service"],
        resolver=dependencies["resolver"],
        store=dependencies["store"],
        ui=dependencies["ui"],
    )
    logger.info("All dependencies initialized successfully.")
    return dependencies


def get_command_handler() -> CommandHandler:
    global _dependencies
    if _dependencies is None:
        try:
            _dependencies = create_dependencies()
        except ConfigurationError as e:
            logger.debug("Initialization failed", exc_info=True)
            ConsoleDisplay().display_error(str(e))
            raise typer.Exit(code=1)
    return _dependencies["command_handler"]


def reset_dependencies() -> None:
    """Drops the cached dependencies so the next command rebuilds them."""
    global _dependencies
    _dependencies = None


# --- Typer App Definition ---
app = typer.Typer(
    name="routectl",
    help="routectl: manage platform routes and login sessions.",
    add_completion=False,
)


def run_command(coro: Coroutine[Any, Any, bool]) -> None:
    """Runs an async command handler and maps failure to exit status 1."""
    if not asyncio.run(coro):
        raise typer.Exit(code=1)


# --- CLI Commands ---

HostnameOption = Annotated[str, typer.Option("--hostname", "-n", help="Hostname for the route.")]
PathOption = Annotated[str, typer.Option("--path", help="Path for the route (a leading '/' is added).")]


@app.command()
def auth(
    username: Annotated[str, typer.Argument(help="Username, or client id with --client-credentials.")],
    password: Annotated[str, typer.Argument(help="Password, or client secret with --client-credentials.")],
    client_credentials: Annotated[
        bool, typer.Option("--client-credentials", help="Use the client credentials grant.")
    ] = False,
    origin: Annotated[
        Optional[str], typer.Option("--origin", help="Identity provider origin for password logins.")
    ] = None,
    mfa_code: Annotated[Optional[str], typer.Option("--mfa-code", help="One-time code for MFA.")] = None,
):
    """Authenticate non-interactively."""
    if client_credentials:
        origin = ""
    elif origin is None:
        origin = get_default_origin()
    handler = get_command_handler()
    run_command(handler.handle_auth(username, password, client_credentials, origin, mfa_code))


@app.command()
def status():
    """Show the login state and the targeted org and space."""
    handler = get_command_handler()
    run_command(handler.handle_status())


@app.command()
def target(
    org: Annotated[str, typer.Option("--org", "-o", help="Organization to target.")],
    space: Annotated[Optional[str], typer.Option("--space", "-s", help="Space to target.")] = None,
):
    """Target an organization and, optionally, a space."""
    handler = get_command_handler()
    run_command(handler.handle_target(org, space))


@app.command(name="create-route")
def create_route_command(
    domain: Annotated[str, typer.Argument(help="Domain for the route.")],
    hostname: HostnameOption = "",
    path: PathOption = "",
    org: Annotated[Optional[str], typer.Option("--org", "-o", help="Organization (default: targeted).")] = None,
    space: Annotated[Optional[str], typer.Option("--space", "-s", help="Space (default: targeted).")] = None,
):
    """Create a route for later use."""
    handler = get_command_handler()
    run_command(handler.handle_create_route(domain, hostname, path, org, space))


@app.command()
def routes(
    org_level: Annotated[bool, typer.Option("--org-level", help="List all routes in the targeted org.")] = False,
):
    """List routes in the targeted space (or org)."""
    handler = get_command_handler()
    run_command(handler.handle_routes(org_level))


@app.command(name="delete-route")
def delete_route_command(
    domain: Annotated[str, typer.Argument(help="Domain of the route.")],
    hostname: HostnameOption = "",
    path: PathOption = "",
):
    """Delete a route and wait for the deletion to finish."""
    handler = get_command_handler()
    run_command(handler.handle_delete_route(domain, hostname, path))


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
