"""Core service for logging in against the identity provider.

Decides what session state to persist for each grant type and enforces
the transition rule between them:

    UNAUTHENTICATED / PASSWORD_AUTHENTICATED --client_credentials--> CLIENT_CREDENTIALS_AUTHENTICATED
    any state except CLIENT_CREDENTIALS_AUTHENTICATED --password--> PASSWORD_AUTHENTICATED
    CLIENT_CREDENTIALS_AUTHENTICATED --password--> refused (log out first)

Callers must not run two logins against the same store concurrently; the
grant type check reads the store and the outcome writes it.
"""

import logging

from routectl.domain.errors import PasswordGrantTypeLogoutRequiredError
from routectl.domain.interfaces.session_store import SessionStore
from routectl.domain.interfaces.uaa_client import UAAClient
from routectl.domain.models.auth import AuthState, GrantType
from routectl.domain.models.common import Credentials

logger = logging.getLogger(__name__)

TOKEN_SCHEME = "bearer"


class AuthService:
    """Orchestrates authentication and session persistence."""

    def __init__(self, uaa_client: UAAClient, store: SessionStore):
        self.uaa_client = uaa_client
        self.store = store

    def current_state(self) -> AuthState:
        return AuthState.from_session(self.store.access_token(), self.store.uaa_grant_type())

    async def authenticate(self, credentials: Credentials, origin: str, grant_type: GrantType) -> None:
        """Logs in and records the resulting session.

        The credential mapping is passed to the identity provider as-is, and
        so is the origin (an empty origin is the provider's concern).

        Raises:
            PasswordGrantTypeLogoutRequiredError: Password login attempted while
                the session was obtained with client credentials. Nothing is
                called and nothing is persisted.
            Exception: Whatever the identity provider raised, unchanged. The
                stored tokens are cleared first, also when the call is
                cancelled.
        """
        if grant_type is GrantType.PASSWORD and self.store.uaa_grant_type() == GrantType.CLIENT_CREDENTIALS.value:
            logger.info("Refusing password login over a client credentials session")
            raise PasswordGrantTypeLogoutRequiredError()

        logger.info(f"Authenticating with grant type '{grant_type.value}'")
        try:
            access_token, refresh_token = await self.uaa_client.authenticate(credentials, origin, grant_type)
        except BaseException as e:
            logger.info(f"Authentication failed: {e!r}")
            self.store.set_token_information("", "", "")
            raise
        finally:
            self.store.unset_organization_and_space_information()

        self.store.set_token_information(f"{TOKEN_SCHEME} {access_token}", refresh_token, "")

        self.store.set_uaa_grant_type(grant_type.stored_value)
        if grant_type is not GrantType.PASSWORD:
            # The secret is never persisted.
            self.store.set_uaa_client_credentials(credentials.get("client_id", ""), "")
        logger.info("Authentication succeeded")
