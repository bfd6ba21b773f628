"""Domain models related to authentication against the identity provider."""

from enum import Enum


class GrantType(str, Enum):
    """OAuth grant types accepted by the identity provider."""

    PASSWORD = "password"
    CLIENT_CREDENTIALS = "client_credentials"

    @property
    def stored_value(self) -> str:
        """Value recorded in the session store after a successful login.

        Password sessions are recorded as the empty string so that stores
        written before client credentials existed read back as password.
        """
        if self is GrantType.PASSWORD:
            return ""
        return self.value


class AuthState(Enum):
    """Per-session authentication state.

    Defaults to UNAUTHENTICATED when the store holds no access token.
    A token with an empty stored grant type is PASSWORD_AUTHENTICATED.
    """

    UNAUTHENTICATED = "unauthenticated"
    PASSWORD_AUTHENTICATED = "password"
    CLIENT_CREDENTIALS_AUTHENTICATED = "client_credentials"

    @classmethod
    def from_session(cls, access_token: str, stored_grant_type: str) -> "AuthState":
        if not access_token:
            return cls.UNAUTHENTICATED
        if stored_grant_type == GrantType.CLIENT_CREDENTIALS.value:
            return cls.CLIENT_CREDENTIALS_AUTHENTICATED
        return cls.PASSWORD_AUTHENTICATED
