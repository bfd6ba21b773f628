"""Interface for the identity provider (UAA)."""

import abc
from typing import Tuple

from ..models.auth import GrantType
from ..models.common import AccessToken, Credentials, RefreshToken


class UAAClient(abc.ABC):
    """Abstract Base Class for token exchanges against the identity provider."""

    @abc.abstractmethod
    async def authenticate(
        self, credentials: Credentials, origin: str, grant_type: GrantType
    ) -> Tuple[AccessToken, RefreshToken]:
        """Exchanges credentials for an access and refresh token.

        Args:
            credentials: Arbitrary credential fields (username/password,
                client_id/client_secret, one-time codes, ...). Checking that
                the mandatory fields are present is up to the implementation.
            origin: Identity zone origin; empty means the provider default.
            grant_type: The OAuth grant type to use.

        Raises:
            APIError: If the exchange is rejected.
        """
        pass
