"""Interface for persisted session state.

Holds tokens, the grant type of the last login, stored client credentials
and the targeted organization/space. Implementations must write each
update as a whole; a session is never partially updated on disk.
"""

import abc
from typing import Optional, Tuple

TargetInfo = Tuple[str, str]  # (guid, name)


class SessionStore(abc.ABC):
    """Abstract Base Class for session/config storage."""

    @abc.abstractmethod
    def set_token_information(self, access_token: str, refresh_token: str, ssh_oauth_client: str) -> None:
        pass

    @abc.abstractmethod
    def access_token(self) -> str:
        pass

    @abc.abstractmethod
    def unset_organization_and_space_information(self) -> None:
        """Forgets the targeted organization and space."""
        pass

    @abc.abstractmethod
    def uaa_grant_type(self) -> str:
        """Grant type of the last successful login; empty for password/none."""
        pass

    @abc.abstractmethod
    def set_uaa_grant_type(self, grant_type: str) -> None:
        pass

    @abc.abstractmethod
    def set_uaa_client_credentials(self, client: str, client_secret: str) -> None:
        pass

    @abc.abstractmethod
    def target_organization(self, guid: str, name: str) -> None:
        """Targets an organization, clearing any targeted space."""
        pass

    @abc.abstractmethod
    def target_space(self, guid: str, name: str) -> None:
        pass

    @abc.abstractmethod
    def targeted_organization(self) -> Optional[TargetInfo]:
        pass

    @abc.abstractmethod
    def targeted_space(self) -> Optional[TargetInfo]:
        pass
