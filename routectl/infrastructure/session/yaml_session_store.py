"""SessionStore implementation backed by a YAML file.

The whole document is rewritten on every update (write to a temporary
file, then replace), so readers never observe a half-written session.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from routectl.domain.errors import ConfigurationError
from routectl.domain.interfaces.session_store import SessionStore, TargetInfo

logger = logging.getLogger(__name__)

EMPTY_SESSION: Dict[str, Any] = {
    "access_token": "",
    "refresh_token": "",
    "ssh_oauth_client": "",
    "uaa_grant_type": "",
    "uaa_oauth_client": "",
    "uaa_oauth_client_secret": "",
    "target_organization": None,
    "target_space": None,
}


class YamlSessionStore(SessionStore):
    """Persists session state to a YAML file (default ~/.routectl/session.yaml)."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data = self._load()

    def _load(self) -> Dict[str, Any]:
        data = dict(EMPTY_SESSION)
        if not self.path.is_file():
            logger.debug(f"No session file at {self.path}; starting empty")
            return data
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.debug(f"Failed to read session file {self.path}", exc_info=True)
            raise ConfigurationError(
                f"Cannot read session file {self.path}: {e}. Fix or delete it, then log in again."
            ) from e
        if isinstance(loaded, dict):
            data.update({k: v for k, v in loaded.items() if k in EMPTY_SESSION})
        elif loaded is not None:
            logger.warning(f"Session file {self.path} did not contain a mapping; ignoring it")
        return data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".session-", suffix=".yaml")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(self._data, f, default_flow_style=False, sort_keys=True)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise
        logger.debug(f"Session written to {self.path}")

    def _update(self, **values: Any) -> None:
        self._data.update(values)
        self._save()

    # --- Tokens ---

    def set_token_information(self, access_token: str, refresh_token: str, ssh_oauth_client: str) -> None:
        self._update(access_token=access_token, refresh_token=refresh_token, ssh_oauth_client=ssh_oauth_client)

    def access_token(self) -> str:
        return self._data["access_token"] or ""

    # --- Grant type and client credentials ---

    def uaa_grant_type(self) -> str:
        return self._data["uaa_grant_type"] or ""

    def set_uaa_grant_type(self, grant_type: str) -> None:
        self._update(uaa_grant_type=grant_type)

    def set_uaa_client_credentials(self, client: str, client_secret: str) -> None:
        self._update(uaa_oauth_client=client, uaa_oauth_client_secret=client_secret)

    # --- Target ---

    def unset_organization_and_space_information(self) -> None:
        self._update(target_organization=None, target_space=None)

    def target_organization(self, guid: str, name: str) -> None:
        self._update(target_organization={"guid": guid, "name": name}, target_space=None)

    def target_space(self, guid: str, name: str) -> None:
        self._update(target_space={"guid": guid, "name": name})

    def targeted_organization(self) -> Optional[TargetInfo]:
        return self._target("target_organization")

    def targeted_space(self) -> Optional[TargetInfo]:
        return self._target("target_space")

    def _target(self, key: str) -> Optional[TargetInfo]:
        value = self._data.get(key)
        if not isinstance(value, dict) or not value.get("guid"):
            return None
        return value["guid"], value.get("name", "")
