import pytest
from unittest.mock import MagicMock
from typer.testing import CliRunner

from routectl.domain.interfaces.platform_client import PlatformClient
from routectl.domain.interfaces.session_store import SessionStore
from routectl.domain.interfaces.uaa_client import UAAClient
from routectl.domain.interfaces.user_interface import UserInterface
from routectl.infrastructure.config.settings import clear_test_config


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def mock_client():
    """Platform client mock; its async methods are AsyncMocks."""
    return MagicMock(spec=PlatformClient)


@pytest.fixture
def mock_uaa_client():
    return MagicMock(spec=UAAClient)


@pytest.fixture
def mock_store():
    mock = MagicMock(spec=SessionStore)
    mock.uaa_grant_type.return_value = ""
    mock.access_token.return_value = ""
    mock.targeted_organization.return_value = None
    mock.targeted_space.return_value = None
    return mock


@pytest.fixture
def mock_ui():
    return MagicMock(spec=UserInterface)


@pytest.fixture(autouse=True)
def reset_test_config():
    """Test-level config overrides never leak between tests."""
    yield
    clear_test_config()
