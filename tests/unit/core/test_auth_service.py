import asyncio

import pytest
from unittest.mock import MagicMock

from routectl.core.services.auth_service import AuthService
from routectl.domain.errors import APIError, PasswordGrantTypeLogoutRequiredError
from routectl.domain.models.auth import AuthState, GrantType


@pytest.fixture
def auth_service(mock_uaa_client: MagicMock, mock_store: MagicMock):
    return AuthService(mock_uaa_client, mock_store)


@pytest.fixture
def creds():
    return {
        "client_id": "some-username",
        "client_secret": "some-password",
        "origin": "uaa",
    }


@pytest.fixture
def tokens(mock_uaa_client: MagicMock):
    mock_uaa_client.authenticate.return_value = ("some-access-token", "some-refresh-token")
    return mock_uaa_client


@pytest.mark.asyncio
async def test_password_grant_stores_session(auth_service, tokens, mock_store, creds):
    await auth_service.authenticate(creds, "uaa", GrantType.PASSWORD)

    tokens.authenticate.assert_awaited_once_with(creds, "uaa", GrantType.PASSWORD)
    mock_store.set_token_information.assert_called_once_with("bearer some-access-token", "some-refresh-token", "")
    mock_store.unset_organization_and_space_information.assert_called_once_with()
    mock_store.set_uaa_grant_type.assert_called_once_with("")
    mock_store.set_uaa_client_credentials.assert_not_called()


@pytest.mark.asyncio
async def test_password_grant_after_password_grant_is_allowed(auth_service, tokens, mock_store, creds):
    mock_store.uaa_grant_type.return_value = ""

    await auth_service.authenticate(creds, "uaa", GrantType.PASSWORD)

    tokens.authenticate.assert_awaited_once()


@pytest.mark.asyncio
async def test_password_grant_after_client_credentials_requires_logout(auth_service, tokens, mock_store, creds):
    mock_store.uaa_grant_type.return_value = "client_credentials"

    with pytest.raises(PasswordGrantTypeLogoutRequiredError):
        await auth_service.authenticate(creds, "uaa", GrantType.PASSWORD)

    assert mock_store.uaa_grant_type.call_count == 1
    tokens.authenticate.assert_not_called()
    mock_store.set_token_information.assert_not_called()
    mock_store.set_uaa_grant_type.assert_not_called()
    mock_store.unset_organization_and_space_information.assert_not_called()


@pytest.mark.asyncio
async def test_client_credentials_grant_stores_client_id_only(auth_service, tokens, mock_store, creds):
    await auth_service.authenticate(creds, "uaa", GrantType.CLIENT_CREDENTIALS)

    mock_store.set_token_information.assert_called_once_with("bearer some-access-token", "some-refresh-token", "")
    mock_store.set_uaa_client_credentials.assert_called_once_with("some-username", "")
    mock_store.set_uaa_grant_type.assert_called_once_with("client_credentials")


@pytest.mark.asyncio
async def test_client_credentials_over_client_credentials_is_allowed(auth_service, tokens, mock_store, creds):
    mock_store.uaa_grant_type.return_value = "client_credentials"

    await auth_service.authenticate(creds, "uaa", GrantType.CLIENT_CREDENTIALS)

    tokens.authenticate.assert_awaited_once()


@pytest.mark.asyncio
async def test_extra_credentials_are_passed_through(auth_service, tokens):
    creds = {
        "username": "some-username",
        "password": "some-password",
        "mfaCode": "some-one-time-code",
    }

    await auth_service.authenticate(creds, "uaa", GrantType.PASSWORD)

    uaa_credentials, _, _ = tokens.authenticate.call_args.args
    assert uaa_credentials == {
        "username": "some-username",
        "password": "some-password",
        "mfaCode": "some-one-time-code",
    }


@pytest.mark.asyncio
async def test_empty_origin_is_passed_as_is(auth_service, tokens, creds):
    await auth_service.authenticate(creds, "", GrantType.PASSWORD)

    _, origin, _ = tokens.authenticate.call_args.args
    assert origin == ""


@pytest.mark.asyncio
async def test_failed_authentication_clears_session(auth_service, mock_uaa_client, mock_store, creds):
    expected_err = APIError("some error")
    mock_uaa_client.authenticate.side_effect = expected_err

    with pytest.raises(APIError) as exc_info:
        await auth_service.authenticate(creds, "uaa", GrantType.PASSWORD)

    assert exc_info.value is expected_err
    mock_store.set_token_information.assert_called_once_with("", "", "")
    mock_store.unset_organization_and_space_information.assert_called_once_with()
    mock_store.set_uaa_grant_type.assert_not_called()


@pytest.mark.asyncio
async def test_cancelled_authentication_clears_session(auth_service, mock_uaa_client, mock_store, creds):
    mock_uaa_client.authenticate.side_effect = asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await auth_service.authenticate(creds, "uaa", GrantType.PASSWORD)

    mock_store.set_token_information.assert_called_once_with("", "", "")
    mock_store.unset_organization_and_space_information.assert_called_once_with()
    mock_store.set_uaa_grant_type.assert_not_called()


@pytest.mark.asyncio
async def test_failed_client_credentials_leaves_grant_type(auth_service, mock_uaa_client, mock_store, creds):
    mock_uaa_client.authenticate.side_effect = RuntimeError("connection reset")

    with pytest.raises(RuntimeError, match="connection reset"):
        await auth_service.authenticate(creds, "uaa", GrantType.CLIENT_CREDENTIALS)

    mock_store.set_token_information.assert_called_once_with("", "", "")
    mock_store.set_uaa_grant_type.assert_not_called()
    mock_store.set_uaa_client_credentials.assert_not_called()


@pytest.mark.parametrize(
    "token, grant, expected",
    [
        ("", "", AuthState.UNAUTHENTICATED),
        ("bearer t", "", AuthState.PASSWORD_AUTHENTICATED),
        ("bearer t", "client_credentials", AuthState.CLIENT_CREDENTIALS_AUTHENTICATED),
    ],
)
def test_current_state(auth_service, mock_store, token, grant, expected):
    mock_store.access_token.return_value = token
    mock_store.uaa_grant_type.return_value = grant

    assert auth_service.current_state() is expected
