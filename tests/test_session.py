from unittest.mock import patch, MagicMock
import pytest

from smnotify.base.config import SessionConfig
from smnotify.base.exceptions import ClientSessionError
from smnotify.ibm.en_registration import EnRegistrationModel
from smnotify.base.state import ResourceData
from smnotify.ibm.session import (
    ClientSession,
    get_client_with_instance_endpoint,
    get_endpoint_type,
    get_region,
    instance_endpoint,
)


@pytest.fixture
def session():
    with patch("smnotify.ibm.session.SecretsManagerV2") as mock_sm, \
            patch("smnotify.ibm.session.IAMAuthenticator") as mock_auth:
        client = MagicMock()
        mock_sm.return_value = client
        instance = ClientSession(SessionConfig(api_key="key", region="us-east", timeout=15))
        yield instance, client, mock_sm, mock_auth


def _data(**values) -> ResourceData:
    return ResourceData(EnRegistrationModel, values)


class TestClientSession:
    def test_authenticator_built_from_config(self, session):
        instance, _, _, mock_auth = session
        mock_auth.assert_called_once_with("key", url=None)
        assert instance.authenticator is mock_auth.return_value

    def test_client_gets_timeout(self, session):
        instance, client, mock_sm, mock_auth = session
        assert instance.secrets_manager_v2() is client
        mock_sm.assert_called_once_with(authenticator=mock_auth.return_value)
        client.set_http_config.assert_called_once_with({"timeout": 15.0})

    def test_authenticator_failure(self):
        with patch("smnotify.ibm.session.IAMAuthenticator") as mock_auth:
            mock_auth.side_effect = ValueError("The apikey shouldn't be None.")
            with pytest.raises(ClientSessionError, match="IAM authenticator"):
                ClientSession(SessionConfig(api_key="key"))

    def test_client_failure(self, session):
        instance, _, mock_sm, _ = session
        mock_sm.side_effect = ValueError("authenticator must be provided")
        with pytest.raises(ClientSessionError, match="Secrets Manager client"):
            instance.secrets_manager_v2()


class TestScoping:
    def test_region_from_data(self, session):
        instance = session[0]
        assert get_region(instance, _data(region="eu-gb")) == "eu-gb"

    def test_region_fallback(self, session):
        instance = session[0]
        assert get_region(instance, _data()) == "us-east"

    def test_endpoint_type_from_data(self, session):
        instance = session[0]
        assert get_endpoint_type(instance, _data(endpoint_type="private")) == "private"

    def test_endpoint_type_fallback(self, session):
        instance = session[0]
        assert get_endpoint_type(instance, _data()) == "public"

    def test_instance_endpoint(self):
        assert instance_endpoint("abc", "jp-tok", "public") == (
            "https://abc.jp-tok.secrets-manager.appdomain.cloud"
        )
        assert instance_endpoint("abc", "jp-tok", "private") == (
            "https://abc.private.jp-tok.secrets-manager.appdomain.cloud"
        )

    def test_client_with_instance_endpoint(self, session):
        instance, client, _, _ = session
        result = get_client_with_instance_endpoint(instance, "abc", "us-east", "private")
        assert result is client
        client.set_service_url.assert_called_once_with(
            "https://abc.private.us-east.secrets-manager.appdomain.cloud"
        )

    def test_service_url_override(self):
        with patch("smnotify.ibm.session.SecretsManagerV2") as mock_sm, \
                patch("smnotify.ibm.session.IAMAuthenticator"):
            client = MagicMock()
            mock_sm.return_value = client
            instance = ClientSession(SessionConfig(api_key="key", service_url="http://localhost:8080"))
            get_client_with_instance_endpoint(instance, "abc", "us-south", "public")
            client.set_service_url.assert_called_once_with("http://localhost:8080")
