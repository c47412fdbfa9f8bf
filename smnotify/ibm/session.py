"""Secrets Manager client session and instance-scoping helpers.

A :class:`ClientSession` owns the IAM authenticator for one set of
credentials.  Handlers never reuse a client across instances: every call
goes through :func:`get_client_with_instance_endpoint`, which points a
fresh ``SecretsManagerV2`` client at the instance's own endpoint.
"""

from __future__ import annotations

from ibm_cloud_sdk_core.authenticators import IAMAuthenticator
from ibm_secrets_manager_sdk.secrets_manager_v2 import SecretsManagerV2

from smnotify.base.config import EndpointType, SessionConfig
from smnotify.base.exceptions import ClientSessionError
from smnotify.base.state import ResourceData


PUBLIC_ENDPOINT = "https://{instance_id}.{region}.secrets-manager.appdomain.cloud"
PRIVATE_ENDPOINT = "https://{instance_id}.private.{region}.secrets-manager.appdomain.cloud"


class ClientSession:
    """Authenticated factory for ``SecretsManagerV2`` clients.

    Attributes:
        config: Validated session configuration.
        authenticator: IAM authenticator shared by every client.
    """

    def __init__(self, config: SessionConfig):
        """Build the IAM authenticator.

        Args:
            config: Validated session configuration.

        Raises:
            ClientSessionError: If the authenticator rejects the credentials.
        """
        self.config = config
        try:
            self.authenticator = IAMAuthenticator(config.api_key, url=config.iam_url)
        except ValueError as e:
            raise ClientSessionError(f"Failed to build IAM authenticator: {str(e)}") from e

    @property
    def region(self) -> str:
        return self.config.region

    @property
    def endpoint_type(self) -> EndpointType:
        return self.config.endpoint_type

    def secrets_manager_v2(self) -> SecretsManagerV2:
        """Return a new, unscoped Secrets Manager client.

        Raises:
            ClientSessionError: If the SDK refuses to build the client.
        """
        try:
            client = SecretsManagerV2(authenticator=self.authenticator)
        except ValueError as e:
            raise ClientSessionError(f"Failed to build Secrets Manager client: {str(e)}") from e
        client.set_http_config({"timeout": self.config.timeout})
        return client


def get_region(session: ClientSession, data: ResourceData) -> str:
    """Region set on the resource, else the session default."""
    return data.get("region") or session.region


def get_endpoint_type(session: ClientSession, data: ResourceData) -> EndpointType:
    """Endpoint type set on the resource, else the session default."""
    return data.get("endpoint_type") or session.endpoint_type


def instance_endpoint(instance_id: str, region: str, endpoint_type: EndpointType) -> str:
    template = PRIVATE_ENDPOINT if endpoint_type == "private" else PUBLIC_ENDPOINT
    return template.format(instance_id=instance_id, region=region)


def get_client_with_instance_endpoint(
    session: ClientSession,
    instance_id: str,
    region: str,
    endpoint_type: EndpointType,
) -> SecretsManagerV2:
    """Return a client pointed at one Secrets Manager instance.

    ``service_url`` in the session config takes precedence over the
    derived instance endpoint.

    Args:
        session: Authenticated client session.
        instance_id: Secrets Manager instance GUID.
        region: Region the instance lives in.
        endpoint_type: ``public`` or ``private``.

    Returns:
        A ``SecretsManagerV2`` client with its service URL set.
    """
    client = session.secrets_manager_v2()
    client.set_service_url(
        session.config.service_url or instance_endpoint(instance_id, region, endpoint_type)
    )
    return client
