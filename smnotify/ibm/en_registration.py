"""Secrets Manager Event Notifications registration resource.

Registers a Secrets Manager instance as a source in an Event Notifications
instance.  The registration is a singleton per Secrets Manager instance and
the API only offers create-or-replace, so both create and update go through
``create_notifications_registration``.
"""

from __future__ import annotations

import re
import uuid
from typing import Any

import requests
from ibm_cloud_sdk_core import ApiException, DetailedResponse
from ibm_secrets_manager_sdk.secrets_manager_v2 import SecretsManagerV2
from pydantic import BaseModel, ConfigDict, Field, field_validator

from smnotify.base import ResourceBlueprint, ResourceData
from smnotify.base.config import EndpointType
from smnotify.base.exceptions import InvalidIdentifierError, RemoteCallError
from smnotify.base.logger import sm_logger
from smnotify.ibm.session import (
    ClientSession,
    get_client_with_instance_endpoint,
    get_endpoint_type,
    get_region,
)


RESOURCE_NAME = "ibm_sm_en_registration"

CRN_PATTERN = re.compile(
    r"^crn:v[0-9](:([A-Za-z0-9-._~!$&'()*+,;=@\/]|%[0-9A-Z]{2})*){8}$"
)

# Fields sent to create_notifications_registration
REGISTRATION_FIELDS = (
    "event_notifications_instance_crn",
    "event_notifications_source_name",
    "event_notifications_source_description",
)


class EnRegistrationModel(BaseModel):
    """Configuration schema of ``ibm_sm_en_registration``."""

    model_config = ConfigDict(extra="forbid")

    instance_id: str = Field(min_length=1, description="The ID of the Secrets Manager instance.")
    region: str | None = Field(
        default=None, description="The region of the Secrets Manager instance."
    )
    endpoint_type: EndpointType | None = Field(
        default=None, description="public or private."
    )
    event_notifications_instance_crn: str = Field(
        min_length=9,
        max_length=512,
        description="A CRN that uniquely identifies an IBM Cloud resource.",
    )
    event_notifications_source_name: str = Field(
        min_length=2,
        max_length=256,
        description="The name that is displayed as a source that is in your "
        "Event Notifications instance.",
    )
    event_notifications_source_description: str | None = Field(
        default=None,
        max_length=1024,
        description="An optional description for the source that is in your "
        "Event Notifications instance.",
    )

    @field_validator("event_notifications_instance_crn")
    @classmethod
    def check_crn(cls, value: str) -> str:
        if not CRN_PATTERN.fullmatch(value):
            raise ValueError(f"'{value}' is not a valid CRN")
        return value


def validate_schema(data: ResourceData) -> EnRegistrationModel:
    """Validate the configuration held by *data*.

    Raises:
        pydantic.ValidationError: If any field violates the schema.
    """
    return EnRegistrationModel.model_validate(data.values())


def format_id(region: str, instance_id: str) -> str:
    return f"{region}/{instance_id}"


def parse_id(resource_id: str) -> tuple[str, str]:
    """Split a ``region/instance_id`` identifier.

    Raises:
        InvalidIdentifierError: If the identifier does not have two non-empty parts.
    """
    parts = resource_id.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidIdentifierError(
            f"Invalid identifier '{resource_id}', expected <region>/<instance_id>"
        )
    return parts[0], parts[1]


class EnRegistration(ResourceBlueprint):
    """Lifecycle handlers for a Secrets Manager Event Notifications registration.

    Every log record emitted by one handler call, including the read that
    create and update finish with, carries the same ``request_id``.

    Attributes:
        session: Client session used to build instance-scoped clients.
    """

    name = RESOURCE_NAME
    schema = EnRegistrationModel

    def __init__(self, session: ClientSession):
        self.session = session

    def _client(self, data: ResourceData, instance_id: str, region: str) -> SecretsManagerV2:
        return get_client_with_instance_endpoint(
            self.session, instance_id, region, get_endpoint_type(self.session, data)
        )

    def _invoke(
        self,
        client: SecretsManagerV2,
        operation: str,
        region: str,
        instance_id: str,
        request_id: str,
        not_found_ok: bool = False,
        **kwargs: Any,
    ) -> DetailedResponse | None:
        """Call *operation* on *client*, wrapping failures in :class:`RemoteCallError`.

        Returns ``None`` instead of raising on HTTP 404 when *not_found_ok* is set.
        """
        try:
            return getattr(client, operation)(**kwargs)
        except ApiException as e:
            if not_found_ok and e.code == 404:
                return None
            response, status_code = e.http_response, e.code
            error: Exception = e
        except requests.RequestException as e:
            response = e.response
            status_code = response.status_code if response is not None else None
            error = e
        sm_logger.debug(
            f"{operation} failed {error}\n{response}",
            resource=self.name,
            operation=operation,
            region=region,
            instance_id=instance_id,
            request_id=request_id,
        )
        raise RemoteCallError(operation, error, response, status_code) from error

    @staticmethod
    def _registration_options(
        model: EnRegistrationModel, clear_description: bool = False
    ) -> dict[str, str]:
        options = {
            "event_notifications_instance_crn": model.event_notifications_instance_crn,
            "event_notifications_source_name": model.event_notifications_source_name,
        }
        description = model.event_notifications_source_description
        if description is not None:
            options["event_notifications_source_description"] = description
        elif clear_description:
            # an omitted description keeps the remote one
            options["event_notifications_source_description"] = ""
        return options

    def create(self, data: ResourceData) -> None:
        """Register the Event Notifications source and read it back.

        Args:
            data: Desired configuration; ``instance_id``, the CRN and the
                source name are required.

        Raises:
            pydantic.ValidationError: If the configuration is invalid.
            ClientSessionError: If the client cannot be built.
            RemoteCallError: If the registration call fails.
        """
        request_id = uuid.uuid4().hex[:12]
        model = validate_schema(data)
        region = get_region(self.session, data)
        instance_id = model.instance_id
        client = self._client(data, instance_id, region)

        self._invoke(
            client,
            "create_notifications_registration",
            region,
            instance_id,
            request_id,
            **self._registration_options(model),
        )

        data.set_id(format_id(region, instance_id))
        sm_logger.info(
            "Registration created",
            resource=self.name,
            operation="create",
            region=region,
            instance_id=instance_id,
            request_id=request_id,
        )
        self._read(data, request_id)

    def read(self, data: ResourceData) -> None:
        """Refresh ``instance_id``, ``region`` and the CRN from the instance.

        A 404 from the instance clears the identifier instead of raising.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            RemoteCallError: If the lookup fails for any reason other than 404.
            StateError: If a field cannot be written back.
        """
        self._read(data, uuid.uuid4().hex[:12])

    def _read(self, data: ResourceData, request_id: str) -> None:
        region, instance_id = parse_id(data.id)
        client = self._client(data, instance_id, region)

        response = self._invoke(
            client,
            "get_notifications_registration",
            region,
            instance_id,
            request_id,
            not_found_ok=True,
        )
        if response is None:
            sm_logger.info(
                "Registration not found, removing from state",
                resource=self.name,
                operation="read",
                region=region,
                instance_id=instance_id,
                request_id=request_id,
            )
            data.set_id("")
            return

        registration = response.get_result() or {}
        data.set("instance_id", instance_id)
        data.set("region", region)
        data.set(
            "event_notifications_instance_crn",
            registration.get("event_notifications_instance_crn"),
        )

    def update(self, data: ResourceData) -> None:
        """Re-register when any registration field changed, then read back.

        The whole registration is replaced, so every field is sent even
        when only the description changed.  A description removed from
        the configuration is sent as ``""``.  Nothing is sent when no
        field changed.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            pydantic.ValidationError: If the configuration is invalid.
            RemoteCallError: If the registration call fails.
        """
        request_id = uuid.uuid4().hex[:12]
        region, instance_id = parse_id(data.id)
        model = validate_schema(data)

        changed = [field for field in REGISTRATION_FIELDS if data.has_change(field)]
        if changed:
            client = self._client(data, instance_id, region)
            options = self._registration_options(
                model,
                clear_description="event_notifications_source_description" in changed,
            )
            self._invoke(
                client,
                "create_notifications_registration",
                region,
                instance_id,
                request_id,
                **options,
            )
            sm_logger.info(
                f"Registration updated ({', '.join(changed)})",
                resource=self.name,
                operation="update",
                region=region,
                instance_id=instance_id,
                request_id=request_id,
            )

        self._read(data, request_id)

    def delete(self, data: ResourceData) -> None:
        """Remove the registration and clear the identifier.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            RemoteCallError: If the delete call fails.
        """
        request_id = uuid.uuid4().hex[:12]
        region, instance_id = parse_id(data.id)
        client = self._client(data, instance_id, region)

        self._invoke(
            client, "delete_notifications_registration", region, instance_id, request_id
        )

        data.set_id("")
        sm_logger.info(
            "Registration deleted",
            resource=self.name,
            operation="delete",
            region=region,
            instance_id=instance_id,
            request_id=request_id,
        )
