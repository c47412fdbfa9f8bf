"""Resource factory.

Provides :func:`resource_factory`, the single entry-point for creating
resource handlers.  The function validates the session config, builds an
authenticated :class:`~smnotify.ibm.session.ClientSession` and returns the
registered resource bound to it.
"""

from smnotify.base import ResourceBlueprint, existing_resources
from smnotify.base.config import validate_config
from smnotify.ibm.factory import RESOURCE_REGISTRY
from smnotify.ibm.session import ClientSession


def resource_factory(resource_name: existing_resources, config: dict) -> ResourceBlueprint:
    """
    Factory function to create resource handlers by type name.
    Args:
        resource_name: The resource type (e.g., 'ibm_sm_en_registration').
        config: Session configuration dictionary (api_key, region, ...).
    Returns:
        An instance of the requested resource class.
    Raises:
        ValueError: If the resource type is not supported.
        pydantic.ValidationError: If the config is invalid.
        ClientSessionError: If the authenticator cannot be built.
    """
    if resource_name not in RESOURCE_REGISTRY:
        raise ValueError(f"Unsupported resource: {resource_name}")

    resource_class = RESOURCE_REGISTRY[resource_name]
    session = ClientSession(validate_config(config))
    return resource_class(session)
