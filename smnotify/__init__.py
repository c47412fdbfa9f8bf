"""smnotify: Secrets Manager Event Notifications registration resource.

Entry point for the library. Import :func:`resource_factory` to create
the resource handlers with a single call::

    from smnotify import resource_factory

    registration = resource_factory("ibm_sm_en_registration", {"api_key": "..."})
    data = registration.new_data({
        "instance_id": "...",
        "event_notifications_instance_crn": "crn:v1:...",
        "event_notifications_source_name": "my-secrets-manager",
    })
    registration.create(data)
"""

from .base import ResourceBlueprint, ResourceData
from .factory import resource_factory

__all__ = [
    "ResourceBlueprint",
    "ResourceData",
    "resource_factory",
]
