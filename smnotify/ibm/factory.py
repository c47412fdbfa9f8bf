"""IBM Cloud resource factory.

Maps resource type names to their implementations.
``RESOURCE_REGISTRY`` is consumed by :func:`smnotify.factory.resource_factory`.
"""

from smnotify.ibm.en_registration import EnRegistration


# Resource registry for IBM Cloud
RESOURCE_REGISTRY: dict[str, type] = {
    "ibm_sm_en_registration": EnRegistration,
}
