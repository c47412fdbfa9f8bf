"""Abstract resource blueprint and core utilities.

Every managed resource inherits from the blueprint defined here.
Import it to type-hint your own code or to add further resources.
"""

from .resource import ResourceBlueprint
from .state import ResourceData
from .supported_services import existing_resources


__all__ = [
    "ResourceBlueprint",
    "ResourceData",
    "existing_resources",
]
