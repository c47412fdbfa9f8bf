"""Resource blueprint."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from smnotify.base.state import ResourceData


class ResourceBlueprint(ABC):
    """Abstract interface for a declaratively managed resource.

    The orchestrator calls one handler at a time per resource instance and
    owns the :class:`ResourceData` passed in; handlers mutate it in place.

    Attributes:
        name: Resource type name (e.g. ``ibm_sm_en_registration``).
        schema: Pydantic model describing the configurable fields.
    """

    name: str
    schema: type[BaseModel]

    def new_data(
        self,
        values: dict[str, Any] | None = None,
        prior: dict[str, Any] | None = None,
        resource_id: str = "",
    ) -> ResourceData:
        """Build a :class:`ResourceData` bound to this resource's schema."""
        return ResourceData(self.schema, values, prior, resource_id)

    @abstractmethod
    def create(self, data: ResourceData) -> None:
        """Create the remote object and populate *data* from it.

        Args:
            data: Desired configuration; receives the new identifier.
        """

    @abstractmethod
    def read(self, data: ResourceData) -> None:
        """Refresh *data* from the remote object.

        Clears the identifier when the remote object no longer exists.
        """

    @abstractmethod
    def update(self, data: ResourceData) -> None:
        """Apply changed fields of *data* to the remote object."""

    @abstractmethod
    def delete(self, data: ResourceData) -> None:
        """Destroy the remote object and clear the identifier."""
