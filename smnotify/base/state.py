"""Resource state handed to lifecycle handlers by the orchestrator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from smnotify.base.exceptions import StateError


class ResourceData:
    """Mutable view of one resource instance.

    ``values`` holds the desired (and, after a read, the observed) field
    values; ``prior`` is the last state the orchestrator recorded and is
    only used for change detection.  An empty ``id`` means the resource
    does not exist.

    Attributes:
        schema: Pydantic model whose fields bound the keys that may be set.
    """

    def __init__(
        self,
        schema: type[BaseModel],
        values: dict[str, Any] | None = None,
        prior: dict[str, Any] | None = None,
        resource_id: str = "",
    ) -> None:
        self.schema = schema
        self._values: dict[str, Any] = dict(values or {})
        self._prior: dict[str, Any] | None = dict(prior) if prior is not None else None
        self._id = resource_id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def get(self, key: str) -> Any:
        return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        """Write *value* to field *key*.

        Raises:
            StateError: If *key* is not part of the resource schema.
        """
        if key not in self.schema.model_fields:
            raise StateError(f"Error setting {key}: unknown field for {self.schema.__name__}")
        self._values[key] = value

    def has_change(self, key: str) -> bool:
        """Return whether *key* differs from the prior state.

        Without a prior state every field that carries a value counts as changed.
        """
        if self._prior is None:
            return self._values.get(key) is not None
        return self._values.get(key) != self._prior.get(key)

    def values(self) -> dict[str, Any]:
        return dict(self._values)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self._id, **self._values}

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, values={self._values!r})"
