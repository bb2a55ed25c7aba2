"""Registry of component types and their storage."""

from __future__ import annotations

from typing import Any, TypeVar

from .component_array import ComponentArray
from .types import ComponentID, DuplicateRegistrationError, Entity, NotRegisteredError

T = TypeVar("T")


class ComponentManager:
    """Assigns IDs to component types and holds one array per type."""

    def __init__(self) -> None:
        self._ids: dict[type, ComponentID] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}

    def register_component(self, component_type: type) -> None:
        """Register ``component_type``, giving it the next free ID."""
        if component_type in self._ids:
            raise DuplicateRegistrationError(
                f"component {component_type.__qualname__} registered twice"
            )
        self._ids[component_type] = len(self._ids)
        self._arrays[component_type] = ComponentArray()

    def component_id(self, component_type: type) -> ComponentID:
        """Return the ID given to ``component_type``."""
        try:
            return self._ids[component_type]
        except KeyError:
            raise self._not_registered(component_type) from None

    def add_component(self, entity: Entity, component_type: type[T], component: T) -> None:
        """Attach ``component`` of ``component_type`` to ``entity``."""
        self._array(component_type).insert_data(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach the ``component_type`` component from ``entity``."""
        self._array(component_type).remove_data(entity)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the ``component_type`` component of ``entity``."""
        return self._array(component_type).get_data(entity)

    def entity_despawned(self, entity: Entity) -> None:
        """Drop every component held by ``entity``."""
        for array in self._arrays.values():
            array.entity_despawned(entity)

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise self._not_registered(component_type) from None

    @staticmethod
    def _not_registered(component_type: type) -> NotRegisteredError:
        name = getattr(component_type, "__qualname__", repr(component_type))
        return NotRegisteredError(f"component {name} not registered before use")