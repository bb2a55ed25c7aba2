"""Packed storage for the instances of one component type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from .types import DuplicateComponentError, Entity, MissingComponentError

T = TypeVar("T")


class ComponentArray(Generic[T]):
    """Dense list of components with a mapping from entities to slots.

    Removal moves the last component into the freed slot so storage stays packed.
    """

    def __init__(self) -> None:
        self._components: list[T] = []
        self._entities: list[Entity] = []
        self._index: dict[Entity, int] = {}

    def insert_data(self, entity: Entity, component: T) -> None:
        """Attach ``component`` to ``entity``."""
        if entity in self._index:
            raise DuplicateComponentError(f"entity {entity} already has this component")
        self._index[entity] = len(self._components)
        self._components.append(component)
        self._entities.append(entity)

    def remove_data(self, entity: Entity) -> None:
        """Detach the component from ``entity``."""
        try:
            index = self._index.pop(entity)
        except KeyError:
            raise MissingComponentError(
                f"entity {entity} has no component to remove"
            ) from None
        last_component = self._components.pop()
        last_entity = self._entities.pop()
        if index < len(self._components):
            self._components[index] = last_component
            self._entities[index] = last_entity
            self._index[last_entity] = index

    def get_data(self, entity: Entity) -> T:
        """Return the component stored for ``entity``."""
        try:
            return self._components[self._index[entity]]
        except KeyError:
            raise MissingComponentError(f"entity {entity} has no such component") from None

    def entity_despawned(self, entity: Entity) -> None:
        """Drop the component of a despawned entity, if it has one."""
        if entity in self._index:
            self.remove_data(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Entity]:
        """Iterate over the entities in storage order."""
        return iter(list(self._entities))