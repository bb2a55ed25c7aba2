"""Allocation of entity IDs and their component signatures."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .types import ComponentID, Entity, MissingEntityError, Signature


class EntityManager:
    """Hands out entity IDs, recycling despawned ones first-in first-out."""

    def __init__(self) -> None:
        self._available: deque[Entity] = deque()
        self._signatures: dict[Entity, Signature] = {}
        self._next_id: Entity = 0

    def spawn(self) -> Entity:
        """Create an entity with an empty signature and return its ID."""
        if self._available:
            entity = self._available.popleft()
        else:
            entity = self._next_id
            self._next_id += 1
        self._signatures[entity] = frozenset()
        return entity

    def despawn(self, entity: Entity) -> None:
        """Destroy ``entity`` and make its ID available again."""
        try:
            del self._signatures[entity]
        except KeyError:
            raise MissingEntityError(f"entity {entity} does not exist") from None
        self._available.append(entity)

    def set_signature(self, entity: Entity, signature: Iterable[ComponentID]) -> None:
        """Replace the signature of ``entity``."""
        self._signatures[entity] = frozenset(signature)

    def get_signature(self, entity: Entity) -> Signature:
        """Return the signature of ``entity``."""
        try:
            return self._signatures[entity]
        except KeyError:
            raise MissingEntityError(f"entity {entity} does not exist") from None

    def __contains__(self, entity: object) -> bool:
        return entity in self._signatures