"""The world: the single entry point tying entities, components and systems together."""

from __future__ import annotations

import abc
import itertools
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .component import ComponentManager
from .entity import EntityManager
from .system import System, SystemFunction, SystemManager, SystemStage
from .types import ComponentID, Entity, NotRegisteredError, Signature

T = TypeVar("T")
S = TypeVar("S", bound=System)

_MISSING: Any = object()

_UPDATE_STAGES = (SystemStage.PRE_UPDATE, SystemStage.UPDATE, SystemStage.POST_UPDATE)


class Module(abc.ABC):
    """Base for bundles of registrations that can be imported into a world."""

    @abc.abstractmethod
    def register(self, world: World) -> None:
        """Register components, systems and singletons with ``world``."""


class World:
    """Central context owning the entity, component and system managers."""

    def __init__(self) -> None:
        self._entities = EntityManager()
        self._components = ComponentManager()
        self._systems = SystemManager()
        self._singletons: dict[type, Any] = {}
        self._has_started = False
        self._function_ids = itertools.count()

    def spawn(self) -> Entity:
        """Create a new entity and return its ID."""
        return self._entities.spawn()

    def despawn(self, entity: Entity) -> None:
        """Destroy ``entity``, dropping its components and system memberships."""
        self._entities.despawn(entity)
        self._components.entity_despawned(entity)
        self._systems.entity_despawned(entity)

    def register_component(self, component_type: type) -> None:
        """Register a component type before it is used."""
        self._components.register_component(component_type)

    def add_component(
        self, entity: Entity, component_type: type[T], component: T = _MISSING
    ) -> None:
        """Attach a component to ``entity``; a default instance is built if none is given."""
        signature = self._entities.get_signature(entity)
        if component is _MISSING:
            component = component_type()
        self._components.add_component(entity, component_type, component)
        signature = signature | {self._components.component_id(component_type)}
        self._entities.set_signature(entity, signature)
        self._systems.entity_signature_changed(entity, signature)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach the ``component_type`` component from ``entity``."""
        signature = self._entities.get_signature(entity)
        self._components.remove_component(entity, component_type)
        signature = signature - {self._components.component_id(component_type)}
        self._entities.set_signature(entity, signature)
        self._systems.entity_signature_changed(entity, signature)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the ``component_type`` component of ``entity`` itself, not a copy."""
        return self._components.get_component(entity, component_type)

    def component_id(self, component_type: type) -> ComponentID:
        """Return the ID assigned to a registered component type."""
        return self._components.component_id(component_type)

    def make_signature(self, *args: type) -> Signature:
        """Build a signature from the given component types."""
        return frozenset(self.component_id(component_type) for component_type in args)

    def register_system_type(
        self,
        system_type: type[S],
        signature: Iterable[ComponentID] = (),
        stage: SystemStage = SystemStage.UPDATE,
    ) -> S:
        """Instantiate and register a ``System`` subclass with ``signature``."""
        system = self._systems.register_system(system_type, stage)
        self.set_system_signature(system_type, signature)
        return system

    def register_system_explicit(
        self,
        func: Callable[..., Any],
        signature: Iterable[ComponentID] = (),
        stage: SystemStage = SystemStage.UPDATE,
    ) -> System:
        """Register a callable as a system with an explicit signature."""
        name = f"LambdaSystem_{next(self._function_ids)}"
        return self._systems.add_system(name, SystemFunction(func), signature, stage)

    def register_system(
        self,
        func: Callable[..., Any],
        *args: type,
        stage: SystemStage = SystemStage.UPDATE,
    ) -> System:
        """Register a callable as a system over entities carrying all of ``args``."""
        return self.register_system_explicit(func, self.make_signature(*args), stage)

    def set_system_signature(self, system_type: type, signature: Iterable[ComponentID]) -> None:
        """Set the components a registered system type requires."""
        self._systems.set_signature(system_type, signature)

    def set_singleton(self, value: Any) -> None:
        """Store ``value`` as the world-wide instance of its type."""
        self._singletons[type(value)] = value

    def get_singleton(self, singleton_type: type[T]) -> T:
        """Return the stored instance of ``singleton_type``."""
        try:
            return self._singletons[singleton_type]
        except KeyError:
            name = getattr(singleton_type, "__qualname__", repr(singleton_type))
            raise NotRegisteredError(f"singleton {name} does not exist") from None

    def import_module(self, module_type: type[Module]) -> None:
        """Instantiate ``module_type`` and let it register itself with this world."""
        if not (isinstance(module_type, type) and issubclass(module_type, Module)):
            raise TypeError(f"{module_type!r} does not inherit from Module")
        module_type().register(self)

    def update(self, dt: float = 0.0) -> None:
        """Run the start stage once, then the pre-update, update and post-update stages."""
        if not self._has_started:
            for system in self._systems.systems_in(SystemStage.START):
                system.update(self, dt)
            self._has_started = True
        for stage in _UPDATE_STAGES:
            for system in self._systems.systems_in(stage):
                system.update(self, dt)