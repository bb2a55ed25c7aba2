"""Systems, their execution stages and the registry that matches them to entities."""

from __future__ import annotations

import enum
import math
import types
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from .types import (
    ComponentID,
    DuplicateRegistrationError,
    Entity,
    NotRegisteredError,
    Signature,
)

S = TypeVar("S", bound="System")

_CO_VARARGS = 0x04


class SystemStage(enum.Enum):
    """Stages in the order systems are run."""

    START = enum.auto()
    PRE_UPDATE = enum.auto()
    UPDATE = enum.auto()
    POST_UPDATE = enum.auto()


class System:
    """A unit of behaviour run every update over its matched entities."""

    def __init__(self) -> None:
        self.entities: set[Entity] = set()

    def update(self, world: Any, dt: float) -> None:
        """Run the system once; the base version does nothing."""


_Invoker = Callable[[Any, Entity, float], None]


@dataclass(frozen=True)
class _Parameters:
    names: tuple[str, ...]
    required: int
    maximum: float
    keyword_required: bool

    def accepts(self, count: int) -> bool:
        return not self.keyword_required and self.required <= count <= self.maximum


def _parameters(func: Callable[..., Any]) -> _Parameters | None:
    """Describe the positional parameters of ``func``, or None if they cannot be read."""
    target: Any = func
    bound = 0
    if isinstance(func, types.MethodType):
        target = func.__func__
        bound = 1
    elif not hasattr(func, "__code__") and not isinstance(func, type):
        call = getattr(type(func), "__call__", None)
        if isinstance(call, types.FunctionType):
            target = call
            bound = 1

    code = getattr(target, "__code__", None)
    if code is None:
        return None

    argcount = code.co_argcount
    names = tuple(code.co_varnames[:argcount][bound:])
    defaults = getattr(target, "__defaults__", None) or ()
    required = max(0, argcount - len(defaults) - bound)
    variadic = bool(code.co_flags & _CO_VARARGS)
    kwonly = code.co_varnames[argcount : argcount + code.co_kwonlyargcount]
    kwdefaults = getattr(target, "__kwdefaults__", None) or {}
    keyword_required = any(name not in kwdefaults for name in kwonly)
    maximum = math.inf if variadic else len(names)
    return _Parameters(names, required, maximum, keyword_required)


def _adapt(func: Callable[..., Any]) -> _Invoker:
    """Wrap ``func`` so it can be called as ``(world, entity, dt)``.

    Accepted forms, tried in order: ``(world, entity, dt)``, ``(world, entity)``
    or ``(world, dt)`` when the second parameter is named ``dt``, and ``(world)``.
    """
    params = _parameters(func)
    if params is None:
        return lambda world, entity, dt: func(world, entity, dt)

    if params.accepts(3):
        return lambda world, entity, dt: func(world, entity, dt)
    if params.accepts(2):
        if len(params.names) >= 2 and params.names[1] == "dt":
            return lambda world, entity, dt: func(world, dt)
        return lambda world, entity, dt: func(world, entity)
    if params.accepts(1):
        return lambda world, entity, dt: func(world)
    raise TypeError(f"system callable signature not supported: {func!r}")


class SystemFunction(System):
    """A system built from a plain callable."""

    def __init__(self, func: Callable[..., Any]) -> None:
        super().__init__()
        self.func = func
        self._invoke = _adapt(func)

    def update(self, world: Any, dt: float) -> None:
        """Call the function once per matched entity, or once with entity 0 if none."""
        if not self.entities:
            self._invoke(world, 0, dt)
            return
        for entity in list(self.entities):
            self._invoke(world, entity, dt)


def _type_name(system_type: type) -> str:
    return f"{system_type.__module__}.{system_type.__qualname__}"


class SystemManager:
    """Holds systems by name and stage and keeps their entity sets current."""

    def __init__(self) -> None:
        self.stage_systems: dict[SystemStage, list[System]] = {stage: [] for stage in SystemStage}
        self.systems: dict[str, System] = {}
        self.signatures: dict[str, Signature] = {}

    def register_system(
        self, system_type: type[S], stage: SystemStage = SystemStage.UPDATE
    ) -> S:
        """Create and register an instance of ``system_type`` in ``stage``."""
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError(f"{system_type!r} does not inherit from System")
        name = _type_name(system_type)
        if name in self.systems:
            raise DuplicateRegistrationError(f"system {system_type.__qualname__} registered twice")
        system = system_type()
        self.systems[name] = system
        self.stage_systems[stage].append(system)
        return system

    def add_system(
        self,
        name: str,
        system: System,
        signature: Iterable[ComponentID] = (),
        stage: SystemStage = SystemStage.UPDATE,
    ) -> System:
        """Register an existing system instance under ``name`` with ``signature``."""
        if name in self.systems:
            raise DuplicateRegistrationError(f"system {name} registered twice")
        self.systems[name] = system
        self.signatures[name] = frozenset(signature)
        self.stage_systems[stage].append(system)
        return system

    def set_signature(self, system_type: type, signature: Iterable[ComponentID]) -> None:
        """Set the components a registered system type requires."""
        name = _type_name(system_type)
        if name not in self.systems:
            raise NotRegisteredError(f"system {system_type.__qualname__} used before registration")
        self.signatures[name] = frozenset(signature)

    def entity_despawned(self, entity: Entity) -> None:
        """Remove ``entity`` from every system."""
        for system in self.systems.values():
            system.entities.discard(entity)

    def entity_signature_changed(self, entity: Entity, signature: Iterable[ComponentID]) -> None:
        """Add or remove ``entity`` from each system by whether it now matches."""
        components = frozenset(signature)
        for name, system in self.systems.items():
            required = self.signatures.get(name)
            if required is None:
                continue
            if required <= components:
                system.entities.add(entity)
            else:
                system.entities.discard(entity)

    def systems_in(self, stage: SystemStage) -> list[System]:
        """Return the systems of ``stage`` in registration order."""
        return list(self.stage_systems[stage])