# acheron

A small entity-component-system (ECS) framework. A `World` ties together
entities, component storage and systems. Each call to `World.update()` runs the
systems in stages.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`.

## Modules

- `acheron.world`: `World` and the `Module` base class.
- `acheron.system`: `SystemStage`, `System`, `SystemFunction` and `SystemManager`.
- `acheron.component`: `ComponentManager`.
- `acheron.component_array`: `ComponentArray`, the packed storage for one component type.
- `acheron.entity`: `EntityManager`.
- `acheron.types`: the `Entity`, `ComponentID` and `Signature` aliases and the exceptions.
- `acheron.examples`: the bundled example programs.

## Concepts

- **Entities** are integer ids handed out by `World.spawn()`. Ids freed by
  `World.despawn()` are reused, oldest first. Despawning drops the entity's
  components and removes it from every system.
- **Components** are plain Python classes. Register each type once with
  `World.register_component()` before you use it. Attach a component with
  `World.add_component(entity, Type, instance)`. If you leave out the instance,
  it is built by calling `Type()`. Read a component with
  `World.get_component(entity, Type)` and detach it with
  `World.remove_component(entity, Type)`.
- **Systems** are callables registered with
  `World.register_system(func, *component_types, stage=...)`.
  - A system with component types tracks the entities that carry all of those
    types.
  - A system registered without component types matches every entity once a
    component is added to or removed from that entity.
  - A system runs once for each tracked entity. If it tracks no entities, it
    runs once with entity `0`.
  - The callable may take `(world, entity, dt)`, `(world, entity)`,
    `(world, dt)` or `(world)`. A two-parameter callable gets `dt` only when its
    second parameter is named `dt`. Any other signature raises `TypeError`.
  - `World.register_system_explicit(func, signature, stage)` takes a signature
    built with `World.make_signature(*types)`.
  - `World.register_system_type(SystemSubclass, signature, stage)` instantiates
    a `System` subclass whose `update(world, dt)` you override.
- **Stages**: `SystemStage.START` runs once, on the first update. After that,
  `PRE_UPDATE`, `UPDATE` and `POST_UPDATE` run on every update, in that order.
  Within a stage, systems run in the order they were registered.
- **Singletons** are world-wide values stored by their type with
  `World.set_singleton(value)` and fetched with `World.get_singleton(Type)`.
- **Modules** subclass `Module` and register things in `register(world)`.
  `World.import_module(ModuleType)` instantiates the module and calls
  `register`.

## Example

```python
from dataclasses import dataclass

from acheron.world import World


class Player:
    pass


@dataclass
class Health:
    value: float


@dataclass
class ShouldQuit:
    value: bool = False


world = World()
world.register_component(Player)
world.register_component(Health)


def drain(world, entity):
    health = world.get_component(entity, Health)
    health.value -= 1
    print("health:", health.value)
    if health.value <= 0:
        world.get_singleton(ShouldQuit).value = True


world.register_system(drain, Player, Health)
world.set_singleton(ShouldQuit())

player = world.spawn()
world.add_component(player, Player)
world.add_component(player, Health, Health(20.0))

while not world.get_singleton(ShouldQuit).value:
    world.update()
```

`get_component` and `get_singleton` return the stored objects themselves, so
any change you make to them is kept.

## Errors

All errors derive from `acheron.types.EcsError`:

| Error | Raised when |
| --- | --- |
| `NotRegisteredError` | A component type, system type or singleton is used before it is registered or set. |
| `DuplicateRegistrationError` | A component or system is registered twice. |
| `MissingEntityError` | The entity does not exist. |
| `MissingComponentError` | The entity lacks the requested component. |
| `DuplicateComponentError` | The entity already has a component of that type. |

## Bundled examples

The command runs one of the examples `health`, `stages`, `module` or
`fps_counter` by name:

```
acheron-examples stages
```

Each example does the following:

- `health`: counts a player's health down from 20 and stops at zero.
- `stages`: runs three updates and shows that the start stage runs only once.
- `module`: imports `ExampleModule` and runs three updates.
- `fps_counter`: prints the frame rate every half second, with each frame
  sleeping about 16 ms. It runs until interrupted unless `--frames N` limits
  the number of frames:

```
acheron-examples fps_counter --frames 100
```

You can also call the examples from Python with `run_health`, `run_stages`,
`run_module` and `run_fps_counter` in `acheron.examples`. Each takes an
optional output stream. `run_fps_counter` also takes `frames` and
`frame_time`; with `frame_time` set, every frame gets that fixed delta and the
example does not sleep.

## What it does not do

acheron has no rendering, input, audio or timing loop of its own. You call
`World.update()` from your own loop and pass it the frame's delta time.