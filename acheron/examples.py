"""Small demonstration programs built on the world."""

from __future__ import annotations

import argparse
import itertools
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .system import SystemStage
from .types import NotRegisteredError
from .world import Module, World


@dataclass
class Player:
    """Tag component marking the player."""


@dataclass
class Health:
    """Hit points of an entity."""

    value: float


@dataclass
class ShouldQuit:
    """Singleton telling the loop to stop."""

    value: bool = False


@dataclass
class FPSCounter:
    """Time accumulated since the frame rate was last reported."""

    timer: float = 0.0


@dataclass
class Console:
    """Singleton holding the stream the examples print to."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _say(world: World, text: str = "") -> None:
    try:
        stream = world.get_singleton(Console).stream
    except NotRegisteredError:
        stream = sys.stdout
    print(text, file=stream)


def _number(value: float) -> str:
    return f"{value:g}"


def run_health(out: TextIO | None = None) -> None:
    """Drain a player's health by one each frame until it reaches zero."""
    world = World()
    world.set_singleton(Console(_stream(out)))
    world.register_component(Player)
    world.register_component(Health)

    def drain(world: World, entity: int) -> None:
        health = world.get_component(entity, Health)
        health.value -= 1
        _say(world, f"health: {_number(health.value)}")
        if health.value <= 0:
            world.get_singleton(ShouldQuit).value = True

    world.register_system(drain, Player, Health)
    world.set_singleton(ShouldQuit())

    player = world.spawn()
    world.add_component(player, Player, Player())
    world.add_component(player, Health, Health(20.0))

    should_quit = world.get_singleton(ShouldQuit)
    last = time.perf_counter()
    while not should_quit.value:
        now = time.perf_counter()
        world.update(now - last)
        last = now


def run_stages(out: TextIO | None = None) -> None:
    """Show that the start stage runs once and the other stages every update."""
    world = World()
    world.set_singleton(Console(_stream(out)))
    messages = [
        (SystemStage.START, "This is in the start stage"),
        (SystemStage.PRE_UPDATE, "This is in the pre update stage"),
        (SystemStage.UPDATE, "This is in the update stage"),
        (SystemStage.POST_UPDATE, "This is in the post update stage"),
    ]
    for stage, message in messages:
        world.register_system(lambda w, e, text=message: _say(w, text), stage=stage)

    for _ in range(3):
        world.update()
        _say(world)


class ExampleModule(Module):
    """Module that registers a greeting system."""

    def register(self, world: World) -> None:
        _say(world, "Registering example module")
        world.register_system(lambda w, e: _say(w, "hello hello"))


def run_module(out: TextIO | None = None) -> None:
    """Import ``ExampleModule`` and run three updates."""
    world = World()
    world.set_singleton(Console(_stream(out)))
    world.import_module(ExampleModule)
    for _ in range(3):
        world.update()


def run_fps_counter(
    out: TextIO | None = None,
    frames: int | None = None,
    frame_time: float | None = None,
) -> None:
    """Report the frame rate every half second.

    With ``frame_time`` every frame gets that fixed delta and no sleeping is done;
    otherwise real time is measured and each frame sleeps about 16 ms.
    ``frames`` limits the number of frames; without it the loop runs until quit.
    """
    world = World()
    world.set_singleton(Console(_stream(out)))
    world.register_component(FPSCounter)
    world.set_singleton(ShouldQuit())

    def report(world: World, entity: int, dt: float) -> None:
        counter = world.get_component(entity, FPSCounter)
        counter.timer += dt
        if counter.timer > 0.5:
            _say(world, f"FPS: {_number(1.0 / dt)}")
            counter.timer = 0.0

    world.register_system(report)
    counter_entity = world.spawn()
    world.add_component(counter_entity, FPSCounter)

    should_quit = world.get_singleton(ShouldQuit)
    frame_numbers = itertools.count() if frames is None else range(frames)
    last = time.perf_counter()
    for _ in frame_numbers:
        if should_quit.value:
            break
        if frame_time is not None:
            world.update(frame_time)
            continue
        now = time.perf_counter()
        world.update(now - last)
        last = now
        time.sleep(0.016)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the examples chosen on the command line."""
    parser = argparse.ArgumentParser(prog="acheron", description="Run an ECS example.")
    parser.add_argument("example", choices=["health", "stages", "module", "fps_counter"])
    parser.add_argument("--frames", type=int, default=None, help="frames for fps_counter")
    args = parser.parse_args(argv)

    if args.example == "health":
        run_health()
    elif args.example == "stages":
        run_stages()
    elif args.example == "module":
        run_module()
    else:
        run_fps_counter(frames=args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())