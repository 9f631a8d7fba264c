"""The sandbox application and its entity-component self-check."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

from . import log
from .application import Application
from .coordinator import Coordinator
from .entity import Entity

STRESS_ENTITY_COUNT = 1000


@dataclass
class TransformComponent:
    """A position in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class RigidBodyComponent:
    """A planar velocity."""

    velocity_x: float = 0.0
    velocity_y: float = 0.0


def _name(entity: Entity) -> str:
    return f"Entity[{entity}]"


def _run_checks(out: TextIO) -> Coordinator:
    out.write("\n=== Starting ECS Test ===\n")
    coordinator = Coordinator()
    coordinator.init()

    out.write("\n[TEST 1/5] Registering components...")
    coordinator.register_component(TransformComponent)
    coordinator.register_component(RigidBodyComponent)
    out.write(" SUCCESS\n")

    out.write("\n[TEST 2/5] Creating entities and assigning components...\n")
    entity1 = coordinator.create_entity()
    coordinator.add_component(entity1, TransformComponent(1.0, 2.0, 3.0))
    coordinator.add_component(entity1, RigidBodyComponent(10.0, 20.0))
    out.write(f"  - Created {_name(entity1)} with Transform and RigidBody components\n")

    entity2 = coordinator.create_entity()
    coordinator.add_component(entity2, TransformComponent(4.0, 5.0, 6.0))
    out.write(f"  - Created {_name(entity2)} with Transform component\n")

    out.write("\n[TEST 3/5] Testing component retrieval...\n")
    transform = coordinator.get_component(entity1, TransformComponent)
    body = coordinator.get_component(entity1, RigidBodyComponent)
    out.write(
        f"  - {_name(entity1)} Position: "
        f"({transform.x:g}, {transform.y:g}, {transform.z:g})\n"
    )
    out.write(
        f"  - {_name(entity1)} Velocity: ({body.velocity_x:g}, {body.velocity_y:g})\n"
    )

    out.write("\n[TEST 4/5] Testing entity destruction and ID recycling...\n")
    out.write(f"  - Destroying {_name(entity2)}\n")
    coordinator.destroy_entity(entity2)

    replacement = coordinator.create_entity()
    out.write(
        f"  - Created new entity {_name(replacement)} after destroying {_name(entity2)}\n"
    )

    temporary = coordinator.create_entity()
    out.write(f"  - Created temporary entity {_name(temporary)} for recycling test\n")
    coordinator.destroy_entity(temporary)

    recycled = coordinator.create_entity()
    out.write(f"  - Created new entity {_name(recycled)} after recycling\n")
    if recycled == temporary:
        out.write(f"  - Verified ID {temporary} was properly recycled\n")
    else:
        sys.stderr.write(
            f"  - WARNING: Expected recycled ID {temporary} but got {recycled}\n"
        )

    out.write("\n[TEST 5/5] Stress testing entity creation/destruction...\n")
    out.write(f"  - Creating {STRESS_ENTITY_COUNT} entities...")
    entities = []
    for value in map(float, range(STRESS_ENTITY_COUNT)):
        entity = coordinator.create_entity()
        coordinator.add_component(entity, TransformComponent(value, value, value))
        entities.append(entity)
    out.write(" DONE\n")

    out.write("  - Destroying all entities...")
    for entity in entities:
        coordinator.destroy_entity(entity)
    out.write(" DONE\n")

    fresh = coordinator.create_entity()
    out.write(f"  - Created new {_name(fresh)} after cleanup\n")

    out.write("\n=== ECS Test Completed Successfully ===\n")
    return coordinator


def run_ecs_test(out: TextIO | None = None) -> Coordinator:
    """Exercise the entity-component system, reporting progress to out.

    Returns the coordinator the checks ran against.
    """
    stream = sys.stdout if out is None else out
    try:
        return _run_checks(stream)
    except Exception as exc:
        sys.stderr.write(f"\n!!! ECS Test Failed: {exc}\n")
        raise


class SandboxApp(Application):
    """A demo application that runs the ECS self-check on start-up."""

    def __init__(self, name: str = "Valkyrion Sandbox") -> None:
        self.ticks = 0
        self.elapsed = 0.0
        self.frames_rendered = 0
        super().__init__(name)
        logger = log.client_logger()
        logger.info("Sandbox application created")
        try:
            run_ecs_test()
        except Exception as exc:
            logger.error("Error in SandboxApp: %s", exc)

    def on_update(self) -> None:
        """Advance the game clock by one frame."""
        self.ticks += 1
        self.elapsed += self.delta_time

    def on_render(self) -> None:
        """Count one rendered frame of the game."""
        self.frames_rendered += 1


def main(argv: list[str] | None = None) -> int:
    """Run the sandbox until its window closes; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="valkyrion", description="Run the Valkyrion sandbox application."
    )
    parser.parse_args(argv)
    try:
        with SandboxApp() as app:
            app.run()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())