# valkyrion

A small game engine core for Python. It has these parts:

- `valkyrion.coordinator.Coordinator`: an entity-component system (ECS) that hands out entity
  IDs, stores components packed densely by type (`valkyrion.components.ComponentArray`) and
  tracks each entity's component `valkyrion.entity.Signature`;
- `valkyrion.log`: a core logger named `VALKYRION` and a client logger named `APP`;
- `valkyrion.window.Window`: a resizable pygame window;
- `valkyrion.application.Application`: a base class that owns a window and runs the
  update/render loop;
- `valkyrion.sandbox`: a demo application and an ECS self-check.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Using the ECS

```python
from dataclasses import dataclass

from valkyrion.coordinator import Coordinator


@dataclass
class Position:
    x: float
    y: float
    z: float


coordinator = Coordinator()
coordinator.register_component(Position)

entity = coordinator.create_entity()
coordinator.add_component(entity, Position(1.0, 2.0, 3.0))

print(coordinator.get_component(entity, Position))   # Position(x=1.0, y=2.0, z=3.0)
print(coordinator.has_component(entity, Position))   # True
print(coordinator.get_component_type(Position))      # 0

coordinator.remove_component(entity, Position)
coordinator.destroy_entity(entity)                    # the ID goes back for reuse
```

Behaviour worth knowing:

- Component types are keyed by their Python class; each registered type gets the next bit
  index, starting at 0. A `Signature` holds up to `MAX_COMPONENTS` (32) bits.
- At most `MAX_ENTITIES` (5000) entities may be alive at once.
- Destroyed IDs are reused first-in, first-out. When the last living entity is destroyed,
  numbering starts again from 0.
- Adding a component that an entity already has replaces the stored value.
- `init()` resets the coordinator to an empty state; a new `Coordinator` starts empty.
- Misuse raises `valkyrion.components.ECSError`: using an unregistered type, registering a
  type twice, getting or removing a component the entity does not have, exceeding the entity
  limit, or destroying an ID outside `0..MAX_ENTITIES-1`.

`valkyrion.system.System` is a base class whose `entities` attribute is a set of entity IDs.
`Coordinator.set_system_signature()` stores a signature, readable as
`Coordinator.system_signature`.

## Logging

`valkyrion.log.init()` attaches a stdout handler to both loggers, sets their level to `TRACE`
(level 5) and logs "Logging system initialized"; later calls do nothing. `core_logger()` and
`client_logger()` call `init()` and return the standard `logging.Logger` objects. Lines look like
`[12:34:56] APP: message`.

`vk_assert(condition, message)` logs `Assertion Failed: <message>` to the client logger and
raises `AssertionError` when the condition is false.

## Writing an application

Subclass `valkyrion.application.Application` and override the hooks you need:

```python
from valkyrion.application import Application


class MyGame(Application):
    def on_update(self):
        ...

    def on_render(self):
        ...


with MyGame("My Game") as game:
    game.run()
```

Creating an application opens a 1600x900 window titled with its name, then calls
`on_initialize()`. `run()` loops until the window is closed: each frame it processes window
events, calls `on_update()` and `on_render()`, then clears the window to dark grey and presents
it. `delta_time` holds the seconds between the last two frames. `shutdown()` (also called on
leaving a `with` block) calls `on_shutdown()` and closes the window.

Only one application may exist at a time: creating a second raises
`valkyrion.application.ApplicationError`, as does `Application.get()` when none exists. The
base hooks keep `updates`, `frames` and `uptime`; a subclass that overrides a hook without
calling `super()` stops that count.

If the display cannot be opened, the window logs the failure and reports `should_close()` as
true, so `run()` returns at once.

## The sandbox

The sandbox application first runs an ECS self-check: component registration, adding and
getting components, entity destruction with ID recycling, and a stress run of 1000 entities.
Then it opens a window and runs until it is closed:

```
valkyrion-sandbox
```

The command exits with status 0, or prints `Error: ...` and exits with 1. The same is available
as `valkyrion.sandbox.main()`.

The self-check can also be run from code with `valkyrion.sandbox.run_ecs_test(out)`, where `out`
is a text stream for the report (standard output when omitted). It returns the coordinator it
used and re-raises any error after reporting it on standard error.

## What it does not do

- The window only clears and presents frames; there is no renderer, drawing API or GPU
  pipeline.
- `System` is a plain container: the coordinator does not add entities to systems or match them
  against signatures.