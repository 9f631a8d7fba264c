"""Base class for systems that act on a set of entities."""

from __future__ import annotations

from .entity import Entity


class System:
    """Holds the entities a system operates on."""

    def __init__(self) -> None:
        self.entities: set[Entity] = set()