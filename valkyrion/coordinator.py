"""Coordinates entity ids, component registration and component storage."""

from __future__ import annotations

from collections import deque
from typing import Any, TypeVar

from .components import ComponentArray, ECSError
from .entity import MAX_ENTITIES, ComponentType, Entity, Signature

T = TypeVar("T")


class Coordinator:
    """Creates entities and attaches registered component types to them."""

    def __init__(self) -> None:
        self.init()

    def init(self) -> None:
        """Reset the coordinator to an empty state."""
        self._available: deque[Entity] = deque()
        self._next_entity: Entity = 0
        self._living = 0
        self._component_types: dict[type, ComponentType] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}
        self._signatures: dict[Entity, Signature] = {}
        self._system_signature = Signature()

    @property
    def living_count(self) -> int:
        """Number of entities currently alive."""
        return self._living

    @property
    def system_signature(self) -> Signature:
        """The signature last given to set_system_signature."""
        return self._system_signature

    def create_entity(self) -> Entity:
        """Return a fresh or recycled entity id."""
        if self._living >= MAX_ENTITIES:
            raise ECSError("Too many entities in existence.")
        if self._available:
            entity = self._available.popleft()
        else:
            entity = self._next_entity
            if entity >= MAX_ENTITIES:
                raise ECSError("Too many entities in existence.")
            self._next_entity += 1
        self._living += 1
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Remove every component of the entity and recycle its id."""
        if not 0 <= entity < MAX_ENTITIES:
            raise ECSError("Entity out of range.")
        for array in self._arrays.values():
            array.entity_destroyed(entity)
        self._signatures.pop(entity, None)
        self._available.append(entity)
        self._living -= 1
        if self._living == 0:
            # With nothing alive, numbering starts again from 0.
            self._available.clear()
            self._next_entity = 0

    def register_component(self, component_type: type) -> None:
        """Make a component type usable with entities."""
        if component_type in self._component_types:
            raise ECSError("Registering component type more than once.")
        self._component_types[component_type] = len(self._component_types)
        self._arrays[component_type] = ComponentArray()

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach a component to an entity, replacing one of the same type."""
        component_type = type(component)
        array = self._array(component_type)
        if self.has_component(entity, component_type):
            array.set(entity, component)
            return
        array.insert(entity, component)
        self._signatures.setdefault(entity, Signature()).set(
            self._component_types[component_type]
        )

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach the entity's component of the given type."""
        self._array(component_type).remove(entity)
        signature = self._signatures.get(entity)
        if signature is not None:
            bit = self._component_types[component_type]
            signature.bits &= ~(1 << bit)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        """Return whether the entity has a component of the given type."""
        bit = self._component_types.get(component_type)
        if bit is None:
            return False
        signature = self._signatures.get(entity)
        return signature is not None and signature.test(bit)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the entity's component of the given type."""
        return self._array(component_type).get(entity)

    def get_component_type(self, component_type: type) -> ComponentType:
        """Return the bit index assigned to a registered component type."""
        try:
            return self._component_types[component_type]
        except KeyError:
            raise ECSError("Component not registered before use.") from None

    def set_system_signature(self, signature: Signature) -> None:
        """Store the signature used by systems."""
        self._system_signature = signature

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise ECSError("Component not registered before use.") from None