"""Densely packed storage of one component type, keyed by entity."""

from __future__ import annotations

from typing import Generic, TypeVar

from .entity import MAX_ENTITIES, Entity

T = TypeVar("T")


class ECSError(Exception):
    """Raised when the entity-component system is used incorrectly."""


class ComponentArray(Generic[T]):
    """Stores components of one type so that they stay contiguous."""

    def __init__(self) -> None:
        self._components: list[T] = []
        self._owners: list[Entity] = []
        self._index_of: dict[Entity, int] = {}

    def insert(self, entity: Entity, component: T) -> None:
        """Attach a component to an entity that has none of this type."""
        if entity in self._index_of:
            raise ECSError("Component added to same entity more than once.")
        if len(self._components) >= MAX_ENTITIES:
            raise ECSError("Too many components of this type.")
        self._index_of[entity] = len(self._components)
        self._components.append(component)
        self._owners.append(entity)

    def remove(self, entity: Entity) -> None:
        """Detach the entity's component, moving the last one into its slot."""
        try:
            index = self._index_of.pop(entity)
        except KeyError:
            raise ECSError("Removing non-existent component.") from None
        last_component = self._components.pop()
        last_owner = self._owners.pop()
        if index < len(self._components):
            self._components[index] = last_component
            self._owners[index] = last_owner
            self._index_of[last_owner] = index

    def get(self, entity: Entity) -> T:
        """Return the entity's component."""
        try:
            return self._components[self._index_of[entity]]
        except KeyError:
            raise ECSError("Retrieving non-existent component.") from None

    def set(self, entity: Entity, component: T) -> None:
        """Replace the entity's existing component."""
        try:
            self._components[self._index_of[entity]] = component
        except KeyError:
            raise ECSError("Replacing non-existent component.") from None

    def entity_destroyed(self, entity: Entity) -> None:
        """Drop the entity's component if it has one."""
        if entity in self._index_of:
            self.remove(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index_of

    def __len__(self) -> int:
        return len(self._components)