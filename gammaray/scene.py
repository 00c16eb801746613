"""Entities, components and the scene server that stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ComponentSceneLink:
    """Base component every entity gets: its name and its place in the scene tree."""

    position: int = 0
    parent: int = 0
    enabled: bool = True
    scene_id: int = 0
    entity_name: str = ""


class Entity:
    """A handle to an entity id held by a scene server."""

    default_components: ClassVar[tuple[type, ...]] = ()

    def __init__(self, rid: int = 0, server: Optional[SceneServer] = None) -> None:
        self._rid = rid
        self._server = server

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rid={self._rid})"

    @property
    def rid(self) -> int:
        """The id of the wrapped entity."""
        return self._rid

    @property
    def server(self) -> SceneServer:
        """The scene server holding this entity; the current singleton if none was given."""
        if self._server is not None:
            return self._server
        server = SceneServer.get_singleton()
        if server is None:
            raise RuntimeError("no scene server has been created")
        return server

    def init_components(self) -> None:
        """Add the entity kind's own components on creation."""
        for component_type in self.default_components:
            self.add_component(component_type)

    @property
    def name(self) -> str:
        return self.get_component(ComponentSceneLink).entity_name

    def has_component(self, component_type: type) -> bool:
        return component_type in self.server._pool(self._rid)

    def add_component(self, component_type: type[T]) -> T:
        """Create a component of ``component_type``, attach it and return it."""
        server = self.server
        component = component_type()
        server._emplace(self._rid, component)
        if isinstance(component, Component):
            component.owner = Entity(self._rid, server)
            component.on_init()
        return component

    def remove_component(self, component_type: type) -> None:
        pool = self.server._pool(self._rid)
        if component_type not in pool:
            raise KeyError(f"entity {self._rid} has no {component_type.__name__}")
        del pool[component_type]

    def get_component(self, component_type: type[T]) -> T:
        pool = self.server._pool(self._rid)
        try:
            return pool[component_type]
        except KeyError:
            raise KeyError(f"entity {self._rid} has no {component_type.__name__}") from None

    def destroy(self) -> None:
        """Remove the entity and all of its components from the scene."""
        server = self.server
        server._pool(self._rid)
        del server._entities[self._rid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._rid == other._rid

    def __hash__(self) -> int:
        return hash(self._rid)


@dataclass(eq=False)
class Component:
    """Base for components that know the entity they are attached to."""

    owner: Entity = field(default_factory=Entity, repr=False, kw_only=True)
    initialised: bool = field(default=False, init=False, repr=False, kw_only=True)

    def on_init(self) -> None:
        """Called once the component has been attached to its owner."""
        self.initialised = True


class SceneServer:
    """Stores entities and their components; the most recent instance is the singleton."""

    _singleton: ClassVar[Optional[SceneServer]] = None

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._next_rid = 0
        self._update_callbacks: list[Callable[[], None]] = []
        SceneServer._singleton = self

    @classmethod
    def get_singleton(cls) -> Optional[SceneServer]:
        return cls._singleton

    def _create(self) -> int:
        rid = self._next_rid
        self._next_rid += 1
        self._entities[rid] = {}
        return rid

    def _pool(self, rid: int) -> dict[type, Any]:
        try:
            return self._entities[rid]
        except KeyError:
            raise KeyError(f"invalid entity {rid}") from None

    def _emplace(self, rid: int, component: Any) -> None:
        pool = self._pool(rid)
        component_type = type(component)
        if component_type in pool:
            raise ValueError(f"entity {rid} already has {component_type.__name__}")
        pool[component_type] = component

    def create_entity(self, entity_class: type[T], entity_name: str, scene_id: int = 0) -> T:
        """Create an entity of ``entity_class`` with its scene link and its own components."""
        entity = entity_class()
        entity._rid = self._create()
        entity._server = self
        link = entity.add_component(ComponentSceneLink)
        link.entity_name = entity_name
        link.scene_id = scene_id
        entity.init_components()
        return entity

    def view(self, *args: type) -> Iterator[tuple]:
        """Yield ``(entity, component, ...)`` for each entity holding every given type."""
        if not args:
            raise TypeError("view() needs at least one component type")
        rows = [
            (Entity(rid, self), *(pool[t] for t in args))
            for rid, pool in self._entities.items()
            if all(t in pool for t in args)
        ]
        return iter(rows)

    def register_for_on_update(self, callback: Callable[[], None]) -> None:
        self._update_callbacks.append(callback)

    def on_update(self) -> None:
        """Run every registered update callback in registration order."""
        for callback in list(self._update_callbacks):
            callback()