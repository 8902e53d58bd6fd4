"""Scenes: the entities and resources that live together on screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from distract.entity import Entity
from distract.resources import ResourceManager

NO_SCENE = -1


@dataclass
class SceneInfo:
    """A registered scene: its id and the lifecycle function that runs it."""

    id: int
    lifecycle: Callable[[Any], int]
    storage: Any = None


class Scene:
    """The running scene: its entities, kept ordered by z, and its resources."""

    def __init__(self) -> None:
        self.id = NO_SCENE
        self.info: Optional[SceneInfo] = None
        self.entities: list[Entity] = []
        self.resources = ResourceManager()
        self.in_exit_state = False
        self.pending_scene_id = NO_SCENE
        self.storage: Any = None

    def add_entity(self, entity: Entity) -> None:
        """Insert an entity before the first one whose z is not lower."""
        position = next(
            (
                index
                for index, existing in enumerate(self.entities)
                if existing.z >= entity.z
            ),
            len(self.entities),
        )
        self.entities.insert(position, entity)

    def remove_entity(self, entity: Entity) -> None:
        """Take an entity out of the scene; ValueError if it is not there."""
        for index, existing in enumerate(self.entities):
            if existing is entity:
                del self.entities[index]
                return
        raise ValueError("entity is not part of this scene")

    def entities_of_type(self, type_: int) -> Iterator[Entity]:
        """Yield the entities of a type, in drawing order."""
        for entity in list(self.entities):
            if entity.type == type_:
                yield entity

    def get_entity(self, type_: int) -> Optional[Entity]:
        """The first entity of a type, or None."""
        return next(self.entities_of_type(type_), None)

    def get_instance(self, type_: int) -> Any:
        """The instance of the first entity of a type, or None."""
        entity = self.get_entity(type_)
        return entity.instance if entity is not None else None

    def switch_to(self, scene_id: int) -> None:
        """Leave this scene and open ``scene_id`` afterwards."""
        self.in_exit_state = True
        self.pending_scene_id = scene_id

    def set_pending(self, scene_id: int) -> None:
        """Open ``scene_id`` once this scene is closed."""
        self.pending_scene_id = scene_id