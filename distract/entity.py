"""Entities living in a scene, and the registry of entity types."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from distract.vector import Vector2


class EntityError(Exception):
    """Raised when an entity type cannot be registered or an entity created."""


@dataclass(frozen=True)
class EntityInfo:
    """Behaviour of an entity type: the callbacks its entities run.

    Every callback receives ``(game, entity)``; ``handle_event`` also gets the
    event and returns True when it consumed it. ``create`` returns False when
    the entity could not be set up.
    """

    type: int
    create: Optional[Callable[[Any, "Entity"], bool]] = None
    draw: Optional[Callable[[Any, "Entity"], None]] = None
    destroy: Optional[Callable[[Any, "Entity"], None]] = None
    update: Optional[Callable[[Any, "Entity"], None]] = None
    handle_event: Optional[Callable[[Any, "Entity", Any], bool]] = None


@dataclass(eq=False)
class Entity:
    """A living object in a scene, driven by the callbacks of its type."""

    info: EntityInfo
    pos: Vector2 = field(default_factory=Vector2)
    z: int = 0
    instance: Any = None
    use_multithreading: bool = False
    draw_on_gui: bool = False
    _thread: Optional[threading.Thread] = field(
        default=None, init=False, repr=False
    )
    _thread_error: Optional[BaseException] = field(
        default=None, init=False, repr=False
    )

    @property
    def type(self) -> int:
        return self.info.type

    def update(self, game: Any) -> None:
        """Run the update callback on the calling thread."""
        if self.info.update is not None:
            self.info.update(game, self)

    def _run_update(self, game: Any) -> None:
        try:
            self.info.update(game, self)
        except BaseException as error:  # re-raised by wait_update
            self._thread_error = error

    def start_update(self, game: Any) -> None:
        """Run the update callback on a background thread."""
        if self.info.update is None:
            return
        self.wait_update()
        self._thread_error = None
        self._thread = threading.Thread(
            target=self._run_update, args=(game,), daemon=True
        )
        self._thread.start()

    def wait_update(self) -> None:
        """Wait for a background update; re-raise anything it raised."""
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join()
        error, self._thread_error = self._thread_error, None
        if error is not None:
            raise error

    def draw(self, game: Any) -> None:
        """Run the draw callback, using the GUI view if the entity asks for it."""
        if not self.draw_on_gui:
            if self.info.draw is not None:
                self.info.draw(game, self)
            return
        world_view = getattr(game, "view", None)
        game.view = getattr(game, "gui_view", None)
        try:
            if self.info.draw is not None:
                self.info.draw(game, self)
        finally:
            game.view = world_view

    def handle_event(self, game: Any, event: Any) -> bool:
        """Offer an event to the entity; True when it consumed it."""
        if self.info.handle_event is None:
            return False
        return bool(self.info.handle_event(game, self, event))

    def destroy(self, game: Any) -> None:
        """Run the destroy callback and finish any background update."""
        if self.info.destroy is not None:
            self.info.destroy(game, self)
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join()
        self._thread_error = None

    def move_towards(self, target: Vector2, distance: float) -> Vector2:
        """Step ``distance`` towards ``target``; return the unit direction used."""
        movement = (target - self.pos).normalized()
        self.pos = self.pos + movement * distance
        return movement


class EntityRegistry:
    """Entity types known to a game; the latest registration of a type wins."""

    def __init__(self) -> None:
        self._infos: list[EntityInfo] = []

    def register(self, info: EntityInfo) -> None:
        """Add an entity type to the registry."""
        if info is None:
            raise EntityError("cannot register a null entity")
        self._infos.insert(0, info)

    def register_all(self, infos: Iterable[EntityInfo]) -> None:
        """Add several entity types; at least one must be given."""
        infos = list(infos)
        if not infos:
            raise EntityError("no entities to register")
        for info in infos:
            self.register(info)

    def get(self, type_: int) -> Optional[EntityInfo]:
        """The info registered for ``type_``, or None."""
        return next((info for info in self._infos if info.type == type_), None)

    def __iter__(self):
        return iter(list(self._infos))

    def __len__(self) -> int:
        return len(self._infos)