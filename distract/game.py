"""The game: window, registries, the running scene and its main-loop steps."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Union

import pygame

from distract.entity import Entity, EntityError, EntityInfo, EntityRegistry
from distract.input import UNKNOWN_KEY, Input, KeyEventKind
from distract.resources import ResourceManager, ResourceType
from distract.scene import NO_SCENE, Scene, SceneInfo
from distract.sound import LOOP_FOREVER, SoundEmitter

_KEY_COUNT = 512
_MUSIC_VOLUME_TYPE = 0

KeyState = Callable[[int], bool]
Lifecycle = Callable[["Game"], int]


class SceneError(Exception):
    """Raised when a scene cannot be loaded."""


def create_standard_window(width: int, height: int, title: str) -> pygame.Surface:
    """Open the display window with the given size and title."""
    pygame.display.init()
    window = pygame.display.set_mode((width, height))
    pygame.display.set_caption(title)
    return window


def _pause(asset: Any) -> None:
    pause = getattr(asset, "pause", None)
    if callable(pause):
        pause()
        return
    stop = getattr(asset, "stop", None)
    if callable(stop):
        stop()


def _no_keys(code: int) -> bool:
    return False


class Game:
    """Holds everything the game loop works on.

    ``key_state(code)`` tells whether a key is held; by default the pygame
    keyboard state is read, indexed by scancode.
    """

    def __init__(
        self, window: Any = None, key_state: Optional[KeyState] = None
    ) -> None:
        self.window = window
        self._key_state = key_state
        self.entities = EntityRegistry()
        self._scenes: list[SceneInfo] = []
        self.scene = Scene()
        self.sound = SoundEmitter()
        self.input = Input(_KEY_COUNT)
        self.is_paused = False
        self.is_closing = False
        self.view: Any = None
        self.gui_view: Any = None
        self.storage: Any = None

    @property
    def resources(self) -> ResourceManager:
        """Resources of the running scene."""
        return self.scene.resources

    def close(self) -> None:
        """Ask the game to close cleanly."""
        self.is_closing = True

    def is_window_open(self) -> bool:
        return self.window is not None

    def _key_poller(self) -> KeyState:
        if self._key_state is not None:
            return self._key_state
        if not pygame.display.get_init() or pygame.display.get_surface() is None:
            return _no_keys
        states = tuple(pygame.key.get_pressed())
        return lambda code: code < len(states) and bool(states[code])

    # Entities

    def register_entity(self, info: EntityInfo) -> None:
        self.entities.register(info)

    def register_entities(self, infos: Iterable[EntityInfo]) -> None:
        self.entities.register_all(infos)

    def create_entity(self, type_: int) -> Entity:
        """Create an entity of a registered type and add it to the scene."""
        info = self.entities.get(type_)
        if info is None:
            raise EntityError(f"entity type {type_} is not registered")
        entity = Entity(info)
        if info.create is not None:
            if not info.create(self, entity):
                raise EntityError(f"creating entity of type {type_} failed")
            if entity.instance is None:
                raise EntityError(
                    f"entity of type {type_} was created without an instance"
                )
        self.scene.add_entity(entity)
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Run the entity's destroy callback and take it out of the scene."""
        entity.destroy(self)
        self.scene.remove_entity(entity)

    # Scene registry

    def register_scene(self, scene_id: int, lifecycle: Lifecycle) -> SceneInfo:
        """Register a scene; a later registration of the same id wins."""
        info = SceneInfo(scene_id, lifecycle)
        self._scenes.insert(0, info)
        return info

    def register_scenes(
        self,
        scenes: Union[Mapping[int, Lifecycle], Iterable[tuple[int, Lifecycle]]],
    ) -> None:
        """Register several scenes from (id, lifecycle) pairs or a mapping."""
        pairs = scenes.items() if isinstance(scenes, Mapping) else scenes
        for scene_id, lifecycle in pairs:
            self.register_scene(scene_id, lifecycle)

    def get_scene_info(self, scene_id: int) -> Optional[SceneInfo]:
        return next((info for info in self._scenes if info.id == scene_id), None)

    # Scene flow

    def switch_to_scene(self, scene_id: int) -> None:
        self.scene.switch_to(scene_id)

    def set_pending_scene(self, scene_id: int) -> None:
        self.scene.set_pending(scene_id)

    def has_pending_scene(self) -> bool:
        return (
            self.is_window_open()
            and self.scene.pending_scene_id != NO_SCENE
            and not self.is_closing
        )

    def is_scene_updated(self) -> bool:
        return (
            self.is_window_open()
            and not self.scene.in_exit_state
            and not self.is_closing
        )

    def load_pending_scene(self) -> int:
        """Run the lifecycle of the pending scene and return its result."""
        scene_id = self.scene.pending_scene_id
        info = self.get_scene_info(scene_id)
        if info is None:
            raise SceneError(f"scene {scene_id} is not registered")
        self.is_paused = False
        self.scene.id = scene_id
        self.scene.info = info
        self.scene.in_exit_state = False
        self.scene.pending_scene_id = NO_SCENE
        return info.lifecycle(self)

    def _pause_audio(self, scene: Scene) -> None:
        for resource in scene.resources:
            if resource.asset is None:
                continue
            if resource.type in (ResourceType.MUSIC, ResourceType.SOUND):
                _pause(resource.asset)

    def _resume_music(self, scene: Scene) -> None:
        volume = self.sound.volumes[_MUSIC_VOLUME_TYPE] / 100
        for resource in scene.resources:
            if resource.type is ResourceType.MUSIC and resource.asset is not None:
                resource.asset.set_volume(volume)
                resource.asset.play(loops=LOOP_FOREVER)

    def await_scene(self, scene_id: int) -> int:
        """Run a scene on top of the current one and return its result."""
        parent = self.scene
        self._pause_audio(parent)
        self.scene = Scene()
        try:
            self.set_pending_scene(scene_id)
            self.reset_events()
            code = self.load_pending_scene()
        finally:
            self.scene = parent
            self.reset_events()
            self._resume_music(parent)
        return code

    # Main-loop steps

    def update_scene(self) -> None:
        """Update every entity, threaded ones in parallel, then the input."""
        threaded: list[Entity] = []
        for entity in list(self.scene.entities):
            if entity.use_multithreading:
                entity.start_update(self)
                threaded.append(entity)
            else:
                entity.update(self)
        for entity in threaded:
            entity.wait_update()
        self.input.update(self._key_poller())

    def draw_scene(self) -> None:
        for entity in list(self.scene.entities):
            entity.draw(self)

    def _record_input(self, event: Any) -> None:
        event_type = getattr(event, "type", None)
        if event_type == pygame.KEYDOWN:
            kind = KeyEventKind.PRESSED
        elif event_type == pygame.KEYUP:
            kind = KeyEventKind.RELEASED
        else:
            return
        code = getattr(event, "scancode", UNKNOWN_KEY)
        if 0 <= code < len(self.input.keys):
            self.input.on_key_event(kind, code)

    def transmit_event(self, event: Any) -> bool:
        """Record the event, then offer it to entities until one consumes it."""
        self._record_input(event)
        return any(
            entity.handle_event(self, event) for entity in list(self.scene.entities)
        )

    def destroy_scene(self, destroy_resources: bool) -> None:
        """Destroy every entity, and the scene resources when asked."""
        for entity in list(self.scene.entities):
            entity.destroy(self)
        self.scene.entities.clear()
        if destroy_resources:
            self.scene.resources.clear()

    def reset_events(self) -> None:
        """Drop queued events and forget key edges and history."""
        if pygame.display.get_init():
            pygame.event.clear()
        self.input.reset(self._key_poller())

    def destroy(self) -> None:
        """Close the window and release everything the game holds."""
        if (
            self.window is not None
            and pygame.display.get_init()
            and self.window is pygame.display.get_surface()
        ):
            pygame.display.quit()
        self.window = None
        self.destroy_scene(True)
        self.entities = EntityRegistry()
        self._scenes.clear()