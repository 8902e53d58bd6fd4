"""Registry of loaded assets, keyed by file path."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping

import pygame

from distract.hashmap import DuplicateKeyError, HashMap, djb2_hash

_INITIAL_CAPACITY = 50
_SOUND_BUFFER_SUFFIX = "sb"
_DEFAULT_FONT_SIZE = 12


class ResourceType(enum.Enum):
    TEXTURE = enum.auto()
    MUSIC = enum.auto()
    SOUND_BUFFER = enum.auto()
    SOUND = enum.auto()
    FONT = enum.auto()
    VERTEX = enum.auto()


@dataclass
class Resource:
    """An asset registered under its path."""

    type: ResourceType
    path: str
    asset: Any = None


class ResourceError(Exception):
    """Raised when a resource cannot be registered or loaded."""


class _Music:
    """Streamed music played through the pygame music channel."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._volume = 1.0

    def play(self, loops: int = 0) -> None:
        pygame.mixer.music.load(self.path)
        pygame.mixer.music.set_volume(self._volume)
        pygame.mixer.music.play(loops)

    def set_volume(self, volume: float) -> None:
        self._volume = volume
        pygame.mixer.music.set_volume(volume)

    def pause(self) -> None:
        pygame.mixer.music.pause()

    def stop(self) -> None:
        pygame.mixer.music.stop()


class _Sound:
    """A playable sound bound to a loaded sound buffer."""

    def __init__(self, buffer: Any) -> None:
        self.buffer = buffer
        self._channel: Any = None

    def play(self, loops: int = 0) -> None:
        self._channel = self.buffer.play(loops)

    def set_volume(self, volume: float) -> None:
        self.buffer.set_volume(volume)

    def pause(self) -> None:
        if self._channel is not None:
            self._channel.pause()

    def stop(self) -> None:
        stop = getattr(self.buffer, "stop", None)
        if callable(stop):
            stop()
        self._channel = None


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init()


def _load_texture(path: str, rect: Any = None) -> pygame.Surface:
    surface = pygame.image.load(path)
    if rect is not None:
        surface = surface.subsurface(pygame.Rect(rect)).copy()
    return surface


def _load_font(path: str) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, _DEFAULT_FONT_SIZE)


def _load_sound_buffer(path: str) -> pygame.mixer.Sound:
    _ensure_mixer()
    return pygame.mixer.Sound(path)


def _load_sound(buffer: Any) -> _Sound:
    if buffer is None:
        raise ResourceError("cannot create a sound without a buffer")
    return _Sound(buffer)


def _load_music(path: str) -> _Music:
    _ensure_mixer()
    return _Music(path)


_DEFAULT_LOADERS: dict[ResourceType, Callable[..., Any]] = {
    ResourceType.TEXTURE: _load_texture,
    ResourceType.FONT: _load_font,
    ResourceType.SOUND_BUFFER: _load_sound_buffer,
    ResourceType.SOUND: _load_sound,
    ResourceType.MUSIC: _load_music,
}


def _release(asset: Any) -> None:
    stop = getattr(asset, "stop", None)
    if callable(stop):
        stop()


class ResourceManager:
    """Loads each asset once and hands back the same instance afterwards.

    ``loaders`` overrides how each resource type is loaded: textures take
    ``(path, rect)``, sounds take the loaded sound buffer, the other types
    take the path.
    """

    def __init__(
        self, loaders: Mapping[ResourceType, Callable[..., Any]] | None = None
    ) -> None:
        self._loaders = dict(_DEFAULT_LOADERS)
        if loaders:
            self._loaders.update(loaders)
        self._resources = HashMap(_INITIAL_CAPACITY, djb2_hash)

    def get(self, path: str) -> Resource | None:
        """The resource registered under ``path``, or None."""
        return self._resources.get(os.fspath(path))

    def create(
        self, path: str | None, type_: ResourceType, asset: Any = None
    ) -> Resource:
        """Register a new resource; the path must not be registered yet."""
        if path is None:
            raise ResourceError("cannot register a resource without a path")
        resource = Resource(type_, os.fspath(path), asset)
        try:
            self._resources.set(resource.path, resource)
        except DuplicateKeyError as error:
            raise ResourceError(
                f"resource {resource.path!r} is already registered"
            ) from error
        return resource

    def _load(self, path: str, type_: ResourceType, *args: Any) -> Any:
        existing = self.get(path)
        if existing is not None:
            return existing.asset
        resource = self.create(path, type_)
        try:
            resource.asset = self._loaders[type_](*args)
        except Exception as error:
            self._resources.unset(resource.path)
            raise ResourceError(f"failed to load {resource.path!r}") from error
        return resource.asset

    def texture(self, path: str, rect: Any = None) -> Any:
        """The texture at ``path``, cut to ``rect`` when first loaded."""
        return self._load(path, ResourceType.TEXTURE, os.fspath(path), rect)

    def font(self, path: str) -> Any:
        """The font at ``path``."""
        return self._load(path, ResourceType.FONT, os.fspath(path))

    def sound(self, path: str) -> Any:
        """The sound at ``path``, registering its buffer alongside it."""
        path = os.fspath(path)
        existing = self.get(path)
        if existing is not None:
            return existing.asset
        buffer = self._load(
            path + _SOUND_BUFFER_SUFFIX, ResourceType.SOUND_BUFFER, path
        )
        return self._load(path, ResourceType.SOUND, buffer)

    def music(self, path: str) -> Any:
        """The music at ``path``."""
        return self._load(path, ResourceType.MUSIC, os.fspath(path))

    def destroy(self, path: str) -> None:
        """Unregister the resource at ``path`` and release its asset."""
        resource = self.get(path)
        if resource is None:
            return
        self._resources.unset(resource.path)
        if resource.asset is not None:
            _release(resource.asset)

    def clear(self) -> None:
        """Destroy every resource."""
        for resource in list(self):
            if resource.asset is not None:
                _release(resource.asset)
        self._resources = HashMap(self._resources.capacity // 2, djb2_hash)

    def __iter__(self) -> Iterator[Resource]:
        for _, resource in self._resources.items():
            yield resource

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, path: object) -> bool:
        return path in self._resources