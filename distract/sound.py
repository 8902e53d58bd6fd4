"""Volume settings per sound category and playback helpers."""

from __future__ import annotations

from typing import Any

from distract.resources import ResourceManager

SOUND_TYPE_COUNT = 32
DEFAULT_VOLUME = 100.0
NO_SOUND_TYPE = -1
LOOP_FOREVER = -1


class SoundEmitter:
    """Holds a volume percentage for each of the sound categories."""

    def __init__(self) -> None:
        self.volumes = [DEFAULT_VOLUME] * SOUND_TYPE_COUNT

    @staticmethod
    def _check(sound_type: int) -> None:
        if not 0 <= sound_type < SOUND_TYPE_COUNT:
            raise IndexError(f"sound type {sound_type} is out of range")

    def get_volume(self, sound_type: int) -> float:
        """Volume percentage of a category."""
        self._check(sound_type)
        return self.volumes[sound_type]

    def set_volume(self, sound_type: int, percentage: float) -> None:
        """Set the volume percentage of a category."""
        self._check(sound_type)
        self.volumes[sound_type] = percentage

    def volume_for(self, sound_type: int) -> float:
        """Volume to play with; a sound type of -1 means full volume."""
        if sound_type == NO_SOUND_TYPE:
            return DEFAULT_VOLUME
        return self.get_volume(sound_type)

    def play_sound(
        self, resources: ResourceManager, sound_type: int, path: str
    ) -> Any:
        """Play the sound at ``path`` once, at the category's volume."""
        volume = self.volume_for(sound_type)
        sound = resources.sound(path)
        sound.set_volume(volume / 100)
        sound.play()
        return sound

    def play_music(
        self, resources: ResourceManager, sound_type: int, path: str
    ) -> Any:
        """Play the music at ``path`` in a loop, at the category's volume."""
        volume = self.volume_for(sound_type)
        music = resources.music(path)
        music.set_volume(volume / 100)
        music.play(loops=LOOP_FOREVER)
        return music